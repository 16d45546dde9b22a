"""Vote domain service."""

from collections import defaultdict
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from trip.domain.error import NotFoundError
from trip.domain.model.vote import Vote
from trip.domain.repository import VoteRepository
from trip.domain.value import ItemId, ItemRef, ItemType, VoteAction, VoteId, VoteType
from trip.domain.voting import resolve_toggle

from .base import Service
from .item_service import ItemService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, vote_repository: VoteRepository, item_service: ItemService
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            item_service: Item domain service
        """
        self.vote_repository = vote_repository
        self.item_service = item_service

    async def toggle_vote(
        self, username: str, ref: ItemRef, vote_type: VoteType
    ) -> VoteAction:
        """Create, switch or remove the user's vote on an item.

        Args:
            username: Acting user
            ref: Item being voted on
            vote_type: Direction requested

        Returns:
            What happened to the user's vote

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "vote_service.toggle_vote",
            username=username,
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
            vote_type=vote_type.value,
        ):
            await self.item_service.require_item(ref)

            existing = await self.vote_repository.find_by_user_and_item(username, ref)
            action = resolve_toggle(
                existing.vote_type if existing else None, vote_type
            )

            if action == VoteAction.CREATED:
                vote = Vote(
                    id=VoteId(uuid4()),
                    username=username,
                    vote_type=vote_type,
                    item_type=ref.item_type,
                    item_id=ref.item_id,
                    created_at=datetime.now(),
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    # A concurrent request created the vote first
                    logfire.warn(
                        "Duplicate vote attempt",
                        username=username,
                        item_id=str(ref.item_id),
                    )
                    raise ValueError("Vote already recorded for this item")
            elif action == VoteAction.REMOVED:
                await self.vote_repository.delete(existing.id)  # type: ignore[union-attr]
            else:
                updated = await self.vote_repository.update_vote_type(
                    existing.id, vote_type  # type: ignore[union-attr]
                )
                if updated is None:
                    raise NotFoundError("vote", str(existing.id))  # type: ignore[union-attr]

            logfire.info(
                "Vote toggled",
                username=username,
                item_type=ref.item_type.value,
                item_id=str(ref.item_id),
                action=action.value,
            )
            return action

    async def get_votes_for_item(self, ref: ItemRef) -> list[Vote]:
        """Get all votes on one item."""
        return await self.vote_repository.find_by_item(ref)

    async def get_votes_for_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> dict[ItemId, list[Vote]]:
        """Group votes on many items by item ID.

        Args:
            item_type: Type shared by the items
            item_ids: IDs to look up

        Returns:
            Mapping of item ID to its votes (items without votes are absent)
        """
        if not item_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_items(item_type, item_ids)

        grouped: dict[ItemId, list[Vote]] = defaultdict(list)
        for vote in votes:
            grouped[vote.item_id].append(vote)
        return dict(grouped)
