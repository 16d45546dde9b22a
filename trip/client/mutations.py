"""Optimistic mutation controller.

Every write follows the same three phases:

1. begin: cancel the collection's refetch and install the optimistic
   effect, which fixes its outcome against the current value
2. success: drop the pending effect (folding it into the confirmed value)
   and refetch
3. failure: drop the pending effect, rebuild the collection from the
   confirmed value and the remaining pending effects, re-raise
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Mapping, Optional, TypeVar

from trip.client import optimistic
from trip.client.api import TripApiClient
from trip.client.cache import QueryCache
from trip.client.error import AuthenticationRequired
from trip.client.ids import EntityId, is_local
from trip.client.models import CachedComment, CachedItem
from trip.domain.value import ItemType, VoteAction, VoteType

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MutationController:
    """Runs writes against the API with optimistic cache updates."""

    def __init__(self, api: TripApiClient, cache: QueryCache) -> None:
        self.api = api
        self.cache = cache

    def _username(self, username: Optional[str]) -> str:
        if username is not None:
            return username
        if self.api.current_user is None:
            raise AuthenticationRequired(401, "Login required")
        return self.api.current_user.name

    async def run(
        self,
        item_type: ItemType,
        effect: optimistic.Effect,
        request: Callable[[], Awaitable[T]],
    ) -> T:
        """Apply ``effect`` optimistically while ``request`` runs.

        Args:
            item_type: Collection the mutation touches
            effect: Optimistic change to the collection
            request: Sends the mutation to the server

        Returns:
            Whatever ``request`` returns

        Raises:
            ClientError: Re-raised from ``request`` after rolling back
        """
        await self.cache.cancel_refetch(item_type)
        token = self.cache.begin(item_type, effect)

        try:
            result = await request()
        except (Exception, asyncio.CancelledError) as e:
            self.cache.rollback(token)
            logger.info(
                f"Mutation on {item_type.collection} rolled back: "
                f"{type(e).__name__}: {e}"
            )
            raise

        self.cache.commit(token)
        self.cache.invalidate(item_type)
        return result

    # Votes

    async def toggle_vote(
        self,
        item_type: ItemType,
        item_id: EntityId,
        vote_type: VoteType,
        username: Optional[str] = None,
    ) -> VoteAction:
        """Vote on an item; the same vote twice removes it."""
        name = self._username(username)
        return await self.run(
            item_type,
            optimistic.vote_toggle(item_id, name, vote_type),
            lambda: self.api.toggle_vote(name, vote_type, item_type, item_id),
        )

    # Comments

    async def add_comment(
        self,
        item_type: ItemType,
        item_id: EntityId,
        content: str,
        username: Optional[str] = None,
    ) -> CachedComment:
        """Comment on an item."""
        name = self._username(username)
        return await self.run(
            item_type,
            optimistic.comment_add(item_type, item_id, name, content),
            lambda: self.api.add_comment(name, content, item_type, item_id),
        )

    async def edit_comment(
        self,
        item_type: ItemType,
        comment_id: EntityId,
        content: str,
        username: Optional[str] = None,
    ) -> CachedComment:
        """Edit a comment. The server rejects edits by anyone but the author."""
        name = self._username(username)
        return await self.run(
            item_type,
            optimistic.comment_edit(comment_id, content),
            lambda: self.api.edit_comment(comment_id, name, content),
        )

    async def delete_comment(
        self,
        item_type: ItemType,
        comment_id: EntityId,
        username: Optional[str] = None,
    ) -> None:
        """Delete a comment. The server rejects deletes by anyone but the author."""
        name = self._username(username)
        await self.run(
            item_type,
            optimistic.comment_delete(comment_id),
            lambda: self.api.delete_comment(comment_id, name),
        )

    # Items

    async def add_item(
        self, item_type: ItemType, fields: Mapping[str, Any]
    ) -> CachedItem:
        """Create an item; it shows up under a placeholder ID until refetched."""
        return await self.run(
            item_type,
            optimistic.item_add(item_type, fields),
            lambda: self.api.create_item(item_type, fields),
        )

    async def update_item(
        self, item_type: ItemType, item_id: EntityId, fields: Mapping[str, Any]
    ) -> CachedItem:
        """Replace some fields of an item."""
        if is_local(item_id):
            raise ValueError("Item has not been saved yet")
        return await self.run(
            item_type,
            optimistic.item_update(item_id, fields),
            lambda: self.api.update_item(item_type, item_id, fields),
        )

    async def delete_item(self, item_type: ItemType, item_id: EntityId) -> None:
        """Delete an item with its votes and comments."""
        if is_local(item_id):
            raise ValueError("Item has not been saved yet")
        await self.run(
            item_type,
            optimistic.item_delete(item_id),
            lambda: self.api.delete_item(item_type, item_id),
        )
