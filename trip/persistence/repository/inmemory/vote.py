"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from trip.domain.model.vote import Vote
from trip.domain.repository.vote import VoteRepository
from trip.domain.value import ItemId, ItemRef, ItemType, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_user_and_item(
        self, username: str, ref: ItemRef
    ) -> Optional[Vote]:
        """Find a vote by user and item."""
        for vote in self._votes:
            if vote.username == username and vote.ref == ref:
                return vote
        return None

    async def find_by_item(self, ref: ItemRef) -> list[Vote]:
        """Find all votes on an item."""
        return [v for v in self._votes if v.ref == ref]

    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> list[Vote]:
        """Find votes on many items of one type."""
        wanted = set(item_ids)
        return [
            v for v in self._votes if v.item_type == item_type and v.item_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        existing = await self.find_by_user_and_item(vote.username, vote.ref)
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Switch a vote's direction."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.model_copy(update={"vote_type": vote_type})
                self._votes[i] = updated
                return updated
        return None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.id != vote_id]
        return len(self._votes) < before

    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every vote on an item."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.ref != ref]
        return before - len(self._votes)
