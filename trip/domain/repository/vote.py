"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from trip.domain.model.vote import Vote
from trip.domain.value import ItemId, ItemRef, ItemType, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        pass

    @abstractmethod
    async def find_by_user_and_item(
        self, username: str, ref: ItemRef
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            username: Acting user's name
            ref: Item reference

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_item(self, ref: ItemRef) -> List[Vote]:
        """Find all votes on one item."""
        pass

    @abstractmethod
    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> List[Vote]:
        """Find votes on many items of one type (batch query).

        Args:
            item_type: Type shared by the items
            item_ids: IDs of the items

        Returns:
            Votes on any of the items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Raises:
            IntegrityError: If the user already voted on the item
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Switch a vote's direction.

        Returns:
            The updated vote, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Returns:
            True if a vote was deleted
        """
        pass

    @abstractmethod
    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every vote on an item.

        Returns:
            Number of votes deleted
        """
        pass
