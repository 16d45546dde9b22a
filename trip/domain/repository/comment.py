"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from trip.domain.model.comment import Comment
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are always returned oldest first.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_item(self, ref: ItemRef) -> List[Comment]:
        """Find all comments on one item, oldest first."""
        pass

    @abstractmethod
    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> List[Comment]:
        """Find comments on many items of one type (batch query), oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every comment on an item.

        Returns:
            Number of comments deleted
        """
        pass
