"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from trip.domain.model.comment import Comment
from trip.domain.repository.comment import CommentRepository
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _oldest_first(self, comments: list[Comment]) -> list[Comment]:
        return sorted(comments, key=lambda c: c.created_at)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_item(self, ref: ItemRef) -> list[Comment]:
        """Find all comments on an item, oldest first."""
        return self._oldest_first(
            [c for c in self._comments.values() if c.ref == ref]
        )

    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> list[Comment]:
        """Find comments on many items of one type, oldest first."""
        wanted = set(item_ids)
        return self._oldest_first(
            [
                c
                for c in self._comments.values()
                if c.item_type == item_type and c.item_id in wanted
            ]
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"content": content})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every comment on an item."""
        doomed = [cid for cid, c in self._comments.items() if c.ref == ref]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
