"""Comment domain service."""

from collections import defaultdict
from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from trip.domain.error import ValidationError
from trip.domain.model.comment import Comment
from trip.domain.repository import CommentRepository
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType

from .base import Service

MAX_COMMENT_LENGTH = 5000


def _check_content(content: str) -> None:
    if not content.strip():
        raise ValidationError("Comment content must not be empty")
    if len(content) > MAX_COMMENT_LENGTH:
        raise ValidationError(
            f"Comment content must be at most {MAX_COMMENT_LENGTH} characters"
        )


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, username: str, content: str, ref: ItemRef
    ) -> Comment:
        """Create a comment on an item.

        The caller is responsible for checking the item exists.

        Args:
            username: Author name
            content: Comment text
            ref: Item being commented on

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            username=username,
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
        ):
            _check_content(content)
            comment = Comment(
                id=CommentId(uuid4()),
                username=username,
                content=content,
                item_type=ref.item_type,
                item_id=ref.item_id,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                item_id=str(ref.item_id),
                username=username,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_item(self, ref: ItemRef) -> list[Comment]:
        """Get all comments on one item, oldest first."""
        with logfire.span(
            "comment_service.get_comments_for_item",
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
        ):
            comments = await self.comment_repository.find_by_item(ref)
            logfire.info(
                "Comments retrieved for item",
                item_id=str(ref.item_id),
                count=len(comments),
            )
            return comments

    async def get_comments_for_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> dict[ItemId, list[Comment]]:
        """Group comments on many items by item ID, oldest first within each."""
        if not item_ids:
            return {}

        comments = await self.comment_repository.find_by_items(item_type, item_ids)

        grouped: dict[ItemId, list[Comment]] = defaultdict(list)
        for comment in comments:
            grouped[comment.item_id].append(comment)
        return dict(grouped)

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Replace the content of a comment.

        Returns:
            Updated comment, or None if it no longer exists
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            _check_content(content)
            updated = await self.comment_repository.update_content(
                comment_id, content
            )
            if updated:
                logfire.info("Comment content updated", comment_id=str(comment_id))
            else:
                logfire.warn(
                    "Comment not found for content update", comment_id=str(comment_id)
                )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if the comment existed
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted" if deleted else "No comment to delete",
                comment_id=str(comment_id),
            )
            return deleted
