"""Update comment use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_comment_id
from trip.domain.error import NotAuthorizedError, NotFoundError
from trip.domain.model import Comment
from trip.domain.service import CommentService


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    username: str  # Acting user (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: Comment


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If the new content is empty or too long
        """
        comment_id = parse_comment_id(request.comment_id)

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", request.comment_id)

        # 2. Check authorization (user owns comment)
        if comment.username != request.username:
            raise NotAuthorizedError("comment", request.comment_id, request.username)

        # 3. Update via service
        updated = await self.comment_service.update_content(
            comment_id, request.content
        )
        if updated is None:
            raise NotFoundError("comment", request.comment_id)

        return UpdateCommentResponse(comment=updated)
