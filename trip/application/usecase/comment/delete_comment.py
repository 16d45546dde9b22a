"""Delete comment use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_comment_id
from trip.domain.error import NotAuthorizedError, NotFoundError
from trip.domain.service import CommentService


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    username: str  # Acting user (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool = True


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
        """
        comment_id = parse_comment_id(request.comment_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("comment", request.comment_id)

        if comment.username != request.username:
            raise NotAuthorizedError("comment", request.comment_id, request.username)

        await self.comment_service.delete_comment(comment_id)
        return DeleteCommentResponse()
