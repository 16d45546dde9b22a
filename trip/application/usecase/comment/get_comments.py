"""Get comments use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_item_ref
from trip.domain.error import NotFoundError
from trip.domain.model import Comment
from trip.domain.service import CommentService
from trip.domain.value import ItemType


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    item_type: ItemType
    item_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[Comment]


class GetCommentsUseCase:
    """Use case for reading the comment thread of one item."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns:
            Comments oldest first (empty for an unknown item)
        """
        try:
            ref = parse_item_ref(request.item_type, request.item_id)
        except NotFoundError:
            return GetCommentsResponse(comments=[])

        comments = await self.comment_service.get_comments_for_item(ref)
        return GetCommentsResponse(comments=comments)
