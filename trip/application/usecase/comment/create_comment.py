"""Create comment use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_item_ref
from trip.domain.model import Comment
from trip.domain.service import CommentService, ItemService
from trip.domain.value import ItemType


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    username: str
    content: str
    item_type: ItemType
    item_id: str  # UUID string


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: Comment


class CreateCommentUseCase:
    """Use case for commenting on an item."""

    def __init__(
        self, comment_service: CommentService, item_service: ItemService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            item_service: Item domain service
        """
        self.comment_service = comment_service
        self.item_service = item_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If the content is empty or too long
        """
        ref = parse_item_ref(request.item_type, request.item_id)

        # 1. Verify item exists
        await self.item_service.require_item(ref)

        # 2. Create comment
        comment = await self.comment_service.create_comment(
            username=request.username, content=request.content, ref=ref
        )
        return CreateCommentResponse(comment=comment)
