"""Update item use case."""

from typing import Any

from pydantic import BaseModel

from trip.application.usecase.base import parse_item_ref
from trip.domain.service import CommentService, ItemService, VoteService
from trip.domain.value import ItemType

from .views import ItemView, to_view


class UpdateItemRequest(BaseModel):
    """Update item request."""

    item_type: ItemType
    item_id: str
    fields: dict[str, Any]


class UpdateItemResponse(BaseModel):
    """Update item response."""

    item: ItemView


class UpdateItemUseCase:
    """Use case for editing a trip item."""

    def __init__(
        self,
        item_service: ItemService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize update item use case.

        Args:
            item_service: Item domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.item_service = item_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: UpdateItemRequest) -> UpdateItemResponse:
        """Execute update item flow.

        Only the fields present in the request change.

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If a new value is invalid
        """
        ref = parse_item_ref(request.item_type, request.item_id)
        item = await self.item_service.update_item(ref, request.fields)

        votes = await self.vote_service.get_votes_for_item(ref)
        comments = await self.comment_service.get_comments_for_item(ref)
        return UpdateItemResponse(item=to_view(item, votes, comments))
