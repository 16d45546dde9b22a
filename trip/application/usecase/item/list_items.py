"""List items use case."""

import logfire
from pydantic import BaseModel

from trip.domain.service import CommentService, ItemService, VoteService
from trip.domain.value import ItemType

from .views import ItemView, to_view


class ListItemsRequest(BaseModel):
    """List items request."""

    item_type: ItemType


class ListItemsResponse(BaseModel):
    """List items response."""

    items: list[ItemView]


class ListItemsUseCase:
    """Use case for listing one collection with votes and comments attached."""

    def __init__(
        self,
        item_service: ItemService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> None:
        """Initialize list items use case.

        Args:
            item_service: Item domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
        """
        self.item_service = item_service
        self.vote_service = vote_service
        self.comment_service = comment_service

    async def execute(self, request: ListItemsRequest) -> ListItemsResponse:
        """Execute list items flow.

        Args:
            request: Which collection to list

        Returns:
            Items in repository order, each with its votes and comments
        """
        with logfire.span("list_items", item_type=request.item_type.value):
            items = await self.item_service.list_items(request.item_type)
            item_ids = [item.id for item in items]

            # Batch fetch children for all items at once
            votes = await self.vote_service.get_votes_for_items(
                request.item_type, item_ids
            )
            comments = await self.comment_service.get_comments_for_items(
                request.item_type, item_ids
            )

            return ListItemsResponse(
                items=[
                    to_view(item, votes.get(item.id), comments.get(item.id))
                    for item in items
                ]
            )
