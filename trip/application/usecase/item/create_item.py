"""Create item use case."""

from typing import Any

from pydantic import BaseModel

from trip.domain.service import ItemService
from trip.domain.value import ItemType

from .views import ItemView, to_view


class CreateItemRequest(BaseModel):
    """Create item request."""

    item_type: ItemType
    fields: dict[str, Any]


class CreateItemResponse(BaseModel):
    """Create item response."""

    item: ItemView


class CreateItemUseCase:
    """Use case for adding a trip item."""

    def __init__(self, item_service: ItemService) -> None:
        """Initialize create item use case.

        Args:
            item_service: Item domain service
        """
        self.item_service = item_service

    async def execute(self, request: CreateItemRequest) -> CreateItemResponse:
        """Execute create item flow.

        Raises:
            ValidationError: If a required field is missing
        """
        item = await self.item_service.create_item(request.item_type, request.fields)
        # A new item has no votes or comments yet
        return CreateItemResponse(item=to_view(item))
