"""Delete item use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_item_ref
from trip.domain.service import ItemService
from trip.domain.value import ItemType


class DeleteItemRequest(BaseModel):
    """Delete item request."""

    item_type: ItemType
    item_id: str


class DeleteItemResponse(BaseModel):
    """Delete item response."""

    success: bool = True


class DeleteItemUseCase:
    """Use case for removing a trip item with its votes and comments."""

    def __init__(self, item_service: ItemService) -> None:
        self.item_service = item_service

    async def execute(self, request: DeleteItemRequest) -> DeleteItemResponse:
        """Execute delete item flow.

        Raises:
            NotFoundError: If the item does not exist
        """
        ref = parse_item_ref(request.item_type, request.item_id)
        await self.item_service.delete_item(ref)
        return DeleteItemResponse()
