"""Trip item routes.

The four collections share one set of handlers, built per item type by
``build_item_router``.
"""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, HTTPException, status

from trip.application.usecase.item import (
    CreateItemRequest,
    CreateItemUseCase,
    DeleteItemRequest,
    DeleteItemResponse,
    DeleteItemUseCase,
    ItemView,
    ListItemsRequest,
    ListItemsUseCase,
    UpdateItemRequest,
    UpdateItemUseCase,
)
from trip.domain.error import NotFoundError, ValidationError
from trip.domain.value import ItemType


def build_item_router(item_type: ItemType) -> APIRouter:
    """Build the CRUD router for one item collection.

    Args:
        item_type: Collection served by the router

    Returns:
        Router mounted at ``/<collection>``
    """
    collection = item_type.collection
    router = APIRouter(
        prefix=f"/{collection}", tags=[collection], route_class=DishkaRoute
    )

    @router.get("", response_model=list[ItemView], name=f"list_{collection}")
    async def list_items(
        list_items_use_case: FromDishka[ListItemsUseCase],
    ) -> list[Any]:
        """List the collection with nested votes and comments."""
        result = await list_items_use_case.execute(ListItemsRequest(item_type=item_type))
        return result.items

    @router.post("", response_model=ItemView, name=f"create_{item_type.value}")
    async def create_item(
        create_item_use_case: FromDishka[CreateItemUseCase],
        fields: dict[str, Any] = Body(...),
    ) -> Any:
        """Add an item. Unknown fields are ignored."""
        try:
            result = await create_item_use_case.execute(
                CreateItemRequest(item_type=item_type, fields=fields)
            )
            return result.item
        except ValidationError as e:
            logfire.warn(
                "Item creation rejected", item_type=item_type.value, error=str(e)
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    @router.put("", response_model=ItemView, name=f"update_{item_type.value}")
    async def update_item(
        update_item_use_case: FromDishka[UpdateItemUseCase],
        fields: dict[str, Any] = Body(...),
    ) -> Any:
        """Update the fields present in the body of the item named by ``id``."""
        item_id = fields.pop("id", None)
        if not item_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="ID required"
            )

        try:
            result = await update_item_use_case.execute(
                UpdateItemRequest(
                    item_type=item_type, item_id=str(item_id), fields=fields
                )
            )
            return result.item
        except NotFoundError as e:
            logfire.warn("Update of missing item", item_id=str(item_id))
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except ValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    @router.delete(
        "", response_model=DeleteItemResponse, name=f"delete_{item_type.value}"
    )
    async def delete_item(
        delete_item_use_case: FromDishka[DeleteItemUseCase],
        id: str | None = None,
    ) -> DeleteItemResponse:
        """Delete the item named by the ``id`` query parameter."""
        if not id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="ID required"
            )

        try:
            return await delete_item_use_case.execute(
                DeleteItemRequest(item_type=item_type, item_id=id)
            )
        except NotFoundError as e:
            logfire.warn("Delete of missing item", item_id=id)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return router


routers = [build_item_router(item_type) for item_type in ItemType]
