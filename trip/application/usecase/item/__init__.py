"""Item use cases."""

from .create_item import CreateItemRequest, CreateItemResponse, CreateItemUseCase
from .delete_item import DeleteItemRequest, DeleteItemResponse, DeleteItemUseCase
from .list_items import ListItemsRequest, ListItemsResponse, ListItemsUseCase
from .update_item import UpdateItemRequest, UpdateItemResponse, UpdateItemUseCase
from .views import ItemView

__all__ = [
    "CreateItemRequest",
    "CreateItemResponse",
    "CreateItemUseCase",
    "DeleteItemRequest",
    "DeleteItemResponse",
    "DeleteItemUseCase",
    "ItemView",
    "ListItemsRequest",
    "ListItemsResponse",
    "ListItemsUseCase",
    "UpdateItemRequest",
    "UpdateItemResponse",
    "UpdateItemUseCase",
]
