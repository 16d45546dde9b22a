"""Trip item domain service."""

from datetime import datetime
from typing import Any, Mapping
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from trip.domain.error import NotFoundError, ValidationError
from trip.domain.model.item import ITEM_MODELS, TripItemBase
from trip.domain.repository import CommentRepository, ItemRepository, VoteRepository
from trip.domain.value import ItemId, ItemRef, ItemType

from .base import Service


def _describe(error: PydanticValidationError) -> str:
    """Turn a pydantic error into a short message naming the bad fields."""
    missing = [
        str(err["loc"][-1]) for err in error.errors() if err["type"] == "missing"
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    first = error.errors()[0]
    return f"Invalid value for {first['loc'][-1]}: {first['msg']}"


def _editable_values(
    model: type[TripItemBase], fields: Mapping[str, Any]
) -> dict[str, Any]:
    """Keep the editable fields, accepting snake_case or camelCase keys."""
    by_alias = {
        info.alias: name
        for name, info in model.model_fields.items()
        if name in model.editable_fields and info.alias
    }
    values: dict[str, Any] = {}
    for key, value in fields.items():
        name = key if key in model.editable_fields else by_alias.get(key)
        if name is not None:
            values[name] = value
    return values


class ItemService(Service):
    """Domain service for trip item CRUD."""

    def __init__(
        self,
        item_repository: ItemRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize item service.

        Args:
            item_repository: Item repository
            vote_repository: Vote repository (cleared when an item is deleted)
            comment_repository: Comment repository (cleared when an item is deleted)
        """
        self.item_repository = item_repository
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def list_items(self, item_type: ItemType) -> list[TripItemBase]:
        """List every item of one type."""
        with logfire.span("item_service.list_items", item_type=item_type.value):
            items = await self.item_repository.find_all(item_type)
            logfire.info("Items listed", item_type=item_type.value, count=len(items))
            return items

    async def get_item(self, ref: ItemRef) -> TripItemBase | None:
        """Get an item by reference.

        Args:
            ref: Item reference

        Returns:
            Item if found, None otherwise
        """
        with logfire.span(
            "item_service.get_item",
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
        ):
            item = await self.item_repository.find_by_ref(ref)
            if item is None:
                logfire.warn(
                    "Item not found",
                    item_type=ref.item_type.value,
                    item_id=str(ref.item_id),
                )
            return item

    async def require_item(self, ref: ItemRef) -> TripItemBase:
        """Get an item, raising NotFoundError when it does not exist."""
        item = await self.get_item(ref)
        if item is None:
            raise NotFoundError(ref.item_type.value, str(ref.item_id))
        return item

    async def create_item(
        self, item_type: ItemType, fields: Mapping[str, Any]
    ) -> TripItemBase:
        """Create a new item from client-supplied fields.

        Unknown fields are ignored. Keys may be snake_case or camelCase.

        Args:
            item_type: Variant to create
            fields: Field values keyed by snake_case name

        Returns:
            The saved item

        Raises:
            ValidationError: If a required field is missing or a value is invalid
        """
        model = ITEM_MODELS[item_type]
        values = _editable_values(model, fields)

        with logfire.span("item_service.create_item", item_type=item_type.value):
            now = datetime.now()
            try:
                item = model(id=ItemId(uuid4()), created_at=now, updated_at=now, **values)
            except PydanticValidationError as e:
                logfire.warn(
                    "Item creation rejected", item_type=item_type.value, error=str(e)
                )
                raise ValidationError(_describe(e)) from e

            saved = await self.item_repository.save(item)
            logfire.info(
                "Item created", item_type=item_type.value, item_id=str(saved.id)
            )
            return saved

    async def update_item(
        self, ref: ItemRef, fields: Mapping[str, Any]
    ) -> TripItemBase:
        """Replace the given fields of an existing item.

        Fields not present in ``fields`` keep their stored value.

        Raises:
            NotFoundError: If the item does not exist
            ValidationError: If a new value is invalid
        """
        with logfire.span(
            "item_service.update_item",
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
        ):
            existing = await self.require_item(ref)
            model = type(existing)
            values = _editable_values(model, fields)

            try:
                updated = model.model_validate(
                    {**existing.model_dump(), **values, "updated_at": datetime.now()}
                )
            except PydanticValidationError as e:
                logfire.warn(
                    "Item update rejected", item_id=str(ref.item_id), error=str(e)
                )
                raise ValidationError(_describe(e)) from e

            saved = await self.item_repository.save(updated)
            logfire.info(
                "Item updated",
                item_type=ref.item_type.value,
                item_id=str(ref.item_id),
                fields=sorted(values),
            )
            return saved

    async def delete_item(self, ref: ItemRef) -> None:
        """Delete an item together with its votes and comments.

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "item_service.delete_item",
            item_type=ref.item_type.value,
            item_id=str(ref.item_id),
        ):
            await self.require_item(ref)
            votes = await self.vote_repository.delete_by_item(ref)
            comments = await self.comment_repository.delete_by_item(ref)
            await self.item_repository.delete(ref)
            logfire.info(
                "Item deleted",
                item_type=ref.item_type.value,
                item_id=str(ref.item_id),
                votes_removed=votes,
                comments_removed=comments,
            )
