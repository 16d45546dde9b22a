"""Shared helpers for use cases."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from trip.domain.error import NotFoundError
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_item_ref(item_type: ItemType, item_id: str) -> ItemRef:
    """Build an ItemRef from a wire ID.

    Raises:
        NotFoundError: If the ID is not a valid UUID, since no item can have it
    """
    try:
        return ItemRef(item_type=item_type, item_id=ItemId(UUID(item_id)))
    except ValueError:
        raise NotFoundError(item_type.value, item_id)


def parse_comment_id(comment_id: str) -> CommentId:
    """Parse a wire comment ID, raising NotFoundError when malformed."""
    try:
        return CommentId(UUID(comment_id))
    except ValueError:
        raise NotFoundError("comment", comment_id)
