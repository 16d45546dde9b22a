"""Cached entity models.

These mirror the wire format of the API. Item-specific fields are kept in a
snake_case ``fields`` mapping so one model covers all four item types.
"""

from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from trip.client.ids import EntityId
from trip.domain.model.item import ITEM_MODELS
from trip.domain.value import ItemType, VoteType
from trip.domain.voting import score


class CachedModel(BaseModel):
    """Immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CachedVote(CachedModel):
    """A vote as seen by the client."""

    id: EntityId
    username: str
    vote_type: VoteType
    item_type: ItemType
    item_id: EntityId
    created_at: Optional[datetime] = None


class CachedComment(CachedModel):
    """A comment as seen by the client."""

    id: EntityId
    username: str
    content: str
    item_type: ItemType
    item_id: EntityId
    created_at: datetime


# Wire keys that are not item fields
_ENVELOPE_KEYS = {"id", "itemType", "item_type", "votes", "comments"}


def _field_names(item_type: ItemType) -> dict[str, str]:
    """Map camelCase wire keys to snake_case field names for an item type."""
    model = ITEM_MODELS[item_type]
    names: dict[str, str] = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def fields_from_wire(item_type: ItemType, data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert a wire item body to snake_case fields, dropping the envelope."""
    names = _field_names(item_type)
    return {
        names.get(key, key): value
        for key, value in data.items()
        if key not in _ENVELOPE_KEYS
    }


def fields_to_wire(item_type: ItemType, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Convert snake_case fields to the camelCase keys the API expects."""
    model = ITEM_MODELS[item_type]
    wire: dict[str, Any] = {}
    for name, value in fields.items():
        info = model.model_fields.get(name)
        wire[info.alias if info and info.alias else name] = value
    return wire


class CachedItem(CachedModel):
    """A trip item with its votes and comments."""

    id: EntityId
    item_type: ItemType
    fields: dict[str, Any] = {}
    votes: tuple[CachedVote, ...] = ()
    comments: tuple[CachedComment, ...] = ()

    @classmethod
    def from_wire(cls, item_type: ItemType, data: Mapping[str, Any]) -> "CachedItem":
        """Build from an API response body."""
        return cls(
            id=data["id"],
            item_type=item_type,
            fields=fields_from_wire(item_type, data),
            votes=tuple(CachedVote.model_validate(v) for v in data.get("votes", [])),
            comments=tuple(
                CachedComment.model_validate(c) for c in data.get("comments", [])
            ),
        )

    @property
    def score(self) -> int:
        """Net votes."""
        return score(self.votes)

    def get(self, field: str, default: Any = None) -> Any:
        """Read an item field by snake_case name."""
        return self.fields.get(field, default)
