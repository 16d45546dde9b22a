"""Identifiers of cached entities.

An entity is either persisted (server-assigned ID) or local (a placeholder
created by an optimistic write and replaced on the next refetch).
"""

from typing import Union
from uuid import uuid4

from pydantic import field_validator

from trip.domain.value.common import RootValueObject

LOCAL_PREFIX = "local-"


class PersistedId(RootValueObject[str]):
    """ID assigned by the server."""

    @field_validator("root")
    @classmethod
    def validate_persisted(cls, v: str) -> str:
        """Reject placeholder IDs."""
        if not v or v.startswith(LOCAL_PREFIX):
            raise ValueError(f"Not a server ID: {v!r}")
        return v


class LocalId(RootValueObject[str]):
    """Placeholder ID for an entity the server has not confirmed yet."""

    @field_validator("root")
    @classmethod
    def validate_local(cls, v: str) -> str:
        """Require the placeholder prefix."""
        if not v.startswith(LOCAL_PREFIX):
            raise ValueError(f"Local IDs start with {LOCAL_PREFIX!r}: {v!r}")
        return v


EntityId = Union[PersistedId, LocalId]


def new_local_id() -> LocalId:
    """Create a fresh placeholder ID."""
    return LocalId(f"{LOCAL_PREFIX}{uuid4().hex}")


def parse_entity_id(raw: str) -> EntityId:
    """Classify a raw ID string."""
    if raw.startswith(LOCAL_PREFIX):
        return LocalId(raw)
    return PersistedId(raw)


def is_local(entity_id: EntityId) -> bool:
    """Whether the entity only exists in the local cache."""
    return isinstance(entity_id, LocalId)
