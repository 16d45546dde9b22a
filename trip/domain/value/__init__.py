"""Domain value objects for the trip planner."""

from trip.domain.value.identifiers import (
    CommentId,
    ItemId,
    PresenceId,
    UserId,
    VoteId,
)
from trip.domain.value.types import (
    ItemRef,
    ItemType,
    VoteAction,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "ItemId",
    "VoteId",
    "CommentId",
    "PresenceId",
    # Types
    "ItemType",
    "ItemRef",
    "VoteType",
    "VoteAction",
]
