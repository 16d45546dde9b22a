"""Domain model entities for the trip planner."""

from trip.domain.model.comment import Comment
from trip.domain.model.item import (
    ITEM_MODELS,
    Activity,
    Flight,
    Hotel,
    Restaurant,
    TripItem,
    TripItemBase,
)
from trip.domain.model.presence import OnlineUser
from trip.domain.model.user import User
from trip.domain.model.vote import Vote

__all__ = [
    "ITEM_MODELS",
    "Activity",
    "Comment",
    "Flight",
    "Hotel",
    "OnlineUser",
    "Restaurant",
    "TripItem",
    "TripItemBase",
    "User",
    "Vote",
]
