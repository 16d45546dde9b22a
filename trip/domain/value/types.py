"""Domain value objects for the trip planner."""

from enum import Enum

from trip.domain.value.common import ValueObject
from trip.domain.value.identifiers import ItemId


class ItemType(str, Enum):
    """Kind of trip option. Discriminates the TripItem union."""

    FLIGHT = "flight"
    HOTEL = "hotel"
    ACTIVITY = "activity"
    RESTAURANT = "restaurant"

    @property
    def collection(self) -> str:
        """Plural collection name, as used in API paths and cache keys."""
        return _COLLECTIONS[self]

    @classmethod
    def from_collection(cls, collection: str) -> "ItemType":
        """Look up the item type for a collection name."""
        for item_type, name in _COLLECTIONS.items():
            if name == collection:
                return item_type
        raise ValueError(f"Unknown collection: {collection}")


_COLLECTIONS = {
    ItemType.FLIGHT: "flights",
    ItemType.HOTEL: "hotels",
    ItemType.ACTIVITY: "activities",
    ItemType.RESTAURANT: "restaurants",
}


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteAction(str, Enum):
    """Outcome of a vote toggle."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


class ItemRef(ValueObject):
    """Typed reference to a trip item.

    Votes and comments point at their item through this instead of a loose
    (type, id) string pair.
    """

    item_type: ItemType
    item_id: ItemId
