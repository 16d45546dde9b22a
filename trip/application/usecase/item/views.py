"""Item views: trip items with their votes and comments attached."""

from typing import Annotated, Union

from pydantic import Field

from trip.domain.model import Comment, Vote
from trip.domain.model.item import Activity, Flight, Hotel, Restaurant, TripItemBase
from trip.domain.value import ItemType


class FlightView(Flight):
    """Flight with votes and comments."""

    votes: list[Vote] = []
    comments: list[Comment] = []


class HotelView(Hotel):
    """Hotel with votes and comments."""

    votes: list[Vote] = []
    comments: list[Comment] = []


class ActivityView(Activity):
    """Activity with votes and comments."""

    votes: list[Vote] = []
    comments: list[Comment] = []


class RestaurantView(Restaurant):
    """Restaurant with votes and comments."""

    votes: list[Vote] = []
    comments: list[Comment] = []


ItemView = Annotated[
    Union[FlightView, HotelView, ActivityView, RestaurantView],
    Field(discriminator="item_type"),
]

VIEW_MODELS: dict[ItemType, type[TripItemBase]] = {
    ItemType.FLIGHT: FlightView,
    ItemType.HOTEL: HotelView,
    ItemType.ACTIVITY: ActivityView,
    ItemType.RESTAURANT: RestaurantView,
}


def to_view(
    item: TripItemBase,
    votes: list[Vote] | None = None,
    comments: list[Comment] | None = None,
) -> TripItemBase:
    """Attach votes and comments to an item."""
    model = VIEW_MODELS[item.ref.item_type]
    return model(**item.model_dump(), votes=votes or [], comments=comments or [])
