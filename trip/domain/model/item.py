"""Trip item entities.

A trip item is one proposed option the group can vote and comment on. There
are four variants, discriminated by ``item_type``.
"""

from datetime import datetime
from typing import Annotated, ClassVar, Literal, Optional, Union

from pydantic import Field

from trip.domain.model.common import DomainModel
from trip.domain.value import ItemId, ItemRef, ItemType


class TripItemBase(DomainModel):
    """Fields shared by every trip item."""

    # Fields the client may set on create/update; subclasses extend it
    editable_fields: ClassVar[frozenset[str]] = frozenset()

    id: ItemId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ItemRef:
        """Typed reference to this item."""
        return ItemRef(item_type=self.item_type, item_id=self.id)  # type: ignore[attr-defined]


class Flight(TripItemBase):
    """A flight option for one traveler."""

    editable_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "traveler_name",
            "airline",
            "price_3_night",
            "price_4_night",
            "inbound_flight",
            "outbound_flight",
            "notes",
        }
    )

    item_type: Literal[ItemType.FLIGHT] = ItemType.FLIGHT
    traveler_name: str = Field(min_length=1, max_length=200)
    airline: Optional[str] = None
    price_3_night: Optional[float] = None
    price_4_night: Optional[float] = None
    inbound_flight: Optional[str] = None
    outbound_flight: Optional[str] = None
    notes: Optional[str] = None


class Hotel(TripItemBase):
    """A hotel option with per-traveler price breakdowns."""

    editable_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "url",
            "total_price",
            "per_person",
            "includes",
            "neighborhood",
            "notes",
            "price_3_night_tay",
            "price_3_night_scar",
            "price_4_night_tay",
            "price_4_night_scar",
        }
    )

    item_type: Literal[ItemType.HOTEL] = ItemType.HOTEL
    name: str = Field(min_length=1, max_length=300)
    url: Optional[str] = None
    total_price: float = 0
    per_person: float = 0
    includes: Optional[str] = None
    neighborhood: Optional[str] = None
    notes: Optional[str] = None
    price_3_night_tay: Optional[float] = None
    price_3_night_scar: Optional[float] = None
    price_4_night_tay: Optional[float] = None
    price_4_night_scar: Optional[float] = None


class Activity(TripItemBase):
    """Something to do, with free-text price such as "Free" or "$25"."""

    editable_fields: ClassVar[frozenset[str]] = frozenset(
        {"name", "url", "address", "neighborhood", "hours", "days_closed", "price"}
    )

    item_type: Literal[ItemType.ACTIVITY] = ItemType.ACTIVITY
    name: str = Field(min_length=1, max_length=300)
    url: Optional[str] = None
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    hours: Optional[str] = None
    days_closed: Optional[str] = None
    price: Optional[str] = None


class Restaurant(TripItemBase):
    """A place to eat or drink, priced on the "$".."$$$$" scale."""

    editable_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "name",
            "url",
            "address",
            "neighborhood",
            "has_cocktails",
            "cuisine_type",
            "vegan_or_omni",
            "hours",
            "days_closed",
            "price_range",
        }
    )

    item_type: Literal[ItemType.RESTAURANT] = ItemType.RESTAURANT
    name: str = Field(min_length=1, max_length=300)
    url: Optional[str] = None
    address: Optional[str] = None
    neighborhood: Optional[str] = None
    has_cocktails: bool = False
    cuisine_type: Optional[str] = None
    vegan_or_omni: Optional[str] = None
    hours: Optional[str] = None
    days_closed: Optional[str] = None
    price_range: Optional[str] = None


TripItem = Annotated[
    Union[Flight, Hotel, Activity, Restaurant], Field(discriminator="item_type")
]

ITEM_MODELS: dict[ItemType, type[TripItemBase]] = {
    ItemType.FLIGHT: Flight,
    ItemType.HOTEL: Hotel,
    ItemType.ACTIVITY: Activity,
    ItemType.RESTAURANT: Restaurant,
}
