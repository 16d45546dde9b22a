"""Filtering and ordering of cached collections for display."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from trip.client.models import CachedItem
from trip.domain.pricing import PriceRange, get_price_range, is_price_in_range


@dataclass(frozen=True)
class ListingFilter:
    """Active filters. Unset dimensions let everything through."""

    neighborhood: Optional[str] = None
    cuisine_types: frozenset[str] = field(default_factory=frozenset)
    price_range: Optional[PriceRange] = None


def sort_by_score(items: Iterable[CachedItem]) -> list[CachedItem]:
    """Highest score first. Ties keep their collection order."""
    return sorted(items, key=lambda item: item.score, reverse=True)


def _matches(item: CachedItem, listing_filter: ListingFilter, price_field: str) -> bool:
    if (
        listing_filter.neighborhood
        and item.get("neighborhood") != listing_filter.neighborhood
    ):
        return False

    if (
        listing_filter.cuisine_types
        and (item.get("cuisine_type") or "") not in listing_filter.cuisine_types
    ):
        return False

    if listing_filter.price_range is not None and not is_price_in_range(
        item.get(price_field),
        listing_filter.price_range.min,
        listing_filter.price_range.max,
    ):
        return False

    return True


def filter_items(
    items: Iterable[CachedItem],
    listing_filter: ListingFilter,
    price_field: str = "price_range",
) -> list[CachedItem]:
    """Keep items matching every active filter.

    Args:
        items: Items to filter
        listing_filter: Active filters
        price_field: Field holding the free-text price ("price_range" for
            restaurants, "price" for activities)
    """
    return [item for item in items if _matches(item, listing_filter, price_field)]


def _distinct(items: Iterable[CachedItem], name: str) -> list[str]:
    return sorted({value for item in items if (value := item.get(name))})


def neighborhood_options(items: Iterable[CachedItem]) -> list[str]:
    """Neighborhoods present in the data, for the filter dropdown."""
    return _distinct(items, "neighborhood")


def cuisine_options(items: Iterable[CachedItem]) -> list[str]:
    """Cuisine types present in the data, for the filter checkboxes."""
    return _distinct(items, "cuisine_type")


def price_bounds(items: Sequence[CachedItem], price_field: str = "price_range") -> PriceRange:
    """Slider bounds over the parseable prices in the data."""
    return get_price_range(item.get(price_field) for item in items)


def visible_items(
    items: Iterable[CachedItem],
    listing_filter: ListingFilter,
    price_field: str = "price_range",
) -> list[CachedItem]:
    """Filter, then order by score."""
    return sort_by_score(filter_items(items, listing_filter, price_field))
