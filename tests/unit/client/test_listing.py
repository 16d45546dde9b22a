"""Unit tests for listing filters and ordering."""

from uuid import uuid4

from trip.client.ids import PersistedId
from trip.client.listing import (
    ListingFilter,
    cuisine_options,
    filter_items,
    neighborhood_options,
    price_bounds,
    sort_by_score,
    visible_items,
)
from trip.client.models import CachedItem, CachedVote
from trip.domain.pricing import PriceRange
from trip.domain.value import ItemType, VoteType


def _restaurant(name, score=0, **fields):
    item_id = PersistedId(str(uuid4()))
    vote_type = VoteType.UPVOTE if score > 0 else VoteType.DOWNVOTE
    votes = tuple(
        CachedVote(
            id=PersistedId(str(uuid4())),
            username=f"user{i}",
            vote_type=vote_type,
            item_type=ItemType.RESTAURANT,
            item_id=item_id,
        )
        for i in range(abs(score))
    )
    return CachedItem(
        id=item_id,
        item_type=ItemType.RESTAURANT,
        fields={"name": name, **fields},
        votes=votes,
    )


ITEMS = [
    _restaurant("Ticonderoga", score=1, neighborhood="Inman Park", cuisine_type="American", price_range="$$$"),
    _restaurant("Desta", score=3, neighborhood="Midtown", cuisine_type="Ethiopian", price_range="$$"),
    _restaurant("Fox Bros", score=-1, neighborhood="Inman Park", cuisine_type="BBQ", price_range="$$"),
    _restaurant("Mystery", neighborhood="Midtown", price_range="ask"),
]


def _names(items):
    return [i.get("name") for i in items]


class TestSortByScore:
    """Tests for sort_by_score."""

    def test_highest_first(self):
        """Items should be ordered by descending score."""
        assert _names(sort_by_score(ITEMS)) == ["Desta", "Ticonderoga", "Mystery", "Fox Bros"]


class TestFilterItems:
    """Tests for filter_items."""

    def test_no_filter_keeps_everything(self):
        """An empty filter should pass every item."""
        assert filter_items(ITEMS, ListingFilter()) == ITEMS

    def test_neighborhood(self):
        """Neighborhood should match exactly."""
        result = filter_items(ITEMS, ListingFilter(neighborhood="Inman Park"))

        assert _names(result) == ["Ticonderoga", "Fox Bros"]

    def test_cuisines_are_ored(self):
        """Any selected cuisine should match."""
        result = filter_items(
            ITEMS, ListingFilter(cuisine_types=frozenset({"BBQ", "Ethiopian"}))
        )

        assert _names(result) == ["Desta", "Fox Bros"]

    def test_price_range_fails_open(self):
        """Unparseable prices should pass any price range."""
        result = filter_items(ITEMS, ListingFilter(price_range=PriceRange(3, 4)))

        assert _names(result) == ["Ticonderoga", "Mystery"]

    def test_dimensions_are_anded(self):
        """All active filters must match."""
        result = filter_items(
            ITEMS,
            ListingFilter(neighborhood="Midtown", price_range=PriceRange(1, 2)),
        )

        assert _names(result) == ["Desta", "Mystery"]

    def test_activity_price_field(self):
        """Activities filter on their own price field."""
        free = CachedItem(
            id=PersistedId("a1"), item_type=ItemType.ACTIVITY, fields={"name": "Park", "price": "Free"}
        )
        paid = CachedItem(
            id=PersistedId("a2"), item_type=ItemType.ACTIVITY, fields={"name": "Zoo", "price": "$30"}
        )

        result = filter_items(
            [free, paid], ListingFilter(price_range=PriceRange(0, 10)), price_field="price"
        )

        assert result == [free]


class TestOptions:
    """Tests for option lists and visible_items."""

    def test_options_are_sorted_and_distinct(self):
        """Options should list each non-empty value once, sorted."""
        assert neighborhood_options(ITEMS) == ["Inman Park", "Midtown"]
        assert cuisine_options(ITEMS) == ["American", "BBQ", "Ethiopian"]

    def test_price_bounds(self):
        """Bounds should cover the parseable prices."""
        assert price_bounds(ITEMS) == PriceRange(2, 3)

    def test_visible_items_filters_then_sorts(self):
        """Visible items should be filtered, then ordered by score."""
        result = visible_items(ITEMS, ListingFilter(neighborhood="Inman Park"))

        assert _names(result) == ["Ticonderoga", "Fox Bros"]
