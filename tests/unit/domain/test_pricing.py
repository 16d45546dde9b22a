"""Unit tests for free-text price parsing."""

import pytest

from trip.domain.pricing import (
    PriceRange,
    get_price_range,
    is_price_in_range,
    parse_price_to_number,
)


class TestParsePriceToNumber:
    """Tests for parse_price_to_number."""

    @pytest.mark.parametrize(
        "price, expected",
        [
            ("Free", 0),
            ("  FREE  ", 0),
            ("$", 1),
            ("$$$", 3),
            ("$$$$", 4),
            ("$25", 25),
            ("25", 25),
            ("$15-20 per person", 15),
            ("about 40 dollars", 40),
        ],
    )
    def test_parses_known_formats(self, price, expected):
        """Free, dollar-sign ratings and amounts should parse."""
        assert parse_price_to_number(price) == expected

    @pytest.mark.parametrize("price", [None, "", "ask staff", "varies"])
    def test_unparseable_returns_none(self, price):
        """Missing or non-numeric prices should not parse."""
        assert parse_price_to_number(price) is None


class TestIsPriceInRange:
    """Tests for is_price_in_range."""

    def test_inside_bounds_inclusive(self):
        """Bounds should be inclusive on both ends."""
        assert is_price_in_range("$$", 2, 3)
        assert is_price_in_range("$$$", 2, 3)

    def test_outside_bounds(self):
        """Prices outside the bounds should be excluded."""
        assert not is_price_in_range("$$$$", 1, 3)
        assert not is_price_in_range("Free", 1, 4)

    def test_unparseable_price_is_always_in_range(self):
        """Filtering should never hide items with blank or odd prices."""
        assert is_price_in_range(None, 3, 4)
        assert is_price_in_range("ask staff", 3, 4)


class TestGetPriceRange:
    """Tests for get_price_range."""

    def test_bounds_over_parseable_prices(self):
        """Min and max should come from the parseable prices only."""
        assert get_price_range(["$$", "Free", None, "$40", "ask"]) == PriceRange(0, 40)

    def test_defaults_when_nothing_parses(self):
        """With nothing parseable, fall back to the dollar-sign scale."""
        assert get_price_range([None, "ask staff"]) == PriceRange(1, 4)
        assert get_price_range([]) == PriceRange(1, 4)
