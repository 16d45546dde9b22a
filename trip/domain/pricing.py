"""Price parsing for free-text price fields.

Activity and restaurant prices are typed in by hand: "Free", "$$$",
"$25 per person", "ask staff". These helpers map them onto one comparable
scale so lists can be range-filtered. The mapping is lossy: "$$" is an
ordinal (2), "$25" an amount (25), and only the first digit run counts.
"""

import re
from collections.abc import Iterable
from typing import NamedTuple, Optional

_DOLLAR_SIGNS = re.compile(r"^\$+$")
_FIRST_AMOUNT = re.compile(r"\$?(\d+)")

# Bounds used when no price in the data can be parsed ("$" .. "$$$$")
DEFAULT_PRICE_RANGE_MIN = 1
DEFAULT_PRICE_RANGE_MAX = 4


class PriceRange(NamedTuple):
    """Inclusive numeric price bounds."""

    min: int
    max: int


def parse_price_to_number(price: Optional[str]) -> Optional[int]:
    """Parse a price string to a number for comparison.

    Args:
        price: Free-text price, e.g. "Free", "$$", "$25"

    Returns:
        0 for "free", the number of "$" for a dollar-sign rating, the first
        digit run otherwise, or None when nothing can be parsed
    """
    if not price:
        return None

    trimmed = price.strip().lower()

    if trimmed == "free":
        return 0

    if _DOLLAR_SIGNS.match(trimmed):
        return len(trimmed)

    match = _FIRST_AMOUNT.search(trimmed)
    if match:
        return int(match.group(1))

    return None


def is_price_in_range(price: Optional[str], min_price: float, max_price: float) -> bool:
    """Check whether a price falls within inclusive bounds.

    Unparseable or missing prices are always in range, so filtering never
    hides an item just because its price was left blank.
    """
    value = parse_price_to_number(price)
    if value is None:
        return True
    return min_price <= value <= max_price


def get_price_range(prices: Iterable[Optional[str]]) -> PriceRange:
    """Get min/max bounds over the parseable prices.

    Falls back to the dollar-sign scale when nothing parses.
    """
    values = [v for v in map(parse_price_to_number, prices) if v is not None]
    if not values:
        return PriceRange(DEFAULT_PRICE_RANGE_MIN, DEFAULT_PRICE_RANGE_MAX)
    return PriceRange(min(values), max(values))
