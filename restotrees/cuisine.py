"""Cuisine ratings from the monthly ratings file and the monthly winner per cuisine."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence, Union

from .models import CUISINE_NAMES, Restaurant
from .sales import SalesTree

logger = logging.getLogger(__name__)

# Zero-based column of each cuisine's rating in a ratings row:
# date, id, one leading value, then Algerian, Syrian, Indian, Chinese, European.
_RATING_COLUMNS = {
    "algerian": 3,
    "syrian": 4,
    "indian": 5,
    "chinese": 6,
    "european": 7,
}

WINNER_ORDER = ("Chinese", "Algerian", "Syrian", "European", "Indian")

MISSING_RATING = -1.0
"""Rating used in a score when the ratings file holds none for the month."""

NO_WINNER = -1
"""Id shown in the winners text for a cuisine without any scored restaurant."""

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_CANONICAL_NAMES = {name.lower(): name for name in CUISINE_NAMES}


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return int(match.group(1))


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(1))


def _rating_column(cuisine: str) -> int:
    try:
        return _RATING_COLUMNS[cuisine.lower()]
    except KeyError:
        raise ValueError(f"invalid cuisine name: {cuisine!r}") from None


def _canonical_name(cuisine: str) -> str:
    try:
        return _CANONICAL_NAMES[cuisine.lower()]
    except KeyError:
        raise ValueError(f"invalid cuisine name: {cuisine!r}") from None


def cuisine_rating(
    path: Union[str, Path], restaurant_id: int, month: str, cuisine: str
) -> Optional[float]:
    """Return a restaurant's rating of ``cuisine`` for ``month`` (``YYYY-MM``).

    The comma-separated file at ``path`` is read after its header line; the
    first row whose date starts with ``month`` and whose id matches gives the
    rating. Rows whose numbers cannot be read are logged and skipped. Returns
    None when no row matches. The cuisine name is matched without regard to
    case; an unknown one raises ValueError.
    """
    column = _rating_column(cuisine)
    with open(path, encoding="utf-8", newline="") as handle:
        next(handle, None)
        for line in handle:
            fields = line.rstrip("\r\n").split(",")
            if len(fields) < 2:
                logger.warning("Error converting Id to integer: %r", line)
                continue
            try:
                current_id = _leading_int(fields[1])
            except ValueError as error:
                logger.warning("Error converting Id to integer: %s", error)
                continue
            if current_id != restaurant_id or fields[0][:7] != month:
                continue
            if len(fields) <= column:
                logger.warning("Missing %s rating in line: %r", cuisine, line)
                continue
            try:
                return _leading_float(fields[column])
            except ValueError as error:
                logger.warning("Error converting rating to number: %s", error)
    return None


def calculate_score(
    restaurant: Restaurant,
    month: str,
    cuisine: str,
    ratings_path: Union[str, Path],
    sales: SalesTree,
) -> float:
    """Score of a restaurant's cuisine: its monthly sales plus the rating over 100.

    A month without a rating counts as a rating of ``MISSING_RATING``.
    An unknown cuisine name raises ValueError.
    """
    _rating_column(cuisine)
    monthly_sales = sales.total_sales(month, restaurant.id)
    rating = cuisine_rating(ratings_path, restaurant.id, month, cuisine)
    if rating is None:
        rating = MISSING_RATING
    return monthly_sales + rating / 100


def cuisine_scores(
    restaurants: Iterable[Restaurant],
    cuisine: str,
    month: str,
    ratings_path: Union[str, Path],
    sales: SalesTree,
) -> list[tuple[int, float]]:
    """``(restaurant id, score)`` for every restaurant that serves ``cuisine``."""
    name = _canonical_name(cuisine)
    return [
        (restaurant.id, calculate_score(restaurant, month, name, ratings_path, sales))
        for restaurant in restaurants
        if restaurant.find_cuisine(name) is not None
    ]


def highest_score_restaurant_id(scores: Iterable[tuple[int, float]]) -> Optional[int]:
    """Id of the restaurant with the highest score, or None when there are none."""
    best = max(scores, key=lambda pair: pair[1], default=None)
    return None if best is None else best[0]


def monthly_winners(
    restaurants: Iterable[Restaurant],
    month: str,
    ratings_path: Union[str, Path],
    sales: SalesTree,
) -> dict[str, Optional[int]]:
    """The best-scoring restaurant id for each cuisine in ``month``."""
    restaurants = list(restaurants)
    return {
        name: highest_score_restaurant_id(
            cuisine_scores(restaurants, name, month, ratings_path, sales)
        )
        for name in WINNER_ORDER
    }


def format_winners(month: str, winners: Mapping[str, Optional[int]]) -> str:
    """The winners of a month as text, one line per cuisine."""
    lines = [f"Winners of the month {month} are :"]
    order: Sequence[str] = [n for n in WINNER_ORDER if n in winners] + [
        n for n in winners if n not in WINNER_ORDER
    ]
    for name in order:
        winner = winners[name]
        shown = NO_WINNER if winner is None else winner
        lines.append(f"Restaurant ID with the highest score for {name} cuisine: {shown}")
    return "\n".join(lines)