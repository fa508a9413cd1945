"""Monthly cuisine ratings per restaurant, indexed by date in an AVL tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping, Union

from .avl import AVLTree

logger = logging.getLogger(__name__)

RATING_COLUMNS = ("Algerian", "Syrian", "Indian", "Chinese", "European")

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


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


def _fmt(value: float) -> str:
    return f"{value:g}"


class RatingTree:
    """Ratings keyed by date, then restaurant id, then cuisine name."""

    def __init__(self) -> None:
        self._tree: AVLTree[str, dict[int, dict[str, float]]] = AVLTree()

    def insert(self, date: str, restaurant_id: int, ratings: Mapping[str, float]) -> bool:
        """Record ratings for a date; a date already present is left unchanged.

        Returns False when the date was already in the tree.
        """
        entry = {restaurant_id: {name: float(value) for name, value in ratings.items()}}
        return self._tree.insert(date, entry)

    def cuisine_rating(self, month: str, restaurant_id: int, cuisine: str) -> float:
        """Rating stored under exactly ``month``; 0.0 when there is none."""
        data = self._tree.find(month, {})
        return data.get(restaurant_id, {}).get(cuisine, 0.0)

    def describe_cuisine_rating(self, restaurant_id: int, month: str, cuisine: str) -> str:
        """A one-line description of the rating for a restaurant and cuisine."""
        rating = self.cuisine_rating(month, restaurant_id, cuisine)
        return (
            f"Rating for Restaurant {restaurant_id} in {month} "
            f"for Cuisine {cuisine}: {_fmt(rating)}"
        )

    def read_file(self, path: Union[str, Path]) -> None:
        """Load whitespace-separated rating rows, skipping the header line.

        Each row holds a date, a restaurant id and the Algerian, Syrian,
        Indian, Chinese and European ratings. Rows with too few fields are
        skipped; fields that are not numbers raise ValueError.
        """
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                fields = line.split()
                if len(fields) < 2 + len(RATING_COLUMNS):
                    logger.warning("Error parsing line: %s", line.rstrip("\n"))
                    continue
                date, id_text, *values = fields[: 2 + len(RATING_COLUMNS)]
                restaurant_id = _leading_int(id_text)
                ratings = {
                    name: _leading_float(text) for name, text in zip(RATING_COLUMNS, values)
                }
                self.insert(date, restaurant_id, ratings)