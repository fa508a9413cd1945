"""Restaurants indexed by id in an AVL tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

from .avl import AVLTree
from .models import Place, Restaurant

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


class RestaurantTree:
    """Restaurants with unique ids, kept in ascending id order."""

    def __init__(self) -> None:
        self._tree: AVLTree[int, Restaurant] = AVLTree()

    def insert(self, restaurant: Restaurant) -> bool:
        """Add a restaurant; one whose id is already present is ignored.

        Returns False when the id was already in the tree.
        """
        return self._tree.insert(restaurant.id, restaurant)

    def __contains__(self, restaurant: object) -> bool:
        restaurant_id = getattr(restaurant, "id", None)
        return restaurant_id is not None and restaurant_id in self._tree

    def clear(self) -> None:
        """Remove every restaurant."""
        self._tree.clear()

    def find_by_id(self, restaurant_id: int) -> Optional[Restaurant]:
        """Return the restaurant with this id, or None."""
        return self._tree.find(restaurant_id)

    def format_ids(self) -> str:
        """The ids in ascending order, each followed by a space."""
        return "".join(f"{restaurant_id} " for restaurant_id in self._tree.keys())

    def __iter__(self) -> Iterator[Restaurant]:
        return (restaurant for _, restaurant in self._tree.items())

    def __len__(self) -> int:
        return len(self._tree)

    def read_file(self, path: Union[str, Path]) -> None:
        """Load whitespace-separated restaurant rows, skipping the header line.

        Each row holds id, name, employee number, type, country, wilaya,
        city and district. The wilaya column becomes the place's district
        and the district column its wilaya. Rows that are too short or
        whose numbers cannot be read are logged and skipped.
        """
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                fields = line.split()
                if len(fields) < 8:
                    logger.warning("Error parsing line: %s", line.rstrip("\n"))
                    continue
                id_text, name, employees_text, kind, country, wilaya, city, district = fields[:8]
                try:
                    restaurant_id = _leading_int(id_text)
                    employee_number = _leading_int(employees_text)
                except ValueError as error:
                    logger.warning("Error converting string to number: %s", error)
                    continue
                place = Place(district=wilaya, city=city, wilaya=district, country=country)
                self.insert(Restaurant(restaurant_id, name, kind, employee_number, place))