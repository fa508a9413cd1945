"""Monthly cuisine sales per restaurant, indexed by date in an AVL tree."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping, Union

from .avl import AVLTree

logger = logging.getLogger(__name__)

SALES_COLUMNS = ("Algerian", "Syrian", "Indian", "Chinese", "European")

REPORT_RULE = "---------------------------------------------"

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


class SalesTree:
    """Sales keyed by date, then restaurant id, then cuisine name."""

    def __init__(self) -> None:
        self._tree: AVLTree[str, dict[int, dict[str, float]]] = AVLTree()

    def insert(self, date: str, restaurant_id: int, sales: Mapping[str, float]) -> bool:
        """Record sales for a date; a date already present is left unchanged.

        Returns False when the date was already in the tree.
        """
        entry = {restaurant_id: {name: float(value) for name, value in sales.items()}}
        return self._tree.insert(date, entry)

    def _restaurant_sales(self, month: str, restaurant_id: int) -> dict[str, float]:
        return self._tree.find(month, {}).get(restaurant_id, {})

    def total_sales(self, month: str, restaurant_id: int) -> float:
        """Sum of every cuisine's sales under exactly ``month``; 0.0 if none."""
        by_cuisine = self._restaurant_sales(month, restaurant_id)
        return sum(value for _, value in sorted(by_cuisine.items()))

    def cuisine_sales(self, month: str, restaurant_id: int, cuisine: str) -> float:
        """Sales of one cuisine under exactly ``month``; 0.0 if none."""
        return self._restaurant_sales(month, restaurant_id).get(cuisine, 0.0)

    def describe_total_sales(self, restaurant_id: int, month: str) -> str:
        """A one-line description of a restaurant's total sales."""
        total = self.total_sales(month, restaurant_id)
        return f"Total Sales for Restaurant {restaurant_id} in {month}: {_fmt(total)}"

    def describe_cuisine_sales(self, restaurant_id: int, month: str, cuisine: str) -> str:
        """A one-line description of a restaurant's sales for one cuisine."""
        amount = self.cuisine_sales(month, restaurant_id, cuisine)
        return (
            f"Total Sales for Restaurant {restaurant_id} in {month} "
            f"for Cuisine {cuisine}: {_fmt(amount)}"
        )

    def monthly_report(self, restaurant_id: int, month: str, cuisine: str) -> str:
        """The monthly sales report as text, one line per entry."""
        lines = [
            f"Monthly Sales Report for Restaurant {restaurant_id} in {month} "
            f"for Cuisine {cuisine}:",
            REPORT_RULE,
            self.describe_total_sales(restaurant_id, month),
            self.describe_cuisine_sales(restaurant_id, month, cuisine),
            REPORT_RULE,
        ]
        return "\n".join(lines)

    def read_file(self, path: Union[str, Path]) -> None:
        """Load whitespace-separated sales rows, skipping the header line.

        Each row holds a date, a restaurant id and the Algerian, Syrian,
        Indian, Chinese and European sales. Rows with too few fields are
        skipped; fields that are not numbers raise ValueError.
        """
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                fields = line.split()
                if len(fields) < 2 + len(SALES_COLUMNS):
                    logger.warning("Error parsing line: %s", line.rstrip("\n"))
                    continue
                date, id_text, *values = fields[: 2 + len(SALES_COLUMNS)]
                restaurant_id = _leading_int(id_text)
                sales = {
                    name: _leading_float(text) for name, text in zip(SALES_COLUMNS, values)
                }
                self.insert(date, restaurant_id, sales)