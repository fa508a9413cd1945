"""Monthly costs per restaurant, indexed by date in an AVL tree."""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path
from typing import Union

from .avl import AVLTree

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    value = float(match.group(1))
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


class CostTree:
    """Total cost and publicity spending keyed by date, then restaurant id."""

    def __init__(self) -> None:
        self._tree: AVLTree[str, dict[int, tuple[float, float]]] = AVLTree()

    def insert(
        self, date: str, restaurant_id: int, total_cost: float, publicity: float
    ) -> bool:
        """Record costs for a date; a date already present is left unchanged.

        Returns False when the date was already in the tree.
        """
        entry = {restaurant_id: (float(total_cost), float(publicity))}
        return self._tree.insert(date, entry)

    def publicity_spending(self, month: str, restaurant_id: int) -> float:
        """Publicity spending stored under exactly ``month``; 0.0 when there is none."""
        entry = self._tree.find(month, {}).get(restaurant_id)
        return 0.0 if entry is None else entry[1]

    def read_file(self, path: Union[str, Path]) -> None:
        """Load whitespace-separated cost rows, skipping the header line.

        Each row holds a date, a restaurant id, the total cost and the
        publicity spending. Rows that are too short or whose numbers cannot
        be read are logged and skipped.
        """
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                fields = line.split()
                if len(fields) < 4:
                    logger.warning("Error parsing line: %s", line.rstrip("\n"))
                    continue
                date, id_text, cost_text, publicity_text = fields[:4]
                try:
                    restaurant_id = _leading_int(id_text)
                    cost = _leading_float(cost_text)
                    publicity = _leading_float(publicity_text)
                except ValueError as error:
                    logger.warning("Error converting string to number: %s", error)
                    continue
                self.insert(date, restaurant_id, cost, publicity)