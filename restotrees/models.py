"""Plain records describing restaurants, places, ratings, sales and costs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

CUISINE_NAMES = ("Algerian", "Syrian", "European", "Indian", "Chinese")


@dataclass
class Place:
    """Where a restaurant is located."""

    district: str = ""
    city: str = ""
    wilaya: str = ""
    country: str = ""

    def __str__(self) -> str:
        return f"{self.city} {self.wilaya} {self.country} {self.district}"

    @classmethod
    def parse(cls, text: str) -> "Place":
        """Read a place written as ``city wilaya country district``."""
        parts = text.split()
        if len(parts) < 4:
            raise ValueError(f"expected city, wilaya, country and district in {text!r}")
        city, wilaya, country, district = parts[:4]
        return cls(district=district, city=city, wilaya=wilaya, country=country)


@dataclass
class Rating:
    """A rating given on a date (``YYYY-MM-DD``)."""

    rate: float = 0.0
    date: str = ""


@dataclass
class Sales:
    """Sales amount recorded on a date."""

    date: str = ""
    sales: float = 0.0


@dataclass
class Cost:
    """Total cost and publicity spending recorded on a date."""

    date: str
    total: float
    publicity_spending: float


@dataclass
class Cuisine:
    """A cuisine served by a restaurant, with its latest rating and sales."""

    name: str
    rating: Rating = field(default_factory=Rating)
    sales: Sales = field(default_factory=Sales)


def _default_cuisines() -> list[Cuisine]:
    return [Cuisine(name) for name in CUISINE_NAMES]


@dataclass
class Restaurant:
    """A restaurant and the cuisines it serves."""

    id: int
    name: str
    type: str
    employee_number: int
    place: Place = field(default_factory=Place)
    cuisines: list[Cuisine] = field(default_factory=_default_cuisines)

    def find_cuisine(self, name: str) -> Optional[Cuisine]:
        """Return the cuisine with exactly this name, or None."""
        return next((c for c in self.cuisines if c.name == name), None)

    def to_csv_row(self) -> str:
        """One restaurants-file row, without the line ending."""
        fields = (
            self.id,
            self.name,
            self.employee_number,
            self.type,
            self.place.country,
            self.place.wilaya,
            self.place.city,
            self.place.district,
        )
        return ",".join(str(f) for f in fields)

    def append_to_csv(self, path: Union[str, Path]) -> None:
        """Append this restaurant as a row to the file at ``path``."""
        with open(path, "a", encoding="utf-8", newline="") as handle:
            handle.write(self.to_csv_row() + "\n")