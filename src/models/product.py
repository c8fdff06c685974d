# src/models/product.py

"""Catalog record model, shaped after the remote service's JSON."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rating:
    """Aggregate customer rating attached to a catalog record."""

    rate: float
    count: int


@dataclass(frozen=True)
class ProductRecord:
    """One catalog item exactly as the remote service returned it."""

    id: int
    title: str
    price: float
    description: str
    category: str
    image: str
    rating: Rating

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "ProductRecord":
        """Map one JSON object to a record without validating its values.

        Raises ``KeyError`` or ``TypeError`` when the object does not have
        the expected shape.
        """
        rating: dict[str, Any] = item["rating"]
        return cls(
            id=item["id"],
            title=item["title"],
            price=item["price"],
            description=item["description"],
            category=item["category"],
            image=item["image"],
            rating=Rating(rate=rating["rate"], count=rating["count"]),
        )
