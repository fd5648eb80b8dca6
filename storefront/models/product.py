# storefront/models/product.py

"""Product data model for the in-memory catalog."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """A single catalog entry. Never mutated once loaded."""

    id: str
    name: str
    price: float
    category: str = ""
    excerpt: str = ""
    description: str = ""
    image: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a product from one decoded ``products.json`` record.

        Optional text fields that are missing or ``null`` become ``""``.
        A missing ``id``/``name`` raises ``KeyError`` and a non-numeric
        ``price`` raises ``ValueError``; the loader reports both.
        """
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            price=float(data["price"]),
            category=str(data.get("category") or ""),
            excerpt=str(data.get("excerpt") or ""),
            description=str(data.get("description") or ""),
            image=str(data.get("image") or ""),
        )
