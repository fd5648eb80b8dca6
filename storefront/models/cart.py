# storefront/models/cart.py

"""Cart line model and its persisted JSON form."""

from dataclasses import dataclass
from typing import Any


@dataclass
class CartLine:
    """One product's quantity entry in the cart.

    ``price`` is a snapshot taken when the product was first added and
    is not re-synced with later catalog changes.
    """

    id: str
    name: str
    price: float
    qty: int

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the stored ``{"id", "name", "price", "qty"}`` shape."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "qty": self.qty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CartLine":
        """Rebuild a line from its stored form.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` on a
        malformed entry; the cart store decides what that means.
        A fractional quantity is malformed rather than truncated.
        """
        qty = float(data["qty"])
        if not qty.is_integer():
            raise ValueError(f"non-integral qty {data['qty']!r}")
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            price=float(data["price"]),
            qty=int(qty),
        )
