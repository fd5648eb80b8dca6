# storefront/storage/cart_store.py

"""Persistent shopping cart on top of an injected key-value storage."""

import json
import logging
from typing import Any, cast

from storefront.config.settings import Settings
from storefront.models.cart import CartLine
from storefront.storage.kv_store import Storage

logger = logging.getLogger("storefront.cart")


class CartStore:
    """Cart state machine persisted as one JSON array under one key.

    Each mutation re-reads the stored cart, applies the change and writes
    the whole cart back before returning.  Two processes sharing a
    storage file can still interleave; the last write wins.
    """

    def __init__(
        self,
        storage: Storage,
        key: str = Settings.CART_KEY,
    ) -> None:
        self._storage = storage
        self._key = key

    # ── Reading ──────────────────────────────────────────

    def read(self) -> list[CartLine]:
        """Return the stored cart in first-add order.

        A missing value, unparseable JSON, a non-list payload or any
        malformed entry all read as an empty cart.
        """
        raw = self._storage.get(self._key)
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as exc:
            logger.warning(
                "Stored cart under '%s' is not valid JSON (%s), "
                "treating as empty",
                self._key,
                exc,
            )
            return []

        if not isinstance(data, list):
            logger.warning(
                "Stored cart under '%s' is not a list, treating as empty",
                self._key,
            )
            return []

        entries = cast(list[Any], data)
        lines: list[CartLine] = []
        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning(
                    "Stored cart under '%s' has a non-object entry, "
                    "treating as empty",
                    self._key,
                )
                return []
            try:
                line = CartLine.from_dict(cast(dict[str, Any], entry))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning(
                    "Stored cart under '%s' has a malformed line (%s), "
                    "treating as empty",
                    self._key,
                    exc,
                )
                return []
            lines.append(line)

        # Lines with qty <= 0 are never written, drop any that slipped in
        return [line for line in lines if line.qty > 0]

    def count(self) -> int:
        """Total number of items, summed over line quantities."""
        return sum(line.qty for line in self.read())

    # ── Mutations ────────────────────────────────────────

    def _save(self, cart: list[CartLine]) -> None:
        self._storage.set(
            self._key,
            json.dumps([line.to_dict() for line in cart]),
        )

    def add(
        self,
        product_id: str,
        name: str,
        price: float,
        qty: int = 1,
    ) -> None:
        """Add *qty* of a product, merging into an existing line.

        The name and price are the caller's snapshot and are stored as
        given; an existing line keeps its original snapshot.  A line
        whose quantity ends up at zero or less is dropped.
        """
        cart = self.read()
        existing = next((ln for ln in cart if ln.id == product_id), None)
        if existing is not None:
            existing.qty += qty
        else:
            cart.append(
                CartLine(id=product_id, name=name, price=price, qty=qty)
            )
        self._save([ln for ln in cart if ln.qty > 0])
        logger.info("Added %d x %s to cart", qty, product_id)

    def set_qty(self, product_id: str, qty: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        cart = self.read()
        if not any(ln.id == product_id for ln in cart):
            logger.debug("set_qty ignored, %s not in cart", product_id)
            return

        updated: list[CartLine] = []
        for line in cart:
            if line.id == product_id:
                line.qty = qty
            if line.qty > 0:
                updated.append(line)
        self._save(updated)
        logger.info("Set %s quantity to %d", product_id, qty)

    def remove(self, product_id: str) -> None:
        """Drop a product's line from the cart, if present."""
        cart = self.read()
        kept = [ln for ln in cart if ln.id != product_id]
        if len(kept) == len(cart):
            logger.debug("remove ignored, %s not in cart", product_id)
            return
        self._save(kept)
        logger.info("Removed %s from cart", product_id)

    def clear(self) -> None:
        """Empty the cart by deleting its stored value."""
        self._storage.remove(self._key)
        logger.info("Cart cleared")
