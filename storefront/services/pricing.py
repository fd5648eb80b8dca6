# storefront/services/pricing.py

"""Cart subtotal, shipping and total calculation."""

from dataclasses import dataclass

from storefront.config.settings import Settings
from storefront.models.cart import CartLine


@dataclass(frozen=True)
class CartSummary:
    """Derived money figures for a cart."""

    subtotal: float
    shipping: float
    total: float


class PricingCalculator:
    """Derive subtotal, shipping and total from cart lines.

    Shipping is a flat fee whenever the subtotal is at or below the
    free-shipping threshold, including a subtotal of zero. Callers that
    show an empty cart should not display that charge.
    """

    def __init__(
        self,
        shipping_fee: float = Settings.SHIPPING_FEE,
        free_shipping_threshold: float = Settings.FREE_SHIPPING_THRESHOLD,
    ) -> None:
        self.shipping_fee = shipping_fee
        self.free_shipping_threshold = free_shipping_threshold

    @staticmethod
    def subtotal(cart: list[CartLine]) -> float:
        """Sum of ``price * qty`` over all lines."""
        return sum((line.price * line.qty for line in cart), 0.0)

    def shipping(self, subtotal: float) -> float:
        """Flat fee at or below the threshold, free above it."""
        if subtotal > self.free_shipping_threshold:
            return 0.0
        return self.shipping_fee

    def total(self, cart: list[CartLine]) -> float:
        subtotal = self.subtotal(cart)
        return subtotal + self.shipping(subtotal)

    def summarize(self, cart: list[CartLine]) -> CartSummary:
        """Compute all three figures from a single subtotal pass."""
        subtotal = self.subtotal(cart)
        shipping = self.shipping(subtotal)
        return CartSummary(
            subtotal=subtotal,
            shipping=shipping,
            total=subtotal + shipping,
        )
