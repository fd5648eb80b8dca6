# tests/test_storefront_view.py

"""Tests for the catalog and cart view builders."""

import unittest

from storefront.models.cart import CartLine
from storefront.models.criteria import QueryCriteria
from storefront.models.product import Product
from storefront.services.pricing import CartSummary, PricingCalculator
from storefront.services.storefront_view import (
    build_cart_view,
    format_price,
    recompute,
)


def _catalog() -> list[Product]:
    """Ten products split over two categories."""
    return [
        Product(
            id=f"p{i}",
            name=f"Product {i}",
            price=100.0 * (i + 1),
            category="Studs" if i % 2 else "Cufflinks",
            image=f"images/p{i}.jpg",
        )
        for i in range(10)
    ]


class TestRecompute(unittest.TestCase):
    """recompute() view model."""

    def test_first_page(self) -> None:
        """Default criteria show the first 8 of 10 products."""
        view = recompute(_catalog(), QueryCriteria())
        self.assertEqual(view.categories, ["Cufflinks", "Studs"])
        self.assertEqual(len(view.page.items), 8)
        self.assertEqual(view.page.total_pages, 2)
        self.assertEqual(view.criteria.page, 1)

    def test_stale_page_is_pulled_back(self) -> None:
        """Criteria returned carry the clamped page."""
        view = recompute(_catalog(), QueryCriteria(page=5))
        self.assertEqual(view.page.page, 2)
        self.assertEqual(view.criteria.page, 2)
        self.assertEqual(len(view.page.items), 2)

    def test_filter_change_resets_to_page_one(self) -> None:
        """Narrowing the category from page 2 lands on page 1."""
        criteria = QueryCriteria(page=2)
        criteria = criteria.with_category("Studs")
        view = recompute(_catalog(), criteria)
        self.assertEqual(view.page.page, 1)
        self.assertEqual(view.page.total_items, 5)
        self.assertEqual(view.page.total_pages, 1)

    def test_categories_ignore_filters(self) -> None:
        """The category list always covers the full catalog."""
        view = recompute(
            _catalog(), QueryCriteria(search_text="nothing matches")
        )
        self.assertEqual(view.categories, ["Cufflinks", "Studs"])
        self.assertEqual(view.page.items, [])
        self.assertEqual(view.page.total_pages, 1)

    def test_next_page_clamps_at_end(self) -> None:
        """Stepping past the last page stays on it."""
        view = recompute(_catalog(), QueryCriteria())
        criteria = view.criteria.next_page(view.page.total_pages)
        criteria = criteria.next_page(view.page.total_pages)
        self.assertEqual(recompute(_catalog(), criteria).page.page, 2)


class TestBuildCartView(unittest.TestCase):
    """build_cart_view() view model."""

    def test_empty_cart_has_no_summary(self) -> None:
        """An empty cart shows no shipping charge."""
        view = build_cart_view([], _catalog())
        self.assertTrue(view.is_empty)
        self.assertEqual(view.count, 0)
        self.assertIsNone(view.summary)

    def test_lines_joined_with_images(self) -> None:
        """Lines pick up the catalog image by id."""
        cart = [CartLine("p1", "Product 1", 200.0, 2)]
        view = build_cart_view(cart, _catalog())
        self.assertEqual(view.lines[0].image, "images/p1.jpg")
        self.assertEqual(view.lines[0].line_total, 400.0)
        self.assertEqual(view.count, 2)

    def test_missing_product_keeps_snapshot(self) -> None:
        """A line for a product no longer listed still shows."""
        cart = [CartLine("gone", "Old thing", 75.0, 1)]
        view = build_cart_view(cart, _catalog())
        self.assertEqual(view.lines[0].image, "")
        self.assertEqual(view.lines[0].price, 75.0)

    def test_summary_uses_snapshot_prices(self) -> None:
        """Totals come from cart prices, not current catalog prices."""
        cart = [
            CartLine("a", "A", 500.0, 1),
            CartLine("b", "B", 600.0, 2),
        ]
        view = build_cart_view(cart, _catalog())
        self.assertEqual(
            view.summary,
            CartSummary(subtotal=1700.0, shipping=0.0, total=1700.0),
        )

    def test_custom_calculator(self) -> None:
        """An injected calculator drives the summary."""
        calc = PricingCalculator(shipping_fee=5.0)
        view = build_cart_view([CartLine("a", "A", 10.0, 1)], [], calc)
        assert view.summary is not None
        self.assertEqual(view.summary.total, 15.0)


class TestFormatPrice(unittest.TestCase):
    """format_price() rendering."""

    def test_thousands_and_decimals(self) -> None:
        """Amounts get grouping and two decimals."""
        self.assertEqual(format_price(1700), "₹ 1,700.00")

    def test_zero(self) -> None:
        """Zero renders as 0.00."""
        self.assertEqual(format_price(0), "₹ 0.00")


if __name__ == "__main__":
    unittest.main()
