# tests/test_criteria.py

"""Tests for QueryCriteria transitions."""

import unittest

from storefront.config.settings import Settings
from storefront.models.criteria import QueryCriteria


class TestQueryCriteria(unittest.TestCase):
    """Field changes and paging moves."""

    def test_defaults(self) -> None:
        """Fresh criteria show everything, featured, page 1."""
        criteria = QueryCriteria()
        self.assertEqual(criteria.search_text, "")
        self.assertEqual(criteria.category, "")
        self.assertEqual(criteria.sort_key, "featured")
        self.assertEqual(criteria.page, 1)
        self.assertEqual(criteria.page_size, Settings.PAGE_SIZE)

    def test_field_changes_reset_page(self) -> None:
        """Search, category and sort changes go back to page 1."""
        start = QueryCriteria(page=3)
        self.assertEqual(start.with_search("silk").page, 1)
        self.assertEqual(start.with_category("Studs").page, 1)
        self.assertEqual(start.with_sort("price-asc").page, 1)

    def test_field_changes_keep_other_fields(self) -> None:
        """Only the changed field and the page move."""
        start = QueryCriteria(search_text="silk", category="Studs")
        changed = start.with_sort("price-desc")
        self.assertEqual(changed.search_text, "silk")
        self.assertEqual(changed.category, "Studs")
        self.assertEqual(changed.sort_key, "price-desc")

    def test_next_page_clamped(self) -> None:
        """next_page never passes total_pages."""
        self.assertEqual(QueryCriteria(page=1).next_page(2).page, 2)
        self.assertEqual(QueryCriteria(page=2).next_page(2).page, 2)

    def test_prev_page_clamped(self) -> None:
        """prev_page never goes below 1."""
        self.assertEqual(QueryCriteria(page=2).prev_page().page, 1)
        self.assertEqual(QueryCriteria(page=1).prev_page().page, 1)

    def test_go_to_clamped(self) -> None:
        """go_to stays within [1, total_pages]."""
        criteria = QueryCriteria()
        self.assertEqual(criteria.go_to(9, 3).page, 3)
        self.assertEqual(criteria.go_to(-1, 3).page, 1)
        self.assertEqual(criteria.go_to(4, 0).page, 1)

    def test_immutable(self) -> None:
        """Transitions return new criteria objects."""
        criteria = QueryCriteria()
        self.assertIsNot(criteria.with_search("x"), criteria)
        self.assertEqual(criteria.search_text, "")


if __name__ == "__main__":
    unittest.main()
