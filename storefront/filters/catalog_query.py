# storefront/filters/catalog_query.py

"""Catalog filtering, sorting and pagination over an in-memory product list."""

import logging
import math
from dataclasses import dataclass, field

from storefront.config.settings import Settings
from storefront.models.criteria import QueryCriteria
from storefront.models.product import Product

logger = logging.getLogger("storefront.catalog")


@dataclass
class CatalogPage:
    """One page of a filtered, sorted catalog."""

    items: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    page: int = 1
    total_pages: int = 1
    total_items: int = 0

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


class CatalogQuery:
    """Stateless query engine: filter, then sort, then paginate.

    Nothing is cached between calls, so the full catalog can be passed
    in fresh every time and identical inputs give identical pages.
    """

    @staticmethod
    def list_categories(products: list[Product]) -> list[str]:
        """Return the distinct product categories, sorted."""
        return sorted({p.category for p in products})

    @staticmethod
    def _matches_search(product: Product, needle: str) -> bool:
        """Case-insensitive substring match on name, excerpt, description."""
        return (
            needle in product.name.lower()
            or needle in product.excerpt.lower()
            or needle in (product.description or "").lower()
        )

    @staticmethod
    def filter(
        products: list[Product],
        criteria: QueryCriteria,
    ) -> list[Product]:
        """Keep products in the selected category that match the search text.

        An empty category or empty search text places no restriction.
        The input order is preserved.
        """
        needle = criteria.search_text.strip().lower()
        category = criteria.category

        kept = [
            p
            for p in products
            if (not category or p.category == category)
            and (not needle or CatalogQuery._matches_search(p, needle))
        ]

        logger.debug(
            "Filter (search=%r, category=%r) kept %d of %d products",
            needle,
            category,
            len(kept),
            len(products),
        )
        return kept

    @staticmethod
    def sort(products: list[Product], sort_key: str) -> list[Product]:
        """Order products by price; ``featured`` keeps the input order.

        Unrecognised keys fall back to ``featured``. Ties keep their
        relative order in both directions.
        """
        if sort_key == "price-asc":
            return sorted(products, key=lambda p: p.price)
        if sort_key == "price-desc":
            return sorted(products, key=lambda p: p.price, reverse=True)
        if sort_key != "featured":
            logger.debug(
                "Unknown sort key %r, keeping featured order", sort_key
            )
        return list(products)

    @staticmethod
    def paginate(
        products: list[Product],
        page: int,
        page_size: int,
    ) -> CatalogPage:
        """Slice out one page, clamping *page* to the available range.

        ``total_pages`` is never below 1, so an empty catalog yields an
        empty page 1 of 1.
        """
        if page_size < 1:
            page_size = Settings.PAGE_SIZE

        total_items = len(products)
        total_pages = max(1, math.ceil(total_items / page_size))
        clamped = max(1, min(page, total_pages))
        if clamped != page:
            logger.debug(
                "Requested page %d clamped to %d of %d",
                page,
                clamped,
                total_pages,
            )

        start = (clamped - 1) * page_size
        return CatalogPage(
            items=products[start:start + page_size],
            page=clamped,
            total_pages=total_pages,
            total_items=total_items,
        )

    @staticmethod
    def query(
        products: list[Product],
        criteria: QueryCriteria,
    ) -> CatalogPage:
        """Compose filter, sort and paginate for one criteria snapshot."""
        filtered = CatalogQuery.filter(products, criteria)
        ordered = CatalogQuery.sort(filtered, criteria.sort_key)
        return CatalogQuery.paginate(
            ordered, criteria.page, criteria.page_size
        )

    @staticmethod
    def find_product(
        products: list[Product], product_id: str
    ) -> Product | None:
        """Look up a single product by id."""
        return next((p for p in products if p.id == product_id), None)

    @staticmethod
    def related(
        products: list[Product],
        limit: int = Settings.RELATED_LIMIT,
    ) -> list[Product]:
        """Return the leading *limit* catalog entries for a related strip."""
        return list(products[:max(0, limit)])
