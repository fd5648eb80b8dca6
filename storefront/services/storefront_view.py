# storefront/services/storefront_view.py

"""View models handed to presentation adapters (CLI, TUI).

Adapters hold a :class:`QueryCriteria`, call :func:`recompute` after
every change and render whatever comes back.  Cart screens go through
:func:`build_cart_view` after every cart mutation.
"""

import logging
from dataclasses import dataclass, field, replace

from storefront.config.settings import Settings
from storefront.filters.catalog_query import CatalogPage, CatalogQuery
from storefront.models.cart import CartLine
from storefront.models.criteria import QueryCriteria
from storefront.models.product import Product
from storefront.services.pricing import CartSummary, PricingCalculator

logger = logging.getLogger("storefront.view")


@dataclass
class CatalogView:
    """Everything a catalog grid needs for one render."""

    categories: list[str]
    criteria: QueryCriteria
    page: CatalogPage


@dataclass
class CartViewLine:
    """A cart line joined with catalog display data."""

    id: str
    name: str
    price: float
    qty: int
    image: str = ""

    @property
    def line_total(self) -> float:
        return self.price * self.qty


@dataclass
class CartView:
    """Cart lines, item count and money summary for one render.

    ``summary`` is ``None`` for an empty cart so that no shipping
    charge is shown next to an empty basket.
    """

    lines: list[CartViewLine] = field(
        default_factory=lambda: list[CartViewLine]()
    )
    count: int = 0
    summary: CartSummary | None = None

    @property
    def is_empty(self) -> bool:
        return not self.lines


def format_price(amount: float) -> str:
    """Render a money amount, e.g. ``₹ 1,700.00``."""
    return f"{Settings.CURRENCY_SYMBOL} {amount:,.2f}"


def recompute(
    products: list[Product],
    criteria: QueryCriteria,
) -> CatalogView:
    """Rebuild the catalog view for the given criteria.

    The returned criteria carry the page actually shown, so a stale
    page number past the end is pulled back to the last page.
    """
    page = CatalogQuery.query(products, criteria)
    if page.page != criteria.page:
        criteria = replace(criteria, page=page.page)

    logger.debug(
        "Recomputed catalog view: page %d of %d, %d matching products",
        page.page,
        page.total_pages,
        page.total_items,
    )
    return CatalogView(
        categories=CatalogQuery.list_categories(products),
        criteria=criteria,
        page=page,
    )


def build_cart_view(
    cart: list[CartLine],
    products: list[Product],
    calculator: PricingCalculator | None = None,
) -> CartView:
    """Join cart lines with catalog images and compute totals.

    Lines whose product has left the catalog still show, without an
    image, at their snapshot price.
    """
    if not cart:
        return CartView()

    calc = calculator or PricingCalculator()
    images = {p.id: p.image for p in products}
    lines = [
        CartViewLine(
            id=line.id,
            name=line.name,
            price=line.price,
            qty=line.qty,
            image=images.get(line.id, ""),
        )
        for line in cart
    ]
    return CartView(
        lines=lines,
        count=sum(line.qty for line in cart),
        summary=calc.summarize(cart),
    )
