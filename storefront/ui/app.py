# storefront/ui/app.py

"""Terminal UI presenting the catalog grid and the cart."""

import logging
from pathlib import Path
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Select,
    Static,
)

from storefront.config.settings import Settings
from storefront.models.criteria import QueryCriteria
from storefront.models.product import Product
from storefront.services.storefront_view import (
    CatalogView,
    build_cart_view,
    format_price,
    recompute,
)
from storefront.storage.cart_store import CartStore
from storefront.storage.catalog_loader import CatalogError, load_catalog
from storefront.storage.kv_store import SqliteStorage, Storage

logger = logging.getLogger("storefront.ui")

_SORT_OPTIONS: list[tuple[str, str]] = [
    ("Featured", "featured"),
    ("Price: low to high", "price-asc"),
    ("Price: high to low", "price-desc"),
]

_ALL_CATEGORIES = "__all__"


class StorefrontApp(App[object]):
    """Terminal UI for browsing the catalog and managing the cart."""

    DEFAULT_CSS = """
    #filter_bar { height: auto; }
    #search_input { width: 2fr; }
    #category_select, #sort_select { width: 1fr; }
    #pager { height: auto; }
    #page_info, #cart_info { padding: 1 2; }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_to_cart", "Add to cart"),
        Binding("n", "next_page", "Next page"),
        Binding("b", "prev_page", "Prev page"),
        Binding("x", "clear_cart", "Clear cart"),
    ]

    def __init__(
        self,
        catalog_source: str | None = None,
        storage_path: str | None = None,
        storage: Storage | None = None,
    ) -> None:
        super().__init__()
        self.catalog_source = catalog_source
        self.products: list[Product] = []
        self.criteria = QueryCriteria()
        self.view: CatalogView | None = None
        self._owned_storage: SqliteStorage | None = None
        if storage is None:
            self._owned_storage = SqliteStorage(
                Path(storage_path) if storage_path else None
            )
            storage = self._owned_storage
        self._storage = storage
        self.cart = CartStore(self._storage)

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Static("🛒 Storefront", id="title"),
            Horizontal(
                Input(placeholder="Search products...", id="search_input"),
                Select(
                    [("All categories", _ALL_CATEGORIES)],
                    value=_ALL_CATEGORIES,
                    allow_blank=False,
                    id="category_select",
                ),
                Select(
                    _SORT_OPTIONS,
                    value=Settings.DEFAULT_SORT,
                    allow_blank=False,
                    id="sort_select",
                ),
                id="filter_bar",
            ),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            Horizontal(
                Button("Prev", id="prev_btn"),
                Static("Page 1 of 1", id="page_info"),
                Button("Next", id="next_btn"),
                Static("Cart: 0", id="cart_info"),
                id="pager",
            ),
            Static("Ready", id="status"),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Load the catalog and render the first page."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.add_columns("Name", "Category", "Price", "Excerpt")

        status = self.query_one("#status", Static)
        try:
            self.products = load_catalog(self.catalog_source)
        except CatalogError as exc:
            logger.error("Catalog load failed: %s", exc, exc_info=True)
            status.update(f"❌ {exc}")
            self.notify(f"Could not load catalog: {exc}", severity="error")

        self.refresh_catalog()
        self.refresh_cart_info()

        categories = self.view.categories if self.view else []
        category_select = cast(
            Select[str], self.query_one("#category_select", Select)
        )
        category_select.set_options(
            [("All categories", _ALL_CATEGORIES)]
            + [(c, c) for c in categories]
        )
        category_select.value = _ALL_CATEGORIES

    # ── Rendering ────────────────────────────────────────

    def refresh_catalog(self) -> None:
        """Recompute the visible page from the current criteria."""
        self.view = recompute(self.products, self.criteria)
        self.criteria = self.view.criteria
        page = self.view.page

        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.clear()
        for p in page.items:
            table.add_row(
                p.name[:40],
                p.category,
                Text(format_price(p.price), style="green"),
                p.excerpt[:60],
            )

        self.query_one("#page_info", Static).update(
            f"Page {page.page} of {page.total_pages}"
        )
        self.query_one("#prev_btn", Button).disabled = not page.has_prev
        self.query_one("#next_btn", Button).disabled = not page.has_next

    def refresh_cart_info(self) -> None:
        """Show item count and totals; an empty cart shows no charges."""
        view = build_cart_view(self.cart.read(), self.products)
        info = self.query_one("#cart_info", Static)
        if view.summary is None:
            info.update("Cart: empty")
        else:
            info.update(
                f"Cart: {view.count} | Total {format_price(view.summary.total)}"
            )

    # ── Events ───────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every keystroke in the search box."""
        if event.input.id == "search_input":
            self.criteria = self.criteria.with_search(event.value)
            self.refresh_catalog()

    def on_select_changed(self, event: Select.Changed) -> None:
        """Apply category and sort selections."""
        value = event.value
        if not isinstance(value, str):
            return
        if event.select.id == "category_select":
            category = "" if value == _ALL_CATEGORIES else value
            if category != self.criteria.category:
                self.criteria = self.criteria.with_category(category)
                self.refresh_catalog()
        elif event.select.id == "sort_select":
            if value != self.criteria.sort_key:
                self.criteria = self.criteria.with_sort(value)
                self.refresh_catalog()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle pager buttons."""
        if event.button.id == "next_btn":
            self.action_next_page()
        elif event.button.id == "prev_btn":
            self.action_prev_page()

    def action_next_page(self) -> None:
        total = self.view.page.total_pages if self.view else 1
        self.criteria = self.criteria.next_page(total)
        self.refresh_catalog()

    def action_prev_page(self) -> None:
        self.criteria = self.criteria.prev_page()
        self.refresh_catalog()

    def action_add_to_cart(self) -> None:
        """Add one unit of the highlighted product to the cart."""
        if self.view is None or not self.view.page.items:
            self.notify("No product selected", severity="warning")
            return
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        row = table.cursor_row
        if not 0 <= row < len(self.view.page.items):
            return
        product = self.view.page.items[row]
        self.cart.add(product.id, product.name, product.price, 1)
        self.refresh_cart_info()
        self.notify(f"{product.name} added to cart")

    def action_clear_cart(self) -> None:
        self.cart.clear()
        self.refresh_cart_info()
        self.notify("Cart cleared")

    def on_unmount(self) -> None:
        """Close the cart database if this app opened it."""
        if self._owned_storage is not None:
            self._owned_storage.close()
            self._owned_storage = None
