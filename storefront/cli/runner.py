# storefront/cli/runner.py

"""Headless CLI commands over the catalog engine and the cart store."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from storefront.filters.catalog_query import CatalogQuery
from storefront.models.criteria import QueryCriteria
from storefront.models.product import Product
from storefront.services.storefront_view import (
    CartView,
    build_cart_view,
    format_price,
    recompute,
)
from storefront.storage.cart_store import CartStore
from storefront.storage.catalog_loader import CatalogError, load_catalog
from storefront.storage.kv_store import SqliteStorage

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _load(catalog: str | None) -> list[Product] | None:
    """Load the catalog, reporting failures instead of raising."""
    try:
        return load_catalog(catalog)
    except CatalogError as exc:
        logger.error("Catalog load failed: %s", exc, exc_info=True)
        _err.print(f"[red]Could not load catalog: {exc}[/red]")
        return None


def _open_cart(storage_path: str | None) -> tuple[SqliteStorage, CartStore]:
    storage = SqliteStorage(Path(storage_path) if storage_path else None)
    return storage, CartStore(storage)


def _product_to_dict(p: Product) -> dict[str, object]:
    return {
        "id": p.id,
        "name": p.name,
        "excerpt": p.excerpt,
        "description": p.description,
        "category": p.category,
        "price": p.price,
        "image": p.image,
    }


def _cart_view_to_dict(view: CartView) -> dict[str, object]:
    summary = view.summary
    return {
        "lines": [
            {
                "id": ln.id,
                "name": ln.name,
                "price": ln.price,
                "qty": ln.qty,
                "lineTotal": ln.line_total,
                "image": ln.image,
            }
            for ln in view.lines
        ],
        "count": view.count,
        "subtotal": summary.subtotal if summary else None,
        "shipping": summary.shipping if summary else None,
        "total": summary.total if summary else None,
    }


def _dump_json(data: object) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def _print_products(title: str, products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(title=title, show_lines=True, title_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", max_width=40)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Excerpt", max_width=50, style="dim")

    for p in products:
        table.add_row(
            p.id, p.name, p.category, format_price(p.price), p.excerpt,
        )
    Console().print(table)


def _print_cart(view: CartView) -> None:
    """Render the cart lines and money summary to stdout."""
    console = Console()
    if view.is_empty or view.summary is None:
        console.print("[dim]Your cart is empty.[/dim]")
        return

    table = Table(title="Cart", show_lines=True, title_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name", max_width=40)
    table.add_column("Each", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Line total", justify="right", style="green")
    for ln in view.lines:
        table.add_row(
            ln.id,
            ln.name,
            format_price(ln.price),
            str(ln.qty),
            format_price(ln.line_total),
        )
    console.print(table)

    summary = view.summary
    console.print(f"Subtotal  {format_price(summary.subtotal)}")
    console.print(f"Shipping  {format_price(summary.shipping)}")
    console.print(f"[bold]Total     {format_price(summary.total)}[/bold]")


# ── Catalog commands ─────────────────────────────────────


def run_browse(
    catalog: str | None,
    search: str,
    category: str,
    sort_key: str,
    page: int,
    page_size: int,
    output_format: str,
) -> int:
    """Print one catalog page for the given criteria."""
    products = _load(catalog)
    if products is None:
        return 1

    criteria = QueryCriteria(
        search_text=search,
        category=category,
        sort_key=sort_key,
        page=page,
        page_size=page_size,
    )
    view = recompute(products, criteria)
    result = view.page

    if output_format == "table":
        _print_products(
            f"Page {result.page} of {result.total_pages}",
            result.items,
        )
        _err.print(
            f"[dim]{result.total_items} matching products, "
            f"categories: {', '.join(view.categories) or '—'}[/dim]"
        )
    else:
        _dump_json({
            "page": result.page,
            "totalPages": result.total_pages,
            "totalItems": result.total_items,
            "categories": view.categories,
            "items": [_product_to_dict(p) for p in result.items],
        })
    return 0


def run_show(
    catalog: str | None,
    product_id: str,
    output_format: str,
) -> int:
    """Print a single product plus the related-products strip."""
    products = _load(catalog)
    if products is None:
        return 1

    product = CatalogQuery.find_product(products, product_id)
    if product is None:
        _err.print(f"[yellow]Product not found: {product_id}[/yellow]")
        return 1

    related = CatalogQuery.related(products)
    if output_format == "table":
        console = Console()
        console.print(f"[bold]{product.name}[/bold]")
        console.print(f"[magenta]{product.category}[/magenta]")
        console.print(f"[green]{format_price(product.price)}[/green]")
        if product.description:
            console.print(product.description)
        _print_products("Related", related)
    else:
        _dump_json({
            "product": _product_to_dict(product),
            "related": [_product_to_dict(p) for p in related],
        })
    return 0


# ── Cart commands ────────────────────────────────────────


def run_cart(
    catalog: str | None,
    storage_path: str | None,
    output_format: str,
) -> int:
    """Print the cart contents and totals."""
    products = _load(catalog)
    if products is None:
        return 1

    storage, cart = _open_cart(storage_path)
    try:
        view = build_cart_view(cart.read(), products)
    finally:
        storage.close()

    if output_format == "table":
        _print_cart(view)
    else:
        _dump_json(_cart_view_to_dict(view))
    return 0


def run_add(
    catalog: str | None,
    storage_path: str | None,
    product_id: str,
    qty: int,
) -> int:
    """Add a catalog product to the cart at its current price."""
    if qty < 1:
        _err.print("[red]Quantity must be at least 1[/red]")
        return 1

    products = _load(catalog)
    if products is None:
        return 1

    product = CatalogQuery.find_product(products, product_id)
    if product is None:
        _err.print(f"[yellow]Product not found: {product_id}[/yellow]")
        return 1

    storage, cart = _open_cart(storage_path)
    try:
        cart.add(product.id, product.name, product.price, qty)
        count = cart.count()
    finally:
        storage.close()

    _err.print(
        f"[green]✓ {product.name} added to cart ({qty})[/green]  "
        f"[dim]{count} item(s) in cart[/dim]"
    )
    return 0


def run_set_qty(
    storage_path: str | None,
    product_id: str,
    qty: int,
) -> int:
    """Change a line's quantity; zero or less removes it."""
    storage, cart = _open_cart(storage_path)
    try:
        cart.set_qty(product_id, qty)
        count = cart.count()
    finally:
        storage.close()
    _err.print(f"[dim]{count} item(s) in cart[/dim]")
    return 0


def run_remove(storage_path: str | None, product_id: str) -> int:
    """Remove a product's line from the cart."""
    storage, cart = _open_cart(storage_path)
    try:
        cart.remove(product_id)
        count = cart.count()
    finally:
        storage.close()
    _err.print(f"[dim]{count} item(s) in cart[/dim]")
    return 0


def run_clear(storage_path: str | None) -> int:
    """Empty the cart."""
    storage, cart = _open_cart(storage_path)
    try:
        cart.clear()
    finally:
        storage.close()
    _err.print("[green]✓ Cart cleared[/green]")
    return 0
