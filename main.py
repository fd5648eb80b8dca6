# main.py

"""Entry point for the storefront helper (TUI or headless CLI)."""

import argparse
import logging
import sys

from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _add_format_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse a product catalog and manage a local cart.",
        epilog=f"Sort keys: {', '.join(Settings.SORT_KEYS)}",
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Catalog JSON path or http(s) URL (default: data/products.json).",
    )
    parser.add_argument(
        "--storage",
        default=None,
        help="Cart storage database path (default: data/storage.db).",
    )
    sub = parser.add_subparsers(dest="command")

    browse = sub.add_parser("browse", help="List one catalog page.")
    browse.add_argument("-q", "--search", default="", help="Search text.")
    browse.add_argument(
        "-c", "--category", default="", help="Category (default: all)."
    )
    browse.add_argument(
        "--sort",
        default=Settings.DEFAULT_SORT,
        dest="sort_key",
        help="featured, price-asc or price-desc (default: featured).",
    )
    browse.add_argument("-p", "--page", type=int, default=1)
    browse.add_argument(
        "--page-size", type=int, default=Settings.PAGE_SIZE, dest="page_size"
    )
    _add_format_flag(browse)

    show = sub.add_parser("show", help="Show a product page.")
    show.add_argument("product_id")
    _add_format_flag(show)

    cart = sub.add_parser("cart", help="Show cart contents and totals.")
    _add_format_flag(cart)

    add = sub.add_parser("add", help="Add a product to the cart.")
    add.add_argument("product_id")
    add.add_argument("--qty", type=int, default=1)

    set_qty = sub.add_parser("set-qty", help="Set a cart line quantity.")
    set_qty.add_argument("product_id")
    set_qty.add_argument("qty", type=int)

    remove = sub.add_parser("remove", help="Remove a product from the cart.")
    remove.add_argument("product_id")

    sub.add_parser("clear", help="Empty the cart.")
    return parser


def _run_tui(catalog: str | None, storage: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from storefront.ui.app import StorefrontApp

    try:
        app = StorefrontApp(catalog_source=catalog, storage_path=storage)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> int:
    """Dispatch a headless subcommand and return its exit code."""
    from storefront.cli import runner

    if args.command == "browse":
        return runner.run_browse(
            catalog=args.catalog,
            search=args.search,
            category=args.category,
            sort_key=args.sort_key,
            page=args.page,
            page_size=args.page_size,
            output_format=args.output_format,
        )
    if args.command == "show":
        return runner.run_show(
            args.catalog, args.product_id, args.output_format
        )
    if args.command == "cart":
        return runner.run_cart(
            args.catalog, args.storage, args.output_format
        )
    if args.command == "add":
        return runner.run_add(
            args.catalog, args.storage, args.product_id, args.qty
        )
    if args.command == "set-qty":
        return runner.run_set_qty(args.storage, args.product_id, args.qty)
    if args.command == "remove":
        return runner.run_remove(args.storage, args.product_id)
    return runner.run_clear(args.storage)


def main() -> None:
    """Route to TUI (no subcommand) or a headless CLI command."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        _run_tui(args.catalog, args.storage)
    else:
        sys.exit(_run_cli(args))


if __name__ == "__main__":
    main()
