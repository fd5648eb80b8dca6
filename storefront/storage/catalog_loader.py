# storefront/storage/catalog_loader.py

"""Load the product catalog from a JSON file or an http(s) URL."""

import json
import logging
from pathlib import Path
from typing import Any, cast

from curl_cffi import requests as curl_requests

from storefront.config.settings import Settings
from storefront.models.product import Product

logger = logging.getLogger("storefront.loader")


class CatalogError(ValueError):
    """The catalog could not be fetched or is not a valid product list."""


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_text(url: str) -> str:
    """GET the catalog document with browser impersonation."""
    try:
        resp = curl_requests.get(
            url,
            impersonate=Settings.IMPERSONATE_BROWSER,
            timeout=Settings.REQUEST_TIMEOUT,
        )
    except Exception as exc:
        raise CatalogError(f"Failed to fetch catalog from {url}: {exc}") from exc

    if resp.status_code != 200:
        raise CatalogError(
            f"Catalog fetch from {url} returned HTTP {resp.status_code}"
        )
    return resp.text


def _read_text(path: Path) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        raise CatalogError(f"Failed to read catalog {path}: {exc}") from exc


def parse_catalog(text: str) -> list[Product]:
    """Decode a JSON array of product records, keeping file order.

    Raises :class:`CatalogError` on invalid JSON, a non-array document,
    a non-object record or a record missing ``id``/``name``/``price``.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog is not valid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CatalogError("Catalog must be a JSON array of products")

    products: list[Product] = []
    for idx, record in enumerate(cast(list[Any], data)):
        if not isinstance(record, dict):
            raise CatalogError(f"Catalog record #{idx} is not an object")
        try:
            products.append(Product.from_dict(cast(dict[str, Any], record)))
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(
                f"Catalog record #{idx} is invalid: {exc!r}"
            ) from exc
    return products


def load_catalog(source: str | Path | None = None) -> list[Product]:
    """Load the full product collection once for a view.

    *source* may be a filesystem path or an http(s) URL and defaults to
    ``Settings.CATALOG_PATH``.
    """
    location = str(source if source is not None else Settings.CATALOG_PATH)

    if _is_url(location):
        text = _fetch_text(location)
    else:
        text = _read_text(Path(location))

    products = parse_catalog(text)
    logger.info("Loaded %d products from %s", len(products), location)
    return products
