# storefront/config/settings.py

"""Central configuration for the storefront helper."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront helper."""

    # --- Catalog view ---
    PAGE_SIZE: int = 8                  # Products per catalog page
    RELATED_LIMIT: int = 4              # Products in the related strip
    DEFAULT_SORT: str = "featured"
    SORT_KEYS: list[str] = ["featured", "price-asc", "price-desc"]

    # --- Pricing ---
    SHIPPING_FEE: float = 49.0              # Flat fee at or below threshold
    FREE_SHIPPING_THRESHOLD: float = 1000.0
    CURRENCY_SYMBOL: str = "₹"

    # --- Cart persistence ---
    CART_KEY: str = "cuff_cart_v1"      # Storage key for the serialised cart

    # --- Catalog loading ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a catalog fetch times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    CATALOG_PATH: str = os.getenv(
        "STOREFRONT_CATALOG", str(DATA_DIR / "products.json")
    )
    STORAGE_PATH: Path = Path(
        os.getenv("STOREFRONT_STORAGE", str(DATA_DIR / "storage.db"))
    )
    LOGS_DIR: Path = BASE_DIR / "logs"
    LOG_CONSOLE_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING")
