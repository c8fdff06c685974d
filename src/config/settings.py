# src/config/settings.py

"""Central configuration for the product_showcase page."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the product_showcase page."""

    # --- Catalog ---
    CATALOG_URL: str = "https://fakestoreapi.com/products"

    # --- Page ---
    PAGE_ROUTE: str = "/product"
    PAGE_TITLE: str = "Product Showcase"
    CURRENCY_SYMBOL: str = "$"
    RATING_GLYPH: str = "★"
    TABLE_COLUMNS: list[str] = [
        "ID",
        "Image",
        "Title",
        "Category",
        "Price",
        "Rating",
        "Stock (Count)",
    ]
    # Off: a failed fetch renders exactly like an empty catalog
    SHOW_FETCH_ERRORS: bool = (
        os.getenv("SHOWCASE_SHOW_FETCH_ERRORS", "").lower()
        in ("1", "true", "yes")
    )

    # --- Server ---
    HOST: str = os.getenv("SHOWCASE_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("SHOWCASE_PORT", "8000"))

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = (
        os.getenv("SHOWCASE_CONSOLE_LOG_LEVEL", "WARNING").upper()
    )

    # --- Health ---
    SLOW_THRESHOLD_MS: float = 5000.0

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    TEMPLATES_DIR: Path = BASE_DIR / "src" / "views" / "templates"
    EXPORTS_DIR: Path = BASE_DIR / "exports"
    LOGS_DIR: Path = BASE_DIR / "logs"
