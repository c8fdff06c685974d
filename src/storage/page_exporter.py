# src/storage/page_exporter.py

"""Writes rendered showcase pages to disk."""

import logging
import webbrowser
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

logger = logging.getLogger("product_showcase.storage")


def _ensure_exports_dir() -> Path:
    """Create the exports directory if it doesn't exist."""
    exports_dir: Path = Settings.EXPORTS_DIR
    exports_dir.mkdir(parents=True, exist_ok=True)
    return exports_dir


def write_page(html: str, filepath: Path) -> Path:
    """Write *html* to *filepath*, creating parent directories."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(html, encoding="utf-8")
    logger.info("Page saved to %s", filepath)
    return filepath


def export_page(html: str, open_browser: bool = False) -> Path:
    """Save *html* as a timestamped file under ``exports/``."""
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = _ensure_exports_dir() / f"showcase_{stamp}.html"
    write_page(html, filepath)

    if open_browser:
        webbrowser.open(filepath.as_uri())

    return filepath
