# src/views/formatting.py

"""Display formatting shared by the HTML views and the CLI table."""

from src.config.settings import Settings
from src.models.product import Rating


def format_price(price: float) -> str:
    """Currency symbol plus exactly two decimals: 9 -> '$9.00'."""
    return f"{Settings.CURRENCY_SYMBOL}{price:.2f}"


def format_rate(rate: float) -> str:
    """Render a rate the way the JSON payload wrote it (4.0 -> '4')."""
    if isinstance(rate, float) and rate.is_integer():
        return str(int(rate))
    return str(rate)


def format_rating(rating: Rating) -> str:
    """Table cell text, e.g. '4.2 ★'."""
    return f"{format_rate(rating.rate)} {Settings.RATING_GLYPH}"


def format_review_line(rating: Rating) -> str:
    """Card text, e.g. '4.2 ★ (38 reviews)'."""
    return f"{format_rating(rating)} ({rating.count} reviews)"
