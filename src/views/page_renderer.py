# src/views/page_renderer.py

"""Renders the catalog as an HTML document with a table and a card grid."""

import logging
from collections.abc import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from src.config.settings import Settings
from src.models.fetch_result import FetchErr, FetchFailure, FetchResult
from src.models.product import ProductRecord
from src.services.catalog_fetcher import CatalogSource, ProductFetcher
from src.views.formatting import (
    format_price,
    format_rating,
    format_review_line,
)

logger = logging.getLogger("product_showcase.renderer")


def _build_environment() -> Environment:
    """Jinja environment with HTML autoescaping and display filters."""
    env = Environment(
        loader=FileSystemLoader(Settings.TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )
    env.filters["price"] = format_price
    env.filters["rating"] = format_rating
    env.filters["review_line"] = format_review_line
    return env


_env = _build_environment()


def render_table(records: Sequence[ProductRecord]) -> str:
    """Table view: fixed header row, then one row per record in order."""
    return _env.get_template("table.html").render(
        columns=Settings.TABLE_COLUMNS,
        records=records,
    )


def render_cards(records: Sequence[ProductRecord]) -> str:
    """Card view: one card per record in order."""
    return _env.get_template("cards.html").render(records=records)


def render_page(
    records: Sequence[ProductRecord],
    failure: FetchFailure | None = None,
) -> str:
    """Compose heading, inline styles, table and cards into one document.

    *failure* only changes the output when ``SHOW_FETCH_ERRORS`` is on;
    otherwise a failed fetch looks exactly like an empty catalog.
    """
    show_failure = failure is not None and Settings.SHOW_FETCH_ERRORS
    return _env.get_template("page.html").render(
        title=Settings.PAGE_TITLE,
        failure=failure if show_failure else None,
        table=Markup(render_table(records)),
        cards=Markup(render_cards(records)),
    )


def render(result: FetchResult) -> str:
    """Render the page for a fetch result; never raises on a failed fetch."""
    if isinstance(result, FetchErr):
        return render_page((), failure=result.failure)
    return render_page(result.records)


class ProductPageRenderer:
    """Fetch-then-render orchestrator for one page request.

    Holds no records between calls: every :meth:`page` call fetches
    a fresh catalog from *source*.
    """

    def __init__(self, source: CatalogSource | None = None) -> None:
        self.source: CatalogSource = source or ProductFetcher()

    def load(self) -> FetchResult:
        """Fetch a fresh catalog from the source."""
        return self.source.fetch_result()

    def render(self, result: FetchResult) -> str:
        """Render *result*, logging how many records made it onto the page."""
        html = render(result)
        logger.debug(
            "Rendered page with %d records (ok=%s)",
            len(result.records),
            result.ok,
        )
        return html

    def page(self) -> str:
        """Fetch the catalog and return the rendered document."""
        return self.render(self.load())
