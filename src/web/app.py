# src/web/app.py

"""HTTP host for the showcase page."""

import asyncio
import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from src.config.settings import Settings
from src.services.catalog_fetcher import CatalogSource
from src.views.page_renderer import ProductPageRenderer

logger = logging.getLogger("product_showcase.web")


def create_app(source: CatalogSource | None = None) -> FastAPI:
    """Build the FastAPI application.

    *source* replaces the live catalog client, mainly for tests.
    """
    app = FastAPI(title="Product Showcase", version="0.1.0")
    renderer = ProductPageRenderer(source)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(Settings.PAGE_ROUTE)

    @app.get(Settings.PAGE_ROUTE, response_class=HTMLResponse)
    async def product_page() -> HTMLResponse:
        result = await asyncio.to_thread(renderer.load)
        html = renderer.render(result)
        status = "ok" if result.ok else "error"
        logger.info(
            "GET %s -> %d records (catalog %s)",
            Settings.PAGE_ROUTE,
            len(result.records),
            status,
        )
        return HTMLResponse(
            html, headers={"X-Catalog-Status": status},
        )

    return app
