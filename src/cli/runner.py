# src/cli/runner.py

"""Headless commands: one-off render, catalog listing, health check."""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.config.settings import Settings
from src.models.fetch_result import FetchErr, FetchResult
from src.models.product import ProductRecord
from src.services.catalog_fetcher import ProductFetcher
from src.storage.page_exporter import export_page, write_page
from src.views.formatting import format_price, format_rating
from src.views.page_renderer import ProductPageRenderer

logger = logging.getLogger("product_showcase.cli")

# Stderr console for status messages so stdout stays clean for output
_err = Console(stderr=True)


def _report(result: FetchResult) -> int:
    """Print the fetch outcome to stderr and return the exit code."""
    if isinstance(result, FetchErr):
        _err.print(
            f"[red]Catalog fetch failed ({result.failure.kind}): "
            f"{escape(result.failure.reason)}[/red]"
        )
        return 1
    if not result.records:
        _err.print("[yellow]Catalog is empty.[/yellow]")
    else:
        _err.print(f"[green]✓ {len(result.records)} products[/green]")
    return 0


def _records_to_dicts(
    records: tuple[ProductRecord, ...],
) -> list[dict[str, object]]:
    """Serialise records back to the remote service's JSON shape."""
    return [asdict(r) for r in records]


def _print_table(records: tuple[ProductRecord, ...]) -> None:
    """Render a Rich table with the page's columns, in catalog order."""
    table = Table(
        title=Settings.PAGE_TITLE,
        show_lines=True,
        title_style="bold cyan",
    )
    for label in Settings.TABLE_COLUMNS:
        if label == "Image":
            table.add_column(label, overflow="fold", style="dim")
        elif label == "Title":
            table.add_column(label, max_width=60)
        elif label == "Price":
            table.add_column(label, justify="right", style="green")
        else:
            table.add_column(label, justify="center")

    for r in records:
        table.add_row(
            str(r.id),
            escape(r.image),
            escape(r.title),
            escape(r.category),
            format_price(r.price),
            format_rating(r.rating),
            str(r.rating.count),
        )

    Console().print(table)


def cli_render(
    output_path: str | None = None,
    export: bool = False,
    open_browser: bool = False,
) -> int:
    """Fetch once and emit the HTML page to stdout or a file."""
    renderer = ProductPageRenderer()
    result = renderer.load()
    exit_code = _report(result)
    html = renderer.render(result)

    if output_path is not None:
        path = write_page(html, Path(output_path))
        _err.print(f"[dim]Saved page → {escape(str(path))}[/dim]")
    elif export:
        path = export_page(html, open_browser=open_browser)
        _err.print(f"[dim]Saved page → {escape(str(path))}[/dim]")
    else:
        sys.stdout.write(html)

    return exit_code


def cli_list(output_format: str) -> int:
    """Print the catalog as a table or as JSON."""
    result = ProductFetcher().fetch_result()
    exit_code = _report(result)

    if output_format == "table":
        _print_table(result.records)
    else:
        json.dump(
            _records_to_dicts(result.records),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return exit_code


def run_server(log_file: Path | None = None) -> None:
    """Serve the page with uvicorn until interrupted.

    With *log_file*, uvicorn's own logs are also written to that file.
    """
    import uvicorn
    from uvicorn.config import LOGGING_CONFIG

    from src.config.logging_config import server_log_config

    log_config = (
        server_log_config(log_file) if log_file is not None
        else LOGGING_CONFIG
    )

    _err.print(
        f"[bold]Serving[/bold] http://{Settings.HOST}:{Settings.PORT}"
        f"{Settings.PAGE_ROUTE}"
    )
    uvicorn.run(
        "src.web.app:create_app",
        factory=True,
        host=Settings.HOST,
        port=Settings.PORT,
        log_config=log_config,
    )


def run_health_check() -> int:
    """Run a connectivity check against the catalog endpoint."""
    from src.services.health_checker import probe_catalog

    _err.print("[bold]Running catalog health check...[/bold]")
    r = probe_catalog()

    table = Table(
        title="Catalog Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if r.status == "ok":
        status = "[green]✅ OK[/green]"
    elif r.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = f"{r.latency_ms:.0f}ms" if r.latency_ms > 0 else "—"
    table.add_row(escape(r.url), status, latency, escape(r.message))

    Console().print(table)
    return 1 if r.status == "down" else 0
