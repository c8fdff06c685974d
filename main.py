# main.py

"""Entry point for product_showcase (web server or headless CLI)."""

import argparse
import logging
import sys
from pathlib import Path

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("product_showcase.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="product_showcase",
        description="Server-rendered product catalog page.",
        epilog=f"Catalog endpoint: {Settings.CATALOG_URL}",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--render",
        action="store_true",
        default=False,
        help="Fetch once and write the HTML page instead of serving it.",
    )
    mode.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default=None,
        dest="output_format",
        help="Print the catalog to stdout as JSON or a table.",
    )
    mode.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Run a connectivity health check on the catalog endpoint.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_path",
        help="With --render: write the page to this file.",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        default=False,
        help="With --render: save a timestamped copy under exports/.",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        default=False,
        dest="open_browser",
        help="With --render --export: open the saved page in a browser.",
    )
    return parser


def _run_server(log_file: Path) -> None:
    """Serve the page over HTTP."""
    from src.cli.runner import run_server

    try:
        run_server(log_file)
    except Exception:
        logger.critical("Fatal error while serving", exc_info=True)
        raise
    finally:
        logger.info("product_showcase server shutting down")


def _run_render(args: argparse.Namespace) -> None:
    """Render the page once and exit."""
    from src.cli.runner import cli_render

    exit_code = cli_render(
        output_path=args.output_path,
        export=args.export,
        open_browser=args.open_browser,
    )
    sys.exit(exit_code)


def _run_list(args: argparse.Namespace) -> None:
    """Print the catalog and exit."""
    from src.cli.runner import cli_list

    exit_code = cli_list(args.output_format)
    sys.exit(exit_code)


def _run_health_check() -> None:
    """Run catalog connectivity health check."""
    from src.cli.runner import run_health_check

    exit_code = run_health_check()
    sys.exit(exit_code)


def main() -> None:
    """Route to the server (no flags) or a headless command."""
    log_file = setup_logging()
    logger.info("product_showcase starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.health:
        _run_health_check()
    elif args.render:
        _run_render(args)
    elif args.output_format is not None:
        _run_list(args)
    else:
        _run_server(log_file)


if __name__ == "__main__":
    main()
