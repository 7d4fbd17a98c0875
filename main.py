# main.py

"""Entry point for the product_grid application (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from product_grid.config.logging_config import setup_logging
from product_grid.config.settings import ApiConfig
from product_grid.errors import ConfigError

logger = logging.getLogger("product_grid.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="product_grid",
        description="Browse the SUZURI product catalogue as a card grid.",
    )
    parser.add_argument(
        "-p",
        "--pages",
        type=int,
        default=None,
        help="Fetch this many pages headlessly instead of launching the TUI.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for headless mode (default: json).",
    )
    return parser


def _run_tui(config: ApiConfig) -> None:
    """Launch the interactive Textual grid."""
    from product_grid.api.product_request import create_client
    from product_grid.store.product_list_store import ProductListStore
    from product_grid.ui.app import ProductGridApp

    store = ProductListStore(config, client=create_client())
    try:
        app = ProductGridApp(store)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("product_grid TUI shutting down")


def _run_cli(config: ApiConfig, args: argparse.Namespace) -> None:
    """Fetch pages headlessly and exit."""
    from product_grid.cli.runner import cli_fetch

    exit_code = asyncio.run(
        cli_fetch(
            config=config,
            pages=args.pages,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def main() -> None:
    """Resolve configuration, then route to the TUI or the headless CLI."""
    log_file = setup_logging()
    logger.info("product_grid starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()
    if args.pages is not None and args.pages < 1:
        parser.error("--pages must be at least 1")

    try:
        config = ApiConfig.from_env()
    except ConfigError as exc:
        logger.critical("Configuration error: %s", exc)
        sys.exit(2)

    if args.pages is None:
        _run_tui(config)
    else:
        _run_cli(config, args)


if __name__ == "__main__":
    main()
