# main.py

"""Entry point for the investor_quote CLI."""

import argparse
import asyncio
import logging
import sys

from investor_quote.config.logging_config import setup_logging
from investor_quote.config.settings import Settings

logger = logging.getLogger("investor_quote.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="investor_quote",
        description="Fetch the current Microsoft share price.",
        epilog=f"Source: {Settings.INVESTOR_URL}",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--screenshot",
        action="store_true",
        default=False,
        help="Save a full-page screenshot to test-results/.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        default=False,
        help="Only verify the page URL and title.",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        default=False,
        help="Show the browser window.",
    )
    return parser


def main() -> None:
    """Route to the page check or the quote fetch."""
    log_file = setup_logging()
    logger.info("investor_quote starting, log file: %s", log_file)

    args = _build_parser().parse_args()
    headless = False if args.headed else None

    from investor_quote.cli.runner import cli_quote, run_page_check

    if args.check:
        exit_code = asyncio.run(run_page_check(headless=headless))
    else:
        exit_code = asyncio.run(
            cli_quote(
                output_format=args.output_format,
                screenshot=args.screenshot,
                headless=headless,
            )
        )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
