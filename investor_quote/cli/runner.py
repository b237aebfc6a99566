# investor_quote/cli/runner.py

"""Headless CLI runner for the investor page quote."""

import json
import logging
import sys

from playwright.async_api import Error as PlaywrightError
from rich.console import Console
from rich.table import Table

from investor_quote.browser.session import BrowserSession
from investor_quote.extractors.price_extractor import PriceNotFound
from investor_quote.models.stock_snapshot import StockSnapshot
from investor_quote.pages.investor_page import MicrosoftInvestorPage
from investor_quote.services.page_checker import check_investor_page
from investor_quote.storage.artifact_manager import ArtifactManager

logger = logging.getLogger("investor_quote.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(snapshot: StockSnapshot) -> None:
    """Render a Rich table of the snapshot to stdout."""
    table = Table(
        title="Microsoft Stock",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Price", f"[green]${snapshot.price}[/green]")
    table.add_row("Currency", snapshot.currency)
    table.add_row("Change", snapshot.change or "—")
    table.add_row("Source", snapshot.source)
    table.add_row("Retrieved", snapshot.timestamp)
    if snapshot.page_title:
        table.add_row("Page title", snapshot.page_title)

    Console().print(table)


async def cli_quote(
    output_format: str = "json",
    screenshot: bool = False,
    headless: bool | None = None,
) -> int:
    """Fetch the current quote and return an exit code (0=ok, 1=fail)."""
    _err.print("[bold]Fetching Microsoft stock price...[/bold]")
    try:
        async with BrowserSession(headless=headless) as page:
            investor_page = MicrosoftInvestorPage(page)
            await investor_page.goto()
            # Screenshot before extraction so a failed run still leaves one
            if screenshot:
                path = ArtifactManager().screenshot_path()
                await investor_page.screenshot(path)
                _err.print(f"[dim]Screenshot → {path}[/dim]")
            snapshot = await investor_page.read_stock_info()
    except PriceNotFound as exc:
        logger.error("Quote failed: %s", exc, exc_info=True)
        _err.print(f"[red]{exc}[/red]")
        return 1
    except PlaywrightError as exc:
        logger.error("Browser error: %s", exc, exc_info=True)
        _err.print(f"[red]Browser error: {exc}[/red]")
        return 1

    _err.print(
        f"[green]✓ Microsoft Current Stock Price: ${snapshot.price}[/green]"
    )
    if output_format == "table":
        _print_table(snapshot)
    else:
        json.dump(snapshot.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


async def run_page_check(headless: bool | None = None) -> int:
    """Check that the investor page loads with the expected URL/title."""
    _err.print("[bold]Checking investor page...[/bold]")
    try:
        async with BrowserSession(headless=headless) as page:
            result = await check_investor_page(MicrosoftInvestorPage(page))
    except PlaywrightError as exc:
        logger.error("Browser error: %s", exc, exc_info=True)
        _err.print(f"[red]Browser error: {exc}[/red]")
        return 1

    table = Table(
        title="Investor Page Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Title")
    table.add_column("Notes", style="dim")

    if result.status == "ok":
        status = "[green]✅ OK[/green]"
    elif result.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = (
        f"{result.latency_ms:.0f}ms" if result.latency_ms > 0 else "—"
    )
    table.add_row(status, latency, result.title or "—", result.message)

    Console().print(table)
    return 1 if result.status == "down" else 0
