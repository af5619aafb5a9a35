"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.table import Table

from ..core.models import ExtractionOutcome, SkippedRoute

console = Console()


def print_report(text: str) -> None:
    """Print a rendered report as-is, without markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def format_outcome_json(outcome: ExtractionOutcome) -> str:
    """Format an extraction outcome as JSON."""
    return json.dumps(outcome.model_dump(mode="json"), ensure_ascii=False, indent=2)


def format_skipped_table(skipped: list[SkippedRoute]) -> None:
    """Display skipped route blocks as a rich table."""
    if not skipped:
        return

    table = Table(
        title="Skipped Routes", show_header=True, header_style="bold magenta"
    )
    table.add_column("Route", style="cyan", no_wrap=True)
    table.add_column("Block ID", style="yellow")
    table.add_column("Reason", style="red")

    for item in skipped:
        table.add_row(str(item.route_number), item.block_id or "-", item.reason)

    console.print(table)
