"""CLI main entry point for Japan transfer search."""

import logging
import sys
from datetime import datetime
from functools import partial
from pathlib import Path

import click
from rich.console import Console

from ..core import (
    BudgetTruncator,
    DocumentFormatError,
    NetworkError,
    RouteSearchParser,
    TransferSearch,
    ValidationError,
    render_route_search,
    tiktoken_counter,
)
from ..core.client import JorudanClient
from ..utils.japan_time import DATETIME_FORMAT, JST
from .formatters import format_outcome_json, format_skipped_table, print_report

console = Console()
error_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Japan Transfer Search - Search routes on the Jorudan transfer guide."""
    pass


@cli.command()
@click.argument("from_place")
@click.argument("to_place")
@click.option(
    "--datetime-type",
    "-t",
    type=click.Choice(["departure", "arrival", "first", "last"]),
    default="departure",
    help="How the datetime is interpreted",
)
@click.option(
    "--datetime",
    "-d",
    "datetime_text",
    help="Search datetime (YYYY-MM-DD HH:MM[:SS], default: now in Japan)",
    type=str,
)
@click.option(
    "--max-tokens",
    "-m",
    type=int,
    help="Token budget for the text report (ignored with --format json)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--timeout", default=30, help="Request timeout in seconds")
@click.option(
    "--save-html",
    help="Save raw HTML response to file for debugging",
    type=click.Path(),
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def search(
    from_place: str,
    to_place: str,
    datetime_type: str,
    datetime_text: str | None,
    max_tokens: int | None,
    output_format: str,
    timeout: int,
    save_html: str | None,
    verbose: bool,
) -> None:
    """Search for routes between two places.

    Examples:
        japan-transfer search "東京" "新宿"
        japan-transfer search "取手" "京都" --datetime "2025-07-10 09:00"
        japan-transfer search "渋谷" "品川" --format json
    """
    _configure_logging(verbose)
    try:
        searcher = TransferSearch(client=JorudanClient(timeout=timeout))

        with console.status(
            f"[bold green]Searching route from {from_place} to {to_place}..."
        ):
            outcome, document, searched_at = searcher.fetch_route_outcome(
                from_place,
                to_place,
                datetime_type,  # type: ignore[arg-type]
                datetime_text,
                save_html,
            )

        if output_format == "json":
            click.echo(format_outcome_json(outcome))
            return

        print_report(
            searcher.render_outcome(
                outcome,
                document.final_url,
                from_place,
                to_place,
                searched_at,
                max_tokens,
            )
        )
        format_skipped_table(outcome.skipped)

    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except NetworkError as e:
        error_console.print(f"[red]Network error:[/red] {e}")
        sys.exit(1)
    except DocumentFormatError as e:
        error_console.print(f"[red]Unexpected page:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


@cli.command()
@click.argument("query")
@click.option("--only-name", "-n", is_flag=True, help="Show place names only")
@click.option("--max-tokens", "-m", type=int, help="Token budget for the list")
@click.option("--timeout", default=30, help="Request timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def places(
    query: str, only_name: bool, max_tokens: int | None, timeout: int, verbose: bool
) -> None:
    """Search stations, bus stops and spots by name.

    Examples:
        japan-transfer places "取手"
        japan-transfer places "京都" --only-name
    """
    _configure_logging(verbose)
    try:
        searcher = TransferSearch(client=JorudanClient(timeout=timeout))
        text = searcher.search_places(query, max_tokens=max_tokens, only_name=only_name)

        if not text:
            error_console.print("[yellow]No places found[/yellow]")
            return

        click.echo(text)

    except (ValidationError, NetworkError) as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


@cli.command()
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--from", "from_place", default="", help="Departure name for the header")
@click.option("--to", "to_place", default="", help="Arrival name for the header")
@click.option("--url", "source_url", default="", help="Source URL for the header")
@click.option(
    "--max-tokens",
    "-m",
    type=int,
    help="Token budget for the text report (ignored with --format json)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def parse(
    html_file: str,
    from_place: str,
    to_place: str,
    source_url: str,
    max_tokens: int | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Parse a saved results page (see search --save-html) without network access.

    Examples:
        japan-transfer parse result.html --from "東京" --to "新宿"
    """
    _configure_logging(verbose)
    try:
        path = Path(html_file)
        outcome = RouteSearchParser().parse(path.read_text(encoding="utf-8"))

        if output_format == "json":
            click.echo(format_outcome_json(outcome))
            return

        saved_at = datetime.fromtimestamp(path.stat().st_mtime, JST)
        render = partial(
            render_route_search,
            source_url=source_url or path.resolve().as_uri(),
            origin=from_place,
            destination=to_place,
            query_datetime=saved_at.strftime(DATETIME_FORMAT),
        )
        truncator = BudgetTruncator(tiktoken_counter())
        print_report(truncator.truncate(outcome.result, render, max_tokens))
        format_skipped_table(outcome.skipped)

    except DocumentFormatError as e:
        error_console.print(f"[red]Unexpected page:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            error_console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    cli()
