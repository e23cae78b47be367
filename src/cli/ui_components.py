"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets tests and future commands reuse the same console setup.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from core.domain.models import TokenHelp
from core.services.feed_auth import AuthResult


def build_consoles() -> tuple[Console, Console]:
    """Return `(stdout, stderr)` consoles.

    soft_wrap keeps long paths and URLs on one line.
    """

    out = Console(highlight=False, soft_wrap=True)
    err = Console(stderr=True, highlight=False, soft_wrap=True)
    return out, err


def configure_logging(console: Console, *, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")


def print_token_help(console: Console, help_: TokenHelp) -> None:
    console.print(f"Please generate a PAT at: [cyan]{escape(help_.tokens_url)}[/cyan]")
    console.print(f"Permissions required: [green]{escape(help_.permission)}[/green]")


def build_feeds_table(result: AuthResult) -> Table:
    table = Table(title=f"Feeds authenticated in {result.target}")
    table.add_column("Organization", style="cyan", no_wrap=True)
    table.add_column("Project", style="white")
    table.add_column("Feed", style="green")
    table.add_column("Registry", style="magenta")
    for feed in result.feeds:
        table.add_row(feed.organization, feed.project or "-", feed.feed, feed.key_prefix)
    return table


def print_result(out: Console, err: Console, result: AuthResult) -> None:
    for update in result.rewrite.duplicates:
        err.print(
            f"[yellow]Warning:[/yellow] {escape(update.key)} appears on {update.matches} lines "
            f"in {escape(str(result.target))}; all of them were updated."
        )
    out.print(build_feeds_table(result))
    out.print("[bold green]Authentication successful.[/bold green]")
