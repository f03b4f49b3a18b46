"""Shared console helpers for the resource generator.

All operator-facing output goes through Rich.  The helpers write to the
module-level ``console`` unless another ``Console`` is passed in, which is
how the command and the tests capture output.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, out: Console | None = None) -> None:
    """Print a full-width rule announcing the resource being generated."""
    target = out or console
    target.print(Rule(f"[bold bright_green] {escape(title)} [/bold bright_green]", style="bright_green"))


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    out: Console | None = None,
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        out: Console to print to (defaults to the module console).
    """
    target = out or console
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    target.print(table)
    target.print()


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{escape(message)}[/bold yellow]")
