"""Output utilities for CLI commands with clear intent.

- user_output: diagnostics and progress for the operator (stderr)
- machine_output: values meant to be captured by scripts (stdout)
- render_table: rich table rendering for listings
"""

from collections.abc import Iterable

import click
from rich.console import Console
from rich.table import Table


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write an operator-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write a script-consumable value to stdout."""
    click.echo(message, nl=nl)


def render_table(
    title: str,
    columns: list[str],
    rows: Iterable[Iterable[str]],
) -> None:
    """Print rows as a rich table to stdout.

    Args:
        title: Table title
        columns: Column headers
        rows: Row values, one iterable of cells per row
    """
    table = Table(title=title, title_justify="left")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    console = Console(file=click.get_text_stream("stdout"), highlight=False)
    console.print(table)
