"""Table rendering for list and get commands."""

from dataclasses import fields, is_dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Sequence

import click
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


def format_cell(value: Any) -> str:
    """Render one value as table text."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="seconds")
    if isinstance(value, Decimal):
        return f"{value:.2f}"
    return str(value)


def build_table(records: Sequence[Any], title: str) -> Table:
    """Build a titled, bordered table with one column per dataclass field."""
    table = Table(title=title, box=box.ROUNDED, show_lines=False, header_style="bold")
    columns = [f.name for f in fields(records[0])]
    for column in columns:
        table.add_column(column)
    for record in records:
        # Text() keeps user data such as "[groceries]" from being read as markup
        table.add_row(*(Text(format_cell(getattr(record, column))) for column in columns))
    return table


def print_table(records: Sequence[Any], title: str, console: Optional[Console] = None) -> None:
    """Print records as a table, or a short notice when there are none.

    Args:
        records: Homogeneous dataclass instances
        title: Table title, also used in the empty notice
        console: Console to print on (defaults to one writing to stdout)
    """
    if not records:
        click.echo(f"No {title.lower()} found.")
        return
    if not is_dataclass(records[0]):
        raise TypeError(f"Expected dataclass records, got {type(records[0]).__name__}")
    (console or Console()).print(build_table(records, title))
