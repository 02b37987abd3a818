"""
Rich output helpers shared by the pagemap commands.

Status lines carry a one-character mark; results are shown as a rounded
panel of labelled fields or a rounded table.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

T = TypeVar("T")

console = Console()

ACCENT = "cyan"

# kind -> (mark, style)
_MARKS = {
    "success": ("✓", "bold green"),
    "error": ("✗", "bold red"),
    "warning": ("⚠", "bold yellow"),
    "info": ("i", ACCENT),
}


def _status(kind: str, message: str) -> None:
    mark, style = _MARKS[kind]
    console.print(f"[{style}]{mark}[/{style}] {message}")


def print_success(message: str) -> None:
    _status("success", message)


def print_error(message: str) -> None:
    _status("error", message)


def print_warning(message: str) -> None:
    _status("warning", message)


def print_info(message: str) -> None:
    _status("info", message)


def show_fields(title: str, fields: Mapping[str, Any], border_style: str = "green") -> None:
    """Panel with one ``Label: value`` line per field; None values are left out."""
    lines = [f"[bold]{label}:[/bold] {value}" for label, value in fields.items() if value is not None]
    console.print(Panel("\n".join(lines), title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED))


def show_table(columns: Sequence[str], rows: Sequence[Sequence[Any]], title: str | None = None) -> None:
    """Rounded table; None cells render as ``-``."""
    table = Table(title=title, box=box.ROUNDED, header_style=f"bold {ACCENT}")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*("-" if cell is None else str(cell) for cell in row))
    console.print(table)


def run_with_status(message: str, task_fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``task_fn`` under a spinner and return its result."""
    with console.status(f"[bold {ACCENT}]{message}[/bold {ACCENT}]"):
        return task_fn(*args, **kwargs)
