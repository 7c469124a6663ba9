"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Provider data is printed with markup and highlighting off, so titles like
  "[Live]" reach the terminal untouched.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.services.dispatcher import DispatchHooks

SEPARATOR_WIDTH = 80


def print_line(console: Console, line: str) -> None:
    console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_separator(console: Console) -> None:
    console.print()
    console.print("-" * SEPARATOR_WIDTH, markup=False, highlight=False, emoji=False, style="dim")


def print_section(console: Console, lines: Sequence[str]) -> None:
    """Separator followed by a block of result lines."""

    print_separator(console)
    for line in lines:
        print_line(console, line)


def print_error(console: Console, exc: BaseException) -> None:
    message = Text(f"{type(exc).__name__}: {exc}", style="red")
    console.print(message, soft_wrap=True)


def build_hooks(console: Console) -> DispatchHooks:
    """Dispatcher hooks that render on `console`."""

    return DispatchHooks(
        line=lambda text: print_line(console, text),
        section=lambda lines: print_section(console, lines),
        error=lambda exc: print_error(console, exc),
    )


def build_doctor_table() -> Table:
    table = Table(title="LIRI Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
