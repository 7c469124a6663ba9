"""liri command line.

`liri COMMAND [CRITERIA]`: only the first two positional tokens are read;
anything after them is accepted and ignored. Every outcome (results,
notices, provider errors) exits with status 0.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich.console import Console

from cli.ui_components import build_hooks
from core.config import AppSettings
from core.domain.commands import Command, ParsedInvocation
from core.services.dispatcher import Dispatcher, DispatchOutcome

_COMMANDS_HELP = ", ".join(command.value for command in Command)

app = typer.Typer(add_completion=False, help="Search concerts, songs and movies from the terminal.")

_console = Console()


def execute(invocation: ParsedInvocation, *, settings: AppSettings | None = None) -> DispatchOutcome:
    """Run one invocation against the real providers."""

    dispatcher = Dispatcher.from_settings(settings, hooks=build_hooks(_console))
    return asyncio.run(dispatcher.dispatch(invocation))


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def liri(
    ctx: typer.Context,
    command: Optional[str] = typer.Argument(None, help=f"One of: {_COMMANDS_HELP}."),
    criteria: Optional[str] = typer.Argument(None, help="Artist, song or movie title (quote multi-word values)."),
) -> None:
    """Dispatch COMMAND with CRITERIA to the matching provider."""

    # ctx.args holds the ignored extra tokens.
    execute(ParsedInvocation.from_tokens(command, criteria), settings=AppSettings())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
