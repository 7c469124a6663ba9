"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console

from adapters.http_client import build_async_client
from cli.ui_components import build_doctor_table
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    table = build_doctor_table()

    if settings.spotify_id and settings.spotify_secret:
        table.add_row("Spotify keys", "OK", "spotify-this-song enabled")
    else:
        table.add_row("Spotify keys", "MISSING", "Run `liri-doctor setup-spotify` or set SPOTIFY_ID/SPOTIFY_SECRET")
    table.add_row("Replay file", "OK" if settings.replay_file.exists() else "MISSING", str(settings.replay_file))

    endpoints = {
        "Bandsintown": settings.bands_base_url,
        "Spotify": settings.spotify_api_url,
        "OMDb": settings.omdb_base_url,
    }
    for name, url in endpoints.items():
        ok, detail = asyncio.run(_check_http(url, settings))
        table.add_row(f"{name} connectivity", "OK" if ok else "FAIL", detail)

    _console.print(table)


@app.command(name="setup-spotify")
def setup_spotify() -> None:
    """Interactive Spotify setup (stores the keys in the user config .env)."""

    client_id = typer.prompt("Spotify client id").strip()
    client_secret = typer.prompt("Spotify client secret", hide_input=True, confirmation_prompt=False).strip()

    if not client_id or not client_secret:
        raise typer.BadParameter("client id and client secret are required")

    env_path = write_user_env_vars(
        {
            "SPOTIFY_ID": client_id,
            "SPOTIFY_SECRET": client_secret,
        }
    )

    _console.print(f"[green]Saved Spotify config to:[/green] {env_path}")
