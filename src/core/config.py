"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) away from the CLI.
- Lets every provider adapter read URLs, keys and timeouts the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "liri"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "liri"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "liri"
    return Path.home() / ".config" / "liri"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write/update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# LIRI user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, .env files).
    - One configuration contract shared by the CLI and the provider adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIRI_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="liri/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to every provider.",
    )

    # Bandsintown
    bands_base_url: str = Field(
        default="https://rest.bandsintown.com",
        min_length=8,
        description="Bandsintown REST base URL.",
    )
    bands_app_id: str = Field(
        default="codingbootcamp",
        min_length=1,
        description="Bandsintown app_id query parameter.",
    )

    # OMDb
    omdb_base_url: str = Field(
        default="http://www.omdbapi.com",
        min_length=8,
        description="OMDb base URL.",
    )
    omdb_api_key: str = Field(
        default="trilogy",
        min_length=1,
        description="OMDb apikey query parameter.",
    )

    # Spotify
    spotify_token_url: str = Field(
        default="https://accounts.spotify.com/api/token",
        min_length=8,
        description="Spotify client-credentials token endpoint.",
    )
    spotify_api_url: str = Field(
        default="https://api.spotify.com/v1",
        min_length=8,
        description="Spotify Web API base URL.",
    )
    spotify_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LIRI_SPOTIFY_ID", "SPOTIFY_ID"),
        description="Spotify client id.",
    )
    spotify_secret: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LIRI_SPOTIFY_SECRET", "SPOTIFY_SECRET"),
        description="Spotify client secret.",
    )

    max_songs: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum number of tracks displayed per search.",
    )
    replay_file: Path = Field(
        default=Path("random.txt"),
        description="File read by do-what-it-says (single line 'command,criteria').",
    )

    default_artist: str = Field(default="Ace of Base", min_length=1)
    default_song: str = Field(default="The Sign", min_length=1)
    default_movie: str = Field(default="Mr. Nobody", min_length=1)
