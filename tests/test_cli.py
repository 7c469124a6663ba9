from __future__ import annotations

from typer.testing import CliRunner

import cli.main as cli_main
from core.domain.results import NotFound
from core.services.dispatcher import Dispatcher

runner = CliRunner()


class _NotFoundProvider:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def fetch_events(self, artist: str):
        self.calls.append(artist)
        return NotFound(criteria=artist)

    async def search_tracks(self, query: str):
        self.calls.append(query)
        return NotFound(criteria=query)

    async def lookup_movie(self, title: str):
        self.calls.append(title)
        return NotFound(criteria=title)


def _install_fake(monkeypatch) -> _NotFoundProvider:
    provider = _NotFoundProvider()

    def _from_settings(cls, settings=None, *, hooks=None):
        return cls(events=provider, tracks=provider, movies=provider, settings=settings, hooks=hooks)

    monkeypatch.setattr(Dispatcher, "from_settings", classmethod(_from_settings))
    return provider


def test_invalid_command_exits_zero_with_notice(monkeypatch) -> None:
    provider = _install_fake(monkeypatch)

    result = runner.invoke(cli_main.app, ["dance-this", "Muse"])

    assert result.exit_code == 0
    assert "Missing or invalid command argument. Try again." in result.output
    assert provider.calls == []


def test_no_arguments_is_an_invalid_command(monkeypatch) -> None:
    _install_fake(monkeypatch)

    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert "Missing or invalid command argument. Try again." in result.output


def test_only_first_criteria_token_is_read(monkeypatch) -> None:
    provider = _install_fake(monkeypatch)

    result = runner.invoke(cli_main.app, ["movie-this", "Alien", "Resurrection"])

    assert result.exit_code == 0
    assert provider.calls == ["Alien"]
    assert "No movie found for: Alien." in result.output


def test_default_criteria_notice_is_printed(monkeypatch) -> None:
    provider = _install_fake(monkeypatch)

    result = runner.invoke(cli_main.app, ["spotify-this-song"])

    assert result.exit_code == 0
    assert provider.calls == ["The Sign"]
    assert "No song specified, using default: The Sign" in result.output
    assert "-" * 80 in result.output
