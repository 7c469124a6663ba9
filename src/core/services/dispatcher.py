"""Command dispatch.

This module turns one `ParsedInvocation` into exactly one provider call and
hands the rendered lines to the UI layer through `DispatchHooks`. Printing
stays in the CLI, so the dispatcher can be driven from tests with
in-memory providers and a list collecting the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from core.config import AppSettings
from core.criteria import resolve_criteria
from core.domain.commands import Command, ParsedInvocation
from core.domain.results import Found, NotFound, ProviderResult, TransportFailure
from core.errors import RehydrationError
from core.formatters import (
    events_not_found,
    format_events,
    format_movie,
    format_tracks,
    movie_not_found,
    tracks_not_found,
)
from core.interfaces.provider import EventsProvider, MovieProvider, TrackProvider

INVALID_COMMAND_NOTICE = "Missing or invalid command argument. Try again."
REPLAY_BANNER = "Do What it says"


class OutcomeKind(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    INVALID_COMMAND = "invalid_command"
    REHYDRATION_ERROR = "rehydration_error"


@dataclass(frozen=True)
class DispatchOutcome:
    """What a run ended up doing (the CLI ignores it; tests assert on it)."""

    kind: OutcomeKind
    command: Command | None = None
    criteria: str | None = None


@dataclass
class DispatchHooks:
    """Callbacks for the UI layer.

    - `line`: a bare line, printed as-is.
    - `section`: a block of lines that starts a new separated section.
    - `error`: a raw error from a failed provider call or replay file.
    """

    line: Callable[[str], None] | None = None
    section: Callable[[Sequence[str]], None] | None = None
    error: Callable[[BaseException], None] | None = None

    def emit_line(self, text: str) -> None:
        if self.line:
            self.line(text)

    def emit_section(self, lines: Sequence[str]) -> None:
        if self.section:
            self.section(lines)

    def emit_error(self, exc: BaseException) -> None:
        if self.error:
            self.error(exc)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1].strip()
    return value


def parse_replay_line(content: str) -> ParsedInvocation:
    """Split 'command,criteria' into a new invocation.

    Only the first comma separates the fields, so criteria may contain
    commas of their own.
    """

    if "," not in content:
        raise RehydrationError(f"expected 'command,criteria', got {content.strip()!r}")

    raw_command, raw_criteria = content.split(",", 1)
    token = _strip_quotes(raw_command.strip())
    criteria = _strip_quotes(raw_criteria.strip())
    invocation = ParsedInvocation.from_tokens(token, criteria)
    if invocation.command is Command.DO_WHAT_IT_SAYS:
        raise RehydrationError(f"{Command.DO_WHAT_IT_SAYS.value} cannot replay itself")
    return invocation


def rehydrate(path: Path) -> ParsedInvocation:
    """Read the replay file and build the invocation it describes."""

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RehydrationError(f"cannot read {path}: {exc}") from exc
    return parse_replay_line(content)


_Handler = Callable[["Dispatcher", ParsedInvocation], Awaitable[DispatchOutcome]]


class Dispatcher:
    """Routes a command to its provider and renders the result."""

    def __init__(
        self,
        *,
        events: EventsProvider,
        tracks: TrackProvider,
        movies: MovieProvider,
        settings: AppSettings | None = None,
        hooks: DispatchHooks | None = None,
    ) -> None:
        self._events = events
        self._tracks = tracks
        self._movies = movies
        self._settings = settings or AppSettings()
        self._hooks = hooks or DispatchHooks()

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, *, hooks: DispatchHooks | None = None) -> "Dispatcher":
        """Dispatcher wired to the real HTTP providers."""

        from adapters.providers import BandsInTownClient, OmdbClient, SpotifyClient  # noqa: PLC0415

        settings = settings or AppSettings()
        return cls(
            events=BandsInTownClient(settings),
            tracks=SpotifyClient(settings),
            movies=OmdbClient(settings),
            settings=settings,
            hooks=hooks,
        )

    def _criteria(self, invocation: ParsedInvocation, default: str, label: str) -> str:
        resolution = resolve_criteria(
            invocation.criteria,
            default,
            label,
            notify=lambda notice: self._hooks.emit_section([notice]),
        )
        return resolution.effective

    def _render(
        self,
        invocation: ParsedInvocation,
        criteria: str,
        result: ProviderResult,
        render_found: Callable[[object], list[str]],
        render_not_found: Callable[[str], str],
    ) -> DispatchOutcome:
        if isinstance(result, Found):
            self._hooks.emit_section(render_found(result.value))
            kind = OutcomeKind.FOUND
        elif isinstance(result, NotFound):
            self._hooks.emit_section([render_not_found(criteria)])
            kind = OutcomeKind.NOT_FOUND
        elif isinstance(result, TransportFailure):
            self._hooks.emit_error(result.error)
            kind = OutcomeKind.TRANSPORT_ERROR
        else:
            raise TypeError(f"unexpected provider result: {result!r}")
        return DispatchOutcome(kind=kind, command=invocation.command, criteria=criteria)

    async def concert_this(self, invocation: ParsedInvocation) -> DispatchOutcome:
        artist = self._criteria(invocation, self._settings.default_artist, "artist")
        result = await self._events.fetch_events(artist)
        return self._render(
            invocation,
            artist,
            result,
            lambda events: format_events(artist, events),
            events_not_found,
        )

    async def spotify_this_song(self, invocation: ParsedInvocation) -> DispatchOutcome:
        song = self._criteria(invocation, self._settings.default_song, "song")
        result = await self._tracks.search_tracks(song)
        return self._render(
            invocation,
            song,
            result,
            lambda search: format_tracks(search, cap=self._settings.max_songs),
            tracks_not_found,
        )

    async def movie_this(self, invocation: ParsedInvocation) -> DispatchOutcome:
        title = self._criteria(invocation, self._settings.default_movie, "movie")
        result = await self._movies.lookup_movie(title)
        return self._render(invocation, title, result, format_movie, movie_not_found)

    _HANDLERS: dict[Command, _Handler] = {
        Command.CONCERT_THIS: concert_this,
        Command.SPOTIFY_THIS_SONG: spotify_this_song,
        Command.MOVIE_THIS: movie_this,
    }

    def _replay(self) -> ParsedInvocation:
        path = self._settings.replay_file
        self._hooks.emit_line(REPLAY_BANNER)
        invocation = rehydrate(path)
        self._hooks.emit_section(
            [f"Using {path}: command={invocation.token}, criteria={invocation.criteria}"]
        )
        return invocation

    async def dispatch(self, invocation: ParsedInvocation) -> DispatchOutcome:
        if invocation.command is Command.DO_WHAT_IT_SAYS:
            try:
                invocation = self._replay()
            except RehydrationError as exc:
                self._hooks.emit_error(exc)
                return DispatchOutcome(kind=OutcomeKind.REHYDRATION_ERROR, command=Command.DO_WHAT_IT_SAYS)

        handler = self._HANDLERS.get(invocation.command) if invocation.command else None
        if handler is None:
            self._hooks.emit_section([INVALID_COMMAND_NOTICE])
            return DispatchOutcome(kind=OutcomeKind.INVALID_COMMAND, criteria=invocation.criteria)

        return await handler(self, invocation)
