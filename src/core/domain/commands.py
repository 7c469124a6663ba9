"""Commands accepted by liri.

This module owns the closed set of command tokens and the immutable
invocation value built from the command line. Unknown tokens are rejected
here, so the dispatcher only ever sees a `Command` or `None`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Command(str, Enum):
    """Supported command tokens."""

    CONCERT_THIS = "concert-this"
    SPOTIFY_THIS_SONG = "spotify-this-song"
    MOVIE_THIS = "movie-this"
    DO_WHAT_IT_SAYS = "do-what-it-says"

    @classmethod
    def parse(cls, token: str | None) -> "Command | None":
        """Return the command matching `token` exactly, or None."""

        if not token:
            return None
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass(frozen=True)
class ParsedInvocation:
    """Command and criteria for one run.

    `token` keeps the raw command text so notices can echo what the user
    typed even when it did not parse.
    """

    command: Command | None
    token: str | None = None
    criteria: str | None = None

    @classmethod
    def from_tokens(cls, token: str | None, criteria: str | None = None) -> "ParsedInvocation":
        return cls(command=Command.parse(token), token=token, criteria=criteria)
