"""Provider contracts.

Why Protocol:
- Structural contracts (duck typing) without rigid inheritance.
- The dispatcher depends on these, so tests can hand it in-memory fakes
  and the HTTP adapters stay swappable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import EventRecord, MovieRecord, TrackSearch
from core.domain.results import ProviderResult


@runtime_checkable
class EventsProvider(Protocol):
    async def fetch_events(self, artist: str) -> ProviderResult[list[EventRecord]]:
        """Upcoming events for `artist`."""

        ...


@runtime_checkable
class TrackProvider(Protocol):
    async def search_tracks(self, query: str) -> ProviderResult[TrackSearch]:
        """Tracks matching `query`, in provider order."""

        ...


@runtime_checkable
class MovieProvider(Protocol):
    async def lookup_movie(self, title: str) -> ProviderResult[MovieRecord]:
        """The movie best matching `title`."""

        ...
