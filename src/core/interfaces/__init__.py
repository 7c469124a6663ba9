"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by the concrete adapters.
- Inverts dependencies: the core depends on abstractions.
"""

from core.interfaces.provider import EventsProvider, MovieProvider, TrackProvider

__all__ = [
	"EventsProvider",
	"MovieProvider",
	"TrackProvider",
]
