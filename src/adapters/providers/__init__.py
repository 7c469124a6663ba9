"""Data providers (concrete HTTP clients).

Why a package:
- One module per provider (Bandsintown, Spotify, OMDb).
- Each module implements one of the `core.interfaces.provider` contracts.
"""

from adapters.providers.bandsintown import BandsInTownClient
from adapters.providers.omdb import OmdbClient
from adapters.providers.spotify import SpotifyClient

__all__ = [
	"BandsInTownClient",
	"OmdbClient",
	"SpotifyClient",
]
