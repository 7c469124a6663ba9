"""Provider: Spotify.

- Client-credentials token, then a single track search.
- Credentials come from settings (`SPOTIFY_ID` / `SPOTIFY_SECRET`).
"""

from __future__ import annotations

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import TrackRecord, TrackSearch
from core.domain.results import Found, NotFound, ProviderResult, TransportFailure
from core.errors import ProviderConfigError, ProviderResponseError
from core.interfaces.provider import TrackProvider

_TRACKS = TypeAdapter(list[TrackRecord])

SEARCH_LIMIT = 20


class SpotifyClient(TrackProvider):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def _access_token(self, client: httpx.AsyncClient) -> str:
        client_id = self._settings.spotify_id
        client_secret = self._settings.spotify_secret
        if not client_id or not client_secret:
            raise ProviderConfigError("Spotify credentials are required (SPOTIFY_ID / SPOTIFY_SECRET)")

        response = await client.post(
            self._settings.spotify_token_url,
            data={"grant_type": "client_credentials"},
            auth=(client_id, client_secret),
        )
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ProviderResponseError("Spotify token response is not a JSON object")
        token = data.get("access_token")
        if not token:
            raise ProviderResponseError("Spotify token response missing access_token")
        return token

    async def search_tracks(self, query: str) -> ProviderResult[TrackSearch]:
        url = self._settings.spotify_api_url.rstrip("/") + "/search"
        params = {"type": "track", "q": query, "limit": SEARCH_LIMIT}

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                token = await self._access_token(client)
                response = await client.get(
                    url,
                    params=params,
                    headers={"Authorization": f"Bearer {token}"},
                )
            response.raise_for_status()
            data = response.json()
            tracks_page = data.get("tracks") if isinstance(data, dict) else None
            if not isinstance(tracks_page, dict):
                raise ProviderResponseError("Spotify search response has no tracks object")
            items = tracks_page.get("items") or []
            tracks = _TRACKS.validate_python(items)
        except (httpx.HTTPError, ProviderConfigError, ProviderResponseError, ValidationError, ValueError) as exc:
            return TransportFailure(error=exc)

        if not tracks:
            return NotFound(criteria=query)
        return Found(TrackSearch(query=query, items=tracks))
