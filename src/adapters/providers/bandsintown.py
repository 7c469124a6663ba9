"""Provider: Bandsintown.

- Upcoming events per artist via the public REST API.
- Unknown artists come back as an error object instead of a list; that is
  treated as "no events", not as a failure.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import EventRecord
from core.domain.results import Found, NotFound, ProviderResult, TransportFailure
from core.interfaces.provider import EventsProvider

_EVENTS = TypeAdapter(list[EventRecord])


class BandsInTownClient(EventsProvider):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def events_url(self, artist: str) -> str:
        base = self._settings.bands_base_url.rstrip("/")
        return f"{base}/artists/{quote(artist, safe='')}/events"

    async def fetch_events(self, artist: str) -> ProviderResult[list[EventRecord]]:
        url = self.events_url(artist)
        params = {"app_id": self._settings.bands_app_id}

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list) or not data:
                detail = data.get("errorMessage") if isinstance(data, dict) else None
                return NotFound(criteria=artist, detail=detail)
            events = _EVENTS.validate_python(data)
        except (httpx.HTTPError, ValidationError, ValueError) as exc:
            return TransportFailure(error=exc)

        return Found(events)
