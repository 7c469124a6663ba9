"""Provider: OMDb.

- One title lookup (`?t=`) with the short plot.
- OMDb always answers 200; whether the title exists is in the `Response`
  field of the body ("True"/"False").
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import MovieRecord
from core.domain.results import Found, NotFound, ProviderResult, TransportFailure
from core.errors import ProviderResponseError
from core.interfaces.provider import MovieProvider


def _response_flag(data: dict[str, Any]) -> bool:
    flag = data.get("Response")
    if isinstance(flag, bool):
        return flag
    if isinstance(flag, str) and flag.strip().lower() in {"true", "false"}:
        return flag.strip().lower() == "true"
    raise ProviderResponseError(f"OMDb response has no usable Response flag: {flag!r}")


class OmdbClient(MovieProvider):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def lookup_movie(self, title: str) -> ProviderResult[MovieRecord]:
        url = self._settings.omdb_base_url.rstrip("/") + "/"
        params = {
            "t": title,
            "y": "",
            "plot": "short",
            "apikey": self._settings.omdb_api_key,
        }

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                raise ProviderResponseError("OMDb response is not a JSON object")
            if not _response_flag(data):
                return NotFound(criteria=title, detail=data.get("Error"))
            movie = MovieRecord.model_validate(data)
        except (httpx.HTTPError, ProviderResponseError, ValidationError, ValueError) as exc:
            return TransportFailure(error=exc)

        return Found(movie)
