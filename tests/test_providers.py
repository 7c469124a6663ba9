from __future__ import annotations

import asyncio

import httpx
import pytest

from adapters.providers import BandsInTownClient, OmdbClient, SpotifyClient
from core.config import AppSettings
from core.domain.results import Found, NotFound, TransportFailure
from core.errors import ProviderConfigError, ProviderResponseError


def _settings(**overrides) -> AppSettings:
    values = {"spotify_id": "id", "spotify_secret": "secret"}
    values.update(overrides)
    return AppSettings(**values)


def test_bandsintown_encodes_artist_and_parses_events() -> None:
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(
            200,
            json=[
                {
                    "datetime": "2020-05-01T20:00:00",
                    "venue": {"name": "Paradiso", "city": "Amsterdam", "region": "NH"},
                }
            ],
        )

    client = BandsInTownClient(_settings(), transport=httpx.MockTransport(handler))
    result = asyncio.run(client.fetch_events("AC/DC & Friends"))

    assert isinstance(result, Found)
    assert result.value[0].venue.city == "Amsterdam"
    assert seen[0].raw_path.startswith(b"/artists/AC%2FDC%20%26%20Friends/events")
    assert seen[0].params["app_id"] == "codingbootcamp"


def test_bandsintown_empty_list_is_not_found() -> None:
    client = BandsInTownClient(_settings(), transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])))

    result = asyncio.run(client.fetch_events("Nobody"))

    assert result == NotFound(criteria="Nobody")


def test_bandsintown_error_object_is_not_found() -> None:
    body = {"errorMessage": "[NotFound] The artist was not found"}
    client = BandsInTownClient(_settings(), transport=httpx.MockTransport(lambda request: httpx.Response(200, json=body)))

    result = asyncio.run(client.fetch_events("Nobody"))

    assert isinstance(result, NotFound)
    assert result.detail == "[NotFound] The artist was not found"


def test_bandsintown_server_error_is_transport_failure() -> None:
    client = BandsInTownClient(_settings(), transport=httpx.MockTransport(lambda request: httpx.Response(503)))

    result = asyncio.run(client.fetch_events("Muse"))

    assert isinstance(result, TransportFailure)
    assert isinstance(result.error, httpx.HTTPStatusError)


def test_connection_error_is_transport_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    client = OmdbClient(_settings(), transport=httpx.MockTransport(handler))

    result = asyncio.run(client.lookup_movie("Alien"))

    assert isinstance(result, TransportFailure)
    assert isinstance(result.error, httpx.ConnectError)


def test_omdb_found_uses_response_flag() -> None:
    seen: list[httpx.URL] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(
            200,
            json={
                "Title": "Mr. Nobody",
                "Released": "26 Sep 2013",
                "imdbRating": "7.8",
                "Ratings": [{"Source": "Rotten Tomatoes", "Value": "67%"}],
                "Response": "True",
            },
        )

    client = OmdbClient(_settings(), transport=httpx.MockTransport(handler))
    result = asyncio.run(client.lookup_movie("Mr. Nobody"))

    assert isinstance(result, Found)
    assert result.value.title == "Mr. Nobody"
    assert seen[0].params["t"] == "Mr. Nobody"
    assert seen[0].params["plot"] == "short"
    assert seen[0].params["apikey"] == "trilogy"


def test_omdb_negative_flag_is_not_found() -> None:
    body = {"Response": "False", "Error": "Movie not found!"}
    client = OmdbClient(_settings(), transport=httpx.MockTransport(lambda request: httpx.Response(200, json=body)))

    result = asyncio.run(client.lookup_movie("qwzx"))

    assert result == NotFound(criteria="qwzx", detail="Movie not found!")


def test_spotify_token_then_search() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/api/token":
            return httpx.Response(200, json={"access_token": "tok", "expires_in": 3600})
        return httpx.Response(
            200,
            json={
                "tracks": {
                    "items": [
                        {
                            "name": "The Sign",
                            "artists": [{"name": "Ace of Base"}],
                            "album": {"name": "The Sign"},
                            "preview_url": None,
                        }
                    ]
                }
            },
        )

    client = SpotifyClient(_settings(), transport=httpx.MockTransport(handler))
    result = asyncio.run(client.search_tracks("The Sign"))

    assert isinstance(result, Found)
    assert result.value.matches == 1
    assert result.value.items[0].artists[0].name == "Ace of Base"
    assert requests[0].method == "POST"
    assert requests[0].headers["Authorization"].startswith("Basic ")
    assert requests[1].headers["Authorization"] == "Bearer tok"
    assert requests[1].url.params["type"] == "track"
    assert requests[1].url.params["q"] == "The Sign"


def test_spotify_no_items_is_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/token":
            return httpx.Response(200, json={"access_token": "tok"})
        return httpx.Response(200, json={"tracks": {"items": []}})

    client = SpotifyClient(_settings(), transport=httpx.MockTransport(handler))

    assert asyncio.run(client.search_tracks("zzzz")) == NotFound(criteria="zzzz")


def test_spotify_without_credentials_fails_before_any_request() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={})

    client = SpotifyClient(
        _settings(spotify_id=None, spotify_secret=None),
        transport=httpx.MockTransport(handler),
    )
    result = asyncio.run(client.search_tracks("The Sign"))

    assert isinstance(result, TransportFailure)
    assert isinstance(result.error, ProviderConfigError)
    assert requests == []


@pytest.mark.parametrize("search_body", [{"tracks": None}, [], "oops", {"tracks": {"items": "oops"}}])
def test_spotify_malformed_search_body_is_transport_failure(search_body) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/token":
            return httpx.Response(200, json={"access_token": "tok"})
        return httpx.Response(200, json=search_body)

    client = SpotifyClient(_settings(), transport=httpx.MockTransport(handler))

    result = asyncio.run(client.search_tracks("The Sign"))

    assert isinstance(result, TransportFailure)


def test_spotify_malformed_token_body_is_transport_failure() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=["nope"])

    client = SpotifyClient(_settings(), transport=httpx.MockTransport(handler))

    result = asyncio.run(client.search_tracks("The Sign"))

    assert isinstance(result, TransportFailure)
    assert isinstance(result.error, ProviderResponseError)
    assert len(requests) == 1
