"""Result formatting.

Pure functions: provider records in, display lines out. Nothing here
prints; the CLI decides how lines reach the terminal.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Sequence

from core.domain.models import Artist, EventRecord, MovieRecord, TrackSearch

ROTTEN_TOMATOES = "Rotten Tomatoes"
NOT_RATED = "Not rated"
NO_PREVIEW = "Not available"
ARTIST_SEPARATOR = ", "

_EVENT_DATE_FORMAT = "%m/%d/%Y"
_OMDB_RELEASED_FORMAT = "%d %b %Y"


def events_not_found(artist: str) -> str:
    return f"No events found for: {artist}."


def tracks_not_found(query: str) -> str:
    return f"No songs found for: {query}."


def movie_not_found(title: str) -> str:
    return f"No movie found for: {title}."


def format_event_date(value: datetime) -> str:
    return value.strftime(_EVENT_DATE_FORMAT)


def format_events(artist: str, events: Sequence[EventRecord]) -> list[str]:
    if not events:
        return [events_not_found(artist)]

    lines = [f"Displaying upcoming events for {artist}:"]
    for event in events:
        lines.append("")
        lines.append(f"\tVenue: {event.venue.name}")
        lines.append(f"\tLocation: {event.venue.city}, {event.venue.region}")
        lines.append(f"\tDate: {format_event_date(event.starts_at)}")
    return lines


def join_artists(artists: Iterable[Artist]) -> str:
    return ARTIST_SEPARATOR.join(artist.name for artist in artists)


def format_tracks(search: TrackSearch, cap: int = 5) -> list[str]:
    """Render at most `cap` tracks, announcing the total when it is larger."""

    lines: list[str] = []
    if search.matches > cap:
        lines.append(f"There are {search.matches} songs matching the search criteria.")
        lines.append(f"The first {cap} will be displayed.")

    for track in search.items[:cap]:
        lines.append("")
        lines.append(f"Artist(s): {join_artists(track.artists)}")
        lines.append(f"Song Name: {track.name}")
        lines.append(f"Album Name: {track.album.name}")
        lines.append(f"Preview Link: {track.preview_url or NO_PREVIEW}")
    return lines


def year_released(movie: MovieRecord) -> str:
    """Four-digit year from OMDb's `Released` ('07 Jan 2011').

    OMDb sends 'N/A' for unknown dates; anything unparseable is shown as-is.
    """

    try:
        return datetime.strptime(movie.released.strip(), _OMDB_RELEASED_FORMAT).strftime("%Y")
    except ValueError:
        return movie.released


def rotten_tomatoes_rating(movie: MovieRecord) -> str:
    result = NOT_RATED
    # Last match wins.
    for rating in movie.ratings:
        if rating.source == ROTTEN_TOMATOES:
            result = rating.value
    return result


def format_movie(movie: MovieRecord) -> list[str]:
    return [
        f"Movie Title:      {movie.title}",
        f"Year Released:    {year_released(movie)}",
        f"IMDB Rating:      {movie.imdb_rating}",
        f"Rotten Tomatoes:  {rotten_tomatoes_rating(movie)}",
        f"Country Produced: {movie.country}",
        f"Language(s):      {movie.language}",
        f"Actors:           {movie.actors}",
        "Plot:",
        movie.plot,
    ]
