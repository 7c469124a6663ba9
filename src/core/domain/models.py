"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Validates provider payloads at the edge, so formatters only ever see
  well-typed records.
- Field aliases keep the provider's wire names (`Title`, `preview_url`...)
  out of the rest of the code.

Note:
- These models describe *what* a provider returned, not *how* it was fetched.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Venue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="Venue name.")
    city: str = Field(default="", description="City where the venue is.")
    region: str = Field(default="", description="Region/state; empty outside the US.")


class EventRecord(BaseModel):
    """One upcoming event as returned by Bandsintown."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    venue: Venue = Field(default_factory=Venue)
    starts_at: datetime = Field(
        ...,
        alias="datetime",
        description="Local start time of the event (ISO 8601).",
    )


class Artist(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class Album(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""


class TrackRecord(BaseModel):
    """One Spotify track search hit."""

    model_config = ConfigDict(extra="ignore")

    name: str
    artists: list[Artist] = Field(default_factory=list)
    album: Album = Field(default_factory=Album)
    preview_url: str | None = Field(
        default=None,
        description="30 second MP3 preview; Spotify often omits it.",
    )


class TrackSearch(BaseModel):
    """The items of a Spotify track search, in provider order."""

    query: str
    items: list[TrackRecord] = Field(default_factory=list)

    @property
    def matches(self) -> int:
        return len(self.items)


class Rating(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    source: str = Field(..., alias="Source")
    value: str = Field(..., alias="Value")


class MovieRecord(BaseModel):
    """A single OMDb title lookup."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = Field(..., alias="Title")
    released: str = Field(
        default="N/A",
        alias="Released",
        description="Release date formatted by OMDb as 'DD Mon YYYY'.",
    )
    imdb_rating: str = Field(default="N/A", alias="imdbRating")
    ratings: list[Rating] = Field(default_factory=list, alias="Ratings")
    country: str = Field(default="N/A", alias="Country")
    language: str = Field(default="N/A", alias="Language")
    actors: str = Field(default="N/A", alias="Actors")
    plot: str = Field(default="N/A", alias="Plot")
