"""Tagged provider results.

Every provider call ends in exactly one of three shapes, so handlers branch
on the type instead of on truthy flags in the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    """The provider answered, but had nothing for `criteria`."""

    criteria: str
    detail: str | None = None


@dataclass(frozen=True)
class TransportFailure:
    """The call itself failed (network, status, unusable body, config)."""

    error: BaseException


ProviderResult = Union[Found[T], NotFound, TransportFailure]
