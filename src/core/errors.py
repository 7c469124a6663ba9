"""Application errors.

The provider adapters never let these escape: they are wrapped into a
`TransportFailure` and printed. `RehydrationError` is raised by the replay
step and turned into a notice by the dispatcher.
"""

from __future__ import annotations


class LiriError(Exception):
    """Base class for every error raised by liri itself."""


class ProviderConfigError(LiriError):
    """A provider cannot be called because its configuration is incomplete."""


class ProviderResponseError(LiriError):
    """A provider answered with a body that does not have the expected shape."""


class RehydrationError(LiriError):
    """The replay file could not be turned into a command and criteria."""
