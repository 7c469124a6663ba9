"""Criteria resolution.

Falls back to a per-command default when the user typed no search term,
and tells the user about it before anything else runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class CriteriaResolution:
    effective: str
    used_default: bool


def default_notice(label: str, default: str) -> str:
    return f"No {label} specified, using default: {default}"


def resolve_criteria(
    raw: str | None,
    default: str,
    label: str,
    notify: Callable[[str], None],
) -> CriteriaResolution:
    """Return the search term to use for this run.

    `raw` is returned untouched when it has content. Otherwise `default` is
    used and `notify` receives the substitution notice first.
    """

    if raw and raw.strip():
        return CriteriaResolution(effective=raw, used_default=False)

    notify(default_notice(label, default))
    return CriteriaResolution(effective=default, used_default=True)
