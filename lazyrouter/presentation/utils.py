"""Small formatting helpers shared by presentation modules and loaders."""

from __future__ import annotations

_TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("y", 60 * 60 * 24 * 365),
    ("M", 60 * 60 * 24 * 30),
    ("w", 60 * 60 * 24 * 7),
    ("d", 60 * 60 * 24),
    ("h", 60 * 60),
    ("m", 60),
)


def unix_to_time_ago(timestamp: int, now: int) -> str:
    """Return the largest whole unit elapsed since ``timestamp``: ``3d``, ``2w``."""
    delta = max(0, now - timestamp)
    for label, seconds in _TIME_UNITS:
        if delta >= seconds:
            return f"{delta // seconds}{label}"
    return f"{delta}s"


def short_sha(sha: str) -> str:
    return sha[:8]
