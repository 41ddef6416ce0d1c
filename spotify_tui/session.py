"""Authorisation scopes, token expiry and search-limit sizing."""

from __future__ import annotations

import struct
import time

# Scopes grouped by resource prefix; order matters for the joined string.
_SCOPE_GROUPS: dict[str, tuple[str, ...]] = {
    "playlist-read": ("collaborative", "private"),
    "user-follow": ("read", "modify"),
    "user-library": ("modify", "read"),
    "user-modify": ("playback-state",),
    "user-read": (
        "currently-playing",
        "playback-state",
        "private",
        "recently-played",
    ),
}

SCOPES: tuple[str, ...] = tuple(
    f"{prefix}-{suffix}"
    for prefix, suffixes in _SCOPE_GROUPS.items()
    for suffix in suffixes
)

# Tokens are treated as expired this many seconds early.
EXPIRY_MARGIN = 10

_MAX_SEARCH_LIMIT = 50
_RESERVED_ROWS = 13
_LARGE_DIVISOR = 1.4
_SMALL_DIVISOR = 2.85


def _single(value: float) -> float:
    """Round ``value`` to single precision."""
    (rounded,) = struct.unpack("f", struct.pack("f", value))
    return rounded


def _rows_per(height: int, divisor: float) -> int:
    """Height divided by ``divisor`` in single precision, truncated."""
    return int(_single(_single(float(height)) / _single(divisor)))


def scope_string() -> str:
    """All requested scopes joined by spaces."""
    return " ".join(SCOPES)


def token_expiry(expires_in: int, now: float | None = None) -> float:
    """Monotonic time at which the token should be refreshed."""
    start = time.monotonic() if now is None else now
    return start + expires_in - EXPIRY_MARGIN


def search_limits(height: int) -> tuple[int, int]:
    """Return the (large, small) search limits for a terminal of ``height`` rows."""
    if height < _RESERVED_ROWS:
        raise ValueError(f"terminal height must be at least {_RESERVED_ROWS}")
    cap = min(height - _RESERVED_ROWS, _MAX_SEARCH_LIMIT)
    large = min(_rows_per(height, _LARGE_DIVISOR), cap)
    small = min(_rows_per(height, _SMALL_DIVISOR), cap // 2)
    return large, small