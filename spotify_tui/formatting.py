"""Formatting helpers for durations, progress and highlight colours."""

from __future__ import annotations

import enum
import struct
from typing import Iterable, Protocol, Union


class Color(enum.Enum):
    WHITE = "white"
    GRAY = "gray"
    YELLOW = "yellow"
    RED = "red"
    LIGHT_RED = "light_red"
    CYAN = "cyan"
    LIGHT_CYAN = "light_cyan"
    MAGENTA = "magenta"
    LIGHT_MAGENTA = "light_magenta"
    BLACK = "black"


class _Named(Protocol):
    name: str


def highlight_color(is_active: bool, is_hovered: bool) -> Color:
    """Colour of a block: active wins over hovered, otherwise gray."""
    if is_active:
        return Color.LIGHT_CYAN
    if is_hovered:
        return Color.MAGENTA
    return Color.GRAY


def create_artist_string(artists: Iterable[Union[str, _Named]]) -> str:
    """Join artist names (strings or objects with a ``name``) with commas."""
    return ", ".join(a if isinstance(a, str) else a.name for a in artists)


def millis_to_minutes(millis: int) -> str:
    """Format milliseconds as ``m:ss``, dropping partial seconds."""
    if millis < 0:
        raise ValueError("millis must not be negative")
    minutes, rest = divmod(millis, 60000)
    return f"{minutes}:{rest // 1000:02d}"


def display_track_progress(progress: int, track_duration: int) -> str:
    """Format ``progress/duration (-remaining)``."""
    if progress > track_duration:
        raise ValueError("progress exceeds track duration")
    return (
        f"{millis_to_minutes(progress)}/{millis_to_minutes(track_duration)}"
        f" (-{millis_to_minutes(track_duration - progress)})"
    )


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def get_percentage_width(width: int, percentage: float) -> int:
    """Column width for a share (0..1) of ``width`` less three cells of padding."""
    padding = 3
    if width < padding:
        raise ValueError("width is smaller than the padding")
    result = _f32(_f32(float(width - padding)) * _f32(percentage))
    return max(0, min(0xFFFF, int(result)))


def get_track_progress_percentage(song_progress_ms: int, track_duration_ms: int) -> int:
    """Progress as a whole percentage clamped to 0..100."""
    if track_duration_ms <= 0:
        return 0
    progress = min(song_progress_ms, track_duration_ms)
    return int(max(0.0, progress / track_duration_ms * 100.0))