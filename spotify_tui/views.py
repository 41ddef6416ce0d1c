"""Text shown in the play bar, device list, search results and error screen."""

from __future__ import annotations

import enum
from typing import Iterable, Union

from .formatting import Color, create_artist_string

HEART = "♥"

NO_DEVICE_MESSAGE = "No devices found: Make sure a device is active"

UNRELEASED_HEADER = "\n## [Unreleased]\n"

# Terminals taller than this get a one-cell margin around the main layout.
_MARGIN_THRESHOLD = 45
_TALL_MARGIN = 1
_COMPACT_MARGIN = 0

_ERROR_CHECKLIST = (
    "\n"
    "\n"
    "If you are trying to play a track, please check that\n"
    "    1. You have a Spotify Premium Account\n"
    "    2. Your playback device is active and selected - press `d` to go to device selection menu\n"
    "    3. If you're using spotifyd as a playback device, your device name must not contain spaces\n"
    "            "
)

_ERROR_HINT = (
    "\n"
    "Hint: a playback device must be either an official spotify client or a light "
    "weight alternative such as spotifyd\n"
    "        "
)

_ERROR_RETURN = "\nPress <Esc> to return"

_ERROR_NO_DEVICE = "\nNo playback device is selected - follow point 2 above"


class RepeatState(enum.Enum):
    """Playback repeat mode."""

    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"

    @property
    def label(self) -> str:
        """The word shown for this mode in the play bar."""
        return _REPEAT_LABELS[self]


_REPEAT_LABELS = {
    RepeatState.OFF: "Off",
    RepeatState.TRACK: "Track",
    RepeatState.CONTEXT: "All",
}


def playbar_title(
    is_playing: bool,
    device_name: str,
    shuffle_state: bool,
    repeat_state: RepeatState,
    volume_percent: int,
) -> str:
    """Title of the play bar block: state, device, shuffle, repeat and volume."""
    play_title = "Playing" if is_playing else "Paused"
    shuffle_text = "On" if shuffle_state else "Off"
    return (
        f"{play_title} ({device_name} | Shuffle: {shuffle_text} | "
        f"Repeat: {RepeatState(repeat_state).label} | Volume: {volume_percent}%)"
    )


def playing_track_name(
    name: str, track_id: str | None, liked_ids: Iterable[str]
) -> str:
    """Name of the playing track, with a heart in front if it is liked."""
    liked = set(liked_ids)
    if (track_id or "") in liked:
        return f"{HEART} {name}"
    return name


def device_list_items(device_names: Iterable[str] | None) -> list[str]:
    """Rows of the device list, or a hint when there are no devices."""
    names = list(device_names) if device_names is not None else []
    return names if names else [NO_DEVICE_MESSAGE]


def track_label(name: str, artists: Iterable[Union[str, object]]) -> str:
    """A search result row for a track: ``name - artists``."""
    return f"{name} - {create_artist_string(artists)}"


def album_label(name: str, artists: Iterable[Union[str, object]]) -> str:
    """A search result row for an album: ``name - artists``."""
    return f"{name} - {create_artist_string(artists)}"


def error_screen_lines(
    api_error: str, device_selected: bool
) -> list[tuple[str, Color]]:
    """The pieces of text on the error screen, each with its colour."""
    lines = [
        ("Api response: ", Color.WHITE),
        (api_error, Color.LIGHT_RED),
        (_ERROR_CHECKLIST, Color.WHITE),
        (_ERROR_HINT, Color.YELLOW),
        (_ERROR_RETURN, Color.GRAY),
    ]
    if not device_selected:
        lines.append((_ERROR_NO_DEVICE, Color.LIGHT_MAGENTA))
    return lines


def clean_changelog(changelog: str, debug: bool) -> str:
    """Drop the unreleased section header unless running a debug build."""
    if debug:
        return changelog
    return changelog.replace(UNRELEASED_HEADER, "")


def layout_margin(height: int) -> int:
    """Margin of the main layout: 1 on tall terminals, 0 on small ones.

    Raises ValueError for a negative height.
    """
    if height < 0:
        raise ValueError("terminal height cannot be negative")
    if height > _MARGIN_THRESHOLD:
        return _TALL_MARGIN
    return _COMPACT_MARGIN