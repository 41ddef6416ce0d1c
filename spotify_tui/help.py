"""Key binding documentation shown in the help menu."""

from __future__ import annotations

from typing import NamedTuple


class HelpEntry(NamedTuple):
    description: str
    event: str
    context: str


_HELP_DOCS = (
    ("Jump to currently playing album", "a", "General"),
    ("Jump to currently playing artist's album list", "A", "General"),
    ("Increase volume by 10%", "+", "General"),
    ("Decrease volume by 10%", "-", "General"),
    ("Skip to next track", "n", "General"),
    ("Skip to previous track", "p", "General"),
    ("Seek backwards 5 seconds", "<", "General"),
    ("Seek forwards 5 seconds", ">", "General"),
    ("Toggle shuffle", "<Ctrl+s>", "General"),
    ("Copy url to currently playing song", "c", "General"),
    ("Cycle repeat mode", "<Ctrl+r>", "General"),
    ("Move selection left", "h | <Left Arrow Key> | <Ctrl+b>", "General"),
    ("Move selection down", "j | <Down Arrow Key> | <Ctrl+n>", "General"),
    ("Move selection up", "k | <Up Arrow Key> | <Ctrl+p>", "General"),
    ("Move selection right", "l | <Right Arrow Key> | <Ctrl+f>", "General"),
    ("Enter input for search", "/", "General"),
    ("Pause/Resume playback", "<Space>", "General"),
    ("Enter active mode", "<Enter>", "General"),
    ("Go back or exit when nowhere left to back to", "q", "General"),
    ("Select device to play music on", "d", "General"),
    ("Enter hover mode", "<Esc>", "Selected block"),
    ("Save track in list or table", "s", "Selected block"),
    ("Start playback or enter album/artist/playlist", "<Enter>", "Selected block"),
    ("Delete entire input", "<Ctrl+u>", "Search input"),
    ("Search with input text", "<Enter>", "Search input"),
    ("Move cursor one space left", "<Left Arrow Key>", "Search input"),
    ("Move cursor one space right", "<Right Arrow Key>", "Search input"),
    ("Jump to start of input", "<Ctrl+a>", "Search input"),
    ("Jump to end of input", "<Ctrl+e>", "Search input"),
    ("Escape from the input back to hovered block", "<Esc>", "Search input"),
    ("Scroll down to next result page", "<Ctrl+d>", "Pagination"),
    ("Scroll up to previous result page", "<Ctrl+u>", "Pagination"),
    ("Delete saved album", "D", "Library -> Albums"),
    ("Follow an artists", "w", "Search result"),
)


def get_help_docs() -> list[HelpEntry]:
    """Return the help rows: description, key and context."""
    return [HelpEntry(*row) for row in _HELP_DOCS]