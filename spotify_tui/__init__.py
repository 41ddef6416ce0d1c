"""Terminal music player parts: key bindings, input events, OAuth redirect capture and view text helpers."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "formatting",
    "help",
    "keys",
    "redirect",
    "session",
    "tables",
    "user_config",
    "views",
]