"""User configuration: key bindings loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .keys import Key, KeyKind

FILE_NAME = "config.yml"
CONFIG_DIR = ".config"
APP_CONFIG_DIR = "spotify-tui"

_RESERVED_KEYS = (
    Key.char("h"),
    Key.char("j"),
    Key.char("k"),
    Key.char("l"),
    Key(KeyKind.UP),
    Key(KeyKind.DOWN),
    Key(KeyKind.LEFT),
    Key(KeyKind.RIGHT),
    Key(KeyKind.BACKSPACE),
    Key.char("\n"),
)

_NAMED_KEYS = {
    "left": Key(KeyKind.LEFT),
    "right": Key(KeyKind.RIGHT),
    "up": Key(KeyKind.UP),
    "down": Key(KeyKind.DOWN),
    "backspace": Key(KeyKind.BACKSPACE),
    "delete": Key(KeyKind.BACKSPACE),
    "del": Key(KeyKind.DELETE),
    "esc": Key(KeyKind.ESC),
    "escape": Key(KeyKind.ESC),
    "pageup": Key(KeyKind.PAGE_UP),
    "pagedown": Key(KeyKind.PAGE_DOWN),
    "space": Key.char(" "),
}


class ConfigError(Exception):
    """Raised when the user configuration cannot be read or is invalid."""


def _first_char(text: str, key: str) -> str:
    if not text:
        raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
    return text[0]


def parse_key(key: str) -> Key:
    """Parse a shortcut such as ``q``, ``ctrl-s`` or ``pagedown`` into a Key."""
    if len(key.encode("utf-8")) == 1:
        return Key.char(key)

    sections = key.split("-")
    if len(sections) > 2:
        raise ConfigError(
            f'Shortcut can only have 2 keys, "{key}" has {len(sections)}'
        )

    head = sections[0].lower()
    if head in ("ctrl", "alt"):
        if len(sections) < 2:
            raise ConfigError(f'The shortcut "{key}" is missing a key after the modifier')
        c = _first_char(sections[1], key)
        return Key.ctrl(c) if head == "ctrl" else Key.alt(c)
    try:
        return _NAMED_KEYS[head]
    except KeyError:
        raise ConfigError(f'The key "{sections[0]}" is unknown.') from None


def check_reserved_keys(key: Key) -> None:
    """Raise ConfigError if the key is reserved for navigation."""
    if key in _RESERVED_KEYS:
        raise ConfigError(f"The key {key} is reserved and cannot be remapped")


@dataclass
class UserConfigPaths:
    config_file_path: Path


@dataclass
class KeyBindings:
    back: Key = Key.char("q")
    jump_to_album: Key = Key.char("a")
    jump_to_artist_album: Key = Key.char("A")
    manage_devices: Key = Key.char("d")
    decrease_volume: Key = Key.char("-")
    increase_volume: Key = Key.char("+")
    toggle_playback: Key = Key.char(" ")
    seek_backwards: Key = Key.char("<")
    seek_forwards: Key = Key.char(">")
    next_track: Key = Key.char("n")
    previous_track: Key = Key.char("p")
    help: Key = Key.char("?")
    shuffle: Key = Key.ctrl("s")
    repeat: Key = Key.ctrl("r")
    search: Key = Key.char("/")
    submit: Key = Key.char("\n")
    copy_song_url: Key = Key.char("c")


@dataclass
class UserConfig:
    """Holds the key bindings, optionally overridden from the config file."""

    home: Path | None = None
    keys: KeyBindings = field(default_factory=KeyBindings)

    def __init__(self, home: str | Path | None = None) -> None:
        self.home = Path(home) if home is not None else None
        self.keys = KeyBindings()

    def _home_dir(self) -> Path:
        if self.home is not None:
            return self.home
        try:
            return Path.home()
        except RuntimeError:
            raise ConfigError("No $HOME directory found for client config") from None

    def get_or_build_paths(self) -> UserConfigPaths:
        """Return the config file path, creating its directories as needed."""
        home_config_dir = self._home_dir() / CONFIG_DIR
        app_config_dir = home_config_dir / APP_CONFIG_DIR
        if not home_config_dir.exists():
            home_config_dir.mkdir()
        if not app_config_dir.exists():
            app_config_dir.mkdir()
        return UserConfigPaths(config_file_path=app_config_dir / FILE_NAME)

    def load_keybindings(self, keybindings: Mapping[str, Any]) -> None:
        """Apply the given shortcut strings over the current bindings."""
        for binding in fields(KeyBindings):
            value = keybindings.get(binding.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"Key binding {binding.name!r} must be a string, got {value!r}"
                )
            key = parse_key(value)
            setattr(self.keys, binding.name, key)
            check_reserved_keys(key)

    def load_config(self) -> None:
        """Load key bindings from the config file if it exists and is not empty."""
        path = self.get_or_build_paths().config_file_path
        if not path.exists():
            return
        text = path.read_text(encoding="utf-8")
        if not text.strip():
            return
        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config file {path}: {exc}") from exc
        if not isinstance(document, Mapping):
            raise ConfigError(f"Invalid config file {path}: expected a mapping")
        keybindings = document.get("keybindings")
        if keybindings is None:
            return
        if not isinstance(keybindings, Mapping):
            raise ConfigError(f"Invalid config file {path}: keybindings must be a mapping")
        self.load_keybindings(keybindings)