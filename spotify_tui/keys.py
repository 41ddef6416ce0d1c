"""Key values and a decoder for terminal key input."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, TextIO


class KeyKind(enum.Enum):
    """The kind of a key press."""

    CHAR = "Char"
    CTRL = "Ctrl"
    ALT = "Alt"
    F = "F"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    BACK_TAB = "BackTab"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    INSERT = "Insert"
    ESC = "Esc"
    NULL = "Null"


@dataclass(frozen=True)
class Key:
    """A single key press: a kind plus a character or function-key number."""

    kind: KeyKind
    value: str | int | None = None

    @classmethod
    def char(cls, c: str) -> Key:
        return cls(KeyKind.CHAR, _single(c))

    @classmethod
    def ctrl(cls, c: str) -> Key:
        return cls(KeyKind.CTRL, _single(c))

    @classmethod
    def alt(cls, c: str) -> Key:
        return cls(KeyKind.ALT, _single(c))

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        if isinstance(self.value, str):
            return f"{self.kind.value}({self.value!r})"
        return f"{self.kind.value}({self.value})"


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


_CSI_FINAL = {
    "A": Key(KeyKind.UP),
    "B": Key(KeyKind.DOWN),
    "C": Key(KeyKind.RIGHT),
    "D": Key(KeyKind.LEFT),
    "H": Key(KeyKind.HOME),
    "F": Key(KeyKind.END),
    "Z": Key(KeyKind.BACK_TAB),
}

_SS3_FINAL = {"P": 1, "Q": 2, "R": 3, "S": 4}


def _tilde_key(number: int) -> Key | None:
    if number in (1, 7):
        return Key(KeyKind.HOME)
    if number == 2:
        return Key(KeyKind.INSERT)
    if number == 3:
        return Key(KeyKind.DELETE)
    if number in (4, 8):
        return Key(KeyKind.END)
    if number == 5:
        return Key(KeyKind.PAGE_UP)
    if number == 6:
        return Key(KeyKind.PAGE_DOWN)
    if 11 <= number <= 15:
        return Key(KeyKind.F, number - 10)
    if 17 <= number <= 21:
        return Key(KeyKind.F, number - 11)
    if 23 <= number <= 24:
        return Key(KeyKind.F, number - 12)
    return None


def _read_csi(stream: TextIO) -> Key | None:
    params = []
    while True:
        c = stream.read(1)
        if not c:
            return None
        if "@" <= c <= "~":
            final = c
            break
        params.append(c)
    text = "".join(params)
    if not text:
        if final == "M":
            # Legacy mouse report: three more bytes follow.
            stream.read(3)
            return None
        return _CSI_FINAL.get(final)
    if final == "~" and text.isdigit():
        return _tilde_key(int(text))
    return None


def _read_escape(stream: TextIO) -> Key | None:
    c = stream.read(1)
    if not c:
        return Key(KeyKind.ESC)
    if c == "[":
        return _read_csi(stream)
    if c == "O":
        nxt = stream.read(1)
        number = _SS3_FINAL.get(nxt)
        return Key(KeyKind.F, number) if number is not None else None
    return Key.alt(c)


def _decode(c: str, stream: TextIO) -> Key | None:
    code = ord(c)
    if c == "\x1b":
        return _read_escape(stream)
    if c in "\n\r":
        return Key.char("\n")
    if c == "\t":
        return Key.char("\t")
    if c == "\x7f":
        return Key(KeyKind.BACKSPACE)
    if code == 0:
        return Key(KeyKind.NULL)
    if 0x01 <= code <= 0x1A:
        return Key.ctrl(chr(code - 1 + ord("a")))
    if 0x1C <= code <= 0x1F:
        return Key.ctrl(chr(code - 0x1C + ord("4")))
    return Key.char(c)


def read_keys(stream: TextIO) -> Iterator[Key]:
    """Decode key presses from a text stream until it ends.

    Sequences that name no known key are skipped.
    """
    while True:
        c = stream.read(1)
        if not c:
            return
        key = _decode(c, stream)
        if key is not None:
            yield key