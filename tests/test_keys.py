import io
import string

import pytest

from spotify_tui.keys import Key, KeyKind, read_keys


def decode(text):
    return list(read_keys(io.StringIO(text)))


def test_plain_characters_round_trip():
    text = "hello World?"
    assert [k.value for k in decode(text)] == list(text)
    assert all(k.kind is KeyKind.CHAR for k in decode(text))


def test_control_letters():
    text = "".join(chr(i) for i in range(1, 27) if chr(i) not in "\t\n\r")
    expected = [
        Key.ctrl(letter)
        for i, letter in enumerate(string.ascii_lowercase, start=1)
        if chr(i) not in "\t\n\r"
    ]
    assert decode(text) == expected


def test_enter_and_carriage_return_are_newline():
    assert decode("\r\n") == [Key.char("\n"), Key.char("\n")]


def test_backspace_byte():
    assert decode("\x7f") == [Key(KeyKind.BACKSPACE)]


def test_arrow_sequences():
    assert decode("\x1b[A\x1b[B\x1b[C\x1b[D") == [
        Key(KeyKind.UP),
        Key(KeyKind.DOWN),
        Key(KeyKind.RIGHT),
        Key(KeyKind.LEFT),
    ]


def test_tilde_sequences():
    assert decode("\x1b[3~\x1b[5~\x1b[6~") == [
        Key(KeyKind.DELETE),
        Key(KeyKind.PAGE_UP),
        Key(KeyKind.PAGE_DOWN),
    ]


def test_alt_and_lone_escape():
    assert decode("\x1bx") == [Key.alt("x")]
    assert decode("\x1b") == [Key(KeyKind.ESC)]


def test_unknown_sequence_is_skipped():
    assert decode("a\x1b[99~b") == [Key.char("a"), Key.char("b")]


def test_constructors_require_single_character():
    with pytest.raises(ValueError):
        Key.char("ab")
    with pytest.raises(ValueError):
        Key.ctrl("")


def test_key_equality_and_hash():
    assert Key.ctrl("c") == Key(KeyKind.CTRL, "c")
    assert len({Key.char("a"), Key.char("a"), Key.alt("a")}) == 2


def test_str_of_keys():
    assert str(Key.char("\n")) == "Char('\\n')"
    assert str(Key(KeyKind.ESC)) == "Esc"