# spotify_tui

Pieces of a keyboard-driven terminal client for a music streaming service:
configurable key bindings read from a YAML file, a threaded input/tick event
source, a small local web server that captures an OAuth redirect, and the
formatting, table and text logic behind track lists, the playbar, the device
list, the error screen and the help menu.

## What this package does not do

It is a library of parts, not a finished player. It installs no command, does
not draw anything to the terminal, does not switch the terminal into raw mode,
and does not talk to the streaming service's web API: there is no client for
playlists, search, playback or devices. The functions here produce the strings,
rows, colours and sizes that a screen would show; drawing them is left to the
caller.

## Key bindings (`spotify_tui.user_config`, `spotify_tui.keys`)

User key bindings live in `<home>/.config/spotify-tui/config.yml`:

```yaml
keybindings:
  back: "ctrl-q"
  toggle_playback: "space"
  seek_forwards: "right"    # rejected: arrow keys are reserved
```

A binding is either a single character or a name of at most two parts:
`ctrl-x`, `alt-x`, `left`, `right`, `up`, `down`, `backspace` (or `delete`),
`del`, `esc` (or `escape`), `pageup`, `pagedown` or `space`. The keys `h`, `j`,
`k`, `l`, the arrow keys, backspace and enter are reserved; binding one of them
raises `ConfigError`, as does an unknown name, a shortcut with more than two
parts, or a file that is not valid YAML.

The bindable actions, with their defaults, are the fields of `KeyBindings`:
`back` (`q`), `jump_to_album` (`a`), `jump_to_artist_album` (`A`),
`manage_devices` (`d`), `decrease_volume` (`-`), `increase_volume` (`+`),
`toggle_playback` (space), `seek_backwards` (`<`), `seek_forwards` (`>`),
`next_track` (`n`), `previous_track` (`p`), `help` (`?`), `shuffle` (ctrl-s),
`repeat` (ctrl-r), `search` (`/`), `submit` (enter) and `copy_song_url` (`c`).

```python
from pathlib import Path
from spotify_tui.user_config import UserConfig, ConfigError, parse_key
from spotify_tui.keys import Key

config = UserConfig(Path.home())   # home defaults to the current user's
try:
    config.load_config()           # creates ~/.config/spotify-tui if missing
except ConfigError as err:
    print(f"bad config: {err}")

assert parse_key("ctrl-j") == Key.ctrl("j")
print(config.keys.back)            # Char('q')
```

`Key` is a frozen dataclass of a `KeyKind` and an optional value, built with
`Key.char`, `Key.ctrl`, `Key.alt` or directly, e.g. `Key(KeyKind.ESC)`.
`read_keys(stream)` decodes key presses from a text stream, including arrow,
home/end, page, insert/delete and function-key escape sequences, and skips
sequences it does not recognise.

## Events (`spotify_tui.events`)

`Events` reads keys from a stream on one thread and emits ticks on another
(every 0.25 s by default) into a single queue. The reader stops after the exit
key (ctrl-c by default) is delivered.

```python
import sys
from spotify_tui.events import Events, EventConfig, EventKind

with Events(EventConfig(), sys.stdin) as events:
    event = events.next(1.0)       # raises TimeoutError if nothing arrives
    if event.kind is EventKind.INPUT:
        print(event.key)
```

## Authorisation (`spotify_tui.redirect`, `spotify_tui.session`)

`redirect_uri_web_server(request_token, host="127.0.0.1", port=8888)` starts
listening, calls `request_token()` (which should send the user to the
authorisation page), and serves connections until one carries a well-formed
HTTP request; it answers that one with a short success page and returns the
request target, i.e. the redirected path with its query string. Malformed
requests get a 400 reply. If the port cannot be opened it raises
`RedirectError`. `parse_request(data)` and `handle_connection(conn)` are the
pieces it is built from.

`spotify_tui.session` provides:

- `scope_string()` – the requested scopes joined by spaces;
- `token_expiry(expires_in, now=None)` – the monotonic time at which to
  refresh, ten seconds before the token actually expires;
- `search_limits(height)` – the large and small search result limits for a
  terminal of that many rows, e.g. `search_limits(40) == (27, 13)`.

## Formatting (`spotify_tui.formatting`)

```python
from spotify_tui.formatting import (
    millis_to_minutes, display_track_progress, get_track_progress_percentage,
)

millis_to_minutes(90_000)                        # "1:30"
display_track_progress(60_000, 120_000)          # "1:00/2:00 (-1:00)"
get_track_progress_percentage(120_000, 60_000)   # 100 (clamped)
```

Also here: `create_artist_string` (joins names, or objects with a `name`, with
commas), `get_percentage_width` (a share of a width less three cells of
padding) and `highlight_color(is_active, is_hovered)`, which returns a `Color`:
light cyan when active, magenta when only hovered, gray otherwise.

## Tables, views and help

`spotify_tui.tables` has header builders (`artist_table_header`,
`album_table_header`, `song_table_header`, `album_list_header`,
`recently_played_header`) and `build_table_rows`, which scrolls the rows so the
selected one stays visible, marks the playing track's title with `|> ` and
liked tracks with `♥` in song tables, and gives each `TableRow` a `RowStyle`.

`spotify_tui.views` produces the playbar title (`playbar_title`, with
`RepeatState`), the playing track name with a heart when liked, device list
rows with a hint when there are none, search result labels, the error screen
text with colours, a changelog with the unreleased header removed, and the main
layout margin for a given terminal height.

`spotify_tui.help.get_help_docs()` returns every help-menu row as a
`HelpEntry(description, event, context)`.