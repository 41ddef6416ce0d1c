"""Table headers and row building for the track, album and artist tables."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import AbstractSet, Sequence

from .formatting import get_percentage_width

# Rows kept aside for the border, the header and the space below it.
_TABLE_PADDING = 5

PLAYING_PREFIX = "|> "
LIKED_MARK = " ♥"


class TableId(enum.Enum):
    ALBUM = "album"
    ALBUM_LIST = "album_list"
    ARTIST = "artist"
    SONG = "song"
    RECENTLY_PLAYED = "recently_played"


class ColumnId(enum.Enum):
    NONE = "none"
    SONG_TITLE = "song_title"
    LIKED = "liked"


class RowStyle(enum.Enum):
    """How a row is drawn: plain, as the playing track, or as the selection."""

    NORMAL = "normal"
    PLAYING = "playing"
    SELECTED = "selected"


_SONG_TABLES = frozenset({TableId.SONG, TableId.RECENTLY_PLAYED, TableId.ALBUM})


@dataclass(frozen=True)
class TableHeaderItem:
    text: str
    width: int
    id: ColumnId = ColumnId.NONE


@dataclass(frozen=True)
class TableHeader:
    id: TableId
    items: tuple[TableHeaderItem, ...]

    def get_index(self, column_id: ColumnId) -> int | None:
        """Position of the first column with this id, or None."""
        return next(
            (i for i, item in enumerate(self.items) if item.id == column_id), None
        )

    @property
    def titles(self) -> list[str]:
        return [item.text for item in self.items]

    @property
    def widths(self) -> list[int]:
        return [item.width for item in self.items]


@dataclass(frozen=True)
class TableItem:
    id: str
    format: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TableRow:
    id: str
    cells: list[str]
    style: RowStyle = RowStyle.NORMAL


def artist_table_header(width: int) -> TableHeader:
    return TableHeader(
        TableId.ARTIST,
        (TableHeaderItem("Artist", get_percentage_width(width, 1.0)),),
    )


def album_table_header(width: int) -> TableHeader:
    return TableHeader(
        TableId.ALBUM,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("#", 3),
            TableHeaderItem("Title", get_percentage_width(width, 0.80), ColumnId.SONG_TITLE),
            TableHeaderItem("Length", get_percentage_width(width, 0.15)),
        ),
    )


def song_table_header(width: int) -> TableHeader:
    return TableHeader(
        TableId.SONG,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("Title", get_percentage_width(width, 0.3), ColumnId.SONG_TITLE),
            TableHeaderItem("Artist", get_percentage_width(width, 0.3)),
            TableHeaderItem("AlbumTracks", get_percentage_width(width, 0.3)),
            TableHeaderItem("Length", get_percentage_width(width, 0.1)),
        ),
    )


def album_list_header(width: int) -> TableHeader:
    return TableHeader(
        TableId.ALBUM_LIST,
        (
            TableHeaderItem("Name", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Artists", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Release Date", get_percentage_width(width, 1.0 / 3.0)),
        ),
    )


def recently_played_header(width: int) -> TableHeader:
    return TableHeader(
        TableId.RECENTLY_PLAYED,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("Title", get_percentage_width(width, 2.0 / 5.0), ColumnId.SONG_TITLE),
            TableHeaderItem("Artist", get_percentage_width(width, 2.0 / 5.0)),
            TableHeaderItem("Length", get_percentage_width(width, 1.0 / 5.0)),
        ),
    )


def _scroll_offset(height: int, selected_index: int) -> int:
    visible = height - _TABLE_PADDING
    if visible < 0 or selected_index < visible:
        return 0
    return selected_index - visible


def build_table_rows(
    header: TableHeader,
    items: Sequence[TableItem],
    selected_index: int,
    height: int,
    playing_id: str | None = None,
    liked_ids: AbstractSet[str] = frozenset(),
) -> list[TableRow]:
    """Build the visible rows of a table.

    The rows are scrolled so that the selected item stays on screen. In song
    tables the playing track is marked and liked tracks get a heart.
    """
    offset = _scroll_offset(height, selected_index)

    playing_index = None
    if playing_id is not None:
        playing_index = next(
            (i for i, item in enumerate(items) if item.id == playing_id), None
        )
    playing_row = (
        playing_index - offset
        if playing_index is not None and playing_index >= offset
        else None
    )
    selected_row = selected_index - offset

    is_song_table = header.id in _SONG_TABLES
    title_idx = header.get_index(ColumnId.SONG_TITLE)
    liked_idx = header.get_index(ColumnId.LIKED)

    rows = []
    for i, item in enumerate(items[offset:]):
        cells = list(item.format)
        style = RowStyle.NORMAL
        if is_song_table:
            if title_idx is not None and i == playing_row:
                cells[title_idx] = f"{PLAYING_PREFIX}{cells[title_idx]}"
                style = RowStyle.PLAYING
            if liked_idx is not None and item.id in liked_ids:
                cells[liked_idx] = LIKED_MARK
        if i == selected_row:
            style = RowStyle.SELECTED
        rows.append(TableRow(item.id, cells, style))
    return rows