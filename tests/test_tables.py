import pytest

from spotify_tui.formatting import get_percentage_width
from spotify_tui.tables import (
    ColumnId,
    RowStyle,
    TableHeader,
    TableHeaderItem,
    TableId,
    TableItem,
    album_list_header,
    album_table_header,
    artist_table_header,
    build_table_rows,
    recently_played_header,
    song_table_header,
)


def _song_items(count):
    return [
        TableItem(f"id{n}", ["", f"Song {n}", "Artist", "Album", "3:00"])
        for n in range(count)
    ]


def test_song_header_columns():
    header = song_table_header(100)
    assert header.id == TableId.SONG
    assert header.titles == ["", "Title", "Artist", "AlbumTracks", "Length"]
    assert header.widths[0] == 2
    assert header.widths[1] == get_percentage_width(100, 0.3)
    assert header.get_index(ColumnId.LIKED) == 0
    assert header.get_index(ColumnId.SONG_TITLE) == 1


def test_album_header_columns():
    header = album_table_header(80)
    assert header.titles == ["", "#", "Title", "Length"]
    assert header.widths[:2] == [2, 3]
    assert header.widths[2] == get_percentage_width(80, 0.80)
    assert header.get_index(ColumnId.SONG_TITLE) == 2


def test_artist_and_album_list_headers_have_no_song_columns():
    artist = artist_table_header(50)
    assert artist.titles == ["Artist"]
    assert artist.widths == [get_percentage_width(50, 1.0)]
    albums = album_list_header(50)
    assert albums.titles == ["Name", "Artists", "Release Date"]
    assert albums.get_index(ColumnId.SONG_TITLE) is None
    assert albums.get_index(ColumnId.LIKED) is None


def test_recently_played_header():
    header = recently_played_header(60)
    assert header.id == TableId.RECENTLY_PLAYED
    assert header.titles == ["", "Title", "Artist", "Length"]
    assert header.get_index(ColumnId.LIKED) == 0


def test_get_index_missing_column():
    header = TableHeader(TableId.ARTIST, (TableHeaderItem("Artist", 10),))
    assert header.get_index(ColumnId.LIKED) is None
    assert header.get_index(ColumnId.NONE) == 0


def test_rows_without_scroll_keep_all_items():
    items = _song_items(3)
    rows = build_table_rows(song_table_header(100), items, 1, 40)
    assert [r.id for r in rows] == [i.id for i in items]
    assert [r.style for r in rows] == [RowStyle.NORMAL, RowStyle.SELECTED, RowStyle.NORMAL]
    assert rows[0].cells == items[0].format


def test_rows_scroll_to_keep_selection_visible():
    items = _song_items(20)
    height = 10
    selected = 12
    rows = build_table_rows(song_table_header(100), items, selected, height)
    offset = selected - (height - 5)
    assert len(rows) == len(items) - offset
    assert rows[0].id == items[offset].id
    selected_rows = [r for r in rows if r.style == RowStyle.SELECTED]
    assert [r.id for r in selected_rows] == [items[selected].id]


def test_small_height_does_not_scroll():
    items = _song_items(8)
    rows = build_table_rows(song_table_header(100), items, 6, 3)
    assert len(rows) == len(items)
    assert rows[6].style == RowStyle.SELECTED


def test_playing_track_is_marked():
    items = _song_items(4)
    rows = build_table_rows(song_table_header(100), items, 0, 40, playing_id="id2")
    assert rows[2].cells[1] == "|> Song 2"
    assert rows[2].style == RowStyle.PLAYING
    assert rows[3].cells[1] == "Song 3"


def test_selection_wins_over_playing_style():
    items = _song_items(4)
    rows = build_table_rows(song_table_header(100), items, 2, 40, playing_id="id2")
    assert rows[2].style == RowStyle.SELECTED
    assert rows[2].cells[1].startswith("|> ")


def test_playing_track_scrolled_off_is_not_marked():
    items = _song_items(20)
    rows = build_table_rows(song_table_header(100), items, 15, 10, playing_id="id0")
    assert all(not r.cells[1].startswith("|> ") for r in rows)
    assert RowStyle.PLAYING not in {r.style for r in rows}


def test_liked_tracks_get_heart():
    items = _song_items(3)
    rows = build_table_rows(
        song_table_header(100), items, 0, 40, liked_ids={"id1"}
    )
    assert rows[1].cells[0] == " ♥"
    assert rows[0].cells[0] == ""
    assert items[1].format[0] == ""


def test_non_song_table_is_not_decorated():
    header = TableHeader(
        TableId.ARTIST,
        (
            TableHeaderItem("", 2, ColumnId.LIKED),
            TableHeaderItem("Name", 10, ColumnId.SONG_TITLE),
        ),
    )
    items = [TableItem("a", ["", "Name A"]), TableItem("b", ["", "Name B"])]
    rows = build_table_rows(header, items, 1, 40, playing_id="a", liked_ids={"a"})
    assert rows[0].cells == ["", "Name A"]
    assert rows[0].style == RowStyle.NORMAL
    assert rows[1].style == RowStyle.SELECTED


def test_unknown_playing_id_marks_nothing():
    items = _song_items(3)
    rows = build_table_rows(song_table_header(100), items, 0, 40, playing_id="other")
    assert [r.cells for r in rows] == [i.format for i in items]


def test_empty_items_give_no_rows():
    assert build_table_rows(song_table_header(100), [], 0, 40) == []


def test_percentage_width_too_narrow_raises():
    with pytest.raises(ValueError):
        song_table_header(2)