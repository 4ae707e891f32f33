from __future__ import annotations

import logging

from lyricconv.convert import Format, read
from lyricconv.song.model import Comment, Lyric, Song
from lyricconv.song.options import WriteOptions
from lyricconv.webvtt.export import export_webvtt
from lyricconv.webvtt.parse import split_webvtt_timing


def test_read_header_notes_and_cues():
    song = read(
        [
            "WEBVTT",
            "Kind: captions",
            "Language: en",
            "",
            "NOTE first note",
            "",
            "1",
            "00:00:14.800 --> 00:00:17.400 align:center",
            "Hello",
            "world",
            "",
            "00:18.000 --> 00:20.500",
            "Bye",
            "",
        ],
        Format.WEBVTT,
    )
    assert song.lang == "en"
    assert song.lyrics == [
        Comment("first note"),
        Lyric(num=1, start_ms=14800, stop_ms=17400, text="Hello\nworld"),
        Lyric(num=2, start_ms=18000, stop_ms=20500, text="Bye"),
    ]


def test_multi_line_note():
    song = read(["WEBVTT", "", "NOTE", "multi", "line", ""], Format.WEBVTT)
    assert song.lyrics == [Comment("multi\nline")]


def test_note_inside_cue_is_text():
    song = read(["WEBVTT", "", "00:01.000 --> 00:02.000", "NOTE this is text"], Format.WEBVTT)
    assert song.lyrics[0].text == "NOTE this is text"


def test_text_after_blank_line_joins_previous_cue():
    song = read(["WEBVTT", "", "00:01.000 --> 00:02.000", "a", "", "b"], Format.WEBVTT)
    assert song.lyrics[0].text == "a\nb"


def test_lines_before_any_cue_are_ignored():
    song = read(
        ["some header", "", "STYLE", "::cue { color: red }", "", "00:01.000 --> 00:02.000", "x"],
        Format.WEBVTT,
    )
    assert song.lyrics == [Lyric(num=1, start_ms=1000, stop_ms=2000, text="x")]


def test_long_hours():
    song = read(["WEBVTT", "", "100:00:00.000 --> 100:00:01.000", "x"], Format.WEBVTT)
    assert song.lyrics[0].start_ms == 360_000_000


def test_cue_id_mismatch_only_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="lyricconv.webvtt.parse"):
        song = read(["WEBVTT", "", "7", "00:01.000 --> 00:02.000", "x"], Format.WEBVTT)
    assert "out of order" in caplog.text
    assert song.lyrics[0].num == 1


def test_split_webvtt_timing():
    assert split_webvtt_timing("00:01.000 --> 00:02.000 line:0 position:20%") == ("00:01.000", "00:02.000")
    assert split_webvtt_timing("00:01,000 --> 00:02,000") is None
    assert split_webvtt_timing("--> 00:02.000") is None


def _song() -> Song:
    song = Song(offset=200, lang="en")
    song.add_meta("ar", "A")
    song.add_comment("hi")
    song.add_lyric(14800, 17400, text="Hello")
    song.add_empty()
    return song


def test_export():
    assert export_webvtt(_song()) == [
        "WEBVTT",
        "Kind: captions",
        "Language: en",
        "",
        "NOTE hi",
        "",
        "1",
        "00:15.000 --> 00:17.600",
        "Hello",
        "",
        "",
        "",
    ]


def test_export_options():
    out = export_webvtt(_song(), WriteOptions(cue_ids=False, meta_notes=True))
    assert out[3:7] == ["", "NOTE META ar: A", "", "NOTE hi"]
    assert "1" not in out


def test_export_then_read():
    song = read(export_webvtt(_song()), Format.WEBVTT)
    assert song.lang == "en"
    assert song.lyrics == [
        Comment("hi"),
        Lyric(num=1, start_ms=15000, stop_ms=17600, text="Hello"),
    ]
