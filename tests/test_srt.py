from __future__ import annotations

import logging

import pytest

from lyricconv.convert import Format, read
from lyricconv.errors import ReadError
from lyricconv.song.model import Lyric, Song
from lyricconv.srt.export import export_srt
from lyricconv.srt.parse import split_srt_timing


def test_read_cues():
    song = read(
        [
            "1",
            "00:00:14,800 --> 00:00:17,400",
            "Hello",
            "world",
            "",
            "2",
            "00:00:18,000 --> 00:00:20,500",
            "Bye",
            "",
        ],
        Format.SRT,
    )
    assert song.lyrics == [
        Lyric(num=1, start_ms=14800, stop_ms=17400, text="Hello\nworld"),
        Lyric(num=2, start_ms=18000, stop_ms=20500, text="Bye"),
    ]


def test_write_then_read_round_trip():
    song = Song()
    song.add_lyric(14800, 17400, text="Hi")

    out = export_srt(song)
    assert out == ["1", "00:00:14,800 --> 00:00:17,400", "Hi", ""]

    again = read(out, Format.SRT)
    assert [(x.start_ms, x.stop_ms, x.text) for x in again.timed()] == [(14800, 17400, "Hi")]


def test_out_of_order_number_only_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="lyricconv.srt.parse"):
        song = read(["5", "00:00:01,000 --> 00:00:02,000", "x"], Format.SRT)
    assert "out of order" in caplog.text
    assert song.lyrics[0].num == 1


@pytest.mark.parametrize(
    "lines, line_no",
    [
        (["Hello"], 1),
        (["", "00:00:01,000 --> 00:00:02,000"], 2),
    ],
)
def test_line_before_first_cue_is_a_read_error(lines, line_no):
    with pytest.raises(ReadError) as exc:
        read(lines, Format.SRT)
    assert exc.value.line_no == line_no
    assert exc.value.line == lines[-1]


def test_bom_on_first_line_is_ignored():
    song = read(["\ufeff1", "00:00:01,000 --> 00:00:02,000", "x"], Format.SRT)
    assert song.lyrics[0].text == "x"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("00:00:14,800 --> 00:00:17,400", ("00:00:14,800", "00:00:17,400")),
        ("0:0:1,5-->0:0:2,5", ("0:0:1,5", "0:0:2,5")),
        ("  00:14,800   -->  00:17,400  ", ("00:14,800", "00:17,400")),
        ("00:00:14.800 --> 00:00:17.400", None),
        ("00:00:14,800 -> 00:00:17,400", None),
        ("00:00:14,800 --> 00:00:17,400 X1:40", None),
        ("00:00:14,8000 --> 00:00:17,400", None),
        ("000:00:14,800 --> 00:00:17,400", None),
    ],
)
def test_split_srt_timing(line, expected):
    assert split_srt_timing(line) == expected


def test_export_drops_everything_but_cues_and_applies_offset():
    song = Song(offset=500, lang="en")
    song.add_meta("ar", "Artist")
    song.add_comment("note")
    song.add_empty()
    song.add_lyric(0, 1000, text="a\nb")
    assert export_srt(song) == ["1", "00:00:00,500 --> 00:00:01,500", "a", "b", ""]
