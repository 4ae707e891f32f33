from __future__ import annotations

import logging
import re

from lyricconv.song.model import Comment, Lyric, Song
from lyricconv.song.timing import parse_ms

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^\[offset *:(?P<token>[^\]]*)")  # [offset: +00:01.50] / [offset:-1500]
_TS_RE = re.compile(r"^\[(?P<token>[0-9:. ]+)\]")  # [mm:ss.xx] / [h:mm:ss.xx]
_META_RE = re.compile(r"^\[(?P<key>[^:]*):(?P<value>.*)\] *$")  # [key: value]
_INT_MS_RE = re.compile(r"\d{3,}")

# stop time of a lyric until the next timed line tells us better
PLACEHOLDER_DURATION_MS = 5000


def _offset_ms(token: str) -> int:
    token = token.strip(" ")
    sign = 1
    if token[:1] in ("+", "-"):
        sign = -1 if token[0] == "-" else 1
        token = token[1:].lstrip(" ")

    # "[offset: 1500]" is plain milliseconds in most players
    if _INT_MS_RE.fullmatch(token):
        return sign * int(token)
    return sign * parse_ms(token, ".", 3)


def read_line(song: Song, line: str) -> bool:
    """
    Classify one LRC line and add it to the song.

    Order: blank, [offset:], timed lyric, [key: value] meta, comment.
    LRC has no illegal lines, so this always returns True.
    """
    if not line.strip(" "):
        song.add_empty()
        return True

    off = _OFFSET_RE.match(line)
    if off:
        song.offset = _offset_ms(off.group("token"))
        return True

    ts = _TS_RE.match(line)
    if ts:
        _read_timed(song, parse_ms(ts.group("token").strip(" "), ".", 3), line[ts.end() :].lstrip(" "))
        return True

    meta = _META_RE.match(line)
    if meta:
        key = meta.group("key")
        value = meta.group("value").lstrip(" ")
        if key == "language":
            song.lang = value
        elif key == "created_by":
            logger.debug("Skipping created_by tag: %s", value)
        else:
            song.add_meta(key, value)
        return True

    if line.startswith("-- "):
        line = line[3:]
    song.add_comment(line)
    return True


def _read_timed(song: Song, start: int, text: str) -> None:
    name: str | None = None

    prev = song.last
    if isinstance(prev, Lyric):
        # LRC only knows when the next line starts
        prev.stop_ms = start
    elif isinstance(prev, Comment) and not prev.text.startswith("["):
        name = prev.text

    if not text:
        song.add_empty()
        return

    if name is not None:
        song.retract_last()
    song.add_lyric(start, start + PLACEHOLDER_DURATION_MS, name=name, text=text)
