from __future__ import annotations

import logging
import re

from lyricconv.song.model import Lyric, Song
from lyricconv.song.timing import is_timing, parse_ms

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[0-9 ]+$")
# 00:00:14,800 --> 00:00:17,400
_TIMING_RE = re.compile(r"^ *(?P<start>[^ -]+) *--> *(?P<stop>[^ ]+) *$")


def is_srt_id(line: str) -> bool:
    return bool(_ID_RE.match(line)) and bool(line.strip(" "))


def split_srt_timing(line: str) -> tuple[str, str] | None:
    """Return the (start, stop) tokens of a valid SRT timing line, else None."""
    m = _TIMING_RE.match(line)
    if not m:
        return None
    start, stop = m.group("start"), m.group("stop")
    if not is_timing(start, ",", 3) or not is_timing(stop, ",", 3):
        return None
    return start, stop


def read_line(song: Song, line: str) -> bool:
    """
    Feed one SRT line: cue number, timing, text lines, blank separator.

    Returns False when a timing or text line shows up before any cue number.
    """
    if not line.strip(" "):
        return True

    prev = song.last
    lyric = prev if isinstance(prev, Lyric) else None

    if is_srt_id(line):
        number = int(line.replace(" ", ""))
        if number != song.current_num + 1:
            logger.warning(
                "Cue %s is out of order (it is numbered %s), ignoring order",
                song.current_num + 1,
                number,
            )
        song.add_lyric(0, 0)
        return True

    timing = split_srt_timing(line)
    if timing is not None:
        if lyric is None:
            return False
        lyric.start_ms = parse_ms(timing[0], ",", 3)
        lyric.stop_ms = parse_ms(timing[1], ",", 3)
        return True

    if lyric is None:
        return False
    lyric.append_text(line)
    return True
