from __future__ import annotations

import logging
import re

from lyricconv.song.model import Comment, Lyric, Song
from lyricconv.song.timing import is_timing, parse_ms

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[0-9 ]+$")
# 00:00:14.800 --> 00:00:17.400 align:center
_TIMING_RE = re.compile(r"^ *(?P<start>[^ -]+) *--> *(?P<stop>[^ ]+)(?: .*)?$")
_NOTE_RE = re.compile(r"^NOTE(?:[ \t](?P<text>.*))?$")
_LANGUAGE_RE = re.compile(r"^Language: *(?P<lang>.*)$")


def split_webvtt_timing(line: str) -> tuple[str, str] | None:
    """Return the (start, stop) tokens of a cue timing line, else None; cue settings are dropped."""
    m = _TIMING_RE.match(line)
    if not m:
        return None
    start, stop = m.group("start"), m.group("stop")
    if not is_timing(start, ".", 3, unbounded_hours=True):
        return None
    if not is_timing(stop, ".", 3, unbounded_hours=True):
        return None
    return start, stop


class WebVttReader:
    """
    Line reader for WebVTT.

    Blank lines end the current block (header, NOTE or cue). Cue ids are
    optional and only cross-checked; a timing line opens the cue.
    """

    def __init__(self, song: Song):
        self.song = song
        self._block: str | None = "header"

    def read_line(self, line: str) -> bool:
        song = self.song

        if not line.strip(" "):
            self._block = None
            return True

        if self._block == "note":
            note = song.last
            if isinstance(note, Comment):
                note.text = f"{note.text}\n{line}" if note.text else line
            return True

        if _ID_RE.match(line):
            number = int(line.replace(" ", ""))
            if number != song.current_num + 1:
                logger.warning(
                    "Cue %s is out of order (it is numbered %s), ignoring order",
                    song.current_num + 1,
                    number,
                )
            return True

        timing = split_webvtt_timing(line)
        if timing is not None:
            song.add_lyric(
                parse_ms(timing[0], ".", 3, unbounded_hours=True),
                parse_ms(timing[1], ".", 3, unbounded_hours=True),
            )
            self._block = "cue"
            return True

        if self._block == "header":
            lang = _LANGUAGE_RE.match(line)
            if lang:
                song.lang = lang.group("lang").strip() or None
            else:
                logger.debug("Skipping WebVTT header line: %s", line)
            return True

        if self._block is None:
            note = _NOTE_RE.match(line)
            if note:
                song.add_comment((note.group("text") or "").strip())
                self._block = "note"
                return True

        lyric = song.last
        if isinstance(lyric, Lyric):
            lyric.append_text(line)
        else:
            logger.debug("Skipping WebVTT line outside of a cue: %s", line)
        return True
