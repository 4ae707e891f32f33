from __future__ import annotations

from lyricconv.song.model import Lyric, Song
from lyricconv.song.options import WriteOptions
from lyricconv.song.timing import format_ms


def srt_time_str(ms: int, show_sign: bool = False) -> str:
    # HH:MM:SS,mmm
    return format_ms(ms, show_sign, decimal_separator=",", decimal_digits=3, always_hours=True)


def export_srt(song: Song, options: WriteOptions | None = None) -> list[str]:
    """
    SRT has no header, metadata, comments or offset tag: only the cues are
    written and the song offset is always folded into their timings.
    """
    tr = (options or WriteOptions()).transform
    offset = song.offset

    out: list[str] = []
    for lyric in song.timed():
        start = srt_time_str(tr.apply(lyric.start_ms + offset))
        stop = srt_time_str(tr.apply(lyric.stop_ms + offset))
        out.append(str(lyric.num))
        out.append(f"{start} --> {stop}")
        out.extend((lyric.text or "").split("\n"))
        out.append("")
    return out
