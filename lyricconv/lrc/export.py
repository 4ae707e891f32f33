from __future__ import annotations

from lyricconv.song.model import Comment, Empty, Lyric, Song, Unknown
from lyricconv.song.options import WriteOptions
from lyricconv.song.timing import apply_ratio, format_ms


def lrc_time_str(ms: int, show_sign: bool = False) -> str:
    # centiseconds, hours only when needed
    return format_ms(ms, show_sign, decimal_separator=".", decimal_digits=2)


def _one_line(text: str) -> str:
    # LRC has no multi-line entries; backslashes in the text are left alone
    return text.replace("\n", "\\n")


def export_lrc(song: Song, options: WriteOptions | None = None) -> list[str]:
    opts = options or WriteOptions()
    tr = opts.transform
    out: list[str] = []

    for meta in song.metas:
        out.append(f"[{meta.key}: {meta.value}]")

    if opts.apply_offset:
        offset = song.offset
        out.append(f"[offset: {lrc_time_str(0, show_sign=True)}]")
    else:
        offset = 0
        out.append(f"[offset: {lrc_time_str(apply_ratio(song.offset, opts.ratio), show_sign=True)}]")

    out.append(f"[created_by: {opts.created_by}]")
    if song.lang:
        out.append(f"[language: {song.lang}]")

    # stop time of the previous lyric, written out on the next empty line so
    # that the duration survives a re-read
    last_stop: int | None = None
    for entry in song.lyrics:
        if isinstance(entry, Empty):
            out.append(f"[{lrc_time_str(last_stop)}]" if last_stop else "")
            last_stop = None
        elif isinstance(entry, (Comment, Unknown)):
            out.append(f"-- {_one_line(entry.text)}")
            last_stop = None
        elif isinstance(entry, Lyric):
            if entry.name:
                out.append(f"-- {_one_line(entry.name)}")
            time = lrc_time_str(tr.apply(entry.start_ms + offset))
            out.append(f"[{time}] {_one_line(entry.text)}" if entry.text else f"[{time}]")
            last_stop = tr.apply(entry.stop_ms + offset)

    return out
