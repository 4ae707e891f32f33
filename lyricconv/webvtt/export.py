from __future__ import annotations

from lyricconv.song.model import Comment, Empty, Lyric, Song, Unknown
from lyricconv.song.options import WriteOptions
from lyricconv.song.timing import format_ms


def webvtt_time_str(ms: int, show_sign: bool = False) -> str:
    # [H:]MM:SS.mmm
    return format_ms(ms, show_sign, decimal_separator=".", decimal_digits=3)


def _note(text: str) -> list[str]:
    first, *rest = text.split("\n")
    return [f"NOTE {first}".rstrip(" "), *rest, ""]


def export_webvtt(song: Song, options: WriteOptions | None = None) -> list[str]:
    opts = options or WriteOptions()
    tr = opts.transform
    # no offset tag in WebVTT, so it is always applied
    offset = song.offset

    out: list[str] = ["WEBVTT", "Kind: captions"]
    if song.lang:
        out.append(f"Language: {song.lang}")
    out.append("")

    # not all players cope with these
    if opts.meta_notes:
        for meta in song.metas:
            out.extend(_note(f"META {meta.key}: {meta.value}"))

    for entry in song.lyrics:
        if isinstance(entry, Empty):
            out.extend(("", ""))
        elif isinstance(entry, (Comment, Unknown)):
            out.extend(_note(entry.text))
        elif isinstance(entry, Lyric):
            if opts.cue_ids:
                out.append(str(entry.num))
            start = webvtt_time_str(tr.apply(entry.start_ms + offset))
            stop = webvtt_time_str(tr.apply(entry.stop_ms + offset))
            out.append(f"{start} --> {stop}")
            out.extend((entry.text or "").split("\n"))
            out.append("")

    return out
