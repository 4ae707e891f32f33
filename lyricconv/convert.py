from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Callable, Iterable

from lyricconv.errors import ReadError, UnsupportedFormat
from lyricconv.lrc import export as lrc_export
from lyricconv.lrc import parse as lrc_parse
from lyricconv.song.model import Comment, Empty, Lyric, Song, Unknown
from lyricconv.song.options import WriteOptions
from lyricconv.srt import export as srt_export
from lyricconv.srt import parse as srt_parse
from lyricconv.webvtt import export as webvtt_export
from lyricconv.webvtt.parse import WebVttReader

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class Format(str, Enum):
    LRC = "lrc"
    SRT = "srt"
    WEBVTT = "webvtt"


_FORMAT_NAMES = {
    "lrc": Format.LRC,
    "srt": Format.SRT,
    "webvtt": Format.WEBVTT,
    "vtt": Format.WEBVTT,
}

_WRITERS: dict[Format, Callable[[Song, WriteOptions], list[str]]] = {
    Format.LRC: lrc_export.export_lrc,
    Format.SRT: srt_export.export_srt,
    Format.WEBVTT: webvtt_export.export_webvtt,
}


@dataclass(frozen=True, slots=True)
class ReadStats:
    lines_total: int
    lyrics_total: int
    comments_total: int
    empty_total: int
    metas_total: int


def parse_format(name: str, required: bool = True) -> Format | None:
    fmt = _FORMAT_NAMES.get(name.strip().lower())
    if fmt is None and required:
        raise UnsupportedFormat(f"Unsupported format: {name}")
    return fmt


def guess_format(path: str | Path) -> Format | None:
    suffix = Path(path).suffix
    if not suffix:
        return None
    return parse_format(suffix[1:], required=False)


def _line_reader(song: Song, fmt: Format) -> Callable[[str], bool]:
    if fmt is Format.LRC:
        return partial(lrc_parse.read_line, song)
    if fmt is Format.SRT:
        return partial(srt_parse.read_line, song)
    if fmt is Format.WEBVTT:
        return WebVttReader(song).read_line
    raise UnsupportedFormat(f"Unsupported read format: {fmt}")


def split_lines(text: str) -> list[str]:
    """Split decoded text on "\\n" only; a trailing newline does not add a line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_with_stats(lines: Iterable[str], fmt: Format) -> tuple[Song, ReadStats]:
    """
    Build a Song from already decoded text lines.

    Raises ReadError with the 1-based line number of the first line the
    format cannot place.
    """
    song = Song()
    read_a_line = _line_reader(song, fmt)

    total = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not total and line.startswith(_BOM):
            line = line[len(_BOM) :]

        total += 1
        if not read_a_line(line):
            logger.error("Read error on line %s: <%s>", total, line)
            raise ReadError(total, line)

    stats = ReadStats(
        lines_total=total,
        lyrics_total=sum(1 for e in song.lyrics if isinstance(e, Lyric)),
        comments_total=sum(1 for e in song.lyrics if isinstance(e, (Comment, Unknown))),
        empty_total=sum(1 for e in song.lyrics if isinstance(e, Empty)),
        metas_total=len(song.metas),
    )
    return song, stats


def read(lines: Iterable[str], fmt: Format) -> Song:
    song, _stats = read_with_stats(lines, fmt)
    return song


def write(
    song: Song,
    fmt: Format,
    apply_offset: bool | None = None,
    add_offset_ms: int | None = None,
    ratio: float | None = None,
    *,
    options: WriteOptions | None = None,
) -> list[str]:
    """
    Render a Song as output lines (without line terminators).

    `options` carries the format-specific knobs; the explicit offset/ratio
    arguments, when given, take precedence over the ones it holds.
    """
    writer = _WRITERS.get(fmt)
    if writer is None:
        raise UnsupportedFormat(f"Unsupported write format: {fmt}")

    opts = options or WriteOptions()
    if apply_offset is not None:
        opts = replace(opts, apply_offset=apply_offset)
    if add_offset_ms is not None:
        opts = replace(opts, add_offset_ms=add_offset_ms)
    if ratio is not None:
        opts = replace(opts, ratio=ratio)
    return writer(song, opts)


def render(song: Song, fmt: Format, *args, **kwargs) -> str:
    out = write(song, fmt, *args, **kwargs)
    return "\n".join(out) + ("\n" if out else "")


def convert_text(text: str, src: Format, dst: Format, **write_kwargs) -> str:
    return render(read(split_lines(text), src), dst, **write_kwargs)
