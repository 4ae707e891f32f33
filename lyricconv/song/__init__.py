from .model import Comment, Empty, Entry, Lyric, Meta, Song, Unknown
from .timing import NTSC_TO_PAL, PAL_TO_NTSC, Transform, apply_ratio, format_ms, is_timing, parse_ms

__all__ = [
    "Comment",
    "Empty",
    "Entry",
    "Lyric",
    "Meta",
    "Song",
    "Unknown",
    "NTSC_TO_PAL",
    "PAL_TO_NTSC",
    "Transform",
    "apply_ratio",
    "format_ms",
    "is_timing",
    "parse_ms",
]
