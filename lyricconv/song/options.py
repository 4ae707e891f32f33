from __future__ import annotations

from dataclasses import dataclass

from .timing import Transform

DEFAULT_CREATED_BY = "lyricconv"


@dataclass(frozen=True, slots=True)
class WriteOptions:
    apply_offset: bool = False  # LRC only; SRT/WebVTT always apply the song offset
    add_offset_ms: int = 0
    ratio: float = 1.0

    # LRC
    created_by: str = DEFAULT_CREATED_BY

    # WebVTT
    cue_ids: bool = True
    meta_notes: bool = False

    @property
    def transform(self) -> Transform:
        return Transform(ratio=self.ratio, add_offset_ms=self.add_offset_ms)
