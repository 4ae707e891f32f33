from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(slots=True)
class Unknown:
    text: str


@dataclass(slots=True)
class Empty:
    pass


@dataclass(slots=True)
class Comment:
    text: str


@dataclass(slots=True)
class Lyric:
    num: int
    start_ms: int
    stop_ms: int
    name: str | None = None
    text: str | None = None

    def append_text(self, line: str) -> None:
        self.text = f"{self.text}\n{line}" if self.text is not None else line


Entry = Union[Unknown, Empty, Comment, Lyric]


@dataclass(frozen=True, slots=True)
class Meta:
    key: str
    value: str


@dataclass(slots=True)
class Song:
    """
    A whole subtitle/lyrics document; all timings are in milliseconds.

    Filled by exactly one reader, then rendered by one writer.
    """

    lyrics: list[Entry] = field(default_factory=list)
    metas: list[Meta] = field(default_factory=list)
    offset: int = 0
    current_num: int = 0
    lang: str | None = None

    @property
    def last(self) -> Entry | None:
        return self.lyrics[-1] if self.lyrics else None

    def add_unknown(self, text: str) -> None:
        self.lyrics.append(Unknown(text))

    def add_empty(self) -> None:
        self.lyrics.append(Empty())

    def add_comment(self, text: str) -> None:
        self.lyrics.append(Comment(text))

    def add_lyric(
        self, start_ms: int, stop_ms: int, name: str | None = None, text: str | None = None
    ) -> Lyric:
        self.current_num += 1
        lyric = Lyric(num=self.current_num, start_ms=start_ms, stop_ms=stop_ms, name=name, text=text)
        self.lyrics.append(lyric)
        return lyric

    def add_meta(self, key: str, value: str) -> None:
        self.metas.append(Meta(key, value))

    def retract_last(self) -> Entry:
        entry = self.lyrics.pop()
        if isinstance(entry, Lyric):
            self.current_num -= 1
        return entry

    def timed(self) -> Iterator[Lyric]:
        return (e for e in self.lyrics if isinstance(e, Lyric))
