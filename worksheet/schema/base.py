"""Vocabulary entry type shared by input and output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Entry:
    """One worksheet entry: an English phrase with aligned Pinyin and characters.

    ``pinyin[i]`` is meant to be the reading of ``chinese[i]``; the two
    sequences may still differ in length and layout copes with that.
    """
    english: str
    pinyin: Tuple[str, ...] = ()
    chinese: Tuple[str, ...] = ()

    @classmethod
    def create(cls, english: str, pinyin: Iterable[str], chinese: Iterable[str]) -> Entry:
        return cls(english=english, pinyin=tuple(pinyin), chinese=tuple(chinese))

    @property
    def cell_count(self) -> int:
        """Number of grid cells the entry needs before padding."""
        return max(len(self.pinyin), len(self.chinese))


__all__ = [
    "Entry",
]
