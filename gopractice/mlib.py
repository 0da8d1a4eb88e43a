"""An in-memory music library."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class MusicEntry:
    """One piece of music in the library."""

    id: str
    name: str
    artist: str
    source: str
    type: str


class MusicManager:
    """Ordered collection of music entries."""

    def __init__(self) -> None:
        self._musics: list[MusicEntry] = []

    def __len__(self) -> int:
        return len(self._musics)

    def __iter__(self) -> Iterator[MusicEntry]:
        return iter(self._musics)

    def get(self, index: int) -> MusicEntry:
        """Return the entry at ``index``; raises ``IndexError`` if out of range."""
        if not 0 <= index < len(self._musics):
            raise IndexError("Index out of range.")
        return self._musics[index]

    def find(self, name: str) -> MusicEntry | None:
        """Return the first entry called ``name``, or ``None``."""
        return next((music for music in self._musics if music.name == name), None)

    def add(self, music: MusicEntry) -> None:
        """Append ``music`` to the library."""
        self._musics.append(music)

    def remove(self, index: int) -> MusicEntry | None:
        """Remove and return the entry at ``index``; ``None`` if out of range."""
        if not 0 <= index < len(self._musics):
            return None
        return self._musics.pop(index)