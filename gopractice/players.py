"""Simulated music players for MP3 and WAV sources."""

from __future__ import annotations

import time


class Player:
    """A player that pretends to play a source, printing its progress."""

    kind = "generic"

    def __init__(self, tick: float = 0.1) -> None:
        self.tick = tick
        self.progress = 0

    def play(self, source: str) -> None:
        """Play ``source``, printing a dot for every tenth of the way."""
        print(f"Playing {self.kind} music ", source)
        self.progress = 0
        while self.progress < 100:
            time.sleep(self.tick)
            print(".", end="", flush=True)
            self.progress += 10
        print("\nFinished playing", source)


class MP3Player(Player):
    """Player for MP3 sources."""

    kind = "mp3"


class WAVPlayer(Player):
    """Player for WAV sources."""

    kind = "wav"


_PLAYERS: dict[str, type[Player]] = {
    "MP3": MP3Player,
    "WAV": WAVPlayer,
}


def play(source: str, mtype: str) -> None:
    """Play ``source`` with the player for ``mtype``.

    Raises ``ValueError`` for an unsupported music type.
    """
    player_class = _PLAYERS.get(mtype)
    if player_class is None:
        raise ValueError(f"Unsupported music type: {mtype}")
    player_class().play(source)