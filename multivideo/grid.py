"""A fixed two-column arrangement of players with controls for all of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

COLUMNS = 2


class PlayerGrid:
    """Players laid out row by row in two columns."""

    def __init__(self, players: Iterable[Any]) -> None:
        self._players = tuple(players)

    def play_all(self) -> None:
        """Start every player that has a file open."""
        for player in self._players:
            if player.is_opened:
                player.play()

    def pause_all(self) -> None:
        """Pause every player that is playing."""
        for player in self._players:
            if player.is_playing:
                player.pause()

    def restart_all(self) -> None:
        """Rewind every player that has a file open."""
        for player in self._players:
            if player.is_opened:
                player.restart()

    def position(self, index: int) -> tuple[int, int]:
        """Row and column of the player at ``index``."""
        if not 0 <= index < len(self._players):
            raise IndexError(f"no player at position {index}")
        return divmod(index, COLUMNS)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)