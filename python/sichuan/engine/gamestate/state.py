"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from sichuan.models.board import Board
from sichuan.models.connection import ConnectionInfo


class GameState:
    """Holds the current board and the pairs removed so far."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.history: list[ConnectionInfo] = []

    # -- moves ----------------------------------------------------------------

    def record(self, connection: ConnectionInfo) -> None:
        self.board.remove_pair(*connection.pair)
        self.history.append(connection)

    @property
    def pairs_removed(self) -> int:
        return len(self.history)

    @property
    def is_cleared(self) -> bool:
        return self.board.is_cleared()
