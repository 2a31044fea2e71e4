"""Core gameplay logic — validates pair removals and checks the win condition."""

from __future__ import annotations

import random

from sichuan.engine.connectivity.oracle import find_path
from sichuan.engine.gamegenerator import BoardGenerator
from sichuan.engine.gamestate import GameState
from sichuan.models.board import PADDING, Board, Coord, shift
from sichuan.models.connection import ConnectionInfo


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self, rows: int, cols: int, labels: int, rng: random.Random | None = None
    ) -> None:
        board = BoardGenerator.generate(rows, cols, labels, rng)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        """Create a game session from an existing board (e.g. loaded from file)."""
        obj = object.__new__(cls)
        obj.state = GameState(board.copy())
        return obj

    # -- moves ----------------------------------------------------------------

    def connect(self, a: Coord, b: Coord) -> ConnectionInfo | None:
        """Return the connection for the tiles at *a* and *b* without removing them.

        ``None`` if the cells do not hold a matching pair or no path of at
        most two bends joins them.
        """
        board = self.state.board
        label = board.tiles.get(a)
        if a == b or label is None or board.tiles.get(b) != label:
            return None

        path = find_path(
            board.padded(), shift(a, PADDING, PADDING), shift(b, PADDING, PADDING)
        )
        if path is None:
            return None
        return ConnectionInfo(
            label=label,
            pair=(a, b),
            path=tuple(shift(p, -PADDING, -PADDING) for p in path),
        )

    def remove_pair(self, a: Coord, b: Coord) -> bool:
        """Remove the tiles at *a* and *b* if they match and connect.

        Returns True if the removal was applied.
        """
        connection = self.connect(a, b)
        if connection is None:
            return False
        self.state.record(connection)
        return True

    def apply(self, connection: ConnectionInfo) -> bool:
        """Replay a removal produced by the solver."""
        if self.state.board.tiles.get(connection.pair[0]) != connection.label:
            return False
        return self.remove_pair(*connection.pair)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_cleared
