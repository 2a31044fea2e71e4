"""Label → coordinates lookup, rebuilt from the board on every call."""

from __future__ import annotations

from sichuan.models.board import Board, Coord

TileIndex = dict[int, list[Coord]]


def build_index(board: Board) -> TileIndex:
    """Group the board's coordinates by label.

    Labels ascend and each coordinate list is in row-major order, so any
    enumeration derived from the index is deterministic.
    """
    index: TileIndex = {}
    for coord in sorted(board.tiles):
        index.setdefault(board.tiles[coord], []).append(coord)
    return dict(sorted(index.items()))
