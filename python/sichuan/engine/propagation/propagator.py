"""Forced-pair propagation.

A label with exactly two tiles left has only one way to be removed, so
removing it as soon as it connects never closes off a solution.  This is
applied eagerly and repeatedly before the search makes any choice.
"""

from __future__ import annotations

import logging

from sichuan.engine.connectivity.oracle import find_path
from sichuan.engine.tileindex.index import build_index
from sichuan.models.board import Board
from sichuan.models.connection import ConnectionInfo

logger = logging.getLogger(__name__)


def forced_connections(board: Board) -> list[ConnectionInfo]:
    """Connections of every two-tile label that connects on *board*.

    All paths are found against the same board, in label order.  A
    two-tile label that does not connect is left alone.
    """
    # TODO: report two-tile labels that fail to connect so the search can
    # prune the branch here instead of at its next empty candidate list.
    forced: list[ConnectionInfo] = []
    for label, coords in build_index(board).items():
        if len(coords) != 2:
            continue
        a, b = coords
        path = find_path(board, a, b, label=label)
        if path is not None:
            forced.append(ConnectionInfo(label=label, pair=(a, b), path=path))
    return forced


def propagate(board: Board) -> tuple[Board, list[ConnectionInfo]]:
    """Remove forced pairs until none remain.

    Returns the reduced board and the removed connections in removal
    order.  *board* itself is left untouched.
    """
    current = board.copy()
    forced: list[ConnectionInfo] = []
    passes = 0
    while True:
        resolved = forced_connections(current)
        if not resolved:
            break
        passes += 1
        for conn in resolved:
            current.remove_pair(*conn.pair)
        forced.extend(resolved)

    if forced:
        logger.debug(
            "propagated %d forced pair(s) in %d pass(es), %d tile(s) left",
            len(forced), passes, current.tile_count,
        )
    return current, forced
