"""Enumerates every connectable pair on a board."""

from __future__ import annotations

from enum import StrEnum
from itertools import combinations

from sichuan.engine.connectivity.oracle import find_path
from sichuan.engine.tileindex.index import TileIndex, build_index
from sichuan.models.board import Board
from sichuan.models.connection import ConnectionInfo


class CandidateOrder(StrEnum):
    """Order in which the search tries candidate pairs.

    ``POSITION`` sorts by the pair's coordinates.  ``SCARCITY`` tries
    labels with fewer remaining tiles first, then labels with more
    connectable pairs, then lower labels; pairs of one label stay in
    position order.
    """

    POSITION = "position"
    SCARCITY = "scarcity"


def position_key(conn: ConnectionInfo) -> tuple:
    return (conn.pair[0], conn.pair[1])


def connections_by_label(board: Board, index: TileIndex) -> dict[int, list[ConnectionInfo]]:
    """All connectable pairs of every label occurring at least twice."""
    found: dict[int, list[ConnectionInfo]] = {}
    for label, coords in index.items():
        if len(coords) < 2:
            continue
        conns: list[ConnectionInfo] = []
        for a, b in combinations(coords, 2):
            path = find_path(board, a, b, label=label)
            if path is not None:
                conns.append(ConnectionInfo(label=label, pair=(a, b), path=path))
        found[label] = conns
    return found


def generate_candidates(
    board: Board, order: CandidateOrder = CandidateOrder.POSITION
) -> tuple[ConnectionInfo, ...]:
    """Return every pair that can be removed from *board* right now."""
    index = build_index(board)
    found = connections_by_label(board, index)

    if order is CandidateOrder.SCARCITY:
        labels = sorted(
            found,
            key=lambda label: (len(index[label]), -len(found[label]), label),
        )
        return tuple(
            conn
            for label in labels
            for conn in sorted(found[label], key=position_key)
        )

    return tuple(
        sorted((c for conns in found.values() for c in conns), key=position_key)
    )
