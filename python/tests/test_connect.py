"""Connectivity oracle tests.

Besides hand-checked boards, the oracle is compared against a brute-force
breadth-first search over (cell, heading, turns) on random padded boards:
both must agree on whether a pair connects, and every path the oracle
returns must be a legal route.
"""

from __future__ import annotations

import random
from collections import deque
from itertools import combinations

import pytest

from sichuan.engine.connectivity.oracle import (
    can_connect,
    find_path,
    intersection,
    overlap,
    reach,
)
from sichuan.errors import PreconditionError
from sichuan.models.board import Board, Coord, Direction, shift
from sichuan.models.connection import ConnectionInfo, Path


# -- helpers ------------------------------------------------------------------


def _brute_force_connects(board: Board, a: Coord, b: Coord) -> bool:
    """True if some route with at most two turns joins *a* and *b*."""
    reverse = {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }
    queue: deque[tuple[Coord, Direction, int]] = deque()
    seen: set[tuple[Coord, Direction, int]] = set()

    for d in Direction:
        nxt = shift(a, *d.delta)
        if nxt == b:
            return True
        if board.is_vacant(nxt):
            queue.append((nxt, d, 0))
            seen.add((nxt, d, 0))

    while queue:
        cell, heading, turns = queue.popleft()
        for d in Direction:
            if d is reverse[heading]:
                continue
            nturns = turns + (d is not heading)
            if nturns > 2:
                continue
            nxt = shift(cell, *d.delta)
            if nxt == b:
                return True
            state = (nxt, d, nturns)
            if board.is_vacant(nxt) and state not in seen:
                seen.add(state)
                queue.append(state)
    return False


def _assert_valid_path(board: Board, a: Coord, b: Coord, path: Path) -> None:
    assert 2 <= len(path) <= 4
    assert path[0] == a and path[-1] == b
    for p, q in zip(path, path[1:]):
        assert p != q, f"repeated point in {path}"
        assert p[0] == q[0] or p[1] == q[1], f"diagonal segment in {path}"
    conn = ConnectionInfo(label=board.tiles[a], pair=(a, b), path=path)
    for cell in conn.trace()[1:-1]:
        assert board.is_vacant(cell), f"{path} runs through {cell}"


def _random_board(rng: random.Random) -> Board:
    rows, cols = rng.randint(2, 5), rng.randint(2, 5)
    tiles = {
        (r, c): rng.randrange(3)
        for r in range(rows)
        for c in range(cols)
        if rng.random() < 0.55
    }
    return Board(rows=rows, cols=cols, tiles=tiles).padded()


# -- ray casting --------------------------------------------------------------


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((0, 1), Direction.RIGHT, (0, 2)),
        ((0, 3), Direction.LEFT, (0, 2)),
        ((0, 3), Direction.DOWN, (1, 3)),
        ((2, 3), Direction.UP, (1, 3)),
        ((1, 0), Direction.RIGHT, (1, 3)),
        ((2, 3), Direction.LEFT, (2, 0)),
        ((1, 0), Direction.DOWN, (2, 0)),
        ((1, 0), Direction.UP, (0, 0)),
        ((0, 1), Direction.UP, (0, 1)),
    ],
)
def test_reach(start, direction, expected) -> None:
    board = Board.from_text(". 0 . 0\n0 . . .\n. . . 0")
    assert reach(board, start, direction) == expected


def test_overlap_is_closed() -> None:
    assert overlap(((0, 0), (3, 0)), ((5, 1), (2, 1)), axis=0) == (2, 3)
    assert overlap(((0, 0), (2, 0)), ((2, 4), (4, 4)), axis=0) == (2, 2)
    assert overlap(((0, 0), (1, 0)), ((2, 4), (4, 4)), axis=0) is None


def test_intersection() -> None:
    vertical = ((0, 2), (4, 2))
    horizontal = ((3, 0), (3, 5))
    assert intersection(vertical, horizontal) == (3, 2)
    assert intersection(horizontal, vertical) == (3, 2)
    assert intersection(vertical, ((5, 0), (5, 5))) is None


# -- path shapes --------------------------------------------------------------


def test_adjacent_tiles_connect_straight() -> None:
    board = Board.from_text("0 0")
    assert find_path(board, (0, 0), (0, 1)) == ((0, 0), (0, 1))


def test_straight_run_over_empty_cells() -> None:
    board = Board.from_text("0\n.\n.\n0")
    assert find_path(board, (3, 0), (0, 0)) == ((3, 0), (0, 0))


def test_blocked_line_without_room_fails() -> None:
    board = Board.from_text("0 1 0")
    assert find_path(board, (0, 0), (0, 2)) is None
    assert not can_connect(board, (0, 0), (0, 2))


def test_l_prefers_corner_below_first_tile() -> None:
    board = Board.from_text("0 .\n. 0")
    assert find_path(board, (0, 0), (1, 1)) == ((0, 0), (1, 0), (1, 1))
    assert find_path(board, (1, 1), (0, 0)) == ((1, 1), (0, 1), (0, 0))


def test_l_falls_back_to_second_corner() -> None:
    board = Board.from_text("0 .\n1 0")
    assert find_path(board, (0, 0), (1, 1)) == ((0, 0), (0, 1), (1, 1))


def test_z_path_around_obstruction() -> None:
    board = Board.from_text("0 . 1\n. . .\n1 . 0")
    path = find_path(board, (0, 0), (2, 2))
    assert path == ((0, 0), (1, 0), (1, 2), (2, 2))


def test_crossbar_scans_overlap_in_ascending_order() -> None:
    board = Board.from_text("0 . 1\n. 1 .\n. . .\n1 . 0")
    assert find_path(board, (0, 0), (3, 2)) == ((0, 0), (2, 0), (2, 2), (3, 2))


def test_u_path_through_margin() -> None:
    board = Board.from_text("0 1 0").padded()
    assert find_path(board, (1, 1), (1, 3)) == ((1, 1), (2, 1), (2, 3), (1, 3))


# -- preconditions ------------------------------------------------------------


@pytest.mark.parametrize(
    "a, b, label",
    [
        ((0, 0), (0, 5), None),
        ((0, 0), (0, 0), None),
        ((0, 0), (1, 1), None),
        ((0, 0), (1, 0), None),
        ((0, 0), (0, 2), 1),
    ],
    ids=["out-of-bounds", "same-cell", "empty-cell", "labels-differ", "wrong-label"],
)
def test_preconditions(a, b, label) -> None:
    board = Board.from_text("0 . 0\n1 . 1")
    with pytest.raises(PreconditionError):
        find_path(board, a, b, label=label)


# -- brute-force agreement ----------------------------------------------------


@pytest.mark.parametrize("seed", range(40))
def test_agrees_with_brute_force(seed: int) -> None:
    rng = random.Random(seed)
    board = _random_board(rng)
    by_label: dict[int, list[Coord]] = {}
    for coord, label in sorted(board.tiles.items()):
        by_label.setdefault(label, []).append(coord)

    for coords in by_label.values():
        for a, b in combinations(coords, 2):
            path = find_path(board, a, b)
            assert (path is not None) == _brute_force_connects(board, a, b), (
                f"disagreement for {a}-{b} on\n{board.to_text()}"
            )
            if path is not None:
                _assert_valid_path(board, a, b, path)
