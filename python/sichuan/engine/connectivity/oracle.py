"""Connectivity oracle — can two matching tiles be joined with at most two bends?

Paths are tried in a fixed precedence, not by length:

  1. **Straight** — adjacent tiles, or an empty run along a shared row or
     column (0 bends).
  2. **L** — a ray from each tile along the swapped axis; where the rays
     cross is the single bend.  Corner ``(b.row, a.col)`` is tried before
     ``(a.row, b.col)``.
  3. **Cross-bar** — a ray (leg) from each tile along the same axis; where
     the legs' extents overlap, the first unobstructed bar joining them in
     ascending order gives two bends.  Eight leg combinations are tried:
     opposed legs heading toward each other (vertical, then horizontal),
     the four parallel pairs, then opposed legs heading apart.

The board is expected to carry an empty margin (see ``Board.padded``) so
that paths may leave the visible grid; the oracle itself only stops at the
board extent.
"""

from __future__ import annotations

from sichuan.errors import PreconditionError
from sichuan.models.board import Board, Coord, Direction
from sichuan.models.connection import Path

# A ray cast from a tile: (start, last empty cell reached).
Segment = tuple[Coord, Coord]

_PARALLEL_LEGS: tuple[tuple[Direction, Direction], ...] = (
    (Direction.DOWN, Direction.DOWN),
    (Direction.UP, Direction.UP),
    (Direction.RIGHT, Direction.RIGHT),
    (Direction.LEFT, Direction.LEFT),
)


# -- ray casting --------------------------------------------------------------


def reach(board: Board, start: Coord, direction: Direction) -> Coord:
    """Walk from *start* in *direction* while cells are empty.

    Returns the last empty cell before a tile or the board edge, or
    *start* itself when the first step is already blocked.
    """
    dr, dc = direction.delta
    r, c = start
    while board.is_vacant((r + dr, c + dc)):
        r += dr
        c += dc
    return (r, c)


def cast(board: Board, start: Coord, direction: Direction) -> Segment:
    return (start, reach(board, start, direction))


def _span(segment: Segment, axis: int) -> tuple[int, int]:
    lo, hi = segment[0][axis], segment[1][axis]
    return (lo, hi) if lo <= hi else (hi, lo)


def overlap(first: Segment, second: Segment, axis: int) -> tuple[int, int] | None:
    """Closed overlap of two segments along *axis* (0 = rows, 1 = cols)."""
    lo1, hi1 = _span(first, axis)
    lo2, hi2 = _span(second, axis)
    lo, hi = max(lo1, lo2), min(hi1, hi2)
    if lo > hi:
        return None
    return (lo, hi)


def intersection(first: Segment, second: Segment) -> Coord | None:
    """Crossing cell of a vertical and a horizontal segment, if any."""
    (r1, c1), (r2, c2) = first
    (r3, c3), (r4, c4) = second
    if c1 == c2 and r3 == r4:
        vertical, horizontal = first, second
    elif r1 == r2 and c3 == c4:
        vertical, horizontal = second, first
    else:
        return None
    col = vertical[0][1]
    row = horizontal[0][0]
    rlo, rhi = _span(vertical, 0)
    clo, chi = _span(horizontal, 1)
    if rlo <= row <= rhi and clo <= col <= chi:
        return (row, col)
    return None


# -- run checks ---------------------------------------------------------------


def _row_clear(board: Board, row: int, c1: int, c2: int) -> bool:
    """True if every cell strictly between ``c1`` and ``c2`` on *row* is empty."""
    lo, hi = (c1, c2) if c1 <= c2 else (c2, c1)
    return all(board.is_vacant((row, c)) for c in range(lo + 1, hi))


def _col_clear(board: Board, col: int, r1: int, r2: int) -> bool:
    lo, hi = (r1, r2) if r1 <= r2 else (r2, r1)
    return all(board.is_vacant((r, col)) for r in range(lo + 1, hi))


def _compact(points: list[Coord]) -> Path:
    path: list[Coord] = []
    for p in points:
        if not path or path[-1] != p:
            path.append(p)
    return tuple(path)


# -- path shapes --------------------------------------------------------------


def straight_path(board: Board, a: Coord, b: Coord) -> Path | None:
    if a[0] == b[0] and _row_clear(board, a[0], a[1], b[1]):
        return (a, b)
    if a[1] == b[1] and _col_clear(board, a[1], a[0], b[0]):
        return (a, b)
    return None


def _toward(src: int, dst: int, vertical: bool) -> Direction:
    if vertical:
        return Direction.DOWN if dst > src else Direction.UP
    return Direction.RIGHT if dst > src else Direction.LEFT


def l_path(board: Board, a: Coord, b: Coord) -> Path | None:
    if a[0] == b[0] or a[1] == b[1]:
        return None

    vertical_a = _toward(a[0], b[0], vertical=True)
    horizontal_a = _toward(a[1], b[1], vertical=False)
    vertical_b = _toward(b[0], a[0], vertical=True)
    horizontal_b = _toward(b[1], a[1], vertical=False)

    for dir_a, dir_b in ((vertical_a, horizontal_b), (horizontal_a, vertical_b)):
        corner = intersection(cast(board, a, dir_a), cast(board, b, dir_b))
        if corner is not None:
            return (a, corner, b)
    return None


def _leg_pairs(a: Coord, b: Coord) -> list[tuple[Direction, Direction]]:
    down_first = a[0] <= b[0]
    right_first = a[1] <= b[1]
    opposed_v = [(Direction.DOWN, Direction.UP), (Direction.UP, Direction.DOWN)]
    opposed_h = [(Direction.RIGHT, Direction.LEFT), (Direction.LEFT, Direction.RIGHT)]
    if not down_first:
        opposed_v.reverse()
    if not right_first:
        opposed_h.reverse()
    return [opposed_v[0], opposed_h[0], *_PARALLEL_LEGS, opposed_v[1], opposed_h[1]]


def _vertical_bar(board: Board, a: Coord, b: Coord, leg_a: Segment, leg_b: Segment) -> Path | None:
    """Search rows shared by two vertical legs for an empty horizontal bar."""
    if a[1] == b[1]:
        return None
    rows = overlap(leg_a, leg_b, axis=0)
    if rows is None:
        return None
    for row in range(rows[0], rows[1] + 1):
        if _row_clear(board, row, a[1], b[1]):
            return _compact([a, (row, a[1]), (row, b[1]), b])
    return None


def _horizontal_bar(board: Board, a: Coord, b: Coord, leg_a: Segment, leg_b: Segment) -> Path | None:
    if a[0] == b[0]:
        return None
    cols = overlap(leg_a, leg_b, axis=1)
    if cols is None:
        return None
    for col in range(cols[0], cols[1] + 1):
        if _col_clear(board, col, a[0], b[0]):
            return _compact([a, (a[0], col), (b[0], col), b])
    return None


def crossbar_path(board: Board, a: Coord, b: Coord) -> Path | None:
    for dir_a, dir_b in _leg_pairs(a, b):
        leg_a = cast(board, a, dir_a)
        leg_b = cast(board, b, dir_b)
        if dir_a.is_vertical:
            path = _vertical_bar(board, a, b, leg_a, leg_b)
        else:
            path = _horizontal_bar(board, a, b, leg_a, leg_b)
        if path is not None:
            return path
    return None


# -- public API ---------------------------------------------------------------


def _check_pair(board: Board, a: Coord, b: Coord, label: int | None) -> None:
    for coord in (a, b):
        if not board.in_bounds(coord):
            raise PreconditionError(
                f"{coord} is outside the {board.rows}×{board.cols} board."
            )
    if a == b:
        raise PreconditionError(f"Cannot connect {a} to itself.")
    la, lb = board.tiles.get(a), board.tiles.get(b)
    if la is None or lb is None:
        raise PreconditionError(f"No tile at {a if la is None else b}.")
    if la != lb:
        raise PreconditionError(f"Labels differ: {a} holds {la}, {b} holds {lb}.")
    if label is not None and la != label:
        raise PreconditionError(f"Expected label {label} at {a}, {b}; found {la}.")


def find_path(board: Board, a: Coord, b: Coord, label: int | None = None) -> Path | None:
    """Return a path of at most two bends joining the tiles at *a* and *b*.

    The path starts at *a* and ends at *b*; ``None`` means the pair cannot
    be connected on this board.  Raises ``PreconditionError`` when the two
    coordinates do not hold a matching pair (or do not hold *label*).
    """
    _check_pair(board, a, b, label)
    path = straight_path(board, a, b)
    if path is None:
        path = l_path(board, a, b)
    if path is None:
        path = crossbar_path(board, a, b)
    return path


def can_connect(board: Board, a: Coord, b: Coord) -> bool:
    return find_path(board, a, b) is not None
