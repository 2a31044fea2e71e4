"""Board model for the tile-matching puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from sichuan.errors import BoardFormatError

Coord = tuple[int, int]

# Width of the empty margin added around a board before solving.
PADDING = 1

EMPTY_TOKEN = "."


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Coord:
        """Unit step ``(drow, dcol)`` for this direction."""
        return _DELTAS[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_DELTAS: dict[Direction, Coord] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def shift(coord: Coord, drow: int, dcol: int) -> Coord:
    return (coord[0] + drow, coord[1] + dcol)


@dataclass
class Board:
    """Represents a puzzle board.

    Tiles are stored sparsely as a ``(row, col) -> label`` mapping; a
    coordinate missing from ``tiles`` is an empty cell. ``rows`` and
    ``cols`` give the extent that bounds every path.
    """

    rows: int
    cols: int
    tiles: dict[Coord, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise BoardFormatError(
                f"Board extent must be non-negative, got {self.rows}×{self.cols}."
            )
        for coord, label in self.tiles.items():
            if not self.in_bounds(coord):
                raise BoardFormatError(
                    f"Tile {coord} lies outside the {self.rows}×{self.cols} board."
                )
            if label < 0:
                raise BoardFormatError(f"Tile {coord} has negative label {label}.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | None]]) -> Board:
        """Create a board from a rectangular row-major grid.

        ``None`` marks an empty cell. Example::

            Board.from_rows([[0, 1, None], [1, None, 0]])
        """
        width = len(rows[0]) if rows else 0
        tiles: dict[Coord, int] = {}
        for r, row in enumerate(rows):
            if len(row) != width:
                raise BoardFormatError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
            for c, label in enumerate(row):
                if label is not None:
                    tiles[(r, c)] = label
        return cls(rows=len(rows), cols=width, tiles=tiles)

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse whitespace-separated labels, one line per row.

        ``.`` marks an empty cell; blank lines and ``#`` comments are
        ignored. Example::

            0 1 .
            1 . 0
        """
        grid: list[list[int | None]] = []
        for lineno, raw in enumerate(text.splitlines(), 1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            row: list[int | None] = []
            for token in line.split():
                if token == EMPTY_TOKEN:
                    row.append(None)
                    continue
                try:
                    row.append(int(token))
                except ValueError:
                    raise BoardFormatError(
                        f"Line {lineno}: {token!r} is neither a label nor "
                        f"{EMPTY_TOKEN!r}."
                    ) from None
            grid.append(row)
        return cls.from_rows(grid)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int | None:
        return self.tiles.get((row, col))

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_vacant(self, coord: Coord) -> bool:
        """True if *coord* is inside the board and holds no tile."""
        return self.in_bounds(coord) and coord not in self.tiles

    def labels(self) -> list[int]:
        return sorted(set(self.tiles.values()))

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    def is_cleared(self) -> bool:
        return not self.tiles

    def to_rows(self) -> list[list[int | None]]:
        return [
            [self.tiles.get((r, c)) for c in range(self.cols)]
            for r in range(self.rows)
        ]

    def to_text(self) -> str:
        return "\n".join(
            " ".join(EMPTY_TOKEN if v is None else str(v) for v in row)
            for row in self.to_rows()
        )

    # -- mutation / copies ----------------------------------------------------

    def remove_pair(self, a: Coord, b: Coord) -> None:
        """Remove the tiles at *a* and *b* in place."""
        if a == b:
            raise ValueError(f"Cannot remove pair: both coordinates are {a}.")
        missing = [c for c in (a, b) if c not in self.tiles]
        if missing:
            raise ValueError(f"Cannot remove pair {a}, {b}: no tile at {missing}.")
        del self.tiles[a]
        del self.tiles[b]

    def without(self, a: Coord, b: Coord) -> Board:
        """Return a copy of the board with the pair at *a*, *b* removed."""
        board = self.copy()
        board.remove_pair(a, b)
        return board

    def padded(self, margin: int = PADDING) -> Board:
        """Return the board inflated by *margin* empty cells on every side."""
        return Board(
            rows=self.rows + 2 * margin,
            cols=self.cols + 2 * margin,
            tiles={shift(c, margin, margin): v for c, v in self.tiles.items()},
        )

    def copy(self) -> Board:
        return Board(rows=self.rows, cols=self.cols, tiles=dict(self.tiles))

