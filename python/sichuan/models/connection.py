"""Connections between matching tiles."""

from __future__ import annotations

from dataclasses import dataclass

from sichuan.models.board import Coord, shift

Path = tuple[Coord, ...]


@dataclass(frozen=True)
class ConnectionInfo:
    """A removable pair and the path that joins it.

    ``path`` runs from ``pair[0]`` to ``pair[1]``; its interior points
    (at most two) are the bends.
    """

    label: int
    pair: tuple[Coord, Coord]
    path: Path

    def __post_init__(self) -> None:
        if not 2 <= len(self.path) <= 4:
            raise ValueError(f"A path has 2-4 points, got {len(self.path)}.")
        if self.path[0] != self.pair[0] or self.path[-1] != self.pair[1]:
            raise ValueError(
                f"Path {self.path} does not join {self.pair[0]} to {self.pair[1]}."
            )

    @property
    def bends(self) -> int:
        return len(self.path) - 2

    def shifted(self, drow: int, dcol: int) -> ConnectionInfo:
        """Return the same connection translated by ``(drow, dcol)``."""
        a, b = self.pair
        return ConnectionInfo(
            label=self.label,
            pair=(shift(a, drow, dcol), shift(b, drow, dcol)),
            path=tuple(shift(p, drow, dcol) for p in self.path),
        )

    def trace(self) -> list[Coord]:
        """Every cell the path visits, endpoints included, in order."""
        cells: list[Coord] = [self.path[0]]
        for (r0, c0), (r1, c1) in zip(self.path, self.path[1:]):
            dr = (r1 > r0) - (r1 < r0)
            dc = (c1 > c0) - (c1 < c0)
            r, c = r0, c0
            while (r, c) != (r1, c1):
                r += dr
                c += dc
                cells.append((r, c))
        return cells
