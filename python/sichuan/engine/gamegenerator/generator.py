"""Generates solvable boards."""

from __future__ import annotations

import logging
import random
from itertools import product

from sichuan.engine.connectivity.oracle import find_path
from sichuan.errors import GenerationError
from sichuan.models.board import PADDING, Board, Coord, shift

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Creates solvable boards by playing the game backwards.

    The board is filled ring by ring from the centre outwards.  Each pair
    sits on one side of its ring, so while the rings further out are still
    empty the two tiles are joined by stepping into the next ring, running
    along it and stepping back.  Removing the pairs in reverse placement
    order is then always legal.
    """

    @staticmethod
    def generate(
        rows: int,
        cols: int,
        labels: int,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* ``rows`` × ``cols`` board using exactly *labels* labels."""
        if rows <= 0 or cols <= 0 or (rows * cols) % 2:
            raise ValueError(
                f"A {rows}×{cols} board cannot be filled with pairs."
            )
        pair_count = rows * cols // 2
        if not 1 <= labels <= pair_count:
            raise ValueError(
                f"A {rows}×{cols} board holds 1 to {pair_count} labels, got {labels}."
            )
        rng = rng or random.Random()

        assigned = list(range(labels)) + [
            rng.randrange(labels) for _ in range(pair_count - labels)
        ]
        rng.shuffle(assigned)

        padded = Board(rows=rows + 2 * PADDING, cols=cols + 2 * PADDING)
        for (a, b), label in zip(BoardGenerator._pairs(rows, cols, rng), assigned):
            a, b = shift(a, PADDING, PADDING), shift(b, PADDING, PADDING)
            padded.tiles[a] = label
            padded.tiles[b] = label
            if find_path(padded, a, b, label=label) is None:
                raise GenerationError(
                    f"Pair {a}, {b} cannot be joined on the partly filled board."
                )

        logger.debug("generated %d×%d board with %d labels", rows, cols, labels)
        return Board(
            rows=rows,
            cols=cols,
            tiles={shift(c, -PADDING, -PADDING): v for c, v in padded.tiles.items()},
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _pairs(rows: int, cols: int, rng: random.Random) -> list[tuple[Coord, Coord]]:
        """Cell pairs in placement order, innermost ring first."""
        pairs: list[tuple[Coord, Coord]] = []
        for depth in reversed(range((min(rows, cols) + 1) // 2)):
            ring: list[tuple[Coord, Coord]] = []
            for group in BoardGenerator._ring_groups(rows, cols, depth, rng):
                rng.shuffle(group)
                ring.extend(zip(group[::2], group[1::2]))
            rng.shuffle(ring)
            pairs.extend(ring)
        return pairs

    @staticmethod
    def _ring_groups(
        rows: int, cols: int, depth: int, rng: random.Random
    ) -> list[list[Coord]]:
        """Split the ring *depth* cells in from the edge into even-sized sides.

        Each corner joins one of its two sides; the choice is random among
        the assignments that leave every side with an even count.
        """
        top, bottom = depth, rows - 1 - depth
        left, right = depth, cols - 1 - depth
        if top == bottom:
            return [[(top, c) for c in range(left, right + 1)]]
        if left == right:
            return [[(r, left) for r in range(top, bottom + 1)]]

        sides: dict[str, list[Coord]] = {
            "top": [(top, c) for c in range(left + 1, right)],
            "bottom": [(bottom, c) for c in range(left + 1, right)],
            "left": [(r, left) for r in range(top + 1, bottom)],
            "right": [(r, right) for r in range(top + 1, bottom)],
        }
        corners: dict[Coord, tuple[str, str]] = {
            (top, left): ("top", "left"),
            (top, right): ("top", "right"),
            (bottom, left): ("bottom", "left"),
            (bottom, right): ("bottom", "right"),
        }
        assignments = [
            choice
            for choice in product(*corners.values())
            if all(
                (len(cells) + choice.count(side)) % 2 == 0
                for side, cells in sides.items()
            )
        ]
        for corner, side in zip(corners, rng.choice(assignments)):
            sides[side].append(corner)
        return [cells for cells in sides.values() if cells]
