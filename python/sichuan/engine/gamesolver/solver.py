"""Backtracking solver over pair-removal order.

The search keeps an explicit stack of frames instead of recursing:

  - **Root** — the padded input board after forced-pair propagation.
  - **Step** — assume the frame's current candidate, remove it, propagate.
    A cleared board is an answer; a board with tiles but no candidates is
    a dead branch (try the next candidate); anything else becomes a new
    frame.
  - **Rollback** — an exhausted frame is popped and its parent moves on to
    its next candidate.  Popping the root means the board is unsolvable.

Candidate order is fixed, so the same board always yields the same
solution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from sichuan.engine.candidates.candidates import CandidateOrder, generate_candidates
from sichuan.engine.propagation.propagator import propagate
from sichuan.errors import SolverStateError
from sichuan.models.board import PADDING, Board
from sichuan.models.connection import ConnectionInfo

logger = logging.getLogger(__name__)


class SolverState(StrEnum):
    IN_PROGRESS = "in_progress"
    ANSWER_FOUND = "answer_found"
    NO_ANSWER_FOUND = "no_answer_found"


@dataclass(frozen=True)
class Frame:
    """One level of the search stack.

    ``forced`` are the pairs propagation removed on entering this frame;
    ``candidates[cursor]`` is the pair currently assumed.
    """

    board: Board
    forced: tuple[ConnectionInfo, ...]
    candidates: tuple[ConnectionInfo, ...]
    cursor: int = 0

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.candidates)

    @property
    def assumed(self) -> ConnectionInfo | None:
        if self.exhausted:
            return None
        return self.candidates[self.cursor]

    def advanced(self) -> Frame:
        return replace(self, cursor=self.cursor + 1)


@dataclass
class SolverStats:
    steps: int = 0
    pushes: int = 0
    pops: int = 0
    dead_branches: int = 0
    max_depth: int = 0


@dataclass(frozen=True)
class Solution:
    """Outcome of a solve.

    ``connections`` lists every removal in order, in the coordinates of
    the board that was passed in.  It is empty when the board cannot be
    cleared.
    """

    state: SolverState
    connections: tuple[ConnectionInfo, ...] = ()

    @property
    def is_solved(self) -> bool:
        return self.state is SolverState.ANSWER_FOUND

    def __len__(self) -> int:
        return len(self.connections)

    def __bool__(self) -> bool:
        # A cleared board has no removals but is still solved.
        return self.is_solved


UNSOLVABLE = Solution(SolverState.NO_ANSWER_FOUND)


class SichuanSolver:
    """Step-wise search for a full clearing of one board.

    Each instance owns its frames and boards; independent boards can be
    solved concurrently with separate instances.
    """

    def __init__(
        self, board: Board, order: CandidateOrder = CandidateOrder.POSITION
    ) -> None:
        self.board = board
        self.order = order
        self.state = SolverState.IN_PROGRESS
        self.stats = SolverStats()
        self._frames: list[Frame] = []
        self._answer: list[ConnectionInfo] = []
        self._start()

    # -- lifecycle ------------------------------------------------------------

    def _start(self) -> None:
        root_board, forced = propagate(self.board.padded())
        if root_board.is_cleared():
            self._finish_with(list(forced))
            return
        self._push(root_board, forced)

    def _push(
        self,
        board: Board,
        forced: list[ConnectionInfo],
        candidates: tuple[ConnectionInfo, ...] | None = None,
    ) -> None:
        if candidates is None:
            candidates = generate_candidates(board, self.order)
        frame = Frame(board=board, forced=tuple(forced), candidates=candidates)
        self._frames.append(frame)
        self.stats.pushes += 1
        self.stats.max_depth = max(self.stats.max_depth, len(self._frames))
        logger.debug(
            "push depth=%d tiles=%d forced=%d candidates=%d",
            len(self._frames), board.tile_count, len(frame.forced), len(frame.candidates),
        )

    def _advance_top(self) -> None:
        self._frames[-1] = self._frames[-1].advanced()

    def _finish_with(self, answer: list[ConnectionInfo]) -> None:
        self._answer = answer
        self.state = SolverState.ANSWER_FOUND
        logger.info(
            "answer found: %d pair(s), %d step(s), %d dead branch(es), max depth %d",
            len(answer), self.stats.steps, self.stats.dead_branches, self.stats.max_depth,
        )

    # -- search ---------------------------------------------------------------

    def step(self) -> SolverState:
        """Advance the search by one transition and return the new state."""
        if self.state is not SolverState.IN_PROGRESS:
            return self.state
        self.stats.steps += 1

        top = self._frames[-1]
        if top.exhausted:
            self._frames.pop()
            self.stats.pops += 1
            if not self._frames:
                self.state = SolverState.NO_ANSWER_FOUND
                logger.info(
                    "no answer: %d step(s), %d dead branch(es), max depth %d",
                    self.stats.steps, self.stats.dead_branches, self.stats.max_depth,
                )
            else:
                logger.debug("pop, back to depth %d", len(self._frames))
                self._advance_top()
            return self.state

        assumed = top.candidates[top.cursor]
        board, forced = propagate(top.board.without(*assumed.pair))

        if board.is_cleared():
            answer: list[ConnectionInfo] = []
            for frame in self._frames:
                answer.extend(frame.forced)
                answer.append(frame.candidates[frame.cursor])
            answer.extend(forced)
            self._finish_with(answer)
            return self.state

        candidates = generate_candidates(board, self.order)
        if not candidates:
            self.stats.dead_branches += 1
            logger.debug(
                "dead branch at depth %d: assumed label %d %s, %d tile(s) stranded",
                len(self._frames), assumed.label, assumed.pair, board.tile_count,
            )
            self._advance_top()
            return self.state

        self._push(board, forced, candidates)
        return self.state

    def solve(self) -> SolverState:
        """Run the search to completion."""
        while self.state is SolverState.IN_PROGRESS:
            self.step()
        return self.state

    # -- results --------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def result(self) -> list[ConnectionInfo]:
        """The solution in the input board's coordinates.

        Path points may fall in the one-cell margin around the board
        (row or column ``-1``, ``rows`` or ``cols``).
        """
        if self.state is not SolverState.ANSWER_FOUND:
            raise SolverStateError(f"No answer available (state: {self.state}).")
        return [conn.shifted(-PADDING, -PADDING) for conn in self._answer]

    def solution(self) -> Solution:
        if self.state is SolverState.ANSWER_FOUND:
            return Solution(self.state, tuple(self.result()))
        if self.state is SolverState.NO_ANSWER_FOUND:
            return UNSOLVABLE
        raise SolverStateError("The search is still in progress.")


class Solver:
    """Stateless facade — all methods are static."""

    @staticmethod
    def solve(board: Board, order: CandidateOrder = CandidateOrder.POSITION) -> Solution:
        """Return the removal sequence that clears *board*, or ``UNSOLVABLE``."""
        solver = SichuanSolver(board, order)
        solver.solve()
        return solver.solution()

    @staticmethod
    def hint(board: Board) -> ConnectionInfo | None:
        """Return the first removal of the solution, or ``None`` if cleared / unsolvable."""
        if board.is_cleared():
            return None
        solution = Solver.solve(board)
        return solution.connections[0] if solution.is_solved else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can be cleared completely."""
        return Solver.solve(board).is_solved
