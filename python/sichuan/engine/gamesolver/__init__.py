from sichuan.engine.gamesolver.solver import (
    UNSOLVABLE,
    Frame,
    SichuanSolver,
    Solution,
    Solver,
    SolverState,
    SolverStats,
)

__all__ = [
    "UNSOLVABLE",
    "Frame",
    "SichuanSolver",
    "Solution",
    "Solver",
    "SolverState",
    "SolverStats",
]
