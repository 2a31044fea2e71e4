#!/usr/bin/env python3
"""Sichuan board solver.

Usage::

    sichuan solve board.txt                 # print the solving steps
    sichuan solve board.txt --animate       # replay the solution on the board
    sichuan solve board.txt -o scarcity -v  # rarest labels first, with search log
    sichuan generate -r 6 -c 8 -l 10 --seed 7 > board.txt
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from sichuan import config
from sichuan.engine.candidates import CandidateOrder
from sichuan.engine.gamegenerator import BoardGenerator
from sichuan.engine.gamesolver import Solver
from sichuan.errors import BoardFormatError, GenerationError
from sichuan.frontend.cli.rich.app import console, show_solution
from sichuan.models.board import Board


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.LOG_LEVEL.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_board(path: Path) -> Board:
    try:
        return Board.from_text(path.read_text())
    except BoardFormatError as exc:
        console.print(f"[red]Invalid board in {path}:[/red] {exc}")
        raise typer.Exit(code=2) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Solve Shisen-Sho style tile boards.")


@app.command()
def solve(
    board_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Board text file: one row per line, labels separated by spaces, '.' for empty.",
    ),
    order: CandidateOrder = typer.Option(
        CandidateOrder(config.CANDIDATE_ORDER), "-o", "--order",
        help="Order in which the search tries candidate pairs.",
    ),
    animate: bool = typer.Option(
        False, "--animate/--no-animate",
        help="Replay the solution step by step before listing it.",
    ),
    delay: float = typer.Option(
        config.STEP_DELAY, "--delay", min=0.0,
        help="Seconds per animated step.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Find an order of pair removals that clears the board."""
    _setup_logging(verbose)
    board = _load_board(board_file)
    solution = Solver.solve(board, order)
    show_solution(board, solution, animate=animate, delay=delay)
    if not solution.is_solved:
        raise typer.Exit(code=1)


@app.command()
def generate(
    rows: int = typer.Option(6, "-r", "--rows", min=1, help="Board rows."),
    cols: int = typer.Option(6, "-c", "--cols", min=1, help="Board columns."),
    labels: int = typer.Option(9, "-l", "--labels", min=1, help="Number of distinct labels (at most rows×cols/2)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for a reproducible board."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log generator progress."),
) -> None:
    """Print a random board that is guaranteed to be solvable."""
    _setup_logging(verbose)
    try:
        board = BoardGenerator.generate(rows, cols, labels, random.Random(seed))
    except (ValueError, GenerationError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc
    typer.echo(board.to_text())


if __name__ == "__main__":
    app()
