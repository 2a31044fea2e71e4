"""Rich terminal frontend — renders boards and solving steps.

The board is drawn with its one-cell margin so that paths routed around
the outside of the grid stay visible.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from sichuan.engine.gameplay import GamePlay
from sichuan.engine.gamesolver import Solution
from sichuan.models.board import PADDING, Board, Coord
from sichuan.models.connection import ConnectionInfo

console = Console()

_LABEL_STYLES = (
    "bold cyan",
    "bold magenta",
    "bold yellow",
    "bold green",
    "bold blue",
    "bold red",
    "bold white",
    "bright_cyan",
    "bright_magenta",
    "bright_yellow",
)


# -- board rendering ----------------------------------------------------------


def _label_style(label: int) -> str:
    return _LABEL_STYLES[label % len(_LABEL_STYLES)]


def render_board(board: Board, highlight: ConnectionInfo | None = None) -> Table:
    """Return a Rich Table of *board*, margin included.

    Cells on *highlight*'s path are marked; its endpoints keep their label.
    """
    width = max((len(str(v)) for v in board.tiles.values()), default=1)
    trace: set[Coord] = set(highlight.trace()) if highlight else set()
    ends: set[Coord] = set(highlight.pair) if highlight else set()

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    for _ in range(board.cols + 2 * PADDING):
        table.add_column(width=width + 1, justify="center")

    for r in range(-PADDING, board.rows + PADDING):
        cells: list[str] = []
        for c in range(-PADDING, board.cols + PADDING):
            val = board.get_tile(r, c)
            if highlight is not None and (r, c) in ends:
                cells.append(f"[reverse {_label_style(highlight.label)}]{highlight.label:>{width}}[/]")
            elif (r, c) in trace:
                cells.append("[bold red]●[/bold red]")
            elif val is not None:
                cells.append(f"[{_label_style(val)}]{val:>{width}}[/]")
            elif board.in_bounds((r, c)):
                cells.append("[dim]·[/dim]")
            else:
                cells.append(" ")
        table.add_row(*cells)

    return table


def render_steps(connections: tuple[ConnectionInfo, ...] | list[ConnectionInfo]) -> Table:
    """Return a table listing every removal of a solution."""
    table = Table(
        title="Solving steps",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Label", justify="right")
    table.add_column("From", justify="center", style="yellow")
    table.add_column("To", justify="center", style="yellow")
    table.add_column("Bends", justify="right", style="dim")

    for i, conn in enumerate(connections, 1):
        a, b = conn.pair
        table.add_row(
            str(i),
            Text(str(conn.label), style=_label_style(conn.label)),
            f"{a[0]},{a[1]}",
            f"{b[0]},{b[1]}",
            str(conn.bends),
        )
    return table


# -- screens ------------------------------------------------------------------


def _draw_step(game: GamePlay, conn: ConnectionInfo, index: int, total: int) -> None:
    console.clear()

    progress = Text()
    progress.append(f"  Solving… pair {index}/{total} ", style="bold cyan")
    progress.append(f"(label {conn.label}, {conn.bends} bend(s))", style="dim")

    panel = Panel(
        Align.center(render_board(game.state.board, highlight=conn)),
        title=f"[bold cyan]Auto-Solve  {game.state.board.rows}×{game.state.board.cols}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(progress))
    sys.stdout.flush()


def _animate(board: Board, solution: Solution, delay: float) -> None:
    game = GamePlay.from_board(board)
    total = len(solution.connections)
    for i, conn in enumerate(solution.connections, 1):
        _draw_step(game, conn, i, total)
        time.sleep(delay)
        game.apply(conn)


def show_solution(board: Board, solution: Solution, animate: bool = False, delay: float = 0.4) -> None:
    """Print the outcome of a solve; optionally replay it step by step."""
    if solution.is_solved and animate:
        _animate(board, solution, delay)

    title = f"{board.rows}×{board.cols}  •  {board.tile_count} tiles"
    if not solution.is_solved:
        status = Text("No full pairing exists for this board.", style="bold red")
        border = "red"
    elif not solution.connections:
        status = Text("The board is already empty.", style="green")
        border = "green"
    else:
        status = Text(f"Cleared in {len(solution)} pairs.", style="bold green")
        border = "bold green"

    group = Group(Align.center(render_board(board)), Text(""), Align.center(status))
    console.print()
    console.print(Align.center(Panel(group, title=f"[bold]{title}[/bold]", border_style=border, padding=(1, 2))))
    if solution.connections:
        console.print(Align.center(render_steps(solution.connections)))
