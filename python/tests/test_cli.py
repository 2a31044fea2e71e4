"""Command-line interface tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from sichuan.main import app
from sichuan.models.board import Board

runner = CliRunner()


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "board.txt"
    path.write_text(text)
    return path


def test_solve_prints_steps(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(_write(tmp_path, "0 0\n1 1\n"))])
    assert result.exit_code == 0, result.output
    assert "Cleared in 2 pairs." in result.output
    assert "Solving steps" in result.output


@pytest.mark.parametrize("order", ["position", "scarcity"])
def test_solve_accepts_order(tmp_path: Path, order: str) -> None:
    path = _write(tmp_path, "0 . 1\n. . .\n1 . 0\n")
    result = runner.invoke(app, ["solve", str(path), "--order", order])
    assert result.exit_code == 0, result.output


def test_solve_animates_replay(tmp_path: Path) -> None:
    path = _write(tmp_path, "0 1 1 0\n")
    result = runner.invoke(app, ["solve", str(path), "--animate", "--delay", "0"])
    assert result.exit_code == 0, result.output
    assert "pair 2/2" in result.output


def test_unsolvable_board_exits_with_one(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(_write(tmp_path, "0 1 2 3\n3 2 1 0\n"))])
    assert result.exit_code == 1
    assert "No full pairing exists" in result.output


def test_malformed_board_exits_with_two(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(_write(tmp_path, "0 0\n0\n"))])
    assert result.exit_code == 2
    assert "Invalid board" in result.output


def test_missing_board_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(tmp_path / "nope.txt")])
    assert result.exit_code != 0


def test_generate_prints_solvable_board() -> None:
    result = runner.invoke(app, ["generate", "-r", "4", "-c", "4", "-l", "4", "--seed", "9"])
    assert result.exit_code == 0, result.output
    board = Board.from_text(result.output)
    assert (board.rows, board.cols) == (4, 4)
    assert board.tile_count == 16


def test_generate_is_reproducible_with_seed() -> None:
    args = ["generate", "-r", "4", "-c", "6", "-l", "5", "--seed", "21"]
    assert runner.invoke(app, args).output == runner.invoke(app, args).output


def test_generate_rejects_odd_area() -> None:
    result = runner.invoke(app, ["generate", "-r", "3", "-c", "3"])
    assert result.exit_code == 2
