from sichuan.models.board import PADDING, Board, Coord, Direction, shift
from sichuan.models.connection import ConnectionInfo, Path

__all__ = ["PADDING", "Board", "ConnectionInfo", "Coord", "Direction", "Path", "shift"]
