"""Optimal sliding puzzle solver (A* with twin-board unsolvability detection)."""

from npuzzle.engine.gamesolver import Solver
from npuzzle.models import Board, Direction, InvalidBoardError

__all__ = ["Board", "Direction", "InvalidBoardError", "Solver"]
__version__ = "0.1.0"
