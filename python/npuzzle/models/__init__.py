from npuzzle.models.board import Board, Direction, InvalidBoardError
from npuzzle.models.reader import load_board, read_board

__all__ = ["Board", "Direction", "InvalidBoardError", "load_board", "read_board"]
