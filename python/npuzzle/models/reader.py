"""Parses puzzle boards from text.

The format is whitespace separated integers: the dimension ``N`` followed
by the ``N²`` tiles in row-major order, 0 marking the blank::

    3
     1  2  3
     4  0  5
     7  8  6
"""

from __future__ import annotations

import sys
from pathlib import Path

from npuzzle.models.board import Board, InvalidBoardError


def read_board(text: str) -> Board:
    """Parse *text* into a :class:`Board`.

    Raises :class:`InvalidBoardError` for anything that is not exactly one
    well-formed board.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidBoardError("Input is empty; expected a board dimension.")

    values: list[int] = []
    for pos, token in enumerate(tokens, 1):
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidBoardError(
                f"Token {pos} ({token!r}) is not an integer."
            ) from None

    size, flat = values[0], values[1:]
    if size < 2:
        raise InvalidBoardError(f"Board dimension must be at least 2, got {size}.")
    if len(flat) != size * size:
        raise InvalidBoardError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(flat)}."
        )
    return Board.from_flat(size, flat)


def load_board(source: str | Path) -> Board:
    """Read a board from the file at *source*, or stdin when it is ``-``."""
    if str(source) == "-":
        return read_board(sys.stdin.read())
    return read_board(Path(source).read_text())
