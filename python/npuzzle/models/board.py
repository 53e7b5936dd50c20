"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class InvalidBoardError(ValueError):
    """Raised when a grid is not a square permutation of ``0..N²-1``."""


# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank scan order for successors: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Board:
    """Immutable N×N sliding puzzle board.

    Tiles are stored as a tuple of row tuples; 0 is the blank.  Any nested
    sequence is accepted and copied, so the board never aliases the
    caller's lists::

        Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    """

    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        tiles = _validate(self.tiles)
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "blank_pos", _find_blank(tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls([flat[r * size : (r + 1) * size] for r in range(size)])

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    @classmethod
    def _trusted(
        cls, tiles: tuple[tuple[int, ...], ...], blank_pos: tuple[int, int]
    ) -> Board:
        # Successors are permutations by construction; skip validation.
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        object.__setattr__(obj, "blank_pos", blank_pos)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.tiles)

    def dimension(self) -> int:
        return len(self.tiles)

    def hamming(self) -> int:
        """Number of non-blank tiles outside their goal cell."""
        n = self.size
        return sum(
            1
            for r, row in enumerate(self.tiles)
            for c, val in enumerate(row)
            if val != 0 and val != r * n + c + 1
        )

    def manhattan(self) -> int:
        """Sum of row and column distances of every tile from its goal cell."""
        n = self.size
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, n)
                total += abs(goal_r - r) + abs(goal_c - c)
        return total

    def is_goal(self) -> bool:
        return self.hamming() == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards one slide away, blank moved up, down, left, then right."""
        n = self.size
        br, bc = self.blank_pos
        out: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < n and 0 <= nc < n:
                out.append(self._swap((br, bc), (nr, nc), blank_pos=(nr, nc)))
        return out

    def twin(self) -> Board:
        """Board with the first two non-blank tiles (row-major) exchanged.

        The swap flips permutation parity without moving the blank, so
        exactly one of a board and its twin can reach the goal.
        """
        n = self.size
        cells = [
            (r, c)
            for r in range(n)
            for c in range(n)
            if self.tiles[r][c] != 0
        ]
        return self._swap(cells[0], cells[1], blank_pos=self.blank_pos)

    def slide(self, direction: Direction) -> Board | None:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns ``None`` if there is no such tile.
        """
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._swap((br, bc), (tr, tc), blank_pos=(tr, tc))

    def direction_to(self, other: Board) -> Direction:
        """Return the slide that turns this board into *other*."""
        for direction in Direction:
            if self.slide(direction) == other:
                return direction
        raise ValueError("Boards are not one slide apart.")

    # -- helpers --------------------------------------------------------------

    def _swap(
        self,
        a: tuple[int, int],
        b: tuple[int, int],
        blank_pos: tuple[int, int],
    ) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board._trusted(tuple(tuple(row) for row in rows), blank_pos)

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append("".join(f"{val:2d} " for val in row))
        return "\n".join(lines) + "\n"


def _validate(tiles: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    try:
        rows = tuple(tuple(row) for row in tiles)
    except TypeError as exc:
        raise InvalidBoardError("Tiles must be a sequence of rows.") from exc

    n = len(rows)
    if n < 2:
        raise InvalidBoardError(f"Board dimension must be at least 2, got {n}.")
    for r, row in enumerate(rows):
        if len(row) != n:
            raise InvalidBoardError(
                f"Row {r} has {len(row)} tiles; expected {n} for a square board."
            )
        for val in row:
            if isinstance(val, bool) or not isinstance(val, int):
                raise InvalidBoardError(f"Tile {val!r} is not an integer.")

    values = sorted(val for row in rows for val in row)
    if values != list(range(n * n)):
        missing = sorted(set(range(n * n)) - set(values))
        raise InvalidBoardError(
            f"Tiles must be a permutation of 0..{n * n - 1}; "
            f"missing {missing or 'none'}, got {len(values)} values."
        )
    return rows


def _find_blank(tiles: tuple[tuple[int, ...], ...]) -> tuple[int, int]:
    return next(
        (r, c)
        for r, row in enumerate(tiles)
        for c, val in enumerate(row)
        if val == 0
    )
