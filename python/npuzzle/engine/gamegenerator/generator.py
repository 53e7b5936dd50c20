"""Generates sliding puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Board

DEFAULT_SCRAMBLE_STEPS = 30


class GameGenerator:
    """Creates boards by shuffling from the solved state or at random."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return *board* after *steps* random slides, never undoing the last one."""
        rng = rng or random.Random()
        prev: Board | None = None

        for _ in range(steps):
            neighbors = board.neighbors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        steps: int = DEFAULT_SCRAMBLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        rng = rng or random.Random()
        board = GameGenerator.scramble(GameGenerator.solved(size), steps, rng)

        # Ensure the board is not already solved
        while board.is_goal() and steps > 0:
            board = GameGenerator.scramble(board, steps, rng)
        return board

    @staticmethod
    def random_board(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly random tile permutation (may be unsolvable)."""
        rng = rng or random.Random()
        flat = list(range(size * size))
        rng.shuffle(flat)
        return Board.from_flat(size, flat)

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Decide solvability from inversion parity.

        This is the textbook 15-puzzle parity rule (Johnson & Story, 1879),
        kept separate from the search so tests can check the twin search
        against it.  For odd N the inversion count must be even; for even N
        the inversion count plus the blank's row (counted from the bottom,
        0-based) must be even.
        """
        n = board.size
        flat = [v for row in board.tiles for v in row if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0
