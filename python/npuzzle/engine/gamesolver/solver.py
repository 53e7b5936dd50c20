"""Sliding puzzle solver.

A* over the Manhattan heuristic, run twice in lockstep: once from the
initial board and once from its twin.  Exactly one of the two can reach the
goal, so whichever side pops a goal node first decides solvability.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from npuzzle.engine.gamesolver.node import SearchNode
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)


class _Frontier:
    """Open heap and closed set for one side of the search."""

    def __init__(self, root: Board) -> None:
        self._heap: list[SearchNode] = []
        self._counter = itertools.count()
        self._closed: set[Board] = set()
        self.expanded = 0
        self._push(root, None)

    def _push(self, board: Board, previous: SearchNode | None) -> None:
        heapq.heappush(self._heap, SearchNode(next(self._counter), board, previous))

    def pop(self) -> SearchNode:
        """Remove the best unexpanded node.

        Raises :class:`IndexError` once every reachable board is expanded.
        """
        node = heapq.heappop(self._heap)
        while node.board in self._closed:
            node = heapq.heappop(self._heap)
        return node

    def expand(self, node: SearchNode) -> None:
        self._closed.add(node.board)
        self.expanded += 1
        came_from = node.previous.board if node.previous is not None else None
        for board in node.board.neighbors():
            if board == came_from or board in self._closed:
                continue
            self._push(board, node)


class Solver:
    """Solves a board eagerly on construction.

    Example::

        solver = Solver(Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]]))
        solver.is_solvable()   # True
        solver.moves()         # 2
    """

    def __init__(self, initial: Board) -> None:
        if initial is None:
            raise ValueError("Solver requires an initial board.")
        if not isinstance(initial, Board):
            raise TypeError(
                f"Solver requires a Board, got {type(initial).__name__}."
            )

        self.initial = initial
        self._solution: list[Board] | None = None
        self._moves = -1
        self._solvable = False
        self.expanded: dict[str, int] = {}

        self._search()

    # -- search ---------------------------------------------------------------

    def _search(self) -> None:
        main = _Frontier(self.initial)
        twin = _Frontier(self.initial.twin())
        logger.debug(
            "Starting search on %d×%d board (manhattan=%d)",
            self.initial.dimension(),
            self.initial.dimension(),
            self.initial.manhattan(),
        )

        goal: SearchNode | None = None
        while True:
            node = main.pop()
            twin_node = twin.pop()
            if node.board.is_goal():
                goal = node
                break
            if twin_node.board.is_goal():
                break
            main.expand(node)
            twin.expand(twin_node)

        self.expanded = {"main": main.expanded, "twin": twin.expanded}

        if goal is not None:
            self._solvable = True
            self._moves = goal.moves
            self._solution = goal.path()
            logger.info(
                "Solved in %d moves (%d nodes expanded)", self._moves, main.expanded
            )
        else:
            logger.info(
                "Board is unsolvable (%d nodes expanded)", sum(self.expanded.values())
            )

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._solvable

    def moves(self) -> int:
        """Minimum number of slides to the goal, or -1 if unsolvable."""
        return self._moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return list(self._solution)

    def directions(self) -> list[Direction] | None:
        """Tile slides along the solution, or ``None`` if unsolvable."""
        if self._solution is None:
            return None
        return [
            a.direction_to(b) for a, b in itertools.pairwise(self._solution)
        ]
