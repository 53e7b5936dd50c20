"""Solver test suite — optimality, unsolvability, and path replay.

Optimal move counts are checked against a breadth-first oracle: every 2×2
board exhaustively, and seeded 3×3 scrambles short enough to search
blindly.  Every test is hard-killed by ``pytest-timeout`` (configured in
``pyproject.toml``).  Solutions are replayed through ``Board.slide`` to
verify that each step is a legal move.
"""

from __future__ import annotations

import itertools
import random
from collections import deque

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamesolver import SearchNode, Solver
from npuzzle.engine.gamesolver.solver import _Frontier
from npuzzle.models.board import Board, Direction


# -- helpers ------------------------------------------------------------------


def _bfs_distance(start: Board) -> int | None:
    """Shortest slide count from *start* to the goal, or ``None``."""
    seen = {start}
    queue: deque[tuple[Board, int]] = deque([(start, 0)])
    while queue:
        board, dist = queue.popleft()
        if board.is_goal():
            return dist
        for neighbor in board.neighbors():
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append((neighbor, dist + 1))
    return None


def _assert_solve(board: Board) -> Solver:
    """Solve the board and verify the returned path reaches the goal state."""
    solver = Solver(board)
    assert solver.is_solvable()

    solution = solver.solution()
    directions = solver.directions()
    assert solution is not None and directions is not None

    # ---- path sanity --------------------------------------------------------
    assert solution[0] == board
    assert solution[-1].is_goal()
    assert len(solution) == solver.moves() + 1
    assert len(directions) == solver.moves()

    # ---- replay slides from the initial board -------------------------------
    current = board
    for i, direction in enumerate(directions):
        nxt = current.slide(direction)
        assert nxt is not None, f"Move {i} ({direction.value}) was invalid"
        assert nxt == solution[i + 1]
        current = nxt
    assert current.is_goal()

    # ---- heuristic never overestimates what remains -------------------------
    for i, step in enumerate(solution):
        assert step.manhattan() <= solver.moves() - i

    return solver


def _all_boards(size: int) -> list[Board]:
    return [
        Board.from_flat(size, list(perm))
        for perm in itertools.permutations(range(size * size))
    ]


def _scrambles(size: int, steps: int, count: int, seed: int) -> list[Board]:
    rng = random.Random(seed)
    return [GameGenerator.generate(size, steps, rng) for _ in range(count)]


def _ids(board: Board) -> str:
    return "-".join(str(v) for row in board.tiles for v in row)


_BOARDS_2x2 = _all_boards(2)
_SCRAMBLES_3x3 = _scrambles(3, 14, 12, seed=42)
_RANDOM_3x3 = [GameGenerator.random_board(3, random.Random(s)) for s in range(4)]


# -- concrete scenarios -------------------------------------------------------


def test_two_move_board() -> None:
    board = Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    solver = _assert_solve(board)

    assert solver.moves() == 2
    assert solver.solution() == [
        board,
        Board([[1, 2, 3], [4, 5, 0], [7, 8, 6]]),
        Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]]),
    ]
    assert solver.directions() == [Direction.LEFT, Direction.UP]


def test_already_solved() -> None:
    board = Board.goal(3)
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]
    assert solver.directions() == []


def test_swapped_last_tiles_is_unsolvable() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]]))

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.directions() is None


def test_classic_4x4() -> None:
    board = Board(
        [[1, 2, 3, 4], [5, 6, 0, 8], [9, 10, 7, 12], [13, 14, 11, 15]]
    )
    solver = _assert_solve(board)
    assert solver.moves() == 3


def test_solution_is_a_copy() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]]))
    solution = solver.solution()
    assert solution is not None
    solution.clear()
    assert len(solver.solution() or []) == 3


# -- invalid construction -----------------------------------------------------


def test_rejects_missing_board() -> None:
    with pytest.raises(ValueError):
        Solver(None)  # type: ignore[arg-type]


def test_rejects_non_board() -> None:
    with pytest.raises(TypeError):
        Solver([[1, 2], [3, 0]])  # type: ignore[arg-type]


# -- optimality ---------------------------------------------------------------


@pytest.mark.parametrize("board", _BOARDS_2x2, ids=_ids)
def test_every_2x2_board(board: Board) -> None:
    expected = _bfs_distance(board)
    solver = Solver(board)

    assert solver.is_solvable() == (expected is not None)
    if expected is None:
        assert solver.moves() == -1
    else:
        assert solver.moves() == expected
        _assert_solve(board)


@pytest.mark.parametrize("board", _SCRAMBLES_3x3, ids=_ids)
def test_3x3_scramble_is_optimal(board: Board) -> None:
    expected = _bfs_distance(board)
    assert expected is not None

    solver = _assert_solve(board)
    assert solver.moves() == expected
    assert board.manhattan() <= expected


# -- twin parity --------------------------------------------------------------


@pytest.mark.parametrize("board", _BOARDS_2x2, ids=_ids)
def test_exactly_one_of_board_and_twin_is_solvable_2x2(board: Board) -> None:
    assert Solver(board).is_solvable() != Solver(board.twin()).is_solvable()


@pytest.mark.parametrize("board", _RANDOM_3x3, ids=_ids)
def test_solver_agrees_with_inversion_parity(board: Board) -> None:
    expected = GameGenerator.is_solvable(board)
    assert GameGenerator.is_solvable(board.twin()) != expected

    solver = Solver(board)
    assert solver.is_solvable() == expected
    if expected:
        assert solver.moves() >= board.manhattan()
        assert (solver.solution() or [board])[-1].is_goal()


def test_unsolvable_expands_both_sides() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]]))
    assert solver.expanded["main"] > 0
    assert solver.expanded["twin"] > 0


# -- search nodes -------------------------------------------------------------


def test_search_node_moves_and_priority() -> None:
    board = Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    root = SearchNode(0, board)
    child = SearchNode(1, board.neighbors()[3], root)

    assert root.moves == 0
    assert root.manhattan == 2
    assert root.priority == 2
    assert child.moves == 1
    assert child.manhattan == 1
    assert child.priority == 2
    assert child.path() == [board, board.neighbors()[3]]


def test_search_node_ordering() -> None:
    board = Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    root = SearchNode(0, board)
    closer = SearchNode(5, board.neighbors()[3], root)  # f = 1 + 1
    farther = SearchNode(1, board.neighbors()[0], root)  # f = 1 + 3

    # Equal f: the node nearer the goal wins, then insertion order.
    assert closer < root
    assert root < farther
    assert SearchNode(2, board) < SearchNode(3, board)
    assert sorted([farther, root, closer]) == [closer, root, farther]


def test_solvable_reports_both_sides() -> None:
    solver = Solver(Board([[1, 2, 3], [4, 0, 5], [7, 8, 6]]))
    assert set(solver.expanded) == {"main", "twin"}
    assert solver.expanded["main"] == 2


# -- frontier -----------------------------------------------------------------


def test_frontier_exhausts_its_component() -> None:
    # A 2×2 board reaches exactly 12 of the 24 permutations.
    frontier = _Frontier(Board([[2, 1], [3, 0]]))
    seen: set[Board] = set()
    while True:
        try:
            node = frontier.pop()
        except IndexError:
            break
        assert node.board not in seen
        seen.add(node.board)
        frontier.expand(node)

    assert frontier.expanded == 12
    assert len(seen) == 12
    assert not any(board.is_goal() for board in seen)
