"""Search node used by the A* frontier."""

from __future__ import annotations

from dataclasses import dataclass, field

from npuzzle.models.board import Board


@dataclass(order=True)
class SearchNode:
    """A board plus its search context.

    Nodes compare by ``(priority, manhattan, sequence)``: lowest
    ``moves + manhattan`` first, then the node closer to the goal, then the
    one inserted earlier.  ``sequence`` is assigned by the frontier.
    """

    priority: int = field(init=False)
    manhattan: int = field(init=False)
    sequence: int
    board: Board = field(compare=False)
    previous: SearchNode | None = field(default=None, compare=False, repr=False)
    moves: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        self.moves = 0 if self.previous is None else self.previous.moves + 1
        self.manhattan = self.board.manhattan()
        self.priority = self.moves + self.manhattan

    def path(self) -> list[Board]:
        """Boards from the root to this node, in play order."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.previous
        boards.reverse()
        return boards
