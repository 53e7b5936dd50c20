"""Vanilla terminal frontend — plain text, no third-party dependencies.

Prints the solver result in the classic format: either
``No solution possible`` or ``Minimum number of moves = <k>`` followed by
every board on the solution path.
"""

from __future__ import annotations

import sys
from typing import TextIO

from npuzzle.engine.gamesolver import Solver

NO_SOLUTION = "No solution possible"


# -- rendering ----------------------------------------------------------------


def render(solver: Solver) -> str:
    """Return the full textual report for *solver*."""
    solution = solver.solution()
    if not solver.is_solvable() or solution is None:
        return NO_SOLUTION + "\n"

    lines: list[str] = [f"Minimum number of moves = {solver.moves()}"]
    for board in solution:
        lines.append(str(board))
    return "\n".join(lines) + "\n"


# -- public entry point -------------------------------------------------------


def run(solver: Solver, out: TextIO | None = None) -> None:
    """Write the report for *solver* to *out* (stdout by default)."""
    out = out or sys.stdout
    out.write(render(solver))
    out.flush()
