"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same report the
vanilla frontend prints: the move count and every board along the
solution path, or an unsolvable notice.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import Solver
from npuzzle.models.board import Board, Direction

_ARROWS: dict[Direction, str] = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(board: Board, step: int, direction: Direction | None) -> Panel:
    title = "[bold cyan]Start[/bold cyan]" if step == 0 else f"[cyan]Move {step}[/cyan]"
    subtitle = None
    if direction is not None:
        subtitle = f"[dim]{_ARROWS[direction]} {direction.value}[/dim]"
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        subtitle=subtitle,
        border_style="bright_blue",
        padding=(0, 1),
    )


# -- report -------------------------------------------------------------------


def _summary(solver: Solver) -> Text:
    stats = Text()
    if not solver.is_solvable():
        stats.append("  No solution possible", style="bold red")
    else:
        stats.append("  Minimum number of moves: ", style="dim")
        stats.append(str(solver.moves()), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(sum(solver.expanded.values())), style="bold yellow")
    return stats


def render(solver: Solver) -> Group:
    """Return a renderable with the summary and every step of the solution."""
    size = solver.initial.size
    parts: list[Panel | Align] = [Align.center(_summary(solver))]

    solution = solver.solution()
    directions = solver.directions()
    if solution is None or directions is None:
        parts.append(
            Panel(
                Align.center(_render_board(solver.initial)),
                title=f"[bold red]Unsolvable  {size}×{size}[/bold red]",
                border_style="red",
                padding=(1, 2),
            )
        )
        return Group(*parts)

    for step, board in enumerate(solution):
        direction = directions[step - 1] if step else None
        parts.append(_step_panel(board, step, direction))

    parts.append(
        Align.center(
            Text(f"\n  ★ Solved {size}×{size} ★\n", style="bold green")
        )
    )
    return Group(*parts)


# -- public entry point -------------------------------------------------------


def run(solver: Solver, console: Console | None = None) -> None:
    """Print the Rich report for *solver*."""
    console = console or Console()
    console.print(render(solver))
