"""Sliding puzzle solver command line.

Usage::

    npuzzle board.txt                 # plain report
    npuzzle board.txt -f rich         # Rich tables and panels
    cat board.txt | npuzzle -         # read the board from stdin
    npuzzle --random 3 --seed 7       # solve a generated 3×3 scramble
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamegenerator.generator import DEFAULT_SCRAMBLE_STEPS
from npuzzle.engine.gamesolver import Solver
from npuzzle.models import Board, InvalidBoardError, load_board

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(source: Optional[str], size: Optional[int], steps: int, seed: Optional[int]) -> Board:
    if source is not None and size is None:
        return load_board(source)
    if size is not None and source is None:
        board = GameGenerator.generate(size, steps, random.Random(seed))
        logger.debug("Generated %d×%d board with %d scramble steps", size, size, steps)
        return board
    raise typer.BadParameter("Give exactly one of INPUT or --random.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    source: Optional[str] = typer.Argument(
        None,
        metavar="INPUT",
        help="Board file to solve, or '-' for stdin.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the result.",
    ),
    size: Optional[int] = typer.Option(
        None, "--random",
        min=2, max=8,
        help="Solve a random scramble of this size instead of reading INPUT.",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Scramble length used with --random.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed used with --random.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Find the shortest solution of a sliding puzzle, or report that none exists."""
    _configure_logging(verbose)

    try:
        board = _load(source, size, steps, seed)
    except (InvalidBoardError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    solver = Solver(board)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)


if __name__ == "__main__":
    app()
