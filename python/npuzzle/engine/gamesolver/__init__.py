from npuzzle.engine.gamesolver.node import SearchNode
from npuzzle.engine.gamesolver.solver import Solver

__all__ = ["SearchNode", "Solver"]
