#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py board.txt          # plain report
    python main.py board.txt -f rich  # Rich terminal report
    python main.py --random 3         # solve a random 3×3 scramble
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
