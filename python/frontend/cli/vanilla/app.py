"""Vanilla terminal renderer with no third-party dependencies.

Uses only stdlib (print, ANSI codes) to show a solved search.
"""

from __future__ import annotations

import sys
from typing import TextIO

from npuzzle.engine.gamesolver import SearchResult
from npuzzle.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    m, s = divmod(seconds, 60)
    return f"{int(m)}:{s:05.2f}" if m else f"{s:.2f}s"


def _stats_lines(result: SearchResult) -> list[str]:
    return [
        f"  Moves: {_Y}{result.moves}{_R}",
        f"  Total generated: {_Y}{result.total_generated}{_R}  |  "
        f"Max open size: {_Y}{result.max_open_size}{_R}",
        f"  Expanded: {_Y}{result.expanded}{_R}  |  "
        f"Time: {_Y}{_format_time(result.elapsed)}{_R}",
    ]


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def run(
    result: SearchResult,
    goal: Board,
    quiet: bool = False,
    out: TextIO | None = None,
) -> None:
    """Print the solution in *result*, one board per step, then statistics."""
    out = out or sys.stdout

    if not quiet:
        directions = result.directions
        for step, board in enumerate(result.path):
            if step == 0:
                print(f"{_C}  Start{_R}", file=out)
            else:
                print(
                    f"{_C}  Move {step}{_R} {_DIM}(blank "
                    f"{directions[step - 1].value}){_R}",
                    file=out,
                )
            print(_render_board(board, goal), file=out)
            print(file=out)

    print(f"{_G}  Solved in {result.moves} moves!{_R}", file=out)
    for line in _stats_lines(result):
        print(line, file=out)
