"""Rich terminal renderer: styled tables and panels for a solved search.

Uses the ``rich`` library for output.  Prints each board of the solution
with the tiles already on their goal cell in green, then a statistics
panel.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import SearchResult
from npuzzle.models.board import Board, Direction

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.1f} ms"
    m, s = divmod(seconds, 60)
    return f"{int(m):02d}:{s:05.2f}"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> Table:
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

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_stats(result: SearchResult) -> Panel:
    stats = Table.grid(padding=(0, 2))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow", justify="right")
    stats.add_row("Moves", str(result.moves))
    stats.add_row("Total generated", str(result.total_generated))
    stats.add_row("Max open size", str(result.max_open_size))
    stats.add_row("Expanded", str(result.expanded))
    stats.add_row("Time", _format_time(result.elapsed))
    return Panel(
        stats,
        title="[bold cyan]Search statistics[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )


# -- solution screen ----------------------------------------------------------


def _step_title(step: int, direction: Direction | None) -> Text:
    title = Text()
    if direction is None:
        title.append("  Start", style="bold cyan")
    else:
        title.append(f"  Move {step} ", style="bold cyan")
        title.append(f"(blank {direction.value})", style="dim")
    return title


def run(
    result: SearchResult,
    goal: Board,
    quiet: bool = False,
    out: Console | None = None,
) -> None:
    """Print the solution in *result*, one board per step, then statistics."""
    out = out or console

    if not quiet:
        directions: list[Direction | None] = [None, *result.directions]
        for step, (board, direction) in enumerate(zip(result.path, directions)):
            out.print(
                Group(
                    _step_title(step, direction),
                    Align.left(_render_board(board, goal)),
                )
            )

    out.print()
    out.print(
        Text(f"  Solved in {result.moves} moves!", style="bold green")
    )
    out.print(_render_stats(result))
