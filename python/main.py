#!/usr/bin/env python3
"""N-puzzle solver.

Usage::

    python main.py solve board.txt              # A* + Manhattan, Rich output
    python main.py solve -r 3 -H linear_conflict
    python main.py solve board.txt -f vanilla -q
    python main.py generate 4 --seed 7 -o board.txt
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from npuzzle.engine.gameparser import BoardParser  # noqa: E402
from npuzzle.engine.gamesolver import SearchStatus  # noqa: E402
from npuzzle.engine.heuristics import HeuristicKind  # noqa: E402
from npuzzle.models.config import SearchConfig, SearchStrategy  # noqa: E402
from npuzzle.models.errors import PuzzleError, SearchExhausted  # noqa: E402

logger = logging.getLogger("npuzzle")

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

# Exit codes besides 0 (solved) and 2 (usage error, from click)
EXIT_INVALID = 1
EXIT_EXHAUSTED = 4
EXIT_ABORTED = 3


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str, code: int) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    raise typer.Exit(code=code)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding-tile puzzle solver.")


@app.command()
def solve(
    file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, readable=True,
        help="Board file to solve.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "-r", "--random",
        min=2,
        help="Solve a random solvable board of this size instead of FILE.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    heuristic: HeuristicKind = typer.Option(
        HeuristicKind.MANHATTAN, "-H", "--heuristic",
        envvar="NPUZZLE_HEURISTIC",
        help="Heuristic used to rank boards.",
    ),
    strategy: SearchStrategy = typer.Option(
        SearchStrategy.ASTAR, "-s", "--strategy",
        envvar="NPUZZLE_STRATEGY",
        help="astar orders by g+h, greedy by h, uniform by g.",
    ),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps",
        min=1, envvar="NPUZZLE_MAX_STEPS",
        help="Abort after this many expansions.",
    ),
    time_limit: Optional[float] = typer.Option(
        None, "--time-limit",
        envvar="NPUZZLE_TIME_LIMIT",
        help="Abort after this many seconds.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Renderer for the solution.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the statistics, not every board.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="-v for progress, -vv for debug output.",
    ),
) -> None:
    """Solve a board and print the solution."""
    _setup_logging(verbose)

    if (file is None) == (random_size is None):
        raise typer.BadParameter("Give either a FILE or --random SIZE.")

    try:
        config = SearchConfig(
            heuristic=heuristic,
            strategy=strategy,
            max_steps=max_steps,
            time_limit=time_limit,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    try:
        if file is not None:
            board = BoardParser.parse_file(file).board
        else:
            board = GameGenerator.generate(random_size, seed=seed)
            logger.info("Generated board %s", list(board.tiles))

        goal = GameGenerator.goal(board.size)
        result = config.build_solver(goal).search(board)
    except SearchExhausted as e:
        _fail(f"{e}. This is a solver bug, please report it.", EXIT_EXHAUSTED)
    except PuzzleError as e:
        _fail(str(e), EXIT_INVALID)

    if result.status is SearchStatus.ABORTED:
        err_console.print(
            f"[yellow]Search aborted after {result.expanded} expansions "
            f"({result.elapsed:.2f}s) without a solution.[/yellow]"
        )
        raise typer.Exit(code=EXIT_ABORTED)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(result, goal, quiet=quiet)


@app.command()
def generate(
    size: int = typer.Argument(..., min=2, help="Side length of the board."),
    shuffles: Optional[int] = typer.Option(
        None, "-n", "--shuffles",
        min=0,
        help="Random slides applied to the goal (default size*size*100).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    unsolvable: bool = typer.Option(
        False, "-u", "--unsolvable",
        help="Swap two tiles so the board cannot be solved.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        dir_okay=False,
        help="Write the board here instead of stdout.",
    ),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True),
) -> None:
    """Print a random board in the text format."""
    _setup_logging(verbose)

    board = GameGenerator.generate(
        size, shuffles=shuffles, seed=seed, solvable=not unsolvable
    )
    comment = "This puzzle is unsolvable" if unsolvable else "This puzzle is solvable"
    text = BoardParser.format(board, comment=comment)

    if output is None:
        typer.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    logger.info("Wrote %d×%d board to %s", size, size, output)


if __name__ == "__main__":
    app()
