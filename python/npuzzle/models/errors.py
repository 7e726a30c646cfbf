"""Exceptions raised by the puzzle core.

Every failure the core reports derives from ``PuzzleError`` so the CLI can
catch them in one place.  None of them is recovered from automatically.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npuzzle.engine.gamesolver.solver import SearchResult


class PuzzleError(Exception):
    """Base class for every error raised by the solver core."""


class FormatError(PuzzleError):
    """The board text is structurally malformed.

    Raised for a missing or non-numeric size, a row of the wrong width,
    the wrong number of rows, or a non-numeric tile token.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ContentError(PuzzleError):
    """The tiles are not a permutation of ``0..N²-1``."""


class UnsolvableError(PuzzleError):
    """The board cannot reach the goal (inversion parity mismatch)."""


class SearchExhausted(PuzzleError):
    """The frontier emptied before the goal was reached.

    This never happens for a board that passed the solvability check; if it
    does, the engine itself is broken.
    """

    def __init__(self, result: SearchResult) -> None:
        self.result = result
        super().__init__(
            f"search exhausted after expanding {result.expanded} states "
            f"({result.total_generated} generated) without reaching the goal"
        )
