"""Reads and writes boards in the plain text puzzle format.

The format::

    # comments start with '#', blank lines are ignored
    3
    1 2 3
    8 4 0   # trailing comments are fine too
    7 6 5

The first line holds the side length N, followed by N rows of N
whitespace-separated tile numbers, 0 being the blank.
"""

from __future__ import annotations

import logging
from pathlib import Path

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamesolver.solvability import is_solvable
from npuzzle.engine.gamestate import State
from npuzzle.models.board import Board, content_is_valid
from npuzzle.models.errors import ContentError, FormatError, UnsolvableError

logger = logging.getLogger(__name__)


class BoardParser:
    """Stateless parser; all methods are static."""

    @staticmethod
    def parse(text: str, check_solvable: bool = True) -> State:
        """Parse *text* into a root ``State``.

        Raises ``FormatError``, ``ContentError`` or, when *check_solvable*
        is set, ``UnsolvableError``.
        """
        lines = BoardParser._significant_lines(text)
        if not lines:
            raise FormatError("Missing board size.")

        size_line, size_tokens = lines[0]
        if len(size_tokens) != 1:
            raise FormatError(
                f"Expected a single board size, got {' '.join(size_tokens)!r}.",
                size_line,
            )
        size = BoardParser._to_int(size_tokens[0], size_line)
        if size < 2:
            raise FormatError(f"Board size must be at least 2, got {size}.", size_line)

        rows = lines[1:]
        if len(rows) != size:
            raise FormatError(
                f"Expected {size} rows, got {len(rows)}.",
                rows[-1][0] if len(rows) > size else None,
            )

        tiles: list[int] = []
        for line_no, tokens in rows:
            if len(tokens) != size:
                raise FormatError(
                    f"Expected {size} tiles per row, got {len(tokens)}.", line_no
                )
            tiles.extend(BoardParser._to_int(t, line_no) for t in tokens)

        if not content_is_valid(tiles, size):
            logger.debug("Rejected board content %s", tiles)
            raise ContentError(
                f"Tiles must be each of 0..{size * size - 1} exactly once."
            )

        board = Board(size=size, tiles=tuple(tiles))
        if check_solvable and not is_solvable(board, GameGenerator.goal(size)):
            logger.debug("Rejected unsolvable board %s", tiles)
            raise UnsolvableError(
                f"This {size}×{size} board cannot reach the goal: "
                "its inversion parity does not match."
            )
        return State(board)

    @staticmethod
    def parse_file(path: Path | str, check_solvable: bool = True) -> State:
        return BoardParser.parse(
            Path(path).read_text(encoding="utf-8"), check_solvable=check_solvable
        )

    @staticmethod
    def format(board: Board, comment: str | None = None) -> str:
        """Return *board* in the text format ``parse`` accepts."""
        width = len(str(board.size * board.size - 1))
        lines: list[str] = []
        if comment:
            lines.extend(f"# {line}" for line in comment.splitlines())
        lines.append(str(board.size))
        for row in board.rows:
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _significant_lines(text: str) -> list[tuple[int, list[str]]]:
        """Return ``(line number, tokens)`` for every non-empty line."""
        out: list[tuple[int, list[str]]] = []
        for line_no, raw in enumerate(text.splitlines(), 1):
            tokens = raw.split("#", 1)[0].split()
            if tokens:
                out.append((line_no, tokens))
        return out

    @staticmethod
    def _to_int(token: str, line_no: int) -> int:
        try:
            return int(token)
        except ValueError:
            raise FormatError(f"{token!r} is not a number.", line_no) from None
