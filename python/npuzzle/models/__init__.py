from npuzzle.models.board import Board, Direction, content_is_valid
from npuzzle.models.errors import (
    ContentError,
    FormatError,
    PuzzleError,
    SearchExhausted,
    UnsolvableError,
)

__all__ = [
    "Board",
    "ContentError",
    "Direction",
    "FormatError",
    "PuzzleError",
    "SearchExhausted",
    "UnsolvableError",
    "content_is_valid",
]
