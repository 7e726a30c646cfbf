"""A node of the search tree."""

from __future__ import annotations

from npuzzle.models.board import Board


class State:
    """Holds a board, the cost to reach it, its estimate, and its parent.

    States compare and hash by board alone, so the open index and the
    closed set treat two paths to the same board as one entry.
    """

    __slots__ = ("board", "cost", "heuristic", "parent")

    def __init__(
        self,
        board: Board,
        cost: int = 0,
        heuristic: int = 0,
        parent: State | None = None,
    ) -> None:
        self.board = board
        self.cost = cost
        self.heuristic = heuristic
        self.parent = parent

    # -- scoring --------------------------------------------------------------

    @property
    def f(self) -> int:
        return self.cost + self.heuristic

    @property
    def is_root(self) -> bool:
        return self.parent is None

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.board == other.board

    def __hash__(self) -> int:
        return hash(self.board)

    def __repr__(self) -> str:
        return (
            f"State(tiles={list(self.board.tiles)}, cost={self.cost}, "
            f"heuristic={self.heuristic})"
        )
