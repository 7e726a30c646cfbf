"""Heuristic estimates of the remaining number of slides.

Every evaluator is measured against a specific goal board, so a
``Heuristic`` is built once per search from the goal and then called on
each generated board.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import StrEnum

from npuzzle.models.board import Board


class HeuristicKind(StrEnum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"
    MISPLACED = "misplaced"
    LINEAR_CONFLICT = "linear_conflict"


# goal_pos[value] == (row, col) of that tile in the goal
GoalPositions = list[tuple[int, int]]


def goal_positions(goal: Board) -> GoalPositions:
    pos: GoalPositions = [(0, 0)] * len(goal.tiles)
    for index, value in enumerate(goal.tiles):
        pos[value] = goal.grid_index(index)
    return pos


# -- evaluators ---------------------------------------------------------------


def manhattan(board: Board, goal_pos: GoalPositions) -> int:
    """Sum of row and column distances of every tile from its goal cell."""
    n = board.size
    dist = 0
    for index, value in enumerate(board.tiles):
        if value == 0:
            continue
        r, c = divmod(index, n)
        gr, gc = goal_pos[value]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def euclidean(board: Board, goal_pos: GoalPositions) -> int:
    """Sum of truncated straight-line distances of every tile."""
    n = board.size
    dist = 0
    for index, value in enumerate(board.tiles):
        if value == 0:
            continue
        r, c = divmod(index, n)
        gr, gc = goal_pos[value]
        dist += math.isqrt((r - gr) ** 2 + (c - gc) ** 2)
    return dist


def misplaced(board: Board, goal_pos: GoalPositions) -> int:
    """Number of cells, blank included, that differ from the goal."""
    n = board.size
    return sum(
        1
        for index, value in enumerate(board.tiles)
        if goal_pos[value] != divmod(index, n)
    )


def row_conflicts(board: Board, goal_pos: GoalPositions) -> int:
    """Penalty of 2 for each reversed pair of tiles that share their goal row.

    Only rows are scanned.  Column conflicts are not counted.
    """
    n = board.size
    penalty = 0
    for r in range(n):
        goal_cols = [
            goal_pos[v][1]
            for v in board.tiles[r * n : (r + 1) * n]
            if v != 0 and goal_pos[v][0] == r
        ]
        for i, gi in enumerate(goal_cols):
            for gj in goal_cols[i + 1 :]:
                if gi > gj:
                    penalty += 2
    return penalty


def linear_conflict(board: Board, goal_pos: GoalPositions) -> int:
    return manhattan(board, goal_pos) + row_conflicts(board, goal_pos)


_EVALUATORS: dict[HeuristicKind, Callable[[Board, GoalPositions], int]] = {
    HeuristicKind.MANHATTAN: manhattan,
    HeuristicKind.EUCLIDEAN: euclidean,
    HeuristicKind.MISPLACED: misplaced,
    HeuristicKind.LINEAR_CONFLICT: linear_conflict,
}


class Heuristic:
    """A heuristic kind bound to one goal board.

    Example::

        h = Heuristic(HeuristicKind.MANHATTAN, GameGenerator.goal(3))
        h(board)  # -> int
    """

    def __init__(self, kind: HeuristicKind | str, goal: Board) -> None:
        self.kind = HeuristicKind(kind)
        self.goal = goal
        self._goal_pos = goal_positions(goal)
        self._fn = _EVALUATORS[self.kind]

    def __call__(self, board: Board) -> int:
        return self._fn(board, self._goal_pos)

    def __repr__(self) -> str:
        return f"Heuristic({self.kind.value!r}, size={self.goal.size})"
