from __future__ import annotations

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.heuristics import Heuristic, HeuristicKind
from npuzzle.models.board import Board

GOAL_3 = GameGenerator.goal(3)


def _h(kind: HeuristicKind, tiles: list[int]) -> int:
    return Heuristic(kind, GOAL_3)(Board.from_flat(3, tiles))


@pytest.mark.parametrize("kind", list(HeuristicKind))
@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_zero_on_goal(kind: HeuristicKind, size: int) -> None:
    goal = GameGenerator.goal(size)
    assert Heuristic(kind, goal)(goal) == 0


@pytest.mark.parametrize(
    "kind, expected",
    [
        (HeuristicKind.MANHATTAN, 1),
        (HeuristicKind.EUCLIDEAN, 1),
        (HeuristicKind.MISPLACED, 2),  # tile 4 and the blank
        (HeuristicKind.LINEAR_CONFLICT, 1),
    ],
)
def test_one_slide_from_goal(kind: HeuristicKind, expected: int) -> None:
    assert _h(kind, [1, 2, 3, 8, 4, 0, 7, 6, 5]) == expected


def test_diagonal_displacement() -> None:
    # Tile 1 sits one row down and one column right of its goal cell.
    tiles = [0, 2, 3, 8, 1, 4, 7, 6, 5]
    assert _h(HeuristicKind.MANHATTAN, tiles) == 2
    assert _h(HeuristicKind.EUCLIDEAN, tiles) == 1
    assert _h(HeuristicKind.MISPLACED, tiles) == 2


def test_far_tiles() -> None:
    # 1 and 5 exchanged across the diagonal, blank at home.
    tiles = [5, 2, 3, 8, 0, 4, 7, 6, 1]
    assert _h(HeuristicKind.MANHATTAN, tiles) == 8
    assert _h(HeuristicKind.EUCLIDEAN, tiles) == 4
    assert _h(HeuristicKind.MISPLACED, tiles) == 2


def test_misplaced_counts_the_blank() -> None:
    # Only the blank and tile 8 are swapped.
    tiles = [1, 2, 3, 0, 8, 4, 7, 6, 5]
    assert _h(HeuristicKind.MANHATTAN, tiles) == 1
    assert _h(HeuristicKind.MISPLACED, tiles) == 2


def test_linear_conflict_counts_reversed_row_pairs() -> None:
    tiles = [2, 1, 3, 8, 0, 4, 7, 6, 5]
    assert _h(HeuristicKind.MANHATTAN, tiles) == 2
    assert _h(HeuristicKind.LINEAR_CONFLICT, tiles) == 4


def test_linear_conflict_penalises_every_pair() -> None:
    tiles = [3, 2, 1, 8, 0, 4, 7, 6, 5]
    assert _h(HeuristicKind.MANHATTAN, tiles) == 4
    assert _h(HeuristicKind.LINEAR_CONFLICT, tiles) == 4 + 3 * 2


def test_linear_conflict_ignores_columns() -> None:
    # 1 and 8 are reversed within their goal column only.
    tiles = [8, 2, 3, 1, 0, 4, 7, 6, 5]
    assert _h(HeuristicKind.LINEAR_CONFLICT, tiles) == _h(HeuristicKind.MANHATTAN, tiles) == 2


def test_euclidean_never_exceeds_manhattan() -> None:
    goal = GameGenerator.goal(4)
    manhattan = Heuristic(HeuristicKind.MANHATTAN, goal)
    euclidean = Heuristic(HeuristicKind.EUCLIDEAN, goal)
    for seed in range(10):
        board = GameGenerator.generate(4, seed=seed)
        assert 0 < euclidean(board) <= manhattan(board)


def test_kind_by_name() -> None:
    heuristic = Heuristic("linear_conflict", GOAL_3)
    assert heuristic.kind is HeuristicKind.LINEAR_CONFLICT
    with pytest.raises(ValueError):
        Heuristic("hamming", GOAL_3)
