from __future__ import annotations

import random

import pytest

from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamesolver import is_solvable
from npuzzle.models.board import content_is_valid


def test_goal_3x3_is_a_spiral() -> None:
    assert GameGenerator.goal(3).tiles == (1, 2, 3, 8, 0, 4, 7, 6, 5)


def test_goal_4x4_is_a_spiral() -> None:
    assert GameGenerator.goal(4).tiles == (
        1, 2, 3, 4,
        12, 13, 14, 5,
        11, 0, 15, 6,
        10, 9, 8, 7,
    )


def test_goal_5x5_is_a_spiral() -> None:
    assert GameGenerator.goal(5).rows == (
        (1, 2, 3, 4, 5),
        (16, 17, 18, 19, 6),
        (15, 24, 0, 20, 7),
        (14, 23, 22, 21, 8),
        (13, 12, 11, 10, 9),
    )


def test_goal_2x2() -> None:
    assert GameGenerator.goal(2).tiles == (1, 2, 0, 3)


@pytest.mark.parametrize("size", range(2, 10))
def test_goal_is_a_permutation(size: int) -> None:
    goal = GameGenerator.goal(size)
    assert content_is_valid(goal.tiles, size)
    assert goal.tiles.count(0) == 1


@pytest.mark.parametrize("size", [0, 1])
def test_goal_rejects_tiny_sizes(size: int) -> None:
    with pytest.raises(ValueError):
        GameGenerator.goal(size)


def test_scramble_without_shuffles_is_identity() -> None:
    goal = GameGenerator.goal(3)
    assert GameGenerator.scramble(goal, 0) == goal


def test_scramble_moves_the_blank() -> None:
    goal = GameGenerator.goal(4)
    board = GameGenerator.scramble(goal, 2, random.Random(3))
    assert board != goal
    assert content_is_valid(board.tiles, 4)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_generate_solvable(size: int) -> None:
    board = GameGenerator.generate(size, seed=size)
    goal = GameGenerator.goal(size)
    assert board != goal
    assert is_solvable(board, goal)


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_generate_unsolvable(size: int) -> None:
    board = GameGenerator.generate(size, seed=size, solvable=False)
    assert content_is_valid(board.tiles, size)
    assert not is_solvable(board, GameGenerator.goal(size))


@pytest.mark.timeout(5)
@pytest.mark.parametrize("seed", range(4))
def test_generate_2x2_leaves_goal_after_full_circles(seed: int) -> None:
    # Twelve non-backtracking slides on 2×2 always come back to the goal.
    goal = GameGenerator.goal(2)
    assert GameGenerator.scramble(goal, 12, random.Random(seed)) == goal

    board = GameGenerator.generate(2, shuffles=12, seed=seed)

    assert board != goal
    assert is_solvable(board, goal)


def test_generate_is_seeded() -> None:
    assert GameGenerator.generate(4, seed=11) == GameGenerator.generate(4, seed=11)
