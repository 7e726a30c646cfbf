from __future__ import annotations

import dataclasses

import pytest

from npuzzle.models.board import Board, Direction, content_is_valid
from npuzzle.models.errors import ContentError, FormatError

GOAL_3 = Board.from_flat(3, [1, 2, 3, 8, 0, 4, 7, 6, 5])


def test_from_flat_keeps_tiles() -> None:
    assert GOAL_3.size == 3
    assert GOAL_3.tiles == (1, 2, 3, 8, 0, 4, 7, 6, 5)


def test_from_flat_wrong_length() -> None:
    with pytest.raises(FormatError):
        Board.from_flat(3, [1, 2, 3])


@pytest.mark.parametrize(
    "flat",
    [
        [1, 1, 3, 8, 0, 4, 7, 6, 5],  # duplicate
        [1, 2, 3, 8, 0, 4, 7, 6, 9],  # out of range
        [1, 2, 3, 8, -1, 4, 7, 6, 5],  # negative
    ],
)
def test_from_flat_bad_content(flat: list[int]) -> None:
    with pytest.raises(ContentError):
        Board.from_flat(3, flat)


def test_from_rows() -> None:
    assert Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]]) == GOAL_3
    with pytest.raises(FormatError):
        Board.from_rows([[1, 2, 3], [8, 0], [7, 6, 5, 4]])


def test_content_is_valid() -> None:
    assert content_is_valid([0, 1, 2, 3], 2)
    assert not content_is_valid([0, 1, 2, 2], 2)
    assert not content_is_valid([0, 1, 2], 2)
    assert not content_is_valid([1, 2, 3, 4], 2)


def test_index_conversions() -> None:
    assert GOAL_3.linear_index(0, 0) == 0
    assert GOAL_3.linear_index(1, 2) == 5
    assert GOAL_3.grid_index(5) == (1, 2)
    assert GOAL_3.grid_index(8) == (2, 2)
    for index in range(9):
        assert GOAL_3.linear_index(*GOAL_3.grid_index(index)) == index


def test_position_of() -> None:
    assert GOAL_3.position_of(0) == (1, 1)
    assert GOAL_3.position_of(4) == (1, 2)
    assert GOAL_3.position_of(42) is None


def test_queries() -> None:
    assert GOAL_3.blank_pos == (1, 1)
    assert GOAL_3.get_tile(2, 0) == 7
    assert GOAL_3.rows == ((1, 2, 3), (8, 0, 4), (7, 6, 5))


def test_equality_and_hash_by_tiles() -> None:
    same = Board(size=3, tiles=(1, 2, 3, 8, 0, 4, 7, 6, 5))
    other = GOAL_3.swap(0, 1)
    assert same == GOAL_3
    assert hash(same) == hash(GOAL_3)
    assert other != GOAL_3
    assert len({GOAL_3, same, other}) == 2


def test_board_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        GOAL_3.tiles = (0,)  # type: ignore[misc]


def test_slide() -> None:
    east = GOAL_3.slide(Direction.EAST)
    assert east is not None
    assert east.tiles == (1, 2, 3, 8, 4, 0, 7, 6, 5)
    assert GOAL_3.tiles == (1, 2, 3, 8, 0, 4, 7, 6, 5)

    north = GOAL_3.slide(Direction.NORTH)
    assert north is not None and north.blank_pos == (0, 1)


def test_slide_off_the_grid() -> None:
    corner = Board.from_flat(2, [0, 1, 2, 3])
    assert corner.slide(Direction.NORTH) is None
    assert corner.slide(Direction.WEST) is None
    assert not corner.can_slide(Direction.NORTH)
    assert corner.can_slide(Direction.SOUTH)
    assert corner.can_slide(Direction.EAST)


def test_is_tile_correct() -> None:
    board = GOAL_3.slide(Direction.EAST)
    assert board is not None
    assert board.is_tile_correct(0, 0, GOAL_3)
    assert not board.is_tile_correct(1, 1, GOAL_3)
    assert not board.is_tile_correct(1, 2, GOAL_3)
