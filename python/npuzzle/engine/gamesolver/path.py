"""Turns a solved search node back into a playable solution."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from npuzzle.engine.gamestate import State
from npuzzle.models.board import OFFSETS, Board, Direction

_BY_OFFSET = {offset: direction for direction, offset in OFFSETS.items()}


def reconstruct_path(state: State) -> list[Board]:
    """Follow parent links to the root and return the boards root-first."""
    path: list[Board] = []
    node: State | None = state
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path


def moves_from_path(path: Sequence[Board]) -> list[Direction]:
    """Return the blank direction taken at each step of *path*.

    Raises ``ValueError`` if two consecutive boards are not one slide apart.
    """
    moves: list[Direction] = []
    for before, after in zip(path, path[1:]):
        br, bc = before.blank_pos
        ar, ac = after.blank_pos
        direction = _BY_OFFSET.get((ar - br, ac - bc))
        if direction is None or before.slide(direction) != after:
            raise ValueError(
                f"Boards {list(before.tiles)} and {list(after.tiles)} "
                "are not one slide apart."
            )
        moves.append(direction)
    return moves


def replay(board: Board, moves: Iterable[Direction]) -> Board:
    """Apply *moves* to *board*; raise ``ValueError`` on an illegal slide."""
    for i, direction in enumerate(moves):
        nxt = board.slide(direction)
        if nxt is None:
            raise ValueError(
                f"Move {i} ({direction.value}) leaves the grid at blank "
                f"{board.blank_pos}."
            )
        board = nxt
    return board
