"""Inversion-parity test for deciding solvability without searching."""

from __future__ import annotations

from bisect import bisect_left, insort

from npuzzle.models.board import Board


def count_inversions(board: Board) -> int:
    """Count pairs ``i < j`` of non-blank tiles with ``tiles[i] > tiles[j]``."""
    inv = 0
    seen: list[int] = []
    for v in board.tiles:
        if v == 0:
            continue
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inv


def _parity_key(board: Board) -> int:
    inv = count_inversions(board)
    if board.size % 2 == 0:
        # A vertical slide moves one tile past N-1 others: for even N that
        # flips the inversion parity, and the blank row changes by one.
        inv += board.blank_pos[0]
    return inv % 2


def is_solvable(board: Board, goal: Board) -> bool:
    """Return True if *board* can reach *goal* by sliding the blank."""
    if board.size != goal.size:
        return False
    return _parity_key(board) == _parity_key(goal)
