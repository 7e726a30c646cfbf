"""Builds the spiral goal board and random puzzles."""

from __future__ import annotations

import random

from npuzzle.models.board import Board, Direction


class GameGenerator:
    """Creates goal boards and puzzles shuffled from them."""

    @staticmethod
    def goal(size: int) -> Board:
        """Return the goal board: tiles laid in a clockwise spiral, blank last.

        For ``size == 3``::

            1 2 3
            8 0 4
            7 6 5
        """
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        nn = size * size
        tiles = [0] * nn
        strides = (1, size, -1, -size)  # right, down, left, up
        turn = 0
        pos = 0
        run = 0
        for value in range(1, nn):
            tiles[pos] = value
            stride = strides[turn]
            nxt = pos + stride
            if run + 1 == size or not 0 <= nxt < nn or tiles[nxt] != 0:
                turn = (turn + 1) % 4
                run = 1
            else:
                run += 1
            pos += strides[turn]
        return Board(size=size, tiles=tuple(tiles))

    @staticmethod
    def scramble(
        board: Board, shuffles: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *shuffles* random blank slides.

        The blank never steps straight back to the cell it just left, so
        short scrambles still move away from the start.
        """
        rng = rng or random.Random()
        prev: Direction | None = None
        for _ in range(shuffles):
            options = [d for d in Direction if board.can_slide(d)]
            if prev is not None and len(options) > 1:
                options.remove(_OPPOSITE[prev])
            prev = rng.choice(options)
            board = board.slide(prev)  # type: ignore[assignment]
        return board

    @staticmethod
    def generate(
        size: int,
        shuffles: int | None = None,
        seed: int | None = None,
        solvable: bool = True,
    ) -> Board:
        """Return a random board of the given size.

        With ``solvable=False`` two non-blank tiles are exchanged after
        scrambling, which flips the inversion parity and makes the board
        impossible to solve.
        """
        rng = random.Random(seed)
        goal = GameGenerator.goal(size)
        if shuffles is None:
            shuffles = size * size * 100
        board = GameGenerator.scramble(goal, shuffles, rng)

        # Ensure the board is not already solved.  A 2×2 walk that never
        # steps back circles the grid and is home again every 12 slides.
        if shuffles > 0 and board == goal:
            board = GameGenerator.scramble(board, 1, rng)

        if not solvable:
            first, second = [i for i, v in enumerate(board.tiles) if v != 0][:2]
            board = board.swap(first, second)
        return board


_OPPOSITE: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}
