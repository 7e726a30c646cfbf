"""Board model for the N-puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.models.errors import ContentError, FormatError


class Direction(StrEnum):
    """Direction the *blank* slides in."""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


# (row, col) offset of the cell the blank swaps with.
OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.EAST: (0, 1),
}


def content_is_valid(tiles: Iterable[int], size: int) -> bool:
    """Return True if *tiles* holds every integer of ``0..size²-1`` exactly once."""
    values = list(tiles)
    return len(values) == size * size and sorted(values) == list(range(size * size))


@dataclass(frozen=True)
class Board:
    """An immutable N×N sliding puzzle board.

    Tiles are stored as a flat row-major tuple of ints; 0 is the blank.
    Two boards are equal (and hash equally) when their tile tuples match.
    """

    size: int = field(compare=False)
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a validated board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 8, 0, 4, 7, 6, 5])
        """
        if len(flat) != size * size:
            raise FormatError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if not content_is_valid(flat, size):
            raise ContentError(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {list(flat)}."
            )
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a validated board from a list of rows."""
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise FormatError(
                    f"Row {r} has {len(row)} tiles, expected {size}."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    # -- index conversions ----------------------------------------------------

    def linear_index(self, row: int, col: int) -> int:
        return row * self.size + col

    def grid_index(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def position_of(self, value: int) -> tuple[int, int] | None:
        """Return the (row, col) of *value*, or ``None`` if it is absent."""
        try:
            return self.grid_index(self.tiles.index(value))
        except ValueError:
            return None

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.grid_index(self.tiles.index(0))

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        n = self.size
        return tuple(self.tiles[r * n : (r + 1) * n] for r in range(n))

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[self.linear_index(row, col)]

    def is_tile_correct(self, row: int, col: int, goal: Board) -> bool:
        """Check if the tile at (row, col) sits where *goal* has it."""
        index = self.linear_index(row, col)
        return self.tiles[index] == goal.tiles[index]

    # -- moves ----------------------------------------------------------------

    def can_slide(self, direction: Direction) -> bool:
        br, bc = self.blank_pos
        dr, dc = OFFSETS[direction]
        return 0 <= br + dr < self.size and 0 <= bc + dc < self.size

    def slide(self, direction: Direction) -> Board | None:
        """Return the board with the blank moved one cell in *direction*.

        Returns ``None`` when the move would leave the grid.
        """
        if not self.can_slide(direction):
            return None
        br, bc = self.blank_pos
        dr, dc = OFFSETS[direction]
        blank = self.linear_index(br, bc)
        target = self.linear_index(br + dr, bc + dc)
        tiles = list(self.tiles)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        return Board(size=self.size, tiles=tuple(tiles))

    def swap(self, first: int, second: int) -> Board:
        """Return a copy with the tiles at two linear indices exchanged."""
        tiles = list(self.tiles)
        tiles[first], tiles[second] = tiles[second], tiles[first]
        return Board(size=self.size, tiles=tuple(tiles))
