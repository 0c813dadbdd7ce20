"""Sliding-puzzle board state, tile geometry and input translation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

MARGIN = 10
GAP = 5
DEFAULT_SHUFFLE_MOVES = 10000

Position = tuple[int, int]


class Direction(IntEnum):
    """Direction in which a tile slides into the empty cell."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# Offset from the empty cell to the tile that slides into it.
_NEIGHBOUR_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (-1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
}

_KEY_DIRECTIONS = {
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
}


@dataclass(frozen=True)
class TileGeometry:
    """Size of one tile on screen and the layout of the tile grid."""

    width: int
    height: int

    @classmethod
    def from_image(cls, width, height, columns, rows):
        """Cut an image of the given size into columns x rows tiles."""
        if columns < 1 or rows < 1:
            raise ValueError("the grid needs at least one column and one row")
        return cls(width // columns, height // rows)

    def tile_origin(self, column, row):
        """Top-left pixel of the cell at 1-based (column, row)."""
        return (
            MARGIN + (column - 1) * (self.width + GAP),
            MARGIN + (row - 1) * (self.height + GAP),
        )

    def contains(self, column, row, x, y):
        """Whether pixel (x, y) lies strictly inside the cell at (column, row)."""
        left, top = self.tile_origin(column, row)
        return left < x < left + self.width and top < y < top + self.height


class Board:
    """A columns x rows sliding puzzle; tiles are named by their home cell."""

    def __init__(self, columns, rows):
        if columns < 1 or rows < 1:
            raise ValueError("the board needs at least one column and one row")
        self.columns = columns
        self.rows = rows
        self._tiles: dict[Position, Position | None] = {
            (column, row): (column, row)
            for column in range(1, columns + 1)
            for row in range(1, rows + 1)
        }
        self._tiles[(1, 1)] = None
        self._empty: Position = (1, 1)

    def tile_at(self, column, row):
        """Tile in the cell at 1-based (column, row), or None for the empty cell."""
        try:
            return self._tiles[(column, row)]
        except KeyError:
            raise IndexError(f"no cell at column {column}, row {row}") from None

    def empty_position(self):
        """1-based (column, row) of the empty cell."""
        return self._empty

    def move(self, direction):
        """Slide the neighbouring tile into the empty cell; False if there is none."""
        direction = Direction(direction)
        dx, dy = _NEIGHBOUR_OFFSETS[direction]
        column, row = self._empty
        source = (column + dx, row + dy)
        if source not in self._tiles:
            return False
        self._tiles[self._empty] = self._tiles[source]
        self._tiles[source] = None
        self._empty = source
        return True

    def shuffle(self, rng=None, moves=DEFAULT_SHUFFLE_MOVES):
        """Play the given number of random moves, legal or not."""
        rng = rng if rng is not None else random.Random()
        for _ in range(moves):
            self.move(Direction(rng.randrange(4)))

    def is_solved(self):
        """Whether every tile is back in its home cell."""
        return all(
            tile == (None if position == (1, 1) else position)
            for position, tile in self._tiles.items()
        )


def key_direction(key):
    """Direction for an arrow key name, or None for any other key."""
    return _KEY_DIRECTIONS.get(key)


def click_direction(board, geometry, x, y):
    """Direction whose moving tile was clicked at (x, y), or None."""
    column, row = board.empty_position()
    for direction, (dx, dy) in _NEIGHBOUR_OFFSETS.items():
        if geometry.contains(column + dx, row + dy, x, y):
            return direction
    return None