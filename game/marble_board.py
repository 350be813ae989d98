from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

import numpy as np

from game.constants import (
    BOARD_LAYOUT,
    CELL_CENTER,
    CELL_NORMAL,
    CELL_SAFE,
    GRID_SIZE,
    INNER_PATH,
    JUNCTION_COLUMN,
    OUTER_PATH,
    PLAYER_START_CELLS,
)


class Coord(NamedTuple):
    """Board coordinate, column first."""

    x: int
    y: int


class CellType(IntEnum):
    NORMAL = CELL_NORMAL
    SAFE = CELL_SAFE
    CENTER = CELL_CENTER


class MarbleBoard:
    # The board is a 5x5 grid. Tokens only ever stand on the 16 border cells
    # (outer loop) or on the 4 cells touching the center (inner loop).
    #
    #   (0,0) (1,0) [2,0] (3,0) (4,0)
    #   (0,1)  .    <2,1>  .    (4,1)
    #   [0,2] <1,2>  C    <3,2> [4,2]
    #   (0,3)  .    <2,3>  .    (4,3)
    #   (0,4) (1,4) [2,4] (3,4) (4,4)
    #
    #   [ ] safe cell    < > inner loop    C cosmetic center
    #
    # The outer loop runs anticlockwise starting at (0,1); the inner loop runs
    # clockwise starting at (2,3). A token that has captured at least once
    # branches from the outer loop into the inner loop when it steps onto
    # (2,0) or (2,4).

    OUTER_LENGTH = len(OUTER_PATH)
    INNER_LENGTH = len(INNER_PATH)

    def __init__(self):
        self.width = GRID_SIZE
        self.grid = np.array(BOARD_LAYOUT, dtype=np.int8)
        self.grid.flags.writeable = False

        self.outer_path: tuple[Coord, ...] = tuple(Coord(*c) for c in OUTER_PATH)
        self.inner_path: tuple[Coord, ...] = tuple(Coord(*c) for c in INNER_PATH)
        self._outer_lookup = {coord: i for i, coord in enumerate(self.outer_path)}
        self._inner_lookup = {coord: i for i, coord in enumerate(self.inner_path)}
        self._start_indices = tuple(
            self.outer_index_of(Coord(*c)) for c in PLAYER_START_CELLS
        )

    def cell_at(self, coord) -> CellType:
        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.width):
            raise ValueError(f"Coordinate {tuple(coord)} is outside the {self.width}x{self.width} board")
        return CellType(int(self.grid[y, x]))

    def is_safe(self, coord) -> bool:
        return self.cell_at(coord) == CellType.SAFE

    def is_inner_junction(self, coord) -> bool:
        """Return True for the safe cells in the center column (not the center itself)."""
        return self.is_safe(coord) and coord[0] == JUNCTION_COLUMN

    def outer_coord(self, index: int) -> Coord:
        return self.outer_path[index]

    def inner_coord(self, index: int) -> Coord:
        return self.inner_path[index]

    def outer_index_of(self, coord) -> int:
        try:
            return self._outer_lookup[Coord(*coord)]
        except KeyError:
            raise ValueError(f"Coordinate {tuple(coord)} is not on the outer path") from None

    def inner_index_of(self, coord) -> int:
        try:
            return self._inner_lookup[Coord(*coord)]
        except KeyError:
            raise ValueError(f"Coordinate {tuple(coord)} is not on the inner path") from None

    def start_index(self, player: int) -> int:
        """Outer path index of a player's start cell."""
        return self._start_indices[player]

    def start_coord(self, player: int) -> Coord:
        return self.outer_path[self._start_indices[player]]

    def safe_cells(self) -> list[Coord]:
        ys, xs = np.nonzero(self.grid == CellType.SAFE)
        return [Coord(int(x), int(y)) for y, x in zip(ys, xs)]
