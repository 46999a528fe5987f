"""
Neighbor resolution on a square board.

Maps a cell index and a compass direction to the neighboring index,
refusing directions that would cross a board edge.
"""
from enum import Enum
from typing import List, Optional

from .cell import CellGrid


class Direction(Enum):
    """The eight compass directions, valued as (row delta, col delta)."""

    NW = (-1, -1)
    N = (-1, 0)
    NE = (-1, 1)
    W = (0, -1)
    E = (0, 1)
    SW = (1, -1)
    S = (1, 0)
    SE = (1, 1)

    @property
    def delta_row(self) -> int:
        return self.value[0]

    @property
    def delta_col(self) -> int:
        return self.value[1]


class AdjacencyResolver:
    """Neighbor lookups and mine counts for one grid."""

    def __init__(self, grid: CellGrid) -> None:
        self.grid = grid
        self.size = grid.size

    def neighbor(self, index: int, direction: Direction) -> Optional[int]:
        """
        Get the neighbor of a cell in one direction.

        Args:
            index: Flat index of the center cell.
            direction: Compass direction to look in.

        Returns:
            Flat index of the neighbor, or None past an edge.
        """
        row, col = self.grid.position(index)

        if direction.delta_row < 0 and row == 0:
            return None
        if direction.delta_row > 0 and row == self.size - 1:
            return None
        if direction.delta_col < 0 and col == 0:
            return None
        if direction.delta_col > 0 and col == self.size - 1:
            return None

        return index + direction.delta_row * self.size + direction.delta_col

    def neighbors(self, index: int) -> List[int]:
        """Get all valid neighbor indices, in Direction order."""
        result = []
        for direction in Direction:
            adjacent = self.neighbor(index, direction)
            if adjacent is not None:
                result.append(adjacent)
        return result

    def count_mines_around(self, index: int) -> int:
        """Count mines among the neighbors of a cell."""
        count = 0
        for adjacent in self.neighbors(index):
            if self.grid.get(adjacent).is_mine:
                count += 1
        return count
