"""
Cascade reveal for zero-count cells.

Opening a cell with no adjacent mines opens the connected region of
zero-count cells around it, one breadth-first wave at a time.
"""
from typing import List

from .adjacency import AdjacencyResolver
from .cell import CellGrid, Visibility
from .events import GameEventSink


class FloodFillRevealer:
    """
    Breadth-first opener of contiguous zero-count cells.

    Only closed cells with an adjacent count of 0 are opened; numbered
    cells bordering the region stay closed.
    """

    def __init__(
        self,
        grid: CellGrid,
        resolver: AdjacencyResolver,
        sink: GameEventSink,
    ) -> None:
        self.grid = grid
        self.resolver = resolver
        self.sink = sink

    def cascade(self, index: int) -> int:
        """
        Expand from an already opened zero cell.

        Args:
            index: Flat index of the seed cell.

        Returns:
            Number of cells opened by the cascade.
        """
        opened = 0
        frontier: List[int] = [index]

        while frontier:
            wave: List[int] = []
            for center in frontier:
                for adjacent in self.resolver.neighbors(center):
                    if self._is_closed_zero(adjacent):
                        self.grid.set_visibility(adjacent, Visibility.OPEN)
                        row, col = self.grid.position(adjacent)
                        self.sink.on_save_step(row, col, 0)
                        wave.append(adjacent)
            opened += len(wave)
            frontier = wave

        return opened

    def _is_closed_zero(self, index: int) -> bool:
        cell = self.grid.get(index)
        return cell.is_closed and cell.content == 0
