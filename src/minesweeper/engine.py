"""
Game engine for Minesweeper.

Owns the board, places mines, and drives every state transition in
response to player actions, reporting each change to a GameEventSink.
"""
import logging
from dataclasses import dataclass
from numbers import Integral
from typing import List, Optional, Sequence

import numpy as np

from .adjacency import AdjacencyResolver
from .cascade import FloodFillRevealer
from .cell import MINE, Cell, CellGrid, Visibility
from .errors import IndexOutOfRange, InvalidConfiguration
from .events import GameEventSink
from .sampler import RandomPlacementSampler, Seed

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 3


@dataclass
class GameConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("size", "num_mines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidConfiguration(
                    f"{name} must be an integer, got {value!r}"
                )
        if self.size < MIN_SIZE:
            raise InvalidConfiguration(
                f"Board size must be at least {MIN_SIZE}, got {self.size}"
            )
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise InvalidConfiguration(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        return self.size * self.size


# Preset difficulty levels
BEGINNER = GameConfig(8, 10)
INTERMEDIATE = GameConfig(16, 40)
EXPERT = GameConfig(24, 99)


# ============================================================================
# Engine Class
# ============================================================================

class GameEngine:
    """
    Minesweeper game engine.

    Manages the cell grid, mine placement, revealing and flagging, the
    cheat view, the final reveal with win check, and snapshots.
    The engine never ends a game on its own; after a mine is stepped on,
    further actions are still accepted and the caller decides when to stop.
    """

    def __init__(
        self,
        size: int,
        num_mines: int,
        sink: GameEventSink,
        seed: Seed = None,
    ) -> None:
        """
        Initialize the engine and deal the first board.

        Args:
            size: Number of rows and columns (at least 3).
            num_mines: Mines to place (0 to size * size).
            sink: Receiver of state change notifications.
            seed: Random seed or numpy Generator for mine placement.

        Raises:
            InvalidConfiguration: If any argument is unacceptable.
        """
        if sink is None:
            raise InvalidConfiguration("Event sink can't be None")
        self.config = GameConfig(size, num_mines)
        self.sink = sink
        self._sampler = RandomPlacementSampler(seed)
        self._deal()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        sink: GameEventSink,
        seed: Seed = None,
    ) -> "GameEngine":
        """Create an engine from a board configuration."""
        return cls(config.size, config.num_mines, sink, seed)

    # ========================================================================
    # Board Setup (Low-level)
    # ========================================================================

    def _deal(self) -> None:
        """Create a fresh grid with random mines and adjacent counts."""
        self._grid = CellGrid(self.config.size)
        self._resolver = AdjacencyResolver(self._grid)
        self._revealer = FloodFillRevealer(
            self._grid, self._resolver, self.sink
        )
        self._place_mines()
        self._calculate_adjacent_mines()

    def _place_mines(self) -> None:
        """Place mines on sampled indices."""
        positions = self._sampler.sample(
            self.config.total_cells, self.config.num_mines
        )
        for index in positions:
            self._grid.set_content(index, MINE)

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for index in range(len(self._grid)):
            if not self._grid.get(index).is_mine:
                count = self._resolver.count_mines_around(index)
                self._grid.set_content(index, count)

    def _index(self, row: int, col: int) -> int:
        """Convert (row, col) to flat index, rejecting positions off board."""
        size = self.config.size
        if not (0 <= row < size and 0 <= col < size):
            raise IndexOutOfRange(
                f"Position ({row}, {col}) outside {size}x{size} board"
            )
        return row * size + col

    # ========================================================================
    # Player Actions (Mid-level)
    # ========================================================================

    def step(self, row: int, col: int) -> bool:
        """
        Open a closed cell.

        A mine is reported with on_mine_step. A safe cell is reported with
        on_save_step and, if it has no adjacent mines, starts a cascade.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            True if a cell was opened, False if it was not closed.
        """
        index = self._index(row, col)
        if not self._grid.has_visibility(index, Visibility.CLOSED):
            return False

        cell = self._grid.get(index)
        if cell.is_mine:
            self.sink.on_mine_step(row, col)
            self._grid.set_visibility(index, Visibility.OPEN)
            return True

        self.sink.on_save_step(row, col, cell.content)
        self._grid.set_visibility(index, Visibility.OPEN)
        if cell.content == 0:
            self._revealer.cascade(index)
        return True

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False if the cell is open.
        """
        index = self._index(row, col)
        if self._grid.has_visibility(index, Visibility.FLAGGED):
            self._grid.set_visibility(index, Visibility.CLOSED)
            self.sink.on_reset(row, col)
            return True
        if self._grid.has_visibility(index, Visibility.CLOSED):
            self._grid.set_visibility(index, Visibility.FLAGGED)
            self.sink.on_show_flag(row, col)
            return True
        return False

    def show_cheat(self, enabled: bool) -> None:
        """
        Show or hide the true content of every cell not yet open.

        Visibility is never changed; hiding restores closed and flagged
        pictures.
        """
        for index, cell in enumerate(self._grid):
            if cell.is_open:
                continue
            row, col = self._grid.position(index)
            if enabled:
                self.sink.on_show_help(row, col, cell.content)
            elif cell.is_flagged:
                self.sink.on_show_flag(row, col)
            else:
                self.sink.on_reset(row, col)

    def finish_game(self) -> bool:
        """
        Open every remaining cell and check for victory.

        Flagged cells count as not opened, so a flag on a safe cell makes
        the tally exceed the mine count.

        Returns:
            True if exactly num_mines cells were still not open.
        """
        not_opened = 0
        for index, cell in enumerate(self._grid):
            if cell.is_open:
                continue
            row, col = self._grid.position(index)
            self.sink.on_show_help(row, col, cell.content)
            self._grid.set_visibility(index, Visibility.OPEN)
            not_opened += 1

        won = not_opened == self.config.num_mines
        logger.debug(
            "Game finished: %d cells left closed, %d mines, won=%s",
            not_opened, self.config.num_mines, won,
        )
        return won

    def new_game(self) -> None:
        """Deal a new board with the same parameters and reset every cell."""
        self._deal()
        logger.debug(
            "New %dx%d game with %d mines",
            self.config.size, self.config.size, self.config.num_mines,
        )
        for index in range(len(self._grid)):
            row, col = self._grid.position(index)
            self.sink.on_reset(row, col)

    # ========================================================================
    # Snapshots
    # ========================================================================

    def save_instance(self) -> List[int]:
        """
        Save current state of game.

        Returns:
            Opaque list of size * size packed cell values.
        """
        return self._grid.snapshot()

    def restore_instance(self, data: Sequence[int]) -> None:
        """
        Replace the board with a saved snapshot and replay it to the sink.

        Open cells are reported with on_show_help and flagged cells with
        on_show_flag; closed cells are not reported.

        Raises:
            DataSizeMismatch: If data does not hold size * size values.
        """
        self._grid.load(data)
        logger.debug("Restored board of %d cells", len(self._grid))
        for index, cell in enumerate(self._grid):
            row, col = self._grid.position(index)
            if cell.is_open:
                self.sink.on_show_help(row, col, cell.content)
            elif cell.is_flagged:
                self.sink.on_show_flag(row, col)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        return self._grid.get(self._index(row, col))

    def count(self, visibility: Optional[Visibility] = None) -> int:
        """Count cells with a visibility, or all cells if None."""
        if visibility is None:
            return len(self._grid)
        return sum(1 for cell in self._grid if cell.visibility == visibility)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array where:
                -1 = closed
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for index, cell in enumerate(self._grid):
            row, col = divmod(index, size)
            obs[row, col] = cell.to_observation()
        return obs
