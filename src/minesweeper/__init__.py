"""
Minesweeper game module.

Provides the core game engine (cell grid, mine placement, neighbor
resolution, cascade reveal) and thin adapters that drive it.
"""
from .errors import (
    MinesweeperError,
    InvalidConfiguration,
    DataSizeMismatch,
    IndexOutOfRange,
    InvalidAdjacentValue,
)
from .cell import MINE, Cell, CellGrid, Visibility
from .sampler import RandomPlacementSampler
from .adjacency import AdjacencyResolver, Direction
from .cascade import FloodFillRevealer
from .events import GameEventSink, EventKind, GameEvent, EventRecorder
from .engine import GameEngine, GameConfig, BEGINNER, INTERMEDIATE, EXPERT
from .terminal import TerminalView
from .console import Console
from .players import RandomPlayer
from .environment import GameState, MinesweeperEnv, make_vec_env

__all__ = [
    "MinesweeperError",
    "InvalidConfiguration",
    "DataSizeMismatch",
    "IndexOutOfRange",
    "InvalidAdjacentValue",
    "MINE",
    "Cell",
    "CellGrid",
    "Visibility",
    "RandomPlacementSampler",
    "AdjacencyResolver",
    "Direction",
    "FloodFillRevealer",
    "GameEventSink",
    "EventKind",
    "GameEvent",
    "EventRecorder",
    "GameEngine",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "TerminalView",
    "Console",
    "RandomPlayer",
    "GameState",
    "MinesweeperEnv",
    "make_vec_env",
]
