"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    MINE,
    AdjacencyResolver,
    CellGrid,
    EventRecorder,
    GameConfig,
    GameEngine,
)


# ============================================================================
# Layout Helpers
# ============================================================================

def make_snapshot(size: int, mines: Iterable[int]) -> List[int]:
    """Pack a closed board with mines at the given flat indices."""
    grid = CellGrid(size)
    for index in mines:
        grid.set_content(index, MINE)
    resolver = AdjacencyResolver(grid)
    for index in range(len(grid)):
        if not grid.get(index).is_mine:
            grid.set_content(index, resolver.count_mines_around(index))
    return grid.snapshot()


# ============================================================================
# Sink Fixtures
# ============================================================================

@pytest.fixture
def recorder() -> EventRecorder:
    """Create an empty event recorder."""
    return EventRecorder()


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine(recorder: EventRecorder) -> GameEngine:
    """Create a default 8x8 engine with 10 mines."""
    return GameEngine(8, 10, recorder, seed=1234)


@pytest.fixture
def empty_engine(recorder: EventRecorder) -> GameEngine:
    """Create a 3x3 engine with no mines for cascade testing."""
    return GameEngine(3, 0, recorder, seed=0)


@pytest.fixture
def layout_engine(
    recorder: EventRecorder,
) -> Callable[[int, Iterable[int]], GameEngine]:
    """
    Factory for engines with a fixed mine layout.

    Events from loading the layout are cleared before returning.
    """
    def build(size: int, mines: Iterable[int]) -> GameEngine:
        mines = list(mines)
        engine = GameEngine(size, len(mines), recorder, seed=0)
        engine.restore_instance(make_snapshot(size, mines))
        recorder.clear()
        return engine

    return build


@pytest.fixture
def snapshot_factory() -> Callable[[int, Iterable[int]], List[int]]:
    """Expose make_snapshot to tests."""
    return make_snapshot


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid board configuration."""
    return GameConfig(8, 10)
