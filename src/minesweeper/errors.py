"""
Error types raised by the Minesweeper engine.

Configuration and snapshot errors are fatal to the caller; index and
content errors signal programming mistakes and are never clamped.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board size, mine count or event sink is not acceptable."""


class DataSizeMismatch(MinesweeperError, ValueError):
    """Snapshot length does not match the board it is restored into."""


class IndexOutOfRange(MinesweeperError, IndexError):
    """Cell index or position lies outside the board."""


class InvalidAdjacentValue(MinesweeperError, ValueError):
    """Cell content is neither a mine nor an adjacent count in 0..8."""
