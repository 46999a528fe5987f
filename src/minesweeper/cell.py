"""
Cell module for Minesweeper game.

Represents individual cells with their content (mine or adjacent count)
and visibility (closed/open/flagged), plus the flat grid that stores them.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from numbers import Integral
from typing import Iterator, List, Sequence, Tuple, Union

from .errors import DataSizeMismatch, IndexOutOfRange, InvalidAdjacentValue


# ============================================================================
# Constants
# ============================================================================

class Mine(Enum):
    """Sentinel type for mine content."""

    MINE = auto()

    def __repr__(self) -> str:
        return "MINE"


MINE = Mine.MINE

# Content is either an adjacent count (0-8) or the MINE sentinel
Content = Union[int, Mine]

MAX_ADJACENT = 8


class Visibility(Enum):
    """Possible visual states of a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()


# Packed layout: low nibble holds content, bits 5 and 6 hold visibility
MASK_CONTENT = 0x0F
MASK_VISIBILITY = 0xF0
PACKED_MINE = 0x0F

_PACKED_VISIBILITY = {
    Visibility.CLOSED: 0,
    Visibility.OPEN: 1 << 5,
    Visibility.FLAGGED: 1 << 6,
}
_UNPACKED_VISIBILITY = {bits: vis for vis, bits in _PACKED_VISIBILITY.items()}


def validate_content(content: Content) -> Content:
    """
    Check that content is a mine or an adjacent count.

    Raises:
        InvalidAdjacentValue: If content is anything else.
    """
    if content is MINE:
        return content
    if isinstance(content, bool) or not isinstance(content, int):
        raise InvalidAdjacentValue(f"Invalid cell content: {content!r}")
    if not 0 <= content <= MAX_ADJACENT:
        raise InvalidAdjacentValue(
            f"Adjacent count must be in 0..{MAX_ADJACENT}, got {content}"
        )
    return content


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; the grid swaps in a new cell on every change.

    Attributes:
        content: MINE, or count of mines in neighboring cells (0-8).
        visibility: Current visual state (closed, open, or flagged).
    """

    content: Content = 0
    visibility: Visibility = Visibility.CLOSED

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content is MINE

    @property
    def is_closed(self) -> bool:
        """Check if cell is closed."""
        return self.visibility == Visibility.CLOSED

    @property
    def is_open(self) -> bool:
        """Check if cell is open."""
        return self.visibility == Visibility.OPEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == Visibility.FLAGGED

    def pack(self) -> int:
        """Encode the cell as a single snapshot value."""
        data = PACKED_MINE if self.is_mine else self.content
        return data | _PACKED_VISIBILITY[self.visibility]

    @classmethod
    def unpack(cls, value: int) -> "Cell":
        """
        Decode a snapshot value produced by pack().

        Raises:
            InvalidAdjacentValue: If either field holds an unknown pattern.
        """
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidAdjacentValue(f"Invalid packed cell value: {value!r}")
        value = int(value)
        if value < 0 or value & ~(MASK_CONTENT | MASK_VISIBILITY):
            raise InvalidAdjacentValue(f"Invalid packed cell value: {value}")
        data = value & MASK_CONTENT
        bits = value & MASK_VISIBILITY
        if bits not in _UNPACKED_VISIBILITY:
            raise InvalidAdjacentValue(f"Invalid packed visibility: {bits:#x}")
        content = MINE if data == PACKED_MINE else validate_content(data)
        return cls(content, _UNPACKED_VISIBILITY[bits])

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Closed cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine
        """
        if self.visibility == Visibility.CLOSED:
            return -1
        if self.visibility == Visibility.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.content


# ============================================================================
# Cell Grid
# ============================================================================

class CellGrid:
    """
    Square board storage, row-major (index = row * size + col).

    Content and visibility are written independently; every accessor
    rejects indices outside [0, size * size).
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self._cells: List[Cell] = [Cell() for _ in range(size * size)]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._cells):
            raise IndexOutOfRange(
                f"Cell index {index} outside board of {len(self._cells)} cells"
            )
        return index

    def get(self, index: int) -> Cell:
        """Get cell at flat index."""
        return self._cells[self._check(index)]

    def set_content(self, index: int, content: Content) -> None:
        """Replace content, keeping visibility."""
        index = self._check(index)
        self._cells[index] = replace(
            self._cells[index], content=validate_content(content)
        )

    def set_visibility(self, index: int, visibility: Visibility) -> None:
        """Replace visibility, keeping content."""
        index = self._check(index)
        self._cells[index] = replace(self._cells[index], visibility=visibility)

    def has_visibility(self, index: int, visibility: Visibility) -> bool:
        """Check the visibility of the cell at index."""
        return self._cells[self._check(index)].visibility == visibility

    def position(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        self._check(index)
        return divmod(index, self.size)

    def snapshot(self) -> List[int]:
        """Pack every cell, in row-major order."""
        return [cell.pack() for cell in self._cells]

    def load(self, data: Sequence[int]) -> None:
        """
        Replace all cells from packed values.

        Raises:
            DataSizeMismatch: If data length differs from the cell count.
        """
        if len(data) != len(self._cells):
            raise DataSizeMismatch(
                f"Snapshot has {len(data)} cells, board has {len(self._cells)}"
            )
        self._cells = [Cell.unpack(value) for value in data]
