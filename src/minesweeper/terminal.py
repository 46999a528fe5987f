"""
Text view of a Minesweeper board.

TerminalView implements the event sink and keeps one symbol per cell,
so the board can be printed after every action.
"""
from typing import List

from .cell import MINE, Content
from .events import GameEventSink


CLOSED_SYMBOL = "."
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = " "


def content_symbol(content: Content) -> str:
    """Symbol for a cell showing its content."""
    if content is MINE:
        return MINE_SYMBOL
    if content == 0:
        return EMPTY_SYMBOL
    return str(content)


class TerminalView(GameEventSink):
    """
    Sink that draws the board as text.

    Attributes:
        size: Number of rows and columns.
        mine_hit: Set once on_mine_step has been received.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.mine_hit = False
        self._symbols: List[List[str]] = [
            [CLOSED_SYMBOL] * size for _ in range(size)
        ]

    def on_save_step(self, row: int, col: int, adjacent: int) -> None:
        self._symbols[row][col] = content_symbol(adjacent)

    def on_mine_step(self, row: int, col: int) -> None:
        self._symbols[row][col] = MINE_SYMBOL
        self.mine_hit = True

    def on_show_flag(self, row: int, col: int) -> None:
        self._symbols[row][col] = FLAG_SYMBOL

    def on_show_help(self, row: int, col: int, content: Content) -> None:
        self._symbols[row][col] = content_symbol(content)

    def on_reset(self, row: int, col: int) -> None:
        self._symbols[row][col] = CLOSED_SYMBOL

    def clear(self) -> None:
        """Draw every cell closed again."""
        self.mine_hit = False
        for row in self._symbols:
            row[:] = [CLOSED_SYMBOL] * self.size

    def symbol(self, row: int, col: int) -> str:
        """Get the symbol currently drawn for a cell."""
        return self._symbols[row][col]

    def render(self) -> str:
        """Render board as ASCII string with row and column headers."""
        width = len(str(self.size - 1))
        header = " " * (width + 1) + " ".join(
            str(col % 10) for col in range(self.size)
        )
        lines = [header]
        for row in range(self.size):
            lines.append(
                f"{row:>{width}} " + " ".join(self._symbols[row])
            )
        return "\n".join(lines)
