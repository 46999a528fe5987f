"""
Event sink interface for Minesweeper.

The engine reports every visible change through a GameEventSink. Views
implement it; EventRecorder keeps the calls as an ordered event list.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .cell import Content


# ============================================================================
# Sink Interface
# ============================================================================

class GameEventSink(ABC):
    """
    Abstract receiver of engine notifications.

    Each method corresponds to exactly one visible effect on a cell.
    Implementations must not call back into the engine.
    """

    @abstractmethod
    def on_save_step(self, row: int, col: int, adjacent: int) -> None:
        """A closed safe cell was opened and shows its adjacent count."""

    @abstractmethod
    def on_mine_step(self, row: int, col: int) -> None:
        """A closed mine cell was opened."""

    @abstractmethod
    def on_show_flag(self, row: int, col: int) -> None:
        """Cell should be drawn flagged."""

    @abstractmethod
    def on_show_help(self, row: int, col: int, content: Content) -> None:
        """
        Cell should show its true content.

        Args:
            row: Row index.
            col: Column index.
            content: MINE or the adjacent count.
        """

    @abstractmethod
    def on_reset(self, row: int, col: int) -> None:
        """Cell should be drawn in its default closed state."""


# ============================================================================
# Recorded Events
# ============================================================================

class EventKind(Enum):
    """Kinds of sink notifications."""

    SAVE_STEP = auto()
    MINE_STEP = auto()
    SHOW_FLAG = auto()
    SHOW_HELP = auto()
    RESET = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    One sink notification.

    Attributes:
        kind: Which callback was made.
        row: Row index.
        col: Column index.
        value: Adjacent count or content, for SAVE_STEP and SHOW_HELP.
    """

    kind: EventKind
    row: int
    col: int
    value: Optional[Content] = None


class EventRecorder(GameEventSink):
    """Sink that records every notification in call order."""

    def __init__(self) -> None:
        self.events: List[GameEvent] = []

    def on_save_step(self, row: int, col: int, adjacent: int) -> None:
        self.events.append(GameEvent(EventKind.SAVE_STEP, row, col, adjacent))

    def on_mine_step(self, row: int, col: int) -> None:
        self.events.append(GameEvent(EventKind.MINE_STEP, row, col))

    def on_show_flag(self, row: int, col: int) -> None:
        self.events.append(GameEvent(EventKind.SHOW_FLAG, row, col))

    def on_show_help(self, row: int, col: int, content: Content) -> None:
        self.events.append(GameEvent(EventKind.SHOW_HELP, row, col, content))

    def on_reset(self, row: int, col: int) -> None:
        self.events.append(GameEvent(EventKind.RESET, row, col))

    def of_kind(self, kind: EventKind) -> List[GameEvent]:
        """Get recorded events of one kind."""
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()
