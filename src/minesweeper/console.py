"""
Interactive text commands for a Minesweeper game.

Console turns one line of player input into an engine action and returns
the text to show back.
"""
from typing import Callable, Dict, List, Optional, Tuple

from .engine import GameEngine
from .errors import MinesweeperError
from .terminal import TerminalView


HELP_TEXT = """Commands:
  step R C     open the cell at row R, column C
  flag R C     toggle a flag at row R, column C
  cheat on|off show or hide the content of closed cells
  finish       reveal the board and check the result
  new          start a new game
  save         keep a snapshot of the board in memory
  restore      go back to the saved snapshot
  show         print the board
  help         print this help"""


class Console:
    """
    Command interpreter over an engine and its terminal view.

    The view must be the engine's sink. Player mistakes (bad commands or
    coordinates off the board) come back as messages instead of raising.
    """

    def __init__(self, engine: GameEngine, view: TerminalView) -> None:
        self.engine = engine
        self.view = view
        self.finished = False
        self._snapshot: Optional[List[int]] = None
        self._commands: Dict[str, Callable[[List[str]], str]] = {
            "step": self._step,
            "flag": self._flag,
            "cheat": self._cheat,
            "finish": self._finish,
            "new": self._new,
            "save": self._save,
            "restore": self._restore,
            "show": self._show,
            "help": self._help,
        }

    def execute(self, line: str) -> str:
        """
        Run one command line.

        Args:
            line: Raw player input, e.g. "step 2 3".

        Returns:
            Text to print for the player.
        """
        words = line.split()
        if not words:
            return ""
        name, args = words[0].lower(), words[1:]
        command = self._commands.get(name)
        if command is None:
            return f"Unknown command: {name} (try 'help')"
        try:
            return command(args)
        except MinesweeperError as exc:
            return f"Error: {exc}"

    # ========================================================================
    # Commands
    # ========================================================================

    def _position(self, args: List[str]) -> Optional[Tuple[int, int]]:
        if len(args) != 2:
            return None
        try:
            return int(args[0]), int(args[1])
        except ValueError:
            return None

    def _step(self, args: List[str]) -> str:
        position = self._position(args)
        if position is None:
            return "Usage: step R C"
        if self.finished:
            return "Game is over, type 'new' to play again"
        self.engine.step(*position)
        if self.view.mine_hit:
            self.engine.finish_game()
            self.finished = True
            return self.view.render() + "\n\nBOOM! You stepped on a mine."
        return self.view.render()

    def _flag(self, args: List[str]) -> str:
        position = self._position(args)
        if position is None:
            return "Usage: flag R C"
        if self.finished:
            return "Game is over, type 'new' to play again"
        self.engine.flag(*position)
        return self.view.render()

    def _cheat(self, args: List[str]) -> str:
        if len(args) != 1 or args[0].lower() not in ("on", "off"):
            return "Usage: cheat on|off"
        self.engine.show_cheat(args[0].lower() == "on")
        return self.view.render()

    def _finish(self, args: List[str]) -> str:
        if self.finished:
            return "Game is over, type 'new' to play again"
        won = self.engine.finish_game()
        self.finished = True
        verdict = "You win!" if won else "You lose."
        return self.view.render() + "\n\n" + verdict

    def _new(self, args: List[str]) -> str:
        self.engine.new_game()
        self.view.mine_hit = False
        self.finished = False
        self._snapshot = None
        return self.view.render()

    def _save(self, args: List[str]) -> str:
        self._snapshot = self.engine.save_instance()
        return "Board saved."

    def _restore(self, args: List[str]) -> str:
        if self._snapshot is None:
            return "Nothing saved yet."
        # Closed cells are not replayed, so start from a blank picture
        self.view.clear()
        self.engine.restore_instance(self._snapshot)
        self.finished = False
        return self.view.render()

    def _show(self, args: List[str]) -> str:
        return self.view.render()

    def _help(self, args: List[str]) -> str:
        return HELP_TEXT
