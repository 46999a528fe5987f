"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game engine.
"""
from enum import Enum, auto
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .engine import GameConfig, GameEngine
from .terminal import TerminalView


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of an episode."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


class _EpisodeView(TerminalView):
    """Terminal view that also counts safe cells opened."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.safe_opened = 0

    def on_save_step(self, row: int, col: int, adjacent: int) -> None:
        super().on_save_step(row, col, adjacent)
        self.safe_opened += 1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = closed cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine

    Actions:
        Discrete action space of size size * size.
        Action i opens the cell at (i // size, i % size).

    Rewards:
        - +1 for opening a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (cell not closed)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 8x8 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        size = self.config.size

        self.observation_space = spaces.Box(
            low=-2, high=9, shape=(size, size), dtype=np.int8,
        )
        self.action_space = spaces.Discrete(size * size)

        self._total_safe_cells = self.config.total_cells - self.config.num_mines
        self._steps = 0
        self._game_state = GameState.PLAYING
        self.view = _EpisodeView(size)
        self.engine = GameEngine.from_config(
            self.config, self.view, seed=self.np_random
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.view = _EpisodeView(self.config.size)
        self.engine = GameEngine.from_config(
            self.config, self.view, seed=self.np_random
        )
        self._steps = 0
        self._game_state = GameState.PLAYING

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to open (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = divmod(int(action), self.config.size)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.engine.get_observation()
        terminated = self._game_state != GameState.PLAYING

        return observation, reward, terminated, False, self._get_info()

    def _calculate_reward(self, row: int, col: int) -> float:
        """Open a cell and score the outcome."""
        if self._game_state != GameState.PLAYING:
            return REWARD_INVALID
        if not self.engine.step(row, col):
            return REWARD_INVALID

        if self.view.mine_hit:
            self.engine.finish_game()
            self._game_state = GameState.LOST
            return REWARD_MINE

        if self.view.safe_opened >= self._total_safe_cells:
            if self.engine.finish_game():
                self._game_state = GameState.WON
                return REWARD_WIN
            self._game_state = GameState.LOST
            return REWARD_MINE

        return REWARD_SAFE

    @property
    def game_state(self) -> GameState:
        """Get current episode state."""
        return self._game_state

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.view.safe_opened,
            "total_safe": self._total_safe_cells,
            "game_state": self._game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.view.render()
        if self.render_mode == "human":
            print(self.view.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = closed cell.
        """
        return (self.engine.get_observation() == -1).flatten()


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[GameConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel training.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.
        asynchronous: Run each environment in its own process.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
