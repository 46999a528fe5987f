"""
Random player for Minesweeper.

Serves as a baseline by opening closed cells uniformly at random.
"""
from typing import Optional

import numpy as np

from .sampler import Seed


class RandomPlayer:
    """
    Player that selects actions uniformly at random.

    Actions are flat cell indices (row * size + col).
    """

    def __init__(self, seed: Seed = None) -> None:
        """
        Initialize the random player.

        Args:
            seed: Random seed for reproducibility.
        """
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        valid_actions: np.ndarray,
        observation: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            valid_actions: Boolean mask of valid actions.
            observation: Current board observation (unused).

        Returns:
            Random action index from valid actions, or 0 if none is valid.
        """
        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            return 0

        return int(self.rng.choice(valid_indices))
