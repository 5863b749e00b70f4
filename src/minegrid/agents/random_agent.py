"""
Random agent: a baseline that reveals hidden cells uniformly at random.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """
    Agent that selects valid actions uniformly at random.

    Expected win rate on a 9x9 board with 10 mines is low, which makes it
    a useful floor when comparing anything smarter.
    """

    def __init__(
        self,
        board_width: int = 9,
        board_height: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_width, board_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing left to reveal; the env treats this as a no-op
            return 0

        return int(self.rng.choice(valid_indices))
