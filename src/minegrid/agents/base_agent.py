"""
Base agent interface for playing through ``MinesweeperEnv``.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ..cell import OBS_HIDDEN


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Agents see only the observation array, never the board, and answer
    with a flat action index ``y * width + x``.
    """

    def __init__(self, board_width: int, board_height: int) -> None:
        """
        Initialize the agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
        """
        self.board_width = board_width
        self.board_height = board_height
        self.total_cells = board_width * board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states indexed ``[y, x]``.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (y * width + x).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        y, x = divmod(action, self.board_width)
        return x, y

    def position_to_action(self, x: int, y: int) -> int:
        """Convert (x, y) position to flat action index."""
        return y * self.board_width + x

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Boolean mask of hidden cells in ``observation``."""
        return observation.flatten() == OBS_HIDDEN

    def reset(self) -> None:
        """Reset agent state for new episode."""

    def update(
        self,
        observation: np.ndarray,
        action: int,
        reward: float,
        next_observation: np.ndarray,
        done: bool,
    ) -> None:
        """
        Feed back the result of an action (for learning agents).

        Args:
            observation: State before action.
            action: Action taken.
            reward: Reward received.
            next_observation: State after action.
            done: Whether episode ended.
        """
