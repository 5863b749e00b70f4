"""
Gymnasium environment wrapper for the minegrid engine.

Provides a standard RL interface on top of ``Board``.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, RevealResult
from .cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the mine-clearing puzzle.

    Observation:
        2D array indexed ``[y, x]`` where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i % width, i // width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a no-op reveal (already revealed or flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        seed: int = 0,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
            seed: Board seed; 0 picks a fresh layout every episode.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config, seed=seed)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Board seed for this episode; None keeps the seed the
                environment was built with.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.reset(seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(int(action))
        self._steps += 1

        result = self.board.reveal(x, y)
        reward = self._calculate_reward(result)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        y, x = divmod(action, self.config.width)
        return x, y

    def _calculate_reward(self, result: RevealResult) -> float:
        """Map a reveal outcome to a reward."""
        if result is RevealResult.NO_OP:
            return REWARD_INVALID
        if result is RevealResult.HIT_MINE:
            return REWARD_MINE
        if self.board.is_won:
            return REWARD_WIN
        return REWARD_SAFE

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        remaining = self.board.remaining_safe_count
        return {
            "steps": self._steps,
            "revealed": self.config.safe_cells - remaining,
            "total_safe": self.config.safe_cells,
            "remaining_safe": remaining,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
            "seed": self.board.seed,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = self.board.render(
            reveal_all_mines=not self.board.is_playing,
        )
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        return (self.board.get_observation() == OBS_HIDDEN).flatten()


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
