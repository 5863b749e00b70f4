"""
minegrid - seeded mine-clearing puzzle engine.

Provides the board engine (deferred placement, flood-fill reveal, win/loss
tracking), its deterministic random source, and a gymnasium wrapper.
"""
from .cell import Cell, CellState
from .errors import BoardError, InvalidDimensions, InvalidMineCount, TooManyMines
from .board import Board, BoardConfig, GameState, RevealResult
from .environment import MinesweeperEnv, make_vec_env

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "BoardError",
    "InvalidDimensions",
    "InvalidMineCount",
    "TooManyMines",
    "MinesweeperEnv",
    "make_vec_env",
]
