"""
Board module for the minegrid engine.

Implements the game board with deferred seeded mine placement, flood-fill
revealing, flagging and win/loss tracking.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidDimensions, InvalidMineCount, TooManyMines
from .prng import MASK_64, seed_from_time, shuffled_indices

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """Outcome of a single reveal action."""

    NO_OP = auto()
    REVEALED_SAFE = auto()
    HIT_MINE = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(self.width, self.height)
        if self.num_mines < 0:
            raise InvalidMineCount("Number of mines cannot be negative")
        if self.num_mines >= self.total_cells:
            raise TooManyMines(self.num_mines, self.total_cells)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Game board.

    Cells are stored in a flat row-major list addressed by ``y * width + x``.
    Mines are placed on the first reveal so that cell is always safe; the
    layout is a pure function of the seed, dimensions, mine count and first
    reveal position. A seed of 0 means "pick one from the clock".

    Once the game is won or lost the board is terminal and every mutator is
    a no-op.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: int = 0
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _requested_seed: int = field(default=0, repr=False)
    _remaining_safe: int = field(default=0, repr=False)
    _alive: bool = field(default=True, repr=False)
    _won: bool = field(default=False, repr=False)
    _initialized: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve the seed and build the empty grid."""
        self._requested_seed = self.seed
        self._start_game(self.seed)

    @classmethod
    def new(
        cls, width: int, height: int, mine_count: int, seed: int = 0
    ) -> "Board":
        """
        Build a board from raw parameters.

        Raises:
            InvalidDimensions: width or height below 1.
            TooManyMines: mine_count not below width * height.
            InvalidMineCount: negative mine_count.
        """
        return cls(BoardConfig(width, height, mine_count), seed=seed)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _start_game(self, seed: int) -> None:
        """Reset all per-game state with a resolved seed."""
        seed &= MASK_64
        self.seed = seed if seed != 0 else seed_from_time()
        self._cells = [Cell() for _ in range(self.config.total_cells)]
        self._remaining_safe = self.config.safe_cells
        self._alive = True
        self._won = False
        self._initialized = False

    def _index(self, x: int, y: int) -> int:
        return y * self.config.width + x

    def _initialize(self, safe_x: int, safe_y: int) -> None:
        """Place mines away from the first reveal and compute adjacency."""
        if self._initialized:
            return
        self._place_mines(self._index(safe_x, safe_y))
        self._calculate_adjacent_mines()
        self._initialized = True

    def _place_mines(self, exclude: int) -> None:
        """
        Place mines on a seeded shuffle of every index except ``exclude``.

        Args:
            exclude: Flat index to keep mine-free.
        """
        positions = shuffled_indices(
            self.config.total_cells, exclude, self.seed
        )
        for index in positions[:self.config.num_mines]:
            self._cells[index].is_mine = True
        logger.debug(
            "Placed %d mines on %dx%d board (seed=%d, safe index=%d)",
            self.config.num_mines,
            self.config.width,
            self.config.height,
            self.seed,
            exclude,
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                cell = self._cells[self._index(x, y)]
                if not cell.is_mine:
                    cell.adjacent_mines = self._count_adjacent_mines(x, y)

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if self._cells[self._index(nx, ny)].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yield in-bounds neighbours of a cell.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Yields:
            (x, y) tuples for the up-to-8 surrounding cells.
        """
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self._is_valid_position(nx, ny):
                    yield nx, ny

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealResult:
        """
        Reveal the cell at ``(x, y)``.

        On the first reveal, places mines avoiding this cell. Revealing a
        mine loses the game; revealing a zero cell floods outward.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            NO_OP when out of range, after game over, or when the cell is
            flagged or already revealed. HIT_MINE when the cell is a mine.
            REVEALED_SAFE otherwise.
        """
        if not self.is_playing or not self._is_valid_position(x, y):
            return RevealResult.NO_OP
        cell = self._cells[self._index(x, y)]
        if not cell.is_hidden:
            return RevealResult.NO_OP

        if not self._initialized:
            self._initialize(x, y)

        if cell.is_mine:
            cell.reveal()
            self._alive = False
            logger.info("Mine hit at (%d, %d)", x, y)
            return RevealResult.HIT_MINE

        self._flood_reveal(x, y)
        if self._remaining_safe == 0 and self._alive:
            self._won = True
            logger.info("Board cleared (seed=%d)", self.seed)
        return RevealResult.REVEALED_SAFE

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal a safe cell and every zero region connected to it."""
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._cells[self._index(cx, cy)]
            if cell.is_mine or not cell.reveal():
                continue
            self._remaining_safe -= 1
            if cell.adjacent_mines != 0:
                continue
            for nx, ny in self.neighbors(cx, cy):
                neighbor = self._cells[self._index(nx, ny)]
                if not neighbor.is_revealed and not neighbor.is_mine:
                    stack.append((nx, ny))

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if the flag was toggled, False when out of range, after
            game over, or when the cell is revealed.
        """
        if not self.is_playing or not self._is_valid_position(x, y):
            return False
        return self._cells[self._index(x, y)].toggle_flag()

    flag = toggle_flag

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def remaining_safe_count(self) -> int:
        """Safe cells not yet revealed."""
        return self._remaining_safe

    @property
    def alive(self) -> bool:
        """False once a mine has been revealed."""
        return self._alive

    @property
    def won(self) -> bool:
        """True once every safe cell has been revealed."""
        return self._won

    @property
    def initialized(self) -> bool:
        """True once mines have been placed."""
        return self._initialized

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if not self._alive:
            return GameState.LOST
        if self._won:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._alive and not self._won

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if out of range."""
        if not self._is_valid_position(x, y):
            return None
        return self._cells[self._index(x, y)]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate ``(x, y, cell)`` in row-major order."""
        for index, cell in enumerate(self._cells):
            y, x = divmod(index, self.config.width)
            yield x, y, cell

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed ``[y, x]``.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int8,
            count=len(self._cells),
        )
        return obs.reshape(self.config.height, self.config.width)

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (x, y) positions that are hidden and unflagged.
        """
        return [(x, y) for x, y, cell in self.cells() if cell.is_hidden]

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Start a new game with the same configuration.

        Args:
            seed: Seed for the new game. Defaults to the seed the board was
                created with, so a board built with seed 0 gets a fresh one.
        """
        self._start_game(self._requested_seed if seed is None else seed)

    # ========================================================================
    # Text Projection
    # ========================================================================

    def _cell_char(self, cell: Cell, reveal_all_mines: bool) -> str:
        if reveal_all_mines and cell.is_mine:
            return "*"
        if cell.is_revealed:
            if cell.is_mine:
                return "*"
            return str(cell.adjacent_mines) if cell.adjacent_mines else " "
        if cell.is_flagged:
            return "F"
        return "."

    def render(
        self,
        reveal_all_mines: bool = False,
        one_based_coordinates: bool = False,
    ) -> str:
        """
        Render the board as a text grid with coordinate headers.

        Args:
            reveal_all_mines: Show every mine as ``*`` regardless of state.
            one_based_coordinates: Label rows and columns from 1.

        Returns:
            Multi-line string; ``.`` hidden, ``F`` flagged, digit or blank
            for revealed safe cells, ``*`` for mines.
        """
        offset = 1 if one_based_coordinates else 0
        width = self.config.width
        lines = [
            "    " + "".join(f"{x + offset:>2} " for x in range(width)),
            "   " + "-" * (width * 3 + 1),
        ]
        for y in range(self.config.height):
            row = self._cells[y * width:(y + 1) * width]
            chars = "".join(
                f"{self._cell_char(cell, reveal_all_mines)}  " for cell in row
            )
            lines.append(f"{y + offset:>2} | {chars}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render(reveal_all_mines=False, one_based_coordinates=True)
