"""
Board construction errors.

These are the only errors the engine raises. Once a board exists every
operation on it is total: bad coordinates and moves after game over are
no-ops, not exceptions.
"""


class BoardError(ValueError):
    """Base class for invalid board parameters."""


class InvalidDimensions(BoardError):
    """Width or height is not a positive integer."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Board dimensions must be positive (got {width}x{height})"
        )
        self.width = width
        self.height = height


class InvalidMineCount(BoardError):
    """Mine count is outside ``0 <= mines < width * height``."""


class TooManyMines(InvalidMineCount):
    """Mine count leaves no safe cell for the first reveal."""

    def __init__(self, num_mines: int, total_cells: int) -> None:
        super().__init__(
            f"Too many mines: {num_mines} (max {total_cells - 1} "
            f"for {total_cells} cells)"
        )
        self.num_mines = num_mines
        self.total_cells = total_cells
