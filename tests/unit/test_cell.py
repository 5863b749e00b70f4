"""
Unit tests for Cell.

Covers the hidden/flagged/revealed state machine and observation codes.
"""
import pytest
from minegrid import Cell, CellState
from minegrid.cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE


# ============================================================================
# Defaults
# ============================================================================

class TestCellDefaults:
    """A fresh cell is an unmined, hidden zero."""

    def test_fresh_cell_fields(self, hidden_cell: Cell) -> None:
        assert hidden_cell.is_mine is False
        assert hidden_cell.adjacent_mines == 0
        assert hidden_cell.state == CellState.HIDDEN

    def test_fresh_cell_flags(self, hidden_cell: Cell) -> None:
        assert hidden_cell.is_hidden is True
        assert hidden_cell.is_revealed is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# State Transitions
# ============================================================================

class TestCellTransitions:
    """Reveal is one-way; a flag locks the cell against reveal."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_second_reveal_is_rejected(self, hidden_cell: Cell) -> None:
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True

    def test_flag_blocks_reveal(self, hidden_cell: Cell) -> None:
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_unflag_then_reveal(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True
        assert hidden_cell.reveal() is True

    def test_revealed_cell_cannot_be_flagged(self, numbered_cell: Cell) -> None:
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.state == CellState.REVEALED

    def test_flag_toggles_repeatedly(self, hidden_cell: Cell) -> None:
        for expected in (True, False, True, False):
            assert hidden_cell.toggle_flag() is True
            assert hidden_cell.is_flagged is expected


# ============================================================================
# Observation Codes
# ============================================================================

class TestCellObservation:
    """Integer codes used by Board.get_observation."""

    def test_hidden(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == OBS_HIDDEN == -1

    def test_flagged_hides_contents(self, mine_cell: Cell) -> None:
        mine_cell.toggle_flag()
        assert mine_cell.to_observation() == OBS_FLAGGED == -2

    def test_hidden_mine_is_not_exposed(self, mine_cell: Cell) -> None:
        assert mine_cell.to_observation() == OBS_HIDDEN

    def test_revealed_mine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == OBS_MINE == 9

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_count(self, count: int) -> None:
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count
