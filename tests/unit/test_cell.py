"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation encoding.
"""
import pytest
from game import Cell, CellState, HIDDEN_VALUE, FLAGGED_VALUE, MINE_VALUE


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_hidden_and_safe(self) -> None:
        """New cell is hidden, not a mine, with no adjacent mines."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_mine is False
        assert cell.adjacent_mines == 0

    def test_cell_with_adjacent_mines(self) -> None:
        """Can create a cell with adjacent mine count."""
        assert Cell(adjacent_mines=5).adjacent_mines == 5


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell succeeds and changes its state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_fails(self, hidden_cell: Cell) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_fails(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test flag, unflag and toggle."""

    def test_flag_hidden_cell(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell succeeds."""
        assert hidden_cell.flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_flag_is_one_way(self, hidden_cell: Cell) -> None:
        """Flagging twice does not unflag."""
        hidden_cell.flag()
        assert hidden_cell.flag() is False
        assert hidden_cell.is_flagged is True

    def test_unflag(self, hidden_cell: Cell) -> None:
        """Unflag returns the cell to hidden, only if it was flagged."""
        assert hidden_cell.unflag() is False
        hidden_cell.flag()
        assert hidden_cell.unflag() is True
        assert hidden_cell.is_hidden is True

    def test_toggle_flag_round_trip(self, hidden_cell: Cell) -> None:
        """Toggling twice returns to hidden."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_flagged is True
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.is_hidden is True

    def test_cannot_flag_revealed_cell(self, numbered_cell: Cell) -> None:
        """Revealed cells cannot be flagged."""
        assert numbered_cell.flag() is False
        assert numbered_cell.toggle_flag() is False


# ============================================================================
# Observation Encoding Tests
# ============================================================================

class TestCellObservation:
    """Test observation encoding."""

    def test_hidden_cell_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == HIDDEN_VALUE

    def test_flagged_cell_observation(self, hidden_cell: Cell) -> None:
        hidden_cell.flag()
        assert hidden_cell.to_observation() == FLAGGED_VALUE

    def test_revealed_cell_shows_count(self, numbered_cell: Cell) -> None:
        assert numbered_cell.to_observation() == 3

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == MINE_VALUE

    @pytest.mark.parametrize("count", [0, 1, 8])
    def test_revealed_counts(self, count: int) -> None:
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count
