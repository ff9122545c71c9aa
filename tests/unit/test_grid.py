"""
Unit tests for the grid interface and its board/observation adapters.
"""
import pytest
import numpy as np
from game import (
    ActionType,
    Board,
    BoardGrid,
    MineGrid,
    ObservationGrid,
    grid_shape,
)


# ============================================================================
# Board Adapter Tests
# ============================================================================

class TestBoardGrid:
    """Test the live board view."""

    def test_shape_matches_board(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        assert (grid.height, grid.width) == (3, 3)
        assert grid_shape(grid) == (3, 3)

    def test_cells_are_row_major(self, small_board: Board) -> None:
        positions = [cell.position for cell in BoardGrid(small_board).cells()]
        assert positions[:4] == [(0, 0), (0, 1), (0, 2), (1, 0)]
        assert len(positions) == 9

    def test_view_tracks_board_state(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        center = grid.cell(1, 1)
        assert center.is_hidden is True
        small_board.reveal(1, 1)
        assert center.is_revealed is True
        assert center.adjacent_mines == 1

    def test_neighbor_queries(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        small_board.reveal(1, 1)
        small_board.flag(0, 0)
        center = grid.cell(1, 1)

        assert len(center.neighbors()) == 8
        assert [c.position for c in center.flagged_neighbors()] == [(0, 0)]
        assert len(center.hidden_neighbors()) == 7
        assert center.is_satisfied() is True

    def test_unsatisfied_without_flags(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        small_board.reveal(1, 1)
        assert grid.cell(1, 1).is_satisfied() is False

    def test_reveal_and_mark_act_on_board(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        assert grid.cell(0, 0).mark() is True
        assert small_board.get_cell(0, 0).is_flagged is True
        assert grid.cell(1, 1).reveal() is True
        assert small_board.get_cell(1, 1).is_revealed is True

    def test_mark_never_unflags(self, small_board: Board) -> None:
        grid = BoardGrid(small_board)
        grid.cell(0, 0).mark()
        assert grid.cell(0, 0).mark() is False
        assert small_board.get_cell(0, 0).is_flagged is True

    def test_check_win_delegates(self, strip_board: Board) -> None:
        grid = BoardGrid(strip_board)
        assert grid.check_win() is False
        strip_board.reveal(0, 1)
        strip_board.reveal(0, 3)
        assert grid.check_win() is True


# ============================================================================
# Observation Adapter Tests
# ============================================================================

class TestObservationGrid:
    """Test the observation-backed grid."""

    def test_decodes_states(self, make_grid) -> None:
        grid = make_grid(["F1."])
        flagged, number, hidden = grid.rows()[0]
        assert flagged.is_flagged and not flagged.is_revealed
        assert number.is_revealed and number.adjacent_mines == 1
        assert hidden.is_hidden

    def test_neighbors_stay_in_bounds(self, make_grid) -> None:
        grid = make_grid(["F1.", "..."])
        corner = grid.cell(0, 2)
        assert [c.position for c in corner.neighbors()] == [(0, 1), (1, 1), (1, 2)]
        assert len(grid.cell(1, 1).neighbors()) == 5

    def test_records_only_first_effect(self) -> None:
        grid = ObservationGrid(np.full((2, 2), -1))
        assert grid.cell(0, 1).mark() is True
        assert grid.cell(1, 1).reveal() is False
        assert grid.chosen == (ActionType.FLAG, 0, 1)

    def test_rejects_effect_on_revealed_cell(self, make_grid) -> None:
        grid = make_grid(["1."])
        assert grid.cell(0, 0).reveal() is False
        assert grid.chosen is None

    def test_never_won(self, make_grid) -> None:
        assert ObservationGrid(np.zeros((2, 2))).check_win() is False

    @pytest.mark.parametrize("shape", [(0, 3), (3,), (2, 2, 2)])
    def test_rejects_bad_shapes(self, shape) -> None:
        with pytest.raises(ValueError, match="non-empty 2D"):
            ObservationGrid(np.zeros(shape))


# ============================================================================
# Shape Validation Tests
# ============================================================================

class _RowsGrid(MineGrid):
    def __init__(self, rows) -> None:
        self._rows = rows

    def rows(self):
        return self._rows

    def check_win(self) -> bool:
        return False


class TestGridShape:
    """Test rectangular-grid validation."""

    def test_empty_grid_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one row"):
            grid_shape(_RowsGrid([]))

    def test_ragged_grid_raises(self) -> None:
        cells = ObservationGrid(np.full((2, 2), -1)).rows()
        with pytest.raises(ValueError, match="Ragged grid"):
            grid_shape(_RowsGrid([cells[0], cells[1][:1]]))
