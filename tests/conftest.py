"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List, Sequence

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import (
    Board,
    BoardConfig,
    Cell,
    ObservationGrid,
    HIDDEN_VALUE,
    FLAGGED_VALUE,
)


# ============================================================================
# Synthetic Grid Helpers
# ============================================================================

def observation_from_rows(rows: Sequence[str]) -> np.ndarray:
    """
    Build an observation from text rows.

    ``.`` is hidden, ``F`` is flagged, a digit is a revealed count.
    """
    symbols = {".": HIDDEN_VALUE, "F": FLAGGED_VALUE}
    return np.array(
        [[symbols[ch] if ch in symbols else int(ch) for ch in row] for row in rows],
        dtype=np.int8,
    )


class RecordingGrid(ObservationGrid):
    """Observation grid that records every effect instead of only the first."""

    def __init__(self, observation: np.ndarray, won: bool = False) -> None:
        super().__init__(observation)
        self.won = won
        self.effects: List[tuple] = []

    def check_win(self) -> bool:
        return self.won

    def record(self, action, cell) -> bool:
        self.effects.append((action, cell.row, cell.col))
        return super().record(action, cell)


@pytest.fixture
def make_grid() -> Callable[..., RecordingGrid]:
    """Factory for synthetic grids from text rows."""
    def factory(rows: Sequence[str], won: bool = False) -> RecordingGrid:
        return RecordingGrid(observation_from_rows(rows), won=won)
    return factory


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board(BoardConfig(3, 3, 1), mine_positions=[(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def strip_board() -> Board:
    """1x4 strip, mines at both sides of column 1: ``* 2 * 1``."""
    return Board(BoardConfig(width=4, height=1, num_mines=2),
                 mine_positions=[(0, 0), (0, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
