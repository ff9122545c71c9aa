"""
Cell module for Minesweeper game.

Holds the per-square state the board owns (mine, adjacent count,
hidden/revealed/flagged) and the integer encoding used in observations.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Observation encoding shared by the board, the environment and the
# observation-backed grid. Revealed safe cells use their count (0-8).
HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the board.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was hidden and is now revealed, False if it
            was already revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def flag(self) -> bool:
        """Flag a hidden cell. Returns False if it was not hidden."""
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.FLAGGED
        return True

    def unflag(self) -> bool:
        """Remove the flag. Returns False if the cell was not flagged."""
        if self.state != CellState.FLAGGED:
            return False
        self.state = CellState.HIDDEN
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            return self.flag()
        return self.unflag()

    @property
    def is_hidden(self) -> bool:
        """Hidden and not flagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Encode the cell as seen by a player.

        Returns:
            HIDDEN_VALUE, FLAGGED_VALUE, the adjacent count (0-8) for a
            revealed safe cell, or MINE_VALUE for a revealed mine.
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
