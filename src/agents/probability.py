"""
Local mine-probability estimation.

Every revealed number is treated as a constraint on its own hidden
neighbors only. There is no search over joint mine placements: each
constraint writes an estimate straight into the probability grid, and
when several constraints touch the same hidden cell the one evaluated
last in row-major order wins. Overlapping constraints are therefore not
combined, which is a known accuracy gap of this estimator.
"""
import math
from typing import Tuple

import numpy as np

from game.grid import GridCell, MineGrid, grid_shape


# ============================================================================
# Constants
# ============================================================================

IGNORED = -1.0  # revealed cells: never a candidate for any action
UNKNOWN = 0.5  # hidden cells no constraint has spoken about
SAFE = 0.0
MINE = 1.0


def round_probability(value: float) -> float:
    """Round half-up to two decimals, so 0.125 becomes 0.13."""
    return math.floor(value * 100 + 0.5) / 100


def format_probabilities(probabilities: np.ndarray) -> str:
    """Render a probability grid as text, ``--`` for ignored cells."""
    return "\n".join(
        " ".join(" -- " if value < 0 else f"{value:4.2f}" for value in row)
        for row in probabilities
    )


# ============================================================================
# Probability Estimator
# ============================================================================

class ProbabilityEstimator:
    """
    Recomputes a (height, width) probability grid from scratch on demand.

    Values are mine probabilities in [0, 1], or ``IGNORED`` for revealed
    cells. The grid is owned by the estimator; ``recompute`` hands out a
    copy.
    """

    def __init__(self, height: int, width: int) -> None:
        if height < 1 or width < 1:
            raise ValueError("Grid dimensions must be positive")
        self.probabilities = np.full((height, width), UNKNOWN, dtype=np.float64)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.probabilities.shape

    def recompute(self, grid: MineGrid) -> np.ndarray:
        """
        Rebuild the probability grid for ``grid``.

        Raises:
            ValueError: If the grid is empty, ragged, or not the size the
                estimator was built for.
        """
        shape = grid_shape(grid)
        if shape != self.shape:
            raise ValueError(f"Grid shape {shape} does not match {self.shape}")

        self.probabilities.fill(UNKNOWN)
        for cell in grid.cells():
            if cell.is_revealed:
                self._apply_constraint(cell)
        return self.probabilities.copy()

    def _apply_constraint(self, cell: GridCell) -> None:
        probabilities = self.probabilities
        probabilities[cell.row, cell.col] = IGNORED
        hidden = cell.hidden_neighbors()

        # A satisfied number proves every remaining neighbor safe, and
        # that proof overrides whatever other numbers suggested.
        if cell.is_satisfied():
            for neighbor in hidden:
                probabilities[neighbor.row, neighbor.col] = SAFE
            return

        mines = cell.adjacent_mines
        flagged = len(cell.flagged_neighbors())
        if mines >= len(hidden):
            estimate = MINE
        elif flagged > mines:
            # Over-flagged: the number contradicts its flags, no estimate.
            return
        else:
            estimate = round_probability((mines - flagged) / max(len(hidden), 1))

        for neighbor in hidden:
            current = probabilities[neighbor.row, neighbor.col]
            if SAFE < current < MINE:
                probabilities[neighbor.row, neighbor.col] = estimate
