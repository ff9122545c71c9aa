"""
Probability-driven Minesweeper agent.

Each move recomputes the probability grid, then takes the first certain
flag, else the first certain reveal, else reveals the least likely mine.
It plays either directly on a ``MineGrid`` (``next_move``) or through
observations like any other agent (``select_action``).
"""
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from game.grid import ActionType, GridCell, MineGrid, ObservationGrid, grid_shape

from .base_agent import BaseAgent
from .probability import MINE, SAFE, UNKNOWN, ProbabilityEstimator


@dataclass(frozen=True)
class Move:
    """An action the agent has applied to a grid."""

    kind: ActionType
    row: int
    col: int
    probability: float
    forced: bool


# ============================================================================
# Probability Agent
# ============================================================================

class ProbabilityAgent(BaseAgent):
    """
    Local constraint propagation plus a lowest-probability guess.

    Strategy, one action per call:
        1. Flag the first hidden cell whose probability is exactly 1
        2. Otherwise reveal the first hidden cell whose probability is 0
        3. Otherwise stop if the game is already won
        4. Otherwise reveal the first cell with the lowest probability
           below 0.5, falling back to a random hidden cell

    Cells are always visited in row-major order. Only hidden, unflagged
    cells are ever acted on.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the probability agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Seed for the random fallback guess.
        """
        super().__init__(board_height, board_width)
        self.estimator = ProbabilityEstimator(board_height, board_width)
        self.rng = np.random.default_rng(seed)

        self.certain_moves = 0
        self.guesses_made = 0
        self.last_move: Optional[Move] = None

    @classmethod
    def for_grid(
        cls, grid: MineGrid, seed: Optional[int] = None
    ) -> "ProbabilityAgent":
        """Build an agent sized to ``grid``."""
        height, width = grid_shape(grid)
        return cls(height, width, seed=seed)

    def next_move(self, grid: MineGrid) -> Optional[Move]:
        """
        Decide and apply exactly one action on ``grid``.

        Returns:
            The move made, or None when the game is already won or no
            hidden cell is left to act on.
        """
        probabilities = self.estimator.recompute(grid)
        hidden = grid.hidden_cells()

        move = self._certain_move(hidden, probabilities)
        if move is None:
            if grid.check_win():
                return None
            move = self._guess(hidden, probabilities)
        return move

    def _certain_move(
        self, hidden: List[GridCell], probabilities: np.ndarray
    ) -> Optional[Move]:
        # Flags go first so known mines are never left standing.
        for target, kind in ((MINE, ActionType.FLAG), (SAFE, ActionType.REVEAL)):
            for cell in hidden:
                if probabilities[cell.row, cell.col] == target:
                    self.certain_moves += 1
                    return self._apply(cell, kind, target, forced=True)
        return None

    def _guess(
        self, hidden: List[GridCell], probabilities: np.ndarray
    ) -> Optional[Move]:
        if not hidden:
            return None

        best = hidden[int(self.rng.integers(len(hidden)))]
        lowest = UNKNOWN
        for cell in hidden:
            probability = probabilities[cell.row, cell.col]
            if 0.0 <= probability < lowest:
                lowest = probability
                best = cell

        self.guesses_made += 1
        return self._apply(
            best,
            ActionType.REVEAL,
            float(probabilities[best.row, best.col]),
            forced=False,
        )

    def _apply(
        self, cell: GridCell, kind: ActionType, probability: float, forced: bool
    ) -> Move:
        if kind is ActionType.FLAG:
            cell.mark()
        else:
            cell.reveal()
        self.last_move = Move(kind, cell.row, cell.col, probability, forced)
        return self.last_move

    @property
    def probabilities(self) -> np.ndarray:
        """Probability grid from the most recent move."""
        return self.estimator.probabilities.copy()

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Run ``next_move`` against the observation and return its action.

        Falls back to the first valid action (or 0) when there is nothing
        to decide, e.g. no hidden cell is left.
        """
        grid = ObservationGrid(observation)
        self.next_move(grid)

        if grid.chosen is not None:
            kind, row, col = grid.chosen
            return self.position_to_action(row, col, kind)

        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)
        valid_indices = np.where(valid_actions)[0]
        return int(valid_indices[0]) if len(valid_indices) else 0

    def reset(self) -> None:
        """Forget the last move. Move counters keep accumulating."""
        self.last_move = None

    @property
    def guess_ratio(self) -> float:
        """Fraction of moves that were guesses."""
        total = self.certain_moves + self.guesses_made
        if total == 0:
            return 0.0
        return self.guesses_made / total
