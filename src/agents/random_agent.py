"""
Random agent for Minesweeper.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    It never flags, so only the reveal half of the action mask is used.
    Expected win rate on beginner: ~10-15%
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        reveal_indices = np.where(valid_actions[: self.total_cells])[0]

        if len(reveal_indices) == 0:
            # Nothing left to reveal; any index is invalid at this point
            return 0

        return int(self.rng.choice(reveal_indices))
