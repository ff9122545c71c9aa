"""
Base agent interface for Minesweeper AI.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from game.cell import HIDDEN_VALUE
from game.environment import decode_action, encode_action
from game.grid import ActionType


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents choose one action index per observation. Indices follow
    ``game.environment.encode_action``: reveals first, then flags.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        if board_height < 1 or board_width < 1:
            raise ValueError("Board dimensions must be positive")
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask over the action space.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[ActionType, int, int]:
        """Convert an action index to (action type, row, col)."""
        return decode_action(action, self.board_height, self.board_width)

    def position_to_action(
        self, row: int, col: int, action_type: ActionType = ActionType.REVEAL
    ) -> int:
        """Convert a position and action type to an action index."""
        return encode_action(
            action_type, row, col, self.board_height, self.board_width
        )

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Valid actions mask from an observation.

        Hidden cells may be revealed or flagged, so the reveal half and the
        flag half of the mask are identical.
        """
        hidden = np.asarray(observation).flatten() == HIDDEN_VALUE
        return np.concatenate([hidden, hidden])

    def reset(self) -> None:
        """Reset agent state for new episode."""
