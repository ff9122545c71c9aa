"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over ``Board`` with both reveal and
flag actions, so rule-based agents that flag mines can be evaluated the
same way as agents that only reveal.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import FLAGGED_VALUE, MINE_VALUE
from .grid import ActionType


# ============================================================================
# Action Encoding
# ============================================================================

def encode_action(
    action_type: ActionType, row: int, col: int, height: int, width: int
) -> int:
    """
    Flatten an action to an index.

    Reveal actions occupy ``[0, height * width)`` and flag actions
    ``[height * width, 2 * height * width)``, both in row-major order.
    """
    index = row * width + col
    if action_type is ActionType.FLAG:
        index += height * width
    return index


def decode_action(
    action: int, height: int, width: int
) -> Tuple[ActionType, int, int]:
    """Inverse of ``encode_action``."""
    total_cells = height * width
    if not 0 <= action < 2 * total_cells:
        raise ValueError(f"Action {action} out of range [0, {2 * total_cells})")
    action_type = ActionType.REVEAL
    if action >= total_cells:
        action_type = ActionType.FLAG
        action -= total_cells
    return action_type, action // width, action % width


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        (height, width) int8 array, see ``Board.get_observation``.

    Actions:
        Discrete(2 * height * width), see ``encode_action``.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for flagging a hidden cell
        - -0.1 for invalid action (already revealed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
            seed: Seed for mine placement.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config, seed=seed)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=FLAGGED_VALUE,
            high=MINE_VALUE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Reseeds mine placement when given.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board = Board(self.config, seed=seed)
        else:
            self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action_type, row, col = decode_action(
            int(action), self.config.height, self.config.width
        )
        self._steps += 1

        if action_type is ActionType.FLAG:
            reward = self._apply_flag(row, col)
        else:
            reward = self._apply_reveal(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _apply_reveal(self, row: int, col: int) -> float:
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.is_hidden:
            return -0.1

        self.board.reveal(row, col)

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _apply_flag(self, row: int, col: int) -> float:
        cell = self.board.get_cell(row, col)
        if cell is None or not cell.is_hidden:
            return -0.1
        self.board.flag(row, col)
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "steps": self._steps,
            "revealed": self.board.cells_revealed,
            "flags": self.board.flags_placed,
            "total_safe": self.config.safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Boolean mask over the action space.

        Reveal and flag actions are valid exactly on hidden, unflagged cells.
        """
        total_cells = self.config.total_cells
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            index = row * self.config.width + col
            mask[index] = True
            mask[index + total_cells] = True
        return mask
