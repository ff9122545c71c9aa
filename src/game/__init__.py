"""
Minesweeper game module.

Provides the board the agents play against, the grid interface they
read it through, and a Gymnasium environment around it.
"""
from .cell import Cell, CellState, HIDDEN_VALUE, FLAGGED_VALUE, MINE_VALUE
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
)
from .grid import (
    ActionType,
    GridCell,
    MineGrid,
    BoardGrid,
    ObservationGrid,
    grid_shape,
)
from .environment import MinesweeperEnv, encode_action, decode_action

__all__ = [
    "Cell",
    "CellState",
    "HIDDEN_VALUE",
    "FLAGGED_VALUE",
    "MINE_VALUE",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "ActionType",
    "GridCell",
    "MineGrid",
    "BoardGrid",
    "ObservationGrid",
    "grid_shape",
    "MinesweeperEnv",
    "encode_action",
    "decode_action",
]
