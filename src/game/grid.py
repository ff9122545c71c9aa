"""
Grid interface consumed by the agents.

Agents never touch a ``Board`` directly. They read cells through
``GridCell`` and act through its two effects, ``reveal`` and ``mark``.
Two adapters are provided:

- ``BoardGrid``: live view over a ``Board``; effects change the game.
- ``ObservationGrid``: view over an observation array; effects only
  record which action was chosen, so an agent can answer
  ``select_action`` without owning a board.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .board import Board, neighbor_positions
from .cell import FLAGGED_VALUE


class ActionType(Enum):
    """The two effects an agent can apply to a cell."""

    REVEAL = "reveal"
    FLAG = "flag"


# ============================================================================
# Interfaces
# ============================================================================

class GridCell(ABC):
    """One grid position as seen by an agent."""

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    @property
    @abstractmethod
    def is_revealed(self) -> bool:
        ...

    @property
    @abstractmethod
    def is_flagged(self) -> bool:
        ...

    @property
    @abstractmethod
    def adjacent_mines(self) -> int:
        """Mines among the neighbors. Only meaningful once revealed."""

    @abstractmethod
    def neighbors(self) -> Sequence["GridCell"]:
        """All in-bounds neighbors, in row-major order."""

    @abstractmethod
    def reveal(self) -> bool:
        ...

    @abstractmethod
    def mark(self) -> bool:
        """Flag the cell as a suspected mine."""

    @property
    def is_hidden(self) -> bool:
        """Neither revealed nor flagged: the only state agents act on."""
        return not self.is_revealed and not self.is_flagged

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def hidden_neighbors(self) -> List["GridCell"]:
        return [cell for cell in self.neighbors() if cell.is_hidden]

    def flagged_neighbors(self) -> List["GridCell"]:
        return [cell for cell in self.neighbors() if cell.is_flagged]

    def is_satisfied(self) -> bool:
        """True when flagged neighbors account for every adjacent mine."""
        return len(self.flagged_neighbors()) == self.adjacent_mines

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row={self.row}, col={self.col})"


class MineGrid(ABC):
    """A rectangular grid of ``GridCell`` plus the game's win query."""

    @abstractmethod
    def rows(self) -> Sequence[Sequence[GridCell]]:
        ...

    @abstractmethod
    def check_win(self) -> bool:
        ...

    @property
    def height(self) -> int:
        return len(self.rows())

    @property
    def width(self) -> int:
        rows = self.rows()
        return len(rows[0]) if rows else 0

    def cells(self) -> Iterator[GridCell]:
        """Every cell in row-major order."""
        for row in self.rows():
            yield from row

    def hidden_cells(self) -> List[GridCell]:
        return [cell for cell in self.cells() if cell.is_hidden]


def grid_shape(grid: MineGrid) -> Tuple[int, int]:
    """
    Validate that ``grid`` is a non-empty rectangle.

    Returns:
        (height, width)

    Raises:
        ValueError: If the grid is empty or its rows differ in length.
    """
    rows = grid.rows()
    if not rows or not rows[0]:
        raise ValueError("Grid must have at least one row and one column")
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Ragged grid: row {index} has {len(row)} cells, expected {width}"
            )
    return len(rows), width


# ============================================================================
# Board Adapter
# ============================================================================

class BoardCell(GridCell):
    """Live view of one board square."""

    def __init__(self, grid: "BoardGrid", row: int, col: int) -> None:
        super().__init__(row, col)
        self._grid = grid

    @property
    def _cell(self):
        return self._grid.board.get_cell(self.row, self.col)

    @property
    def is_revealed(self) -> bool:
        return self._cell.is_revealed

    @property
    def is_flagged(self) -> bool:
        return self._cell.is_flagged

    @property
    def adjacent_mines(self) -> int:
        return self._cell.adjacent_mines

    def neighbors(self) -> List[GridCell]:
        return [
            self._grid.cell(nr, nc)
            for nr, nc in self._grid.board.neighbors(self.row, self.col)
        ]

    def reveal(self) -> bool:
        return self._grid.board.reveal(self.row, self.col)

    def mark(self) -> bool:
        # Board.flag toggles, so only flag cells that are still hidden.
        if not self.is_hidden:
            return False
        return self._grid.board.flag(self.row, self.col)


class BoardGrid(MineGrid):
    """``MineGrid`` over a live ``Board``."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self._rows = [
            [BoardCell(self, row, col) for col in range(board.config.width)]
            for row in range(board.config.height)
        ]

    def rows(self) -> List[List[GridCell]]:
        return self._rows

    def cell(self, row: int, col: int) -> GridCell:
        return self._rows[row][col]

    def check_win(self) -> bool:
        return self.board.check_win()


# ============================================================================
# Observation Adapter
# ============================================================================

class ObservationCell(GridCell):
    """One entry of an observation array."""

    def __init__(self, grid: "ObservationGrid", row: int, col: int) -> None:
        super().__init__(row, col)
        self._grid = grid

    @property
    def _value(self) -> int:
        return int(self._grid.observation[self.row, self.col])

    @property
    def is_revealed(self) -> bool:
        return self._value >= 0

    @property
    def is_flagged(self) -> bool:
        return self._value == FLAGGED_VALUE

    @property
    def adjacent_mines(self) -> int:
        return max(self._value, 0)

    def neighbors(self) -> List[GridCell]:
        return [
            self._grid.cell(nr, nc)
            for nr, nc in neighbor_positions(
                self.row, self.col, self._grid.height, self._grid.width
            )
        ]

    def reveal(self) -> bool:
        return self._grid.record(ActionType.REVEAL, self)

    def mark(self) -> bool:
        return self._grid.record(ActionType.FLAG, self)


class ObservationGrid(MineGrid):
    """
    ``MineGrid`` over a (height, width) observation array.

    Effects are recorded in ``chosen`` instead of being applied, and only
    the first effect is accepted. ``check_win`` is always False: an
    observation carries no mine total, and the environment ends the
    episode itself on a win.
    """

    def __init__(self, observation: np.ndarray) -> None:
        self.observation = np.asarray(observation)
        if self.observation.ndim != 2 or 0 in self.observation.shape:
            raise ValueError(
                f"Observation must be a non-empty 2D array, "
                f"got shape {self.observation.shape}"
            )
        height, width = self.observation.shape
        self._rows = [
            [ObservationCell(self, row, col) for col in range(width)]
            for row in range(height)
        ]
        self.chosen: Optional[Tuple[ActionType, int, int]] = None

    def rows(self) -> List[List[GridCell]]:
        return self._rows

    def cell(self, row: int, col: int) -> GridCell:
        return self._rows[row][col]

    def check_win(self) -> bool:
        return False

    def record(self, action: ActionType, cell: GridCell) -> bool:
        if self.chosen is not None or not cell.is_hidden:
            return False
        self.chosen = (action, cell.row, cell.col)
        return True
