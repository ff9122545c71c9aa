"""
Board module for Minesweeper game.

The board is the game collaborator the agents play against: it owns the
cells, places mines (drawn per game from a seeded rng and placed on the
first reveal, or taken from an explicit layout), cascades reveals of
empty cells and tracks win/loss.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, HIDDEN_VALUE, FLAGGED_VALUE, MINE_VALUE


# ============================================================================
# Constants
# ============================================================================

Position = Tuple[int, int]


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def neighbor_positions(
    row: int, col: int, height: int, width: int
) -> List[Position]:
    """
    Get the in-bounds 8-connected neighbors of a cell.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        height: Number of rows on the board.
        width: Number of columns on the board.

    Returns:
        List of (row, col) tuples in row-major order.
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < height and 0 <= new_col < width:
                neighbors.append((new_row, new_col))
    return neighbors


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Unless ``mine_positions`` fixes the layout up front, every game draws
    its layout from the seeded rng before any click: ``num_mines`` mine
    cells plus one spare cell. The first reveal never hits a mine; if it
    lands on one, that mine moves to the spare cell. Two boards with the
    same seed therefore share a layout whatever their first clicks are,
    apart from that single move.

    A fixed layout must contain exactly ``config.num_mines`` distinct
    in-bounds positions.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    mine_positions: Optional[Iterable[Position]] = None
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _first_click: bool = True
    _cells_revealed: int = 0

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        self._drawn_layout: List[Position] = []
        if self.mine_positions is not None:
            self.mine_positions = self._check_layout(self.mine_positions)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _check_layout(
        self, positions: Iterable[Position]
    ) -> Tuple[Position, ...]:
        """Normalize a fixed layout, rejecting wrong counts and off-board cells."""
        layout = tuple(sorted({(int(r), int(c)) for r, c in positions}))
        if len(layout) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(layout)} distinct"
            )
        for row, col in layout:
            if not self._is_valid_position(row, col):
                raise ValueError(f"Mine position {(row, col)} is off the board")
        return layout

    def _init_grid(self) -> None:
        """Create an empty grid and place or draw this game's layout."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._first_click = True
        if self.mine_positions is not None:
            self._set_mines(self.mine_positions)
        else:
            self._drawn_layout = self._draw_layout()

    def _draw_layout(self) -> List[Position]:
        """Draw ``num_mines`` mine cells followed by one spare cell."""
        positions = [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
        ]
        return self._rng.sample(positions, self.config.num_mines + 1)

    def _place_mines(self, exclude: Position) -> None:
        """Place the drawn layout, moving a mine at ``exclude`` to the spare."""
        mines = self._drawn_layout[:-1]
        spare = self._drawn_layout[-1]
        self._set_mines(spare if pos == exclude else pos for pos in mines)

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """Mark ``positions`` as mines and compute every adjacent count."""
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._first_click = False

    def _calculate_adjacent_mines(self) -> None:
        """Set ``adjacent_mines`` on every safe cell."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if not cell.is_mine:
                    cell.adjacent_mines = sum(
                        1 for nr, nc in self.neighbors(row, col)
                        if self._grid[nr][nc].is_mine
                    )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """In-bounds 8-connected neighbor positions of (row, col)."""
        return neighbor_positions(row, col, self.config.height, self.config.width)

    def _is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On first click, places the drawn layout with this cell kept safe.
        Empty cells (0 adjacent mines) cascade to their neighbors.
        Revealing a mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if reveal was successful, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        if self._grid[row][col].state != CellState.HIDDEN:
            return False

        if self._first_click:
            self._place_mines((row, col))

        revealed = self._reveal_cell(row, col)
        if self._game_state == GameState.PLAYING:
            self.check_win()
        return revealed

    def _can_act(self, row: int, col: int) -> bool:
        """True while the game is running and (row, col) is on the board."""
        return (
            self._game_state == GameState.PLAYING
            and self._is_valid_position(row, col)
        )

    def _reveal_cell(self, row: int, col: int) -> bool:
        """Reveal one cell, cascading iteratively through empty cells."""
        if not self._grid[row][col].reveal():
            return False
        self._cells_revealed += 1

        if self._grid[row][col].is_mine:
            self._game_state = GameState.LOST
            return True

        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            if self._grid[current_row][current_col].adjacent_mines != 0:
                continue
            for nr, nc in self.neighbors(current_row, current_col):
                neighbor = self._grid[nr][nc]
                if neighbor.state == CellState.HIDDEN and neighbor.reveal():
                    self._cells_revealed += 1
                    pending.append((nr, nc))
        return True

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self._can_act(row, col):
            return False
        return self._grid[row][col].toggle_flag()

    def check_win(self) -> bool:
        """Mark the game won once every safe cell is revealed."""
        if (
            self._game_state == GameState.PLAYING
            and self._cells_revealed >= self.config.safe_cells
        ):
            self._game_state = GameState.WON
        return self._game_state == GameState.WON

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """True until the game is won or lost."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """True once every safe cell is revealed."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """True once a mine is revealed."""
        return self._game_state == GameState.LOST

    @property
    def cells_revealed(self) -> int:
        """Number of revealed cells, mines included."""
        return self._cells_revealed

    @property
    def flags_placed(self) -> int:
        return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def mine_layout(self) -> Tuple[Position, ...]:
        """Sorted mine positions; empty until mines are placed."""
        return tuple(
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_mine
        )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Board state as a (height, width) int8 array.

        Hidden cells are HIDDEN_VALUE, flagged cells FLAGGED_VALUE,
        revealed cells their adjacent count, a revealed mine MINE_VALUE.
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """Positions of hidden, unflagged cells."""
        return [
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].state == CellState.HIDDEN
        ]

    def render(self) -> str:
        """Render the board as text, one line per row."""
        symbols = {HIDDEN_VALUE: ".", FLAGGED_VALUE: "F", MINE_VALUE: "*", 0: " "}
        obs = self.get_observation()
        return "\n".join(
            " ".join(symbols.get(int(value), str(value)) for value in row)
            for row in obs
        )

    def reset(self) -> None:
        """Reset board for a new game. A fixed layout is kept."""
        self._init_grid()
        self._game_state = GameState.PLAYING
        self._cells_revealed = 0
