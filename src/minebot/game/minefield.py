"""
Simulated Minesweeper game.

Implements the hidden mine field with mine placement, square revealing
and game state management. It exposes the page-style square records a
live game would show, so the bot can play offline against it.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional

import numpy as np

from .actions import Action, ActionKind
from .board import Board
from .cell import BLANK, EXPLODED, FLAGGED, CellState, Position
from .interfaces import ActionExecutor, BoardProvider
from .parsing import SquareRecord, label_for_state, parse_board


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# Share of cells mined when only a board size is given (beginner density)
DEFAULT_MINE_DENSITY = 0.12


class SquareState(Enum):
    """Visual state of a hidden-field square."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


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
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @classmethod
    def square(cls, size: int, num_mines: Optional[int] = None) -> "BoardConfig":
        """
        Create a size x size board.

        Args:
            size: Number of rows and columns.
            num_mines: Mines to place. None uses DEFAULT_MINE_DENSITY;
                0 is an explicit mine-free board.
        """
        if num_mines is None:
            num_mines = int(size * size * DEFAULT_MINE_DENSITY)
        return cls(width=size, height=size, num_mines=num_mines)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


@dataclass
class Square:
    """
    A single square of the hidden field.

    Attributes:
        is_mine: Whether this square contains a mine.
        adjacent_mines: Count of mines in neighboring squares (0-8).
        state: Current visual state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: SquareState = SquareState.HIDDEN

    def to_cell_state(self) -> CellState:
        """What the page shows for this square."""
        if self.state == SquareState.HIDDEN:
            return BLANK
        if self.state == SquareState.FLAGGED:
            return FLAGGED
        if self.is_mine:
            return EXPLODED
        return CellState.opened(self.adjacent_mines)


# ============================================================================
# Minefield Class
# ============================================================================

@dataclass
class Minefield(BoardProvider, ActionExecutor):
    """
    Simulated game acting as both board provider and action executor.

    Mines are placed on the first reveal so the first square opened is
    always safe.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    seed: Optional[int] = None
    _grid: List[List[Square]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _first_click: bool = True
    _cells_revealed: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.rng is None:
            self.rng = np.random.default_rng(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of squares, indexed [y][x]."""
        self._grid = [
            [Square() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self, exclude: Position) -> None:
        """
        Place mines randomly, excluding a specific square.

        Args:
            exclude: Position to keep mine-free.
        """
        positions = [
            Position(x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if Position(x, y) != exclude
        ]
        chosen = self.rng.choice(
            len(positions), size=self.config.num_mines, replace=False
        )
        for index in chosen:
            x, y = positions[index]
            self._grid[y][x].is_mine = True

    def place_mines(self, positions: Iterable[Position]) -> None:
        """
        Use a fixed mine layout instead of placing mines on first reveal.

        Args:
            positions: Exactly config.num_mines distinct positions.
        """
        mines = {Position(*position) for position in positions}
        if len(mines) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(mines)}"
            )
        if any(not self._is_valid_position(x, y) for x, y in mines):
            raise ValueError("Mine position outside the board")

        self.reset()
        for x, y in mines:
            self._grid[y][x].is_mine = True
        self._first_click = False
        self._calculate_adjacent_mines()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all squares."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                square = self._grid[y][x]
                if not square.is_mine:
                    square.adjacent_mines = sum(
                        1 for nx, ny in self._get_neighbors(x, y)
                        if self._grid[ny][nx].is_mine
                    )

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """Get valid neighboring positions."""
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                if self._is_valid_position(x + delta_x, y + delta_y):
                    neighbors.append(Position(x + delta_x, y + delta_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def execute(self, action: Action) -> bool:
        """
        Perform a reveal or flag request.

        Repeating an action that already took effect is a no-op that
        still reports success.

        Args:
            action: Action to perform.

        Returns:
            True if the game is in the requested state afterwards,
            False if the action could not be carried out.
        """
        x, y = action.position
        if not self._is_valid_position(x, y):
            return False
        if self._game_state == GameState.LOST:
            return False
        if self._game_state == GameState.WON:
            return True

        square = self._grid[y][x]
        if action.kind == ActionKind.FLAG:
            if square.state == SquareState.REVEALED:
                return False
            square.state = SquareState.FLAGGED
            return True

        if square.state == SquareState.FLAGGED:
            return False
        if square.state == SquareState.REVEALED:
            return True
        if self._first_click:
            self._handle_first_click(Position(x, y))
        self._reveal_square(x, y)
        return True

    def _handle_first_click(self, position: Position) -> None:
        """Handle first click: place mines and calculate counts."""
        self._first_click = False
        self._place_mines(position)
        self._calculate_adjacent_mines()

    def _reveal_square(self, x: int, y: int) -> None:
        """Reveal squares starting at (x, y), cascading through zeros."""
        pending = [Position(x, y)]
        while pending:
            x, y = pending.pop()
            square = self._grid[y][x]
            if square.state != SquareState.HIDDEN:
                continue
            square.state = SquareState.REVEALED
            self._cells_revealed += 1

            if square.is_mine:
                self._game_state = GameState.LOST
                return

            if square.adjacent_mines == 0:
                pending.extend(self._get_neighbors(x, y))

        self._check_win_condition()

    def _check_win_condition(self) -> None:
        """Check if all non-mine squares are revealed."""
        total_cells = self.config.width * self.config.height
        non_mine_cells = total_cells - self.config.num_mines
        if self._cells_revealed >= non_mine_cells:
            self._game_state = GameState.WON

    # ========================================================================
    # Board Provider (High-level)
    # ========================================================================

    def squares(self) -> Iterator[SquareRecord]:
        """Yield (element_id, class_name) records in row-major order."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                state = self._grid[y][x].to_cell_state()
                yield f"{x}_{y}", label_for_state(state)

    def snapshot(self) -> Board:
        """
        Read the current board the way a page parser would.

        Raises:
            GameOver: If a mine has been revealed.
        """
        return parse_board(self.squares())

    def is_solved(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def revealed_count(self) -> int:
        """Number of squares revealed so far."""
        return self._cells_revealed

    def get_square(self, position: Position) -> Optional[Square]:
        """Get square at position, or None if invalid."""
        x, y = position
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def reset(self) -> None:
        """Reset field to initial state for new game."""
        self._init_grid()
        self._game_state = GameState.PLAYING
        self._first_click = True
        self._cells_revealed = 0
