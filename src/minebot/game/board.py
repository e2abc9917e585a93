"""
Board module for Minesweeper snapshots.

A Board is an immutable snapshot of every cell on the page at one
instant. It is rebuilt from scratch each turn and never mutated.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, Position
from .errors import GameOver


CellPredicate = Callable[[Cell], bool]


def count_by_state(cells: Iterable[Cell], predicate: CellPredicate) -> int:
    """Count the cells matching `predicate`."""
    return sum(1 for cell in cells if predicate(cell))


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Ordered, immutable collection of cells with unique positions.

    Iteration follows the order the cells were supplied in, which is
    the order the deduction passes visit them.
    """

    cells: Tuple[Cell, ...] = ()
    _index: Dict[Position, Cell] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Normalize cells to a tuple and build the position index."""
        object.__setattr__(self, "cells", tuple(self.cells))
        object.__setattr__(
            self, "_index", {cell.position: cell for cell in self.cells}
        )

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Board":
        """
        Build a snapshot, rejecting lost games.

        Raises:
            GameOver: If any cell is exploded.
        """
        cells = tuple(cells)
        for cell in cells:
            if cell.is_exploded:
                raise GameOver(cell.position)
        return cls(cells)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, position: Position) -> List[Cell]:
        """
        Get the cells adjacent to a position.

        Scans the 3x3 window row by row, skipping the center and any
        position not on the board.

        Args:
            position: Center of the window.

        Returns:
            Up to 8 neighboring cells.
        """
        x, y = position
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                cell = self._index.get(Position(x + delta_x, y + delta_y))
                if cell is not None:
                    neighbors.append(cell)
        return neighbors

    def count(self, predicate: CellPredicate) -> int:
        """Count cells on the board matching `predicate`."""
        return count_by_state(self.cells, predicate)

    # ========================================================================
    # State Accessors
    # ========================================================================

    def __iter__(self):
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, position: object) -> bool:
        return position in self._index

    def get_cell(self, position: Position) -> Optional[Cell]:
        """Get cell at position, or None if not on the board."""
        return self._index.get(Position(*position))

    @property
    def width(self) -> int:
        """Number of columns spanned by the board."""
        if not self.cells:
            return 0
        return max(cell.x for cell in self.cells) + 1

    @property
    def height(self) -> int:
        """Number of rows spanned by the board."""
        if not self.cells:
            return 0
        return max(cell.y for cell in self.cells) + 1

    def blank_cells(self) -> List[Cell]:
        """Get all blank cells, in board order."""
        return [cell for cell in self.cells if cell.is_blank]

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D array where:
                -1 = blank (or no cell at that position)
                -2 = flagged
                0-8 = opened with adjacent count
                9 = exploded
        """
        obs = np.full((self.height, self.width), -1, dtype=np.int8)
        for cell in self.cells:
            obs[cell.y, cell.x] = cell.to_observation()
        return obs

    def render(self) -> str:
        """Render board as ASCII string."""
        lines = []
        obs = self.to_observation()

        for row in obs:
            row_str = ""
            for val in row:
                if val == -1:
                    row_str += "."
                elif val == -2:
                    row_str += "F"
                elif val == 9:
                    row_str += "*"
                elif val == 0:
                    row_str += " "
                else:
                    row_str += str(val)
                row_str += " "
            lines.append(row_str.rstrip())

        return "\n".join(lines)


def neighbors(board: Board, position: Position) -> List[Cell]:
    """Get the cells adjacent to `position` on `board`."""
    return board.neighbors(Position(*position))
