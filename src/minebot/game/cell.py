"""
Cell module for Minesweeper snapshots.

Represents individual cells of a board snapshot with their position
and state (blank/flagged/opened/exploded).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import NamedTuple


# ============================================================================
# Constants
# ============================================================================

MAX_COUNT = 8


class StateKind(Enum):
    """Possible visual states of a cell."""

    BLANK = auto()
    FLAGGED = auto()
    OPENED = auto()
    EXPLODED = auto()


class Position(NamedTuple):
    """Column/row index of a cell."""

    x: int
    y: int


# ============================================================================
# Cell State
# ============================================================================

@dataclass(frozen=True)
class CellState:
    """
    State of a single cell as seen on the page.

    Only OPENED carries a count: the number of adjacent mines (0-8).

    Attributes:
        kind: Which variant this state is.
        count: Adjacent mine count for opened cells, 0 otherwise.
    """

    kind: StateKind
    count: int = 0

    def __post_init__(self) -> None:
        """Validate the count against the variant."""
        if self.kind == StateKind.OPENED:
            if not 0 <= self.count <= MAX_COUNT:
                raise ValueError(
                    f"Opened count must be in [0, {MAX_COUNT}], got {self.count}"
                )
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} state cannot carry a count")

    @classmethod
    def opened(cls, count: int) -> "CellState":
        """Create an opened state with the given adjacent mine count."""
        return cls(StateKind.OPENED, count)

    def __str__(self) -> str:
        if self.kind == StateKind.OPENED:
            return f"Opened({self.count})"
        return self.kind.name.capitalize()


BLANK = CellState(StateKind.BLANK)
FLAGGED = CellState(StateKind.FLAGGED)
EXPLODED = CellState(StateKind.EXPLODED)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    A single cell of a board snapshot.

    Attributes:
        position: (x, y) index of the cell.
        state: State of the cell when the snapshot was taken.
    """

    position: Position
    state: CellState = BLANK

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def is_blank(self) -> bool:
        """Check if cell is unopened and unflagged."""
        return self.state.kind == StateKind.BLANK

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state.kind == StateKind.FLAGGED

    @property
    def is_opened(self) -> bool:
        """Check if cell is revealed."""
        return self.state.kind == StateKind.OPENED

    @property
    def is_numbered(self) -> bool:
        """Check if cell is revealed with at least one adjacent mine."""
        return self.is_opened and self.state.count > 0

    @property
    def is_unresolved(self) -> bool:
        """Check if cell is still closed (blank or flagged)."""
        return self.is_blank or self.is_flagged

    @property
    def is_exploded(self) -> bool:
        """Check if cell is a revealed mine."""
        return self.state.kind == StateKind.EXPLODED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Blank cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Exploded cell (game over state)
        """
        if self.is_blank:
            return -1
        if self.is_flagged:
            return -2
        if self.is_exploded:
            return 9
        return self.state.count
