"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Sequence

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minebot.game import (
    BLANK,
    EXPLODED,
    FLAGGED,
    Board,
    BoardConfig,
    Cell,
    CellState,
    Minefield,
    Position,
)


def board_from_rows(rows: Sequence[str]) -> Board:
    """
    Build a board from one string per row.

    '.' = blank, 'F' = flagged, '0'-'8' = opened, '*' = exploded.
    Cells are ordered row by row, left to right.
    """
    symbols = {".": BLANK, "F": FLAGGED, "*": EXPLODED}
    cells = []
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            if symbol.isdigit():
                state = CellState.opened(int(symbol))
            else:
                state = symbols[symbol]
            cells.append(Cell(Position(x, y), state))
    return Board(tuple(cells))


# ============================================================================
# Snapshot Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[Sequence[str]], Board]:
    """Builder for boards written as rows of symbols."""
    return board_from_rows


@pytest.fixture
def blank_board() -> Board:
    """Create an all-blank 3x3 snapshot."""
    return board_from_rows(["...", "...", "..."])


@pytest.fixture
def scenario_board() -> Board:
    """3x3 snapshot with a 3 in the middle and nothing deducible."""
    return board_from_rows(["F..", ".3.", "..0"])


# ============================================================================
# Minefield Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Minefield:
    """Create a default 9x9 field with 10 mines."""
    return Minefield(seed=0)


@pytest.fixture
def small_field() -> Minefield:
    """Create a small 3x3 field with 1 mine for testing."""
    return Minefield(BoardConfig(3, 3, 1), seed=0)


@pytest.fixture
def empty_field() -> Minefield:
    """Create a field with no mines for cascade testing."""
    return Minefield(BoardConfig(5, 5, 0), seed=0)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
