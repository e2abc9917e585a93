"""
Minesweeper game module.

Provides board snapshots, cell states, actions, snapshot parsing and a
simulated game to play against offline.
"""
from .cell import BLANK, EXPLODED, FLAGGED, Cell, CellState, Position, StateKind
from .board import Board, count_by_state, neighbors
from .actions import Action, ActionKind, Flag, Reveal
from .errors import (
    ActionFailed,
    GameOver,
    InvariantViolation,
    MalformedSnapshot,
    MinebotError,
)
from .parsing import parse_board, parse_position, state_from_label
from .interfaces import ActionExecutor, BoardProvider
from .minefield import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    PRESETS,
    BoardConfig,
    GameState,
    Minefield,
)

__all__ = [
    "BLANK",
    "EXPLODED",
    "FLAGGED",
    "Cell",
    "CellState",
    "Position",
    "StateKind",
    "Board",
    "count_by_state",
    "neighbors",
    "Action",
    "ActionKind",
    "Flag",
    "Reveal",
    "ActionFailed",
    "GameOver",
    "InvariantViolation",
    "MalformedSnapshot",
    "MinebotError",
    "parse_board",
    "parse_position",
    "state_from_label",
    "ActionExecutor",
    "BoardProvider",
    "BEGINNER",
    "EXPERT",
    "INTERMEDIATE",
    "PRESETS",
    "BoardConfig",
    "GameState",
    "Minefield",
]
