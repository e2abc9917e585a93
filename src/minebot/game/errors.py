"""
Errors raised while reading boards, choosing moves and playing them.
"""
from typing import TYPE_CHECKING

from .cell import Position

if TYPE_CHECKING:
    from .actions import Action


class MinebotError(Exception):
    """Base class for all bot errors."""


class GameOver(MinebotError):
    """An exploded cell was observed: the game has been lost."""

    def __init__(self, position: Position) -> None:
        super().__init__(f"Game lost: mine exploded at {tuple(position)}")
        self.position = position


class InvariantViolation(MinebotError):
    """
    A numbered cell has fewer closed neighbors than its mine count.

    Either the snapshot is inconsistent or an earlier flag was wrong.
    """

    def __init__(self, position: Position, count: int, unresolved: int) -> None:
        super().__init__(
            f"Cell {tuple(position)} shows {count} adjacent mines but only "
            f"{unresolved} neighbors are blank or flagged"
        )
        self.position = position
        self.count = count
        self.unresolved = unresolved


class MalformedSnapshot(MinebotError):
    """The board source produced data that cannot form a valid board."""


class ActionFailed(MinebotError):
    """The executor could not carry out an action."""

    def __init__(self, action: "Action") -> None:
        super().__init__(f"Executor failed to perform {action}")
        self.action = action
