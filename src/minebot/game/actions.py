"""
Actions the bot asks the executor to perform.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from .cell import Position


class ActionKind(Enum):
    """Game operations an action can request."""

    REVEAL = auto()
    FLAG = auto()


@dataclass(frozen=True)
class Reveal:
    """Open the cell at `position`."""

    position: Position

    @property
    def kind(self) -> ActionKind:
        return ActionKind.REVEAL

    def __str__(self) -> str:
        x, y = self.position
        return f"Reveal({x}, {y})"


@dataclass(frozen=True)
class Flag:
    """Mark the cell at `position` as a mine."""

    position: Position

    @property
    def kind(self) -> ActionKind:
        return ActionKind.FLAG

    def __str__(self) -> str:
        x, y = self.position
        return f"Flag({x}, {y})"


Action = Union[Reveal, Flag]
