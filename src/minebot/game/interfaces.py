"""
Collaborator interfaces around the move selector.

A board provider yields a fresh snapshot each turn; an action executor
performs requested reveals and flags against the live game.
"""
from abc import ABC, abstractmethod

from .actions import Action
from .board import Board


class BoardProvider(ABC):
    """Source of board snapshots."""

    @abstractmethod
    def snapshot(self) -> Board:
        """
        Read the current board.

        Raises:
            GameOver: If the game has been lost.
            MalformedSnapshot: If the source cannot be turned into a board.
        """

    @abstractmethod
    def is_solved(self) -> bool:
        """Check if the game has been won."""


class ActionExecutor(ABC):
    """Performs actions against the game."""

    @abstractmethod
    def execute(self, action: Action) -> bool:
        """
        Perform a single action.

        Returns:
            True on success, False if the action could not be carried out.
        """
