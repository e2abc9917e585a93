"""
Base agent interface for the Minesweeper bot.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

import numpy as np

from ..game.actions import Action, Reveal
from ..game.board import Board
from ..game.cell import Cell


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Agents are stateless across turns: everything they know about the
    game comes from the snapshot passed to select_moves. The only thing
    they hold is the random source used for guesses.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the agent.

        Args:
            rng: Random generator used for guesses.
            seed: Seed for a fresh generator when rng is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @abstractmethod
    def select_moves(self, board: Board, turn: int) -> List[Action]:
        """
        Choose the actions to perform this turn.

        Args:
            board: Snapshot of the board.
            turn: Turn number, starting at 1.

        Returns:
            Actions to perform, in order.
        """
        pass

    def random_reveal(self, candidates: Sequence[Cell]) -> List[Action]:
        """Reveal one uniformly chosen candidate, or nothing if none."""
        if not candidates:
            return []
        choice = candidates[int(self.rng.integers(len(candidates)))]
        return [Reveal(choice.position)]
