"""
Random agent for Minesweeper.

Serves as a baseline by revealing random blank cells.
"""
from typing import List

from ..game.actions import Action
from ..game.board import Board
from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals a uniformly random blank cell every turn.

    This provides a baseline for comparing the logic agent.
    """

    def select_moves(self, board: Board, turn: int) -> List[Action]:
        """
        Select a random reveal.

        Args:
            board: Snapshot of the board.
            turn: Turn number, starting at 1.

        Returns:
            A single Reveal, or nothing if no blank cell is left.
        """
        if turn == 1:
            return self.random_reveal(board.cells)
        return self.random_reveal(board.blank_cells())
