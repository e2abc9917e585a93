"""
Logic-based agent for Minesweeper.

Deduces flags and reveals from direct neighbor counting on a single
snapshot, and guesses only when nothing can be deduced.
"""
from typing import List, Optional

import numpy as np

from ..game.actions import Action, Flag, Reveal
from ..game.board import Board, count_by_state
from ..game.cell import Cell
from ..game.errors import InvariantViolation
from .base_agent import BaseAgent


# ============================================================================
# Logic Agent
# ============================================================================

class LogicAgent(BaseAgent):
    """
    Agent that flags saturated cells and reveals exhausted ones.

    Strategy:
        1. Turn 1: reveal a random cell; the board is still all blank
        2. Saturation: a numbered cell with exactly as many closed
           neighbors as its count has a mine under every blank neighbor
        3. Exhaustion: a numbered cell whose count is covered by flags
           has only safe blank neighbors
        4. If neither pass produced anything, reveal a random blank cell

    Both passes read the same snapshot. Flags deduced in step 2 are not
    visible to step 3 until the next turn's snapshot.
    """

    def select_moves(self, board: Board, turn: int) -> List[Action]:
        """
        Select this turn's actions.

        Args:
            board: Snapshot of the board.
            turn: Turn number, starting at 1.

        Returns:
            Flags first, then reveals, or a single random reveal.

        Raises:
            InvariantViolation: If a numbered cell has fewer blank or
                flagged neighbors than its count.
        """
        if turn == 1:
            return self.random_reveal(board.cells)

        actions: List[Action] = []
        actions.extend(self._saturation_pass(board))
        actions.extend(self._exhaustion_pass(board))

        if not actions:
            return self.random_reveal(board.blank_cells())
        return actions

    def _saturation_pass(self, board: Board) -> List[Flag]:
        """Flag blank neighbors of cells whose closed neighbors are all mines."""
        flags: List[Flag] = []

        for cell in _numbered_cells(board):
            count = cell.state.count
            unresolved = [n for n in board.neighbors(cell.position) if n.is_unresolved]

            if count > len(unresolved):
                raise InvariantViolation(cell.position, count, len(unresolved))
            if count != len(unresolved):
                continue

            flags.extend(Flag(n.position) for n in unresolved if n.is_blank)

        return flags

    def _exhaustion_pass(self, board: Board) -> List[Reveal]:
        """Reveal blank neighbors of cells whose mines are all flagged."""
        reveals: List[Reveal] = []

        for cell in _numbered_cells(board):
            neighbors = board.neighbors(cell.position)
            flagged_count = count_by_state(neighbors, lambda n: n.is_flagged)
            blank_neighbors = [n for n in neighbors if n.is_blank]

            # Every mine around the cell is already flagged
            if not blank_neighbors or cell.state.count - flagged_count != 0:
                continue

            reveals.extend(Reveal(n.position) for n in blank_neighbors)

        return reveals


def _numbered_cells(board: Board) -> List[Cell]:
    return [cell for cell in board if cell.is_numbered]


def select_moves(
    board: Board,
    turn: int,
    rng: Optional[np.random.Generator] = None,
) -> List[Action]:
    """
    Select this turn's actions with a throwaway LogicAgent.

    Args:
        board: Snapshot of the board.
        turn: Turn number, starting at 1.
        rng: Random generator for the turn-1 and fallback guesses.

    Returns:
        Ordered list of actions.
    """
    return LogicAgent(rng=rng).select_moves(board, turn)
