"""
Minesweeper bot agents module.

Provides the agents that choose moves from a board snapshot:
- LogicAgent: Saturation/exhaustion deduction with a random fallback
- RandomAgent: Baseline random reveals
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .logic_agent import LogicAgent, select_moves

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "LogicAgent",
    "select_moves",
]
