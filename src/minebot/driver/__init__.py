"""
Driver module for Minesweeper bot runs.

Provides the turn loop that plays a game and the evaluator that plays
many of them.
"""
from .turn_driver import (
    DriverConfig,
    RunOutcome,
    RunResult,
    TurnDriver,
    play_game,
)
from .evaluator import EvaluationStats, Evaluator

__all__ = [
    "DriverConfig",
    "RunOutcome",
    "RunResult",
    "TurnDriver",
    "play_game",
    "EvaluationStats",
    "Evaluator",
]
