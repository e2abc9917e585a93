"""
Evaluation module for Minesweeper agents.

Plays many simulated games per agent and reports win rates.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import json

import numpy as np

from ..agents.base_agent import BaseAgent
from ..game.minefield import BoardConfig, Minefield
from .turn_driver import DriverConfig, RunOutcome, RunResult, TurnDriver


# ============================================================================
# Evaluation Statistics
# ============================================================================

@dataclass
class EvaluationStats:
    """Accumulated statistics over evaluated games."""

    games_played: int = 0
    wins: int = 0
    losses: int = 0
    stalls: int = 0
    total_turns: int = 0
    total_actions: int = 0
    total_revealed: int = 0
    win_history: List[bool] = field(default_factory=list)

    def record(self, result: RunResult, revealed: int) -> None:
        """Add one finished game."""
        self.games_played += 1
        self.total_turns += result.turns
        self.total_actions += result.actions_taken
        self.total_revealed += revealed
        self.win_history.append(result.won)

        if result.outcome == RunOutcome.WON:
            self.wins += 1
        elif result.outcome == RunOutcome.LOST:
            self.losses += 1
        elif result.outcome == RunOutcome.STALLED:
            self.stalls += 1

    def _rate(self, value: float) -> float:
        if self.games_played == 0:
            return 0.0
        return value / self.games_played

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for reporting and serialization."""
        return {
            "win_rate": self._rate(self.wins),
            "loss_rate": self._rate(self.losses),
            "stall_rate": self._rate(self.stalls),
            "avg_turns": self._rate(self.total_turns),
            "avg_actions": self._rate(self.total_actions),
            "avg_revealed": self._rate(self.total_revealed),
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Every agent plays the same sequence of mine layouts when a seed is
    given, so comparisons are fair.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_games: int = 100,
        max_turns: int = 500,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_games: Number of games per agent.
            max_turns: Maximum turns per game.
            seed: Seed for the mine layouts.
        """
        self.board_config = board_config or BoardConfig()
        self.num_games = num_games
        self.max_turns = max_turns
        self.seed = seed

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        stats = EvaluationStats()
        field_rng = np.random.default_rng(self.seed)
        config = DriverConfig(max_turns=self.max_turns)

        for _ in range(self.num_games):
            minefield = Minefield(self.board_config, rng=field_rng)
            result = TurnDriver(minefield, minefield, agent, config).run()
            stats.record(result, minefield.revealed_count)

        return stats.to_dict()

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results

    def save_results(self, results: Dict[str, Any], path: str) -> None:
        """Save evaluation results to JSON."""
        results_file = Path(path)
        results_file.parent.mkdir(parents=True, exist_ok=True)
        with open(results_file, "w") as f:
            json.dump(results, f, indent=2)
