"""
Turn driver for the Minesweeper bot.

Runs the provider -> agent -> executor loop, one turn at a time, with
optional per-turn board dumps.
"""
import signal
import threading
from dataclasses import dataclass
from enum import Enum, auto
from itertools import count
from pathlib import Path
from typing import Optional

from ..agents.base_agent import BaseAgent
from ..game.board import Board
from ..game.errors import ActionFailed, GameOver, MinebotError
from ..game.interfaces import ActionExecutor, BoardProvider


# ============================================================================
# Driver Configuration
# ============================================================================

@dataclass
class DriverConfig:
    """Configuration for a single game run."""

    # Stop after this many turns (None = until the game ends)
    max_turns: Optional[int] = None

    # Logging
    verbose: bool = False

    # Directory for turnNNN.txt / fail.txt board dumps
    output_dir: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_turns is not None and self.max_turns < 1:
            raise ValueError("max_turns must be at least 1")


class RunOutcome(Enum):
    """How a run ended."""

    WON = auto()
    LOST = auto()
    STALLED = auto()
    MAX_TURNS = auto()


@dataclass
class RunResult:
    """Summary of a single game run."""

    outcome: Optional[RunOutcome] = None
    turns: int = 0
    actions_taken: int = 0
    last_board: Optional[Board] = None

    @property
    def won(self) -> bool:
        return self.outcome == RunOutcome.WON


# ============================================================================
# Turn Driver
# ============================================================================

class TurnDriver:
    """
    Plays one game by alternating snapshots, move selection and actions.

    Each turn reads a fresh snapshot, asks the agent for actions and
    submits them to the executor strictly one after another. Nothing is
    retried: a failed action aborts the run.
    """

    def __init__(
        self,
        provider: BoardProvider,
        executor: ActionExecutor,
        agent: BaseAgent,
        config: Optional[DriverConfig] = None,
    ) -> None:
        """
        Initialize the driver.

        Args:
            provider: Source of board snapshots.
            executor: Performs the agent's actions.
            agent: Chooses actions from each snapshot.
            config: Run configuration.
        """
        self.provider = provider
        self.executor = executor
        self.agent = agent
        self.config = config or DriverConfig()

        self.output_path: Optional[Path] = None
        if self.config.output_dir is not None:
            self.output_path = Path(self.config.output_dir)
            self.output_path.mkdir(parents=True, exist_ok=True)

    def run(self) -> RunResult:
        """
        Play until the game is won, lost, stalls or hits max_turns.

        Returns:
            Summary of the run.

        Raises:
            InvariantViolation: If the agent finds an inconsistent board.
            ActionFailed: If the executor rejects an action.
            MalformedSnapshot: If the provider cannot build a board.
            KeyboardInterrupt: On Ctrl-C, or SIGTERM in the main thread.
        """
        result = RunResult()
        handle_sigterm = threading.current_thread() is threading.main_thread()
        if handle_sigterm:
            previous_handler = signal.signal(signal.SIGTERM, _interrupt_on_sigterm)
        try:
            self._play(result)
        except (MinebotError, KeyboardInterrupt):
            self._log("Run aborted, writing last board as fail.txt")
            self._write_failure(result.last_board)
            raise
        finally:
            if handle_sigterm:
                signal.signal(signal.SIGTERM, previous_handler or signal.SIG_DFL)
        self._log(f"Run finished: {result.outcome.name} after {result.turns} turns")
        return result

    def _play(self, result: RunResult) -> None:
        """Turn loop; records the outcome on `result`."""
        for turn in count(1):
            if self.config.max_turns is not None and turn > self.config.max_turns:
                result.outcome = RunOutcome.MAX_TURNS
                return

            if self.provider.is_solved():
                result.outcome = RunOutcome.WON
                return

            self._log(f"Starting turn {turn}")
            try:
                board = self.provider.snapshot()
            except GameOver as error:
                self._log(f"  {error}")
                self._write_failure(result.last_board)
                result.outcome = RunOutcome.LOST
                return

            result.last_board = board
            result.turns = turn
            if turn > 1:
                self._write_turn(turn, board)

            actions = self.agent.select_moves(board, turn)
            if not actions:
                self._log("  No actions available")
                result.outcome = RunOutcome.STALLED
                return

            for action in actions:
                if self.config.verbose:
                    self._log(f"  {action}")
                if not self.executor.execute(action):
                    raise ActionFailed(action)
                result.actions_taken += 1

    # ========================================================================
    # Output
    # ========================================================================

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def _write_turn(self, turn: int, board: Board) -> None:
        """Write the board seen at the start of a turn."""
        if self.output_path is None:
            return
        turn_file = self.output_path / f"turn{turn:03d}.txt"
        turn_file.write_text(board.render() + "\n")
        self._log(f"  wrote {turn_file}")

    def _write_failure(self, board: Optional[Board]) -> None:
        """Write the last evaluated board as fail.txt."""
        if self.output_path is None or board is None:
            return
        (self.output_path / "fail.txt").write_text(board.render() + "\n")


def _interrupt_on_sigterm(signum, frame) -> None:
    raise KeyboardInterrupt(f"received signal {signum}")


def play_game(
    provider: BoardProvider,
    executor: ActionExecutor,
    agent: BaseAgent,
    config: Optional[DriverConfig] = None,
) -> RunResult:
    """Run a single game with a fresh driver."""
    return TurnDriver(provider, executor, agent, config).run()
