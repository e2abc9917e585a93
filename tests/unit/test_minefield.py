"""
Unit tests for the simulated Minefield.

Tests configuration validation, first-click safety, cascades, flags,
win/lose conditions and the page-style snapshot it provides.
"""
import pytest
from minebot.game import (
    BoardConfig,
    CellState,
    Flag,
    GameOver,
    GameState,
    Minefield,
    Position,
    Reveal,
)
from minebot.game.minefield import DEFAULT_MINE_DENSITY


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.width == 9
        assert valid_config.height == 9
        assert valid_config.num_mines == 10

    def test_zero_width_raises_error(self) -> None:
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_zero_height_raises_error(self) -> None:
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_too_many_mines_raises_error(self) -> None:
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 3, 10)  # Max is 8 (9 cells - 1)

    def test_max_mines_is_valid(self) -> None:
        config = BoardConfig(3, 3, 8)
        assert config.num_mines == 8

    def test_square_uses_default_density(self) -> None:
        config = BoardConfig.square(10)
        assert (config.width, config.height) == (10, 10)
        assert config.num_mines == int(100 * DEFAULT_MINE_DENSITY)

    def test_square_keeps_explicit_zero_mines(self) -> None:
        """0 means a mine-free board, not the default density."""
        config = BoardConfig.square(9, 0)
        assert config.num_mines == 0

    def test_square_validates_mine_count(self) -> None:
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig.square(3, 9)


# ============================================================================
# First Click Tests
# ============================================================================

class TestFirstClick:
    """Test first click behavior."""

    def test_mines_not_placed_before_first_click(
        self, default_field: Minefield
    ) -> None:
        mines = sum(
            default_field.get_square(Position(x, y)).is_mine
            for y in range(9) for x in range(9)
        )
        assert mines == 0

    def test_first_click_places_mines(self, default_field: Minefield) -> None:
        default_field.execute(Reveal(Position(0, 0)))
        mines = sum(
            default_field.get_square(Position(x, y)).is_mine
            for y in range(9) for x in range(9)
        )
        assert mines == default_field.config.num_mines

    @pytest.mark.parametrize("seed", range(20))
    def test_first_click_never_hits_mine(self, seed: int) -> None:
        minefield = Minefield(BoardConfig(4, 4, 15), seed=seed)
        minefield.execute(Reveal(Position(1, 2)))
        assert minefield.game_state != GameState.LOST
        assert minefield.get_square(Position(1, 2)).is_mine is False

    def test_same_seed_same_layout(self) -> None:
        first = Minefield(seed=5)
        second = Minefield(seed=5)
        first.execute(Reveal(Position(4, 4)))
        second.execute(Reveal(Position(4, 4)))
        assert list(first.squares()) == list(second.squares())


# ============================================================================
# Reveal Tests
# ============================================================================

class TestReveal:
    """Test reveal requests."""

    def test_cascade_reveals_whole_empty_field(
        self, empty_field: Minefield
    ) -> None:
        """Revealing empty square should cascade to every square."""
        assert empty_field.execute(Reveal(Position(2, 2))) is True
        assert empty_field.revealed_count == 25

    def test_cascade_stops_at_numbered_squares(self) -> None:
        minefield = Minefield(BoardConfig(4, 1, 1))
        minefield.place_mines([Position(3, 0)])
        minefield.execute(Reveal(Position(0, 0)))
        board = minefield.snapshot()
        assert board.get_cell(Position(2, 0)).state == CellState.opened(1)
        assert board.get_cell(Position(3, 0)).is_blank is True

    def test_reveal_revealed_square_is_noop_success(self) -> None:
        minefield = Minefield(BoardConfig(3, 1, 1))
        minefield.place_mines([Position(2, 0)])
        minefield.execute(Reveal(Position(1, 0)))
        assert minefield.execute(Reveal(Position(1, 0))) is True
        assert minefield.revealed_count == 1

    def test_reveal_flagged_square_fails(self, default_field: Minefield) -> None:
        default_field.execute(Flag(Position(0, 0)))
        assert default_field.execute(Reveal(Position(0, 0))) is False

    def test_reveal_out_of_bounds_fails(self, default_field: Minefield) -> None:
        assert default_field.execute(Reveal(Position(-1, 0))) is False
        assert default_field.execute(Reveal(Position(0, 100))) is False


# ============================================================================
# Flag Tests
# ============================================================================

class TestFlag:
    """Test flag requests."""

    def test_flag_hidden_square_succeeds(self, default_field: Minefield) -> None:
        assert default_field.execute(Flag(Position(0, 0))) is True
        assert default_field.snapshot().get_cell(Position(0, 0)).is_flagged

    def test_flag_is_idempotent(self, default_field: Minefield) -> None:
        """Flagging twice leaves the square flagged."""
        default_field.execute(Flag(Position(0, 0)))
        assert default_field.execute(Flag(Position(0, 0))) is True
        assert default_field.snapshot().get_cell(Position(0, 0)).is_flagged

    def test_flag_revealed_square_fails(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 2))
        minefield.place_mines([Position(0, 2), Position(2, 2)])
        minefield.execute(Reveal(Position(0, 0)))
        assert minefield.game_state == GameState.PLAYING
        assert minefield.execute(Flag(Position(0, 0))) is False


# ============================================================================
# Win/Lose Condition Tests
# ============================================================================

class TestGameEndConditions:
    """Test win and lose conditions."""

    def test_reveal_mine_loses_game(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(2, 2)])
        minefield.execute(Reveal(Position(2, 2)))
        assert minefield.game_state == GameState.LOST

    def test_snapshot_after_loss_raises_game_over(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(2, 2)])
        minefield.execute(Reveal(Position(2, 2)))
        with pytest.raises(GameOver):
            minefield.snapshot()

    def test_actions_fail_after_loss(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(2, 2)])
        minefield.execute(Reveal(Position(2, 2)))
        assert minefield.execute(Reveal(Position(0, 0))) is False

    def test_reveal_all_safe_squares_wins(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(2, 2)])
        minefield.execute(Reveal(Position(0, 0)))
        assert minefield.is_solved() is True
        assert minefield.game_state == GameState.WON

    def test_actions_are_noops_after_win(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(2, 2)])
        minefield.execute(Reveal(Position(0, 0)))
        assert minefield.execute(Flag(Position(2, 2))) is True
        assert minefield.snapshot().get_cell(Position(2, 2)).is_blank


# ============================================================================
# Snapshot Tests
# ============================================================================

class TestSnapshot:
    """Test page-style records and parsed snapshots."""

    def test_new_field_squares_are_blank(self, small_field: Minefield) -> None:
        squares = list(small_field.squares())
        assert len(squares) == 9
        assert all(label == "square blank" for _, label in squares)

    def test_square_ids_are_row_major(self, small_field: Minefield) -> None:
        ids = [element_id for element_id, _ in small_field.squares()]
        assert ids[:4] == ["0_0", "1_0", "2_0", "0_1"]

    def test_snapshot_reflects_counts(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        minefield.place_mines([Position(1, 1)])
        minefield.execute(Reveal(Position(0, 0)))
        board = minefield.snapshot()
        assert board.get_cell(Position(0, 0)).state == CellState.opened(1)
        assert board.get_cell(Position(1, 0)).is_blank is True


# ============================================================================
# Fixed Layout and Reset Tests
# ============================================================================

class TestLayoutAndReset:
    """Test fixed layouts and reset."""

    def test_place_mines_requires_configured_count(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 2))
        with pytest.raises(ValueError, match="Expected 2 mines"):
            minefield.place_mines([Position(0, 0)])

    def test_place_mines_rejects_outside_positions(self) -> None:
        minefield = Minefield(BoardConfig(3, 3, 1))
        with pytest.raises(ValueError, match="outside"):
            minefield.place_mines([Position(5, 5)])

    def test_reset_restores_playing_state(self, empty_field: Minefield) -> None:
        empty_field.execute(Reveal(Position(0, 0)))
        empty_field.reset()
        assert empty_field.game_state == GameState.PLAYING
        assert empty_field.revealed_count == 0
        assert empty_field.snapshot().count(lambda cell: cell.is_blank) == 25
