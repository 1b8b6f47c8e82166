"""Tests for the convergence detector.

Covers the four outcomes of a final-state search (extinction, still life,
cycle, exhaustion) plus the precondition checks.
"""

import pytest
import numpy as np
from gol_engine import find_final_state
from gol_engine.core.board import Board
from gol_engine.core.convergence import BoardState, ConvergenceDetector
from gol_engine.core.patterns import board_from_pattern, create_blinker_pattern, create_block_pattern
from gol_engine.core.transition import ConwayEngine


@pytest.fixture
def detector():
    return ConvergenceDetector(ConwayEngine())


class TestExtinction:
    """Boards that die out."""

    def test_all_dead_board(self, detector):
        """All-dead 3x3 board with a single iteration."""
        board = Board(np.zeros((3, 3), dtype=bool))

        state = detector.find_final_state(board, 1)

        assert state.is_stable is True
        assert state.is_cyclic is False
        assert state.cycle_length == 0
        assert "empty" in state.message
        assert state.board.generation == 1
        assert state.board.is_empty()
        assert state.is_extinct

    def test_single_cell_dies(self, detector):
        """Lone cell is caught as extinction on the first step."""
        board = Board([[False, False, False], [False, True, False], [False, False, False]])

        state = detector.find_final_state(board, 10)

        assert state.is_extinct
        assert state.board.generation == 1

    def test_extinction_keeps_identity(self, detector):
        board = Board(np.zeros((3, 3), dtype=bool), board_id="lineage")

        state = detector.find_final_state(board, 1)

        assert state.board.board_id == "lineage"
        assert state.board.created_at == board.created_at


class TestStillLife:
    """Boards that reach a fixed point."""

    def test_block_is_stable(self, detector):
        """4x4 board holding a 2x2 block."""
        board = board_from_pattern(create_block_pattern(), 4, 4, x=1, y=1)

        state = detector.find_final_state(board, 5)

        assert state.is_stable is True
        assert state.is_cyclic is False
        assert state.cycle_length == 1
        assert state.message == "Board reached stable state"
        # Detected on the second examined generation
        assert state.board.generation == 1

    def test_tromino_settles_into_block(self, detector):
        """L-tromino becomes a block, then repeats."""
        board = Board([
            [False, False, False, False],
            [False, True, True, False],
            [False, True, False, False],
            [False, False, False, False],
        ])

        state = detector.find_final_state(board, 10)

        assert state.is_stable
        assert state.cycle_length == 1
        assert state.board.generation == 2
        assert state.board.count_alive() == 4


class TestOscillator:
    """Boards that cycle."""

    @pytest.mark.parametrize("vertical", [False, True])
    def test_blinker_has_period_two(self, detector, vertical):
        """5x5 board holding a blinker in either phase."""
        pattern = create_blinker_pattern(vertical=vertical)
        x, y = (2, 1) if vertical else (1, 2)
        board = board_from_pattern(pattern, 5, 5, x=x, y=y)

        state = detector.find_final_state(board, 5)

        assert state.is_cyclic is True
        assert state.is_stable is False
        assert state.cycle_length == 2
        assert "2" in state.message
        assert state.message == "Board has a cycle of length 2"
        assert state.converged


class TestExhaustion:
    """Searches that hit the ceiling."""

    def test_ceiling_of_one_without_repeat(self, detector):
        """A changing, surviving board is not resolved in one iteration."""
        board = board_from_pattern(create_blinker_pattern(), 5, 5, x=1, y=2)

        state = detector.find_final_state(board, 1)

        assert state.is_stable is False
        assert state.is_cyclic is False
        assert state.cycle_length == 0
        assert "did not stabilize within 1 iterations" in state.message
        assert not state.converged
        # Last computed generation is returned
        assert state.board.generation == 1

    def test_random_board_ceiling(self, detector):
        """A dense random board does not settle in a single step."""
        rng = np.random.default_rng(2024)
        grid = rng.random((30, 30)) < 0.4
        board = Board(grid)

        state = detector.find_final_state(board, 1)

        assert state.cycle_length == 0
        assert not state.is_stable and not state.is_cyclic
        assert "did not stabilize" in state.message


class TestPreconditions:
    """Contract violations raise instead of producing a BoardState."""

    @pytest.mark.parametrize("max_iterations", [0, -5])
    def test_non_positive_ceiling_raises(self, detector, max_iterations):
        board = Board(np.zeros((3, 3), dtype=bool))
        with pytest.raises(ValueError, match="max_iterations"):
            detector.find_final_state(board, max_iterations)

    def test_input_board_untouched(self, detector):
        board = board_from_pattern(create_blinker_pattern(), 5, 5, x=1, y=2)
        original = board.grid.copy()

        detector.find_final_state(board, 5)

        np.testing.assert_array_equal(board.grid, original)
        assert board.generation == 0


class TestDefaultDetector:
    """Module-level convenience function."""

    def test_find_final_state_function(self):
        board = board_from_pattern(create_block_pattern(), 4, 4, x=1, y=1)

        state = find_final_state(board, 5)

        assert isinstance(state, BoardState)
        assert state.cycle_length == 1
