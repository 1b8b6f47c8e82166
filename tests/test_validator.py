"""Tests for the board validator."""

import pytest
import numpy as np
from gol_engine.config import GameSettings
from gol_engine.validation import BoardValidator


class TestGridValidation:
    """Grid shape and size checks."""

    def setup_method(self):
        self.validator = BoardValidator(min_board_size=3, max_board_size=10, max_iterations=100)

    def test_valid_grid(self):
        grid = [[False] * 4 for _ in range(3)]
        assert self.validator.validate_grid(grid) == (True, "")

    def test_valid_numpy_grid(self):
        assert self.validator.validate_grid(np.zeros((5, 5), dtype=bool)) == (True, "")

    def test_ragged_grid_rejected(self):
        grid = [[True, False, True], [True, False], [True, True, True]]

        is_valid, error = self.validator.validate_grid(grid)

        assert is_valid is False
        assert error == "All rows must have the same number of columns"

    def test_null_grid_rejected(self):
        is_valid, error = self.validator.validate_grid(None)
        assert not is_valid
        assert "null" in error

    @pytest.mark.parametrize("grid", [[], [[True, True, True], []], [None]])
    def test_empty_rows_rejected(self, grid):
        is_valid, error = self.validator.validate_grid(grid)
        assert not is_valid
        assert "empty rows" in error

    def test_non_2d_array_rejected(self):
        is_valid, error = self.validator.validate_grid(np.zeros((3, 3, 3), dtype=bool))
        assert not is_valid
        assert "two-dimensional" in error

    @pytest.mark.parametrize("shape", [(2, 5), (5, 2), (2, 2)])
    def test_below_minimum_names_bound(self, shape):
        is_valid, error = self.validator.validate_grid(np.zeros(shape, dtype=bool))

        assert not is_valid
        assert error == "Board dimensions must be at least 3x3"

    @pytest.mark.parametrize("shape", [(11, 5), (5, 11)])
    def test_above_maximum_names_bound(self, shape):
        is_valid, error = self.validator.validate_grid(np.zeros(shape, dtype=bool))

        assert not is_valid
        assert error == "Board dimensions cannot exceed 10x10"

    def test_boundaries_inclusive(self):
        assert self.validator.validate_grid(np.zeros((3, 10), dtype=bool))[0]
        assert self.validator.validate_grid(np.zeros((10, 3), dtype=bool))[0]

    def test_nested_cells_rejected(self):
        """Rows of the right length whose cells are lists are not a 2D grid."""
        grid = [[[True], [False], [True]]] * 3

        assert self.validator.validate_grid(grid) == (False, "Board grid must be two-dimensional")

    def test_does_not_raise_on_garbage(self):
        is_valid, _ = self.validator.validate_grid(42)
        assert not is_valid


class TestDimensionValidation:
    """Requested random-board sizes."""

    def setup_method(self):
        self.validator = BoardValidator(min_board_size=3, max_board_size=10)

    def test_valid_dimensions(self):
        assert self.validator.validate_dimensions(3, 10) == (True, "")

    def test_invalid_dimensions(self):
        assert not self.validator.validate_dimensions(0, 5)[0]
        assert not self.validator.validate_dimensions(5, 11)[0]

    def test_non_integer_dimensions(self):
        assert not self.validator.validate_dimensions(3.5, 5)[0]
        assert not self.validator.validate_dimensions(True, 5)[0]


class TestIterationValidation:
    """Iteration-count checks."""

    def setup_method(self):
        self.validator = BoardValidator(max_iterations=100)

    @pytest.mark.parametrize("iterations", [1, 50, 100])
    def test_valid_counts(self, iterations):
        assert self.validator.validate_iteration_count(iterations) == (True, "")

    @pytest.mark.parametrize("iterations", [0, -1])
    def test_below_one(self, iterations):
        is_valid, error = self.validator.validate_iteration_count(iterations)
        assert not is_valid
        assert error == "Number of iterations must be at least 1"

    def test_above_max(self):
        is_valid, error = self.validator.validate_iteration_count(101)
        assert not is_valid
        assert error == "Number of iterations cannot exceed 100"

    def test_non_integer(self):
        assert not self.validator.validate_iteration_count("10")[0]

    def test_explicit_limit(self):
        assert self.validator.validate_iterations_within(5000, 10000) == (True, "")
        assert not self.validator.validate_iterations_within(10001, 10000)[0]


class TestValidatorConfiguration:
    """Bounds wiring."""

    def test_from_settings_wires_min_and_max_independently(self):
        settings = GameSettings(min_board_size=4, max_board_size=50, max_iterations=20)

        validator = BoardValidator.from_settings(settings)

        assert validator.min_board_size == 4
        assert validator.max_board_size == 50
        assert validator.max_iterations == 20

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError, match="cannot exceed"):
            BoardValidator(min_board_size=20, max_board_size=10)

    def test_defaults(self):
        validator = BoardValidator()
        assert (validator.min_board_size, validator.max_board_size, validator.max_iterations) == (3, 1000, 1000)
