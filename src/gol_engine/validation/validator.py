"""Input gate in front of the simulation engine.

Checks grids and iteration counts before they reach the engine and
reports problems as (is_valid, error_message) pairs instead of raising.
"""

from typing import Any, Optional, Tuple
import logging

import numpy as np

from ..config import GameSettings

logger = logging.getLogger(__name__)

ValidationResult = Tuple[bool, str]


class BoardValidator:
    """Dimension and iteration-count bounds check.

    Minimum and maximum sizes are independent settings; both axes must
    fall inside [min_board_size, max_board_size].
    """

    def __init__(self, min_board_size: int = 3, max_board_size: int = 1000, max_iterations: int = 1000):
        """Initialize validator.

        Args:
            min_board_size: Smallest allowed row/column count
            max_board_size: Largest allowed row/column count
            max_iterations: Largest allowed iteration count

        Raises:
            ValueError: If the bounds are inconsistent
        """
        if min_board_size < 1:
            raise ValueError("min_board_size must be at least 1")
        if min_board_size > max_board_size:
            raise ValueError(f"min_board_size ({min_board_size}) cannot exceed max_board_size ({max_board_size})")
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        self.min_board_size = min_board_size
        self.max_board_size = max_board_size
        self.max_iterations = max_iterations

    @classmethod
    def from_settings(cls, settings: GameSettings) -> 'BoardValidator':
        """Create validator wired from settings."""
        return cls(
            min_board_size=settings.min_board_size,
            max_board_size=settings.max_board_size,
            max_iterations=settings.max_iterations,
        )

    def validate_dimensions(self, rows: Any, cols: Any) -> ValidationResult:
        """Check a requested board size against the configured bounds."""
        if not _is_int(rows) or not _is_int(cols):
            return False, "Board dimensions must be integers"

        if rows < self.min_board_size or cols < self.min_board_size:
            return False, f"Board dimensions must be at least {self.min_board_size}x{self.min_board_size}"

        if rows > self.max_board_size or cols > self.max_board_size:
            return False, f"Board dimensions cannot exceed {self.max_board_size}x{self.max_board_size}"

        return True, ""

    def validate_grid(self, grid: Any) -> ValidationResult:
        """Check that a grid is rectangular and within the size bounds.

        Args:
            grid: Nested sequence of booleans or a 2D numpy array

        Returns:
            (True, "") if valid, otherwise (False, reason)
        """
        if grid is None:
            return False, "Board grid cannot be null"

        if isinstance(grid, np.ndarray):
            if grid.ndim != 2:
                return False, "Board grid must be two-dimensional"
            height, width = grid.shape
            if height == 0 or width == 0:
                return False, "Board must not contain empty rows"
        else:
            try:
                rows = list(grid)
            except TypeError:
                return False, "Board grid must be a sequence of rows"

            if len(rows) == 0 or any(_row_length(row) in (None, 0) for row in rows):
                return False, "Board must not contain empty rows"

            height = len(rows)
            width = _row_length(rows[0])

            if any(_row_length(row) != width for row in rows):
                return False, "All rows must have the same number of columns"

        result = self.validate_dimensions(height, width)
        if not result[0]:
            logger.debug(f"Rejected {width}x{height} grid: {result[1]}")
            return result

        if not isinstance(grid, np.ndarray):
            # Rows of the right length may still hold nested sequences
            try:
                cells = np.array(rows, dtype=bool)
            except (ValueError, TypeError):
                return False, "Board grid must be two-dimensional"
            if cells.ndim != 2:
                return False, "Board grid must be two-dimensional"

        return result

    def validate_iteration_count(self, iterations: Any) -> ValidationResult:
        """Check an iteration count against [1, max_iterations]."""
        return self.validate_iterations_within(iterations, self.max_iterations)

    def validate_iterations_within(self, iterations: Any, limit: int) -> ValidationResult:
        """Check an iteration count against an explicit upper bound."""
        if not _is_int(iterations):
            return False, "Number of iterations must be an integer"

        if iterations < 1:
            return False, "Number of iterations must be at least 1"

        if iterations > limit:
            return False, f"Number of iterations cannot exceed {limit}"

        return True, ""


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _row_length(row: Any) -> Optional[int]:
    if row is None or isinstance(row, (str, bytes)):
        return None
    try:
        return len(row)
    except TypeError:
        return None
