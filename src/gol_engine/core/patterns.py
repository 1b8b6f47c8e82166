"""Classic Conway patterns and helpers for placing them on a board."""

from typing import Optional

import numpy as np

from .board import Board


def create_glider_pattern() -> np.ndarray:
    """Create classic Conway glider pattern (period 4, moves down-right)."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def create_blinker_pattern(vertical: bool = False) -> np.ndarray:
    """Create blinker pattern (3 cells, period 2 oscillator)."""
    pattern = np.array([[True, True, True]], dtype=bool)
    return pattern.T.copy() if vertical else pattern


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def board_from_pattern(pattern: np.ndarray, rows: int, cols: int,
                       x: int = 0, y: int = 0, board_id: Optional[str] = None) -> Board:
    """Place a pattern on an otherwise dead rows x cols board.

    Args:
        pattern: 2D boolean array
        rows: Board height
        cols: Board width
        x: Column of the pattern's top-left cell
        y: Row of the pattern's top-left cell
        board_id: Optional explicit identifier

    Raises:
        ValueError: If the pattern does not fit at the requested position
    """
    pattern = np.asarray(pattern, dtype=bool)
    pattern_height, pattern_width = pattern.shape

    # No wrapping: the pattern must lie entirely inside the board
    if x < 0 or y < 0 or x + pattern_width > cols or y + pattern_height > rows:
        raise ValueError(f"Pattern {pattern_width}x{pattern_height} at ({x}, {y}) "
                         f"does not fit on a {cols}x{rows} board")

    grid = np.zeros((rows, cols), dtype=bool)
    grid[y:y + pattern_height, x:x + pattern_width] = pattern

    if board_id is None:
        return Board(grid)
    return Board(grid, board_id=board_id)
