"""Conway's Game of Life transition engine.

Implements the fixed B3/S23 rule on a bounded grid. Cells outside the
grid are treated as permanently dead; there is no wraparound. Every
transition returns a new Board and leaves its input untouched.
"""

import logging

import numpy as np

from .board import Board

logger = logging.getLogger(__name__)


SURVIVAL_SET = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET = frozenset({3})        # Dead cells born with exactly 3 neighbors


class ConwayEngine:
    """Conway's Game of Life rules engine.

    The per-cell rule in update_cell() is expanded once into a lookup
    table indexed by [alive, live_neighbors], which step() applies to
    the whole grid at once.
    """

    def __init__(self):
        self.rule_table = np.array(
            [[self.update_cell(alive, neighbors) for neighbors in range(9)] for alive in (False, True)],
            dtype=bool,
        )

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply Conway's rules to determine next cell state.

        Args:
            alive: Current cell state (True=alive, False=dead)
            live_neighbors: Number of live neighbors (0-8)

        Returns:
            Next cell state (True=alive, False=dead)
        """
        if alive:
            return live_neighbors in SURVIVAL_SET
        return live_neighbors in BIRTH_SET

    def neighbor_counts(self, grid: np.ndarray) -> np.ndarray:
        """Count live Moore neighbors for every cell.

        The grid is zero-padded, so off-board neighbors count as dead.

        Returns:
            Integer array of the same shape holding counts 0-8
        """
        height, width = grid.shape
        padded = np.pad(grid.astype(np.uint8), 1, mode='constant', constant_values=0)

        counts = np.zeros((height, width), dtype=np.uint8)
        for dy in (0, 1, 2):
            for dx in (0, 1, 2):
                if dx == 1 and dy == 1:
                    continue
                counts += padded[dy:dy + height, dx:dx + width]

        return counts

    def next_grid(self, grid: np.ndarray) -> np.ndarray:
        """Compute the next generation of a raw grid."""
        return self.rule_table[grid.astype(np.intp), self.neighbor_counts(grid)]

    def step(self, board: Board) -> Board:
        """Apply one generation of Conway's rules to the whole board.

        Args:
            board: Current board state

        Returns:
            New board with the same identity and generation + 1
        """
        new_board = Board(
            self.next_grid(board.grid),
            board_id=board.board_id,
            generation=board.generation + 1,
            created_at=board.created_at,
        )

        logger.debug(f"Board {board.board_id} advanced to generation {new_board.generation} "
                     f"(alive={new_board.count_alive()})")
        return new_board

    def advance(self, board: Board, n: int) -> Board:
        """Apply step() exactly n times.

        Args:
            board: Starting board
            n: Number of generations to advance (>= 0)

        Returns:
            Board n generations ahead; a copy of the input when n == 0

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Number of generations must be non-negative, got {n}")

        logger.info(f"Calculating {n} generations ahead for board {board.board_id}")

        current = board.clone()
        for _ in range(n):
            current = self.step(current)

        return current


# Singleton instance for convenience
default_engine = ConwayEngine()
