"""Bounded search for the long-run behavior of a board.

The detector steps a board forward, remembering the fingerprint of every
generation it has examined. A repeated fingerprint means the board has
entered a cycle (a period of 1 is a still life); an all-dead successor
means extinction. If neither happens within the iteration ceiling the
search reports non-convergence, which is a normal outcome rather than an
error.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import logging

from .board import Board
from .transition import ConwayEngine, default_engine

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 10000


@dataclass
class BoardState:
    """Result of a convergence search."""
    board: Optional[Board]
    is_stable: bool
    is_cyclic: bool
    cycle_length: int
    message: str

    @property
    def is_extinct(self) -> bool:
        """True when the search ended on an all-dead board."""
        return self.is_stable and self.cycle_length == 0

    @property
    def converged(self) -> bool:
        return self.is_stable or self.is_cyclic


class ConvergenceDetector:
    """Finds extinction, still lifes and cycles within an iteration ceiling."""

    def __init__(self, engine: Optional[ConwayEngine] = None):
        """Initialize detector.

        Args:
            engine: Transition engine to drive (default singleton if None)
        """
        self.engine = engine or default_engine

    def find_final_state(self, board: Board, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> BoardState:
        """Advance the board until it repeats, dies out or hits the ceiling.

        Args:
            board: Starting board (not modified)
            max_iterations: Number of generations to examine (>= 1)

        Returns:
            BoardState describing the outcome

        Raises:
            ValueError: If max_iterations is not positive
        """
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")

        logger.info(f"Finding final state for board {board.board_id}")

        seen_states: Dict[str, int] = {}
        current = board.clone()

        for i in range(max_iterations):
            fingerprint = current.fingerprint()

            if fingerprint in seen_states:
                cycle_start = seen_states[fingerprint]
                cycle_length = i - cycle_start

                logger.info(f"Board {board.board_id} found cycle of length {cycle_length} at iteration {i}")

                if cycle_length == 1:
                    message = "Board reached stable state"
                else:
                    message = f"Board has a cycle of length {cycle_length}"

                return BoardState(
                    board=current,
                    is_stable=cycle_length == 1,
                    is_cyclic=cycle_length > 1,
                    cycle_length=cycle_length,
                    message=message,
                )

            seen_states[fingerprint] = i

            next_board = self.engine.step(current)

            # Extinction is caught one generation before it would repeat
            if next_board.is_empty():
                logger.info(f"Board {board.board_id} reached empty state at iteration {i + 1}")
                return BoardState(
                    board=next_board,
                    is_stable=True,
                    is_cyclic=False,
                    cycle_length=0,
                    message="Board reached empty state",
                )

            current = next_board

        logger.warning(f"Board {board.board_id} did not stabilize within {max_iterations} iterations")

        return BoardState(
            board=current,
            is_stable=False,
            is_cyclic=False,
            cycle_length=0,
            message=f"Board did not stabilize within {max_iterations} iterations",
        )


default_detector = ConvergenceDetector()
