"""Service boundary for board operations.

Combines the validator, the board store and the simulation core. Expected
failures (bad input, unknown board id) come back as ServiceResult values;
programming errors inside the engine still raise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar
import logging

import numpy as np

from .config import GameSettings
from .core.board import Board, create_random_board, generate_board_id
from .core.convergence import BoardState, ConvergenceDetector
from .core.transition import ConwayEngine
from .storage.base import BoardStore
from .validation.validator import BoardValidator

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ErrorKind(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass
class ServiceResult(Generic[T]):
    """Outcome of a service call: a value or an expected failure."""
    ok: bool
    value: Optional[T] = None
    error: str = ""
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, value: T) -> 'ServiceResult[T]':
        return cls(ok=True, value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, error: str) -> 'ServiceResult[T]':
        return cls(ok=False, error=error, error_kind=kind)


class GameOfLifeService:
    """Board lifecycle and simulation operations with structured failures."""

    def __init__(self, store: BoardStore,
                 validator: Optional[BoardValidator] = None,
                 engine: Optional[ConwayEngine] = None,
                 detector: Optional[ConvergenceDetector] = None,
                 settings: Optional[GameSettings] = None,
                 id_factory: Callable[[], str] = generate_board_id):
        """Initialize service.

        Args:
            store: Board persistence
            validator: Input gate (built from settings if None)
            engine: Transition engine (new ConwayEngine if None)
            detector: Convergence detector driving the same engine (built if None)
            settings: Bounds and defaults (GameSettings() if None)
            id_factory: Produces identifiers for new boards
        """
        if store is None:
            raise ValueError("store is required")

        self.settings = settings or GameSettings()
        self.store = store
        self.validator = validator or BoardValidator.from_settings(self.settings)
        self.engine = engine or ConwayEngine()
        self.detector = detector or ConvergenceDetector(self.engine)
        self.id_factory = id_factory

    def create_board(self, rows: Optional[int] = None, cols: Optional[int] = None,
                     rng: Optional[np.random.Generator] = None,
                     density: float = 0.5) -> ServiceResult[Board]:
        """Create, save and return a random board."""
        rows = self.settings.default_rows if rows is None else rows
        cols = self.settings.default_cols if cols is None else cols

        is_valid, error = self.validator.validate_dimensions(rows, cols)
        if not is_valid:
            return ServiceResult.fail(ErrorKind.VALIDATION, error)
        if not (0.0 <= density <= 1.0):
            return ServiceResult.fail(ErrorKind.VALIDATION, "Density must be between 0.0 and 1.0")

        logger.info(f"Creating new initial board ({rows}x{cols})")

        board = create_random_board(rows, cols, rng or np.random.default_rng(),
                                    density=density, board_id=self.id_factory())
        self.store.save(board)
        return ServiceResult.success(board)

    def upload_board(self, grid: Any) -> ServiceResult[Board]:
        """Validate, save and return a board built from a caller grid."""
        is_valid, error = self.validator.validate_grid(grid)
        if not is_valid:
            return ServiceResult.fail(ErrorKind.VALIDATION, error)

        board = Board(grid, board_id=self.id_factory())
        self.store.save(board)
        return ServiceResult.success(board)

    def save_board(self, board: Board) -> str:
        """Persist a board and return its id."""
        logger.info(f"Saving board {board.board_id} to store")
        return self.store.save(board)

    def get_board(self, board_id: str) -> ServiceResult[Board]:
        """Load a board by id."""
        if not isinstance(board_id, str) or not board_id.strip():
            return ServiceResult.fail(ErrorKind.VALIDATION, "Board ID cannot be null or empty")

        logger.info(f"Loading board {board_id} from store")

        board = self.store.get(board_id)
        if board is None:
            return ServiceResult.fail(ErrorKind.NOT_FOUND, f"Board with ID {board_id} not found")
        return ServiceResult.success(board)

    def delete_board(self, board_id: str) -> ServiceResult[bool]:
        """Delete a board; a missing board is a not-found failure."""
        if not isinstance(board_id, str) or not board_id.strip():
            return ServiceResult.fail(ErrorKind.VALIDATION, "Board ID cannot be null or empty")

        if not self.store.delete(board_id):
            return ServiceResult.fail(ErrorKind.NOT_FOUND, f"Board with ID {board_id} not found")
        return ServiceResult.success(True)

    def list_board_ids(self) -> List[str]:
        board_ids = self.store.list_ids()
        if not board_ids:
            logger.info("No boards exist")
        return board_ids

    def next_generation(self, board_id: str, auto_save: bool = False) -> ServiceResult[Board]:
        """Compute the next generation of a stored board."""
        loaded = self.get_board(board_id)
        if not loaded.ok:
            return loaded

        logger.info(f"Calculating next generation for board {board_id}")
        next_board = self.engine.step(loaded.value)

        if auto_save:
            self.store.save(next_board)
        return ServiceResult.success(next_board)

    def advance(self, board_id: str, iterations: int, auto_save: bool = False) -> ServiceResult[Board]:
        """Advance a stored board by a validated number of generations."""
        is_valid, error = self.validator.validate_iteration_count(iterations)
        if not is_valid:
            return ServiceResult.fail(ErrorKind.VALIDATION, error)

        loaded = self.get_board(board_id)
        if not loaded.ok:
            return loaded

        future_board = self.engine.advance(loaded.value, iterations)

        if auto_save:
            self.store.save(future_board)
        return ServiceResult.success(future_board)

    def final_state(self, board_id: str, max_iterations: Optional[int] = None,
                    auto_save: bool = False) -> ServiceResult[BoardState]:
        """Run the convergence search on a stored board."""
        if max_iterations is None:
            max_iterations = self.settings.default_final_state_iterations

        limit = self.settings.final_state_max_iterations
        is_valid, _ = self.validator.validate_iterations_within(max_iterations, limit)
        if not is_valid:
            return ServiceResult.fail(ErrorKind.VALIDATION, f"Max iterations must be between 1 and {limit}")

        loaded = self.get_board(board_id)
        if not loaded.ok:
            return ServiceResult.fail(loaded.error_kind, loaded.error)

        state = self.detector.find_final_state(loaded.value, max_iterations)

        if auto_save and state.board is not None:
            self.store.save(state.board)
        return ServiceResult.success(state)
