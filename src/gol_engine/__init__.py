"""
Conway's Game of Life simulation and convergence engine.

Advance a bounded board one or many generations, or search for its
long-run behavior: extinction, still life, periodic cycle, or no
convergence within an iteration ceiling.
"""

from .config import GameSettings
from .core.board import Board, create_random_board
from .core.convergence import BoardState, ConvergenceDetector, DEFAULT_MAX_ITERATIONS, default_detector
from .core.transition import ConwayEngine, default_engine
from .service import ErrorKind, GameOfLifeService, ServiceResult
from .storage import BoardStore, InMemoryBoardStore, JsonBoardStore
from .validation import BoardValidator

__version__ = "0.1.0"


def next_generation(board: Board) -> Board:
    """One generation ahead, using the default engine."""
    return default_engine.step(board)


def advance(board: Board, n: int) -> Board:
    """n generations ahead, using the default engine."""
    return default_engine.advance(board, n)


def find_final_state(board: Board, max_iterations: int = DEFAULT_MAX_ITERATIONS) -> BoardState:
    """Convergence search using the default detector."""
    return default_detector.find_final_state(board, max_iterations)


__all__ = [
    'Board',
    'BoardState',
    'BoardStore',
    'BoardValidator',
    'ConvergenceDetector',
    'ConwayEngine',
    'ErrorKind',
    'GameOfLifeService',
    'GameSettings',
    'InMemoryBoardStore',
    'JsonBoardStore',
    'ServiceResult',
    'advance',
    'create_random_board',
    'find_final_state',
    'next_generation',
]
