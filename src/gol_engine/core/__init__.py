"""
Simulation core: board model, transition engine and convergence detector.

Pure, synchronous code. Nothing here performs I/O or validates input
beyond the structural invariants a Board enforces on construction.
"""

from .board import Board, create_random_board, generate_board_id
from .convergence import BoardState, ConvergenceDetector, DEFAULT_MAX_ITERATIONS
from .transition import ConwayEngine, BIRTH_SET, SURVIVAL_SET

__all__ = [
    'Board',
    'BoardState',
    'ConvergenceDetector',
    'ConwayEngine',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'DEFAULT_MAX_ITERATIONS',
    'create_random_board',
    'generate_board_id',
]
