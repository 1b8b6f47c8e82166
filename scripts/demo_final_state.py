#!/usr/bin/env python3
"""
Final State Demonstration Script

Creates a board (random, or one of the classic patterns), saves it to a
JSON board store and runs the convergence search on it, reporting whether
the board died out, settled into a still life, cycled, or did not converge
within the iteration ceiling.
"""

import json
import logging
import sys

import numpy as np

from gol_engine import GameOfLifeService, GameSettings, JsonBoardStore
from gol_engine.core.patterns import (
    board_from_pattern, create_blinker_pattern, create_block_pattern, create_glider_pattern
)

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

PATTERNS = {
    "block": create_block_pattern,
    "blinker": create_blinker_pattern,
    "glider": create_glider_pattern,
}


def run_final_state_demo(service, pattern=None, rows=10, cols=10, seed=None, max_iterations=None):
    """Create a board, search for its final state and return a summary dict."""
    logger.info("=== FINAL STATE DEMONSTRATION ===")

    if pattern is None:
        created = service.create_board(rows, cols, rng=np.random.default_rng(seed))
    else:
        board = board_from_pattern(PATTERNS[pattern](), rows, cols, x=cols // 2 - 1, y=rows // 2 - 1)
        created = service.upload_board(board.grid)

    if not created.ok:
        raise ValueError(created.error)

    board = created.value
    logger.info(f"Board {board.board_id} ({board.width}x{board.height}, alive={board.count_alive()})")
    logger.info(f"\n{board}")

    result = service.final_state(board.board_id, max_iterations=max_iterations, auto_save=True)
    if not result.ok:
        raise ValueError(result.error)

    state = result.value
    logger.info(f"Outcome: {state.message}")

    return {
        "board_id": board.board_id,
        "rows": board.height,
        "cols": board.width,
        "pattern": pattern or "random",
        "seed": seed,
        "final_generation": state.board.generation if state.board is not None else None,
        "is_stable": state.is_stable,
        "is_cyclic": state.is_cyclic,
        "cycle_length": state.cycle_length,
        "message": state.message,
    }


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Game of Life Final State Demonstration")
    parser.add_argument("--rows", type=int, default=None, help="Board height")
    parser.add_argument("--cols", type=int, default=None, help="Board width")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=None, help="Classic pattern instead of random")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible boards")
    parser.add_argument("--max-iterations", type=int, default=None, help="Convergence ceiling")
    parser.add_argument("--store-dir", default="boards", help="Directory for the JSON board store")

    args = parser.parse_args()

    settings = GameSettings.from_env()
    store = JsonBoardStore(args.store_dir, expiry_seconds=settings.store_expiry_seconds)
    service = GameOfLifeService(store, settings=settings)

    try:
        summary = run_final_state_demo(
            service,
            pattern=args.pattern,
            rows=args.rows or settings.default_rows,
            cols=args.cols or settings.default_cols,
            seed=args.seed,
            max_iterations=args.max_iterations,
        )
    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)

    print(json.dumps(summary, indent=2))
