"""In-process board store with time-based expiration.

Boards are kept as private clones alongside the time they were saved.
Entries older than the expiry are dropped lazily when touched and in bulk
by cleanup_expired().
"""

import threading
import time
from typing import Callable, Dict, List, Optional, Tuple
import logging

from ..core.board import Board
from .base import BoardStore

logger = logging.getLogger(__name__)


class InMemoryBoardStore(BoardStore):
    """Thread-safe dict-backed board store with TTL.

    Tracks hits, misses and expirations for diagnostics.
    """

    def __init__(self, expiry_seconds: Optional[float] = 3600.0,
                 clock: Callable[[], float] = time.time):
        """Initialize board store.

        Args:
            expiry_seconds: Time-to-live for saved boards (None disables expiry)
            clock: Time source in seconds, injectable for tests
        """
        if expiry_seconds is not None and expiry_seconds <= 0:
            raise ValueError("expiry_seconds must be positive")

        self.expiry_seconds = expiry_seconds
        self._clock = clock
        self._lock = threading.Lock()

        # board_id -> (board, saved_at)
        self._boards: Dict[str, Tuple[Board, float]] = {}

        self.hits = 0
        self.misses = 0
        self.expirations = 0

    def _is_expired(self, saved_at: float, now: float) -> bool:
        if self.expiry_seconds is None:
            return False
        return now - saved_at > self.expiry_seconds

    def _expire_locked(self, board_id: str, now: float) -> bool:
        """Drop board_id if expired. Caller holds the lock."""
        entry = self._boards.get(board_id)
        if entry is None:
            return False
        if self._is_expired(entry[1], now):
            del self._boards[board_id]
            self.expirations += 1
            logger.debug(f"Board {board_id} expired after {now - entry[1]:.1f}s")
            return True
        return False

    def get(self, board_id: str) -> Optional[Board]:
        with self._lock:
            self._expire_locked(board_id, self._clock())
            entry = self._boards.get(board_id)

            if entry is None:
                self.misses += 1
                logger.warning(f"Board {board_id} not found in store")
                return None

            self.hits += 1
            return entry[0].clone()

    def save(self, board: Board) -> str:
        with self._lock:
            self._boards[board.board_id] = (board.clone(), self._clock())

        logger.info(f"Saved board {board.board_id} (generation {board.generation})")
        return board.board_id

    def delete(self, board_id: str) -> bool:
        with self._lock:
            self._expire_locked(board_id, self._clock())
            existed = self._boards.pop(board_id, None) is not None

        if existed:
            logger.info(f"Deleted board {board_id}")
        else:
            logger.warning(f"Board {board_id} not found when attempting delete")
        return existed

    def list_ids(self) -> List[str]:
        with self._lock:
            now = self._clock()
            for board_id in list(self._boards):
                self._expire_locked(board_id, now)
            board_ids = list(self._boards)

        logger.info(f"Retrieved {len(board_ids)} board IDs")
        return board_ids

    def cleanup_expired(self) -> int:
        """Remove expired boards.

        Returns:
            Number of boards removed
        """
        with self._lock:
            now = self._clock()
            removed = sum(1 for board_id in list(self._boards) if self._expire_locked(board_id, now))

        logger.debug(f"Cleaned up {removed} expired boards")
        return removed

    def clear(self) -> None:
        """Remove every board and reset counters."""
        with self._lock:
            self._boards.clear()
            self.hits = 0
            self.misses = 0
            self.expirations = 0

    @property
    def size(self) -> int:
        """Number of stored boards, expired ones included until touched."""
        with self._lock:
            return len(self._boards)

    def get_stats(self) -> Dict[str, int]:
        """Get store statistics as one consistent snapshot."""
        with self._lock:
            return {
                'size': len(self._boards),
                'hits': self.hits,
                'misses': self.misses,
                'expirations': self.expirations,
            }

    def __repr__(self) -> str:
        return f"InMemoryBoardStore(size={self.size}, expiry={self.expiry_seconds}s)"
