"""Board store contract.

The engine itself never touches storage; callers load a board, run the
engine and optionally save the result. Stores only promise single-key
atomicity. Two callers advancing and saving the same board id race, and
the last save wins.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.board import Board


class BoardStore(ABC):
    """Identity-keyed board persistence with expiration."""

    @abstractmethod
    def get(self, board_id: str) -> Optional[Board]:
        """Return the stored board, or None if missing or expired."""

    @abstractmethod
    def save(self, board: Board) -> str:
        """Insert or replace a board and return its id."""

    @abstractmethod
    def delete(self, board_id: str) -> bool:
        """Remove a board. True iff a live record existed."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        """Ids of all live (non-expired) boards."""

    def exists(self, board_id: str) -> bool:
        return self.get(board_id) is not None
