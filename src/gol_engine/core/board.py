"""Board state for Conway's Game of Life.

A Board is one generation of a lineage: a rectangular numpy boolean grid
plus the identity, generation counter and creation time shared by every
generation derived from it. Boards never change their grid once built;
transitions allocate a fresh Board instead.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np

logger = logging.getLogger(__name__)

GridLike = Union[np.ndarray, Sequence[Sequence[bool]]]


def generate_board_id() -> str:
    """Default board identifier factory (random UUID4 string)."""
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_grid_array(grid: GridLike) -> np.ndarray:
    """Convert a nested sequence or array to an owned 2D boolean array.

    Raises:
        ValueError: If the grid is empty, ragged or not two-dimensional
    """
    if grid is None:
        raise ValueError("Board grid cannot be None")

    if not isinstance(grid, np.ndarray):
        rows = list(grid)
        if len(rows) == 0:
            raise ValueError("Board grid must have at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same number of columns")
        grid = rows

    array = np.array(grid, dtype=bool)
    if array.ndim != 2:
        raise ValueError(f"Board grid must be two-dimensional, got {array.ndim} dimensions")
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ValueError(f"Board grid must be non-empty, got shape {array.shape}")

    return array


@dataclass(eq=False)
class Board:
    """One generation of a Game of Life board.

    Attributes:
        grid: Read-only 2D numpy boolean array, indexed grid[y, x]
        board_id: Opaque identifier shared by the whole lineage
        generation: Number of transitions applied since creation
        created_at: UTC creation time of the lineage
    """

    grid: np.ndarray
    board_id: str = field(default_factory=generate_board_id)
    generation: int = 0
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        self.grid = as_grid_array(self.grid)
        self.grid.flags.writeable = False

        if not isinstance(self.board_id, str) or len(self.board_id.strip()) == 0:
            raise ValueError("board_id must be non-empty string")
        if self.generation < 0:
            raise ValueError(f"generation must be non-negative, got {self.generation}")

    @property
    def height(self) -> int:
        """Number of rows."""
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        """Number of columns."""
        return int(self.grid.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def is_alive(self, x: int, y: int) -> bool:
        """Get cell state at column x, row y.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} board")
        return bool(self.grid[y, x])

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.grid))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.width * self.height)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not self.grid.any()

    def clone(self) -> 'Board':
        """Create a copy with its own grid and the same identity and generation."""
        return Board(self.grid.copy(), board_id=self.board_id,
                     generation=self.generation, created_at=self.created_at)

    def fingerprint(self) -> str:
        """Exact encoding of the cell contents for repeat detection.

        Cells are written row-major, one character each ('1' alive,
        '0' dead). For fixed dimensions two boards share a fingerprint
        exactly when their grids are identical.
        """
        cells = np.ascontiguousarray(self.grid).ravel().view(np.uint8) + ord('0')
        return cells.tobytes().decode('ascii')

    def to_rows(self) -> List[List[bool]]:
        """Grid as nested lists of plain bools."""
        return self.grid.tolist()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize board to a JSON-ready dictionary."""
        return {
            'board_id': self.board_id,
            'grid': self.to_rows(),
            'generation': self.generation,
            'created_at': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Board':
        """Rebuild a board from to_dict() output."""
        return cls(
            grid=data['grid'],
            board_id=data['board_id'],
            generation=int(data.get('generation', 0)),
            created_at=datetime.fromisoformat(data['created_at']),
        )

    def __eq__(self, other: object) -> bool:
        """Equality on identity, generation and cell contents."""
        if not isinstance(other, Board):
            return False
        return (self.board_id == other.board_id and
                self.generation == other.generation and
                self.created_at == other.created_at and
                np.array_equal(self.grid, other.grid))

    def __hash__(self) -> int:
        # The grid is read-only, so the hash is stable for the board's lifetime
        return hash((self.board_id, self.generation, self.fingerprint()))

    def __str__(self) -> str:
        """String representation showing board state."""
        alive_char = '█'
        dead_char = '░'

        lines = []
        for y in range(min(10, self.height)):  # Show first 10 rows
            line = ''.join(alive_char if cell else dead_char for cell in self.grid[y, :20])
            if self.width > 20:
                line += '...'
            lines.append(line)

        if self.height > 10:
            lines.append('...')

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"Board(id={self.board_id[:8]}..., {self.width}x{self.height}, "
                f"generation={self.generation}, alive={self.count_alive()})")


def create_random_board(rows: int, cols: int, rng: np.random.Generator,
                        density: float = 0.5, board_id: Optional[str] = None) -> Board:
    """Create a rows x cols board with independent random liveness per cell.

    Args:
        rows: Board height; must already satisfy the validator bounds
        cols: Board width; must already satisfy the validator bounds
        rng: Random source, seed it for reproducible boards
        density: Probability of a cell being alive (0.0 to 1.0)
        board_id: Optional explicit identifier (new UUID if None)

    Returns:
        Board at generation 0
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"density must be between 0.0 and 1.0, got {density}")

    grid = rng.random((rows, cols)) < density
    board = Board(grid) if board_id is None else Board(grid, board_id=board_id)

    logger.debug(f"Created random board {board.board_id} ({rows}x{cols}, density={density:.2f})")
    return board
