"""JSON file board store.

One file per board under a directory. Each record carries the board and
the time it expires; expired files are deleted when encountered.
"""

import json
import os
import tempfile
import time
from pathlib import Path
from typing import Callable, List, Optional, Union
import logging

from ..core.board import Board
from .base import BoardStore

logger = logging.getLogger(__name__)


class JsonBoardStore(BoardStore):
    """Directory of <prefix><board_id>.json records."""

    def __init__(self, directory: Union[str, Path], expiry_seconds: float = 3600.0,
                 clock: Callable[[], float] = time.time, prefix: str = "board_"):
        """Initialize JSON store.

        Args:
            directory: Folder holding the records (created if missing)
            expiry_seconds: Time-to-live for saved boards
            clock: Time source in seconds, injectable for tests
            prefix: File name prefix identifying board records
        """
        if expiry_seconds <= 0:
            raise ValueError("expiry_seconds must be positive")

        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.expiry_seconds = expiry_seconds
        self.prefix = prefix
        self._clock = clock

    def _path(self, board_id: str) -> Path:
        if not board_id or os.sep in board_id or '/' in board_id or board_id in ('.', '..'):
            raise ValueError(f"Invalid board id: {board_id!r}")
        return self.directory / f"{self.prefix}{board_id}.json"

    def _read(self, path: Path) -> Optional[dict]:
        """Load a live record, removing it if expired."""
        try:
            with open(path, "r") as f:
                record = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading board record {path}: {e}")
            raise

        if self._clock() > record['expires_at']:
            logger.debug(f"Board record {path.name} expired")
            path.unlink(missing_ok=True)
            return None

        return record

    def get(self, board_id: str) -> Optional[Board]:
        record = self._read(self._path(board_id))

        if record is None:
            logger.warning(f"Board {board_id} not found in {self.directory}")
            return None

        logger.info(f"Successfully retrieved board {board_id}")
        return Board.from_dict(record['board'])

    def save(self, board: Board) -> str:
        path = self._path(board.board_id)
        record = {
            'board': board.to_dict(),
            'saved_at': self._clock(),
            'expires_at': self._clock() + self.expiry_seconds,
        }

        # Write to a temp file then rename so readers never see a partial record
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(record, f)
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(f"Error saving board {board.board_id}: {e}")
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Successfully saved board {board.board_id} with {self.expiry_seconds / 3600:.2f} hour expiry")
        return board.board_id

    def delete(self, board_id: str) -> bool:
        path = self._path(board_id)

        if self._read(path) is None:
            logger.warning(f"Board {board_id} not found when attempting delete")
            return False

        try:
            path.unlink()
        except FileNotFoundError:
            return False

        logger.info(f"Successfully deleted board {board_id}")
        return True

    def list_ids(self) -> List[str]:
        board_ids = []
        for path in sorted(self.directory.glob(f"{self.prefix}*.json")):
            if self._read(path) is not None:
                board_ids.append(path.stem[len(self.prefix):])

        logger.info(f"Retrieved {len(board_ids)} board IDs from {self.directory}")
        return board_ids
