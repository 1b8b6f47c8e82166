"""Board persistence: the store contract and its implementations."""

from .base import BoardStore
from .json_store import JsonBoardStore
from .memory import InMemoryBoardStore

__all__ = ['BoardStore', 'InMemoryBoardStore', 'JsonBoardStore']
