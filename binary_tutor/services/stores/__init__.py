"""Key-value store implementations for the persistence boundary."""

from .json_file_store import JsonFileStore
from .memory_store import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore"]
