"""Key-value store implementations."""

from .memory_store import MemoryStore
from .json_file_store import JsonFileStore

__all__ = ["MemoryStore", "JsonFileStore"]
