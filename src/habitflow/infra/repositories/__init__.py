"""Record store implementations."""

from .memory import InMemoryRecordStore
from .record import SQLModelRecordStore

__all__ = ["InMemoryRecordStore", "SQLModelRecordStore"]
