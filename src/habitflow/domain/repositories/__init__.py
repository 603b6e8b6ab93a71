"""Repository protocol definitions for domain layer."""

from .record import RecordStore

__all__ = ["RecordStore"]
