"""Record store protocol."""

from __future__ import annotations

from typing import Optional, Protocol


class RecordStore(Protocol):
    """Keyed text storage for the persisted tracker records."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored text for ``key`` or None when absent."""
        ...

    def set_many(self, values: dict[str, str]) -> None:
        """Overwrite several keys as a single unit."""
        ...
