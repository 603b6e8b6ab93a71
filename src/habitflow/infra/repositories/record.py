"""SQLModel implementation of the record store."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.record import StoredRecord

logger = get_logger(__name__)


class SQLModelRecordStore:
    """Stores each tracker record as a row in ``stored_record``."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        with self.session_factory() as session:
            row = session.exec(select(StoredRecord).where(StoredRecord.key == key)).first()
            return row.value if row else None

    def set_many(self, values: dict[str, str]) -> None:
        """Upsert every key inside one session so the write lands as a unit."""
        now = datetime.now(timezone.utc)
        with self.session_factory() as session:
            for key, value in values.items():
                row = session.exec(select(StoredRecord).where(StoredRecord.key == key)).first()
                if row:
                    row.value = value
                    row.updated_at = now
                else:
                    row = StoredRecord(key=key, value=value, updated_at=now)
                session.add(row)
            session.commit()
        logger.debug("Stored records", extra={"keys": sorted(values)})


__all__ = ["SQLModelRecordStore"]
