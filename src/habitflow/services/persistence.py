"""Load and save the tracker's three records through a record store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, TypeVar

from ..domain.repositories.record import RecordStore
from ..logging_config import get_logger
from ..models.habit import Habit
from ..models.profile import UserProfile
from .serialization import (
    COMPLETIONS_KEY,
    HABITS_KEY,
    PROFILE_KEY,
    CompletionMap,
    RecordDecodeError,
    decode_completions,
    decode_habits,
    decode_profile,
    encode_completions,
    encode_habits,
    encode_profile,
)

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class TrackerSnapshot:
    """The three persisted records as one value."""

    habits: list[Habit] = field(default_factory=list)
    completions: CompletionMap = field(default_factory=dict)
    profile: UserProfile = field(default_factory=UserProfile)


class Persistence(Protocol):
    """Collaborator the tracker uses to load once and save after every change."""

    def load(self) -> TrackerSnapshot:  # pragma: no cover - interface
        ...

    def save(self, snapshot: TrackerSnapshot) -> None:  # pragma: no cover - interface
        ...


class TrackerPersistence:
    """Encodes snapshots as JSON records in a :class:`RecordStore`."""

    def __init__(self, store: RecordStore):
        self.store = store

    def _load_record(self, key: str, decode: Callable[[str], T], default: Callable[[], T]) -> T:
        raw = self.store.get(key)
        if raw is None:
            return default()
        try:
            return decode(raw)
        except RecordDecodeError as exc:
            # Only this record is reset; the others load independently.
            logger.warning(
                "Discarding unreadable record",
                extra={"record": key, "reason": exc.reason},
            )
            return default()

    def load(self) -> TrackerSnapshot:
        snapshot = TrackerSnapshot(
            habits=self._load_record(HABITS_KEY, decode_habits, list),
            completions=self._load_record(COMPLETIONS_KEY, decode_completions, dict),
            profile=self._load_record(PROFILE_KEY, decode_profile, UserProfile),
        )
        logger.info(
            "Tracker state loaded",
            extra={"habits": len(snapshot.habits), "days": len(snapshot.completions)},
        )
        return snapshot

    def save(self, snapshot: TrackerSnapshot) -> None:
        self.store.set_many(
            {
                HABITS_KEY: encode_habits(snapshot.habits),
                COMPLETIONS_KEY: encode_completions(snapshot.completions),
                PROFILE_KEY: encode_profile(snapshot.profile),
            }
        )


__all__ = ["Persistence", "TrackerPersistence", "TrackerSnapshot"]
