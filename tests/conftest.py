"""Pytest configuration and shared fixtures for HabitFlow tests.

Provides an in-memory record store, a tracker pinned to a fixed "today",
and a throwaway SQLite engine for the SQLModel-backed store.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from habitflow.infra.database import create_session_factory
from habitflow.infra.repositories import InMemoryRecordStore
from habitflow.models import StoredRecord  # noqa: F401  (registers the table)
from habitflow.services.persistence import TrackerPersistence
from habitflow.services.tracker import HabitTracker

# Monday
FIXED_TODAY = date(2026, 10, 19)


# =============================================================================
# Store / Tracker Fixtures
# =============================================================================


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    """Fresh in-memory record store for each test."""
    return InMemoryRecordStore()


@pytest.fixture
def tracker_factory(record_store):
    """Build trackers over the shared store, optionally with a different clock.

    Building a second tracker over the same store simulates an app restart.
    """

    def _create(today: date = FIXED_TODAY, store=None) -> HabitTracker:
        return HabitTracker(
            TrackerPersistence(store if store is not None else record_store),
            clock=lambda: today,
        )

    return _create


@pytest.fixture
def tracker(tracker_factory) -> HabitTracker:
    return tracker_factory()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the app wires into repositories."""
    return create_session_factory(db_engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
