"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import flet as ft
from sqlmodel import Session

from ..config import BaseConfig
from ..infra.database import bootstrap_database
from ..infra.repositories import SQLModelRecordStore
from ..services.persistence import TrackerPersistence
from ..services.photo import PhotoReader
from ..services.tracker import HabitTracker
from .charts import ChartFiles


@dataclass
class AppContext:
    """Tracker state plus the page-level handles the views share."""

    config: BaseConfig
    session_factory: Callable[[], Session]
    record_store: SQLModelRecordStore
    tracker: HabitTracker

    page: Optional[ft.Page] = None
    file_picker: Optional[ft.FilePicker] = None
    photo_reader: Optional[PhotoReader] = None
    charts: Optional[ChartFiles] = None

    @property
    def dev_mode(self) -> bool:
        return bool(self.config.DEV_MODE)


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the database, load the tracker state and wire the context."""

    if config is None:
        config = BaseConfig()

    session_factory = bootstrap_database(config).session_factory

    record_store = SQLModelRecordStore(session_factory)
    tracker = HabitTracker(TrackerPersistence(record_store), config=config)

    return AppContext(
        config=config,
        session_factory=session_factory,
        record_store=record_store,
        tracker=tracker,
    )
