"""Asynchronous profile photo loading with supersede/cancel semantics."""

from __future__ import annotations

import asyncio
import base64
import mimetypes
from pathlib import Path
from typing import Awaitable, Callable, Optional

from ..logging_config import get_logger

logger = get_logger(__name__)

ReadBytes = Callable[[Path], Awaitable[bytes]]


def to_data_uri(payload: bytes, filename: str | Path) -> str:
    """Encode ``payload`` as ``data:<mime>;base64,...`` using the filename's type."""

    mime, _ = mimetypes.guess_type(str(filename))
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime or 'application/octet-stream'};base64,{encoded}"


async def _read_file(path: Path) -> bytes:
    return await asyncio.to_thread(path.read_bytes)


class PhotoReader:
    """Reads one selected image at a time for the profile dialog.

    Each selection bumps a generation token and cancels the pending read, so a
    slower, older read can never overwrite a newer pick. ``close`` cancels
    whatever is outstanding when the dialog goes away.
    """

    def __init__(self, on_loaded: Callable[[str], None], *, read_bytes: ReadBytes | None = None):
        self.on_loaded = on_loaded
        self._read_bytes = read_bytes or _read_file
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def select(self, path: str | Path) -> asyncio.Task:
        """Start reading ``path`` on the running loop, superseding any earlier read."""

        self.cancel()
        token = self._generation
        self._task = asyncio.get_running_loop().create_task(self._load(Path(path), token))
        return self._task

    async def read(self, path: str | Path) -> Optional[str]:
        """Select ``path`` and wait; returns None when a later selection or close won."""

        task = self.select(path)
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            return None

    async def _load(self, path: Path, token: int) -> Optional[str]:
        payload = await self._read_bytes(path)
        if token != self._generation:
            logger.debug("Discarding superseded photo read", extra={"path": str(path)})
            return None
        uri = to_data_uri(payload, path)
        self.on_loaded(uri)
        logger.info("Profile photo loaded", extra={"path": str(path), "bytes": len(payload)})
        return uri

    def cancel(self) -> None:
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def close(self) -> None:
        self.cancel()


__all__ = ["PhotoReader", "to_data_uri"]
