"""Dev-mode diagnostics for tracker actions."""

from __future__ import annotations

import traceback
from typing import Any, Mapping

from .config import BaseConfig
from .logging_config import get_logger

logger = get_logger("dev")


def in_dev_mode(config: BaseConfig | None) -> bool:
    return config is not None and bool(getattr(config, "DEV_MODE", False))


def format_dev_line(message: str, context: Mapping[str, Any] | None = None) -> str:
    """Render ``[DEV] message (k=v ...)`` for console output."""

    line = f"[DEV] {message}"
    if context:
        extras = " ".join(f"{k}={v}" for k, v in context.items())
        if extras:
            line = f"{line} ({extras})"
    return line


def dev_log(
    config: BaseConfig | None,
    message: str,
    *,
    exc: Exception | None = None,
    context: Mapping[str, Any] | None = None,
) -> None:
    """Echo a tracker action to the console and the dev logger when dev mode is on."""

    if not in_dev_mode(config):
        return

    print(format_dev_line(message, context))
    logger.debug(message, extra={"context": dict(context or {})})
    if exc:
        traceback.print_exception(exc)
