"""Logging helpers for code that records timer marks."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..types import Mark


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
    timer_level: Optional[str] = None,
) -> None:
    """Route all records through a single :class:`~rich.logging.RichHandler`.

    ``timer_level`` sets the ``microtimer`` logger on its own, so the timer's
    DEBUG records can be switched on without lowering the root level.
    """

    handler = RichHandler(console=console or Console(), rich_tracebacks=rich_tracebacks, show_path=False)
    logging.basicConfig(
        level=_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    timer_logger = logging.getLogger("microtimer")
    timer_logger.setLevel(logging.NOTSET if timer_level is None else _level(timer_level))


def log_mark(logger: logging.Logger, storage_key: str, mark: Mark, level: int = logging.INFO) -> None:
    """Emit one log record describing ``mark``."""

    extras = {k: v for k, v in mark.data.items() if k not in ("since_start", "since_last")}
    logger.log(
        level,
        "%s: +%ss since start, +%ss since last %s",
        storage_key,
        mark.data.get("since_start"),
        mark.data.get("since_last"),
        extras or "",
    )


__all__ = ["setup_logging", "log_mark"]
