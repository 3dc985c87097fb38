"""Configuration utilities for :mod:`microtimer`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .timer import DEFAULT_NAME, DEFAULT_PRECISION


@dataclass
class TimerConfig:
    """Options passed to :meth:`Microtimer.create`."""

    name: str = DEFAULT_NAME
    precision: int = DEFAULT_PRECISION


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True
    timer_level: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    timer: TimerConfig = field(default_factory=TimerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise TypeError(f"{path} must contain a mapping")
    return data


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``."""

    raw = load_yaml(path)
    timer = raw.get("timer") or {}
    logging_cfg = raw.get("logging") or {}

    precision = int(timer.get("precision", DEFAULT_PRECISION))
    if precision < 0:
        raise ValueError("timer.precision must be non-negative")

    return AppConfig(
        timer=TimerConfig(
            name=str(timer.get("name", DEFAULT_NAME)),
            precision=precision,
        ),
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
            timer_level=_optional_str(logging_cfg.get("timer_level")),
        ),
    )


__all__ = ["TimerConfig", "LoggingConfig", "AppConfig", "load_yaml", "load_app_config"]
