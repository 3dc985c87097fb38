"""Dead-simple timing and profiling with named marks."""

from .config import AppConfig, LoggingConfig, TimerConfig, load_app_config, load_yaml
from .errors import (
    InvalidArgumentError,
    InvalidKeyError,
    InvalidMarkError,
    TimerError,
    TimerFrozenError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)
from .rounding import abs_round_diff, round_half_down
from .timer import Microtimer
from .types import Key, Mark, MarkRef, TimePoint, Timestamp, as_time_point, resolve_point
from .utils import log_mark, setup_logging

__version__ = "1.0.0"

__all__ = [
    "Microtimer",
    "Mark",
    "Key",
    "Timestamp",
    "MarkRef",
    "TimePoint",
    "as_time_point",
    "resolve_point",
    "round_half_down",
    "abs_round_diff",
    "TimerError",
    "TimerFrozenError",
    "TooFewArgumentsError",
    "TooManyArgumentsError",
    "InvalidKeyError",
    "InvalidMarkError",
    "InvalidArgumentError",
    "TimerConfig",
    "LoggingConfig",
    "AppConfig",
    "load_yaml",
    "load_app_config",
    "setup_logging",
    "log_mark",
]
