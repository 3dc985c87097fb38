"""Exceptions raised by :mod:`microtimer`."""

from __future__ import annotations


class TimerError(RuntimeError):
    """Base class for all timer errors."""


class TimerFrozenError(TimerError):
    """Raised when marking a timer that has already been stopped."""


class TooFewArgumentsError(TimerError, ValueError):
    """Raised when a diff receives fewer than two points."""


class TooManyArgumentsError(TimerError, ValueError):
    """Raised when :meth:`Microtimer.diff` receives more than two points."""


class InvalidKeyError(TimerError, KeyError):
    """Raised when a string point does not name a recorded mark."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class InvalidMarkError(TimerError, ValueError):
    """Raised when a mark-like mapping has no ``timestamp`` field."""


class InvalidArgumentError(TimerError, TypeError):
    """Raised when a point has an unsupported type."""


__all__ = [
    "TimerError",
    "TimerFrozenError",
    "TooFewArgumentsError",
    "TooManyArgumentsError",
    "InvalidKeyError",
    "InvalidMarkError",
    "InvalidArgumentError",
]
