"""Core records used by the timer.

A :class:`Mark` is the unit the timer stores. The ``Key``/``Timestamp``/
``MarkRef`` variants describe the points accepted by
:meth:`microtimer.timer.Microtimer.diff`; raw arguments are normalised with
:func:`as_time_point` and turned into timestamps by :func:`resolve_point`,
which never touches the clock or mutates the timer.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Dict, Optional, Union

from .errors import InvalidArgumentError, InvalidKeyError, InvalidMarkError


@dataclass(frozen=True)
class Mark:
    """A keyed point in time plus metadata.

    Attributes
    ----------
    key:
        The key the caller asked for. The storage key may differ when the
        same key was used more than once.
    timestamp:
        Wall-clock seconds at which the mark was taken.
    data:
        ``since_start`` and ``since_last`` merged with caller-supplied fields.
    """

    key: str
    timestamp: float
    data: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        """Return the plain mapping form of the mark."""

        return {"timestamp": self.timestamp, "key": self.key, "data": dict(self.data)}


@dataclass(frozen=True)
class Key:
    """Reference to a recorded mark by storage key."""

    name: str


@dataclass(frozen=True)
class Timestamp:
    """A raw timestamp in seconds."""

    value: float


@dataclass(frozen=True)
class MarkRef:
    """Reference to a mark object held by the caller."""

    mark: Mark


TimePoint = Union[Key, Timestamp, MarkRef]


def as_time_point(value: Any) -> TimePoint:
    """Normalise a raw ``diff`` argument into a :data:`TimePoint`."""

    if isinstance(value, (Key, Timestamp, MarkRef)):
        return value
    if isinstance(value, str):
        return Key(value)
    if isinstance(value, Mark):
        return MarkRef(value)
    if isinstance(value, Real) and not isinstance(value, bool):
        return Timestamp(float(value))
    if isinstance(value, Mapping):
        stamp = value.get("timestamp")
        if stamp is None:
            raise InvalidMarkError("Invalid mapping passed as a mark: missing 'timestamp'")
        if not isinstance(stamp, Real) or isinstance(stamp, bool):
            raise InvalidMarkError(f"Invalid mark timestamp {stamp!r}")
        return Timestamp(float(stamp))
    raise InvalidArgumentError(f"Invalid argument passed: {type(value).__name__}")


def resolve_point(point: Any, lookup: Callable[[str], Optional[Mark]]) -> float:
    """Return the timestamp referenced by ``point``.

    ``lookup`` maps a storage key to a recorded mark or ``None``.
    """

    point = as_time_point(point)
    if isinstance(point, Key):
        mark = lookup(point.name)
        if mark is None:
            raise InvalidKeyError(f"Invalid key {point.name} passed")
        return mark.timestamp
    if isinstance(point, MarkRef):
        return point.mark.timestamp
    return point.value


__all__ = [
    "Mark",
    "Key",
    "Timestamp",
    "MarkRef",
    "TimePoint",
    "as_time_point",
    "resolve_point",
]
