"""Stateful mark-recording timer."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, TYPE_CHECKING

from .errors import TimerFrozenError, TooFewArgumentsError, TooManyArgumentsError
from .rounding import abs_round_diff
from .types import Mark, resolve_point

if TYPE_CHECKING:
    from .config import TimerConfig

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

DEFAULT_NAME = "default"
DEFAULT_PRECISION = 4
START_KEY = "start"
END_KEY = "end"

_ATTRIBUTES = ("name", "start", "frozen", "precision", "last_key")


class Microtimer:
    """Record named marks relative to creation and to the previous mark.

    Build instances with :meth:`create`. The first mark is always ``start``;
    :meth:`stop` appends ``end`` and freezes the timer for good. Instances
    hold no lock and are meant to be owned by a single thread.
    """

    def __init__(self, name: str, precision: int, clock: Clock = time.time) -> None:
        if precision < 0:
            raise ValueError("precision must be non-negative")
        self._clock = clock
        self._start = clock()
        self._precision = int(precision)
        self._name = name
        self._frozen = False
        self._marks: Dict[str, Mark] = {}
        self._last_key = ""
        logger.debug("Timer %s created at %.6f", name, self._start)
        self.mark(START_KEY, {"message": f"Marker {name} created"})

    @classmethod
    def create(
        cls,
        name: str = DEFAULT_NAME,
        precision: int = DEFAULT_PRECISION,
        clock: Clock = time.time,
    ) -> "Microtimer":
        """Create a timer and record its ``start`` mark."""

        return cls(name, precision, clock=clock)

    @classmethod
    def from_config(cls, config: "TimerConfig", clock: Clock = time.time) -> "Microtimer":
        """Create a timer from a :class:`~microtimer.config.TimerConfig`."""

        return cls.create(config.name, config.precision, clock=clock)

    # --- read-only state -------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def start(self) -> float:
        return self._start

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def last_key(self) -> str:
        return self._last_key

    # --- recording -------------------------------------------------------
    def mark(self, key: str, data: Optional[Mapping[str, Any]] = None) -> Mark:
        """Record the current time under ``key``.

        Caller ``data`` is merged over the computed ``since_start`` and
        ``since_last`` fields. A key that is already taken is stored under
        ``"<key>:<timestamp>"`` instead of replacing the earlier mark.
        """

        if self._frozen:
            raise TimerFrozenError("Unable to mark. The timer has been stopped.")

        ts = self._clock()
        last = self._marks.get(self._last_key)
        payload: Dict[str, Any] = {
            "since_start": self.calc_round(ts, self._start),
            "since_last": self.calc_round(ts, last.timestamp if last is not None else ts),
        }
        payload.update(data or {})

        mark = Mark(key=key, timestamp=ts, data=payload)
        storage_key = self._unique_key(key, ts)
        self._marks[storage_key] = mark
        self._last_key = storage_key
        return mark

    __call__ = mark

    def _unique_key(self, key: str, ts: float) -> str:
        if key not in self._marks:
            return key
        candidate = f"{key}:{ts!r}"
        counter = 1
        while candidate in self._marks:
            # same key twice within one clock tick
            candidate = f"{key}:{ts!r}#{counter}"
            counter += 1
        logger.debug("Mark key %r already used; stored as %r", key, candidate)
        return candidate

    def stop(self) -> float:
        """Mark ``end``, freeze the timer and return the total elapsed time."""

        self.mark(END_KEY, {"message": f"Timer {self._name} stopped"})
        self._frozen = True
        elapsed = self.calc_round(self.get_last_mark().timestamp, self._start)
        logger.debug("Timer %s stopped after %ss", self._name, elapsed)
        return elapsed

    # --- lookups ---------------------------------------------------------
    def get_last_mark(self) -> Mark:
        """Return the most recent mark, or a placeholder stamped with now."""

        mark = self._marks.get(self._last_key)
        if mark is None:
            return Mark(key="", timestamp=self._clock())
        return mark

    def get_mark(self, key: str) -> Optional[Mark]:
        """Return the mark stored under ``key`` or ``None``."""

        return self._marks.get(key)

    def get_attribute(self, name: str) -> Any:
        """Return one of the timer's public attributes by name, or ``None``."""

        if name not in _ATTRIBUTES:
            return None
        return getattr(self, name)

    def marks(self, search_substring: str = "") -> Dict[str, Mark]:
        """Return recorded marks in insertion order.

        With ``search_substring``, keep only marks whose ``key`` contains it,
        ignoring case. Storage keys are preserved.
        """

        if not search_substring:
            return dict(self._marks)
        needle = search_substring.casefold()
        return {k: m for k, m in self._marks.items() if needle in m.key.casefold()}

    # --- arithmetic ------------------------------------------------------
    def calc_round(self, a: float, b: float) -> float:
        """Absolute difference of two timestamps, rounded half-down."""

        return abs_round_diff(a, b, self._precision)

    def since_last(self, ts: Optional[float] = None) -> float:
        """Elapsed time between ``ts`` (falsy: now) and the last mark."""

        if not ts:
            ts = self._clock()
        return self.calc_round(ts, self.get_last_mark().timestamp)

    def _resolve(self, points: tuple) -> List[float]:
        if len(points) < 2:
            raise TooFewArgumentsError("Too few arguments")
        return [resolve_point(point, self.get_mark) for point in points]

    def diff(self, *points: Any) -> float:
        """Elapsed time between exactly two points.

        A point is a mark key, a numeric timestamp, a :class:`Mark`, a mapping
        with a ``timestamp`` field or one of the ``TimePoint`` variants. Use
        :meth:`diff_chain` for more than two points.
        """

        if len(points) > 2:
            raise TooManyArgumentsError(
                f"diff takes exactly two points, got {len(points)}; use diff_chain"
            )
        first, second = self._resolve(points)
        return self.calc_round(first, second)

    def diff_chain(self, *points: Any) -> List[float]:
        """Elapsed time between each pair of consecutive points."""

        stamps = self._resolve(points)
        return [self.calc_round(a, b) for a, b in zip(stamps, stamps[1:])]

    # --- container protocol ----------------------------------------------
    def __len__(self) -> int:
        return len(self._marks)

    def __contains__(self, key: object) -> bool:
        return key in self._marks

    def __iter__(self) -> Iterator[Mark]:
        return iter(list(self._marks.values()))

    def __repr__(self) -> str:
        state = "stopped" if self._frozen else "running"
        return f"Microtimer(name={self._name!r}, marks={len(self._marks)}, {state})"


__all__ = ["Microtimer", "Clock", "DEFAULT_NAME", "DEFAULT_PRECISION", "START_KEY", "END_KEY"]
