from __future__ import annotations

import pytest

from microtimer import Key, MarkRef, Microtimer, Timestamp
from microtimer.errors import (
    InvalidArgumentError,
    InvalidKeyError,
    InvalidMarkError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)


@pytest.fixture
def timer(clock) -> Microtimer:
    timer = Microtimer.create(clock=clock)
    clock.advance(0.5)
    timer.mark("A")
    clock.advance(0.25)
    timer.mark("B")
    return timer


def test_diff_between_keys_is_symmetric(timer) -> None:
    assert timer.diff("A", "B") == 0.25
    assert timer.diff("B", "A") == 0.25
    assert timer.diff("start", "B") == 0.75


def test_diff_accepts_mixed_points(timer) -> None:
    b = timer.get_mark("B")
    assert timer.diff(b, 1000.0) == 0.75
    assert timer.diff({"timestamp": 1000.0}, "A") == 0.5
    assert timer.diff(Key("A"), Timestamp(1001.0)) == 0.5
    assert timer.diff(MarkRef(b), 1000) == 0.75
    assert timer.diff(b.as_dict(), "A") == 0.25


@pytest.mark.parametrize("points", [(), ("A",)])
def test_diff_requires_two_points(timer, points) -> None:
    with pytest.raises(TooFewArgumentsError):
        timer.diff(*points)


def test_diff_rejects_more_than_two_points(timer) -> None:
    with pytest.raises(TooManyArgumentsError):
        timer.diff("start", "A", "B")


def test_diff_unknown_key(timer) -> None:
    with pytest.raises(InvalidKeyError):
        timer.diff("missing", "A")


def test_diff_mapping_without_timestamp(timer) -> None:
    with pytest.raises(InvalidMarkError):
        timer.diff({"key": "A"}, "A")


@pytest.mark.parametrize("bad", [None, True, ["A"], 1j])
def test_diff_unsupported_type(timer, bad) -> None:
    with pytest.raises(InvalidArgumentError):
        timer.diff(bad, "A")


def test_diff_chain_returns_consecutive_differences(timer) -> None:
    assert timer.diff_chain("start", "A", "B") == [0.5, 0.25]
    assert timer.diff_chain("B", "A") == [0.25]
    with pytest.raises(TooFewArgumentsError):
        timer.diff_chain("A")


def test_diff_works_after_stop(timer, clock) -> None:
    clock.advance(0.25)
    timer.stop()
    assert timer.diff("start", "end") == 1.0


def test_diff_with_infinite_timestamp_stays_a_float(timer) -> None:
    assert timer.diff(float("inf"), "start") == float("inf")


@pytest.mark.parametrize("stamp", ["abc", "1000.0", True, [1.0]])
def test_diff_mapping_with_non_numeric_timestamp(timer, stamp) -> None:
    with pytest.raises(InvalidMarkError):
        timer.diff({"timestamp": stamp}, "A")
