"""Millisecond-resolution durations."""

from __future__ import annotations

import functools
from datetime import timedelta

_MS_PER_SECOND = 1000


@functools.total_ordering
class Duration:
    """A non-negative duration with millisecond resolution.

    Instances are immutable, so augmented assignment (``+=``, ``%=``, ...)
    rebinds the name to a new instance.
    """

    __slots__ = ("_ms",)

    def __init__(self, milliseconds: int | timedelta | Duration = 0) -> None:
        if isinstance(milliseconds, Duration):
            value = milliseconds._ms
        elif isinstance(milliseconds, timedelta):
            value = (
                milliseconds.days * 86_400_000
                + milliseconds.seconds * _MS_PER_SECOND
                + milliseconds.microseconds // 1000
            )
        elif isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
            raise TypeError(
                f"Duration needs an integer number of milliseconds, got {milliseconds!r}"
            )
        else:
            value = milliseconds
        if value < 0:
            raise ValueError(f"Duration cannot be negative: {value} ms")
        self._ms = value

    def to_sec(self) -> float:
        """Return the duration in seconds."""
        return self._ms / _MS_PER_SECOND

    def to_msec(self) -> int:
        """Return the duration in milliseconds."""
        return self._ms

    def to_timedelta(self) -> timedelta:
        """Return the duration as a :class:`datetime.timedelta`."""
        return timedelta(milliseconds=self._ms)

    @staticmethod
    def _count(value: object) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        return value

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ms + other._ms)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._ms - other._ms)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self._ms * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> int | Duration:
        if isinstance(other, Duration):
            return self._ms // other._ms
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self._ms // other)

    def __mod__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self._ms % other._ms)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self._ms % other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms < other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __int__(self) -> int:
        return self._ms

    def __repr__(self) -> str:
        return f"Duration({self._ms})"