"""Errors raised while computing time data."""
from __future__ import annotations

from typing import Union


class TimeDataError(ValueError):
    """Base class for calculator failures."""


class InvalidCalibrationError(TimeDataError):
    """The target pair cannot be reached from the calibration pair."""

    def __init__(self, load_time: float) -> None:
        super().__init__(
            f"Load time must be positive, got {load_time:.3f}s; "
            'the target delay is not reachable from the calibration.'
        )
        self.load_time = load_time


class OffsetOverflowError(TimeDataError):
    """The minute offset does not fit in a byte."""

    def __init__(self, offset: int, limit: int) -> None:
        super().__init__(f"Offset of {offset} minutes exceeds the {limit} minute limit.")
        self.offset = offset
        self.limit = limit


class _RangeError(TimeDataError):
    def __init__(self, name: str, value: Union[int, float], low: int, high: int) -> None:
        super().__init__(f"{name} must be in [{low}, {high}], got {value!r}.")
        self.name = name
        self.value = value


class SecondOutOfRangeError(_RangeError):
    """A clock second outside 0-59."""


class DelayOutOfRangeError(_RangeError):
    """A frame count outside the unsigned 32-bit counter range."""
