"""Shared data structures used across the calculator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

Delay = int
Second = int


@dataclass(frozen=True)
class DelayReading:
    """A frame-counter delay observed (or wanted) at a given clock second."""

    delay: Delay
    second: Second


@dataclass(frozen=True)
class TimeData:
    """Waits needed to set the clock, boot the game and load the save file.

    `offset` (a.k.a. "minutes before target") is how far the console clock is
    set behind the real target so the whole sequence fits in whole minutes.
    """

    boot_time: float
    load_time: float
    offset: int

    @property
    def total_time(self) -> float:
        """Seconds between setting the clock and loading the save file."""

        return self.boot_time + self.load_time

    def to_dict(self) -> Dict[str, float]:
        return {
            'boot_time': self.boot_time,
            'load_time': self.load_time,
            'offset': self.offset,
            'total_time': self.total_time,
        }
