"""Configuration dataclasses and timing constants for the calculator."""
from __future__ import annotations

import math
from dataclasses import dataclass

SECONDS_PER_MINUTE = 60.0
TARGET_FRAME_RATE = 59.8261  # Nintendo DS refresh rate [frames/s]
MINIMUM_BOOT_TIME = 14.0
# Compensates for the overhead of the calibration run.
BOOT_TIME_FUDGE = 0.2

MAX_DELAY = 0xFFFFFFFF
MAX_SECOND = 59
MAX_OFFSET = 0xFF


@dataclass(frozen=True)
class TimingProfile:
    """Clock-domain constants the calculator works in."""

    frame_rate: float = TARGET_FRAME_RATE
    minimum_boot_time: float = MINIMUM_BOOT_TIME
    boot_time_fudge: float = BOOT_TIME_FUDGE
    seconds_per_minute: float = SECONDS_PER_MINUTE

    def __post_init__(self) -> None:
        for name in ('frame_rate', 'seconds_per_minute'):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
        if not math.isfinite(self.minimum_boot_time) or self.minimum_boot_time < 0:
            raise ValueError(
                f"minimum_boot_time must be non-negative, got {self.minimum_boot_time!r}"
            )
        if not math.isfinite(self.boot_time_fudge):
            raise ValueError(f"boot_time_fudge must be finite, got {self.boot_time_fudge!r}")
        # Both bounds keep the boot-time normalization to at most three minutes.
        if self.minimum_boot_time >= self.seconds_per_minute:
            raise ValueError(
                f"minimum_boot_time ({self.minimum_boot_time!r}) must be shorter than "
                f"a minute ({self.seconds_per_minute!r})"
            )
        if abs(self.boot_time_fudge) >= self.seconds_per_minute:
            raise ValueError(
                f"boot_time_fudge ({self.boot_time_fudge!r}) must be shorter than "
                f"a minute ({self.seconds_per_minute!r})"
            )


DEFAULT_PROFILE = TimingProfile()


@dataclass(frozen=True)
class CalculatorConfig:
    """High-level knobs for a time-data calculation.

    With `checked` disabled the calculator skips input validation and follows
    the permissive arithmetic of the classic timers: the delay difference
    wraps like an unsigned 32-bit counter, a non-positive load time is only
    logged, and the minute offset wraps into a byte.
    """

    profile: TimingProfile = DEFAULT_PROFILE
    checked: bool = True
