"""Conversions between frame counts and seconds."""
from __future__ import annotations

import math

from ..config.schema import DEFAULT_PROFILE, MAX_DELAY, TimingProfile
from ..models.core import Delay
from ..models.errors import DelayOutOfRangeError


def delay_to_second(delay: Delay, *, profile: TimingProfile = DEFAULT_PROFILE) -> float:
    """Convert a delay (or a signed delay difference) in frames to seconds."""

    return delay / profile.frame_rate


def second_to_delay(seconds: float, *, profile: TimingProfile = DEFAULT_PROFILE) -> Delay:
    """Convert seconds to a whole number of frames, truncating toward zero."""

    frames = seconds * profile.frame_rate
    if not math.isfinite(frames) or frames < 0 or frames >= MAX_DELAY + 1:
        raise DelayOutOfRangeError('delay', frames, 0, MAX_DELAY)
    return int(frames)
