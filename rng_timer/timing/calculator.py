"""Time-data calculation: clock/boot/load waits that hit a target delay."""
from __future__ import annotations

import logging
import math
from typing import Optional

from ..config.schema import MAX_DELAY, MAX_OFFSET, MAX_SECOND, CalculatorConfig
from ..models.core import Delay, DelayReading, Second, TimeData
from ..models.errors import (
    DelayOutOfRangeError,
    InvalidCalibrationError,
    OffsetOverflowError,
    SecondOutOfRangeError,
)
from .convert import delay_to_second

logger = logging.getLogger(__name__)


def get_time_data(
    calibrated_delay: Delay,
    calibrated_second: Second,
    target_delay: Delay,
    target_second: Second,
    *,
    config: Optional[CalculatorConfig] = None,
) -> TimeData:
    """Compute the waits needed to hit `target_delay` at `target_second`.

    The calibration pair is a delay actually hit when loading at
    `calibrated_second`. The load time is the calibration second shifted by
    the frame difference to the target; the boot time then fills the rest of
    the minute up to the target second, pushed past the minimum boot time
    one minute at a time. `offset` is the number of whole minutes the full
    sequence spans.

    Raises `TimeDataError` subclasses for out-of-range inputs, an unreachable
    target or an offset that does not fit in a byte, unless the config is
    unchecked.
    """

    cfg = config or CalculatorConfig()
    profile = cfg.profile

    if cfg.checked:
        _check_delay('calibrated_delay', calibrated_delay)
        _check_second('calibrated_second', calibrated_second)
        _check_delay('target_delay', target_delay)
        _check_second('target_second', target_second)
        delay_diff = target_delay - calibrated_delay
    else:
        delay_diff = (int(target_delay) - int(calibrated_delay)) & MAX_DELAY

    load_time = delay_to_second(delay_diff, profile=profile) + float(calibrated_second)
    if not load_time > 0.0:
        if cfg.checked:
            raise InvalidCalibrationError(load_time)
        logger.warning('Non-positive load time %.3f s (unchecked mode)', load_time)

    boot_time = (
        math.fmod(float(target_second) - load_time, profile.seconds_per_minute)
        + profile.boot_time_fudge
    )
    # fmod is above -seconds_per_minute and TimingProfile keeps the fudge and the
    # minimum under a minute, so this runs at most three times (twice by default).
    minutes_added = 0
    while boot_time < profile.minimum_boot_time:
        boot_time += profile.seconds_per_minute
        minutes_added += 1

    offset = math.floor((boot_time + load_time) / profile.seconds_per_minute)
    if offset > MAX_OFFSET or offset < 0:
        if cfg.checked:
            raise OffsetOverflowError(offset, MAX_OFFSET)
        logger.warning('Offset %d does not fit in a byte (unchecked mode)', offset)
        offset &= MAX_OFFSET

    logger.debug(
        'Time data | load=%.3f s boot=%.3f s (+%d min) offset=%d min',
        load_time,
        boot_time,
        minutes_added,
        offset,
    )
    return TimeData(boot_time=boot_time, load_time=load_time, offset=offset)


def get_time_data_for(
    calibration: DelayReading,
    target: DelayReading,
    *,
    config: Optional[CalculatorConfig] = None,
) -> TimeData:
    """Same as `get_time_data` for callers holding reading pairs."""

    return get_time_data(
        calibration.delay,
        calibration.second,
        target.delay,
        target.second,
        config=config,
    )


def _check_delay(name: str, value: Delay) -> None:
    if not _is_int(value) or not 0 <= value <= MAX_DELAY:
        raise DelayOutOfRangeError(name, value, 0, MAX_DELAY)


def _check_second(name: str, value: Second) -> None:
    if not _is_int(value) or not 0 <= value <= MAX_SECOND:
        raise SecondOutOfRangeError(name, value, 0, MAX_SECOND)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
