import math

import pytest

from rng_timer.config.schema import (
    BOOT_TIME_FUDGE,
    DEFAULT_PROFILE,
    MINIMUM_BOOT_TIME,
    SECONDS_PER_MINUTE,
    TARGET_FRAME_RATE,
    CalculatorConfig,
    TimingProfile,
)


def test_default_profile_uses_console_constants() -> None:
    assert DEFAULT_PROFILE.frame_rate == TARGET_FRAME_RATE == 59.8261
    assert DEFAULT_PROFILE.minimum_boot_time == MINIMUM_BOOT_TIME == 14.0
    assert DEFAULT_PROFILE.boot_time_fudge == BOOT_TIME_FUDGE == 0.2
    assert DEFAULT_PROFILE.seconds_per_minute == SECONDS_PER_MINUTE == 60.0


def test_calculator_config_defaults_to_checked_default_profile() -> None:
    cfg = CalculatorConfig()
    assert cfg.checked is True
    assert cfg.profile == DEFAULT_PROFILE


@pytest.mark.parametrize(
    'kwargs',
    [
        {'frame_rate': 0.0},
        {'frame_rate': -59.8},
        {'frame_rate': math.nan},
        {'seconds_per_minute': 0.0},
        {'minimum_boot_time': -1.0},
        {'boot_time_fudge': math.inf},
        {'minimum_boot_time': 1e20},
        {'minimum_boot_time': 60.0},
        {'seconds_per_minute': 1e-300},
        {'boot_time_fudge': -60.0},
    ],
)
def test_timing_profile_rejects_invalid_constants(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        TimingProfile(**kwargs)


def test_timing_profile_accepts_bounds_just_under_a_minute() -> None:
    profile = TimingProfile(seconds_per_minute=30.0, minimum_boot_time=29.9, boot_time_fudge=-29.9)
    assert profile.minimum_boot_time == 29.9
