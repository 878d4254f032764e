"""Command-line entry points for RNG Timer."""
from __future__ import annotations

import argparse
import logging
import math
from typing import Sequence

from ..config.schema import (
    BOOT_TIME_FUDGE,
    MAX_DELAY,
    MAX_SECOND,
    MINIMUM_BOOT_TIME,
    TARGET_FRAME_RATE,
    CalculatorConfig,
    TimingProfile,
)
from ..models.core import DelayReading
from ..models.errors import TimeDataError
from ..report.summary import format_time_data, time_data_to_json
from ..timing.calculator import get_time_data_for

_EXIT_CALCULATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Compute boot/load waits and clock offset to hit a target delay',
    )
    parser.add_argument(
        'calibrated_delay',
        type=_parse_delay,
        help='Delay (frames) actually hit during the calibration run',
    )
    parser.add_argument(
        'calibrated_second',
        type=_parse_second,
        help='Clock second the calibration save was loaded at (0-59)',
    )
    parser.add_argument(
        'target_delay',
        type=_parse_delay,
        help='Delay (frames) to hit',
    )
    parser.add_argument(
        'target_second',
        type=_parse_second,
        help='Clock second to load the save at (0-59)',
    )
    parser.add_argument(
        '--frame-rate',
        type=_parse_positive_float,
        default=TARGET_FRAME_RATE,
        help=f'Console frame rate in frames/s (default {TARGET_FRAME_RATE})',
    )
    parser.add_argument(
        '--min-boot-time',
        type=_parse_non_negative_float,
        default=MINIMUM_BOOT_TIME,
        help=f'Minimum boot wait in seconds (default {MINIMUM_BOOT_TIME})',
    )
    parser.add_argument(
        '--boot-fudge',
        type=_parse_float,
        default=BOOT_TIME_FUDGE,
        help=f'Seconds added to the boot wait for calibration overhead (default {BOOT_TIME_FUDGE})',
    )
    parser.add_argument(
        '--unchecked',
        action='store_true',
        help='Skip validation and reproduce the permissive classic-timer arithmetic.',
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the result as JSON instead of a text summary.',
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        help='Logging level (DEBUG, INFO, WARNING, ...)',
    )
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    logger = logging.getLogger(__name__)

    try:
        profile = TimingProfile(
            frame_rate=args.frame_rate,
            minimum_boot_time=args.min_boot_time,
            boot_time_fudge=args.boot_fudge,
        )
    except ValueError as exc:
        parser.error(str(exc))
    cfg = CalculatorConfig(profile=profile, checked=not args.unchecked)
    logger.debug('Calculator config: %s', cfg)

    calibration = DelayReading(delay=args.calibrated_delay, second=args.calibrated_second)
    target = DelayReading(delay=args.target_delay, second=args.target_second)
    try:
        time_data = get_time_data_for(calibration, target, config=cfg)
    except TimeDataError as exc:
        logger.error('%s', exc)
        return _EXIT_CALCULATION_ERROR
    logger.info(
        'Computed time data | boot=%.3f s load=%.3f s offset=%d min',
        time_data.boot_time,
        time_data.load_time,
        time_data.offset,
    )

    if args.json:
        print(time_data_to_json(time_data, calibration=calibration, target=target))
    else:
        print(format_time_data(time_data, calibration=calibration, target=target), end='')
    return 0


def _parse_delay(value: str) -> int:
    delay = _parse_int(value, 'Delay')
    if not 0 <= delay <= MAX_DELAY:
        raise argparse.ArgumentTypeError(f"Delay must be between 0 and {MAX_DELAY}, got {delay}.")
    return delay


def _parse_second(value: str) -> int:
    second = _parse_int(value, 'Second')
    if not 0 <= second <= MAX_SECOND:
        raise argparse.ArgumentTypeError(f"Second must be between 0 and {MAX_SECOND}, got {second}.")
    return second


def _parse_int(value: str, label: str) -> int:
    stripped = value.strip()
    if not stripped:
        raise argparse.ArgumentTypeError(f'{label} must be non-empty.')
    try:
        return int(stripped)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid {label.lower()} '{value}'.") from exc


def _parse_positive_float(value: str) -> float:
    number = _parse_float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive number, got '{value}'.")
    return number


def _parse_non_negative_float(value: str) -> float:
    number = _parse_float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative number, got '{value}'.")
    return number


def _parse_float(value: str) -> float:
    try:
        number = float(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'.") from exc
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"Expected a finite number, got '{value}'.")
    return number
