"""Text and JSON renderings of computed time data."""
from __future__ import annotations

import json
from typing import Dict, List, Optional

from ..models.core import DelayReading, TimeData


def format_time_data(
    time_data: TimeData,
    *,
    calibration: Optional[DelayReading] = None,
    target: Optional[DelayReading] = None,
) -> str:
    """Human-readable summary: input pairs (when given) + the three waits."""

    lines: List[str] = ['RNG Timer Time Data']
    if calibration is not None:
        lines.append(_format_reading('Calibration', calibration))
    if target is not None:
        lines.append(_format_reading('Target', target))
    lines.append(f'  Boot time:  {time_data.boot_time:8.3f}s')
    lines.append(f'  Load time:  {time_data.load_time:8.3f}s')
    lines.append(f'  Total time: {time_data.total_time:8.3f}s')
    minutes = 'minute' if time_data.offset == 1 else 'minutes'
    lines.append(f'  Offset:     {time_data.offset} {minutes} before target')
    return '\n'.join(lines) + '\n'


def time_data_to_json(
    time_data: TimeData,
    *,
    calibration: Optional[DelayReading] = None,
    target: Optional[DelayReading] = None,
) -> str:
    """Emit the time data, plus the input pairs when given, as JSON."""

    payload: Dict[str, object] = {'time_data': time_data.to_dict()}
    if calibration is not None:
        payload['calibration'] = _reading_to_dict(calibration)
    if target is not None:
        payload['target'] = _reading_to_dict(target)
    return json.dumps(payload, indent=2)


def _format_reading(label: str, reading: DelayReading) -> str:
    return f'{label}: delay {reading.delay} @ second {reading.second}'


def _reading_to_dict(reading: DelayReading) -> Dict[str, int]:
    return {'delay': reading.delay, 'second': reading.second}
