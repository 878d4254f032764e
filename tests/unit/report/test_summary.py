import json

import pytest

from rng_timer.models.core import DelayReading, TimeData
from rng_timer.report.summary import format_time_data, time_data_to_json


def _sample() -> TimeData:
    return TimeData(boot_time=65.2, load_time=40.0, offset=1)


def test_format_time_data_lists_waits() -> None:
    text = format_time_data(_sample())

    assert text.startswith('RNG Timer Time Data')
    assert 'Boot time:    65.200s' in text
    assert 'Load time:    40.000s' in text
    assert 'Total time:  105.200s' in text
    assert 'Offset:     1 minute before target' in text
    assert 'Calibration' not in text
    assert text.endswith('\n')


def test_format_time_data_echoes_readings_and_pluralizes() -> None:
    data = TimeData(boot_time=20.0, load_time=110.0, offset=2)
    text = format_time_data(
        data,
        calibration=DelayReading(delay=1000, second=30),
        target=DelayReading(delay=1598, second=45),
    )

    assert 'Calibration: delay 1000 @ second 30' in text
    assert 'Target: delay 1598 @ second 45' in text
    assert '2 minutes before target' in text


def test_time_data_to_json_payload() -> None:
    payload = json.loads(
        time_data_to_json(_sample(), calibration=DelayReading(delay=1000, second=30))
    )

    assert payload['time_data']['boot_time'] == pytest.approx(65.2)
    assert payload['time_data']['offset'] == 1
    assert payload['time_data']['total_time'] == pytest.approx(105.2)
    assert payload['calibration'] == {'delay': 1000, 'second': 30}
    assert 'target' not in payload
