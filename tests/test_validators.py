"""Tests for validation helpers."""

from config.settings import Config
from models.appointment import TimeStamps
from utils.time_grid import generate_time_intervals
from utils.validators import (
    sanitize_input,
    validate_datetime,
    validate_required_fields,
    validate_time_range,
)

GRID = generate_time_intervals()


def test_time_range_mismatch():
    """Identical start and end is a mismatch."""
    assert validate_time_range(GRID, TimeStamps('2:00pm', '2:00pm')) == {'time_mismatch': True}


def test_time_range_order():
    """Start after end is an ordering error."""
    assert validate_time_range(GRID, TimeStamps('3:00pm', '2:00pm')) == {'time_order': True}


def test_time_range_valid():
    """Start before end passes."""
    assert validate_time_range(GRID, TimeStamps('2:00pm', '3:00pm')) is None
    assert validate_time_range(GRID, TimeStamps('12:00am', '11:45pm')) is None


def test_time_range_off_grid_label_is_order_error():
    """Labels missing from the grid are never accepted."""
    assert validate_time_range(GRID, TimeStamps('2:10pm', '3:00pm')) == {'time_order': True}
    assert validate_time_range(GRID, TimeStamps('bogus', 'nonsense')) == {'time_order': True}
    assert validate_time_range(GRID, TimeStamps('2:00pm', 'bogus')) == {'time_order': True}


def test_required_fields():
    """Blank or missing values are flagged per field."""
    values = {'title': '  ', 'start': '9:00am', 'end': None}
    assert validate_required_fields(values) == {
        'required_title': True,
        'required_end': True,
        'required_description': True,
    }
    assert validate_required_fields({'title': 'Gym'}, fields=['title']) == {}


def test_validate_datetime():
    """ISO dates and datetimes parse, junk does not."""
    assert validate_datetime('2024-05-02').day == 2
    assert validate_datetime('2024-05-02T10:30:00').hour == 10
    assert validate_datetime('yesterday') is None
    assert validate_datetime(None) is None


def test_sanitize_input():
    """Markup characters are stripped and length capped."""
    assert sanitize_input('  <b>Lunch</b> ') == 'bLunch/b'
    assert sanitize_input('x' * 50, max_length=10) == 'x' * 10
    assert sanitize_input('') == ''


def test_config_validate(monkeypatch):
    """A broken date key template is reported."""
    assert Config.validate() == True
    monkeypatch.setattr(Config, 'DATE_KEY_FORMAT', '{weekday}')
    assert Config.validate() == False
