"""Tests for the time grid and 12-hour clock helpers."""

import math
from datetime import date, datetime

import pytest

from config.settings import config
from utils.time_grid import (
    apply_time_to_date,
    date_key,
    format_to_time_string,
    generate_hourly_labels,
    generate_time_intervals,
    is_time_equal_or_after,
    parse_time,
    time_index,
)


def test_time_intervals_cover_the_day():
    """96 quarter-hour labels from midnight to 11:45pm."""
    intervals = generate_time_intervals()

    assert len(intervals) == 96
    assert intervals[0] == '12:00am'
    assert intervals[1] == '12:15am'
    assert intervals[4] == '1:00am'
    assert intervals[47] == '11:45am'
    assert intervals[48] == '12:00pm'
    assert intervals[52] == '1:00pm'
    assert intervals[-1] == '11:45pm'


def test_time_intervals_are_strictly_ordered():
    """Each label is later on the clock than the one before it."""
    base = datetime(2024, 5, 1)
    times = [apply_time_to_date(base, label) for label in generate_time_intervals()]

    assert all(earlier < later for earlier, later in zip(times, times[1:]))
    assert len(set(generate_time_intervals())) == 96


def test_hourly_labels():
    """24 rows with spaced plain labels and compact start labels."""
    labels = generate_hourly_labels()

    assert len(labels) == 24
    assert labels[0].plain_time == '12 am'
    assert labels[0].start_time == '12:00am'
    assert labels[12].plain_time == '12 pm'
    assert labels[14].start_time == '2:00pm'
    assert labels[23].plain_time == '11 pm'


def test_parse_time():
    """Labels split into hours, minutes and period."""
    parsed = parse_time('2:30pm')
    assert parsed.hours == 2
    assert parsed.minutes == 30
    assert parsed.am_pm == 'pm'

    upper = parse_time('12:05AM')
    assert upper.hours == 12
    assert upper.minutes == 5
    assert upper.am_pm == 'AM'


def test_parse_time_malformed_does_not_raise():
    """Malformed labels produce nan fields instead of errors."""
    parsed = parse_time('lunchtime')
    assert math.isnan(parsed.hours)
    assert math.isnan(parsed.minutes)
    assert parsed.am_pm == ''

    no_minutes = parse_time('3pm')
    assert no_minutes.hours == 3
    assert math.isnan(no_minutes.minutes)


def test_format_to_time_string():
    """Midnight and noon both render as 12, minutes are padded."""
    assert format_to_time_string(datetime(2024, 5, 1, 0, 0)) == '12:00am'
    assert format_to_time_string(datetime(2024, 5, 1, 12, 5)) == '12:05pm'
    assert format_to_time_string(datetime(2024, 5, 1, 9, 45)) == '9:45am'
    assert format_to_time_string(datetime(2024, 5, 1, 23, 15)) == '11:15pm'


def test_apply_time_to_date_keeps_day_and_seconds():
    """Only hour and minute change."""
    original = datetime(2024, 5, 1, 7, 13, 42)

    assert apply_time_to_date(original, '2:30pm') == datetime(2024, 5, 1, 14, 30, 42)
    assert apply_time_to_date(original, '12:15am') == datetime(2024, 5, 1, 0, 15, 42)
    assert apply_time_to_date(original, '12:45pm') == datetime(2024, 5, 1, 12, 45, 42)
    assert apply_time_to_date(date(2024, 5, 1), '9:00am') == datetime(2024, 5, 1, 9, 0)


def test_apply_then_format_returns_label():
    """Every grid label survives being applied to a date and formatted back."""
    any_date = datetime(2023, 12, 31, 18, 59, 1)
    for label in generate_time_intervals():
        assert format_to_time_string(apply_time_to_date(any_date, label)) == label


def test_apply_time_to_date_rejects_malformed_label():
    """A datetime cannot carry a nan hour."""
    with pytest.raises(ValueError):
        apply_time_to_date(datetime(2024, 5, 1), 'noon')


def test_is_time_equal_or_after_compares_hour_only():
    """Minutes are ignored, hour and period must match."""
    assert is_time_equal_or_after('2:00pm', '2:45pm') == True
    assert is_time_equal_or_after('2:00pm', '2:00pm') == True
    assert is_time_equal_or_after('2:00pm', '3:00pm') == False
    assert is_time_equal_or_after('2:00pm', '2:45am') == False
    assert is_time_equal_or_after('2:00pm', 'garbage') == False


def test_time_index():
    """Grid positions, -1 for off-grid labels."""
    intervals = generate_time_intervals()
    assert time_index(intervals, '12:00am') == 0
    assert time_index(intervals, '9:00am') == 36
    assert time_index(intervals, '9:10am') == -1


def test_date_key_default_format():
    """Month/day/year without padding."""
    assert date_key(datetime(2024, 5, 1, 23, 59)) == '5/1/2024'
    assert date_key(date(2024, 12, 25)) == '12/25/2024'


def test_date_key_configurable(monkeypatch):
    """DATE_KEY_FORMAT controls the key layout."""
    monkeypatch.setattr(config, 'DATE_KEY_FORMAT', '{year}-{month:02d}-{day:02d}')
    assert date_key(date(2024, 5, 1)) == '2024-05-01'
