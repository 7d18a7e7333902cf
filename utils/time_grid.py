"""12-hour clock labels and the quarter-hour time grid."""

import math
import re
from datetime import date, datetime
from typing import List, Sequence, Union

from config.constants import AM, PM, HOURS_PER_DAY, SLOT_MINUTES
from config.settings import config
from models.appointment import HourlyTime, ParsedTime

_PERIOD_SPLIT = re.compile(r'(am|pm)', re.IGNORECASE)


def _to_12_hour(hour: int) -> int:
    return 12 if hour % 12 == 0 else hour % 12


def _period(hour: int) -> str:
    return AM if hour < 12 else PM


def generate_time_intervals() -> List[str]:
    """
    Generate the 96 quarter-hour labels of a day.

    Returns:
        Labels like "12:00am", "12:15am", ... "11:45pm" in clock order
    """
    times = []
    for hour in range(HOURS_PER_DAY):
        for minute in SLOT_MINUTES:
            times.append(f"{_to_12_hour(hour)}:{minute}{_period(hour)}")
    return times


def generate_hourly_labels() -> List[HourlyTime]:
    """
    Generate the 24 hourly row labels of the day view.

    Returns:
        HourlyTime entries; plain_time is "2 pm", start_time is "2:00pm"
    """
    labels = []
    for hour in range(HOURS_PER_DAY):
        hour12 = _to_12_hour(hour)
        am_pm = _period(hour)
        labels.append(HourlyTime(
            plain_time=f"{hour12} {am_pm}",
            start_time=f"{hour12}:00{am_pm}"
        ))
    return labels


def _to_number(text: str) -> float:
    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return float('nan')


def parse_time(label: str) -> ParsedTime:
    """
    Parse a label such as "2:30pm" into its components.

    Never raises: a malformed label yields ``nan`` for the numeric parts
    and an empty period when no am/pm suffix is present.

    Args:
        label: 12-hour clock label

    Returns:
        ParsedTime with hours (1-12), minutes (0-59) and am_pm as written
    """
    parts = _PERIOD_SPLIT.split(label or '', maxsplit=1)
    time_part = parts[0]
    am_pm = parts[1] if len(parts) > 1 else ''

    pieces = time_part.split(':')
    hours = _to_number(pieces[0])
    minutes = _to_number(pieces[1]) if len(pieces) > 1 else float('nan')
    return ParsedTime(hours=hours, minutes=minutes, am_pm=am_pm)


def format_to_time_string(value: datetime) -> str:
    """Format the time of day of ``value`` as a label like "9:05am"."""
    hours = value.hour
    am_pm = PM if hours >= 12 else AM
    return f"{hours % 12 or 12}:{value.minute:02d}{am_pm}"


def apply_time_to_date(value: datetime, label: str) -> datetime:
    """
    Return a copy of ``value`` with the hour and minute taken from ``label``.

    Year, month, day and seconds are preserved.

    Args:
        value: Date whose calendar day is kept
        label: 12-hour clock label, e.g. "2:30pm"

    Returns:
        New datetime

    Raises:
        ValueError: if the label cannot be parsed into a valid time
    """
    parsed = parse_time(label)
    if math.isnan(parsed.hours) or math.isnan(parsed.minutes):
        raise ValueError(f"Malformed time label: {label!r}")

    hours = int(parsed.hours)
    am_pm = parsed.am_pm.lower()
    if am_pm == PM and hours != 12:
        hours += 12
    elif am_pm == AM and hours == 12:
        hours = 0

    if isinstance(value, datetime):
        return value.replace(hour=hours, minute=int(parsed.minutes))
    return datetime(value.year, value.month, value.day, hours, int(parsed.minutes))


def is_time_equal_or_after(start_time: str, check_time: str) -> bool:
    """
    Check whether ``check_time`` belongs to the hour row of ``start_time``.

    Only the hour and the am/pm period are compared; minutes are ignored,
    so "2:45pm" matches the "2:00pm" row and no other.
    """
    start = parse_time(start_time)
    check = parse_time(check_time)
    return start.am_pm == check.am_pm and start.hours == check.hours


def time_index(intervals: Sequence[str], label: str) -> int:
    """Position of ``label`` in ``intervals``, or -1 when it is not a grid label."""
    try:
        return intervals.index(label)
    except ValueError:
        return -1


def date_key(value: Union[date, datetime]) -> str:
    """Calendar-day key used to group appointments, e.g. "5/1/2024"."""
    return config.DATE_KEY_FORMAT.format(
        year=value.year,
        month=value.month,
        day=value.day
    )
