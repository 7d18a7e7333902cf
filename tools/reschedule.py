"""Drag-and-drop rescheduling arithmetic."""

import math
from datetime import date, datetime
from typing import Sequence
from models.appointment import Appointment, TimeStamps
from config.constants import SUGGESTED_DURATION_SLOTS, SUGGESTED_FALLBACK_SLOTS
from utils.time_grid import apply_time_to_date, format_to_time_string, parse_time, time_index


def _format_number(value: float, width: int = 1) -> str:
    # nan passes through so a malformed label stays off the grid
    if math.isnan(value):
        return str(value)
    return f"{int(value):0{width}d}"


def time_stamps_difference(time_intervals: Sequence[str], start_time: str, end_time: str) -> int:
    """
    Duration between two labels in grid slots.

    Args:
        time_intervals: Ordered grid labels
        start_time: Start label
        end_time: End label

    Returns:
        end index minus start index (either may be -1 for off-grid labels)
    """
    return time_index(time_intervals, end_time) - time_index(time_intervals, start_time)


def new_start_time(drop_time: str, current_start_time: str) -> str:
    """
    Start label after a drop: hour and period of ``drop_time``, minutes of
    ``current_start_time``.

    Args:
        drop_time: Label of the slot the appointment was dropped on
        current_start_time: Appointment's current start label

    Returns:
        New start label, e.g. "11:30am" for a drop on "11:00am" from "9:30am"
    """
    target = parse_time(drop_time)
    current = parse_time(current_start_time)
    return f"{_format_number(target.hours)}:{_format_number(current.minutes, 2)}{target.am_pm}"


def new_end_time(time_intervals: Sequence[str], start_time: str, slots: int) -> str:
    """
    End label ``slots`` grid positions after ``start_time``.

    Positions past the end of the grid clamp to its last label.
    """
    position = time_index(time_intervals, start_time) + slots
    if 0 <= position < len(time_intervals):
        return time_intervals[position]
    return time_intervals[-1]


def update_date_keep_time(old: datetime, new_date: date) -> datetime:
    """Move ``old`` to the calendar day of ``new_date`` keeping its time of day."""
    return old.replace(year=new_date.year, month=new_date.month, day=new_date.day)


def reschedule_to_time_slot(
    time_intervals: Sequence[str],
    appointment: Appointment,
    drop_time: str
) -> TimeStamps:
    """
    Compute the start/end labels for dropping ``appointment`` on ``drop_time``.

    The duration in grid slots is preserved unless the end clamps at the
    last grid label.

    Returns:
        TimeStamps with the new start and end labels
    """
    start_time = format_to_time_string(appointment.start)
    end_time = format_to_time_string(appointment.end)
    slots = time_stamps_difference(time_intervals, start_time, end_time)
    start = new_start_time(drop_time, start_time)
    return TimeStamps(start=start, end=new_end_time(time_intervals, start, slots))


def with_time_stamps(appointment: Appointment, time_stamps: TimeStamps) -> Appointment:
    """New appointment with the labels applied to the original start/end dates."""
    return Appointment(
        id=appointment.id,
        title=appointment.title,
        description=appointment.description,
        start=apply_time_to_date(appointment.start, time_stamps.start),
        end=apply_time_to_date(appointment.end, time_stamps.end)
    )


def suggested_time_stamps(time_intervals: Sequence[str], start_time: str) -> TimeStamps:
    """
    Default window for a new appointment starting at ``start_time``.

    The end is one hour later, or 45 minutes later when one hour would run
    past the last grid label.
    """
    index = time_index(time_intervals, start_time)
    for slots in (SUGGESTED_DURATION_SLOTS, SUGGESTED_FALLBACK_SLOTS):
        position = index + slots
        if 0 <= position < len(time_intervals):
            return TimeStamps(start=start_time, end=time_intervals[position])
    return TimeStamps(start=start_time, end=time_intervals[-1])
