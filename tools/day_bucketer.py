"""Grouping of a day's appointments into hourly rows."""

from typing import List, Sequence
from models.appointment import Appointment, HourlyAppointment
from utils.time_grid import format_to_time_string, generate_hourly_labels, is_time_equal_or_after


def create_hourly_appointments(appointments: Sequence[Appointment]) -> List[HourlyAppointment]:
    """
    Build the 24 hourly rows of the day view.

    Each appointment goes to the row whose hour and period match its start
    (minutes are ignored), keeping the input order within a row.

    Args:
        appointments: Appointments of a single day

    Returns:
        One HourlyAppointment per hour, from "12 am" to "11 pm"
    """
    starts = [(appointment, format_to_time_string(appointment.start)) for appointment in appointments]
    return [
        HourlyAppointment(
            plain_time=label.plain_time,
            start_time=label.start_time,
            data=[
                appointment for appointment, start in starts
                if is_time_equal_or_after(label.start_time, start)
            ]
        )
        for label in generate_hourly_labels()
    ]
