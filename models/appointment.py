"""Appointment data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List


@dataclass
class Appointment:
    """Calendar appointment."""

    id: str
    title: str
    description: str
    start: datetime  # Starting date and time
    end: datetime  # Ending date and time

    def copy(self) -> 'Appointment':
        """Return an independent copy (datetimes are immutable)."""
        return Appointment(
            id=self.id,
            title=self.title,
            description=self.description,
            start=self.start,
            end=self.end
        )


# Appointments grouped by date key
Appointments = Dict[str, List[Appointment]]


@dataclass(frozen=True)
class TimeStamps:
    """Start and end labels of an appointment window."""

    start: str  # e.g. "9:00am"
    end: str


@dataclass(frozen=True)
class ParsedTime:
    """Components of a 12-hour clock label.

    Malformed labels produce ``nan`` hours/minutes instead of raising.
    """

    hours: float
    minutes: float
    am_pm: str


@dataclass(frozen=True)
class HourlyTime:
    """Hourly row label for the day view."""

    plain_time: str  # "2 pm"
    start_time: str  # "2:00pm"


@dataclass
class HourlyAppointment:
    """Appointments assigned to one hourly row."""

    plain_time: str
    start_time: str
    data: List[Appointment] = field(default_factory=list)
