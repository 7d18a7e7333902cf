"""Read models and drop handlers for the day and month views."""

from datetime import date, datetime
from typing import List, Optional, Tuple, Union
from models.appointment import Appointment, HourlyAppointment
from services.appointment_store import AppointmentStore
from services.date_manager import DateManager
from tools.day_bucketer import create_hourly_appointments
from tools.month_grid import get_dates_in_selected_month
from utils.logger import setup_logger

logger = setup_logger(__name__)


class DayViewService:
    """Hourly rows for the selected date."""

    def __init__(self, store: AppointmentStore, date_manager: DateManager):
        self.store = store
        self.date_manager = date_manager

    def day_appointments(self) -> List[HourlyAppointment]:
        """
        Get the selected date's appointments grouped into hourly rows.

        Returns:
            24 HourlyAppointment rows
        """
        current_date = self.date_manager.get_current_date()
        return create_hourly_appointments(self.store.appointments_on(current_date))

    def move_appointment_to_time_slot(self, appointment: Appointment, new_start_time: str) -> Appointment:
        """
        Handle a drop of an appointment on an hourly row.

        Args:
            appointment: Dropped appointment
            new_start_time: Row label, e.g. "3:00pm"

        Returns:
            The saved appointment
        """
        return self.store.move_to_time_slot(appointment, new_start_time)

    def create_new_appointment(self, start_time: str) -> Appointment:
        """
        Blank appointment on the selected date starting at ``start_time``.

        Args:
            start_time: Label of the clicked row

        Returns:
            Unsaved appointment with the suggested one-hour window
        """
        current_date = self.date_manager.get_current_date()
        time_stamps = self.store.suggested_time_stamps_from(start_time)
        return self.store.make_default(current_date, time_stamps)


class MonthViewService:
    """Month grid for the selected date."""

    def __init__(self, store: AppointmentStore, date_manager: DateManager):
        self.store = store
        self.date_manager = date_manager

    def weeks(self) -> List[List[date]]:
        return get_dates_in_selected_month(self.date_manager.get_current_date())

    def month_appointments(self) -> List[List[Tuple[date, List[Appointment]]]]:
        """
        Get every grid cell of the selected month with its appointments.

        Returns:
            Weeks of (date, appointments) pairs
        """
        return [
            [(day, self.store.appointments_on(day)) for day in week]
            for week in self.weeks()
        ]

    def is_today(self, day: Union[date, datetime]) -> bool:
        return self.date_manager.is_today(day)

    def drop_appointment(self, appointment: Appointment, new_date: Union[date, datetime]) -> None:
        """Handle a drop of an appointment on another day cell."""
        logger.debug(f"Appointment {appointment.id} dropped on {new_date}")
        self.store.move_to_date(appointment, new_date)

    def appointment_for(self, day: Union[date, datetime], appointment: Optional[Appointment] = None) -> Appointment:
        """The given appointment, or a blank default one for ``day``."""
        return appointment or self.store.make_default(day)
