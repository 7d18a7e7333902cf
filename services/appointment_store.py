"""Authoritative appointment state with persistence and change notification."""

import uuid
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Tuple, Union
from pydantic import ValidationError
from config.constants import DEFAULT_END_TIME, DEFAULT_START_TIME
from config.settings import config
from models.appointment import Appointment, Appointments, TimeStamps
from models.snapshot import deserialize_appointments, serialize_appointments
from services.notifier import ChangeNotifier
from services.storage import KeyValueStore
from tools.reschedule import (
    reschedule_to_time_slot,
    suggested_time_stamps,
    update_date_keep_time,
    with_time_stamps,
)
from utils.logger import setup_logger, ContextLogger
from utils.time_grid import apply_time_to_date, date_key, generate_time_intervals

logger = setup_logger(__name__)


def copy_appointments(appointments: Appointments) -> Appointments:
    """Deep copy of a date-keyed appointment collection."""
    return {key: [appointment.copy() for appointment in items] for key, items in appointments.items()}


def group_appointments_by_date(appointments: Iterable[Appointment]) -> Appointments:
    """Group appointments by the date key of their start, keeping input order."""
    grouped: Appointments = {}
    for appointment in appointments:
        grouped.setdefault(date_key(appointment.start), []).append(appointment)
    return grouped


class AppointmentStore:
    """
    Owns every appointment, grouped by the date key of its start.

    Each mutation runs to completion, writes the snapshot to the key-value
    store and then notifies observers with a copy of the collection.
    """

    def __init__(self, storage: KeyValueStore, storage_key: Optional[str] = None):
        """
        Initialize the store and load the persisted snapshot.

        Args:
            storage: Key-value backend holding the snapshot
            storage_key: Key of the snapshot (defaults to APPOINTMENTS_STORAGE_KEY)
        """
        self.storage = storage
        self.storage_key = storage_key or config.APPOINTMENTS_STORAGE_KEY
        self.time_intervals: Tuple[str, ...] = tuple(generate_time_intervals())
        self._appointments = self._load()
        self._changes: ChangeNotifier[Appointments] = ChangeNotifier(copy_appointments(self._appointments))

    def subscribe(self, observer: Callable[[Appointments], None]) -> Callable[[], None]:
        """
        Receive the full collection now and after every mutation.

        Args:
            observer: Called with a copy of the collection

        Returns:
            Callable that detaches the observer
        """
        return self._changes.subscribe(observer)

    def get_all(self) -> Appointments:
        """Copy of the current collection; changing it does not affect the store."""
        return copy_appointments(self._appointments)

    def appointments_on(self, day: Union[date, datetime]) -> List[Appointment]:
        """Copies of the appointments starting on ``day``."""
        return [appointment.copy() for appointment in self._appointments.get(date_key(day), [])]

    def save(self, appointment: Appointment) -> None:
        """
        Add a new appointment or replace the one with the same id.

        The appointment is filed under the date key of its current start,
        so a changed date moves it to the right bucket.

        Args:
            appointment: Appointment to store
        """
        ctx_logger = ContextLogger(logger, appointment_id=appointment.id)
        everything = [
            item for items in self._appointments.values() for item in items
            if item.id != appointment.id
        ]
        replaced = sum(len(items) for items in self._appointments.values()) - len(everything)
        everything.append(appointment.copy())

        self._commit(group_appointments_by_date(everything))
        ctx_logger.info(
            f"{'Updated' if replaced else 'Created'} appointment on {date_key(appointment.start)}"
        )

    def delete(self, appointment_id: str) -> None:
        """
        Delete an appointment by id from whichever date holds it.

        A missing id is not an error.

        Args:
            appointment_id: ID of the appointment to delete
        """
        ctx_logger = ContextLogger(logger, appointment_id=appointment_id)
        updated: Appointments = {}
        removed = 0
        for key, items in self._appointments.items():
            kept = [item.copy() for item in items if item.id != appointment_id]
            removed += len(items) - len(kept)
            if kept:
                updated[key] = kept

        self._commit(updated)
        if removed:
            ctx_logger.info("Appointment deleted")
        else:
            ctx_logger.debug("Appointment not found, nothing deleted")

    def move_to_date(self, appointment: Appointment, new_date: Union[date, datetime]) -> None:
        """
        Move an appointment to another day keeping its start and end times.

        The passed-in appointment is modified in place before it is saved.

        Args:
            appointment: Appointment to move
            new_date: Target calendar day
        """
        appointment.start = update_date_keep_time(appointment.start, new_date)
        appointment.end = update_date_keep_time(appointment.end, new_date)
        ContextLogger(logger, appointment_id=appointment.id).debug(
            f"Moving appointment to {date_key(new_date)}"
        )
        self.save(appointment)

    def move_to_time_slot(self, appointment: Appointment, new_start_time: str) -> Appointment:
        """
        Move an appointment dropped on the time slot ``new_start_time``.

        Only the hour of the slot is used; the appointment keeps its minutes
        and its length in grid slots, with the end clamped to the last slot.
        When the new start and end labels coincide the appointment is saved
        unchanged.

        Args:
            appointment: Appointment being dropped
            new_start_time: Label of the target slot, e.g. "11:00am"

        Returns:
            The saved appointment
        """
        ctx_logger = ContextLogger(logger, appointment_id=appointment.id)
        time_stamps = reschedule_to_time_slot(self.time_intervals, appointment, new_start_time)

        if time_stamps.start == time_stamps.end:
            ctx_logger.debug(f"Drop on {new_start_time} collapses to {time_stamps.start}, keeping times")
            self.save(appointment)
            return appointment

        updated = with_time_stamps(appointment, time_stamps)
        ctx_logger.debug(f"Rescheduling to {time_stamps.start}-{time_stamps.end}")
        self.save(updated)
        return updated

    def make_default(self, day: Union[date, datetime], time_stamps: Optional[TimeStamps] = None) -> Appointment:
        """
        Create (without saving) a blank appointment on ``day``.

        Args:
            day: Calendar day of the appointment
            time_stamps: Start/end labels, 12:00am-1:00am by default

        Returns:
            Appointment with a new unique id
        """
        time_stamps = time_stamps or TimeStamps(start=DEFAULT_START_TIME, end=DEFAULT_END_TIME)
        return Appointment(
            id=str(uuid.uuid4()),
            title='',
            description='',
            start=apply_time_to_date(day, time_stamps.start),
            end=apply_time_to_date(day, time_stamps.end)
        )

    def suggested_time_stamps_from(self, start_time: str) -> TimeStamps:
        """One-hour window starting at ``start_time``, shortened near midnight."""
        return suggested_time_stamps(self.time_intervals, start_time)

    def _commit(self, appointments: Appointments) -> None:
        # A failed write leaves the in-memory state and observers untouched
        self.storage.write(self.storage_key, serialize_appointments(appointments))
        self._appointments = appointments
        self._changes.publish(copy_appointments(appointments))

    def _load(self) -> Appointments:
        raw = self.storage.read(self.storage_key)
        if raw is None:
            logger.info(f"No stored appointments under '{self.storage_key}', starting empty")
            return {}

        try:
            stored = deserialize_appointments(raw)
        except ValidationError as e:
            logger.error(f"Stored appointments under '{self.storage_key}' are unreadable, starting empty: {e}")
            return {}

        # Stored keys may come from another DATE_KEY_FORMAT; file by start date again
        appointments = group_appointments_by_date(
            appointment for items in stored.values() for appointment in items
        )
        if set(appointments) != set(stored):
            logger.warning(f"Re-keyed stored appointments under '{self.storage_key}' by start date")

        count = sum(len(items) for items in appointments.values())
        logger.info(f"Loaded {count} appointments across {len(appointments)} days")
        return appointments
