"""Create/edit form logic for a single appointment."""

from datetime import date, datetime
from typing import Any, Dict, Optional
from config.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from models.appointment import Appointment, TimeStamps
from services.appointment_store import AppointmentStore
from utils.logger import setup_logger, ContextLogger
from utils.time_grid import apply_time_to_date, format_to_time_string
from utils.validators import (
    sanitize_input,
    validate_datetime,
    validate_required_fields,
    validate_time_range,
)

logger = setup_logger(__name__)

FORM_FIELDS = ('id', 'date', 'title', 'start', 'end', 'description')


class AppointmentForm:
    """Form values for one appointment plus their validation state."""

    def __init__(self, store: AppointmentStore, values: Dict[str, Any], is_existing: bool = False):
        self.store = store
        self.values = values
        self.is_existing = is_existing
        self.ctx_logger = ContextLogger(logger, appointment_id=values.get('id'))

    @classmethod
    def from_appointment(cls, store: AppointmentStore, appointment: Appointment) -> 'AppointmentForm':
        """
        Build a form prefilled from an appointment.

        An appointment with a title is treated as existing (edit mode);
        a blank one as new.

        Args:
            store: Store that receives the saved appointment
            appointment: Appointment to edit or a fresh default

        Returns:
            AppointmentForm
        """
        values = {
            'id': appointment.id,
            'date': appointment.start,
            'title': appointment.title,
            'start': format_to_time_string(appointment.start),
            'end': format_to_time_string(appointment.end),
            'description': appointment.description,
        }
        return cls(store, values, is_existing=bool(appointment.title))

    def update(self, **fields: Any) -> None:
        """
        Change form values.

        Args:
            **fields: Any of id, date, title, start, end, description;
                date may be a date, datetime or ISO string

        Raises:
            ValueError: for unknown fields or an unparseable date
        """
        unknown = set(fields) - set(FORM_FIELDS)
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(sorted(unknown))}")

        if 'date' in fields:
            fields['date'] = self._coerce_date(fields['date'])
        self.values.update(fields)

    def time_errors(self) -> Dict[str, bool]:
        time_stamps = TimeStamps(start=self.values.get('start') or '', end=self.values.get('end') or '')
        return validate_time_range(self.store.time_intervals, time_stamps) or {}

    def errors(self) -> Dict[str, bool]:
        """All failing checks as flags, empty when the form can be saved."""
        errors = validate_required_fields(self.values)
        errors.update(self.time_errors())
        return errors

    def is_valid(self) -> bool:
        return not self.errors()

    def to_appointment(self) -> Appointment:
        """
        Appointment built from the form values.

        Raises:
            ValueError: if a time label is malformed
        """
        day = self.values['date']
        return Appointment(
            id=self.values['id'],
            title=sanitize_input(self.values.get('title') or '', TITLE_MAX_LENGTH),
            description=sanitize_input(self.values.get('description') or '', DESCRIPTION_MAX_LENGTH),
            start=apply_time_to_date(day, self.values['start']),
            end=apply_time_to_date(day, self.values['end'])
        )

    def save(self) -> Optional[Appointment]:
        """
        Save the appointment when the form is valid.

        Returns:
            The saved appointment, or None if validation failed
        """
        errors = self.errors()
        if errors:
            self.ctx_logger.info(f"Not saving, form invalid: {', '.join(sorted(errors))}")
            return None

        appointment = self.to_appointment()
        self.store.save(appointment)
        self.is_existing = True
        return appointment

    def delete(self) -> None:
        self.store.delete(self.values['id'])

    @staticmethod
    def _coerce_date(value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        parsed = validate_datetime(value)
        if parsed is None:
            raise ValueError(f"Invalid date: {value!r}")
        return parsed
