"""Persisted snapshot schema for the appointment collection."""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, TypeAdapter

from models.appointment import Appointment, Appointments


class AppointmentRecord(BaseModel):
    """Stored form of an appointment; only start/end are decoded as timestamps."""

    id: str
    title: str = ""
    description: str = ""
    start: datetime
    end: datetime

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> 'AppointmentRecord':
        return cls(
            id=appointment.id,
            title=appointment.title,
            description=appointment.description,
            start=appointment.start,
            end=appointment.end,
        )

    def to_appointment(self) -> Appointment:
        return Appointment(
            id=self.id,
            title=self.title,
            description=self.description,
            start=self.start,
            end=self.end,
        )


SnapshotAdapter = TypeAdapter(Dict[str, List[AppointmentRecord]])


def serialize_appointments(appointments: Appointments) -> str:
    """Encode the collection as JSON text with ISO-8601 timestamps."""
    records = {
        date_key: [AppointmentRecord.from_appointment(a) for a in items]
        for date_key, items in appointments.items()
    }
    return SnapshotAdapter.dump_json(records).decode('utf-8')


def deserialize_appointments(raw: str) -> Appointments:
    """Decode JSON text produced by :func:`serialize_appointments`.

    Raises:
        pydantic.ValidationError: if the text is not valid JSON or does not
            match the schema.
    """
    records = SnapshotAdapter.validate_json(raw)
    return {
        date_key: [record.to_appointment() for record in items]
        for date_key, items in records.items()
    }
