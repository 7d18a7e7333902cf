"""Shared fixtures for the appointment calendar tests."""

import os

# Keep test runs from writing log files
os.environ.setdefault('LOG_FILE', '')

from datetime import date, datetime

import pytest

from models.appointment import Appointment
from services.appointment_store import AppointmentStore
from services.date_manager import DateManager
from services.storage import InMemoryStore


@pytest.fixture
def storage():
    return InMemoryStore()


@pytest.fixture
def store(storage):
    return AppointmentStore(storage)


@pytest.fixture
def date_manager():
    manager = DateManager(today=date(2024, 5, 1))
    return manager


@pytest.fixture
def make_appointment():
    """Factory for appointments on a given day and time range."""
    def _make(appointment_id='apt_1', start=(2024, 5, 1, 9, 0), end=(2024, 5, 1, 10, 0), title='Dentist'):
        return Appointment(
            id=appointment_id,
            title=title,
            description='Checkup',
            start=datetime(*start),
            end=datetime(*end)
        )
    return _make
