"""Input validation utilities."""

import re
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Sequence
from config.constants import REQUIRED_FORM_FIELDS, TIME_MISMATCH, TIME_ORDER
from models.appointment import TimeStamps
from utils.time_grid import time_index


def validate_time_range(
    time_intervals: Sequence[str],
    time_stamps: TimeStamps
) -> Optional[Dict[str, bool]]:
    """
    Validate an appointment's start and end labels against the time grid.

    Args:
        time_intervals: Ordered grid labels
        time_stamps: Candidate start and end labels

    Returns:
        {"time_mismatch": True} when start equals end,
        {"time_order": True} when start is not before end or either label
        is off the grid, or None if valid
    """
    if time_stamps.start == time_stamps.end:
        return {TIME_MISMATCH: True}

    start_index = time_index(time_intervals, time_stamps.start)
    end_index = time_index(time_intervals, time_stamps.end)

    if start_index < 0 or end_index < 0 or start_index >= end_index:
        return {TIME_ORDER: True}
    return None


def validate_required_fields(
    values: Mapping[str, Any],
    fields: Sequence[str] = REQUIRED_FORM_FIELDS
) -> Dict[str, bool]:
    """
    Check that required form values are present and not blank.

    Args:
        values: Form values keyed by field name
        fields: Names of the required fields

    Returns:
        {"required_<field>": True} for each missing field
    """
    errors = {}
    for name in fields:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[f"required_{name}"] = True
    return errors


def validate_datetime(dt_str: str) -> Optional[datetime]:
    """
    Validate and parse datetime string.

    Args:
        dt_str: Datetime or date string (ISO format)

    Returns:
        Parsed datetime object or None if invalid
    """
    try:
        return datetime.fromisoformat(dt_str.replace('Z', '+00:00'))
    except (ValueError, AttributeError):
        return None


def sanitize_input(text: str, max_length: int = 1000) -> str:
    """
    Sanitize free-text appointment input.

    Args:
        text: Input text
        max_length: Maximum allowed length

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    # Truncate to max length
    sanitized = text[:max_length]

    # Remove markup characters
    sanitized = re.sub(r'[<>]', '', sanitized)

    return sanitized.strip()
