"""Date grid for the month view."""

from datetime import date, timedelta
from typing import List
from config.constants import DAYS_PER_WEEK, MONTH_GRID_WEEKS


def get_dates_in_selected_month(selected: date) -> List[List[date]]:
    """
    Dates shown in the month view for the month of ``selected``.

    Weeks start on Sunday. The first row begins on the Sunday on or before
    the 1st, so trailing days of the previous month and leading days of the
    next month are included.

    Args:
        selected: Any date in the month to display

    Returns:
        5 weeks of 7 consecutive dates
    """
    first_day = date(selected.year, selected.month, 1)
    # date.weekday(): Mon=0 ... Sun=6
    days_before = (first_day.weekday() + 1) % DAYS_PER_WEEK
    grid_start = first_day - timedelta(days=days_before)

    return [
        [grid_start + timedelta(days=week * DAYS_PER_WEEK + day) for day in range(DAYS_PER_WEEK)]
        for week in range(MONTH_GRID_WEEKS)
    ]
