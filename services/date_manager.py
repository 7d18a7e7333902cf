"""Selected calendar date and view type."""

from datetime import date, datetime
from typing import Callable, Optional, Union
from config.constants import VIEW_TYPE_DAY, VIEW_TYPES
from services.notifier import ChangeNotifier
from utils.logger import setup_logger
from utils.time_grid import date_key

logger = setup_logger(__name__)


class DateManager:
    """Tracks which day is selected and whether the day or month view is shown."""

    def __init__(self, today: Optional[date] = None):
        self.today = today or date.today()
        self._current_date: ChangeNotifier[date] = ChangeNotifier(self.today)
        self._view_type: ChangeNotifier[str] = ChangeNotifier(VIEW_TYPE_DAY)

    def is_today(self, day: Union[date, datetime]) -> bool:
        return date_key(day) == date_key(self.today)

    def get_current_date(self) -> date:
        return self._current_date.value

    def set_current_date(self, day: Union[date, datetime]) -> None:
        if isinstance(day, datetime):
            day = day.date()
        logger.debug(f"Selected date {date_key(day)}")
        self._current_date.publish(day)

    def set_today(self) -> None:
        self.set_current_date(date.today())

    def get_view_type(self) -> str:
        return self._view_type.value

    def set_view_type(self, view_type: str) -> None:
        """
        Switch between the day and month views.

        Raises:
            ValueError: if the view type is unknown
        """
        if view_type not in VIEW_TYPES:
            raise ValueError(f"Unknown view type: {view_type!r} (expected one of {VIEW_TYPES})")
        logger.debug(f"View type set to {view_type}")
        self._view_type.publish(view_type)

    def subscribe_date(self, observer: Callable[[date], None]) -> Callable[[], None]:
        return self._current_date.subscribe(observer)

    def subscribe_view_type(self, observer: Callable[[str], None]) -> Callable[[], None]:
        return self._view_type.subscribe(observer)
