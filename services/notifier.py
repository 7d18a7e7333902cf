"""Synchronous change notification."""

from typing import Callable, Generic, List, TypeVar
from utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar('T')


class ChangeNotifier(Generic[T]):
    """Holds a current value and pushes every new value to observers.

    Observers run in subscription order. A new observer immediately
    receives the current value.
    """

    def __init__(self, value: T):
        self._value = value
        self._observers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        """
        Attach an observer and deliver the current value to it right away.

        Args:
            observer: Called with each published value

        Returns:
            Callable that detaches the observer
        """
        self._observers.append(observer)
        self._deliver(observer, self._value)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def publish(self, value: T) -> None:
        """Store ``value`` as current and deliver it to every observer."""
        self._value = value
        for observer in list(self._observers):
            self._deliver(observer, value)

    def _deliver(self, observer: Callable[[T], None], value: T) -> None:
        try:
            observer(value)
        except Exception:
            logger.exception(f"Observer {observer!r} failed")
