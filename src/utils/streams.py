"""
Observable streams used to publish core state to UI adapters.

StateStream always holds a current value and replays it to new
subscribers. Broadcast delivers each event only to the subscribers that
are attached when it is emitted.
"""

import threading
import traceback
from typing import Callable, Generic, List, TypeVar

from utils.logging import log_error

T = TypeVar("T")

Subscriber = Callable[[T], None]


class _Subscription:
    """Handle returned by subscribe(); call unsubscribe() to detach."""

    def __init__(self, stream, callback):
        self._stream = stream
        self._callback = callback

    def unsubscribe(self):
        self._stream._remove(self._callback)


class _StreamBase(Generic[T]):
    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    def _remove(self, callback: Subscriber):
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def _deliver(self, value: T):
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(value)
            except Exception as e:
                # One broken adapter must not stop the others
                log_error(
                    f"Stream subscriber failed: {e}",
                    type(e).__name__,
                    traceback.format_exc(),
                )


class StateStream(_StreamBase[T]):
    """Holds the latest value and replays it on subscribe."""

    def __init__(self, initial: T):
        super().__init__()
        self._value = initial
        # Held across replay and delivery so a new subscriber always
        # sees the replayed value before any newer one
        self._delivery_lock = threading.RLock()

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def subscribe(self, callback: Subscriber) -> _Subscription:
        with self._delivery_lock:
            with self._lock:
                self._subscribers.append(callback)
                current = self._value
            callback(current)
        return _Subscription(self, callback)

    def publish(self, value: T):
        with self._delivery_lock:
            with self._lock:
                self._value = value
            self._deliver(value)


class Broadcast(_StreamBase[T]):
    """Fire-and-forget events; late subscribers miss earlier emissions."""

    def subscribe(self, callback: Subscriber) -> _Subscription:
        with self._lock:
            self._subscribers.append(callback)
        return _Subscription(self, callback)

    def emit(self, value: T):
        self._deliver(value)
