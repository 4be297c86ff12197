from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


@dataclass(frozen=True)
class Subscription:
    """Opaque handle returned by add_listener, used to unsubscribe."""
    token: int


class ChangeNotifier:
    """
    Synchronous fan-out of a 'changed' signal.

    - Listeners are called with no arguments, in registration order
    - The same callable can be registered more than once; each registration
      gets its own Subscription and is called once per notify()
    - A listener that raises is logged and skipped; the remaining listeners
      still run and nothing propagates back to the mutating caller
    """

    def __init__(self) -> None:
        self._listeners: Dict[Subscription, Listener] = {}
        self._tokens = itertools.count(1)

    def add_listener(self, callback: Listener) -> Subscription:
        handle = Subscription(next(self._tokens))
        self._listeners[handle] = callback
        return handle

    def remove_listener(self, handle: Subscription) -> None:
        self._listeners.pop(handle, None)

    def notify(self) -> None:
        # Copy so listeners can unsubscribe themselves mid-dispatch
        for handle, callback in list(self._listeners.items()):
            try:
                callback()
            except Exception:
                logger.exception(
                    "Dataset listener failed",
                    extra={"subscription": handle.token},
                )

    def __len__(self) -> int:
        return len(self._listeners)
