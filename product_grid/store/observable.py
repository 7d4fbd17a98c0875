# product_grid/store/observable.py

"""Minimal publish/subscribe subject for view-facing state holders."""

import logging
from collections.abc import Callable

logger = logging.getLogger("product_grid.store")

Listener = Callable[[], None]


class Observable:
    """Holds subscriber callbacks and calls them after each mutation.

    Listeners run synchronously in subscription order.  A listener that
    raises is logged and the remaining listeners still run.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self) -> None:
        """Call every current listener once."""
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.error(
                    "Store listener %r raised", listener, exc_info=True
                )
