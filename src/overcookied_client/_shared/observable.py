# Area: Shared
"""
overcookied_client._shared.observable — Change notification
===========================================================

Mixin giving a state container a listener registry. Containers call
``_notify()`` after every mutation; listeners receive the container.
"""

import logging
from typing import Any, Callable, List

logger = logging.getLogger("overcookied_client.observable")

Listener = Callable[[Any], None]


class Observable:
    """
    Listener registry for state containers.

    Usage:
        unsubscribe = scoreboard.subscribe(lambda board: render(board.snapshot))
        ...
        unsubscribe()
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception(f"Listener {listener!r} failed on {type(self).__name__}")
