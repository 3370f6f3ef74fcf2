from __future__ import annotations

import logging
import threading
from typing import Callable

from .screens import CategoryList, Intent, Pop, Push, Screen


logger = logging.getLogger(__name__)

ScreenListener = Callable[[Screen], None]


class Navigator:
    """Stack-based router over typed screens.

    The root is always `CategoryList()`; popping past it is ignored. Stack
    mutations are serialized with a lock, and listeners run after the lock is
    released with the new current screen.
    """

    def __init__(self) -> None:
        self._stack: list[Screen] = [CategoryList()]
        self._lock = threading.Lock()
        self._listeners: list[ScreenListener] = []

    @property
    def current(self) -> Screen:
        with self._lock:
            return self._stack[-1]

    @property
    def stack(self) -> tuple[Screen, ...]:
        with self._lock:
            return tuple(self._stack)

    def add_listener(self, listener: ScreenListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def push(self, screen: Screen) -> None:
        with self._lock:
            self._stack.append(screen)
            depth = len(self._stack)
        logger.info("navigate_push", extra={"route": screen.route, "stack_depth": depth})
        self._notify(screen)

    def pop(self) -> bool:
        """Remove the top screen. Returns False (and does nothing) at the root."""

        with self._lock:
            if len(self._stack) <= 1:
                ignored = True
            else:
                ignored = False
                removed = self._stack.pop()
                top = self._stack[-1]
                depth = len(self._stack)

        if ignored:
            logger.debug("navigate_pop_ignored")
            return False

        logger.info(
            "navigate_pop",
            extra={"removed": removed.route, "route": top.route, "stack_depth": depth},
        )
        self._notify(top)
        return True

    def apply(self, intent: Intent) -> bool:
        if isinstance(intent, Push):
            self.push(intent.screen)
            return True
        if isinstance(intent, Pop):
            return self.pop()
        raise TypeError(f"Unsupported intent: {intent!r}")

    def _notify(self, screen: Screen) -> None:
        for listener in list(self._listeners):
            listener(screen)
