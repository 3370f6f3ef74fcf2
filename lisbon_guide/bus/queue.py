"""Intent queue with a drop-newest backpressure strategy.

Producers may call `put()` from any thread (input handlers, timers). A single
consumer calls `drain()` and applies intents one at a time, in arrival order,
so concurrent push/pop requests never interleave on the navigator stack.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable

from lisbon_guide.navigation.screens import Intent


logger = logging.getLogger(__name__)


class IntentQueue:
    def __init__(self, *, maxsize: int = 64) -> None:
        self._q: queue.Queue[Intent] = queue.Queue(maxsize=int(maxsize))
        self._drain_lock = threading.Lock()
        self._dropped = 0

    @property
    def dropped(self) -> int:
        return self._dropped

    def __len__(self) -> int:
        return self._q.qsize()

    def put(self, intent: Intent) -> bool:
        """Enqueue without blocking. Returns False when the intent was dropped."""

        try:
            self._q.put_nowait(intent)
        except queue.Full:
            self._dropped += 1
            logger.warning("intent_dropped", extra={"intent": repr(intent), "dropped": self._dropped})
            return False
        return True

    def drain(self, handler: Callable[[Intent], object]) -> int:
        """Apply every queued intent with `handler`. Returns the number applied.

        Only one thread drains at a time; a concurrent caller waits for the
        current drain to finish and then picks up whatever is left.
        """

        applied = 0
        with self._drain_lock:
            while True:
                try:
                    intent = self._q.get_nowait()
                except queue.Empty:
                    break
                handler(intent)
                applied += 1
        return applied
