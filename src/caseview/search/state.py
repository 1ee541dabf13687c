"""
Debounced search state.

Every keystroke re-arms a single deadline ``window_ms`` in the future. The
debounced query only catches up with the raw query once ``poll()`` runs after
the deadline passed without being re-armed, so rapid typing never publishes
intermediate queries. There are no timers or threads: the clock is injected
and the owner polls.
"""

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class SearchState:
    def __init__(self, window_ms: int = 300, clock: Clock | None = None, initial: str = ""):
        if window_ms < 0:
            raise ValueError(f"Debounce window must be >= 0 ms, got {window_ms}")
        self.window_ms = window_ms
        self._clock = clock or time.monotonic
        self.raw_query = initial
        self.debounced_query = initial
        self._deadline: float | None = None

    @property
    def pending(self) -> bool:
        """True while a raw query is waiting for the quiescence window."""
        return self._deadline is not None

    def set_raw(self, text: str) -> None:
        """Record a keystroke, replacing any pending update."""
        self.raw_query = text or ""
        if self.window_ms == 0:
            self._deadline = None
            self.debounced_query = self.raw_query
            return
        self._deadline = self._clock() + self.window_ms / 1000.0

    def poll(self) -> bool:
        """
        Publish the raw query if the window elapsed.

        Returns:
            True if the debounced query changed
        """
        if self._deadline is None or self._clock() < self._deadline:
            return False
        return self._publish()

    def flush(self) -> bool:
        """Publish the pending query immediately."""
        if self._deadline is None:
            return False
        return self._publish()

    def reset(self) -> None:
        """Clear both queries and drop any pending update."""
        self._deadline = None
        self.raw_query = ""
        self.debounced_query = ""

    def _publish(self) -> bool:
        self._deadline = None
        if self.debounced_query == self.raw_query:
            return False
        logger.debug("Search query settled: %r", self.raw_query)
        self.debounced_query = self.raw_query
        return True
