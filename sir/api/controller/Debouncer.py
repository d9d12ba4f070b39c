"""Per-key trailing-edge call coalescing."""

import time
from collections.abc import Callable
from typing import Any


class Debouncer:
    """Delays a call until ``delay`` seconds pass without another call for the same key.

    Nothing runs on its own: ``poll()`` runs the calls whose quiet period has
    elapsed and ``flush()`` runs all pending calls. Only the latest call per
    key is kept. The clock is injectable so tests can step time by hand.
    """

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self._clock = clock
        self._pending: dict[str, tuple[float, Callable[[], Any]]] = {}

    def call(self, key: str, fn: Callable[[], Any]) -> None:
        """Schedule ``fn`` for ``key``, replacing and re-timing any pending call."""
        self._pending[key] = (self._clock() + self.delay, fn)

    def cancel(self, key: str) -> None:
        self._pending.pop(key, None)

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    def poll(self) -> list[Any]:
        """Run due calls in deadline order and return their results."""
        now = self._clock()
        due = sorted((deadline, key) for key, (deadline, _) in self._pending.items() if deadline <= now)
        return [self._pending.pop(key)[1]() for _, key in due]

    def flush(self) -> list[Any]:
        """Run every pending call now, in deadline order."""
        due = sorted((deadline, key) for key, (deadline, _) in self._pending.items())
        return [self._pending.pop(key)[1]() for _, key in due]
