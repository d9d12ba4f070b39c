"""Set whose members expire after a fixed time."""

import time
from collections.abc import Callable


class TtlSet:
    """Membership that lapses ``ttl`` seconds after ``add``.

    Expired members are dropped lazily on access.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._expires: dict[str, float] = {}

    def _purge(self) -> None:
        now = self._clock()
        for item in [item for item, expires in self._expires.items() if expires <= now]:
            del self._expires[item]

    def add(self, item: str) -> None:
        self._expires[item] = self._clock() + self.ttl

    def discard(self, item: str) -> None:
        self._expires.pop(item, None)

    def __contains__(self, item: object) -> bool:
        self._purge()
        return item in self._expires

    def __len__(self) -> int:
        self._purge()
        return len(self._expires)
