from __future__ import annotations

from threading import Lock


class QueryTracker:
    """Hands out a generation token per query; only the newest one is current."""

    def __init__(self) -> None:
        self._generation = 0
        self._lock = Lock()

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation

    def canceller(self, token: int):
        """Return a callable reporting whether ``token`` has been superseded."""
        return lambda: not self.is_current(token)


__all__ = ["QueryTracker"]
