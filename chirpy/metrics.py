"""
File server hit counter
"""

import logging
import threading

logger = logging.getLogger(__name__)


class HitCounter:
    """
    Process-wide request counter for the static file server

    Features:
    - Atomic increment, load and store
    - Thread-safe using a lock
    """

    def __init__(self, initial: int = 0):
        self._hits = initial
        # Lock for thread safety
        self.lock = threading.Lock()

    def add(self, delta: int = 1) -> int:
        """
        Increment the counter

        Args:
            delta: Amount to add (default: 1)

        Returns:
            The counter value after the increment
        """
        with self.lock:
            self._hits += delta
            return self._hits

    def load(self) -> int:
        """Return the current number of hits"""
        with self.lock:
            return self._hits

    def store(self, value: int = 0) -> None:
        """Overwrite the counter, resetting it to zero by default"""
        with self.lock:
            self._hits = value


class MetricsMiddleware:
    """ASGI middleware counting every HTTP request before handing it on."""

    def __init__(self, app, counter: HitCounter):
        self.app = app
        self.counter = counter

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http":
            hits = self.counter.add(1)
            logger.debug(f"File server hit #{hits}: {scope.get('path')}")
        await self.app(scope, receive, send)
