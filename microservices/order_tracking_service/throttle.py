"""
Request Throttle

Sliding-window admission per client. Each client has its own window and
its own lock, so lookups from different clients never wait on each other;
the registry lock is only held while a client's window is created or
dropped.

The throttle is created by the service at startup and reset on shutdown.
State is in-process only and does not survive a restart.
"""

import logging
import math
import threading
import time
from collections import deque
from typing import Deque, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_REQUESTS = 100
DEFAULT_WINDOW_SECONDS = 15 * 60


class _ClientWindow:
    __slots__ = ("lock", "timestamps")

    def __init__(self):
        self.lock = threading.Lock()
        self.timestamps: Deque[float] = deque()

    def prune(self, window_start: float):
        while self.timestamps and self.timestamps[0] <= window_start:
            self.timestamps.popleft()


class RequestThrottle:
    """Per-client sliding window rate limiter"""

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._windows: Dict[str, _ClientWindow] = {}
        self._registry_lock = threading.Lock()

    def _window_for(self, client_id: str) -> _ClientWindow:
        window = self._windows.get(client_id)
        if window is None:
            with self._registry_lock:
                window = self._windows.setdefault(client_id, _ClientWindow())
        return window

    def _drop_if_empty(self, client_id: str, window: _ClientWindow):
        # Lock order is always registry, then window
        with self._registry_lock, window.lock:
            if not window.timestamps and self._windows.get(client_id) is window:
                del self._windows[client_id]

    def admit(self, client_id: str, now: Optional[float] = None) -> bool:
        """
        Admit a request from client_id

        Timestamps at or before now - window_seconds are discarded first. A
        rejected request is not recorded.

        Args:
            client_id: Client key, usually the caller's IP address
            now: Current time in seconds (defaults to time.monotonic())

        Returns:
            True when admitted, False when the client is over its limit
        """
        now = time.monotonic() if now is None else now
        while True:
            window = self._window_for(client_id)
            with window.lock:
                # Window was dropped between lookup and lock; fetch a fresh one
                if self._windows.get(client_id) is not window:
                    continue
                window.prune(now - self.window_seconds)
                if len(window.timestamps) >= self.max_requests:
                    logger.info(f"Throttled client {client_id}: {len(window.timestamps)} requests in window")
                    return False
                window.timestamps.append(now)
                return True

    def retry_after(self, client_id: str, now: Optional[float] = None) -> int:
        """Whole seconds until the client's oldest recorded request leaves the window"""
        now = time.monotonic() if now is None else now
        window = self._windows.get(client_id)
        if window is None:
            return 0
        with window.lock:
            window.prune(now - self.window_seconds)
            if len(window.timestamps) < self.max_requests:
                remaining = 0
            else:
                remaining = math.ceil(window.timestamps[0] + self.window_seconds - now)
            empty = not window.timestamps
        if empty:
            self._drop_if_empty(client_id, window)
        return max(remaining, 0)

    def request_count(self, client_id: str, now: Optional[float] = None) -> int:
        """Requests currently counted against the client"""
        now = time.monotonic() if now is None else now
        window = self._windows.get(client_id)
        if window is None:
            return 0
        with window.lock:
            window.prune(now - self.window_seconds)
            count = len(window.timestamps)
        if count == 0:
            self._drop_if_empty(client_id, window)
        return count

    @property
    def tracked_clients(self) -> int:
        return len(self._windows)

    def reset(self):
        """Forget every client"""
        with self._registry_lock:
            self._windows.clear()
        logger.debug("Request throttle reset")
