from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable

from staff_directory.models.directory import Notification

logger = logging.getLogger(__name__)

# Dismiss attempts that do not close a notification; only an explicit close
# or the auto-hide timeout does.
IGNORED_DISMISS_REASONS = frozenset({"clickaway", "backdropClick"})


class NotificationCenter:
    """Holds the single transient notification currently on screen."""

    def __init__(
        self,
        auto_hide_ms: int = 6000,
        *,
        history_size: int = 50,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.auto_hide_ms = auto_hide_ms
        self.history: deque[Notification] = deque(maxlen=history_size)
        self._clock = clock
        self._current: Notification | None = None
        self._shown_at = 0.0

    def show(self, message: str, severity: str = "info") -> Notification:
        notification = Notification(message=message, severity=severity, auto_hide_ms=self.auto_hide_ms)
        self._current = notification
        self._shown_at = self._clock()
        self.history.append(notification)
        logger.debug("Notification (%s): %s", severity, message)
        return notification

    def success(self, message: str) -> Notification:
        return self.show(message, "success")

    def error(self, message: str) -> Notification:
        return self.show(message, "error")

    @property
    def current(self) -> Notification | None:
        if self._current is None:
            return None
        elapsed_ms = (self._clock() - self._shown_at) * 1000
        if elapsed_ms >= self._current.auto_hide_ms:
            self._current = None
        return self._current

    def dismiss(self, reason: str | None = None) -> bool:
        if reason in IGNORED_DISMISS_REASONS:
            return False
        closed = self.current is not None
        self._current = None
        return closed
