"""
Status Notifier - one transient banner message at a time.

Each show() cancels the pending dismissal before scheduling its own, so
a stale timer can never clear a newer message.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Optional

from canvas_core.log_utils import log
from canvas_core.models.enums import StatusKind

DEFAULT_TIMEOUT = 5.0

# (delay_seconds, callback) -> handle with cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


def loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    """Schedules on the running asyncio loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass(frozen=True)
class StatusMessage:
    """Banner message."""
    kind: StatusKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind == StatusKind.ERROR


class StatusNotifier:
    """Holds at most one live StatusMessage with an auto-dismiss timer."""

    def __init__(self, scheduler: Scheduler = loop_scheduler, timeout: float = DEFAULT_TIMEOUT):
        self._scheduler = scheduler
        self.timeout = timeout
        self._message: Optional[StatusMessage] = None
        self._handle = None
        self._closed = False
        self._on_change: Optional[Callable[[Optional[StatusMessage]], None]] = None

    def on_change(self, callback: Callable[[Optional[StatusMessage]], None]):
        """Registers a callback fired with the current message (or None)."""
        self._on_change = callback

    @property
    def current(self) -> Optional[StatusMessage]:
        return self._message

    def show(self, kind: StatusKind, text: str) -> StatusMessage:
        self._cancel_pending()
        self._message = StatusMessage(StatusKind(kind), text)
        if not self._closed:
            self._handle = self._scheduler(self.timeout, self._expire)
        self._notify()
        return self._message

    def success(self, text: str) -> StatusMessage:
        return self.show(StatusKind.SUCCESS, text)

    def error(self, text: str) -> StatusMessage:
        return self.show(StatusKind.ERROR, text)

    def clear(self):
        """Dismisses the current message and cancels its timer."""
        self._cancel_pending()
        if self._message is not None:
            self._message = None
            self._notify()

    def close(self):
        """Teardown: no timer survives the notifier."""
        self._cancel_pending()
        self._closed = True

    def _expire(self):
        self._handle = None
        if self._message is not None:
            self._message = None
            self._notify()

    def _cancel_pending(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _notify(self):
        if self._on_change:
            try:
                self._on_change(self._message)
            except Exception as e:
                log(f"[StatusNotifier] Change callback error: {e}")
