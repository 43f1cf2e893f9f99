"""
Career Portfolio - Toast queue.

ToastQueue is plain state: an ordered list of short-lived messages with no
timers of its own. ToastScheduler is the presentation side that hides each
toast once its duration has passed.
"""
from typing import Callable, Dict, List, Optional, Union
import asyncio
import logging
import random
import string
import time

from ..config import settings
from ..schemas import ToastMessage, ToastSeverity

logger = logging.getLogger("career_portfolio.toasts")

_BASE36 = string.digits + string.ascii_lowercase

ToastListener = Callable[[ToastMessage], None]


def generate_toast_id() -> str:
    """Millisecond timestamp plus a random base-36 suffix; unique enough for a UI queue."""
    n = random.getrandbits(52)
    suffix = ""
    while n:
        n, r = divmod(n, 36)
        suffix = _BASE36[r] + suffix
    return f"{int(time.time() * 1000)}-{suffix or '0'}"


class ToastQueue:
    def __init__(self, default_duration_ms: Optional[int] = None):
        if default_duration_ms is None:
            default_duration_ms = settings.ui.toast_duration_ms
        self.default_duration_ms = default_duration_ms
        self.toasts: List[ToastMessage] = []
        self._listeners: List[ToastListener] = []

    def subscribe(self, listener: ToastListener) -> Callable[[], None]:
        """Call `listener(toast)` for every toast shown."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def show(
        self,
        message: str,
        severity: Union[ToastSeverity, str] = ToastSeverity.INFO,
        duration_ms: Optional[int] = None,
        toast_id: Optional[str] = None
    ) -> str:
        toast = ToastMessage(
            id=toast_id or generate_toast_id(),
            message=message,
            severity=ToastSeverity(severity),
            duration_ms=self.default_duration_ms if duration_ms is None else duration_ms,
        )
        self.toasts.append(toast)
        logger.debug(f"Toast {toast.id} [{toast.severity.value}] {message}")
        for listener in list(self._listeners):
            listener(toast)
        return toast.id

    def hide(self, toast_id: str) -> None:
        self.toasts = [t for t in self.toasts if t.id != toast_id]

    def clear(self) -> None:
        self.toasts = []


class ToastScheduler:
    """Hides each toast after its duration on the running event loop."""

    def __init__(self, queue: ToastQueue):
        self.queue = queue
        self._handles: Dict[str, asyncio.TimerHandle] = {}
        self._unsubscribe: Optional[Callable[[], None]] = None

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.queue.subscribe(self._schedule)

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()

    def dismiss(self, toast_id: str) -> None:
        """User closed the toast before it expired."""
        handle = self._handles.pop(toast_id, None)
        if handle is not None:
            handle.cancel()
        self.queue.hide(toast_id)

    def _schedule(self, toast: ToastMessage) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug(f"No running loop; toast {toast.id} stays until dismissed")
            return
        self._handles[toast.id] = loop.call_later(toast.duration_ms / 1000, self._expire, toast.id)

    def _expire(self, toast_id: str) -> None:
        self._handles.pop(toast_id, None)
        self.queue.hide(toast_id)
