"""
Career Portfolio - Success notifications.

Listens to store mutation events and shows a success toast for the
events in TOAST_MESSAGES. The table is the whole policy: events not listed
never toast through here, and failures never publish events at all, so
errors are shown only through each store's `error`.
"""
from typing import Any, Callable, Dict, Optional
import logging

from ..events import EventBus, MutationEvent
from ..schemas import ToastSeverity
from .toasts import ToastQueue

logger = logging.getLogger("career_portfolio.notifications")

TOAST_MESSAGES: Dict[MutationEvent, str] = {
    MutationEvent.PROJECT_CREATED: "Project created",
    MutationEvent.PROJECT_UPDATED: "Project updated",
    MutationEvent.PROJECT_DELETED: "Project deleted",
    MutationEvent.APPLICATION_CREATED: "Application created",
    MutationEvent.APPLICATION_UPDATED: "Application updated",
    MutationEvent.APPLICATION_DELETED: "Application deleted",
    MutationEvent.APPLICATION_STATUS_UPDATED: "Status updated",
    MutationEvent.APPLICATION_NOTES_SAVED: "Notes saved",
    MutationEvent.RESUME_CREATED: "Resume created",
    MutationEvent.RESUME_UPDATED: "Resume updated",
    MutationEvent.RESUME_DELETED: "Resume deleted",
}


class NotificationService:
    def __init__(self, bus: EventBus, toasts: ToastQueue):
        self.bus = bus
        self.toasts = toasts
        self._unsubscribe: Optional[Callable[[], None]] = None

    def start(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.bus.subscribe(self._on_event, events=TOAST_MESSAGES.keys())

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_event(self, event: MutationEvent, payload: Any) -> None:
        message = TOAST_MESSAGES.get(event)
        if message is None:
            return
        logger.debug(f"{event.value} -> toast '{message}'")
        self.toasts.show(message, ToastSeverity.SUCCESS)
