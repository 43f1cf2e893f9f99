"""
Career Portfolio - Notification center store.

Holds the current page of in-app notifications (deadline reminders,
progress check-ins) and keeps the unread badge count in step with local
read/delete actions.
"""
from typing import Optional

from ..api.notifications import NotificationsApi
from ..events import EventBus, MutationEvent
from ..schemas import Notification, NotificationPage, NotificationStats, Pagination
from .base import EntityStore


class NotificationCenterStore(EntityStore[Notification]):
    name = "notifications"

    def __init__(self, api: NotificationsApi, bus: EventBus):
        super().__init__(bus)
        self.api = api
        self.pagination = Pagination()
        self.stats: Optional[NotificationStats] = None

    @property
    def unread_count(self) -> int:
        return self.pagination.unread

    async def fetch(self, unread_only: bool = False, limit: int = 20, offset: int = 0) -> Optional[NotificationPage]:
        return await self._run(
            lambda: self.api.list(unread_only=unread_only, limit=limit, offset=offset),
            self._set_page,
            "Failed to get notifications",
            latest="fetch_all",
        )

    async def fetch_stats(self) -> Optional[NotificationStats]:
        return await self._run(
            self.api.stats, self._set_stats,
            "Failed to get notification stats",
            latest="stats",
        )

    async def mark_read(self, notification_id: str) -> Optional[str]:
        return await self._run(
            lambda: self.api.mark_read(notification_id), self._on_marked_read,
            "Failed to mark notification as read",
            event=MutationEvent.NOTIFICATION_READ,
        )

    async def mark_all_read(self) -> Optional[bool]:
        async def call() -> bool:
            await self.api.mark_all_read()
            return True

        return await self._run(
            call, self._on_all_read,
            "Failed to mark all notifications as read",
            event=MutationEvent.NOTIFICATIONS_ALL_READ,
        )

    async def delete(self, notification_id: str) -> Optional[str]:
        return await self._run(
            lambda: self.api.delete(notification_id), self._on_deleted,
            "Failed to delete notification",
            event=MutationEvent.NOTIFICATION_DELETED,
        )

    # --- reducers ---

    def _set_page(self, page: NotificationPage) -> None:
        self._replace_all(page.notifications)
        self.pagination = page.pagination

    def _set_stats(self, stats: NotificationStats) -> None:
        self.stats = stats

    def _adjust_unread(self, delta: int) -> None:
        unread = max(0, self.pagination.unread + delta)
        self.pagination = self.pagination.model_copy(update={"unread": unread})

    def _on_marked_read(self, notification_id: str) -> None:
        notification = self.get(notification_id)
        if notification is not None and not notification.is_read:
            self._replace(notification.model_copy(update={"is_read": True}))
            self._adjust_unread(-1)

    def _on_all_read(self, _result: bool) -> None:
        self.items = [n if n.is_read else n.model_copy(update={"is_read": True}) for n in self.items]
        self.pagination = self.pagination.model_copy(update={"unread": 0})

    def _on_deleted(self, notification_id: str) -> None:
        notification = self.get(notification_id)
        self._remove(notification_id)
        if notification is not None:
            total = max(0, self.pagination.total - 1)
            self.pagination = self.pagination.model_copy(update={"total": total})
            if not notification.is_read:
                self._adjust_unread(-1)
