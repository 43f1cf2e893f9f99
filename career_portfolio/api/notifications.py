"""Career Portfolio - Notification center endpoints."""
from typing import Any, Dict, Optional

from ..schemas import NotificationPage, NotificationStats
from .client import ApiClient


class NotificationsApi:
    path = "/notifications"

    def __init__(self, client: ApiClient):
        self.client = client

    async def list(
        self,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0
    ) -> NotificationPage:
        params = {"unreadOnly": "true" if unread_only else None, "limit": limit, "offset": offset}
        return NotificationPage.model_validate(await self.client.get(self.path, params=params))

    async def stats(self) -> NotificationStats:
        return NotificationStats.model_validate(await self.client.get(f"{self.path}/stats"))

    async def mark_read(self, notification_id: str) -> str:
        await self.client.patch(f"{self.path}/{notification_id}/read")
        return notification_id

    async def mark_all_read(self) -> None:
        await self.client.patch(f"{self.path}/read-all")

    async def delete(self, notification_id: str) -> str:
        await self.client.delete(f"{self.path}/{notification_id}")
        return notification_id

    async def send_test(self) -> Any:
        return await self.client.post(f"{self.path}/test")

    async def preferences(self) -> Dict[str, Any]:
        return await self.client.get(f"{self.path}/preferences") or {}

    async def update_preferences(self, preferences: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.client.put(f"{self.path}/preferences", json=preferences)
