"""
Career Portfolio - Admin reporting endpoints.

System monitoring and user management. Every call requires an admin
session; a non-admin token gets a 403 surfaced as ApiError.
"""
from typing import Any, Dict, List, Optional

from ..schemas import AdminUser, SystemStats
from .client import ApiClient


class AdminApi:
    path = "/admin"

    def __init__(self, client: ApiClient):
        self.client = client

    async def system_stats(self) -> SystemStats:
        return SystemStats.model_validate(await self.client.get(f"{self.path}/system-stats") or {})

    async def performance_metrics(self) -> Dict[str, Any]:
        return await self.client.get(f"{self.path}/performance-metrics") or {}

    async def system_logs(self) -> List[Dict[str, Any]]:
        return await self.client.get(f"{self.path}/system-logs") or []

    async def users(self, search: Optional[str] = None) -> List[AdminUser]:
        data = await self.client.get(f"{self.path}/users", params={"search": search})
        if isinstance(data, dict):
            # Paginated variant: {"users": [...], "pagination": {...}}
            data = data.get("users", [])
        return [AdminUser.model_validate(u) for u in (data or [])]

    async def update_user(self, user_id: str, changes: Dict[str, Any]) -> AdminUser:
        data = await self.client.put(f"{self.path}/users/{user_id}", json=changes)
        return AdminUser.model_validate(data)

    async def activate_user(self, user_id: str) -> None:
        await self.client.put(f"{self.path}/users/{user_id}/activate")

    async def deactivate_user(self, user_id: str) -> None:
        await self.client.put(f"{self.path}/users/{user_id}/deactivate")

    async def delete_user(self, user_id: str) -> None:
        await self.client.put(f"{self.path}/users/{user_id}/delete")
