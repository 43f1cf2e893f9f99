"""
Career Portfolio - Project time tracking endpoints.

Progress, deadline urgency and timeline figures are computed by the backend
from each project's dates; the client only reads them.
"""
from typing import List

from ..schemas import DeadlineNotification, ProjectProgress, ProjectTimeline, TimeTrackingStats
from .client import ApiClient


class TimeTrackingApi:
    path = "/time-tracking"

    def __init__(self, client: ApiClient):
        self.client = client

    async def project_progress(self, project_id: str) -> ProjectProgress:
        return ProjectProgress.model_validate(await self.client.get(f"{self.path}/projects/{project_id}/progress"))

    async def all_progress(self) -> List[ProjectProgress]:
        data = await self.client.get(f"{self.path}/projects/progress")
        return [ProjectProgress.model_validate(p) for p in (data or [])]

    async def deadlines(self) -> List[DeadlineNotification]:
        data = await self.client.get(f"{self.path}/deadlines")
        return [DeadlineNotification.model_validate(d) for d in (data or [])]

    async def timeline(self) -> ProjectTimeline:
        return ProjectTimeline.model_validate(await self.client.get(f"{self.path}/timeline") or {})

    async def stats(self) -> TimeTrackingStats:
        return TimeTrackingStats.model_validate(await self.client.get(f"{self.path}/stats") or {})

    async def update_statuses(self) -> None:
        """Have the backend recompute overdue flags for every project."""
        await self.client.post(f"{self.path}/update-statuses")
