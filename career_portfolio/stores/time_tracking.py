"""Career Portfolio - Project deadline and progress tracking store."""
from typing import Dict, List, Optional

from ..api.time_tracking import TimeTrackingApi
from ..events import EventBus, MutationEvent
from ..schemas import (
    DeadlineNotification, DeadlineUrgency, ProjectProgress,
    ProjectTimeline, TimeTrackingStats
)
from .base import BaseStore

URGENT = (DeadlineUrgency.HIGH, DeadlineUrgency.CRITICAL)


class TimeTrackingStore(BaseStore):
    name = "time_tracking"

    def __init__(self, api: TimeTrackingApi, bus: EventBus):
        super().__init__(bus)
        self.api = api
        self.progress: Dict[str, ProjectProgress] = {}
        self.deadlines: List[DeadlineNotification] = []
        self.timeline: Optional[ProjectTimeline] = None
        self.stats: Optional[TimeTrackingStats] = None

    @property
    def urgent_deadlines(self) -> List[DeadlineNotification]:
        return [d for d in self.deadlines if d.urgency in URGENT]

    async def fetch_project_progress(self, project_id: str) -> Optional[ProjectProgress]:
        return await self._run(
            lambda: self.api.project_progress(project_id), self._merge_progress,
            "Failed to fetch project progress",
            latest=f"progress:{project_id}",
        )

    async def fetch_all_progress(self) -> Optional[List[ProjectProgress]]:
        return await self._run(
            self.api.all_progress, self._set_all_progress,
            "Failed to fetch project progress",
            latest="progress",
        )

    async def fetch_deadlines(self) -> Optional[List[DeadlineNotification]]:
        return await self._run(
            self.api.deadlines, self._set_deadlines,
            "Failed to fetch deadlines",
            latest="deadlines",
        )

    async def fetch_timeline(self) -> Optional[ProjectTimeline]:
        return await self._run(
            self.api.timeline, self._set_timeline,
            "Failed to fetch project timeline",
            latest="timeline",
        )

    async def fetch_stats(self) -> Optional[TimeTrackingStats]:
        return await self._run(
            self.api.stats, self._set_stats,
            "Failed to fetch time tracking stats",
            latest="stats",
        )

    async def update_statuses(self) -> Optional[bool]:
        """Recompute overdue flags server-side; cached figures are then stale."""
        async def call() -> bool:
            await self.api.update_statuses()
            return True

        return await self._run(
            call, self._on_statuses_updated,
            "Failed to update project statuses",
            event=MutationEvent.PROJECT_STATUSES_REFRESHED,
        )

    # --- reducers ---

    def _merge_progress(self, progress: ProjectProgress) -> None:
        self.progress = {**self.progress, progress.project_id: progress}

    def _set_all_progress(self, progress: List[ProjectProgress]) -> None:
        self.progress = {p.project_id: p for p in progress}

    def _set_deadlines(self, deadlines: List[DeadlineNotification]) -> None:
        self.deadlines = list(deadlines)

    def _set_timeline(self, timeline: ProjectTimeline) -> None:
        self.timeline = timeline

    def _set_stats(self, stats: TimeTrackingStats) -> None:
        self.stats = stats

    def _on_statuses_updated(self, _result: bool) -> None:
        self.progress = {}
        self.deadlines = []
        self.timeline = None
        self.stats = None
