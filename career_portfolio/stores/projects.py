"""Career Portfolio - Side project store."""
from typing import List, Optional

from ..api.projects import ProjectsApi
from ..events import EventBus, MutationEvent
from ..schemas import Project, ProjectStatus
from .base import CrudStore


class ProjectStore(CrudStore[Project]):
    name = "projects"
    singular = "project"
    plural = "projects"
    created_event = MutationEvent.PROJECT_CREATED
    updated_event = MutationEvent.PROJECT_UPDATED
    deleted_event = MutationEvent.PROJECT_DELETED

    def __init__(self, api: ProjectsApi, bus: EventBus):
        super().__init__(api, bus)

    async def complete(self, project_id: str) -> Optional[Project]:
        """Mark finished; the backend stamps actualEndDate and progress."""
        return await self._run(
            lambda: self.api.complete(project_id), self._replace,
            "Failed to complete project",
            event=MutationEvent.PROJECT_COMPLETED,
        )

    async def update_status(self, project_id: str, status: ProjectStatus) -> Optional[Project]:
        return await self._run(
            lambda: self.api.update_status(project_id, status), self._replace,
            "Failed to update project status",
            event=MutationEvent.PROJECT_STATUS_UPDATED,
        )

    @property
    def overdue(self) -> List[Project]:
        """Projects the backend flagged as overdue, in list order."""
        return [p for p in self.items if p.is_overdue]
