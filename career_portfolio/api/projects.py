"""Career Portfolio - Side project endpoints."""
from ..schemas import Project, ProjectCreate, ProjectStatus, ProjectUpdate
from .base import ResourceApi


class ProjectsApi(ResourceApi[Project]):
    path = "/projects"
    model = Project
    create_schema = ProjectCreate
    update_schema = ProjectUpdate

    async def complete(self, project_id: str) -> Project:
        return self.decode(await self.client.post(self._url(project_id, "complete")))

    async def update_status(self, project_id: str, status: ProjectStatus) -> Project:
        data = await self.client.patch(
            self._url(project_id, "status"),
            json={"status": ProjectStatus(status).value}
        )
        return self.decode(data)
