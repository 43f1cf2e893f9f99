"""
Career Portfolio - Job application endpoints.

Tracks applications through the hiring pipeline, plus the backend-computed
analytics and follow-up lists.
"""
from typing import List, Optional

from ..schemas import (
    ApplicationAnalytics, ApplicationFilters, ApplicationStatus,
    JobApplication, JobApplicationCreate, JobApplicationUpdate, PayloadLike
)
from .base import ResourceApi, to_payload


class ApplicationsApi(ResourceApi[JobApplication]):
    path = "/applications"
    model = JobApplication
    create_schema = JobApplicationCreate
    update_schema = JobApplicationUpdate

    async def list(self, filters: Optional[PayloadLike] = None) -> List[JobApplication]:
        params = to_payload(ApplicationFilters, filters)
        return self.decode_list(await self.client.get(self.path, params=params))

    async def search(self, term: str) -> List[JobApplication]:
        return self.decode_list(await self.client.get(self.path, params={"search": term}))

    async def update_status(self, application_id: str, status: ApplicationStatus) -> JobApplication:
        data = await self.client.patch(
            self._url(application_id, "status"),
            json={"status": ApplicationStatus(status).value}
        )
        return self.decode(data)

    async def add_notes(self, application_id: str, notes: str) -> JobApplication:
        data = await self.client.post(self._url(application_id, "notes"), json={"notes": notes})
        return self.decode(data)

    async def analytics(self) -> ApplicationAnalytics:
        return ApplicationAnalytics.model_validate(await self.client.get(self._url("analytics")))

    async def needing_follow_up(self) -> List[JobApplication]:
        return self.decode_list(await self.client.get(self._url("follow-up")))
