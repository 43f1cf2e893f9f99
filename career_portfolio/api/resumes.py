"""
Career Portfolio - Resume endpoints.

Resume versions, the template catalogue, the user's default resume and
server-side content generation from profile data.
"""
from typing import List, Optional
from urllib.parse import quote

from ..schemas import Resume, ResumeContent, ResumeCreate, ResumeTemplate, ResumeUpdate
from .base import ResourceApi


class ResumesApi(ResourceApi[Resume]):
    path = "/resumes"
    model = Resume
    create_schema = ResumeCreate
    update_schema = ResumeUpdate

    async def templates(self) -> List[ResumeTemplate]:
        data = await self.client.get(self._url("templates"))
        return [ResumeTemplate.model_validate(t) for t in (data or [])]

    async def templates_by_category(self, category: str) -> List[ResumeTemplate]:
        data = await self.client.get(self._url("templates", "category", quote(category, safe="")))
        return [ResumeTemplate.model_validate(t) for t in (data or [])]

    async def set_default(self, resume_id: str) -> Resume:
        return self.decode(await self.client.post(self._url(resume_id, "default")))

    async def get_default(self) -> Optional[Resume]:
        data = await self.client.get(self._url("default"))
        return self.decode(data) if data else None

    async def generate_content(self) -> ResumeContent:
        return ResumeContent.model_validate(await self.client.get(self._url("generate", "content")))
