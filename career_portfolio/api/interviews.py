"""Career Portfolio - Interview scheduling endpoints."""
from typing import List, Optional
from urllib.parse import quote

from ..schemas import (
    Interview, InterviewCreate, InterviewFilters, InterviewOutcome,
    InterviewStats, InterviewUpdate, PayloadLike, PreparationMaterials
)
from .base import ResourceApi, to_payload


class InterviewsApi(ResourceApi[Interview]):
    path = "/interviews"
    model = Interview
    create_schema = InterviewCreate
    update_schema = InterviewUpdate

    async def list(self, filters: Optional[PayloadLike] = None) -> List[Interview]:
        params = to_payload(InterviewFilters, filters)
        return self.decode_list(await self.client.get(self.path, params=params))

    async def add_feedback(self, interview_id: str, feedback: str) -> Interview:
        data = await self.client.post(self._url(interview_id, "feedback"), json={"feedback": feedback})
        return self.decode(data)

    async def add_questions(self, interview_id: str, questions: str) -> Interview:
        data = await self.client.post(self._url(interview_id, "questions"), json={"questions": questions})
        return self.decode(data)

    async def update_outcome(self, interview_id: str, outcome: InterviewOutcome) -> Interview:
        data = await self.client.put(
            self._url(interview_id, "outcome"),
            json={"outcome": InterviewOutcome(outcome).value}
        )
        return self.decode(data)

    async def stats(self) -> InterviewStats:
        return InterviewStats.model_validate(await self.client.get(self._url("stats")))

    async def preparation(self, company_name: str) -> PreparationMaterials:
        data = await self.client.get(self._url("preparation", quote(company_name, safe="")))
        return PreparationMaterials.model_validate(data)

    async def upcoming(self) -> List[Interview]:
        return self.decode_list(await self.client.get(self._url("upcoming")))
