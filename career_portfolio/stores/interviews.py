"""
Career Portfolio - Interview store.

Interviews reference their application by id only; the company and title
shown next to an interview are the snapshot the backend embedded at fetch
time, not a live link into the application store.
"""
from typing import Any, Dict, List, Optional

from ..api.interviews import InterviewsApi
from ..events import EventBus, MutationEvent
from ..schemas import (
    Interview, InterviewFilters, InterviewOutcome, InterviewStats,
    PayloadLike, PreparationMaterials
)
from .base import CrudStore


class InterviewStore(CrudStore[Interview]):
    name = "interviews"
    singular = "interview"
    plural = "interviews"
    created_event = MutationEvent.INTERVIEW_CREATED
    updated_event = MutationEvent.INTERVIEW_UPDATED
    deleted_event = MutationEvent.INTERVIEW_DELETED

    def __init__(self, api: InterviewsApi, bus: EventBus):
        super().__init__(api, bus)
        self.stats: Optional[InterviewStats] = None
        self.preparation: Optional[PreparationMaterials] = None
        self.upcoming: List[Interview] = []
        self.filters: Dict[str, Any] = {}

    # --- local state ---

    def set_filters(self, filters: PayloadLike) -> None:
        """Merge into the current filters."""
        if isinstance(filters, InterviewFilters):
            filters = filters.model_dump(exclude_unset=True)
        merged = {**self.filters, **filters}
        self.filters = InterviewFilters.model_validate(merged).model_dump(exclude_none=True)
        self._notify()

    def clear_filters(self) -> None:
        self.filters = {}
        self._notify()

    def clear_preparation(self) -> None:
        self.preparation = None
        self._notify()

    # --- server operations ---

    async def fetch_all(self, filters: Optional[PayloadLike] = None) -> Optional[List[Interview]]:
        return await super().fetch_all(filters if filters is not None else self.filters)

    async def add_feedback(self, interview_id: str, feedback: str) -> Optional[Interview]:
        return await self._run(
            lambda: self.api.add_feedback(interview_id, feedback), self._replace,
            "Failed to add interview feedback",
            event=MutationEvent.INTERVIEW_FEEDBACK_ADDED,
        )

    async def add_questions(self, interview_id: str, questions: str) -> Optional[Interview]:
        return await self._run(
            lambda: self.api.add_questions(interview_id, questions), self._replace,
            "Failed to add interview questions",
            event=MutationEvent.INTERVIEW_QUESTIONS_ADDED,
        )

    async def update_outcome(self, interview_id: str, outcome: InterviewOutcome) -> Optional[Interview]:
        return await self._run(
            lambda: self.api.update_outcome(interview_id, outcome), self._replace,
            "Failed to update interview outcome",
            event=MutationEvent.INTERVIEW_OUTCOME_UPDATED,
        )

    async def fetch_stats(self) -> Optional[InterviewStats]:
        return await self._run(
            self.api.stats, self._set_stats,
            "Failed to fetch interview statistics",
            latest="stats",
        )

    async def fetch_preparation(self, company_name: str) -> Optional[PreparationMaterials]:
        return await self._run(
            lambda: self.api.preparation(company_name), self._set_preparation,
            "Failed to fetch preparation materials",
            latest="preparation",
        )

    async def fetch_upcoming(self) -> Optional[List[Interview]]:
        return await self._run(
            self.api.upcoming, self._set_upcoming,
            "Failed to fetch upcoming interviews",
            latest="upcoming",
        )

    # --- reducers ---

    def _set_stats(self, stats: InterviewStats) -> None:
        self.stats = stats

    def _set_preparation(self, materials: PreparationMaterials) -> None:
        self.preparation = materials

    def _set_upcoming(self, interviews: List[Interview]) -> None:
        self.upcoming = list(interviews)
