"""
Career Portfolio - Job application store.

Besides the standard CRUD operations this store supports optimistic edits
for the three actions users repeat most (status change, notes, delete).
An optimistic edit is applied immediately, confirmed by the backend, and
rolled back from its snapshot if the backend refuses it.
"""
from typing import List, Optional

from ..api.applications import ApplicationsApi
from ..events import EventBus, MutationEvent
from ..schemas import (
    ApplicationAnalytics, ApplicationFilters, ApplicationStatus,
    JobApplication, PayloadLike
)
from .base import CrudStore, Snapshot


class ApplicationStore(CrudStore[JobApplication]):
    name = "applications"
    singular = "application"
    plural = "applications"
    created_event = MutationEvent.APPLICATION_CREATED
    updated_event = MutationEvent.APPLICATION_UPDATED
    deleted_event = MutationEvent.APPLICATION_DELETED

    def __init__(self, api: ApplicationsApi, bus: EventBus):
        super().__init__(api, bus)
        self.analytics: Optional[ApplicationAnalytics] = None
        self.follow_ups: List[JobApplication] = []
        self.filters = ApplicationFilters()
        self.search_term = ""

    # --- local state ---

    def set_filters(self, filters: PayloadLike) -> None:
        if not isinstance(filters, ApplicationFilters):
            filters = ApplicationFilters.model_validate(filters)
        self.filters = filters
        self._notify()

    def set_search_term(self, term: str) -> None:
        self.search_term = term
        self._notify()

    # --- server operations ---

    async def fetch_all(self, filters: Optional[PayloadLike] = None) -> Optional[List[JobApplication]]:
        """Fetch with explicit filters, or the stored ones when none are given."""
        return await super().fetch_all(filters if filters is not None else self.filters)

    async def search(self, term: Optional[str] = None) -> Optional[List[JobApplication]]:
        term = self.search_term if term is None else term
        return await self._run(
            lambda: self.api.search(term), self._replace_all,
            "Failed to search applications",
            latest="fetch_all",
        )

    async def update_status(self, application_id: str, status: ApplicationStatus) -> Optional[JobApplication]:
        return await self._run(
            lambda: self.api.update_status(application_id, status), self._replace,
            "Failed to update application status",
            event=MutationEvent.APPLICATION_STATUS_UPDATED,
        )

    async def add_notes(self, application_id: str, notes: str) -> Optional[JobApplication]:
        return await self._run(
            lambda: self.api.add_notes(application_id, notes), self._replace,
            "Failed to add notes",
            event=MutationEvent.APPLICATION_NOTES_SAVED,
        )

    async def fetch_analytics(self) -> Optional[ApplicationAnalytics]:
        return await self._run(
            self.api.analytics, self._set_analytics,
            "Failed to fetch analytics",
            latest="analytics",
        )

    async def fetch_follow_ups(self) -> Optional[List[JobApplication]]:
        return await self._run(
            self.api.needing_follow_up, self._set_follow_ups,
            "Failed to fetch applications needing follow-up",
            latest="follow_ups",
        )

    def _set_analytics(self, analytics: ApplicationAnalytics) -> None:
        self.analytics = analytics

    def _set_follow_ups(self, applications: List[JobApplication]) -> None:
        self.follow_ups = list(applications)

    # --- optimistic reducers ---

    def _patch_local(self, application_id: str, **changes) -> Optional[Snapshot]:
        snapshot = self.snapshot(application_id)
        if snapshot is None:
            self.logger.debug(f"{application_id} not cached; nothing to update optimistically")
            return None
        self.install(snapshot, snapshot.entity.model_copy(update=changes))
        self._notify()
        return snapshot

    def optimistic_update_status(self, application_id: str, status: ApplicationStatus) -> Optional[Snapshot]:
        return self._patch_local(application_id, status=ApplicationStatus(status))

    def optimistic_save_notes(self, application_id: str, notes: str) -> Optional[Snapshot]:
        return self._patch_local(application_id, notes=notes)

    def optimistic_delete(self, application_id: str) -> Optional[Snapshot]:
        snapshot = self.snapshot(application_id)
        self._remove(application_id)
        self._notify()
        return snapshot

    # --- optimistic operations ---

    async def change_status(self, application_id: str, status: ApplicationStatus) -> Optional[JobApplication]:
        """Show the new status at once; roll back if the backend refuses."""
        snapshot = self.optimistic_update_status(application_id, status)
        result = await self.update_status(application_id, status)
        if result is None:
            await self.rollback(snapshot)
        return result

    async def save_notes(self, application_id: str, notes: str) -> Optional[JobApplication]:
        snapshot = self.optimistic_save_notes(application_id, notes)
        result = await self.add_notes(application_id, notes)
        if result is None:
            await self.rollback(snapshot)
        return result

    async def remove(self, application_id: str) -> Optional[str]:
        snapshot = self.optimistic_delete(application_id)
        result = await self.delete(application_id)
        if result is None:
            await self.rollback(snapshot)
        return result
