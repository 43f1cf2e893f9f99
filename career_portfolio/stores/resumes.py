"""
Career Portfolio - Resume store.

The backend allows one default resume per user. The store mirrors that
locally: whenever a resume comes back as the default, every other cached
resume loses the flag in the same update. The server's record still wins
on the next fetch.
"""
from typing import Dict, List, Optional

from ..api.resumes import ResumesApi
from ..events import EventBus, MutationEvent
from ..schemas import Resume, ResumeContent, ResumeTemplate
from .base import CrudStore


class ResumeStore(CrudStore[Resume]):
    name = "resumes"
    singular = "resume"
    plural = "resumes"
    created_event = MutationEvent.RESUME_CREATED
    updated_event = MutationEvent.RESUME_UPDATED
    deleted_event = MutationEvent.RESUME_DELETED

    def __init__(self, api: ResumesApi, bus: EventBus):
        super().__init__(api, bus)
        self.templates: List[ResumeTemplate] = []
        self.templates_by_category: Dict[str, List[ResumeTemplate]] = {}
        self.generated_content: Optional[ResumeContent] = None

    @property
    def default(self) -> Optional[Resume]:
        return next((r for r in self.items if r.is_default), None)

    def clear_generated_content(self) -> None:
        self.generated_content = None
        self._notify()

    # --- server operations ---

    async def fetch_templates(self) -> Optional[List[ResumeTemplate]]:
        return await self._run(
            self.api.templates, self._set_templates,
            "Failed to fetch templates",
            latest="templates",
        )

    async def fetch_templates_by_category(self, category: str) -> Optional[List[ResumeTemplate]]:
        def store(templates: List[ResumeTemplate]) -> None:
            self.templates_by_category[category] = list(templates)

        return await self._run(
            lambda: self.api.templates_by_category(category), store,
            "Failed to fetch templates by category",
            latest=f"templates:{category}",
        )

    async def set_default(self, resume_id: str) -> Optional[Resume]:
        return await self._run(
            lambda: self.api.set_default(resume_id), self._on_default_set,
            "Failed to set default resume",
            event=MutationEvent.RESUME_DEFAULT_SET,
        )

    async def fetch_default(self) -> Optional[Resume]:
        return await self._run(
            self.api.get_default, self._set_selected,
            "Failed to fetch default resume",
            latest="fetch_one",
        )

    async def generate_content(self) -> Optional[ResumeContent]:
        return await self._run(
            self.api.generate_content, self._set_generated_content,
            "Failed to generate resume content",
            latest="generate",
        )

    # --- reducers ---

    def _set_templates(self, templates: List[ResumeTemplate]) -> None:
        self.templates = list(templates)

    def _set_generated_content(self, content: ResumeContent) -> None:
        self.generated_content = content

    def _clear_other_defaults(self, keep_id: str) -> None:
        self.items = [
            r if r.id == keep_id or not r.is_default else r.model_copy(update={"is_default": False})
            for r in self.items
        ]
        if self.selected is not None and self.selected.id != keep_id and self.selected.is_default:
            self.selected = self.selected.model_copy(update={"is_default": False})

    def _on_created(self, resume: Resume) -> None:
        super()._on_created(resume)
        if resume.is_default:
            self._clear_other_defaults(resume.id)

    def _on_updated(self, resume: Resume) -> None:
        super()._on_updated(resume)
        if resume.is_default:
            self._clear_other_defaults(resume.id)

    def _on_default_set(self, resume: Resume) -> None:
        if not resume.is_default:
            resume = resume.model_copy(update={"is_default": True})
        self._replace(resume)
        self._clear_other_defaults(resume.id)
