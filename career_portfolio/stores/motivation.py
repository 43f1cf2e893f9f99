"""
Career Portfolio - Motivation store.

Daily logs, goals, achievements and feedback are separate lists here, but
the dashboard endpoint returns all of them at once; loading the dashboard
replaces each list with the dashboard's copy.
"""
from typing import List, Optional, TypeVar

from ..api.motivation import MotivationApi
from ..events import EventBus, MutationEvent
from ..schemas import (
    Achievement, DailyLog, Goal, MotivationalFeedback,
    MotivationDashboard, PayloadLike, ProgressStats
)
from .base import BaseStore

R = TypeVar("R", DailyLog, Goal, Achievement, MotivationalFeedback)


def upsert(records: List[R], record: R, append: bool = True) -> List[R]:
    """Replace the record with the same id, or append it when `append` is set."""
    for i, existing in enumerate(records):
        if existing.id == record.id:
            return records[:i] + [record] + records[i + 1:]
    return records + [record] if append else records


class MotivationStore(BaseStore):
    name = "motivation"

    def __init__(self, api: MotivationApi, bus: EventBus):
        super().__init__(bus)
        self.api = api
        self.daily_logs: List[DailyLog] = []
        self.goals: List[Goal] = []
        self.achievements: List[Achievement] = []
        self.feedback: List[MotivationalFeedback] = []
        self.progress_stats: Optional[ProgressStats] = None
        self.dashboard: Optional[MotivationDashboard] = None

    def clear(self) -> None:
        """Drop all motivation data, e.g. on sign-out."""
        self.daily_logs = []
        self.goals = []
        self.achievements = []
        self.feedback = []
        self.progress_stats = None
        self.dashboard = None
        self._notify()

    @property
    def unread_feedback(self) -> List[MotivationalFeedback]:
        return [f for f in self.feedback if not f.is_read]

    # --- daily logs ---

    async def log_daily_activity(self, data: PayloadLike) -> Optional[DailyLog]:
        return await self._run(
            lambda: self.api.log_daily_activity(data), self._on_log_saved,
            "Failed to log daily activity",
            event=MutationEvent.DAILY_LOG_SAVED,
        )

    async def fetch_daily_logs(self, start_date: str, end_date: str) -> Optional[List[DailyLog]]:
        return await self._run(
            lambda: self.api.daily_logs(start_date, end_date), self._set_daily_logs,
            "Failed to fetch daily logs",
            latest="daily_logs",
        )

    # --- goals ---

    async def create_goal(self, data: PayloadLike) -> Optional[Goal]:
        return await self._run(
            lambda: self.api.create_goal(data), self._on_goal_created,
            "Failed to create goal",
            event=MutationEvent.GOAL_CREATED,
        )

    async def fetch_active_goals(self) -> Optional[List[Goal]]:
        return await self._run(
            self.api.active_goals, self._set_goals,
            "Failed to fetch active goals",
            latest="goals",
        )

    async def update_goal_progress(self, goal_id: str, current_value: float) -> Optional[Goal]:
        return await self._run(
            lambda: self.api.update_goal_progress(goal_id, current_value), self._on_goal_updated,
            "Failed to update goal progress",
            event=MutationEvent.GOAL_PROGRESS_UPDATED,
        )

    async def delete_goal(self, goal_id: str) -> Optional[str]:
        return await self._run(
            lambda: self.api.delete_goal(goal_id), self._on_goal_deleted,
            "Failed to delete goal",
            event=MutationEvent.GOAL_DELETED,
        )

    # --- achievements and feedback ---

    async def fetch_achievements(self) -> Optional[List[Achievement]]:
        return await self._run(
            self.api.achievements, self._set_achievements,
            "Failed to fetch achievements",
            latest="achievements",
        )

    async def check_achievements(self) -> Optional[List[Achievement]]:
        return await self._run(
            self.api.check_achievements, self._on_achievements_unlocked,
            "Failed to check achievements",
        )

    async def fetch_unread_feedback(self) -> Optional[List[MotivationalFeedback]]:
        return await self._run(
            self.api.unread_feedback, self._set_feedback,
            "Failed to fetch unread feedback",
            latest="feedback",
        )

    async def mark_feedback_read(self, feedback_id: str) -> Optional[MotivationalFeedback]:
        return await self._run(
            lambda: self.api.mark_feedback_read(feedback_id), self._on_feedback_read,
            "Failed to mark feedback as read",
            event=MutationEvent.FEEDBACK_READ,
        )

    async def fetch_guidance(self) -> Optional[List[MotivationalFeedback]]:
        return await self._run(
            self.api.guidance, self._on_guidance,
            "Failed to fetch strategic guidance",
            latest="guidance",
        )

    # --- summaries ---

    async def fetch_progress_stats(self) -> Optional[ProgressStats]:
        return await self._run(
            self.api.stats, self._set_progress_stats,
            "Failed to fetch progress stats",
            latest="stats",
        )

    async def fetch_dashboard(self) -> Optional[MotivationDashboard]:
        return await self._run(
            self.api.dashboard, self._set_dashboard,
            "Failed to fetch motivation dashboard",
            latest="dashboard",
        )

    # --- reducers ---

    def _on_log_saved(self, log: DailyLog) -> None:
        self.daily_logs = upsert(self.daily_logs, log)

    def _set_daily_logs(self, logs: List[DailyLog]) -> None:
        self.daily_logs = list(logs)

    def _on_goal_created(self, goal: Goal) -> None:
        self.goals = self.goals + [goal]

    def _set_goals(self, goals: List[Goal]) -> None:
        self.goals = list(goals)

    def _on_goal_updated(self, goal: Goal) -> None:
        self.goals = upsert(self.goals, goal, append=False)

    def _on_goal_deleted(self, goal_id: str) -> None:
        self.goals = [g for g in self.goals if g.id != goal_id]

    def _set_achievements(self, achievements: List[Achievement]) -> None:
        self.achievements = list(achievements)

    def _on_achievements_unlocked(self, unlocked: List[Achievement]) -> None:
        for achievement in unlocked:
            self.achievements = upsert(self.achievements, achievement)

    def _set_feedback(self, feedback: List[MotivationalFeedback]) -> None:
        self.feedback = list(feedback)

    def _on_feedback_read(self, feedback: MotivationalFeedback) -> None:
        self.feedback = upsert(self.feedback, feedback, append=False)

    def _on_guidance(self, guidance: List[MotivationalFeedback]) -> None:
        for item in guidance:
            self.feedback = upsert(self.feedback, item)

    def _set_progress_stats(self, stats: Optional[ProgressStats]) -> None:
        self.progress_stats = stats

    def _set_dashboard(self, dashboard: MotivationDashboard) -> None:
        self.dashboard = dashboard
        self.progress_stats = dashboard.stats
        self.goals = list(dashboard.active_goals)
        self.achievements = list(dashboard.achievements)
        self.feedback = list(dashboard.unread_feedback)
        self.daily_logs = list(dashboard.recent_logs)
