"""
Career Portfolio - Motivation endpoints.

Daily activity logs, goals with tracked progress, unlocked achievements and
the feedback/guidance messages the backend derives from them.
"""
from typing import List, Optional

from ..schemas import (
    Achievement, DailyLog, DailyLogCreate, Goal, GoalCreate,
    MotivationalFeedback, MotivationDashboard, PayloadLike, ProgressStats
)
from .base import to_payload
from .client import ApiClient


class MotivationApi:
    path = "/motivation"

    def __init__(self, client: ApiClient):
        self.client = client

    async def log_daily_activity(self, data: PayloadLike) -> DailyLog:
        """Create or overwrite the log for the given date."""
        payload = to_payload(DailyLogCreate, data)
        return DailyLog.model_validate(await self.client.post(f"{self.path}/daily-log", json=payload))

    async def daily_logs(self, start_date: str, end_date: str) -> List[DailyLog]:
        data = await self.client.get(
            f"{self.path}/daily-logs",
            params={"startDate": start_date, "endDate": end_date}
        )
        return [DailyLog.model_validate(log) for log in (data or [])]

    async def create_goal(self, data: PayloadLike) -> Goal:
        payload = to_payload(GoalCreate, data)
        return Goal.model_validate(await self.client.post(f"{self.path}/goals", json=payload))

    async def active_goals(self) -> List[Goal]:
        return [Goal.model_validate(g) for g in (await self.client.get(f"{self.path}/goals") or [])]

    async def goal(self, goal_id: str) -> Goal:
        return Goal.model_validate(await self.client.get(f"{self.path}/goals/{goal_id}"))

    async def update_goal_progress(self, goal_id: str, current_value: float) -> Goal:
        data = await self.client.put(
            f"{self.path}/goals/{goal_id}/progress",
            json={"currentValue": current_value}
        )
        return Goal.model_validate(data)

    async def delete_goal(self, goal_id: str) -> str:
        await self.client.delete(f"{self.path}/goals/{goal_id}")
        return goal_id

    async def achievements(self) -> List[Achievement]:
        data = await self.client.get(f"{self.path}/achievements")
        return [Achievement.model_validate(a) for a in (data or [])]

    async def check_achievements(self) -> List[Achievement]:
        """Ask the backend to unlock anything newly earned; returns the new ones."""
        data = await self.client.post(f"{self.path}/achievements")
        return [Achievement.model_validate(a) for a in (data or [])]

    async def unread_feedback(self) -> List[MotivationalFeedback]:
        data = await self.client.get(f"{self.path}/feedback")
        return [MotivationalFeedback.model_validate(f) for f in (data or [])]

    async def mark_feedback_read(self, feedback_id: str) -> MotivationalFeedback:
        data = await self.client.patch(f"{self.path}/feedback/{feedback_id}/read")
        return MotivationalFeedback.model_validate(data)

    async def stats(self) -> Optional[ProgressStats]:
        data = await self.client.get(f"{self.path}/stats")
        return ProgressStats.model_validate(data) if data else None

    async def guidance(self) -> List[MotivationalFeedback]:
        data = await self.client.get(f"{self.path}/guidance")
        return [MotivationalFeedback.model_validate(f) for f in (data or [])]

    async def dashboard(self) -> MotivationDashboard:
        return MotivationDashboard.model_validate(await self.client.get(f"{self.path}/dashboard") or {})
