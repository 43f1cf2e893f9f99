"""
Career Portfolio - Mutation event bus.

Stores publish one MutationEvent after a confirmed server mutation has been
merged into their state. Subscribers choose which events they receive; the
event set is closed, so publishing anything else is a programming error.
"""
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

logger = logging.getLogger("career_portfolio.events")


class MutationEvent(str, Enum):
    # Projects
    PROJECT_CREATED = "projects/create"
    PROJECT_UPDATED = "projects/update"
    PROJECT_DELETED = "projects/delete"
    PROJECT_COMPLETED = "projects/complete"
    PROJECT_STATUS_UPDATED = "projects/updateStatus"

    # Job applications
    APPLICATION_CREATED = "jobApplications/createApplication"
    APPLICATION_UPDATED = "jobApplications/updateApplication"
    APPLICATION_DELETED = "jobApplications/deleteApplication"
    APPLICATION_STATUS_UPDATED = "jobApplications/updateApplicationStatus"
    APPLICATION_NOTES_SAVED = "jobApplications/addApplicationNotes"

    # Resumes
    RESUME_CREATED = "resumes/create"
    RESUME_UPDATED = "resumes/update"
    RESUME_DELETED = "resumes/delete"
    RESUME_DEFAULT_SET = "resumes/setDefault"

    # Interviews
    INTERVIEW_CREATED = "interviews/createInterview"
    INTERVIEW_UPDATED = "interviews/updateInterview"
    INTERVIEW_DELETED = "interviews/deleteInterview"
    INTERVIEW_FEEDBACK_ADDED = "interviews/addInterviewFeedback"
    INTERVIEW_QUESTIONS_ADDED = "interviews/addInterviewQuestions"
    INTERVIEW_OUTCOME_UPDATED = "interviews/updateInterviewOutcome"

    # Notification center
    NOTIFICATION_READ = "notifications/markRead"
    NOTIFICATIONS_ALL_READ = "notifications/markAllRead"
    NOTIFICATION_DELETED = "notifications/delete"

    # Motivation
    DAILY_LOG_SAVED = "motivation/logDailyActivity"
    GOAL_CREATED = "motivation/createGoal"
    GOAL_PROGRESS_UPDATED = "motivation/updateGoalProgress"
    GOAL_DELETED = "motivation/deleteGoal"
    FEEDBACK_READ = "motivation/markFeedbackAsRead"

    # Portfolio
    PORTFOLIO_SAVED = "portfolio/createOrUpdatePortfolio"
    PORTFOLIO_GENERATED = "portfolio/generatePortfolioContent"
    PORTFOLIO_ASSET_ADDED = "portfolio/addPortfolioAsset"
    PORTFOLIO_ASSET_DELETED = "portfolio/deletePortfolioAsset"
    PORTFOLIO_SEO_UPDATED = "portfolio/updatePortfolioSEO"
    PORTFOLIO_VISIBILITY_TOGGLED = "portfolio/togglePortfolioVisibility"

    # Time tracking
    PROJECT_STATUSES_REFRESHED = "timeTracking/updateProjectStatuses"


Handler = Callable[[MutationEvent, Any], None]


class EventBus:
    """Synchronous publish/subscribe for store mutation events."""

    def __init__(self):
        self._handlers: Dict[MutationEvent, List[Handler]] = {}
        self._catch_all: List[Handler] = []

    def subscribe(
        self,
        handler: Handler,
        events: Optional[Iterable[MutationEvent]] = None
    ) -> Callable[[], None]:
        """
        Register a handler for the given events, or for every event when
        `events` is None. Returns a callable that removes the registration.
        """
        if events is None:
            self._catch_all.append(handler)
            return lambda: self._discard(self._catch_all, handler)

        selected = [MutationEvent(e) for e in events]
        for event in selected:
            self._handlers.setdefault(event, []).append(handler)

        def unsubscribe():
            for event in selected:
                self._discard(self._handlers.get(event, []), handler)

        return unsubscribe

    def publish(self, event: MutationEvent, payload: Any = None) -> None:
        """Deliver an event to its subscribers in registration order."""
        if not isinstance(event, MutationEvent):
            raise TypeError(f"Unknown mutation event: {event!r}")

        logger.debug(f"Publishing {event.value}")
        for handler in list(self._handlers.get(event, [])) + list(self._catch_all):
            try:
                handler(event, payload)
            except Exception:
                # A failing subscriber must not undo a mutation that already landed
                logger.exception(f"Handler {handler!r} failed for {event.value}")

    @staticmethod
    def _discard(handlers: List[Handler], handler: Handler) -> None:
        if handler in handlers:
            handlers.remove(handler)
