"""
Career Portfolio - Client entry point.

CareerPortfolioApp wires the HTTP client, the event bus, the toast queue
and every domain store together, the way the browser client's root store
did.

Usage:
    async with CareerPortfolioApp(current_path="/dashboard") as app:
        await app.projects.fetch_all()
        for toast in app.toasts.toasts:
            print(toast.message)
"""
from pathlib import Path
from typing import Optional
import logging

import httpx

from .api import (
    AdminApi, ApiClient, ApplicationsApi, AuthApi, FlagsApi, InterviewsApi,
    MotivationApi, NotificationsApi, PortfolioApi, ProjectsApi, ResumesApi,
    TimeTrackingApi
)
from .auth import Navigator, TokenStore
from .config import Settings, settings as default_settings
from .events import EventBus
from .services import NotificationService, ToastQueue, ToastScheduler
from .stores import (
    ApplicationStore, FlagStore, InterviewStore, MotivationStore,
    NotificationCenterStore, PortfolioStore, ProjectStore, ResumeStore,
    TimeTrackingStore
)

logger = logging.getLogger("career_portfolio")


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for scripts and the CLI."""
    logging.basicConfig(
        level=(level or default_settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


class CareerPortfolioApp:
    """All client state for one signed-in user."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        current_path: str = "/",
        token_store: Optional[TokenStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        token_file: Optional[Path] = None
    ):
        self.settings = settings or default_settings
        session = self.settings.session

        self.token_store = token_store or TokenStore(token_file or session.token_file, key=session.token_key)
        self.navigator = Navigator(current_path=current_path)
        self.client = ApiClient(
            self.token_store,
            self.navigator,
            base_url=self.settings.api.api_base_url,
            timeout=self.settings.api.request_timeout,
            transport=transport,
            session=session,
        )

        self.bus = EventBus()
        self.toasts = ToastQueue(default_duration_ms=self.settings.ui.toast_duration_ms)
        self.notifications_service = NotificationService(self.bus, self.toasts)
        self.toast_scheduler = ToastScheduler(self.toasts)

        self.auth = AuthApi(self.client)
        self.admin = AdminApi(self.client)

        self.applications = ApplicationStore(ApplicationsApi(self.client), self.bus)
        self.projects = ProjectStore(ProjectsApi(self.client), self.bus)
        self.resumes = ResumeStore(ResumesApi(self.client), self.bus)
        self.interviews = InterviewStore(InterviewsApi(self.client), self.bus)
        self.notifications = NotificationCenterStore(NotificationsApi(self.client), self.bus)
        self.motivation = MotivationStore(MotivationApi(self.client), self.bus)
        self.portfolio = PortfolioStore(PortfolioApi(self.client), self.bus)
        self.time_tracking = TimeTrackingStore(TimeTrackingApi(self.client), self.bus)
        self.flags = FlagStore(FlagsApi(self.client), self.bus)

        self.notifications_service.start()

    @property
    def stores(self):
        return {
            "applications": self.applications,
            "projects": self.projects,
            "resumes": self.resumes,
            "interviews": self.interviews,
            "notifications": self.notifications,
            "motivation": self.motivation,
            "portfolio": self.portfolio,
            "time_tracking": self.time_tracking,
            "flags": self.flags,
        }

    def errors(self):
        """Current error message per store, for stores that have one."""
        return {name: store.error for name, store in self.stores.items() if store.error}

    async def close(self) -> None:
        logger.debug("Closing Career Portfolio client")
        self.toast_scheduler.stop()
        self.notifications_service.stop()
        await self.client.aclose()

    async def __aenter__(self) -> "CareerPortfolioApp":
        self.toast_scheduler.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
