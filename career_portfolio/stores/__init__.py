"""
Career Portfolio - Stores Module

One store per backend domain, each owning its slice of client state.
"""

from .base import BaseStore, CrudStore, EntityStore, Snapshot
from .applications import ApplicationStore
from .flags import FlagStore
from .interviews import InterviewStore
from .motivation import MotivationStore
from .notifications import NotificationCenterStore
from .portfolio import PortfolioStore
from .projects import ProjectStore
from .resumes import ResumeStore
from .time_tracking import TimeTrackingStore

__all__ = [
    "BaseStore",
    "CrudStore",
    "EntityStore",
    "Snapshot",
    "ApplicationStore",
    "FlagStore",
    "InterviewStore",
    "MotivationStore",
    "NotificationCenterStore",
    "PortfolioStore",
    "ProjectStore",
    "ResumeStore",
    "TimeTrackingStore",
]
