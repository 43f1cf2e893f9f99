"""
Career Portfolio - Backend API Module

HTTP client wrapper plus one class per backend resource.

Usage:
    from career_portfolio.api import ApiClient, ProjectsApi

    async with ApiClient(tokens, navigator) as client:
        projects = await ProjectsApi(client).list()
"""

from .client import (
    ApiClient,
    ApiError,
    NetworkError,
    UnauthorizedError,
    should_redirect_on_unauthorized,
    unwrap,
)
from .admin import AdminApi
from .applications import ApplicationsApi
from .auth import AuthApi
from .flags import FlagsApi
from .interviews import InterviewsApi
from .motivation import MotivationApi
from .notifications import NotificationsApi
from .portfolio import PortfolioApi
from .projects import ProjectsApi
from .resumes import ResumesApi
from .time_tracking import TimeTrackingApi

__all__ = [
    # Client
    "ApiClient",
    "ApiError",
    "NetworkError",
    "UnauthorizedError",
    "should_redirect_on_unauthorized",
    "unwrap",
    # Resources
    "AdminApi",
    "ApplicationsApi",
    "AuthApi",
    "FlagsApi",
    "InterviewsApi",
    "MotivationApi",
    "NotificationsApi",
    "PortfolioApi",
    "ProjectsApi",
    "ResumesApi",
    "TimeTrackingApi",
]
