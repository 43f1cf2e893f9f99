# Career Portfolio - API client toolkit
"""
Career Portfolio - Async client for the career-management API.

Tracks job applications, interviews, resumes and side projects through
per-domain stores that mirror the backend, with toast notifications for
successful changes.
"""

__version__ = "1.0.0"
__author__ = "Career Portfolio"
__description__ = "Client-side state and sync layer for the Career Portfolio API"
