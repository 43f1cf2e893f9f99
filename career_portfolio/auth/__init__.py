"""
Career Portfolio - Session Module

Persistent bearer token and navigation state used by the HTTP client.

Usage:
    from career_portfolio.auth import TokenStore, Navigator

    tokens = TokenStore(settings.session.token_file)
    navigator = Navigator(current_path="/dashboard")
"""

from .session import TokenStore, Navigator

__all__ = [
    "TokenStore",
    "Navigator",
]
