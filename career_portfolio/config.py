"""
Career Portfolio - Client configuration.

Centralized configuration using Pydantic Settings for environment variable management.

Environment Variables:
    All settings can be overridden via environment variables with CAREER_PORTFOLIO_ prefix.

    API Settings:
        CAREER_PORTFOLIO_API_BASE_URL=...        - Backend base URL (default http://localhost:5001/api)
        CAREER_PORTFOLIO_REQUEST_TIMEOUT=15      - Per-request timeout in seconds

    Session Settings:
        CAREER_PORTFOLIO_TOKEN_FILE=...          - Where the bearer token is persisted
        CAREER_PORTFOLIO_LOGIN_PATH=/login       - Redirect target after a rejected session

    UI Settings:
        CAREER_PORTFOLIO_TOAST_DURATION_MS=3000  - Default toast lifetime
"""
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """HTTP connection settings for the backend API."""
    api_base_url: str = "http://localhost:5001/api"
    request_timeout: float = 15.0

    class Config:
        env_prefix = "CAREER_PORTFOLIO_"
        env_file = ".env"
        extra = "ignore"


class SessionSettings(BaseSettings):
    """
    Token storage and unauthorized-response handling.

    A 401 response clears the stored token and redirects to login_path,
    unless the user is on the login/register page, the request went to an
    auth endpoint, or the current path is public.
    """
    token_file: Optional[Path] = Path.home() / ".career_portfolio" / "session.json"
    token_key: str = "token"

    login_path: str = "/login"
    register_path: str = "/register"
    auth_endpoint_marker: str = "/auth/"

    # Public routes: exact matches and prefixes
    public_paths: List[str] = ["/"]
    public_path_prefixes: List[str] = ["/portfolio/public", "/pricing"]

    class Config:
        env_prefix = "CAREER_PORTFOLIO_"
        env_file = ".env"
        extra = "ignore"


class UISettings(BaseSettings):
    """Toast defaults."""
    toast_duration_ms: int = 3000

    class Config:
        env_prefix = "CAREER_PORTFOLIO_"
        env_file = ".env"
        extra = "ignore"


class Settings(BaseSettings):
    """Combined client settings."""
    api: ApiSettings = ApiSettings()
    session: SessionSettings = SessionSettings()
    ui: UISettings = UISettings()

    log_level: str = "INFO"

    class Config:
        env_prefix = "CAREER_PORTFOLIO_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
