"""
Career Portfolio - Authentication endpoints.

Login and registration store the returned bearer token so every later
request is authenticated; logout only forgets it locally.
"""
from typing import Any, Dict
import logging

from ..schemas import AuthResult, PayloadLike, RegisterRequest, User
from .base import to_payload
from .client import ApiClient

logger = logging.getLogger("career_portfolio.auth")


def _decode_user(data: Any) -> User:
    """Profile endpoints answer with either {"user": {...}} or the bare record."""
    data = data or {}
    return User.model_validate(data["user"] if "user" in data else data)


class AuthApi:
    path = "/auth"

    def __init__(self, client: ApiClient):
        self.client = client

    async def login(self, email: str, password: str) -> AuthResult:
        data = await self.client.post(f"{self.path}/login", json={"email": email, "password": password})
        result = AuthResult.model_validate(data)
        self.client.token_store.set(result.token)
        logger.info(f"Logged in as {result.user.email}")
        return result

    async def register(self, data: PayloadLike) -> AuthResult:
        payload = to_payload(RegisterRequest, data)
        result = AuthResult.model_validate(await self.client.post(f"{self.path}/register", json=payload))
        self.client.token_store.set(result.token)
        logger.info(f"Registered {result.user.email}")
        return result

    async def profile(self) -> User:
        return _decode_user(await self.client.get(f"{self.path}/profile"))

    async def update_profile(self, changes: Dict[str, Any]) -> User:
        return _decode_user(await self.client.put(f"{self.path}/profile", json=changes))

    def logout(self) -> None:
        self.client.token_store.clear()

    @property
    def is_authenticated(self) -> bool:
        return self.client.token_store.get() is not None
