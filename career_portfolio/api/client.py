"""
Career Portfolio - HTTP client wrapper.

Thin layer over httpx.AsyncClient that:
- attaches the stored bearer token to every request
- reacts to 401 responses by clearing the token and redirecting to login,
  except on auth pages, auth endpoints and public routes
- unwraps the backend's {"success": ..., "data": ...} envelope in one place
- turns failures into ApiError with the server's message when it sent one
"""
from typing import Any, Dict, Optional
import logging

import httpx

from ..auth.session import Navigator, TokenStore
from ..config import SessionSettings, settings

logger = logging.getLogger("career_portfolio.api")


class ApiError(Exception):
    """
    Request failed.

    `detail` holds the message the server put in the response body, or None
    when there was no usable body (transport errors, HTML error pages).
    """

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        message: Optional[str] = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.code = code
        if not message:
            if detail:
                message = detail
            elif status_code is not None:
                message = f"Request failed with status code {status_code}"
            else:
                message = "Request failed"
        super().__init__(message)


class NetworkError(ApiError):
    """The request never produced an HTTP response."""

    def __init__(self, reason: str):
        super().__init__(None, message=f"Network error: {reason}")
        self.reason = reason


class UnauthorizedError(ApiError):
    """401 from the backend."""
    pass


def extract_error_message(body: Any) -> Optional[str]:
    """Pull the human-readable message out of an error envelope."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    message = body.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def unwrap(response: httpx.Response) -> Any:
    """
    Decode a backend response.

    Success: returns body["data"] for enveloped bodies, the raw body
    otherwise, and None for empty bodies.
    Failure: raises UnauthorizedError for 401, ApiError for anything else.
    """
    if response.is_success:
        if not response.content:
            return None
        body = response.json()
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    try:
        body = response.json()
    except ValueError:
        body = None

    code = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        code = body["error"].get("code")

    exc_class = UnauthorizedError if response.status_code == 401 else ApiError
    raise exc_class(extract_error_message(body), status_code=response.status_code, code=code)


def is_public_path(path: str, session: Optional[SessionSettings] = None) -> bool:
    session = session or settings.session
    if path in session.public_paths:
        return True
    return any(path.startswith(prefix) for prefix in session.public_path_prefixes)


def should_redirect_on_unauthorized(
    current_path: str,
    request_url: str,
    session: Optional[SessionSettings] = None
) -> bool:
    """
    Decide whether a 401 ends the session.

    No redirect when already on login/register, when the failing request
    targeted an auth endpoint (bad credentials are the caller's business),
    or when the user is browsing a public page.
    """
    session = session or settings.session
    if current_path in (session.login_path, session.register_path):
        return False
    if session.auth_endpoint_marker in request_url:
        return False
    if is_public_path(current_path, session):
        return False
    return True


class ApiClient:
    """
    Async HTTP client for the Career Portfolio backend.

    Usage:
        async with ApiClient(TokenStore(), Navigator("/dashboard")) as api:
            projects = await api.get("/projects")
    """

    def __init__(
        self,
        token_store: TokenStore,
        navigator: Navigator,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        session: Optional[SessionSettings] = None
    ):
        self.token_store = token_store
        self.navigator = navigator
        self.session = session or settings.session
        self.base_url = base_url or settings.api.api_base_url
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else settings.api.request_timeout,
            transport=transport,
            event_hooks={
                "request": [self._attach_token],
                "response": [self._handle_unauthorized],
            },
        )

    async def _attach_token(self, request: httpx.Request) -> None:
        token = self.token_store.get()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return

        request_url = response.request.url.path
        current_path = self.navigator.current_path
        if not should_redirect_on_unauthorized(current_path, request_url, self.session):
            logger.debug(f"401 from {request_url} on {current_path}; leaving session intact")
            return

        logger.warning(f"Session rejected by {request_url}; redirecting to {self.session.login_path}")
        self.token_store.clear()
        self.navigator.navigate(self.session.login_path)

    async def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None
    ) -> Any:
        """Send a request and return the unwrapped payload."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            response = await self._client.request(method, url, params=params or None, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(str(e) or type(e).__name__) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return unwrap(response)

    async def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", url, params=params)

    async def post(self, url: str, json: Any = None) -> Any:
        return await self.request("POST", url, json=json)

    async def put(self, url: str, json: Any = None) -> Any:
        return await self.request("PUT", url, json=json)

    async def patch(self, url: str, json: Any = None) -> Any:
        return await self.request("PATCH", url, json=json)

    async def delete(self, url: str) -> Any:
        return await self.request("DELETE", url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
