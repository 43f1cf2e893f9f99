"""
Career Portfolio - Client session state.

TokenStore persists the bearer token between runs (the browser client kept
it in localStorage under the key "token"). Navigator tracks the path the
user is on, which decides whether a 401 forces a trip back to login.
"""
from pathlib import Path
from typing import Callable, Dict, List, Optional
import json
import logging

logger = logging.getLogger("career_portfolio.auth")


class TokenStore:
    """
    Key/value file holding the session token.

    With path=None the token lives in memory only, which is what tests
    and one-off scripts want.
    """

    def __init__(self, path: Optional[Path] = None, key: str = "token"):
        self.path = Path(path).expanduser() if path else None
        self.key = key
        self._data: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._data is not None:
            return self._data

        self._data = {}
        if self.path and self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    self._data = {k: v for k, v in loaded.items() if isinstance(v, str)}
            except (OSError, ValueError) as e:
                logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
        return self._data

    def _save(self) -> None:
        if not self.path:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._load(), f)

    def get(self) -> Optional[str]:
        return self._load().get(self.key)

    def set(self, token: str) -> None:
        self._load()[self.key] = token
        self._save()
        logger.debug("Session token stored")

    def clear(self) -> None:
        data = self._load()
        if self.key in data:
            del data[self.key]
            self._save()
            logger.info("Session token cleared")


class Navigator:
    """Current location plus a record of forced redirects."""

    def __init__(
        self,
        current_path: str = "/",
        on_navigate: Optional[Callable[[str], None]] = None
    ):
        self.current_path = current_path
        self.history: List[str] = []
        self._on_navigate = on_navigate

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating from {self.current_path} to {path}")
        self.history.append(self.current_path)
        self.current_path = path
        if self._on_navigate:
            self._on_navigate(path)
