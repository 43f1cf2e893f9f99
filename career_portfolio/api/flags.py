"""Career Portfolio - Feature flag endpoint."""
from typing import Any, Dict

from .client import ApiClient


class FlagsApi:
    path = "/flags"

    def __init__(self, client: ApiClient):
        self.client = client

    async def get(self) -> Dict[str, Any]:
        """Partial flag map; missing keys keep their client defaults."""
        return await self.client.get(self.path) or {}
