"""Career Portfolio - Feature flag store."""
from typing import Any, Dict, Optional

from ..api.flags import FlagsApi
from ..events import EventBus
from ..schemas import FeatureFlags
from .base import BaseStore


class FlagStore(BaseStore):
    name = "flags"

    def __init__(self, api: FlagsApi, bus: EventBus):
        super().__init__(bus)
        self.api = api
        self.flags = FeatureFlags()

    def is_enabled(self, flag: str) -> bool:
        return bool(getattr(self.flags, flag, False))

    async def fetch(self) -> Optional[FeatureFlags]:
        return await self._run(
            self._load, self._set_flags,
            "Failed to fetch feature flags",
            latest="fetch",
        )

    async def _load(self) -> FeatureFlags:
        partial: Dict[str, Any] = await self.api.get()
        # Server sends only the flags it overrides
        merged = {**self.flags.model_dump(), **FeatureFlags.model_validate(partial).model_dump(exclude_unset=True)}
        merged["loaded"] = True
        return FeatureFlags.model_validate(merged)

    def _set_flags(self, flags: FeatureFlags) -> None:
        self.flags = flags
