"""
Shared plumbing for resource API classes.

Each resource decodes its payloads into one pydantic model here, so a
change in the backend's record shape is fixed in the model, not in every
caller.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..schemas import ApiPayload, PayloadLike
from .client import ApiClient

T = TypeVar("T", bound=BaseModel)
P = TypeVar("P", bound=ApiPayload)


def to_payload(model_cls: Type[P], data: Optional[PayloadLike]) -> Dict[str, Any]:
    """Validate caller data against a payload schema and serialize it."""
    if data is None:
        return {}
    if isinstance(data, ApiPayload):
        return data.to_payload()
    return model_cls.model_validate(data).to_payload()


class ResourceApi(Generic[T]):
    """CRUD calls for one backend collection."""

    path: str = ""
    model: Type[T]
    create_schema: Type[ApiPayload] = ApiPayload
    update_schema: Type[ApiPayload] = ApiPayload

    def __init__(self, client: ApiClient):
        self.client = client

    def _url(self, *parts: str) -> str:
        return "/".join([self.path, *[str(p) for p in parts]])

    def decode(self, data: Any) -> T:
        return self.model.model_validate(data)

    def decode_list(self, data: Any) -> List[T]:
        return [self.decode(item) for item in (data or [])]

    async def list(self, params: Optional[Dict[str, Any]] = None) -> List[T]:
        return self.decode_list(await self.client.get(self.path, params=params))

    async def get(self, entity_id: str) -> T:
        return self.decode(await self.client.get(self._url(entity_id)))

    async def create(self, data: PayloadLike) -> T:
        payload = to_payload(self.create_schema, data)
        return self.decode(await self.client.post(self.path, json=payload))

    async def update(self, entity_id: str, data: PayloadLike) -> T:
        payload = to_payload(self.update_schema, data)
        return self.decode(await self.client.put(self._url(entity_id), json=payload))

    async def delete(self, entity_id: str) -> str:
        await self.client.delete(self._url(entity_id))
        return entity_id
