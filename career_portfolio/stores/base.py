"""
Career Portfolio - Store base classes.

Every store operation goes through the same three phases:

    pending    loading=True, error cleared
    fulfilled  loading=False, result merged, mutation event published
    rejected   loading=False, error set to a displayable message

Operations never raise for backend or payload failures; they return None
and leave the message in `error` for the caller to show.

Fetches that replace a collection are sequenced per kind: when two are in
flight, only the most recently issued one may touch state.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar
import logging

from pydantic import BaseModel, ValidationError

from ..api.client import ApiError
from ..events import EventBus, MutationEvent

T = TypeVar("T", bound=BaseModel)

Listener = Callable[["BaseStore"], None]


@dataclass
class Snapshot(Generic[T]):
    """
    Pre-image of an entity taken before an optimistic change.

    `installed` is the optimistic copy put in its place, or None for a
    removal. Revert only undoes the change while that copy is still there.
    """
    entity: T
    index: int
    was_selected: bool
    installed: Optional[T] = None


class BaseStore:
    """Loading/error bookkeeping, change listeners and the phase runner."""

    name = "store"

    def __init__(self, bus: EventBus):
        self.loading = False
        self.error: Optional[str] = None
        self._bus = bus
        self._listeners: List[Listener] = []
        self._issued: Dict[str, int] = {}
        self.logger = logging.getLogger(f"career_portfolio.stores.{self.name}")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(store)` after every state change."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def clear_error(self) -> None:
        self.error = None
        self._notify()

    def _issue(self, kind: str) -> int:
        self._issued[kind] = self._issued.get(kind, 0) + 1
        return self._issued[kind]

    def _is_stale(self, kind: Optional[str], seq: Optional[int]) -> bool:
        return kind is not None and seq != self._issued.get(kind)

    async def _run(
        self,
        call: Callable[[], Awaitable[Any]],
        on_fulfilled: Callable[[Any], None],
        fallback: str,
        event: Optional[MutationEvent] = None,
        latest: Optional[str] = None
    ) -> Any:
        """
        Execute one operation through its pending/fulfilled/rejected phases.

        `latest` names a sequencing kind; a result or failure for a request
        that has since been superseded is dropped without touching state.
        """
        seq = self._issue(latest) if latest else None

        self.loading = True
        self.error = None
        self._notify()

        try:
            result = await call()
        except (ApiError, ValidationError) as exc:
            if self._is_stale(latest, seq):
                self.logger.debug(f"Dropping superseded {latest} failure: {exc}")
                return None
            detail = exc.detail if isinstance(exc, ApiError) else None
            self.loading = False
            self.error = detail or fallback
            self.logger.warning(f"{fallback}: {exc}")
            self._notify()
            return None

        if self._is_stale(latest, seq):
            self.logger.debug(f"Dropping superseded {latest} result")
            return None

        self.loading = False
        on_fulfilled(result)
        self._notify()
        if event is not None:
            self._bus.publish(event, result)
        return result


class EntityStore(BaseStore, Generic[T]):
    """
    A cached collection plus the currently selected record.

    The merge helpers below are the only code that edits `items` and
    `selected`; confirmed results and optimistic changes both go through
    them so the two paths cannot drift apart.
    """

    def __init__(self, bus: EventBus):
        super().__init__(bus)
        self.items: List[T] = []
        self.selected: Optional[T] = None

    # --- lookups ---

    def index_of(self, entity_id: str) -> int:
        for i, item in enumerate(self.items):
            if item.id == entity_id:
                return i
        return -1

    def get(self, entity_id: str) -> Optional[T]:
        i = self.index_of(entity_id)
        return self.items[i] if i != -1 else None

    def _is_selected(self, entity_id: str) -> bool:
        return self.selected is not None and self.selected.id == entity_id

    # --- selection ---

    def select(self, entity: Optional[T]) -> None:
        self.selected = entity
        self._notify()

    def clear_selected(self) -> None:
        self.select(None)

    # --- merge helpers ---

    def _replace_all(self, entities: List[T]) -> None:
        self.items = list(entities)

    def _prepend(self, entity: T) -> None:
        self.items.insert(0, entity)

    def _replace(self, entity: T) -> None:
        i = self.index_of(entity.id)
        if i != -1:
            self.items[i] = entity
        else:
            self.logger.debug(f"{entity.id} not cached; keeping server result out of the list")
        if self._is_selected(entity.id):
            self.selected = entity

    def _remove(self, entity_id: str) -> None:
        self.items = [item for item in self.items if item.id != entity_id]
        if self._is_selected(entity_id):
            self.selected = None

    # --- optimistic support ---

    def snapshot(self, entity_id: str) -> Optional[Snapshot]:
        """Capture an entity before changing it; None when it isn't cached."""
        i = self.index_of(entity_id)
        if i != -1:
            return Snapshot(self.items[i], i, self._is_selected(entity_id))
        if self._is_selected(entity_id):
            return Snapshot(self.selected, -1, True)
        return None

    def install(self, snapshot: Snapshot, entity: T) -> None:
        """Put an optimistic copy in place of the snapshotted entity."""
        snapshot.installed = entity
        self._replace(entity)

    def is_superseded(self, snapshot: Snapshot) -> bool:
        """True when the record changed after the optimistic edit was applied."""
        entity_id = snapshot.entity.id
        i = self.index_of(entity_id)
        if snapshot.installed is None:
            # Removal: a fetch brought the record back
            return i != -1
        if i != -1 and self.items[i] is not snapshot.installed:
            return True
        return self._is_selected(entity_id) and self.selected is not snapshot.installed

    def revert(self, snapshot: Optional[Snapshot]) -> bool:
        """
        Put a snapshotted entity back where it was.

        Returns False, leaving state untouched, when the record has been
        replaced since the optimistic edit; the newer copy is not
        overwritten with the pre-image.
        """
        if snapshot is None:
            return True
        entity = snapshot.entity
        if self.is_superseded(snapshot):
            self.logger.info(f"{entity.id} changed after the optimistic edit; not reverting")
            return False

        i = self.index_of(entity.id)
        if i != -1:
            self.items[i] = entity
        elif snapshot.installed is None and snapshot.index != -1:
            self.items.insert(min(snapshot.index, len(self.items)), entity)
        if snapshot.was_selected and (self.selected is None or self._is_selected(entity.id)):
            self.selected = entity
        self.logger.info(f"Reverted optimistic change to {entity.id}")
        self._notify()
        return True


class CrudStore(EntityStore[T]):
    """
    Entity store backed by a ResourceApi with the standard five operations.

    Subclasses set the api type, the singular/plural labels used in error
    messages and the events published on create/update/delete.
    """

    singular = "record"
    plural = "records"
    created_event: Optional[MutationEvent] = None
    updated_event: Optional[MutationEvent] = None
    deleted_event: Optional[MutationEvent] = None

    def __init__(self, api, bus: EventBus):
        super().__init__(bus)
        self.api = api

    async def fetch_all(self, filters: Any = None) -> Optional[List[T]]:
        """Replace the cached list with the server's."""
        call = (lambda: self.api.list(filters)) if filters is not None else self.api.list
        return await self._run(
            call, self._replace_all,
            f"Failed to fetch {self.plural}",
            latest="fetch_all",
        )

    async def fetch_one(self, entity_id: str) -> Optional[T]:
        return await self._run(
            lambda: self.api.get(entity_id), self._set_selected,
            f"Failed to fetch {self.singular}",
            latest="fetch_one",
        )

    async def create(self, data: Any) -> Optional[T]:
        return await self._run(
            lambda: self.api.create(data), self._on_created,
            f"Failed to create {self.singular}",
            event=self.created_event,
        )

    async def update(self, entity_id: str, data: Any) -> Optional[T]:
        return await self._run(
            lambda: self.api.update(entity_id, data), self._on_updated,
            f"Failed to update {self.singular}",
            event=self.updated_event,
        )

    async def delete(self, entity_id: str) -> Optional[str]:
        return await self._run(
            lambda: self.api.delete(entity_id), self._remove,
            f"Failed to delete {self.singular}",
            event=self.deleted_event,
        )

    async def reload(self, entity_id: str) -> Optional[T]:
        """
        Refresh one cached record from the server.

        Runs outside the phase machinery so the error of the operation that
        triggered it stays visible.
        """
        try:
            entity = await self.api.get(entity_id)
        except (ApiError, ValidationError) as exc:
            self.logger.warning(f"Failed to reload {self.singular} {entity_id}: {exc}")
            return None
        self._replace(entity)
        self._notify()
        return entity

    async def rollback(self, snapshot: Optional[Snapshot]) -> None:
        """Undo a refused optimistic edit, or reload the record if it moved on."""
        if snapshot is not None and not self.revert(snapshot):
            await self.reload(snapshot.entity.id)

    # Reducers; subclasses extend these for cross-entity rules.

    def _set_selected(self, entity: T) -> None:
        self.selected = entity

    def _on_created(self, entity: T) -> None:
        self._prepend(entity)

    def _on_updated(self, entity: T) -> None:
        self._replace(entity)
