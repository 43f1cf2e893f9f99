"""Project store: CRUD, completion and request sequencing."""
import asyncio

import pytest

from career_portfolio.api.client import ApiError
from career_portfolio.events import EventBus
from career_portfolio.schemas import Project, ProjectStatus
from career_portfolio.stores import ProjectStore


def new_project(**overrides):
    data = {
        "title": "CLI toolkit",
        "description": "Small automation scripts",
        "techStack": ["python"],
        "targetEndDate": "2024-06-30T00:00:00Z",
    }
    data.update(overrides)
    return data


class GatedProjectsApi:
    """Hands out list results only when the test releases each call."""

    def __init__(self):
        self.calls = []

    async def list(self, params=None):
        gate = asyncio.Event()
        call = {"gate": gate, "result": None, "error": None}
        self.calls.append(call)
        await gate.wait()
        if call["error"] is not None:
            raise call["error"]
        return call["result"]

    def release(self, index, result=None, error=None):
        self.calls[index]["result"] = result
        self.calls[index]["error"] = error
        self.calls[index]["gate"].set()


async def started(api, count):
    while len(api.calls) < count:
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_create_prepends_and_shows_one_toast(portfolio, backend):
    backend.add_project(id="1")
    store = portfolio.projects
    await store.fetch_all()
    before = list(store.items)

    created = await store.create(new_project())

    assert store.items[0] == created
    assert store.items[1:] == before
    assert created.status == ProjectStatus.PLANNING
    assert [(t.message, t.severity.value) for t in portfolio.toasts.toasts] == [("Project created", "success")]


@pytest.mark.asyncio
async def test_create_clears_previous_error_while_pending(portfolio, backend):
    backend.fail("projects.list", 500, "Database unavailable")
    store = portfolio.projects
    await store.fetch_all()
    assert store.error == "Database unavailable"

    states = []
    store.subscribe(lambda s: states.append((s.loading, s.error)))
    await store.create(new_project())

    assert states[0] == (True, None)
    assert store.error is None


@pytest.mark.asyncio
async def test_fetch_failure_with_html_body_uses_fallback(portfolio, backend):
    backend.fail("projects.list", 502, None)

    await portfolio.projects.fetch_all()

    assert portfolio.projects.error == "Failed to fetch projects"


@pytest.mark.asyncio
async def test_complete_updates_record_without_toast(portfolio, backend):
    backend.add_project(id="1", progress=80)
    store = portfolio.projects
    await store.fetch_all()

    result = await store.complete("1")

    assert result.status == ProjectStatus.COMPLETED
    assert store.items[0].progress == 100
    assert store.items[0].actual_end_date is not None
    assert portfolio.toasts.toasts == []


@pytest.mark.asyncio
async def test_update_status(portfolio, backend):
    backend.add_project(id="1")
    store = portfolio.projects
    await store.fetch_all()

    await store.update_status("1", ProjectStatus.PAUSED)

    assert store.items[0].status == ProjectStatus.PAUSED


@pytest.mark.asyncio
async def test_update_and_delete_toast(portfolio, backend):
    backend.add_project(id="1")
    store = portfolio.projects
    await store.fetch_all()

    await store.update("1", {"title": "Renamed"})
    await store.delete("1")

    assert store.items == []
    assert [t.message for t in portfolio.toasts.toasts] == ["Project updated", "Project deleted"]


@pytest.mark.asyncio
async def test_editing_another_project_keeps_selected(portfolio, backend):
    backend.add_project(id="A")
    backend.add_project(id="B", title="Picked")
    store = portfolio.projects
    await store.fetch_all()
    await store.fetch_one("B")

    await store.update("A", {"title": "Renamed"})
    await store.complete("A")
    assert store.selected.id == "B"
    assert store.selected.title == "Picked"

    await store.delete("A")
    assert [p.id for p in store.items] == ["B"]
    assert store.selected.id == "B"


@pytest.mark.asyncio
async def test_delete_failure_keeps_record(portfolio, backend):
    backend.add_project(id="1")
    backend.fail("projects.delete", 403, "Not your project")
    store = portfolio.projects
    await store.fetch_all()

    assert await store.delete("1") is None
    assert [p.id for p in store.items] == ["1"]
    assert store.error == "Not your project"


@pytest.mark.asyncio
async def test_fetch_one_missing_sets_error(portfolio):
    await portfolio.projects.fetch_one("nope")

    assert portfolio.projects.selected is None
    assert portfolio.projects.error == "Project not found"


@pytest.mark.asyncio
async def test_overdue(portfolio, backend):
    backend.add_project(id="1", isOverdue=True)
    backend.add_project(id="2")

    await portfolio.projects.fetch_all()

    assert [p.id for p in portfolio.projects.overdue] == ["1"]


@pytest.mark.asyncio
async def test_server_fields_pass_through(portfolio, backend):
    backend.add_project(id="1", collaborators=["amy"])

    await portfolio.projects.fetch_all()

    assert portfolio.projects.items[0].model_extra == {"collaborators": ["amy"]}


# --- sequencing ---

@pytest.mark.asyncio
async def test_latest_fetch_wins_when_earlier_resolves_last():
    api = GatedProjectsApi()
    store = ProjectStore(api, EventBus())

    first = asyncio.ensure_future(store.fetch_all())
    second = asyncio.ensure_future(store.fetch_all())
    await started(api, 2)

    api.release(1, [Project(id="new", title="Newer")])
    await second
    api.release(0, [Project(id="old", title="Older")])
    await first

    assert [p.id for p in store.items] == ["new"]
    assert first.result() is None
    assert store.loading is False


@pytest.mark.asyncio
async def test_superseded_failure_is_ignored():
    api = GatedProjectsApi()
    store = ProjectStore(api, EventBus())

    first = asyncio.ensure_future(store.fetch_all())
    second = asyncio.ensure_future(store.fetch_all())
    await started(api, 2)

    api.release(1, [Project(id="1", title="Fresh")])
    await second
    api.release(0, error=ApiError("Timed out", status_code=504))
    await first

    assert store.error is None
    assert [p.id for p in store.items] == ["1"]


@pytest.mark.asyncio
async def test_loading_stays_on_until_latest_resolves():
    api = GatedProjectsApi()
    store = ProjectStore(api, EventBus())

    first = asyncio.ensure_future(store.fetch_all())
    second = asyncio.ensure_future(store.fetch_all())
    await started(api, 2)

    api.release(0, [Project(id="old", title="Older")])
    await first
    assert store.loading is True
    assert store.items == []

    api.release(1, [Project(id="new", title="Newer")])
    await second
    assert store.loading is False
    assert [p.id for p in store.items] == ["new"]
