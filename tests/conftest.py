"""
Pytest configuration for async tests.

`portfolio` is a fully wired CareerPortfolioApp talking to an in-memory
FastAPI backend over httpx.ASGITransport. `backend` is that backend's data,
so tests seed records and inject failures directly.
"""
import httpx
import pytest
import pytest_asyncio

from career_portfolio.auth import TokenStore
from career_portfolio.config import ApiSettings, Settings
from career_portfolio.main import CareerPortfolioApp
from tests.fake_backend import VALID_TOKEN, FakeBackend, build_app


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def settings():
    return Settings(api=ApiSettings(api_base_url="http://testserver/api"))


@pytest.fixture
def token_store():
    store = TokenStore()
    store.set(VALID_TOKEN)
    return store


@pytest_asyncio.fixture
async def portfolio(backend, settings, token_store):
    app = CareerPortfolioApp(
        settings=settings,
        current_path="/dashboard",
        token_store=token_store,
        transport=httpx.ASGITransport(app=build_app(backend)),
    )
    async with app:
        yield app
