import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOCATION_PLACE_INDEX_NAME", "test-index")
    monkeypatch.setenv("LOCATION_REGION", "us-west-2")
    monkeypatch.setenv("LOCATION_TRANSPORT", "rest")
    monkeypatch.setenv("LOCATION_API_KEY", "test-api-key")
    monkeypatch.setenv("LOCATION_MAP_NAME", "test-map")
    monkeypatch.setenv("LOCATION_ENDPOINT", "")
    monkeypatch.setenv("STARTUP_CHECK", "false")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
