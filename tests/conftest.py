from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from promapi.main import create_app
from promapi.settings import Settings


@pytest.fixture
def app_settings() -> Settings:
    return Settings(binary_name="frontend", binary_version="v2.3.1", cors_origins="")


@pytest.fixture
def api_app(app_settings: Settings):
    return create_app(app_settings)


@pytest.fixture
async def client(api_app) -> AsyncClient:
    transport = ASGITransport(app=api_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
