"""Shared pytest fixtures for the bf2_jsonifier test suite.

Provides:
- anyio_backend: run anyio-marked tests on asyncio only
- fake_client: stand-in AspxClient returning canned upstream text
- client: AsyncClient against the ASGI app with the upstream client overridden
"""

import pytest
from httpx import ASGITransport, AsyncClient

from bf2_jsonifier.api.dependencies import get_aspx_client


class FakeAspxClient:
    """Records fetch calls and returns a canned body (or raises)."""

    def __init__(self) -> None:
        self.body = "O\n"
        self.error: Exception | None = None
        self.calls: list[tuple] = []

    async def fetch(self, project_config, source_config, params) -> str:
        self.calls.append((project_config, source_config, dict(params)))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_client() -> FakeAspxClient:
    return FakeAspxClient()


@pytest.fixture
async def client(fake_client: FakeAspxClient):
    """AsyncClient with get_aspx_client overridden to use the fake client."""
    from bf2_jsonifier.api.main import app

    app.dependency_overrides[get_aspx_client] = lambda: fake_client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
