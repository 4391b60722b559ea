"""API test fixtures — FastAPI app over the in-memory fake upstream.

Invariants:
    - get_upstream_client is overridden; no lifespan, no real network
    - Overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_proxy.api.dependencies import get_upstream_client
from employee_proxy.main import app


@pytest.fixture
async def client(upstream_client):
    """HTTP client for the proxy API, wired to the fake upstream."""
    app.dependency_overrides[get_upstream_client] = lambda: upstream_client

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
