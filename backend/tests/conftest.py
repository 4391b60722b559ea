"""Root conftest — shared test configuration and upstream fakes."""

import os

import pytest

# Ensure tests never reach a real upstream
os.environ.setdefault(
    "UPSTREAM_BASE_URL", "http://upstream.test/api/v1/employee",
)
os.environ.setdefault("LOG_FORMAT", "text")

from tests.fake_upstream import BASE_URL, FakeUpstream  # noqa: E402


@pytest.fixture
def fake_upstream():
    return FakeUpstream()


@pytest.fixture
async def upstream_client(fake_upstream):
    """Real UpstreamEmployeeClient wired to the in-memory fake upstream."""
    client = fake_upstream.client(BASE_URL)
    yield client
    await client.http_client.aclose()
