"""API test fixtures — FastAPI test client over ASGI.

Invariants:
    - No network: requests go straight to the ASGI app
    - Settings cache cleared around each test so env overrides apply
"""

import pytest
from httpx import ASGITransport, AsyncClient

from parsoid_rest.config import get_settings
from parsoid_rest.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()
