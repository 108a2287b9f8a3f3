"""API test fixtures: FastAPI apps per site-match mode + httpx clients.

Invariants:
    - Every test gets a fresh app built from the packaged fixture file
    - `client` serves REWRITE mode, `strict_client` serves STRICT mode
    - Tests covering both modes parametrize over SiteMatchMode and open
      their own client with client_for(); async fixtures cannot be pulled
      through request.getfixturevalue from a running loop

Design Decisions:
    - create_app() with explicit Settings instead of env patching: the two
      modes can be exercised side by side in one session
    - ASGITransport does not run lifespan; the catalog is loaded by
      create_app() itself, so no startup hook is needed here
"""

import json

import pytest

from seo_console.core.domain_types import SiteMatchMode
from seo_console.infrastructure.fixture_store import DEFAULT_FIXTURE_PATH
from tests.api.clients import client_for


@pytest.fixture
async def client():
    async with client_for(SiteMatchMode.REWRITE) as c:
        yield c


@pytest.fixture
async def strict_client():
    async with client_for(SiteMatchMode.STRICT) as c:
        yield c


@pytest.fixture
def fixture_rows():
    """Rows exactly as stored in the packaged fixture file."""
    raw = json.loads(DEFAULT_FIXTURE_PATH.read_text(encoding="utf-8"))
    return raw["search_console_rows"]
