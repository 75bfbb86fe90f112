"""Shared fixtures for integration tests.

These hit the live Semantic Scholar API and are deselected by default;
run them with ``pytest -m integration``. Set SEMANTIC_SCHOLAR_API_KEY to
avoid the unauthenticated rate limit.
"""

import pytest

from research_intel.config import get_settings
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.handlers import build_registry


@pytest.fixture
async def s2_client():
    """Create and tear down a live SemanticScholarClient."""
    c = SemanticScholarClient.from_settings(get_settings())
    yield c
    await c.close()


@pytest.fixture
def live_registry(s2_client):
    return build_registry(s2_client)
