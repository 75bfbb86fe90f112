"""Pytest configuration and fixtures."""

import pytest

from research_intel.billing import Charge
from research_intel.data_sources.base_client import ClientConfig
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.handlers import build_registry

TEST_BASE_URL = "https://s2.example.test/graph/v1"


class RecordingBilling:
    """Billing collaborator that remembers every charge it was given."""

    def __init__(self):
        self.charges: list[Charge] = []

    async def charge(self, key: str, amount: int) -> Charge:
        charge = Charge(key=key, amount=amount)
        self.charges.append(charge)
        return charge


@pytest.fixture
def client() -> SemanticScholarClient:
    """A SemanticScholarClient pointed at a fake base URL.

    Unit tests stub ``_rest_get`` or ``_get_session``, so no session is opened.
    """
    return SemanticScholarClient(ClientConfig(base_url=TEST_BASE_URL))


@pytest.fixture
def billing() -> RecordingBilling:
    return RecordingBilling()


@pytest.fixture
def registry(client, billing):
    """Fully wired registry; patch ``client._rest_get`` to stub upstream."""
    return build_registry(client, billing)


@pytest.fixture
def sample_paper() -> dict:
    """Trimmed Semantic Scholar paper record."""
    return {
        "paperId": "204e3073870fae3d05bcbc2f6a8e263d9b72e776",
        "title": "Attention is All you Need",
        "year": 2017,
        "citationCount": 120000,
        "venue": "Neural Information Processing Systems",
        "authors": [
            {"authorId": "40348417", "name": "Ashish Vaswani"},
            {"authorId": "1846258", "name": "Noam M. Shazeer"},
        ],
    }


@pytest.fixture
def sample_author() -> dict:
    return {
        "authorId": "1741101",
        "name": "Geoffrey E. Hinton",
        "paperCount": 410,
        "citationCount": 600000,
        "hIndex": 170,
    }
