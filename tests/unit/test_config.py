"""Unit tests for Settings."""

from research_intel.config import Settings
from research_intel.constants import SEMANTIC_SCHOLAR_BASE_URL


def test_defaults(monkeypatch):
    for var in ("PORT", "SEMANTIC_SCHOLAR_BASE_URL", "REQUEST_TIMEOUT_SECONDS"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.semantic_scholar_base_url == SEMANTIC_SCHOLAR_BASE_URL
    assert settings.request_timeout_seconds == 30.0


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SEMANTIC_SCHOLAR_API_KEY", "k-123")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.semantic_scholar_api_key == "k-123"
