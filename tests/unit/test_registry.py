"""Unit tests for EntrypointRegistry dispatch, validation and billing."""

from unittest.mock import AsyncMock, patch

import pytest

from research_intel.constants import PRICES
from research_intel.data_sources.base_client import UpstreamError
from research_intel.models.inputs import PaperSearchInput
from research_intel.models.outputs import Envelope
from research_intel.registry import (
    EntrypointDefinition,
    EntrypointRegistry,
    EntrypointValidationError,
    Operation,
    UnknownEntrypointError,
)


async def _noop_handler(client, params):
    return Envelope()


def test_every_operation_is_registered(registry):
    assert [d.key for d in registry.entrypoints()] == [op.value for op in Operation]


def test_prices_match_table(registry):
    assert {d.key: d.price for d in registry.entrypoints()} == PRICES


def test_duplicate_key_rejected(client):
    registry = EntrypointRegistry(client)
    definition = EntrypointDefinition(
        key="paper-search",
        description="search",
        input_model=PaperSearchInput,
        price=1000,
        handler=_noop_handler,
    )
    registry.register(definition)

    with pytest.raises(ValueError, match="already registered"):
        registry.register(definition)


def test_negative_price_rejected():
    with pytest.raises(ValueError):
        EntrypointDefinition(
            key="bad",
            description="bad",
            input_model=PaperSearchInput,
            price=-1,
            handler=_noop_handler,
        )


async def test_unknown_key(registry):
    with pytest.raises(UnknownEntrypointError) as exc_info:
        await registry.dispatch("paper-delete", {})

    assert exc_info.value.key == "paper-delete"


@pytest.mark.parametrize("limit", [0, 101])
async def test_invalid_limit_never_reaches_upstream(registry, client, billing, limit):
    with patch.object(client, "_rest_get", new=AsyncMock(return_value={})) as mock_get:
        with pytest.raises(EntrypointValidationError) as exc_info:
            await registry.dispatch("paper-search", {"query": "llm", "limit": limit})

    assert mock_get.call_count == 0
    assert billing.charges == []
    assert [e.field for e in exc_info.value.errors] == ["limit"]
    assert exc_info.value.key == "paper-search"


async def test_validation_error_lists_every_field(registry):
    with pytest.raises(EntrypointValidationError) as exc_info:
        await registry.dispatch("author-papers", {"authorId": "", "limit": 500})

    fields = {e.field for e in exc_info.value.errors}
    assert fields == {"authorId", "limit"}
    assert "authorId" in str(exc_info.value)


async def test_non_object_input_rejected(registry):
    with pytest.raises(EntrypointValidationError) as exc_info:
        await registry.dispatch("paper-details", ["not", "an", "object"])

    assert exc_info.value.errors[0].field == "input"


async def test_none_input_treated_as_empty(registry, billing):
    result = await registry.dispatch("overview", None)

    assert result.price == 0
    assert "fetchedAt" in result.output
    assert [(c.key, c.amount) for c in billing.charges] == [("overview", 0)]


async def test_price_reported_before_handler_runs(registry, client, billing):
    seen_charges = []

    async def fake_get(path, params=None, *, context=None):
        seen_charges.extend(billing.charges)
        return {"paperId": "abc"}

    with patch.object(client, "_rest_get", new=AsyncMock(side_effect=fake_get)):
        result = await registry.dispatch("paper-details", {"paperId": "abc"})

    assert [(c.key, c.amount) for c in seen_charges] == [("paper-details", 2000)]
    assert result.price == 2000


async def test_charge_stands_when_upstream_fails(registry, client, billing):
    failure = UpstreamError("semantic_scholar", 500, "Internal Server Error")
    with patch.object(client, "_rest_get", new=AsyncMock(side_effect=failure)):
        with pytest.raises(UpstreamError):
            await registry.dispatch("author-search", {"query": "Hinton"})

    assert [(c.key, c.amount) for c in billing.charges] == [("author-search", 1000)]


async def test_handler_invoked_exactly_once(client, billing):
    handler = AsyncMock(return_value=Envelope())
    registry = EntrypointRegistry(client, billing)
    registry.register(
        EntrypointDefinition(
            key="paper-search",
            description="search",
            input_model=PaperSearchInput,
            price=1000,
            handler=handler,
        )
    )

    await registry.dispatch("paper-search", {"query": "llm"})

    handler.assert_awaited_once()
    passed_client, params = handler.call_args.args
    assert passed_client is client
    assert params == PaperSearchInput(query="llm", limit=10)


def test_input_schema_comes_from_model(registry):
    schema = registry.get("paper-search").input_schema()
    assert schema["required"] == ["query"]
    assert schema["properties"]["limit"]["default"] == 10


async def test_boolean_limit_never_reaches_upstream(registry, client, billing):
    with patch.object(client, "_rest_get", new=AsyncMock(return_value={})) as mock_get:
        with pytest.raises(EntrypointValidationError) as exc_info:
            await registry.dispatch("paper-search", {"query": "x", "limit": True})

    assert [e.field for e in exc_info.value.errors] == ["limit"]
    assert mock_get.call_count == 0
    assert billing.charges == []
