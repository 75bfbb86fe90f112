"""Response envelopes returned by the entrypoint handlers.

Field names are snake_case in Python and camelCase on the wire
(``fetched_at`` -> ``fetchedAt``); serialize with ``model_dump(by_alias=True)``.
Upstream records are carried as opaque JSON values.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2025-01-01T00:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Envelope(_CamelModel):
    """Base for every handler output; stamps the build time."""

    fetched_at: str = Field(default_factory=utc_now_iso)


class EndpointSummary(_CamelModel):
    price: str
    description: str


class ExampleQuery(_CamelModel):
    endpoint: str
    input: dict[str, Any]


class OverviewOutput(Envelope):
    agent: str
    version: str
    description: str
    data_source: str
    endpoints: dict[str, EndpointSummary]
    example_queries: list[ExampleQuery] = []


class PaperSearchOutput(Envelope):
    query: str
    total: Any = 0
    papers: list[Any] = []


class PaperDetailsOutput(Envelope):
    paper: Any


class AuthorSearchOutput(Envelope):
    query: str
    authors: list[Any] = []


class AuthorPapersOutput(Envelope):
    author: Any
    papers: list[Any] = []


class CitedPaper(_CamelModel):
    paper_id: str
    title: Any = None
    total_citations: Any = None


class CitationsOutput(Envelope):
    paper: CitedPaper
    citations: list[Any] = []
