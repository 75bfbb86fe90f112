"""
Entrypoint handlers and the registry that wires them up.

Each handler takes the shared Semantic Scholar client and a validated input
model, makes zero, one or two sequential upstream calls, and projects the
JSON into an envelope. Upstream errors are not caught here.
"""

import logging
from typing import Any

from research_intel import __version__
from research_intel.billing import BillingCollaborator
from research_intel.constants import (
    AGENT_NAME,
    DATA_SOURCE,
    OVERVIEW_DESCRIPTION,
    PAPER_SUMMARY_FIELDS,
    PRICE_UNITS_PER_DOLLAR,
    PRICES,
)
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.models.inputs import (
    AuthorPapersInput,
    AuthorSearchInput,
    CitationsInput,
    OverviewInput,
    PaperDetailsInput,
    PaperSearchInput,
)
from research_intel.models.outputs import (
    AuthorPapersOutput,
    AuthorSearchOutput,
    CitationsOutput,
    CitedPaper,
    EndpointSummary,
    ExampleQuery,
    OverviewOutput,
    PaperDetailsOutput,
    PaperSearchOutput,
)
from research_intel.registry import (
    EntrypointDefinition,
    EntrypointRegistry,
    Operation,
)

logger = logging.getLogger(__name__)

DESCRIPTIONS: dict[Operation, str] = {
    Operation.OVERVIEW: "Free overview - agent capabilities and pricing",
    Operation.PAPER_SEARCH: "Search academic papers by keyword query",
    Operation.PAPER_DETAILS: "Get full paper details including abstract and references",
    Operation.AUTHOR_SEARCH: "Search for academic authors/researchers by name",
    Operation.AUTHOR_PAPERS: "Get all papers published by an author",
    Operation.CITATIONS: "Get papers that cite a given paper",
}

# Shorter blurbs shown in the overview listing
OVERVIEW_BLURBS: dict[Operation, str] = {
    Operation.PAPER_SEARCH: "Search papers by keyword",
    Operation.PAPER_DETAILS: "Get full paper metadata, abstract, authors",
    Operation.AUTHOR_SEARCH: "Find researchers by name",
    Operation.AUTHOR_PAPERS: "Get all papers by an author",
    Operation.CITATIONS: "Get papers citing a given paper",
}

EXAMPLE_QUERIES: list[ExampleQuery] = [
    ExampleQuery(
        endpoint=Operation.PAPER_SEARCH.value,
        input={"query": "large language models", "limit": 10},
    ),
    ExampleQuery(
        endpoint=Operation.AUTHOR_SEARCH.value,
        input={"query": "Geoffrey Hinton"},
    ),
]


def format_price(amount: int) -> str:
    """Render smallest-unit amounts as dollars: 1000 -> '$0.001'."""
    return f"${amount / PRICE_UNITS_PER_DOLLAR:g}"


def _field(response: Any, name: str) -> Any:
    return response.get(name) if isinstance(response, dict) else None


def _data(response: Any, limit: int) -> list:
    data = _field(response, "data")
    return data[:limit] if isinstance(data, list) else []


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def overview(client: SemanticScholarClient, params: OverviewInput) -> OverviewOutput:
    endpoints = {
        op.value: EndpointSummary(
            price=format_price(PRICES[op.value]), description=blurb
        )
        for op, blurb in OVERVIEW_BLURBS.items()
    }
    return OverviewOutput(
        agent=AGENT_NAME,
        version=__version__,
        description=OVERVIEW_DESCRIPTION,
        data_source=DATA_SOURCE,
        endpoints=endpoints,
        example_queries=EXAMPLE_QUERIES,
    )


async def paper_search(
    client: SemanticScholarClient, params: PaperSearchInput
) -> PaperSearchOutput:
    data = await client.search_papers(params.query, params.limit, params.year)
    return PaperSearchOutput(
        query=params.query,
        total=_field(data, "total") or 0,
        papers=_data(data, params.limit),
    )


async def paper_details(
    client: SemanticScholarClient, params: PaperDetailsInput
) -> PaperDetailsOutput:
    data = await client.get_paper(params.paper_id)
    return PaperDetailsOutput(paper=data)


async def author_search(
    client: SemanticScholarClient, params: AuthorSearchInput
) -> AuthorSearchOutput:
    data = await client.search_authors(params.query, params.limit)
    return AuthorSearchOutput(query=params.query, authors=_data(data, params.limit))


async def author_papers(
    client: SemanticScholarClient, params: AuthorPapersInput
) -> AuthorPapersOutput:
    author = await client.get_author(params.author_id)
    papers = await client.get_author_papers(params.author_id, params.limit)
    return AuthorPapersOutput(author=author, papers=_data(papers, params.limit))


async def citations(
    client: SemanticScholarClient, params: CitationsInput
) -> CitationsOutput:
    paper = await client.get_paper(params.paper_id, fields=PAPER_SUMMARY_FIELDS)
    response = await client.get_citations(params.paper_id, params.limit)
    return CitationsOutput(
        paper=CitedPaper(
            paper_id=params.paper_id,
            title=_field(paper, "title"),
            total_citations=_field(paper, "citationCount"),
        ),
        citations=[
            item.get("citingPaper") if isinstance(item, dict) else None
            for item in _data(response, params.limit)
        ],
    )


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

HANDLERS = {
    Operation.OVERVIEW: (OverviewInput, overview),
    Operation.PAPER_SEARCH: (PaperSearchInput, paper_search),
    Operation.PAPER_DETAILS: (PaperDetailsInput, paper_details),
    Operation.AUTHOR_SEARCH: (AuthorSearchInput, author_search),
    Operation.AUTHOR_PAPERS: (AuthorPapersInput, author_papers),
    Operation.CITATIONS: (CitationsInput, citations),
}


def build_registry(
    client: SemanticScholarClient,
    billing: BillingCollaborator | None = None,
) -> EntrypointRegistry:
    """Register every operation with its input model, price and handler."""
    missing = [op.value for op in Operation if op not in HANDLERS]
    if missing:
        raise RuntimeError(f"Operations without a handler: {missing}")

    registry = EntrypointRegistry(client, billing)
    for op in Operation:
        input_model, handler = HANDLERS[op]
        registry.register(
            EntrypointDefinition(
                key=op.value,
                description=DESCRIPTIONS[op],
                input_model=input_model,
                price=PRICES[op.value],
                handler=handler,
            )
        )
    logger.debug("Registered %d entrypoints", len(registry.entrypoints()))
    return registry
