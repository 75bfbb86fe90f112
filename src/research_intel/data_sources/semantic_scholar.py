"""
Semantic Scholar Graph API client.

Six methods, one GET each:
  1. search_papers      /paper/search
  2. get_paper          /paper/{paperId}
  3. search_authors     /author/search
  4. get_author         /author/{authorId}
  5. get_author_papers  /author/{authorId}/papers
  6. get_citations      /paper/{paperId}/citations

Responses are returned as decoded JSON without shape validation.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from research_intel.config import Settings
from research_intel.constants import (
    AUTHOR_DETAIL_FIELDS,
    AUTHOR_PAPER_FIELDS,
    AUTHOR_SEARCH_FIELDS,
    CITATION_FIELDS,
    PAPER_DETAIL_FIELDS,
    PAPER_SEARCH_FIELDS,
)
from research_intel.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    RequestContext,
)


def _segment(identifier: str) -> str:
    # DOIs contain "/" and must stay a single path segment
    return quote(identifier, safe="")


class SemanticScholarClient(BaseClient):
    """Client for the Semantic Scholar academic graph."""

    @classmethod
    def from_settings(cls, settings: Settings) -> SemanticScholarClient:
        return cls(
            ClientConfig(
                base_url=settings.semantic_scholar_base_url,
                api_key=settings.semantic_scholar_api_key,
                timeout_seconds=settings.request_timeout_seconds,
            )
        )

    @property
    def _source_name(self) -> str:
        return "semantic_scholar"

    def _default_headers(self) -> dict[str, str]:
        headers = super()._default_headers()
        if self.config.api_key:
            headers["x-api-key"] = self.config.api_key
        return headers

    def _context(self, method: str, **params: Any) -> RequestContext:
        return RequestContext(source=self._source_name, method=method, params=params)

    async def search_papers(
        self, query: str, limit: int, year: str | None = None
    ) -> Any:
        """Keyword search over papers. ``year`` is sent only when given."""
        params = {
            "query": query,
            "limit": limit,
            "year": year,
            "fields": PAPER_SEARCH_FIELDS,
        }
        return await self._rest_get(
            "/paper/search",
            params,
            context=self._context("search_papers", query=query, limit=limit),
        )

    async def get_paper(self, paper_id: str, fields: str = PAPER_DETAIL_FIELDS) -> Any:
        """Fetch one paper by native ID, DOI or arXiv ID."""
        return await self._rest_get(
            f"/paper/{_segment(paper_id)}",
            {"fields": fields},
            context=self._context("get_paper", paper_id=paper_id),
        )

    async def search_authors(self, query: str, limit: int) -> Any:
        return await self._rest_get(
            "/author/search",
            {"query": query, "limit": limit, "fields": AUTHOR_SEARCH_FIELDS},
            context=self._context("search_authors", query=query, limit=limit),
        )

    async def get_author(self, author_id: str) -> Any:
        return await self._rest_get(
            f"/author/{_segment(author_id)}",
            {"fields": AUTHOR_DETAIL_FIELDS},
            context=self._context("get_author", author_id=author_id),
        )

    async def get_author_papers(self, author_id: str, limit: int) -> Any:
        return await self._rest_get(
            f"/author/{_segment(author_id)}/papers",
            {"fields": AUTHOR_PAPER_FIELDS, "limit": limit},
            context=self._context("get_author_papers", author_id=author_id, limit=limit),
        )

    async def get_citations(self, paper_id: str, limit: int) -> Any:
        """Papers citing ``paper_id``; each item wraps a ``citingPaper`` record."""
        return await self._rest_get(
            f"/paper/{_segment(paper_id)}/citations",
            {"fields": CITATION_FIELDS, "limit": limit},
            context=self._context("get_citations", paper_id=paper_id, limit=limit),
        )
