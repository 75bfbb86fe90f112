"""Pydantic input models, one per entrypoint.

Each model is the typed form of a caller's raw JSON input. Validation either
returns the model (with defaults such as ``limit`` filled in) or raises a
pydantic ``ValidationError`` carrying one entry per offending field.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from research_intel.constants import (
    AUTHOR_PAPERS_DEFAULT_LIMIT,
    AUTHOR_PAPERS_MAX_LIMIT,
    AUTHOR_SEARCH_DEFAULT_LIMIT,
    AUTHOR_SEARCH_MAX_LIMIT,
    CITATIONS_DEFAULT_LIMIT,
    CITATIONS_MAX_LIMIT,
    PAPER_SEARCH_DEFAULT_LIMIT,
    PAPER_SEARCH_MAX_LIMIT,
)


def _reject_bool(value: Any) -> Any:
    # true/false must not become 1/0
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer, not a boolean")
    return value


Limit = Annotated[int, BeforeValidator(_reject_bool)]


class OverviewInput(BaseModel):
    """The free overview takes no input at all."""

    model_config = ConfigDict(extra="forbid")


class PaperSearchInput(BaseModel):
    query: str = Field(
        min_length=1,
        description='Search query (e.g., "machine learning", "climate change")',
    )
    limit: Limit = Field(
        default=PAPER_SEARCH_DEFAULT_LIMIT,
        ge=1,
        le=PAPER_SEARCH_MAX_LIMIT,
        description="Number of results (1-100)",
    )
    year: str | None = Field(
        default=None,
        description='Filter by year range (e.g., "2020-2024" or "2023")',
    )

    @field_validator("year")
    @classmethod
    def blank_year_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


class PaperDetailsInput(BaseModel):
    paper_id: str = Field(
        alias="paperId",
        min_length=1,
        description="Semantic Scholar paper ID, DOI, or arXiv ID",
    )


class AuthorSearchInput(BaseModel):
    query: str = Field(min_length=1, description="Author name to search")
    limit: Limit = Field(
        default=AUTHOR_SEARCH_DEFAULT_LIMIT,
        ge=1,
        le=AUTHOR_SEARCH_MAX_LIMIT,
        description="Number of results (1-50)",
    )


class AuthorPapersInput(BaseModel):
    author_id: str = Field(
        alias="authorId", min_length=1, description="Semantic Scholar author ID"
    )
    limit: Limit = Field(
        default=AUTHOR_PAPERS_DEFAULT_LIMIT,
        ge=1,
        le=AUTHOR_PAPERS_MAX_LIMIT,
        description="Number of papers (1-100)",
    )


class CitationsInput(BaseModel):
    paper_id: str = Field(
        alias="paperId",
        min_length=1,
        description="Semantic Scholar paper ID, DOI, or arXiv ID",
    )
    limit: Limit = Field(
        default=CITATIONS_DEFAULT_LIMIT,
        ge=1,
        le=CITATIONS_MAX_LIMIT,
        description="Number of citations (1-100)",
    )
