"""Data models for research-intel."""

from research_intel.models.inputs import (
    AuthorPapersInput,
    AuthorSearchInput,
    CitationsInput,
    OverviewInput,
    PaperDetailsInput,
    PaperSearchInput,
)
from research_intel.models.outputs import Envelope

__all__ = [
    "AuthorPapersInput",
    "AuthorSearchInput",
    "CitationsInput",
    "Envelope",
    "OverviewInput",
    "PaperDetailsInput",
    "PaperSearchInput",
]
