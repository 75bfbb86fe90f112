"""Project-wide constants."""

# -- Agent identity ---------------------------------------------------------
AGENT_NAME: str = "research-intel"
AGENT_DESCRIPTION: str = (
    "Academic research intelligence - paper search, author lookup, "
    "citations via Semantic Scholar"
)
OVERVIEW_DESCRIPTION: str = "Academic research intelligence powered by Semantic Scholar"
DATA_SOURCE: str = "Semantic Scholar API (200M+ papers)"

# -- Transport defaults -----------------------------------------------------
DEFAULT_PORT: int = 3000
DEFAULT_TIMEOUT: float = 30.0

# -- Semantic Scholar -------------------------------------------------------
SEMANTIC_SCHOLAR_BASE_URL: str = "https://api.semanticscholar.org/graph/v1"

PAPER_SEARCH_FIELDS: str = "paperId,title,year,citationCount,authors,venue"
PAPER_DETAIL_FIELDS: str = (
    "paperId,title,abstract,year,citationCount,referenceCount,"
    "influentialCitationCount,fieldsOfStudy,authors,venue,publicationDate,"
    "openAccessPdf,externalIds"
)
PAPER_SUMMARY_FIELDS: str = "title,citationCount"
AUTHOR_SEARCH_FIELDS: str = "authorId,name,affiliations,paperCount,citationCount,hIndex"
AUTHOR_DETAIL_FIELDS: str = "authorId,name,paperCount,citationCount,hIndex"
AUTHOR_PAPER_FIELDS: str = "paperId,title,year,citationCount,venue"
CITATION_FIELDS: str = "paperId,title,year,citationCount,authors,venue"

# -- Pricing (smallest currency unit; 1_000_000 units == $1) ----------------
PRICE_UNITS_PER_DOLLAR: int = 1_000_000
PRICES: dict[str, int] = {
    "overview": 0,
    "paper-search": 1000,
    "paper-details": 2000,
    "author-search": 1000,
    "author-papers": 2000,
    "citations": 3000,
}

# -- Input limits -----------------------------------------------------------
PAPER_SEARCH_MAX_LIMIT: int = 100
PAPER_SEARCH_DEFAULT_LIMIT: int = 10
AUTHOR_SEARCH_MAX_LIMIT: int = 50
AUTHOR_SEARCH_DEFAULT_LIMIT: int = 10
AUTHOR_PAPERS_MAX_LIMIT: int = 100
AUTHOR_PAPERS_DEFAULT_LIMIT: int = 20
CITATIONS_MAX_LIMIT: int = 100
CITATIONS_DEFAULT_LIMIT: int = 20
