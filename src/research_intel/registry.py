"""
Entrypoint registry.

Maps an operation key to its input model, fixed price and handler, and is
the single dispatch boundary used by the HTTP app and the CLI:

    registry.register(EntrypointDefinition(...))
    result = await registry.dispatch("paper-search", {"query": "llm"})

Dispatch validates the raw input first. Invalid input never reaches billing,
the handler, or the upstream API.
"""

import logging
from enum import Enum
from typing import Any, Awaitable, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from research_intel.billing import BillingCollaborator, LoggingBilling
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.models.outputs import Envelope

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Every entrypoint this service exposes."""

    OVERVIEW = "overview"
    PAPER_SEARCH = "paper-search"
    PAPER_DETAILS = "paper-details"
    AUTHOR_SEARCH = "author-search"
    AUTHOR_PAPERS = "author-papers"
    CITATIONS = "citations"


Handler = Callable[[SemanticScholarClient, Any], Awaitable[Envelope]]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class FieldError(BaseModel):
    field: str
    message: str


class EntrypointValidationError(Exception):
    """Caller input did not satisfy the entrypoint's input model."""

    def __init__(self, key: str, errors: list[FieldError]):
        self.key = key
        self.errors = errors
        detail = "; ".join(f"{e.field}: {e.message}" for e in errors)
        super().__init__(f"Invalid input for '{key}': {detail}")

    @classmethod
    def from_pydantic(cls, key: str, exc: ValidationError) -> "EntrypointValidationError":
        errors = [
            FieldError(
                field=".".join(str(part) for part in err["loc"]) or "input",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return cls(key, errors)


class UnknownEntrypointError(Exception):
    """No entrypoint is registered under the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown entrypoint '{key}'")


# ---------------------------------------------------------------------------
# Definitions and results
# ---------------------------------------------------------------------------


class EntrypointDefinition(BaseModel):
    """A named, priced, independently invocable operation."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str
    description: str
    input_model: type[BaseModel]
    price: int = Field(ge=0)  # smallest currency unit
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


class DispatchResult(BaseModel):
    key: str
    price: int
    output: dict[str, Any]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class EntrypointRegistry:
    """Holds entrypoint definitions and dispatches calls to their handlers."""

    def __init__(
        self,
        client: SemanticScholarClient,
        billing: BillingCollaborator | None = None,
    ):
        self.client = client
        self.billing = billing or LoggingBilling()
        self._definitions: dict[str, EntrypointDefinition] = {}

    def register(self, definition: EntrypointDefinition) -> None:
        if definition.key in self._definitions:
            raise ValueError(f"Entrypoint '{definition.key}' is already registered")
        self._definitions[definition.key] = definition

    def get(self, key: str) -> EntrypointDefinition:
        try:
            return self._definitions[key]
        except KeyError:
            raise UnknownEntrypointError(key) from None

    def entrypoints(self) -> list[EntrypointDefinition]:
        return list(self._definitions.values())

    def validate(self, key: str, raw_input: Any) -> BaseModel:
        """Coerce raw caller input into the entrypoint's typed input model."""
        definition = self.get(key)
        try:
            return definition.input_model.model_validate(
                {} if raw_input is None else raw_input
            )
        except ValidationError as e:
            raise EntrypointValidationError.from_pydantic(key, e) from e

    async def dispatch(self, key: str, raw_input: Any) -> DispatchResult:
        """Validate, report the price, then run the handler exactly once.

        Upstream failures propagate unchanged; the charge has already been
        reported by then.
        """
        definition = self.get(key)
        params = self.validate(key, raw_input)

        logger.info("Dispatch [%s] price=%d", key, definition.price)
        await self.billing.charge(key, definition.price)

        envelope = await definition.handler(self.client, params)
        return DispatchResult(
            key=key,
            price=definition.price,
            output=envelope.model_dump(mode="json", by_alias=True),
        )
