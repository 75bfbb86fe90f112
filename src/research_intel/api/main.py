"""FastAPI application exposing the registered entrypoints over HTTP."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from research_intel import __version__
from research_intel.billing import LoggingBilling
from research_intel.config import Settings, get_settings
from research_intel.constants import AGENT_DESCRIPTION, AGENT_NAME
from research_intel.data_sources.base_client import (
    TransportError,
    UpstreamError,
    UpstreamTimeoutError,
)
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.handlers import build_registry
from research_intel.registry import (
    EntrypointDefinition,
    EntrypointRegistry,
    EntrypointValidationError,
    UnknownEntrypointError,
)

logger = logging.getLogger(__name__)


class InvokeRequest(BaseModel):
    input: Any = None


class InvokeResponse(BaseModel):
    output: dict[str, Any]
    price: int


def _describe(definition: EntrypointDefinition) -> dict[str, Any]:
    return {
        "key": definition.key,
        "description": definition.description,
        "price": definition.price,
        "inputSchema": definition.input_schema(),
    }


def create_app(
    settings: Settings | None = None,
    registry: EntrypointRegistry | None = None,
) -> FastAPI:
    """Build the app. A registry passed in is used as-is and never closed."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client: SemanticScholarClient | None = None
        if registry is None:
            client = SemanticScholarClient.from_settings(settings)
            app.state.registry = build_registry(client, LoggingBilling(settings))
        else:
            app.state.registry = registry
        logger.info("%s %s ready", AGENT_NAME, __version__)
        yield
        if client is not None:
            await client.close()

    app = FastAPI(
        title="research-intel",
        description=AGENT_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )

    @app.exception_handler(EntrypointValidationError)
    async def _validation_error(request: Request, exc: EntrypointValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "key": exc.key,
                "errors": [e.model_dump() for e in exc.errors],
            },
        )

    @app.exception_handler(UnknownEntrypointError)
    async def _unknown_entrypoint(request: Request, exc: UnknownEntrypointError):
        return JSONResponse(
            status_code=404,
            content={"error": "unknown_entrypoint", "key": exc.key},
        )

    @app.exception_handler(UpstreamError)
    async def _upstream_error(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=502,
            content={
                "error": "upstream_error",
                "status": exc.status_code,
                "body": exc.body,
            },
        )

    @app.exception_handler(TransportError)
    async def _transport_error(request: Request, exc: TransportError):
        status = 504 if isinstance(exc, UpstreamTimeoutError) else 502
        return JSONResponse(
            status_code=status,
            content={"error": "transport_error", "message": str(exc)},
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/.well-known/agent.json")
    async def manifest(request: Request) -> dict[str, Any]:
        entrypoints: EntrypointRegistry = request.app.state.registry
        return {
            "name": AGENT_NAME,
            "version": __version__,
            "description": AGENT_DESCRIPTION,
            "entrypoints": [_describe(d) for d in entrypoints.entrypoints()],
        }

    @app.get("/entrypoints")
    async def list_entrypoints(request: Request) -> list[dict[str, Any]]:
        entrypoints: EntrypointRegistry = request.app.state.registry
        return [_describe(d) for d in entrypoints.entrypoints()]

    @app.post("/entrypoints/{key}/invoke")
    async def invoke(
        key: str, request: Request, body: InvokeRequest | None = None
    ) -> InvokeResponse:
        entrypoints: EntrypointRegistry = request.app.state.registry
        result = await entrypoints.dispatch(key, body.input if body else None)
        return InvokeResponse(output=result.output, price=result.price)

    return app


app = create_app()
