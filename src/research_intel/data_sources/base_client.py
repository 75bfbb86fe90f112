"""
Base client for upstream data sources.

Provides: lazy aiohttp session management, structured request logging and
a typed error hierarchy. Requests are issued exactly once; there is no
caching, rate limiting or retry at this layer.
"""

import asyncio
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

from research_intel.constants import DEFAULT_TIMEOUT

logger = logging.getLogger("research_intel.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Connection settings for a single upstream API."""

    base_url: str
    api_key: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "semantic_scholar"
    method: str  # e.g. "search_papers"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


class UpstreamError(DataSourceError):
    """The upstream API answered with a non-success HTTP status."""

    def __init__(self, source: str, status_code: int, body: str):
        self.body = body
        super().__init__(source, f"HTTP {status_code} - {body}", status_code=status_code)


class TransportError(DataSourceError):
    """The upstream API could not be reached or sent an unreadable body."""

    pass


class UpstreamTimeoutError(TransportError):
    """No complete response arrived within the configured timeout."""

    pass


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for upstream REST clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()` with a path relative to `config.base_url`.
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'semantic_scholar'."""
        ...

    # -- Session management --------------------------------------------------

    def _default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(
                timeout=timeout, headers=self._default_headers()
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request --------------------------------------------------------

    async def _rest_get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Issue one GET against the upstream API and return the decoded JSON.

        Parameters
        ----------
        path : str
            Path relative to the configured base URL, already percent-encoded.
        params : dict, optional
            Query string parameters. Entries whose value is None are omitted.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        UpstreamError
            The response status was outside the 2xx range.
        UpstreamTimeoutError
            The request did not complete within ``timeout_seconds``.
        TransportError
            Connection failure, or a 2xx body that is empty or not valid JSON.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        url = f"{self.config.base_url.rstrip('/')}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        start = time.monotonic()

        logger.info("Request [%s.%s] url=%s params=%s", ctx.source, ctx.method, url, query)

        try:
            session = await self._get_session()
            resp = await session.get(url, params=query)

            if resp.status < 200 or resp.status >= 300:
                body = await resp.text(errors="replace")
                logger.warning(
                    "Upstream %d from %s.%s: %s",
                    resp.status,
                    ctx.source,
                    ctx.method,
                    body[:200],
                )
                raise UpstreamError(ctx.source, resp.status, body)

            raw = await resp.read()
            if not raw.strip():
                logger.warning("Empty body [%s.%s]", ctx.source, ctx.method)
                raise TransportError(ctx.source, "Empty response body")
            data = json.loads(raw)

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise UpstreamTimeoutError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(
                "Invalid JSON [%s.%s]: %s", ctx.source, ctx.method, e
            )
            raise TransportError(ctx.source, f"Invalid JSON in response: {e}")

        except aiohttp.ClientError as e:
            logger.warning(
                "Connection error [%s.%s]: %s", ctx.source, ctx.method, e
            )
            raise TransportError(ctx.source, f"Connection error: {e}")

        elapsed = time.monotonic() - start
        logger.info(
            "Success [%s.%s] elapsed=%.2fs", ctx.source, ctx.method, elapsed
        )
        return data
