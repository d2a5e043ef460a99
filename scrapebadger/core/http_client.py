"""Async HTTP client with timeout enforcement, error mapping and retries."""

import asyncio
import json
from enum import Enum
from typing import Any, Literal, Mapping

import httpx
from loguru import logger

from scrapebadger.config.settings import ResolvedConfig
from scrapebadger.__version__ import __version__
from scrapebadger.core.exceptions import (
    RequestTimeoutError,
    ScrapeBadgerError,
    error_from_response,
)
from scrapebadger.core.retry_handler import RetryHandler

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
ParamValue = str | int | float | bool | Enum | None

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE", "PATCH"})
API_KEY_HEADER = "X-API-Key"
USER_AGENT = f"scrapebadger-python/{__version__}"


class HttpClient:
    """
    Async client for the ScrapeBadger API.

    Every call to :meth:`request` runs its own retry loop and per-attempt
    timeout; the only state shared between concurrent calls is the
    immutable config and the underlying ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        retry_handler: RetryHandler | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.retry_handler = retry_handler or RetryHandler(
            max_retries=config.max_retries,
            base_delay=config.retry_delay,
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpClient":
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP client."""
        if self._client:
            return
        # The total deadline is enforced per attempt in _send
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(None),
            transport=self._transport,
        )
        logger.debug(f"HTTP client initialized for {self.config.base_url}")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    async def request(
        self,
        path: str,
        method: HttpMethod = "GET",
        params: Mapping[str, ParamValue] | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform an API request with timeout and retry handling.

        Args:
            path: API path, e.g. ``/v1/twitter/tweets/tweet/123``
            method: HTTP method
            params: Query parameters; ``None`` values are omitted
            body: JSON-serializable payload, sent for non-GET methods only
            headers: Extra headers merged over the defaults

        Returns:
            The parsed response body

        Raises:
            ScrapeBadgerError: Classified failure after retries
        """
        method = method.upper()  # type: ignore[assignment]
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if not self._client:
            await self.start()

        query = self.build_params(params)
        request_headers = self.build_headers(headers)
        content = None
        if body is not None and method != "GET":
            content = json.dumps(body)

        async def attempt() -> Any:
            return await self._send(method, path, query, request_headers, content)

        return await self.retry_handler.execute(attempt)

    def build_headers(self, overrides: Mapping[str, str] | None = None) -> dict[str, str]:
        """Merge caller headers over the defaults; content negotiation stays JSON."""
        headers = {
            API_KEY_HEADER: self.config.api_key,
            "User-Agent": USER_AGENT,
        }
        if overrides:
            headers.update(overrides)

        headers["Content-Type"] = "application/json"
        headers["Accept"] = "application/json"
        return headers

    @staticmethod
    def build_params(params: Mapping[str, ParamValue] | None) -> dict[str, str]:
        """Drop ``None`` values and coerce the rest to strings."""
        if not params:
            return {}

        query = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = str(value)
        return query

    async def _send(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        headers: dict[str, str],
        content: str | None,
    ) -> Any:
        """Make a single attempt and classify the outcome."""
        logger.debug(f"{method} {path} params={params}")
        timeout = self.config.timeout

        try:
            response = await asyncio.wait_for(
                self._client.request(
                    method,
                    path,
                    params=params,
                    headers=headers,
                    content=content,
                ),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise RequestTimeoutError(
                f"Request timed out after {timeout}s",
                timeout=timeout,
            ) from e
        except httpx.TransportError as e:
            raise ScrapeBadgerError(f"Transport error: {e}") from e

        data = self._parse_body(response)

        error = error_from_response(response.status_code, data)
        if error:
            logger.debug(f"{method} {path} -> {response.status_code} ({error.kind.value})")
            raise error

        return data

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Parse JSON when the server says so, else wrap the text as ``detail``."""
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return {"detail": response.text}
        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ScrapeBadgerError(
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e
