"""Base class for Twitter resource clients."""

from typing import Any, Callable, Mapping, Type, TypeVar

from pydantic import BaseModel

from scrapebadger.core.http_client import HttpClient, ParamValue
from scrapebadger.core.pagination import PaginatedResponse, create_paginated_response

M = TypeVar("M", bound=BaseModel)


class BaseResource:
    """
    Shared plumbing for resource clients.

    Subclasses map typed arguments to a path and query parameters and use
    the helpers below to shape the response. Errors raised by the HTTP
    client propagate unchanged.
    """

    # Path prefix for the resource (override in subclasses)
    base_path: str = "/v1/twitter"

    def __init__(self, http_client: HttpClient):
        self._http = http_client

    async def _get_one(self, path: str, model: Type[M], params: Mapping[str, ParamValue] | None = None) -> M:
        """Fetch a single entity returned as the response body."""
        data = await self._http.request(path, params=params)
        return model.model_validate(data)

    async def _get_page(
        self,
        path: str,
        model: Type[M],
        params: Mapping[str, ParamValue] | None = None,
    ) -> PaginatedResponse[M]:
        """Fetch a ``{data, next_cursor}`` envelope as a typed page."""
        response = await self._http.request(path, params=params)
        return self._to_page(response, model)

    @staticmethod
    def _to_page(response: Any, model: Type[M], transform: Callable[[Any], Any] | None = None) -> PaginatedResponse[M]:
        response = response or {}
        items = response.get("data") or []
        if transform:
            items = [transform(item) for item in items]
        return create_paginated_response(
            [model.model_validate(item) for item in items],
            response.get("next_cursor"),
        )

    async def _get_list(
        self,
        path: str,
        model: Type[M],
        params: Mapping[str, ParamValue] | None = None,
    ) -> PaginatedResponse[M]:
        """Fetch a listing that never continues; any cursor is ignored."""
        response = await self._http.request(path, params=params)
        items = (response or {}).get("data") or []
        return create_paginated_response([model.model_validate(item) for item in items])
