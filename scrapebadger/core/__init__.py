"""Request engine: HTTP transport, error mapping, retries and pagination."""

from scrapebadger.core.exceptions import ErrorKind, ScrapeBadgerError, error_from_response
from scrapebadger.core.http_client import HttpClient
from scrapebadger.core.pagination import PaginatedResponse, collect_all, create_paginated_response, paginate
from scrapebadger.core.retry_handler import RetryHandler

__all__ = [
    "ErrorKind",
    "HttpClient",
    "PaginatedResponse",
    "RetryHandler",
    "ScrapeBadgerError",
    "collect_all",
    "create_paginated_response",
    "error_from_response",
    "paginate",
]
