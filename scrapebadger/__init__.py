"""
ScrapeBadger - async client for the ScrapeBadger scraping API.

Example:
    from scrapebadger import ScrapeBadger

    async with ScrapeBadger(api_key="sb_...") as client:
        tweet = await client.twitter.tweets.get_by_id("1234567890")
"""

from loguru import logger

from scrapebadger.__version__ import __version__
from scrapebadger.client import ScrapeBadger
from scrapebadger.core.exceptions import (
    AccountRestrictedError,
    AuthenticationError,
    ErrorKind,
    InsufficientCreditsError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ScrapeBadgerError,
    ServerError,
    ValidationError,
)
from scrapebadger.core.pagination import (
    PaginatedResponse,
    collect_all,
    create_paginated_response,
    paginate,
)
from scrapebadger.models import *  # noqa: F401,F403
from scrapebadger.models import __all__ as _models_all

# Silent unless the application opts in via scrapebadger.config.setup_logging
logger.disable("scrapebadger")

__all__ = [
    "AccountRestrictedError",
    "AuthenticationError",
    "ErrorKind",
    "InsufficientCreditsError",
    "NotFoundError",
    "PaginatedResponse",
    "RateLimitError",
    "RequestTimeoutError",
    "ScrapeBadger",
    "ScrapeBadgerError",
    "ServerError",
    "ValidationError",
    "__version__",
    "collect_all",
    "create_paginated_response",
    "paginate",
    *_models_all,
]
