"""Top-level ScrapeBadger client."""

import httpx
from loguru import logger

from scrapebadger.config.settings import ResolvedConfig, Settings, resolve_config
from scrapebadger.core.http_client import HttpClient
from scrapebadger.twitter.client import TwitterClient


class ScrapeBadger:
    """
    Client for the ScrapeBadger scraping API.

    The API key is taken from ``api_key`` or, when omitted, from the
    ``SCRAPEBADGER_API_KEY`` environment variable.

    Example:
        async with ScrapeBadger() as client:
            user = await client.twitter.users.get_by_username("elonmusk")
            print(user.followers_count)

    Raises:
        ValueError: If no API key can be resolved or a setting is invalid
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = resolve_config(
            api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            settings=settings,
        )
        self._http = HttpClient(self._config, transport=transport)
        self.twitter = TwitterClient(self._http)
        logger.debug(f"ScrapeBadger client created for {self._config.base_url}")

    @property
    def config(self) -> ResolvedConfig:
        """The resolved, immutable client configuration."""
        return self._config

    async def __aenter__(self) -> "ScrapeBadger":
        await self._http.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying connection pool."""
        await self._http.close()
