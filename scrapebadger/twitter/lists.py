"""Twitter lists endpoints."""

from typing import AsyncIterator

from scrapebadger.core.pagination import PaginatedResponse, paginate
from scrapebadger.models import Tweet, TwitterList, User
from scrapebadger.twitter.base import BaseResource


class ListsClient(BaseResource):
    """Fetch list details, members, subscribers and tweets."""

    base_path = "/v1/twitter/lists"

    async def get_detail(self, list_id: str) -> TwitterList:
        return await self._get_one(f"{self.base_path}/{list_id}/detail", TwitterList)

    async def get_tweets(self, list_id: str, cursor: str | None = None) -> PaginatedResponse[Tweet]:
        """Get tweets from a list's timeline."""
        return await self._get_page(
            f"{self.base_path}/{list_id}/tweets",
            Tweet,
            params={"cursor": cursor},
        )

    def get_tweets_all(self, list_id: str, max_items: int | None = None) -> AsyncIterator[Tweet]:
        async def fetch_page(cursor: str | None) -> PaginatedResponse[Tweet]:
            return await self.get_tweets(list_id, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_members(self, list_id: str, cursor: str | None = None) -> PaginatedResponse[User]:
        return await self._get_page(
            f"{self.base_path}/{list_id}/members",
            User,
            params={"cursor": cursor},
        )

    def get_members_all(self, list_id: str, max_items: int | None = None) -> AsyncIterator[User]:
        async def fetch_page(cursor: str | None) -> PaginatedResponse[User]:
            return await self.get_members(list_id, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_subscribers(
        self,
        list_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        return await self._get_page(
            f"{self.base_path}/{list_id}/subscribers",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def search(
        self,
        query: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[TwitterList]:
        """Search lists by name."""
        return await self._get_page(
            f"{self.base_path}/search",
            TwitterList,
            params={"query": query, "count": count, "cursor": cursor},
        )

    async def get_my_lists(self, count: int = 100, cursor: str | None = None) -> PaginatedResponse[TwitterList]:
        """Get lists owned by the authenticated account."""
        return await self._get_page(
            f"{self.base_path}/my_lists",
            TwitterList,
            params={"count": count, "cursor": cursor},
        )
