"""Twitter tweets endpoints."""

from typing import AsyncIterator

from scrapebadger.core.pagination import PaginatedResponse, paginate
from scrapebadger.models import QueryType, Tweet, User
from scrapebadger.twitter.base import BaseResource


class TweetsClient(BaseResource):
    """
    Fetch tweets, search them and read their engagement.

    Example:
        tweet = await client.twitter.tweets.get_by_id("1234567890")

        async for tweet in client.twitter.tweets.search_all("python", max_items=100):
            print(tweet.text)
    """

    base_path = "/v1/twitter/tweets"

    async def get_by_id(self, tweet_id: str) -> Tweet:
        """
        Get a single tweet by ID.

        Raises:
            NotFoundError: If the tweet does not exist
        """
        return await self._get_one(f"{self.base_path}/tweet/{tweet_id}", Tweet)

    async def get_by_ids(self, tweet_ids: list[str]) -> PaginatedResponse[Tweet]:
        """Get several tweets in one request."""
        return await self._get_page(
            f"{self.base_path}/",
            Tweet,
            params={"tweets": ",".join(tweet_ids)},
        )

    async def get_replies(self, tweet_id: str, cursor: str | None = None) -> PaginatedResponse[Tweet]:
        """Get replies to a tweet."""
        return await self._get_page(
            f"{self.base_path}/tweet/{tweet_id}/replies",
            Tweet,
            params={"cursor": cursor},
        )

    async def get_retweeters(self, tweet_id: str, cursor: str | None = None) -> PaginatedResponse[User]:
        """Get users who retweeted a tweet."""
        return await self._get_page(
            f"{self.base_path}/tweet/{tweet_id}/retweeters",
            User,
            params={"cursor": cursor},
        )

    async def get_favoriters(
        self,
        tweet_id: str,
        count: int = 40,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        """Get users who liked a tweet."""
        return await self._get_page(
            f"{self.base_path}/tweet/{tweet_id}/favoriters",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_similar(self, tweet_id: str) -> PaginatedResponse[Tweet]:
        return await self._get_page(f"{self.base_path}/tweet/{tweet_id}/similar", Tweet)

    async def search(
        self,
        query: str,
        query_type: QueryType | str = QueryType.TOP,
        cursor: str | None = None,
    ) -> PaginatedResponse[Tweet]:
        """
        Search tweets.

        Args:
            query: Search query, supports advanced search operators
                (``from:user``, ``lang:en``, ...)
            query_type: Top, Latest or Media
            cursor: Cursor from a previous page

        Returns:
            Page of matching tweets
        """
        return await self._get_page(
            f"{self.base_path}/advanced_search",
            Tweet,
            params={
                "query": query,
                "query_type": QueryType(query_type),
                "cursor": cursor,
            },
        )

    def search_all(
        self,
        query: str,
        query_type: QueryType | str = QueryType.TOP,
        max_items: int | None = None,
    ) -> AsyncIterator[Tweet]:
        """Iterate over all search results, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[Tweet]:
            return await self.search(query, query_type=query_type, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_user_tweets(self, username: str, cursor: str | None = None) -> PaginatedResponse[Tweet]:
        """Get the latest tweets from a user's timeline."""
        return await self._get_page(
            f"/v1/twitter/users/{username}/latest_tweets",
            Tweet,
            params={"cursor": cursor},
        )

    def get_user_tweets_all(self, username: str, max_items: int | None = None) -> AsyncIterator[Tweet]:
        """Iterate over a user's timeline, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[Tweet]:
            return await self.get_user_tweets(username, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)
