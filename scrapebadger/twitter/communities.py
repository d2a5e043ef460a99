"""Twitter communities endpoints."""

from typing import Any, AsyncIterator

from scrapebadger.core.pagination import PaginatedResponse, paginate
from scrapebadger.models import Community, CommunityMember, CommunityTweetType, Tweet
from scrapebadger.twitter.base import BaseResource


def _as_member(item: Any, role: str | None = None) -> Any:
    """
    Normalize a member entry to ``{user, role, joined_at}``.

    The API returns either that nested shape or a flat user object with
    optional ``role`` and ``joined_at`` keys. A given ``role`` overrides
    the one on a flat entry.
    """
    if not isinstance(item, dict) or item.get("user"):
        return item
    return {
        "user": item,
        "role": role if role is not None else item.get("role"),
        "joined_at": item.get("joined_at"),
    }


class CommunitiesClient(BaseResource):
    """Fetch community details, members, moderators and tweets."""

    base_path = "/v1/twitter/communities"

    async def get_detail(self, community_id: str) -> Community:
        return await self._get_one(f"{self.base_path}/{community_id}", Community)

    async def get_tweets(
        self,
        community_id: str,
        tweet_type: CommunityTweetType | str = CommunityTweetType.TOP,
        count: int = 40,
        cursor: str | None = None,
    ) -> PaginatedResponse[Tweet]:
        return await self._get_page(
            f"{self.base_path}/{community_id}/tweets",
            Tweet,
            params={
                "tweet_type": CommunityTweetType(tweet_type),
                "count": count,
                "cursor": cursor,
            },
        )

    def get_tweets_all(
        self,
        community_id: str,
        tweet_type: CommunityTweetType | str = CommunityTweetType.TOP,
        max_items: int | None = None,
    ) -> AsyncIterator[Tweet]:
        """Iterate over a community's tweets, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[Tweet]:
            return await self.get_tweets(community_id, tweet_type=tweet_type, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_members(
        self,
        community_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[CommunityMember]:
        response = await self._http.request(
            f"{self.base_path}/{community_id}/members",
            params={"count": count, "cursor": cursor},
        )
        return self._to_page(response, CommunityMember, transform=_as_member)

    async def get_moderators(
        self,
        community_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[CommunityMember]:
        """Get community moderators; flat entries get the ``moderator`` role."""
        response = await self._http.request(
            f"{self.base_path}/{community_id}/moderators",
            params={"count": count, "cursor": cursor},
        )
        return self._to_page(
            response,
            CommunityMember,
            transform=lambda item: _as_member(item, role="moderator"),
        )

    async def search(self, query: str, cursor: str | None = None) -> PaginatedResponse[Community]:
        return await self._get_page(
            f"{self.base_path}/search",
            Community,
            params={"query": query, "cursor": cursor},
        )

    async def search_tweets(
        self,
        community_id: str,
        query: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[Tweet]:
        """Search tweets inside one community."""
        return await self._get_page(
            f"{self.base_path}/{community_id}/search_tweets",
            Tweet,
            params={"query": query, "count": count, "cursor": cursor},
        )

    async def get_timeline(self, count: int = 20, cursor: str | None = None) -> PaginatedResponse[Tweet]:
        """Get the community timeline of the authenticated account."""
        return await self._get_page(
            f"{self.base_path}/timeline",
            Tweet,
            params={"count": count, "cursor": cursor},
        )
