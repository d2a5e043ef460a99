"""Twitter users endpoints."""

from typing import AsyncIterator

from scrapebadger.core.pagination import PaginatedResponse, paginate
from scrapebadger.models import Tweet, User, UserAbout, UserIds
from scrapebadger.twitter.base import BaseResource


class UsersClient(BaseResource):
    """
    Fetch user profiles, followers and following.

    Endpoints addressed by username take the handle without the ``@``;
    the verified followers, mutuals, subscriptions and highlights endpoints
    take the numeric user ID.
    """

    base_path = "/v1/twitter/users"

    async def get_by_id(self, user_id: str) -> User:
        """Get a user by numeric ID."""
        return await self._get_one(f"{self.base_path}/{user_id}/by_id", User)

    async def get_by_username(self, username: str) -> User:
        """Get a user by username."""
        return await self._get_one(f"{self.base_path}/{username}/by_username", User)

    async def get_about(self, username: str) -> UserAbout:
        """
        Get extended "About" information for a user.

        Includes the country the account is based in, username change
        history and verification details.
        """
        return await self._get_one(f"{self.base_path}/{username}/about", UserAbout)

    async def get_followers(self, username: str, cursor: str | None = None) -> PaginatedResponse[User]:
        return await self._get_page(
            f"{self.base_path}/{username}/followers",
            User,
            params={"cursor": cursor},
        )

    def get_followers_all(self, username: str, max_items: int | None = None) -> AsyncIterator[User]:
        """Iterate over all followers, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[User]:
            return await self.get_followers(username, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_following(self, username: str, cursor: str | None = None) -> PaginatedResponse[User]:
        return await self._get_page(
            f"{self.base_path}/{username}/followings",
            User,
            params={"cursor": cursor},
        )

    def get_following_all(self, username: str, max_items: int | None = None) -> AsyncIterator[User]:
        """Iterate over all followed accounts, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[User]:
            return await self.get_following(username, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)

    async def get_latest_followers(
        self,
        username: str,
        count: int = 200,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        """Get a user's most recent followers."""
        return await self._get_page(
            f"{self.base_path}/{username}/latest_followers",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_latest_following(
        self,
        username: str,
        count: int = 200,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        """Get the accounts a user most recently followed."""
        return await self._get_page(
            f"{self.base_path}/{username}/latest_following",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_follower_ids(
        self,
        username: str,
        count: int = 5000,
        cursor: str | None = None,
    ) -> UserIds:
        """Get follower IDs (cheaper than full profiles)."""
        return await self._get_ids(f"{self.base_path}/{username}/follower_ids", count, cursor)

    async def get_following_ids(
        self,
        username: str,
        count: int = 5000,
        cursor: str | None = None,
    ) -> UserIds:
        """Get following IDs (cheaper than full profiles)."""
        return await self._get_ids(f"{self.base_path}/{username}/following_ids", count, cursor)

    async def _get_ids(self, path: str, count: int, cursor: str | None) -> UserIds:
        response = await self._http.request(path, params={"count": count, "cursor": cursor})
        # IDs come nested one level deeper than other listings
        data = (response or {}).get("data") or {}
        return UserIds(ids=data.get("ids") or [], next_cursor=data.get("next_cursor"))

    async def get_verified_followers(
        self,
        user_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        return await self._get_page(
            f"{self.base_path}/{user_id}/verified_followers",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_followers_you_know(
        self,
        user_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        """Get followers of a user that the authenticated account also follows."""
        return await self._get_page(
            f"{self.base_path}/{user_id}/followers_you_know",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_subscriptions(
        self,
        user_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[User]:
        """Get premium accounts a user subscribes to."""
        return await self._get_page(
            f"{self.base_path}/{user_id}/subscriptions",
            User,
            params={"count": count, "cursor": cursor},
        )

    async def get_highlights(
        self,
        user_id: str,
        count: int = 20,
        cursor: str | None = None,
    ) -> PaginatedResponse[Tweet]:
        return await self._get_page(
            f"{self.base_path}/{user_id}/highlights",
            Tweet,
            params={"count": count, "cursor": cursor},
        )

    async def search(self, query: str, cursor: str | None = None) -> PaginatedResponse[User]:
        """Search users."""
        return await self._get_page(
            f"{self.base_path}/search_users",
            User,
            params={"query": query, "cursor": cursor},
        )

    def search_all(self, query: str, max_items: int | None = None) -> AsyncIterator[User]:
        """Iterate over all user search results, following cursors."""

        async def fetch_page(cursor: str | None) -> PaginatedResponse[User]:
            return await self.search(query, cursor=cursor)

        return paginate(fetch_page, max_items=max_items)
