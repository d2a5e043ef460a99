"""Twitter trends endpoints."""

from scrapebadger.core.pagination import PaginatedResponse
from scrapebadger.models import Location, PlaceTrends, Trend, TrendCategory
from scrapebadger.twitter.base import BaseResource


class TrendsClient(BaseResource):
    """
    Fetch trending topics and the locations they are tracked for.

    Common WOEIDs: 1 (worldwide), 23424977 (United States),
    23424975 (United Kingdom).
    """

    base_path = "/v1/twitter/trends"

    async def get_trends(
        self,
        category: TrendCategory | str = TrendCategory.TRENDING,
        count: int = 20,
    ) -> PaginatedResponse[Trend]:
        """Get trending topics for a category. Always a single page."""
        return await self._get_list(
            f"{self.base_path}/",
            Trend,
            params={"category": TrendCategory(category), "count": count},
        )

    async def get_place_trends(self, woeid: int) -> PlaceTrends:
        """
        Get trends for a location.

        Raises:
            NotFoundError: If the WOEID is unknown
        """
        return await self._get_one(f"{self.base_path}/place/{woeid}", PlaceTrends)

    async def get_available_locations(self) -> PaginatedResponse[Location]:
        return await self._get_list(f"{self.base_path}/locations", Location)
