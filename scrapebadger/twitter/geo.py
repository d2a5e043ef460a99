"""Twitter geo endpoints."""

from scrapebadger.core.pagination import PaginatedResponse
from scrapebadger.models import Place
from scrapebadger.twitter.base import BaseResource


class GeoClient(BaseResource):
    """Look up places by ID, coordinates, name or IP address."""

    base_path = "/v1/twitter/geo"

    async def get_detail(self, place_id: str) -> Place:
        return await self._get_one(f"{self.base_path}/places/{place_id}", Place)

    async def search(
        self,
        lat: float | None = None,
        long: float | None = None,
        query: str | None = None,
        ip: str | None = None,
        granularity: str | None = None,
        max_results: int | None = None,
    ) -> PaginatedResponse[Place]:
        """
        Search places.

        Args:
            lat: Latitude
            long: Longitude
            query: Free-text place name
            ip: IP address to geolocate
            granularity: neighborhood, city, admin or country
            max_results: Upper bound on returned places

        Returns:
            Single page of places (the endpoint has no cursor)
        """
        return await self._get_list(
            f"{self.base_path}/search",
            Place,
            params={
                "lat": lat,
                "long": long,
                "query": query,
                "ip": ip,
                "granularity": granularity,
                "max_results": max_results,
            },
        )
