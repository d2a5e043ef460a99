"""Trend and place data models."""

from typing import Any

from pydantic import Field

from scrapebadger.models.base import ApiModel


class Trend(ApiModel):
    """A trending topic."""

    name: str
    url: str | None = None
    query: str | None = None
    tweet_count: int | None = None
    domain_context: str | None = None


class Location(ApiModel):
    """A location for which trends are available."""

    woeid: int = Field(..., description="Where On Earth ID")
    name: str
    country: str | None = None
    country_code: str | None = None
    place_type: str | None = None


class PlaceTrends(ApiModel):
    """Trends for a single WOEID location."""

    woeid: int
    name: str | None = None
    country: str | None = None
    trends: list[Trend] = Field(default_factory=list)


class Place(ApiModel):
    """A geographic place."""

    id: str
    name: str = ""
    full_name: str | None = None
    country: str | None = None
    country_code: str | None = None
    place_type: str | None = None
    url: str | None = None
    bounding_box: dict[str, Any] | None = None
    attributes: dict[str, str] | None = None
