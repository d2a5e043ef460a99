"""Enumerations accepted by the Twitter endpoints."""

from enum import Enum


class QueryType(str, Enum):
    """Search result ordering for tweet search."""

    TOP = "Top"
    LATEST = "Latest"
    MEDIA = "Media"


class CommunityTweetType(str, Enum):
    """Tweet ordering inside a community."""

    TOP = "Top"
    LATEST = "Latest"
    MEDIA = "Media"


class TrendCategory(str, Enum):
    """Trend tabs."""

    TRENDING = "trending"
    FOR_YOU = "for_you"
    NEWS = "news"
    SPORTS = "sports"
    ENTERTAINMENT = "entertainment"
