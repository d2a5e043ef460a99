"""Data models for the ScrapeBadger API."""

from scrapebadger.models.community import (
    Community,
    CommunityBanner,
    CommunityMember,
    CommunityRule,
    TwitterList,
)
from scrapebadger.models.enums import CommunityTweetType, QueryType, TrendCategory
from scrapebadger.models.place import Location, Place, PlaceTrends, Trend
from scrapebadger.models.tweet import (
    Hashtag,
    Media,
    Poll,
    PollOption,
    Tweet,
    TweetPlace,
    Url,
    UserMention,
)
from scrapebadger.models.user import User, UserAbout, UserIds

__all__ = [
    "Community",
    "CommunityBanner",
    "CommunityMember",
    "CommunityRule",
    "CommunityTweetType",
    "Hashtag",
    "Location",
    "Media",
    "Place",
    "PlaceTrends",
    "Poll",
    "PollOption",
    "QueryType",
    "Trend",
    "TrendCategory",
    "Tweet",
    "TweetPlace",
    "TwitterList",
    "Url",
    "User",
    "UserAbout",
    "UserIds",
    "UserMention",
]
