"""Twitter resource clients."""

from scrapebadger.twitter.client import TwitterClient
from scrapebadger.twitter.communities import CommunitiesClient
from scrapebadger.twitter.geo import GeoClient
from scrapebadger.twitter.lists import ListsClient
from scrapebadger.twitter.trends import TrendsClient
from scrapebadger.twitter.tweets import TweetsClient
from scrapebadger.twitter.users import UsersClient

__all__ = [
    "CommunitiesClient",
    "GeoClient",
    "ListsClient",
    "TrendsClient",
    "TweetsClient",
    "TwitterClient",
    "UsersClient",
]
