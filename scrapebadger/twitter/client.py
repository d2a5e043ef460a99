"""Entry point grouping the Twitter resource clients."""

from scrapebadger.core.http_client import HttpClient
from scrapebadger.twitter.communities import CommunitiesClient
from scrapebadger.twitter.geo import GeoClient
from scrapebadger.twitter.lists import ListsClient
from scrapebadger.twitter.trends import TrendsClient
from scrapebadger.twitter.tweets import TweetsClient
from scrapebadger.twitter.users import UsersClient


class TwitterClient:
    """
    Twitter API surface.

    All resources share one HTTP client, so they share its connection pool
    and retry policy.
    """

    def __init__(self, http_client: HttpClient):
        self.tweets = TweetsClient(http_client)
        self.users = UsersClient(http_client)
        self.lists = ListsClient(http_client)
        self.communities = CommunitiesClient(http_client)
        self.trends = TrendsClient(http_client)
        self.geo = GeoClient(http_client)
