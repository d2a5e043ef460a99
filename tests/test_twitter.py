"""Tests for the Twitter resource clients."""

import httpx
import pytest

from scrapebadger import ScrapeBadger
from scrapebadger.core.exceptions import NotFoundError
from scrapebadger.models import (
    CommunityMember,
    CommunityTweetType,
    Location,
    Place,
    PlaceTrends,
    QueryType,
    Trend,
    Tweet,
    TwitterList,
    User,
    UserAbout,
    UserIds,
)

USER = {"id": "44196397", "username": "elonmusk", "name": "Elon Musk", "followers_count": 100}
TWEET = {"id": "1", "text": "hello", "favorite_count": 3}


class Api:
    """Route table for MockTransport: path -> JSON body, with request log."""

    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default if default is not None else {"data": []}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = request.url.path
        if request.url.query:
            key = f"{key}?{request.url.query.decode()}"
        body = self.routes.get(key, self.routes.get(request.url.path, self.default))
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
async def api_client():
    """Create a ScrapeBadger client bound to a fresh Api route table."""
    clients = []

    def factory(routes=None, default=None):
        api = Api(routes, default)
        client = ScrapeBadger(api_key="sb_test", max_retries=0, transport=httpx.MockTransport(api))
        clients.append(client)
        return client, api

    yield factory

    for client in clients:
        await client.aclose()


class TestTweets:
    """Tests for TweetsClient."""

    async def test_get_by_id(self, api_client):
        client, api = api_client({"/v1/twitter/tweets/tweet/1": TWEET})

        tweet = await client.twitter.tweets.get_by_id("1")

        assert isinstance(tweet, Tweet)
        assert tweet.text == "hello"
        assert tweet.favorite_count == 3

    async def test_get_by_id_not_found(self, api_client):
        client, _ = api_client(default=httpx.Response(404, json={"detail": "Tweet not found"}))

        with pytest.raises(NotFoundError, match="Tweet not found"):
            await client.twitter.tweets.get_by_id("999")

    async def test_get_by_ids(self, api_client):
        client, api = api_client(default={"data": [TWEET, {**TWEET, "id": "2"}]})

        page = await client.twitter.tweets.get_by_ids(["1", "2"])

        assert api.last.url.path == "/v1/twitter/tweets/"
        assert api.last_params == {"tweets": "1,2"}
        assert [t.id for t in page] == ["1", "2"]
        assert page.has_more is False

    async def test_search_params(self, api_client):
        """Test search query, type and cursor parameters."""
        client, api = api_client(default={"data": [TWEET], "next_cursor": "c2"})

        page = await client.twitter.tweets.search("python lang:en", query_type="Latest", cursor="c1")

        assert api.last.url.path == "/v1/twitter/tweets/advanced_search"
        assert api.last_params == {"query": "python lang:en", "query_type": "Latest", "cursor": "c1"}
        assert page.next_cursor == "c2"
        assert page.has_more is True

    async def test_search_default_type(self, api_client):
        client, api = api_client()

        await client.twitter.tweets.search("python")

        assert api.last_params == {"query": "python", "query_type": QueryType.TOP.value}

    async def test_search_invalid_type(self, api_client):
        client, api = api_client()

        with pytest.raises(ValueError):
            await client.twitter.tweets.search("python", query_type="Oldest")
        assert api.requests == []

    async def test_search_all_follows_cursors(self, api_client):
        """Test that search_all walks pages until the cursor runs out."""
        client, api = api_client(
            {
                "/v1/twitter/tweets/advanced_search?query=python&query_type=Top": {
                    "data": [TWEET, {**TWEET, "id": "2"}],
                    "next_cursor": "p2",
                },
                "/v1/twitter/tweets/advanced_search?query=python&query_type=Top&cursor=p2": {
                    "data": [{**TWEET, "id": "3"}],
                },
            }
        )

        tweets = [t async for t in client.twitter.tweets.search_all("python")]

        assert [t.id for t in tweets] == ["1", "2", "3"]
        assert len(api.requests) == 2

    async def test_engagement_endpoints(self, api_client):
        client, api = api_client(default={"data": [USER]})
        tweets = client.twitter.tweets

        retweeters = await tweets.get_retweeters("1")
        assert api.last.url.path == "/v1/twitter/tweets/tweet/1/retweeters"
        assert isinstance(retweeters.data[0], User)

        await tweets.get_favoriters("1")
        assert api.last.url.path == "/v1/twitter/tweets/tweet/1/favoriters"
        assert api.last_params == {"count": "40"}

    async def test_replies_and_similar(self, api_client):
        client, api = api_client(default={"data": [TWEET]})

        await client.twitter.tweets.get_replies("1", cursor="c")
        assert api.last.url.path == "/v1/twitter/tweets/tweet/1/replies"
        assert api.last_params == {"cursor": "c"}

        await client.twitter.tweets.get_similar("1")
        assert api.last.url.path == "/v1/twitter/tweets/tweet/1/similar"

    async def test_user_tweets_all_respects_max_items(self, api_client):
        client, api = api_client(default={"data": [TWEET, TWEET, TWEET], "next_cursor": "more"})

        tweets = [t async for t in client.twitter.tweets.get_user_tweets_all("jack", max_items=2)]

        assert len(tweets) == 2
        assert len(api.requests) == 1
        assert api.last.url.path == "/v1/twitter/users/jack/latest_tweets"


class TestUsers:
    """Tests for UsersClient."""

    async def test_profiles(self, api_client):
        client, api = api_client(
            {
                "/v1/twitter/users/elonmusk/by_username": USER,
                "/v1/twitter/users/44196397/by_id": USER,
                "/v1/twitter/users/elonmusk/about": {"id": "44196397", "account_based_in": "United States"},
            }
        )
        users = client.twitter.users

        assert (await users.get_by_username("elonmusk")).followers_count == 100
        assert (await users.get_by_id("44196397")).username == "elonmusk"

        about = await users.get_about("elonmusk")
        assert isinstance(about, UserAbout)
        assert about.account_based_in == "United States"

    async def test_follow_listings(self, api_client):
        client, api = api_client(default={"data": [USER], "next_cursor": "n"})
        users = client.twitter.users

        page = await users.get_followers("elonmusk")
        assert api.last.url.path == "/v1/twitter/users/elonmusk/followers"
        assert page.has_more is True

        await users.get_following("elonmusk", cursor="n")
        assert api.last.url.path == "/v1/twitter/users/elonmusk/followings"
        assert api.last_params == {"cursor": "n"}

        await users.get_latest_followers("elonmusk")
        assert api.last.url.path == "/v1/twitter/users/elonmusk/latest_followers"
        assert api.last_params == {"count": "200"}

        await users.get_latest_following("elonmusk")
        assert api.last.url.path == "/v1/twitter/users/elonmusk/latest_following"

    async def test_follower_ids_unwrapped(self, api_client):
        """Test that ID listings are read from the nested data object."""
        client, api = api_client(default={"data": {"ids": [1, 2, 3], "next_cursor": "x"}})

        ids = await client.twitter.users.get_follower_ids("elonmusk")

        assert isinstance(ids, UserIds)
        assert ids.ids == [1, 2, 3]
        assert ids.next_cursor == "x"
        assert api.last.url.path == "/v1/twitter/users/elonmusk/follower_ids"
        assert api.last_params == {"count": "5000"}

        await client.twitter.users.get_following_ids("elonmusk", count=10)
        assert api.last.url.path == "/v1/twitter/users/elonmusk/following_ids"
        assert api.last_params == {"count": "10"}

    async def test_follower_ids_missing_data(self, api_client):
        client, _ = api_client(default={})

        ids = await client.twitter.users.get_following_ids("nobody")

        assert ids.ids == []
        assert ids.next_cursor is None

    @pytest.mark.parametrize(
        "method, suffix",
        [
            ("get_verified_followers", "verified_followers"),
            ("get_followers_you_know", "followers_you_know"),
            ("get_subscriptions", "subscriptions"),
        ],
    )
    async def test_user_id_listings(self, api_client, method, suffix):
        client, api = api_client(default={"data": [USER]})

        page = await getattr(client.twitter.users, method)("44196397")

        assert api.last.url.path == f"/v1/twitter/users/44196397/{suffix}"
        assert api.last_params == {"count": "20"}
        assert page.data[0].username == "elonmusk"

    async def test_highlights_are_tweets(self, api_client):
        client, api = api_client(default={"data": [TWEET]})

        page = await client.twitter.users.get_highlights("44196397")

        assert isinstance(page.data[0], Tweet)

    async def test_search(self, api_client):
        client, api = api_client(default={"data": [USER]})

        await client.twitter.users.search("python")

        assert api.last.url.path == "/v1/twitter/users/search_users"
        assert api.last_params == {"query": "python"}


class TestLists:
    """Tests for ListsClient."""

    async def test_detail(self, api_client):
        client, _ = api_client({"/v1/twitter/lists/42/detail": {"id": "42", "name": "Devs", "member_count": 7}})

        twitter_list = await client.twitter.lists.get_detail("42")

        assert isinstance(twitter_list, TwitterList)
        assert twitter_list.name == "Devs"

    async def test_listings(self, api_client):
        client, api = api_client(default={"data": []})
        lists = client.twitter.lists

        await lists.get_tweets("42")
        assert api.last.url.path == "/v1/twitter/lists/42/tweets"

        await lists.get_members("42")
        assert api.last.url.path == "/v1/twitter/lists/42/members"

        await lists.get_subscribers("42")
        assert api.last.url.path == "/v1/twitter/lists/42/subscribers"
        assert api.last_params == {"count": "20"}

        await lists.search("devs")
        assert api.last.url.path == "/v1/twitter/lists/search"
        assert api.last_params == {"query": "devs", "count": "20"}

        await lists.get_my_lists()
        assert api.last.url.path == "/v1/twitter/lists/my_lists"
        assert api.last_params == {"count": "100"}

    async def test_members_all(self, api_client):
        client, _ = api_client(default={"data": [USER, USER]})

        members = [m async for m in client.twitter.lists.get_members_all("42")]

        assert len(members) == 2


class TestCommunities:
    """Tests for CommunitiesClient."""

    async def test_tweets_params(self, api_client):
        client, api = api_client()

        await client.twitter.communities.get_tweets("7", tweet_type=CommunityTweetType.LATEST)

        assert api.last.url.path == "/v1/twitter/communities/7/tweets"
        assert api.last_params == {"tweet_type": "Latest", "count": "40"}

    async def test_members_flat_entries_wrapped(self, api_client):
        """Test that flat user entries become CommunityMember objects."""
        client, _ = api_client(default={"data": [{**USER, "role": "admin", "joined_at": "2024-01-01"}]})

        page = await client.twitter.communities.get_members("7")

        member = page.data[0]
        assert isinstance(member, CommunityMember)
        assert member.user.username == "elonmusk"
        assert member.role == "admin"
        assert member.joined_at == "2024-01-01"

    async def test_members_nested_entries_kept(self, api_client):
        client, _ = api_client(default={"data": [{"user": USER, "role": "member"}]})

        page = await client.twitter.communities.get_members("7")

        assert page.data[0].role == "member"
        assert page.data[0].user.id == "44196397"

    async def test_moderators_get_moderator_role(self, api_client):
        client, api = api_client(default={"data": [USER], "next_cursor": "m2"})

        page = await client.twitter.communities.get_moderators("7")

        assert api.last.url.path == "/v1/twitter/communities/7/moderators"
        assert page.data[0].role == "moderator"
        assert page.next_cursor == "m2"

    async def test_detail_and_search(self, api_client):
        client, api = api_client(
            {
                "/v1/twitter/communities/7": {"id": "7", "name": "Pythonistas"},
                "/v1/twitter/communities/search": {"data": [{"id": "7", "name": "Pythonistas"}]},
            }
        )
        communities = client.twitter.communities

        assert (await communities.get_detail("7")).name == "Pythonistas"

        page = await communities.search("python")
        assert page.data[0].id == "7"

        await communities.search_tweets("7", "asyncio")
        assert api.last.url.path == "/v1/twitter/communities/7/search_tweets"
        assert api.last_params == {"query": "asyncio", "count": "20"}

        await communities.get_timeline()
        assert api.last.url.path == "/v1/twitter/communities/timeline"


class TestTrendsAndGeo:
    """Tests for TrendsClient and GeoClient."""

    async def test_trends(self, api_client):
        """Test that trends are a single page even if a cursor is returned."""
        client, api = api_client(default={"data": [{"name": "#python", "tweet_count": 1200}], "next_cursor": "x"})

        page = await client.twitter.trends.get_trends()

        assert api.last.url.path == "/v1/twitter/trends/"
        assert api.last_params == {"category": "trending", "count": "20"}
        assert isinstance(page.data[0], Trend)
        assert page.has_more is False

    async def test_place_trends(self, api_client):
        client, _ = api_client(
            {"/v1/twitter/trends/place/1": {"woeid": 1, "name": "Worldwide", "trends": [{"name": "#ai"}]}}
        )

        place = await client.twitter.trends.get_place_trends(1)

        assert isinstance(place, PlaceTrends)
        assert place.trends[0].name == "#ai"

    async def test_locations(self, api_client):
        client, _ = api_client(default={"data": [{"woeid": 23424977, "name": "United States"}]})

        page = await client.twitter.trends.get_available_locations()

        assert isinstance(page.data[0], Location)

    async def test_geo(self, api_client):
        client, api = api_client(
            {"/v1/twitter/geo/places/abc": {"id": "abc", "name": "San Francisco"}},
            default={"data": [{"id": "abc", "name": "San Francisco"}]},
        )

        place = await client.twitter.geo.get_detail("abc")
        assert isinstance(place, Place)

        page = await client.twitter.geo.search(lat=37.77, long=-122.42, granularity="city")
        assert api.last.url.path == "/v1/twitter/geo/search"
        assert api.last_params == {"lat": "37.77", "long": "-122.42", "granularity": "city"}
        assert page.data[0].name == "San Francisco"
