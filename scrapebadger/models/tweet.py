"""Tweet data models."""

from pydantic import Field

from scrapebadger.models.base import ApiModel


class Media(ApiModel):
    """A photo, video or GIF attached to a tweet."""

    media_key: str | None = None
    type: str | None = None
    url: str | None = None
    preview_image_url: str | None = None
    width: int | None = None
    height: int | None = None
    duration_ms: int | None = None
    view_count: int | None = None
    alt_text: str | None = None


class PollOption(ApiModel):
    position: int
    label: str
    votes: int = 0


class Poll(ApiModel):
    id: str | None = None
    voting_status: str | None = None
    end_datetime: str | None = None
    duration_minutes: int | None = None
    options: list[PollOption] = Field(default_factory=list)


class Url(ApiModel):
    url: str | None = None
    expanded_url: str | None = None
    display_url: str | None = None
    title: str | None = None
    description: str | None = None


class Hashtag(ApiModel):
    tag: str


class UserMention(ApiModel):
    id: str | None = None
    username: str | None = None
    name: str | None = None


class TweetPlace(ApiModel):
    """Place a tweet was geotagged with."""

    id: str | None = None
    full_name: str | None = None
    name: str | None = None
    country: str | None = None
    country_code: str | None = None
    place_type: str | None = None


class Tweet(ApiModel):
    """
    A tweet as returned by the tweets, search and timeline endpoints.

    Unknown fields returned by the API are kept as extra attributes.
    """

    # Core identifiers
    id: str = Field(..., description="Tweet ID")
    text: str = Field(default="", description="Tweet text (possibly truncated)")
    full_text: str | None = Field(default=None, description="Untruncated tweet text")
    created_at: str | None = None
    lang: str | None = None

    # Author
    user_id: str | None = None
    username: str | None = None
    user_name: str | None = None

    # Engagement metrics
    favorite_count: int = 0
    retweet_count: int = 0
    reply_count: int = 0
    quote_count: int = 0
    view_count: int | None = None
    bookmark_count: int | None = None

    # Interaction state of the authenticated account
    favorited: bool = False
    retweeted: bool = False
    bookmarked: bool = False

    # Tweet properties
    possibly_sensitive: bool | None = None
    is_quote_status: bool = False
    is_retweet: bool = False
    conversation_id: str | None = None
    in_reply_to_status_id: str | None = None
    in_reply_to_user_id: str | None = None

    # Rich content
    media: list[Media] = Field(default_factory=list)
    urls: list[Url] = Field(default_factory=list)
    hashtags: list[Hashtag] = Field(default_factory=list)
    user_mentions: list[UserMention] = Field(default_factory=list)
    poll: Poll | None = None
    place: TweetPlace | None = None

    # Referenced tweets
    quoted_status_id: str | None = None
    retweeted_status_id: str | None = None

    # Edits
    edit_tweet_ids: list[str] | None = None
    editable_until_msecs: int | None = None
    edits_remaining: int | None = None
    is_edit_eligible: bool | None = None

    # Card preview
    has_card: bool | None = None
    thumbnail_url: str | None = None
    thumbnail_title: str | None = None

    has_community_notes: bool | None = None
    source: str | None = None
