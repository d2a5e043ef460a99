"""User data models."""

from pydantic import Field

from scrapebadger.models.base import ApiModel


class User(ApiModel):
    """A Twitter user profile."""

    # Core identifiers
    id: str = Field(..., description="Numeric user ID as a string")
    username: str = Field(..., description="Handle without the @")
    name: str = Field(default="", description="Display name")

    # Profile
    description: str | None = None
    location: str | None = None
    url: str | None = None
    profile_image_url: str | None = None
    profile_banner_url: str | None = None

    # Metrics
    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0
    listed_count: int = 0
    favourites_count: int | None = None
    media_count: int | None = None

    # Verification
    verified: bool = False
    verified_type: str | None = None
    is_blue_verified: bool | None = None

    created_at: str | None = None

    # Account settings
    default_profile: bool | None = None
    default_profile_image: bool | None = None
    protected: bool | None = None
    possibly_sensitive: bool | None = None

    # Relationship with the authenticated account
    followed_by: bool | None = None
    following: bool | None = None
    follow_request_sent: bool | None = None
    blocking: bool | None = None
    blocked_by: bool | None = None
    muting: bool | None = None
    notifications: bool | None = None
    can_dm: bool | None = None

    # Extended profile
    has_custom_timelines: bool | None = None
    has_extended_profile: bool | None = None
    is_translator: bool | None = None
    is_translation_enabled: bool | None = None
    professional_type: str | None = None
    advertiser_account_type: str | None = None

    pinned_tweet_ids: list[str] | None = None
    withheld_in_countries: list[str] | None = None


class UserAbout(ApiModel):
    """
    Extended "About this account" information.

    Includes the country the account is based in, username change
    history and identity verification details.
    """

    id: str
    rest_id: str | None = None
    screen_name: str | None = None
    name: str | None = None

    account_based_in: str | None = None
    location_accurate: bool | None = None
    affiliate_username: str | None = None
    source: str | None = None

    username_changes: int | None = None
    username_last_changed_at: int | None = None
    username_last_changed_at_datetime: str | None = None

    is_identity_verified: bool | None = None
    verified_since_msec: int | None = None
    verified_since_datetime: str | None = None


class UserIds(ApiModel):
    """A page of follower or following IDs."""

    ids: list[int] = Field(default_factory=list)
    next_cursor: str | None = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_cursor)
