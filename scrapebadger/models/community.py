"""List and community data models."""

from pydantic import Field

from scrapebadger.models.base import ApiModel
from scrapebadger.models.user import User


class TwitterList(ApiModel):
    """A Twitter list."""

    id: str
    name: str = ""
    description: str | None = None
    created_at: str | None = None
    member_count: int | None = None
    subscriber_count: int | None = None
    mode: str | None = Field(default=None, description="Public or Private")
    user_id: str | None = None
    username: str | None = None


class CommunityBanner(ApiModel):
    url: str | None = None
    width: int | None = None
    height: int | None = None


class CommunityRule(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None


class Community(ApiModel):
    """A Twitter community."""

    id: str
    name: str = ""
    description: str | None = None

    # Membership
    member_count: int | None = None
    is_member: bool | None = None
    role: str | None = None

    # Settings
    is_nsfw: bool | None = None
    join_policy: str | None = None
    invites_policy: str | None = None
    is_pinned: bool | None = None

    created_at: int | None = None
    created_at_datetime: str | None = None

    banner: CommunityBanner | None = None
    members_facepile_results: list[str] | None = None

    # Administration
    creator_id: str | None = None
    creator_username: str | None = None
    creator_name: str | None = None
    admin_id: str | None = None
    admin_username: str | None = None
    admin_name: str | None = None

    rules: list[CommunityRule] | None = None


class CommunityMember(ApiModel):
    """A community member with their role."""

    user: User
    role: str | None = None
    joined_at: str | None = None
