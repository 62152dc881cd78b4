"""User node.

Users own posts and take part in FOLLOWS and LIKED edges. The optional
aggregate fields are only populated when the query that produced the user
projected them.
"""

from typing import Optional

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import UserId


class User(DomainModel):
    """User node with optional aggregate projections."""

    id: UserId
    name: str
    email: str
    password_hash: str = Field(repr=False)
    image: Optional[str] = None  # Media store path, not bytes

    # True while a profile image write is outstanding or after it failed
    has_incomplete_media: bool = False

    followers: Optional[int] = Field(default=None, ge=0)
    following: Optional[int] = Field(default=None, ge=0)
    post_count: Optional[int] = Field(default=None, ge=0)

    # Profile reads only: whether the viewer follows this user, and whether
    # this user follows the viewer back
    follows: Optional[bool] = None
    is_follower: Optional[bool] = None
