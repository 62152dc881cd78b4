"""Domain model entities for the social graph."""

from social.domain.model.post import Post
from social.domain.model.user import User

__all__ = [
    "User",
    "Post",
]
