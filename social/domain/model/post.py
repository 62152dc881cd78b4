"""Post node.

A post is created together with its POSTED edge; images are attached in a
second write, so a post can exist with no images (see has_incomplete_media).
"""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import PostId, UserId


class Post(DomainModel):
    """Post node joined with its author and likers."""

    id: PostId
    user_id: UserId
    user_name: str
    description: str = ""
    images: list[str] = Field(default_factory=list)  # Upload order
    likes: list[UserId] = Field(default_factory=list)  # Distinct likers
    created_at: datetime
    has_incomplete_media: bool = False
