"""Response-shaped views shared by the use cases.

Views serialise with camelCase aliases. Image fields carry base64 data read
back from the media store, never the stored paths.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from social.domain.model import Post, User
from social.domain.service import MediaService
from social.domain.value import format_timestamp


class View(BaseModel):
    """Base for emitted entity shapes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserView(View):
    """User as emitted; the password hash is never part of it."""

    id: int
    name: str
    email: str
    image: Optional[str] = None
    follows: Optional[bool] = None
    is_follower: Optional[bool] = None
    followers: Optional[int] = None
    following: Optional[int] = None
    post_count: Optional[int] = None
    has_incomplete_media: bool = False


class PostView(View):
    """Post as emitted."""

    id: int
    user_id: int
    user_name: str
    description: str
    images: list[str]
    likes: list[int]
    created_at: str  # YYYY-MM-DDTHH:MM:SSZ
    has_incomplete_media: bool = False


async def render_user(user: User, media_service: MediaService) -> UserView:
    """Render a user, reading its profile image back.

    Raises:
        StorageError: If the profile image is referenced but unreadable
    """
    return UserView(
        id=user.id,
        name=user.name,
        email=user.email,
        image=await media_service.render_profile_image(user.image),
        follows=user.follows,
        is_follower=user.is_follower,
        followers=user.followers,
        following=user.following,
        post_count=user.post_count,
        has_incomplete_media=user.has_incomplete_media,
    )


async def render_post(post: Post, media_service: MediaService) -> PostView:
    """Render a post, skipping images that cannot be read back."""
    return PostView(
        id=post.id,
        user_id=post.user_id,
        user_name=post.user_name,
        description=post.description,
        images=await media_service.render_images(post.images),
        likes=list(post.likes),
        created_at=format_timestamp(post.created_at),
        has_incomplete_media=post.has_incomplete_media,
    )
