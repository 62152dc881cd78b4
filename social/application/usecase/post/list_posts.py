"""List posts use case."""

from typing import Optional

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import PostView, render_post
from social.domain.service import MediaService, ProfileService
from social.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    author_id: Optional[int] = None  # Whole feed when unset


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase(BaseUseCase):
    """Use case for the feed, or one author's posts."""

    def __init__(
        self, profile_service: ProfileService, media_service: MediaService
    ) -> None:
        self.profile_service = profile_service
        self.media_service = media_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            NotFoundError: If an author is given and does not exist
        """
        if request.author_id is None:
            posts = await self.profile_service.list_feed()
        else:
            posts = await self.profile_service.list_posts_by_author(
                UserId(request.author_id)
            )

        return ListPostsResponse(
            posts=[await render_post(post, self.media_service) for post in posts]
        )
