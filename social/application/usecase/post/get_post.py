"""Get post use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import PostView, render_post
from social.domain.service import MediaService, PostService
from social.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int


class GetPostResponse(PostView):
    """Get post response."""


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService, media_service: MediaService) -> None:
        self.post_service = post_service
        self.media_service = media_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post(PostId(request.post_id))
        view = await render_post(post, self.media_service)
        return GetPostResponse(**view.model_dump())
