"""Create post use case."""

import logfire
from pydantic import BaseModel, Field

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import PostView, render_post
from social.domain.service import MediaService, PostService
from social.domain.value import UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    user_id: int  # Author
    description: str = ""
    images: list[bytes] = Field(default_factory=list)  # Upload order


class CreatePostResponse(PostView):
    """Create post response."""


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post with attached images."""

    def __init__(self, post_service: PostService, media_service: MediaService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            media_service: Media service used to render images back
        """
        self.post_service = post_service
        self.media_service = media_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate the image batch (via MediaService, inside PostService)
        2. Create the post node and POSTED edge
        3. Write the images and store their paths on the post
        4. Render the stored post

        Raises:
            InvalidInputError: If the image batch violates a limit
            NotFoundError: If the author does not exist
        """
        post = await self.post_service.create_post(
            UserId(request.user_id), request.description, request.images
        )
        if post.has_incomplete_media:
            logfire.warn("Returning post with incomplete media", post_id=post.id)

        view = await render_post(post, self.media_service)
        return CreatePostResponse(**view.model_dump())
