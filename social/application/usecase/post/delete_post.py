"""Delete post use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.domain.service import PostService
from social.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    user_id: int  # Owner
    post_id: int


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: int


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting an owned post with all its edges."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the user has no such post
        """
        await self.post_service.delete_post(
            UserId(request.user_id), PostId(request.post_id)
        )
        return DeletePostResponse(post_id=request.post_id)
