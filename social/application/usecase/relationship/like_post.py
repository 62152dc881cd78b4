"""Like post use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import View
from social.domain.service import RelationshipService
from social.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like post request."""

    user_id: int
    post_id: int


class LikePostResponse(View):
    """Like post response."""

    user_id: int
    post_id: int
    liked: bool


class LikePostUseCase(BaseUseCase):
    """Use case for liking a post (idempotent)."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the user or the post does not exist
        """
        await self.relationship_service.like(
            UserId(request.user_id), PostId(request.post_id)
        )
        return LikePostResponse(
            user_id=request.user_id, post_id=request.post_id, liked=True
        )
