"""Dislike post use case."""

from social.application.usecase.base import BaseUseCase
from social.application.usecase.relationship.like_post import (
    LikePostRequest,
    LikePostResponse,
)
from social.domain.service import RelationshipService
from social.domain.value import PostId, UserId


class DislikePostRequest(LikePostRequest):
    """Dislike post request."""


class DislikePostResponse(LikePostResponse):
    """Dislike post response."""


class DislikePostUseCase(BaseUseCase):
    """Use case for removing a like."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: DislikePostRequest) -> DislikePostResponse:
        """Execute dislike flow.

        Raises:
            NotFoundError: If the user or the post does not exist
            RelationshipNotFoundError: If the user had not liked the post
        """
        await self.relationship_service.dislike(
            UserId(request.user_id), PostId(request.post_id)
        )
        return DislikePostResponse(
            user_id=request.user_id, post_id=request.post_id, liked=False
        )
