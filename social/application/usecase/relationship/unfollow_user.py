"""Unfollow user use case."""

from social.application.usecase.base import BaseUseCase
from social.application.usecase.relationship.follow_user import (
    FollowUserRequest,
    FollowUserResponse,
)
from social.domain.service import RelationshipService
from social.domain.value import UserId


class UnfollowUserRequest(FollowUserRequest):
    """Unfollow user request."""


class UnfollowUserResponse(FollowUserResponse):
    """Unfollow user response."""


class UnfollowUserUseCase(BaseUseCase):
    """Use case for removing a follow edge."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: UnfollowUserRequest) -> UnfollowUserResponse:
        """Execute unfollow flow.

        Raises:
            NotFoundError: If either user does not exist
            RelationshipNotFoundError: If there was no follow to remove
        """
        await self.relationship_service.unfollow(
            UserId(request.source_id), UserId(request.target_id)
        )
        return UnfollowUserResponse(
            source_id=request.source_id, target_id=request.target_id, following=False
        )
