"""Follow user use case."""

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import View
from social.domain.service import RelationshipService
from social.domain.value import UserId


class FollowUserRequest(BaseModel):
    """Follow user request."""

    source_id: int  # Follower
    target_id: int  # Followed


class FollowUserResponse(View):
    """Follow user response."""

    source_id: int
    target_id: int
    following: bool


class FollowUserUseCase(BaseUseCase):
    """Use case for following a user (idempotent)."""

    def __init__(self, relationship_service: RelationshipService) -> None:
        self.relationship_service = relationship_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow flow.

        Raises:
            NotFoundError: If either user does not exist
        """
        await self.relationship_service.follow(
            UserId(request.source_id), UserId(request.target_id)
        )
        return FollowUserResponse(
            source_id=request.source_id, target_id=request.target_id, following=True
        )
