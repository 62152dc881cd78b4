"""Get profile use case."""

from typing import Optional

from pydantic import BaseModel

from social.application.usecase.base import BaseUseCase
from social.application.usecase.view import UserView, render_user
from social.domain.service import MediaService, ProfileService
from social.domain.value import UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    profile_id: int
    viewer_id: Optional[int] = None


class GetProfileResponse(UserView):
    """Get profile response."""


class GetProfileUseCase(BaseUseCase):
    """Use case for a user's profile as seen by a viewer."""

    def __init__(
        self, profile_service: ProfileService, media_service: MediaService
    ) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile composition service
            media_service: Media service used to render the image back
        """
        self.profile_service = profile_service
        self.media_service = media_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the profile owner does not exist
        """
        viewer_id = UserId(request.viewer_id) if request.viewer_id is not None else None
        user = await self.profile_service.get_profile(
            UserId(request.profile_id), viewer_id
        )
        view = await render_user(user, self.media_service)
        return GetProfileResponse(**view.model_dump())
