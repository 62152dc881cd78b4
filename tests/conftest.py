"""Test configuration and fixtures."""

import logfire
import pytest

from social.domain.repository.media import PROFILE_SCOPE, post_scope

# Keep spans local; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def profile_path():
    """Build the expected profile picture path for a user."""

    def _path(user_id: int) -> str:
        return f"imgs/user-{user_id}/{PROFILE_SCOPE}/profile-picture.png"

    return _path


@pytest.fixture
def post_image_path():
    """Build the expected path of a post's index-th image."""

    def _path(user_id: int, post_id: int, index: int) -> str:
        return f"imgs/user-{user_id}/{post_scope(post_id)}/{index}.jpg"

    return _path
