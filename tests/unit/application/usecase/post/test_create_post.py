"""Unit tests for the post use cases."""

from base64 import b64encode

import pytest

from social.adapter.media import InMemoryMediaStore
from social.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from social.domain.service import UserService
from tests.fakes import make_image
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_renders_images_in_upload_order(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "a@x.com", "hash")
        images = [make_image(1), make_image(2)]

        response = await use_case.execute(
            CreatePostRequest(user_id=author.id, description="pics", images=images)
        )

        assert response.images == [b64encode(i).decode("ascii") for i in images]
        assert response.user_name == "Alice"
        assert response.created_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_media_failure_is_flagged(self, unit_env):
        use_case = await unit_env.get(CreatePostUseCase)
        user_service = await unit_env.get(UserService)
        media_store = await unit_env.get(InMemoryMediaStore)
        author = await user_service.create_user("Alice", "a@x.com", "hash")
        media_store.fail_writes = True

        response = await use_case.execute(
            CreatePostRequest(user_id=author.id, images=[make_image(1)])
        )

        assert response.images == []
        assert response.has_incomplete_media is True


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_feed_and_author_filter(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        user_service = await unit_env.get(UserService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")
        bob = await user_service.create_user("Bob", "b@x.com", "hash")
        first = await create.execute(CreatePostRequest(user_id=alice.id))
        second = await create.execute(CreatePostRequest(user_id=bob.id))

        feed = await list_posts.execute(ListPostsRequest())
        mine = await list_posts.execute(ListPostsRequest(author_id=alice.id))

        assert [p.id for p in feed.posts] == [second.id, first.id]
        assert [p.id for p in mine.posts] == [first.id]
