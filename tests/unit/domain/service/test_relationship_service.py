"""Unit tests for RelationshipService."""

import pytest

from social.domain.error import NotFoundError, RelationshipNotFoundError
from social.domain.service import (
    PostService,
    ProfileService,
    RelationshipService,
    UserService,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def create_users(unit_env, *names: str):
    user_service = await unit_env.get(UserService)
    return [
        await user_service.create_user(name, f"{name.lower()}@x.com", "hash")
        for name in names
    ]


class TestFollow:
    """Tests for follow and unfollow."""

    @pytest.mark.asyncio
    async def test_follow_is_idempotent(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        user_service = await unit_env.get(UserService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")

        await relationship_service.follow(bob.id, alice.id)
        await relationship_service.follow(bob.id, alice.id)

        assert [u.id for u in await user_service.list_followers(alice.id)] == [bob.id]

    @pytest.mark.asyncio
    async def test_follow_is_directed(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        user_service = await unit_env.get(UserService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")

        await relationship_service.follow(bob.id, alice.id)

        assert await user_service.list_followers(bob.id) == []

    @pytest.mark.asyncio
    async def test_unfollow_twice_reports_missing_relationship(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")
        await relationship_service.follow(bob.id, alice.id)

        await relationship_service.unfollow(bob.id, alice.id)
        with pytest.raises(RelationshipNotFoundError) as exc_info:
            await relationship_service.unfollow(bob.id, alice.id)

        assert exc_info.value.relationship == "FOLLOWS"
        assert exc_info.value.source_id == bob.id
        assert exc_info.value.target_id == alice.id

    @pytest.mark.asyncio
    async def test_follow_missing_target(self, unit_env):
        """A missing endpoint is a plain NotFoundError naming the endpoint."""
        relationship_service = await unit_env.get(RelationshipService)
        (alice,) = await create_users(unit_env, "Alice")

        with pytest.raises(NotFoundError) as exc_info:
            await relationship_service.follow(alice.id, 999)

        assert type(exc_info.value) is NotFoundError
        assert exc_info.value.resource == "User"
        assert exc_info.value.identifier == "999"

    @pytest.mark.asyncio
    async def test_unfollow_missing_source(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        (alice,) = await create_users(unit_env, "Alice")

        with pytest.raises(NotFoundError) as exc_info:
            await relationship_service.unfollow(999, alice.id)

        assert type(exc_info.value) is NotFoundError
        assert exc_info.value.identifier == "999"


class TestLike:
    """Tests for like and dislike."""

    @pytest.mark.asyncio
    async def test_like_is_idempotent_and_dislike_removes_it(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        post_service = await unit_env.get(PostService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")
        post = await post_service.create_post(alice.id, "hello")

        await relationship_service.like(bob.id, post.id)
        await relationship_service.like(bob.id, post.id)
        assert (await post_service.get_post(post.id)).likes == [bob.id]

        await relationship_service.dislike(bob.id, post.id)
        assert (await post_service.get_post(post.id)).likes == []

    @pytest.mark.asyncio
    async def test_dislike_without_like(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        post_service = await unit_env.get(PostService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")
        post = await post_service.create_post(alice.id, "hello")

        with pytest.raises(RelationshipNotFoundError) as exc_info:
            await relationship_service.dislike(bob.id, post.id)

        assert exc_info.value.relationship == "LIKED"

    @pytest.mark.asyncio
    async def test_like_missing_post(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        (alice,) = await create_users(unit_env, "Alice")

        with pytest.raises(NotFoundError) as exc_info:
            await relationship_service.like(alice.id, 999)

        assert type(exc_info.value) is NotFoundError
        assert exc_info.value.resource == "Post"

    @pytest.mark.asyncio
    async def test_like_does_not_change_follow_counts(self, unit_env):
        relationship_service = await unit_env.get(RelationshipService)
        post_service = await unit_env.get(PostService)
        profile_service = await unit_env.get(ProfileService)
        alice, bob = await create_users(unit_env, "Alice", "Bob")
        post = await post_service.create_post(alice.id, "hello")

        await relationship_service.like(bob.id, post.id)

        profile = await profile_service.get_profile(alice.id, bob.id)
        assert profile.followers == 0
        assert profile.follows is False
