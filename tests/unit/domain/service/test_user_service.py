"""Unit tests for UserService."""

import pytest

from social.adapter.media import InMemoryMediaStore
from social.config import MediaSettings
from social.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    InvalidInputError,
    NotFoundError,
)
from social.domain.repository import UserRepository
from social.domain.service import MediaService, RelationshipService, UserService
from social.persistence.repository.inmemory import (
    InMemoryGraph,
    InMemoryUserRepository,
)
from social.util.password import PasswordHasher
from tests.fakes import make_image
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user method."""

    @pytest.mark.asyncio
    async def test_create_user_without_image(self, unit_env):
        """Creating a user without an image stores a plain node."""
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user("Alice", "a@x.com", "hash")

        assert user.name == "Alice"
        assert user.email == "a@x.com"
        assert user.image is None
        assert user.has_incomplete_media is False

    @pytest.mark.asyncio
    async def test_create_user_with_image_stores_profile_picture(
        self, unit_env, profile_path
    ):
        """The profile image lands at the fixed profile-picture path."""
        user_service = await unit_env.get(UserService)
        media_store = await unit_env.get(InMemoryMediaStore)
        image = make_image(1)

        user = await user_service.create_user("Alice", "a@x.com", "hash", image=image)

        assert user.image == profile_path(user.id)
        assert media_store.blobs[user.image] == image
        assert user.has_incomplete_media is False

    @pytest.mark.asyncio
    async def test_create_user_keeps_email_case(self, unit_env):
        """Emails are stored trimmed, with the case they were given."""
        user_service = await unit_env.get(UserService)

        user = await user_service.create_user("Alice", "  A@X.com ", "hash")

        assert user.email == "A@X.com"
        assert (await user_service.get_by_email("a@x.com")).id == user.id

    @pytest.mark.asyncio
    async def test_existing_mixed_case_email_is_found(self, unit_env):
        """Nodes written elsewhere with mixed-case emails stay reachable."""
        user_service = await unit_env.get(UserService)
        user_repository = await unit_env.get(UserRepository)
        password_hash = PasswordHasher(rounds=4).hash("s3cret")
        user_id = await user_repository.create("Bob", "Bob@Example.com", password_hash)

        assert (await user_service.get_by_email("Bob@Example.com")).id == user_id
        assert (await user_service.get_by_email("bob@example.com")).id == user_id
        authenticated = await user_service.authenticate("Bob@Example.com", "s3cret")
        assert authenticated.id == user_id
        with pytest.raises(ConflictError):
            await user_service.create_user("Other", "bob@example.com", "hash")

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email_conflicts(self, unit_env):
        """A second user with the same email is rejected."""
        user_service = await unit_env.get(UserService)
        await user_service.create_user("Alice", "a@x.com", "hash")

        with pytest.raises(ConflictError):
            await user_service.create_user("Other", "A@x.com", "hash")

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, unit_env):
        """Malformed emails are invalid input."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidInputError):
            await user_service.create_user("Alice", "not-an-email", "hash")

    @pytest.mark.asyncio
    async def test_create_user_empty_name(self, unit_env):
        """Blank names are invalid input."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidInputError):
            await user_service.create_user("   ", "a@x.com", "hash")

    @pytest.mark.asyncio
    async def test_media_failure_keeps_user_with_incomplete_media(self, unit_env):
        """A failed image write leaves the user in place, flagged."""
        user_service = await unit_env.get(UserService)
        media_store = await unit_env.get(InMemoryMediaStore)
        media_store.fail_writes = True

        user = await user_service.create_user(
            "Alice", "a@x.com", "hash", image=make_image(1)
        )

        assert user.image is None
        assert user.has_incomplete_media is True
        stored = await user_service.get_by_email("a@x.com")
        assert stored.id == user.id

    @pytest.mark.asyncio
    async def test_oversized_image_rejected_before_node_exists(self):
        """Image limits are checked before anything is written."""
        graph = InMemoryGraph()
        media_store = InMemoryMediaStore()
        user_service = UserService(
            InMemoryUserRepository(graph),
            MediaService(media_store, MediaSettings(max_image_bytes=8)),
            PasswordHasher(),
        )

        with pytest.raises(InvalidInputError):
            await user_service.create_user(
                "Alice", "a@x.com", "hash", image=make_image(size=9)
            )

        assert graph.users == {}
        assert media_store.blobs == {}


class TestGetUser:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_by_id(999)

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_get_by_id_with_counts(self, unit_env):
        """Counts are only populated when asked for."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("Alice", "a@x.com", "hash")

        plain = await user_service.get_by_id(user.id)
        counted = await user_service.get_by_id(user.id, with_counts=True)

        assert plain.followers is None
        assert counted.followers == 0
        assert counted.following == 0
        assert counted.post_count == 0

    @pytest.mark.asyncio
    async def test_get_by_email_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_email("nobody@x.com")

    @pytest.mark.asyncio
    async def test_list_users_includes_counts(self, unit_env):
        user_service = await unit_env.get(UserService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")
        bob = await user_service.create_user("Bob", "b@x.com", "hash")
        await relationship_service.follow(bob.id, alice.id)

        users = {u.id: u for u in await user_service.list_users()}

        assert users[alice.id].followers == 1
        assert users[bob.id].following == 1


class TestUpdateUser:
    """Tests for update_user method."""

    @pytest.mark.asyncio
    async def test_update_user_changes_name_and_email(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("Alice", "a@x.com", "hash")

        updated = await user_service.update_user(user.id, "Alicia", "alicia@x.com")

        assert updated.name == "Alicia"
        assert updated.email == "alicia@x.com"

    @pytest.mark.asyncio
    async def test_update_user_keeping_own_email(self, unit_env):
        """Re-submitting the user's own email is not a conflict."""
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("Alice", "a@x.com", "hash")

        updated = await user_service.update_user(user.id, "Alicia", "a@x.com")

        assert updated.name == "Alicia"

    @pytest.mark.asyncio
    async def test_update_user_email_taken_by_other_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")
        await user_service.create_user("Bob", "b@x.com", "hash")

        with pytest.raises(ConflictError):
            await user_service.update_user(alice.id, "Alice", "b@x.com")

    @pytest.mark.asyncio
    async def test_update_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_user(999, "Ghost", "ghost@x.com")


class TestDeleteUser:
    """Tests for delete_user method."""

    @pytest.mark.asyncio
    async def test_delete_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        user = await user_service.create_user("Alice", "a@x.com", "hash")

        await user_service.delete_user(user.id)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(user.id)

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.delete_user(999)

    @pytest.mark.asyncio
    async def test_delete_user_with_edges_conflicts(self, unit_env):
        """Users are not cascaded; remaining edges block the delete."""
        user_service = await unit_env.get(UserService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")
        bob = await user_service.create_user("Bob", "b@x.com", "hash")
        await relationship_service.follow(bob.id, alice.id)

        with pytest.raises(ConflictError):
            await user_service.delete_user(alice.id)

        assert (await user_service.get_by_id(alice.id)).id == alice.id


class TestConnections:
    """Tests for follower and following listings."""

    @pytest.mark.asyncio
    async def test_followers_and_following(self, unit_env):
        user_service = await unit_env.get(UserService)
        relationship_service = await unit_env.get(RelationshipService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")
        bob = await user_service.create_user("Bob", "b@x.com", "hash")
        carol = await user_service.create_user("Carol", "c@x.com", "hash")
        await relationship_service.follow(bob.id, alice.id)
        await relationship_service.follow(carol.id, alice.id)

        followers = await user_service.list_followers(alice.id)
        following = await user_service.list_following(bob.id)

        assert [u.id for u in followers] == [bob.id, carol.id]
        assert [u.id for u in following] == [alice.id]

    @pytest.mark.asyncio
    async def test_connections_of_lonely_user_are_empty(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.create_user("Alice", "a@x.com", "hash")

        assert await user_service.list_followers(alice.id) == []
        assert await user_service.list_following(alice.id) == []

    @pytest.mark.asyncio
    async def test_connections_of_missing_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.list_followers(999)
        with pytest.raises(NotFoundError):
            await user_service.list_following(999)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(PasswordHasher)
        user = await user_service.create_user(
            "Alice", "a@x.com", hasher.hash("s3cret")
        )

        authenticated = await user_service.authenticate("A@x.com", "s3cret")

        assert authenticated.id == user.id

    @pytest.mark.asyncio
    async def test_authenticate_with_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(PasswordHasher)
        await user_service.create_user("Alice", "a@x.com", hasher.hash("s3cret"))

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate("a@x.com", "wrong")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate("nobody@x.com", "s3cret")

    @pytest.mark.asyncio
    async def test_authenticate_malformed_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate("nobody", "s3cret")
