"""Unit tests for the Neo4j repositories against a scripted graph client."""

from datetime import datetime, timezone

import pytest

from social.domain.error import NotFoundError, StorageError
from social.persistence.repository import (
    Neo4jPostRepository,
    Neo4jRelationshipRepository,
    Neo4jUserRepository,
)
from tests.fakes import ScriptedGraphClient, post_record, user_record


class TestNeo4jUserRepository:
    """Tests for Neo4jUserRepository."""

    @pytest.mark.asyncio
    async def test_create_sends_node_properties(self):
        graph = ScriptedGraphClient([{"id": 7}])
        repo = Neo4jUserRepository(graph)

        user_id = await repo.create("Alice", "a@x.com", "hash", media_pending=True)

        assert user_id == 7
        assert graph.last_parameters == {
            "props": {
                "name": "Alice",
                "email": "a@x.com",
                "password": "hash",
                "media_pending": True,
            }
        }

    @pytest.mark.asyncio
    async def test_create_without_identity(self):
        repo = Neo4jUserRepository(ScriptedGraphClient([]))

        with pytest.raises(StorageError):
            await repo.create("Alice", "a@x.com", "hash")

    @pytest.mark.asyncio
    async def test_email_exists(self):
        graph = ScriptedGraphClient([{"exists": True}], [{"exists": False}])
        repo = Neo4jUserRepository(graph)

        assert await repo.email_exists("a@x.com") is True
        assert "toLower(u.email) = toLower($email)" in graph.calls[0][0]
        assert graph.last_parameters == {"email": "a@x.com"}
        assert await repo.email_exists("b@x.com") is False

    @pytest.mark.asyncio
    async def test_find_by_id(self):
        graph = ScriptedGraphClient([user_record(3)])
        repo = Neo4jUserRepository(graph)

        user = await repo.find_by_id(3)

        assert user.id == 3
        assert graph.last_parameters == {"id": 3}

    @pytest.mark.asyncio
    async def test_find_missing_user(self):
        repo = Neo4jUserRepository(ScriptedGraphClient())

        assert await repo.find_by_id(3) is None
        assert await repo.find_by_email("a@x.com") is None
        assert await repo.update(3, "Alice", "a@x.com") is None

    @pytest.mark.asyncio
    async def test_find_profile_passes_viewer(self):
        record = user_record(3)
        record.update(
            follows=True, isFollower=False, postCount=1, followers=1, following=0
        )
        graph = ScriptedGraphClient([record])
        repo = Neo4jUserRepository(graph)

        profile = await repo.find_profile(3, 4)

        assert graph.last_parameters == {"profileId": 3, "viewerId": 4}
        assert profile.follows is True
        assert profile.is_follower is False
        assert profile.post_count == 1

    @pytest.mark.asyncio
    async def test_connections_of_missing_user(self):
        repo = Neo4jUserRepository(ScriptedGraphClient())

        assert await repo.find_followers(3) is None

    @pytest.mark.asyncio
    async def test_connections_without_edges(self):
        """The optional match yields one all-null row for a lonely user."""
        repo = Neo4jUserRepository(ScriptedGraphClient([{"id": None, "props": None}]))

        assert await repo.find_following(3) == []

    @pytest.mark.asyncio
    async def test_connections(self):
        repo = Neo4jUserRepository(
            ScriptedGraphClient([user_record(4), user_record(5, email="c@x.com")])
        )

        followers = await repo.find_followers(3)

        assert [u.id for u in followers] == [4, 5]

    @pytest.mark.asyncio
    async def test_set_image_on_missing_user(self):
        repo = Neo4jUserRepository(ScriptedGraphClient([]))

        with pytest.raises(NotFoundError):
            await repo.set_image(3, "imgs/user-3/profile-picture/profile-picture.png")

    @pytest.mark.asyncio
    async def test_delete(self):
        graph = ScriptedGraphClient([{"deleted": 1}], [{"deleted": 0}])
        repo = Neo4jUserRepository(graph)

        assert await repo.delete(3) is True
        assert await repo.delete(3) is False


class TestNeo4jPostRepository:
    """Tests for Neo4jPostRepository."""

    @pytest.mark.asyncio
    async def test_create(self):
        graph = ScriptedGraphClient([{"id": 10}])
        repo = Neo4jPostRepository(graph)

        post_id = await repo.create(
            1, "hi", datetime(2024, 5, 1, 12, tzinfo=timezone.utc), media_pending=True
        )

        assert post_id == 10
        assert graph.last_parameters == {
            "userId": 1,
            "props": {
                "description": "hi",
                "created_at": "2024-05-01T12:00:00Z",
                "media_pending": True,
            },
        }

    @pytest.mark.asyncio
    async def test_create_for_missing_author(self):
        repo = Neo4jPostRepository(ScriptedGraphClient([]))

        assert await repo.create(1, "hi", datetime.now(timezone.utc)) is None

    @pytest.mark.asyncio
    async def test_set_images(self):
        graph = ScriptedGraphClient([{"id": 10}])
        repo = Neo4jPostRepository(graph)

        await repo.set_images(10, ["a.jpg", "b.jpg"])

        assert graph.last_parameters == {"id": 10, "images": ["a.jpg", "b.jpg"]}

    @pytest.mark.asyncio
    async def test_find_all_keeps_query_order(self):
        repo = Neo4jPostRepository(
            ScriptedGraphClient([post_record(11), post_record(10)])
        )

        posts = await repo.find_all()

        assert [p.id for p in posts] == [11, 10]

    @pytest.mark.asyncio
    async def test_delete_passes_owner(self):
        graph = ScriptedGraphClient([{"deleted": 0}])
        repo = Neo4jPostRepository(graph)

        assert await repo.delete(1, 10) is False
        assert graph.last_parameters == {"userId": 1, "postId": 10}


class TestNeo4jRelationshipRepository:
    """Tests for Neo4jRelationshipRepository."""

    @pytest.mark.asyncio
    async def test_merge_follow(self):
        graph = ScriptedGraphClient(
            [{"sourceExists": True, "targetExists": True, "edges": 1}]
        )
        repo = Neo4jRelationshipRepository(graph)

        mutation = await repo.merge_follow(1, 2)

        assert mutation.edges == 1
        assert graph.last_parameters == {"sourceId": 1, "targetId": 2}
        assert "FOLLOWS" in graph.calls[-1][0]

    @pytest.mark.asyncio
    async def test_delete_like_reports_missing_target(self):
        graph = ScriptedGraphClient(
            [{"sourceExists": True, "targetExists": False, "edges": 0}]
        )
        repo = Neo4jRelationshipRepository(graph)

        mutation = await repo.delete_like(1, 10)

        assert mutation.target_exists is False
        assert "LIKED" in graph.calls[-1][0]
        assert ":Post" in graph.calls[-1][0]

    @pytest.mark.asyncio
    async def test_mutation_without_result(self):
        repo = Neo4jRelationshipRepository(ScriptedGraphClient([]))

        with pytest.raises(StorageError):
            await repo.merge_like(1, 10)

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        repo = Neo4jRelationshipRepository(
            ScriptedGraphClient(StorageError("Graph query failed"))
        )

        with pytest.raises(StorageError):
            await repo.merge_follow(1, 2)
