"""Neo4j implementation of User repository."""

from typing import List, Optional

from social.domain.error import NotFoundError, StorageError
from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import UserId
from social.persistence.codec import (
    record_to_flag,
    record_to_id,
    record_to_user,
    user_to_properties,
)
from social.persistence.graph import GraphClient

# Each aggregate is counted in its own WITH stage so the optional matches
# do not multiply into each other; users with no edges still yield 0.
_COUNTS = """
    OPTIONAL MATCH (u)-[:POSTED]->(p:Post)
    WITH u, count(DISTINCT p) AS postCount
    OPTIONAL MATCH (follower:User)-[:FOLLOWS]->(u)
    WITH u, postCount, count(DISTINCT follower) AS followers
    OPTIONAL MATCH (u)-[:FOLLOWS]->(followed:User)
    WITH u, postCount, followers, count(DISTINCT followed) AS following
"""

_RETURN_WITH_COUNTS = """
    RETURN id(u) AS id, properties(u) AS props,
           followers, following, postCount
"""


class Neo4jUserRepository(UserRepository):
    """Neo4j implementation of UserRepository."""

    def __init__(self, graph: GraphClient) -> None:
        """Initialize repository with a graph client.

        Args:
            graph: Shared graph client
        """
        self.graph = graph

    async def email_exists(self, email: str) -> bool:
        """Check whether any user already uses an email."""
        records = await self.graph.execute(
            "MATCH (u:User) WHERE toLower(u.email) = toLower($email) "
            "RETURN count(u) > 0 AS exists",
            {"email": email},
        )
        return bool(records) and record_to_flag(records[0], "exists")

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        media_pending: bool = False,
    ) -> UserId:
        """Create a user node."""
        records = await self.graph.execute(
            "CREATE (u:User $props) RETURN id(u) AS id",
            {"props": user_to_properties(name, email, password_hash, media_pending)},
        )
        if not records:
            raise StorageError("Graph store returned no identity for new user")
        return UserId(record_to_id(records[0]))

    async def set_image(self, user_id: UserId, path: str) -> None:
        """Set the profile image path and clear the pending-media flag."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $id
            SET u.image = $path, u.media_pending = false
            RETURN id(u) AS id
            """,
            {"id": user_id, "path": path},
        )
        if not records:
            raise NotFoundError("User", str(user_id))

    async def find_by_id(
        self, user_id: UserId, with_counts: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        if with_counts:
            query = (
                "MATCH (u:User) WHERE id(u) = $id" + _COUNTS + _RETURN_WITH_COUNTS
            )
        else:
            query = """
                MATCH (u:User) WHERE id(u) = $id
                RETURN id(u) AS id, properties(u) AS props
            """
        records = await self.graph.execute(query, {"id": user_id})
        return record_to_user(records[0]) if records else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email.

        Duplicate emails can exist after racing creations; the oldest
        node wins.
        """
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE toLower(u.email) = toLower($email)
            RETURN id(u) AS id, properties(u) AS props
            ORDER BY id LIMIT 1
            """,
            {"email": email},
        )
        return record_to_user(records[0]) if records else None

    async def find_all(self) -> List[User]:
        """Find all users with their aggregate counts."""
        records = await self.graph.execute(
            "MATCH (u:User)" + _COUNTS + _RETURN_WITH_COUNTS + "ORDER BY id"
        )
        return [record_to_user(record) for record in records]

    async def find_profile(
        self, profile_id: UserId, viewer_id: Optional[UserId]
    ) -> Optional[User]:
        """Find a user with all aggregates and both viewer follow flags."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $profileId
            OPTIONAL MATCH (viewer:User)-[:FOLLOWS]->(u)
            WHERE id(viewer) = $viewerId
            WITH u, count(viewer) > 0 AS follows
            OPTIONAL MATCH (u)-[:FOLLOWS]->(viewed:User)
            WHERE id(viewed) = $viewerId
            WITH u, follows, count(viewed) > 0 AS isFollower
            OPTIONAL MATCH (u)-[:POSTED]->(p:Post)
            WITH u, follows, isFollower, count(DISTINCT p) AS postCount
            OPTIONAL MATCH (follower:User)-[:FOLLOWS]->(u)
            WITH u, follows, isFollower, postCount,
                 count(DISTINCT follower) AS followers
            OPTIONAL MATCH (u)-[:FOLLOWS]->(followed:User)
            RETURN id(u) AS id, properties(u) AS props, follows, isFollower,
                   postCount, followers, count(DISTINCT followed) AS following
            """,
            {"profileId": profile_id, "viewerId": viewer_id},
        )
        return record_to_user(records[0]) if records else None

    async def find_followers(self, user_id: UserId) -> Optional[List[User]]:
        """Find users following a user."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $id
            OPTIONAL MATCH (other:User)-[:FOLLOWS]->(u)
            RETURN id(other) AS id, properties(other) AS props
            ORDER BY id
            """,
            {"id": user_id},
        )
        return self._connections(records)

    async def find_following(self, user_id: UserId) -> Optional[List[User]]:
        """Find users a user follows."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $id
            OPTIONAL MATCH (u)-[:FOLLOWS]->(other:User)
            RETURN id(other) AS id, properties(other) AS props
            ORDER BY id
            """,
            {"id": user_id},
        )
        return self._connections(records)

    @staticmethod
    def _connections(records: list[dict]) -> Optional[List[User]]:
        # No rows: the anchor user is missing. A single null row: no edges.
        if not records:
            return None
        return [record_to_user(record) for record in records if record.get("id") is not None]

    async def update(self, user_id: UserId, name: str, email: str) -> Optional[User]:
        """Update a user's name and email."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $id
            SET u.name = $name, u.email = $email
            RETURN id(u) AS id, properties(u) AS props
            """,
            {"id": user_id, "name": name, "email": email},
        )
        return record_to_user(records[0]) if records else None

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user node without cascading to posts or edges."""
        records = await self.graph.execute(
            """
            MATCH (u:User) WHERE id(u) = $id
            DELETE u
            RETURN count(*) AS deleted
            """,
            {"id": user_id},
        )
        return bool(records) and record_to_id(records[0], "deleted") > 0
