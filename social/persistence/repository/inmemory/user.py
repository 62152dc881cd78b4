"""In-memory user repository for testing."""

from typing import Any, Dict, List, Optional

from social.domain.error import ConflictError, NotFoundError
from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import EdgeKind, UserId
from social.persistence.codec import record_to_user, user_to_properties

from .graph import InMemoryGraph


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Builds the same record shapes the Neo4j queries return and decodes them
    through the codec.
    """

    def __init__(self, graph: InMemoryGraph) -> None:
        self.graph = graph

    def _record(self, user_id: int, with_counts: bool = False) -> Dict[str, Any]:
        record: Dict[str, Any] = {"id": user_id, "props": dict(self.graph.users[user_id])}
        if with_counts:
            record["followers"] = sum(
                1
                for s in self.graph.sources(EdgeKind.FOLLOWS, user_id)
                if s in self.graph.users
            )
            record["following"] = sum(
                1
                for t in self.graph.targets(EdgeKind.FOLLOWS, user_id)
                if t in self.graph.users
            )
            record["postCount"] = sum(
                1
                for t in self.graph.targets(EdgeKind.POSTED, user_id)
                if t in self.graph.posts
            )
        return record

    async def email_exists(self, email: str) -> bool:
        """Check whether any user already uses an email."""
        wanted = email.lower()
        return any(
            props["email"].lower() == wanted for props in self.graph.users.values()
        )

    async def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        media_pending: bool = False,
    ) -> UserId:
        """Create a user node."""
        user_id = self.graph.next_id()
        self.graph.users[user_id] = user_to_properties(
            name, email, password_hash, media_pending
        )
        return UserId(user_id)

    async def set_image(self, user_id: UserId, path: str) -> None:
        """Set the profile image path and clear the pending-media flag."""
        props = self.graph.users.get(user_id)
        if props is None:
            raise NotFoundError("User", str(user_id))
        props.update(image=path, media_pending=False)

    async def find_by_id(
        self, user_id: UserId, with_counts: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        if user_id not in self.graph.users:
            return None
        return record_to_user(self._record(user_id, with_counts))

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (oldest node wins)."""
        for user_id in sorted(self.graph.users):
            if self.graph.users[user_id]["email"].lower() == email.lower():
                return record_to_user(self._record(user_id))
        return None

    async def find_all(self) -> List[User]:
        """Find all users with their aggregate counts."""
        return [
            record_to_user(self._record(user_id, with_counts=True))
            for user_id in sorted(self.graph.users)
        ]

    async def find_profile(
        self, profile_id: UserId, viewer_id: Optional[UserId]
    ) -> Optional[User]:
        """Find a user with all aggregates and both viewer follow flags."""
        if profile_id not in self.graph.users:
            return None
        record = self._record(profile_id, with_counts=True)
        known_viewer = viewer_id is not None and viewer_id in self.graph.users
        record["follows"] = known_viewer and self.graph.has_edge(
            EdgeKind.FOLLOWS, viewer_id, profile_id
        )
        record["isFollower"] = known_viewer and self.graph.has_edge(
            EdgeKind.FOLLOWS, profile_id, viewer_id
        )
        return record_to_user(record)

    async def find_followers(self, user_id: UserId) -> Optional[List[User]]:
        """Find users following a user."""
        if user_id not in self.graph.users:
            return None
        return [
            record_to_user(self._record(other))
            for other in sorted(self.graph.sources(EdgeKind.FOLLOWS, user_id))
            if other in self.graph.users
        ]

    async def find_following(self, user_id: UserId) -> Optional[List[User]]:
        """Find users a user follows."""
        if user_id not in self.graph.users:
            return None
        return [
            record_to_user(self._record(other))
            for other in sorted(self.graph.targets(EdgeKind.FOLLOWS, user_id))
            if other in self.graph.users
        ]

    async def update(self, user_id: UserId, name: str, email: str) -> Optional[User]:
        """Update a user's name and email."""
        props = self.graph.users.get(user_id)
        if props is None:
            return None
        props.update(name=name, email=email)
        return record_to_user(self._record(user_id))

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user node without cascading to posts or edges.

        Mirrors the store refusing a plain DELETE while edges remain.
        """
        if user_id not in self.graph.users:
            return False
        if self.graph.touches(user_id):
            raise ConflictError(f"User {user_id} still has relationships")
        del self.graph.users[user_id]
        return True
