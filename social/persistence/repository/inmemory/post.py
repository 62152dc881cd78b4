"""In-memory post repository for testing."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from social.domain.error import NotFoundError
from social.domain.model import Post
from social.domain.repository import PostRepository
from social.domain.value import EdgeKind, PostId, UserId
from social.persistence.codec import post_to_properties, record_to_post

from .graph import InMemoryGraph


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, graph: InMemoryGraph) -> None:
        self.graph = graph

    def _author(self, post_id: int) -> Optional[int]:
        return next(iter(self.graph.sources(EdgeKind.POSTED, post_id)), None)

    def _record(self, post_id: int, author_id: int) -> Dict[str, Any]:
        return {
            "id": post_id,
            "props": dict(self.graph.posts[post_id]),
            "userId": author_id,
            "userName": self.graph.users[author_id]["name"],
            "likes": [
                liker
                for liker in self.graph.sources(EdgeKind.LIKED, post_id)
                if liker in self.graph.users
            ],
        }

    def _posts(self, author_id: Optional[int] = None) -> List[Post]:
        records = []
        for post_id in self.graph.posts:
            author = self._author(post_id)
            if author is None or author not in self.graph.users:
                continue
            if author_id is not None and author != author_id:
                continue
            records.append(self._record(post_id, author))
        records.sort(
            key=lambda r: (r["props"]["created_at"], r["id"]), reverse=True
        )
        return [record_to_post(record) for record in records]

    async def create(
        self,
        user_id: UserId,
        description: str,
        created_at: datetime,
        media_pending: bool = False,
    ) -> Optional[PostId]:
        """Create a post node and its POSTED edge in one write."""
        if user_id not in self.graph.users:
            return None
        post_id = self.graph.next_id()
        self.graph.posts[post_id] = post_to_properties(
            description, created_at, media_pending
        )
        self.graph.edges.append((EdgeKind.POSTED, user_id, post_id))
        return PostId(post_id)

    async def set_images(self, post_id: PostId, paths: List[str]) -> None:
        """Set the ordered image paths and clear the pending-media flag."""
        props = self.graph.posts.get(post_id)
        if props is None:
            raise NotFoundError("Post", str(post_id))
        props.update(images=list(paths), media_pending=False)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, joined with its author and likers."""
        if post_id not in self.graph.posts:
            return None
        author = self._author(post_id)
        if author is None or author not in self.graph.users:
            return None
        return record_to_post(self._record(post_id, author))

    async def find_all(self) -> List[Post]:
        """Find every post, joined with author and likers."""
        return self._posts()

    async def find_by_author(self, user_id: UserId) -> List[Post]:
        """Find posts by a specific author."""
        return self._posts(author_id=user_id)

    async def delete(self, user_id: UserId, post_id: PostId) -> bool:
        """Delete a post owned by a user, with every edge touching it."""
        if post_id not in self.graph.posts:
            return False
        if not self.graph.has_edge(EdgeKind.POSTED, user_id, post_id):
            return False
        self.graph.detach(post_id)
        del self.graph.posts[post_id]
        return True
