"""Media store interface."""

from abc import ABC, abstractmethod

from social.domain.value import PostId, UserId

MEDIA_ROOT_DIR = "imgs"
PROFILE_SCOPE = "profile-picture"


def post_scope(post_id: PostId) -> str:
    """Sub-scope holding a post's images."""
    return f"post{post_id}"


class MediaStore(ABC):
    """Blob storage for uploaded images, addressed by owner and scope.

    The path layout is part of the persisted contract because paths are
    stored on graph nodes and must stay resolvable:

        imgs/user-<userId>/post<postId>/<index>.jpg
        imgs/user-<userId>/profile-picture/profile-picture.png
    """

    def scope_dir(self, owner_id: UserId, sub_scope: str) -> str:
        """Relative directory for an owner's sub-scope."""
        return f"{MEDIA_ROOT_DIR}/user-{owner_id}/{sub_scope}"

    def allocate_path(self, owner_id: UserId, sub_scope: str, index: int) -> str:
        """Deterministic relative path for the index-th payload of a scope."""
        if sub_scope == PROFILE_SCOPE:
            filename = "profile-picture.png"
        else:
            filename = f"{index}.jpg"
        return f"{self.scope_dir(owner_id, sub_scope)}/{filename}"

    @abstractmethod
    async def provision(self, owner_id: UserId, sub_scope: str) -> None:
        """Make sure the scope directory exists.

        Raises:
            StorageError: If the directory cannot be created
        """
        pass

    @abstractmethod
    async def write(self, path: str, data: bytes) -> None:
        """Write bytes to a previously allocated path.

        Raises:
            StorageError: If the write fails or times out
        """
        pass

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Read bytes back from a path.

        Raises:
            StorageError: If the path cannot be read or the read times out
        """
        pass
