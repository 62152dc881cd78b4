"""Codec between graph records and domain models.

Graph records are untyped maps. Every type check on a record happens here
and fails with EncodingError, so repositories never inspect raw values.

Record shapes produced by the repositories:

    user:   {id, props, [followers, following, postCount, follows, isFollower]}
    post:   {id, props, userId, userName, likes}
    edge:   {sourceExists, targetExists, edges}
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from social.domain.error import EncodingError
from social.domain.model import Post, User
from social.domain.repository.relationship import EdgeMutation
from social.domain.value import PostId, UserId, format_timestamp, parse_timestamp

_MISSING = object()


def _field(record: Mapping[str, Any], key: str, default: Any = _MISSING) -> Any:
    if key in record:
        return record[key]
    if default is _MISSING:
        raise EncodingError(f"Record is missing field '{key}'")
    return default


def as_int(value: Any, name: str) -> int:
    """Narrow a value to int (booleans are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"Field '{name}' must be an integer, got {type(value).__name__}")
    return value


def as_str(value: Any, name: str) -> str:
    """Narrow a value to str."""
    if not isinstance(value, str):
        raise EncodingError(f"Field '{name}' must be a string, got {type(value).__name__}")
    return value


def as_bool(value: Any, name: str) -> bool:
    """Narrow a value to bool."""
    if not isinstance(value, bool):
        raise EncodingError(f"Field '{name}' must be a boolean, got {type(value).__name__}")
    return value


def as_map(value: Any, name: str) -> Dict[str, Any]:
    """Narrow a value to a string-keyed map."""
    if not isinstance(value, dict):
        raise EncodingError(f"Field '{name}' must be a map, got {type(value).__name__}")
    return value


def as_str_list(value: Any, name: str) -> List[str]:
    """Narrow a value to a list of strings."""
    if not isinstance(value, list):
        raise EncodingError(f"Field '{name}' must be a list, got {type(value).__name__}")
    return [as_str(item, f"{name}[{i}]") for i, item in enumerate(value)]


def as_int_list(value: Any, name: str) -> List[int]:
    """Narrow a value to a list of integers, ignoring nulls.

    ``collect()`` drops nulls already; nulls only appear when a query
    projects an optional match without collecting it.
    """
    if not isinstance(value, list):
        raise EncodingError(f"Field '{name}' must be a list, got {type(value).__name__}")
    return [as_int(item, f"{name}[{i}]") for i, item in enumerate(value) if item is not None]


def _optional_count(record: Mapping[str, Any], key: str) -> Optional[int]:
    value = record.get(key)
    return None if value is None else as_int(value, key)


def record_to_id(record: Mapping[str, Any], key: str = "id") -> int:
    """Extract a store-assigned identity from a record."""
    return as_int(_field(record, key), key)


def record_to_flag(record: Mapping[str, Any], key: str) -> bool:
    """Extract a boolean projection from a record."""
    return as_bool(_field(record, key), key)


def record_to_user(record: Mapping[str, Any]) -> User:
    """Convert a user record to a User domain model.

    Args:
        record: Record with ``id`` and ``props``, plus any aggregate keys

    Returns:
        User domain model

    Raises:
        EncodingError: If the record does not have the user shape
    """
    props = as_map(_field(record, "props"), "props")
    image = props.get("image")
    follows = record.get("follows")
    is_follower = record.get("isFollower")

    return User(
        id=UserId(record_to_id(record)),
        name=as_str(_field(props, "name"), "name"),
        email=as_str(_field(props, "email"), "email"),
        password_hash=as_str(_field(props, "password"), "password"),
        image=None if image is None else as_str(image, "image"),
        has_incomplete_media=as_bool(
            props.get("media_pending", False), "media_pending"
        ),
        followers=_optional_count(record, "followers"),
        following=_optional_count(record, "following"),
        post_count=_optional_count(record, "postCount"),
        follows=None if follows is None else as_bool(follows, "follows"),
        is_follower=None if is_follower is None else as_bool(is_follower, "isFollower"),
    )


def record_to_post(record: Mapping[str, Any]) -> Post:
    """Convert a post record to a Post domain model.

    Args:
        record: Record with ``id``, ``props``, ``userId``, ``userName``, ``likes``

    Returns:
        Post domain model

    Raises:
        EncodingError: If the record does not have the post shape or
            ``created_at`` is not in the persisted timestamp format
    """
    props = as_map(_field(record, "props"), "props")
    created_at_raw = as_str(_field(props, "created_at"), "created_at")
    try:
        created_at = parse_timestamp(created_at_raw)
    except ValueError as e:
        raise EncodingError(f"Field 'created_at' is malformed: {created_at_raw!r}") from e

    # Distinct in first-seen order even if the query did not deduplicate
    likes = list(dict.fromkeys(as_int_list(_field(record, "likes", []), "likes")))

    return Post(
        id=PostId(record_to_id(record)),
        user_id=UserId(record_to_id(record, "userId")),
        user_name=as_str(_field(record, "userName"), "userName"),
        description=as_str(_field(props, "description"), "description"),
        images=as_str_list(props.get("images", []), "images"),
        likes=[UserId(liker) for liker in likes],
        created_at=created_at,
        has_incomplete_media=as_bool(
            props.get("media_pending", False), "media_pending"
        ),
    )


def record_to_edge_mutation(record: Mapping[str, Any]) -> EdgeMutation:
    """Convert an edge merge/delete record to an EdgeMutation."""
    return EdgeMutation(
        source_exists=record_to_flag(record, "sourceExists"),
        target_exists=record_to_flag(record, "targetExists"),
        edges=record_to_id(record, "edges"),
    )


def user_to_properties(
    name: str, email: str, password_hash: str, media_pending: bool
) -> Dict[str, Any]:
    """Node properties for a new user."""
    return {
        "name": name,
        "email": email,
        "password": password_hash,
        "media_pending": media_pending,
    }


def post_to_properties(
    description: str, created_at: datetime, media_pending: bool
) -> Dict[str, Any]:
    """Node properties for a new post."""
    return {
        "description": description,
        "created_at": format_timestamp(created_at),
        "media_pending": media_pending,
    }
