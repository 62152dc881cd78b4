"""Domain value objects for the social graph."""

from social.domain.value.identifiers import PostId, UserId
from social.domain.value.types import (
    EdgeKind,
    Email,
    MediaScope,
    NodeLabel,
    format_timestamp,
    parse_timestamp,
    utc_now,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "EdgeKind",
    "Email",
    "MediaScope",
    "NodeLabel",
    "format_timestamp",
    "parse_timestamp",
    "utc_now",
]
