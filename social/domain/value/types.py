"""Domain value objects for the social graph."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import field_validator

from social.domain.value.common import RootValueObject

# Persisted form of Post.created_at, always UTC
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class NodeLabel(str, Enum):
    """Node kinds of the fixed data model."""

    USER = "User"
    POST = "Post"


class EdgeKind(str, Enum):
    """Edge kinds of the fixed data model.

    POSTED is created together with its Post and only removed with it.
    FOLLOWS and LIKED are merged, so at most one exists per ordered pair.
    """

    POSTED = "POSTED"
    FOLLOWS = "FOLLOWS"
    LIKED = "LIKED"


class MediaScope(str, Enum):
    """Kind of owner a media batch is attached to."""

    POST = "post"
    PROFILE = "profile"


class Email(RootValueObject[str]):
    """User email address.

    Case is preserved as submitted; lookups compare case-insensitively.
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email has a local part and a domain."""
        v = v.strip()
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain:
            raise ValueError("Email must look like name@domain")
        if len(v) > 254:
            raise ValueError("Email must be at most 254 characters")
        return v


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the persisted UTC format."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """Parse the persisted UTC format back into an aware datetime."""
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current time truncated to the persisted precision."""
    return datetime.now(timezone.utc).replace(microsecond=0)
