"""Test doubles and builders shared across test modules."""

from typing import Any, Mapping, Optional, Union

from social.domain.error import StorageError
from social.persistence.graph import GraphClient, Record

Response = Union[list[Record], Exception]


class ScriptedGraphClient(GraphClient):
    """GraphClient that replays scripted responses and records every call.

    Each ``execute`` pops the next response; an exception response is
    raised instead of returned. With nothing scripted, queries return no
    records.
    """

    def __init__(self, *responses: Response) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.reachable = True

    async def execute(
        self,
        query: str,
        parameters: Optional[Mapping[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> list[Record]:
        self.calls.append((query, dict(parameters or {})))
        if not self.responses:
            return []
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def ping(self) -> None:
        if not self.reachable:
            raise StorageError("Graph store unreachable")

    @property
    def last_parameters(self) -> dict[str, Any]:
        return self.calls[-1][1]


def make_image(seed: int = 0, size: int = 16) -> bytes:
    """Small distinct payload standing in for image bytes."""
    return bytes((seed + i) % 256 for i in range(size))


def user_record(user_id: int = 1, **props: Any) -> dict[str, Any]:
    """Record shaped like a user projection."""
    base = {
        "name": "Alice",
        "email": "a@x.com",
        "password": "hash",
        "media_pending": False,
    }
    base.update(props)
    return {"id": user_id, "props": base}


def post_record(post_id: int = 10, user_id: int = 1, **overrides: Any) -> dict[str, Any]:
    """Record shaped like a post projection."""
    record = {
        "id": post_id,
        "props": {
            "description": "hi",
            "created_at": "2024-05-01T12:00:00Z",
            "images": [],
            "media_pending": False,
        },
        "userId": user_id,
        "userName": "Alice",
        "likes": [],
    }
    record.update(overrides)
    return record
