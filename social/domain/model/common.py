"""Base model for graph entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable snapshot of a graph node as read back from the store.

    Entities are rebuilt from records on every read and never mutated in
    place; unknown fields are rejected so codec drift fails loudly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
