"""Media store adapters."""

from .filesystem import FilesystemMediaStore
from .memory import InMemoryMediaStore

__all__ = ["FilesystemMediaStore", "InMemoryMediaStore"]
