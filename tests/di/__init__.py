"""Mock providers for testing."""

from .graph import MockGraphProvider
from .media import MockMediaProvider
from .container import build_test_container

__all__ = [
    "MockGraphProvider",
    "MockMediaProvider",
    "build_test_container",
]
