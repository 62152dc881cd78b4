"""Infrastructure providers."""

# Import bases
from .graph import GraphProvider
from .media import MediaProvider

# Import implementations (needed for __subclasses__())
from .graph import ProdGraphProvider  # noqa: F401
from .media import ProdMediaProvider  # noqa: F401

__all__ = [
    "GraphProvider",
    "MediaProvider",
    "ProdGraphProvider",
    "ProdMediaProvider",
]
