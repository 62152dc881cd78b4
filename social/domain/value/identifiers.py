"""Strongly typed identifiers for social graph nodes.

Identities are assigned by the graph store (``id(n)``) and are opaque to
callers; NewType keeps user and post identities from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
