"""In-memory property graph shared by the in-memory repositories."""

from typing import Any, Dict, Iterator, List, Tuple

from social.domain.value import EdgeKind

Edge = Tuple[EdgeKind, int, int]


class InMemoryGraph:
    """Nodes and directed edges held in process memory.

    Node identities come from one counter across labels, like the store's
    internal ids. Edges keep insertion order.
    """

    def __init__(self) -> None:
        self._next_id = 0
        self.users: Dict[int, Dict[str, Any]] = {}
        self.posts: Dict[int, Dict[str, Any]] = {}
        self.edges: List[Edge] = []

    def next_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def has_edge(self, kind: EdgeKind, source: int, target: int) -> bool:
        return (kind, source, target) in self.edges

    def sources(self, kind: EdgeKind, target: int) -> Iterator[int]:
        """Distinct sources of ``kind`` edges into ``target``, in edge order."""
        seen = dict.fromkeys(s for k, s, t in self.edges if k == kind and t == target)
        return iter(seen)

    def targets(self, kind: EdgeKind, source: int) -> Iterator[int]:
        """Distinct targets of ``kind`` edges out of ``source``, in edge order."""
        seen = dict.fromkeys(t for k, s, t in self.edges if k == kind and s == source)
        return iter(seen)

    def touches(self, node_id: int) -> bool:
        return any(node_id in (s, t) for _, s, t in self.edges)

    def detach(self, node_id: int) -> int:
        """Remove every edge touching a node; returns how many were removed."""
        before = len(self.edges)
        self.edges = [e for e in self.edges if node_id not in (e[1], e[2])]
        return before - len(self.edges)
