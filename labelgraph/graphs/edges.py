"""
Edge-list graph representation.

Stores a set of vertex labels plus a flat list of immutable Edge records.
Edge lookups scan the whole list, trading per-vertex indexing for simple
sequential storage.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, List, Mapping, Optional, Set, Tuple

from ..logging import get_logger
from .core import Edge, Graph, _label_key, same_label, validate_label, validate_weight

logger = get_logger(__name__)


class EdgesGraph(Graph):
    """
    Graph backed by a vertex set and an edge list.

    Representation invariant:
        - every edge endpoint is in the vertex set
        - every edge weight is > 0 (enforced by Edge)
        - no two edges share the same (source, target) pair

    Complexity:
        - add: O(1) amortized
        - set: O(E)
        - remove: O(E)
        - vertices: O(V)
        - sources / targets: O(E)
    """

    def __init__(self, *, check_rep: Optional[bool] = None) -> None:
        """Initialize an empty graph; see `Graph.__init__` for check_rep."""
        super().__init__(check_rep=check_rep)
        self._vertices: Set[Hashable] = set()
        self._edges: List[Edge] = []
        self._after_mutation()

    def _check_rep(self) -> None:
        seen: Set[Tuple[Hashable, Hashable]] = set()
        for edge in self._edges:
            if edge.source not in self._vertices:
                raise AssertionError(f"edge source must be a vertex: {edge.source!r}")
            if edge.target not in self._vertices:
                raise AssertionError(f"edge target must be a vertex: {edge.target!r}")
            if edge.weight <= 0:
                raise AssertionError(f"edge weight must be positive: {edge}")
            pair = (edge.source, edge.target)
            if pair in seen:
                raise AssertionError(f"duplicate edge: {edge.source!r} -> {edge.target!r}")
            seen.add(pair)

    def add(self, vertex: Hashable) -> bool:
        validate_label(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        logger.debug("added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        validate_label(source, "source")
        validate_label(target, "target")
        weight = validate_weight(weight)

        self._vertices.add(source)
        self._vertices.add(target)

        previous = 0
        for i, edge in enumerate(self._edges):
            if same_label(edge.source, source) and same_label(edge.target, target):
                previous = edge.weight
                del self._edges[i]
                break

        if weight > 0:
            self._edges.append(Edge(source, target, weight))

        logger.debug("set edge %r -> %r: %d (was %d)", source, target, weight, previous)
        self._after_mutation()
        return previous

    def remove(self, vertex: Hashable) -> bool:
        validate_label(vertex)
        if vertex not in self._vertices:
            return False

        self._vertices.remove(vertex)
        self._edges = [
            edge for edge in self._edges
            if not (same_label(edge.source, vertex) or same_label(edge.target, vertex))
        ]

        logger.debug("removed vertex %r", vertex)
        self._after_mutation()
        return True

    def vertices(self) -> FrozenSet[Hashable]:
        return frozenset(self._vertices)

    def sources(self, target: Hashable) -> Mapping[Hashable, int]:
        validate_label(target, "target")
        result: Dict[Hashable, int] = {}
        for edge in self._edges:
            if same_label(edge.target, target):
                result[edge.source] = edge.weight
        return MappingProxyType(result)

    def targets(self, source: Hashable) -> Mapping[Hashable, int]:
        validate_label(source, "source")
        result: Dict[Hashable, int] = {}
        for edge in self._edges:
            if same_label(edge.source, source):
                result[edge.target] = edge.weight
        return MappingProxyType(result)

    def edges(self) -> List[Edge]:
        return sorted(self._edges, key=lambda e: (_label_key(e.source), _label_key(e.target)))

    def __len__(self) -> int:
        return len(self._vertices)
