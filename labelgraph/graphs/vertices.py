"""
Adjacency graph representation.

Stores one Vertex record per label. Each record keeps its own incoming
(`sources`) and outgoing (`targets`) weight maps, so every edge is held
twice: once on its source record and once on its target record.
`VerticesGraph` only changes the two copies together, through `_link`
and `_unlink`.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, List, Mapping, Optional

from ..logging import get_logger
from .core import Graph, _label_key, same_label, validate_label, validate_weight

logger = get_logger(__name__)


class Vertex:
    """
    Mutable vertex record with its incoming and outgoing edge weights.

    Internal to VerticesGraph. Two records are equal when their labels are
    equal.

    Attributes:
        label: Immutable vertex label.
        sources: Read-only view of incoming edges (source label -> weight).
        targets: Read-only view of outgoing edges (target label -> weight).
    """

    __slots__ = ("_label", "_sources", "_targets")

    def __init__(self, label: Hashable):
        """
        Create a vertex with no edges.

        Args:
            label: Vertex label.

        Raises:
            ValueError: If label is None.
        """
        validate_label(label, "label")
        self._label = label
        self._sources: Dict[Hashable, int] = {}
        self._targets: Dict[Hashable, int] = {}

    @property
    def label(self) -> Hashable:
        return self._label

    @property
    def sources(self) -> Mapping[Hashable, int]:
        return MappingProxyType(self._sources)

    @property
    def targets(self) -> Mapping[Hashable, int]:
        return MappingProxyType(self._targets)

    def target_weight(self, target: Hashable) -> int:
        """Weight of the outgoing edge to target, or 0 if there is none."""
        return self._targets.get(target, 0)

    def add_incoming(self, source: Hashable, weight: int) -> None:
        if weight <= 0:
            raise ValueError(f"weight must be positive: {weight}")
        self._sources[source] = weight

    def add_outgoing(self, target: Hashable, weight: int) -> None:
        if weight <= 0:
            raise ValueError(f"weight must be positive: {weight}")
        self._targets[target] = weight

    def remove_incoming(self, source: Hashable) -> int:
        """Drop the incoming edge from source; return its weight or 0."""
        return self._sources.pop(source, 0)

    def remove_outgoing(self, target: Hashable) -> int:
        """Drop the outgoing edge to target; return its weight or 0."""
        return self._targets.pop(target, 0)

    def _check_rep(self) -> None:
        for label, weight in self._sources.items():
            if weight <= 0:
                raise AssertionError(f"incoming weight from {label!r} must be positive: {weight}")
        for label, weight in self._targets.items():
            if weight <= 0:
                raise AssertionError(f"outgoing weight to {label!r} must be positive: {weight}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return same_label(self._label, other._label)

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"Vertex({self._label!r})"

    def __str__(self) -> str:
        return (
            f"Vertex '{self._label}': "
            f"incoming={dict(sorted(self._sources.items(), key=lambda kv: _label_key(kv[0])))}, "
            f"outgoing={dict(sorted(self._targets.items(), key=lambda kv: _label_key(kv[0])))}"
        )


class VerticesGraph(Graph):
    """
    Graph backed by a list of Vertex records.

    Representation invariant:
        - no two records share a label
        - every weight in every record is > 0
        - u.targets[v] == w  iff  v.sources[u] == w, and both records exist

    Complexity:
        - add: O(V) (scan for an existing record)
        - set: O(V)
        - remove: O(V)
        - vertices: O(V)
        - sources / targets: O(V) to find the record, then O(deg) to copy
    """

    def __init__(self, *, check_rep: Optional[bool] = None) -> None:
        """Initialize an empty graph; see `Graph.__init__` for check_rep."""
        super().__init__(check_rep=check_rep)
        self._vertices: List[Vertex] = []
        self._after_mutation()

    def _check_rep(self) -> None:
        by_label = {vertex.label: vertex for vertex in self._vertices}
        if len(by_label) != len(self._vertices):
            raise AssertionError("duplicate vertex labels found")

        for vertex in self._vertices:
            vertex._check_rep()
            for label, weight in vertex.targets.items():
                other = by_label.get(label)
                if other is None:
                    raise AssertionError(
                        f"edge {vertex.label!r} -> {label!r} points to a missing vertex"
                    )
                if other.sources.get(vertex.label) != weight:
                    raise AssertionError(
                        f"edge {vertex.label!r} -> {label!r} is not mirrored on its target"
                    )
            for label in vertex.sources:
                other = by_label.get(label)
                if other is None:
                    raise AssertionError(
                        f"edge {label!r} -> {vertex.label!r} comes from a missing vertex"
                    )
                if other.target_weight(vertex.label) != vertex.sources[label]:
                    raise AssertionError(
                        f"edge {label!r} -> {vertex.label!r} is not mirrored on its source"
                    )

    def _find(self, label: Hashable) -> Optional[Vertex]:
        for vertex in self._vertices:
            if same_label(vertex.label, label):
                return vertex
        return None

    @staticmethod
    def _link(source: Vertex, target: Vertex, weight: int) -> None:
        source.add_outgoing(target.label, weight)
        target.add_incoming(source.label, weight)

    @staticmethod
    def _unlink(source: Vertex, target: Vertex) -> int:
        previous = source.remove_outgoing(target.label)
        target.remove_incoming(source.label)
        return previous

    def add(self, vertex: Hashable) -> bool:
        validate_label(vertex)
        if self._find(vertex) is not None:
            return False
        self._vertices.append(Vertex(vertex))
        logger.debug("added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        validate_label(source, "source")
        validate_label(target, "target")
        weight = validate_weight(weight)

        self.add(source)
        self.add(target)
        source_vertex = self._find(source)
        target_vertex = self._find(target)

        previous = self._unlink(source_vertex, target_vertex)
        if weight > 0:
            self._link(source_vertex, target_vertex, weight)

        logger.debug("set edge %r -> %r: %d (was %d)", source, target, weight, previous)
        self._after_mutation()
        return previous

    def remove(self, vertex: Hashable) -> bool:
        validate_label(vertex)
        doomed = self._find(vertex)
        if doomed is None:
            return False

        # Clear both directions on every record, the doomed one included,
        # before dropping it.
        for other in self._vertices:
            self._unlink(other, doomed)
            self._unlink(doomed, other)
        self._vertices = [v for v in self._vertices if v is not doomed]

        logger.debug("removed vertex %r", vertex)
        self._after_mutation()
        return True

    def vertices(self) -> FrozenSet[Hashable]:
        return frozenset(vertex.label for vertex in self._vertices)

    def sources(self, target: Hashable) -> Mapping[Hashable, int]:
        validate_label(target, "target")
        vertex = self._find(target)
        if vertex is None:
            return MappingProxyType({})
        return MappingProxyType(dict(vertex.sources))

    def targets(self, source: Hashable) -> Mapping[Hashable, int]:
        validate_label(source, "source")
        vertex = self._find(source)
        if vertex is None:
            return MappingProxyType({})
        return MappingProxyType(dict(vertex.targets))

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        if not self._vertices:
            return "Empty graph (0 vertices, 0 edges)"

        n_edges = sum(len(vertex.targets) for vertex in self._vertices)
        lines = [f"Graph with {len(self._vertices)} vertices and {n_edges} edges:"]
        for vertex in sorted(self._vertices, key=lambda v: _label_key(v.label)):
            lines.append(str(vertex))
        return "\n".join(lines)
