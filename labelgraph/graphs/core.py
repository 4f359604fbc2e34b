"""
Core graph interface.

Defines the abstract `Graph` contract shared by every representation, the
immutable `Edge` triple, and the argument validation all representations
apply before mutating anything.

A graph is a mutable set of hashable vertex labels plus directed edges
with strictly positive integer weights. At most one edge exists per
ordered (source, target) pair, and every edge endpoint is a vertex.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Hashable, Iterator, List, Mapping, Optional

from ..diagnostics.debug_mode import should_check_rep


def validate_label(label: Hashable, name: str = "vertex") -> None:
    """
    Reject labels that cannot be stored in a graph.

    Args:
        label: Candidate vertex label.
        name: Argument name used in the error message.

    Raises:
        ValueError: If label is None.
        TypeError: If label is not hashable.
    """
    if label is None:
        raise ValueError(f"{name} cannot be None")
    try:
        hash(label)
    except TypeError:
        raise TypeError(f"{name} must be hashable, got {type(label).__name__}") from None


def validate_weight(weight: int) -> int:
    """
    Validate an edge weight passed to `Graph.set` and normalise it to int.

    Integral numpy scalars are accepted. Zero is valid (it removes an edge).

    Raises:
        TypeError: If weight is a bool or not an integer.
        ValueError: If weight is negative.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise TypeError(f"weight must be an integer, got {type(weight).__name__}")
    weight = int(weight)
    if weight < 0:
        raise ValueError(f"weight cannot be negative: {weight}")
    return weight


def same_label(a: Hashable, b: Hashable) -> bool:
    """
    Compare two labels the way set and dict membership does.

    Identity is checked before equality, so a label that is not equal to
    itself (float('nan')) still matches itself.
    """
    return a is b or a == b


def _label_key(label: Hashable) -> str:
    return str(label)


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed weighted edge.

    Attributes:
        source: Label of the vertex the edge leaves.
        target: Label of the vertex the edge enters.
        weight: Strictly positive integer weight.
    """

    source: Hashable
    target: Hashable
    weight: int

    def __post_init__(self) -> None:
        if self.source is None or self.target is None:
            raise ValueError("source and target cannot be None")
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Integral):
            raise TypeError(f"weight must be an integer, got {type(self.weight).__name__}")
        if self.weight <= 0:
            raise ValueError(f"weight must be positive: {self.weight}")
        object.__setattr__(self, "weight", int(self.weight))

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class Graph(ABC):
    """
    Mutable directed graph with positive integer edge weights.

    Callers only rely on the operations below; the backing representation
    is an implementation detail. Query results never alias internal
    storage: `vertices` returns a frozenset snapshot, `sources` and
    `targets` return read-only mappings over fresh dicts.

    Complexity depends on the representation, see `EdgesGraph` and
    `VerticesGraph`.
    """

    def __init__(self, *, check_rep: Optional[bool] = None) -> None:
        """
        Args:
            check_rep: Force representation checks after every mutation on
                (True) or off (False) for this graph. None follows the
                global debug flag.
        """
        self._rep_checks = check_rep

    @staticmethod
    def empty() -> "Graph":
        """
        Return a new empty graph of the default representation.

        Returns:
            An empty VerticesGraph.
        """
        from .vertices import VerticesGraph

        return VerticesGraph()

    @abstractmethod
    def add(self, vertex: Hashable) -> bool:
        """
        Add a vertex with no edges.

        Args:
            vertex: Label of the vertex to add.

        Returns:
            True if the graph did not already contain the vertex, False
            otherwise (the graph is unchanged).

        Raises:
            ValueError: If vertex is None.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        """
        Add, change, or remove the edge from source to target.

        Missing endpoints are added first. A positive weight creates the
        edge or overwrites its weight; a zero weight removes the edge if
        present. Vertices are never removed by this call.

        Args:
            source: Label of the source vertex.
            target: Label of the target vertex.
            weight: Non-negative edge weight.

        Returns:
            The previous weight of the edge, or 0 if there was none.

        Raises:
            ValueError: If source or target is None, or weight is negative.
            TypeError: If weight is not an integer.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: Hashable) -> bool:
        """
        Remove a vertex and every edge into or out of it.

        Returns:
            True if the vertex was in the graph, False otherwise.

        Raises:
            ValueError: If vertex is None.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> FrozenSet[Hashable]:
        """Return a snapshot of the vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: Hashable) -> Mapping[Hashable, int]:
        """
        Return the incoming edges of a vertex.

        Args:
            target: Label of the vertex.

        Returns:
            Read-only mapping from each source label to its edge weight.
            Empty if target has no incoming edges or is not a vertex.

        Raises:
            ValueError: If target is None.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: Hashable) -> Mapping[Hashable, int]:
        """
        Return the outgoing edges of a vertex.

        Args:
            source: Label of the vertex.

        Returns:
            Read-only mapping from each target label to its edge weight.
            Empty if source has no outgoing edges or is not a vertex.

        Raises:
            ValueError: If source is None.
        """
        raise NotImplementedError

    @abstractmethod
    def _check_rep(self) -> None:
        """Raise AssertionError if the representation invariants are broken."""
        raise NotImplementedError

    def _after_mutation(self) -> None:
        if should_check_rep(self):
            self._check_rep()

    def edges(self) -> List[Edge]:
        """
        Return all edges sorted by (str(source), str(target)).

        Returns:
            List of Edge records.
        """
        result = [
            Edge(u, v, weight)
            for u in self.vertices()
            for v, weight in self.targets(u).items()
        ]
        return sorted(result, key=lambda e: (_label_key(e.source), _label_key(e.target)))

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, vertex: object) -> bool:
        if vertex is None:
            return False
        return vertex in self.vertices()

    def __iter__(self) -> Iterator[Hashable]:
        return iter(sorted(self.vertices(), key=_label_key))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self)}, edges={len(self.edges())})"

    def __str__(self) -> str:
        edges = self.edges()
        if not len(self):
            return "Empty graph (0 vertices, 0 edges)"

        lines = [
            f"Graph with {len(self)} vertices and {len(edges)} edges:",
            "Vertices: " + ", ".join(str(v) for v in self),
            "Edges:",
        ]
        lines.extend(f"  {edge}" for edge in edges)
        return "\n".join(lines)
