"""Interface-level consistency checks for graphs.

These helpers only use the public `Graph` operations, so they apply to any
representation and complement the representation-specific `_check_rep`
methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, FrozenSet, Hashable, Tuple

if TYPE_CHECKING:
    from ..graphs.core import Graph

Snapshot = Tuple[FrozenSet[Hashable], FrozenSet[Tuple[Hashable, Hashable, int]]]


def check_graph(graph: "Graph") -> None:
    """
    Assert that a graph's observable state is self-consistent.

    Checks that every edge reported by ``targets`` is mirrored by
    ``sources`` with the same weight (and vice versa), that every edge
    endpoint is a vertex, and that every weight is a positive integer.

    Parameters
    ----------
    graph:
        Any Graph implementation.

    Raises
    ------
    AssertionError
        If any of the checks fail.
    """
    vertices = graph.vertices()

    for u in vertices:
        for v, weight in graph.targets(u).items():
            if v not in vertices:
                raise AssertionError(f"edge target {v!r} of {u!r} is not a vertex")
            if not isinstance(weight, int) or weight <= 0:
                raise AssertionError(f"edge {u!r} -> {v!r} has invalid weight {weight!r}")
            mirrored = graph.sources(v).get(u)
            if mirrored != weight:
                raise AssertionError(
                    f"edge {u!r} -> {v!r} has weight {weight} in targets "
                    f"but {mirrored!r} in sources"
                )

        for v, weight in graph.sources(u).items():
            if v not in vertices:
                raise AssertionError(f"edge source {v!r} of {u!r} is not a vertex")
            if graph.targets(v).get(u) != weight:
                raise AssertionError(
                    f"edge {v!r} -> {u!r} appears in sources but not in targets"
                )


def is_consistent(graph: "Graph") -> bool:
    """Return True if check_graph passes for the graph."""
    try:
        check_graph(graph)
    except AssertionError:
        return False
    return True


def graph_snapshot(graph: "Graph") -> Snapshot:
    """
    Capture the observable state of a graph as immutable values.

    Returns
    -------
    tuple
        ``(vertices, edges)`` where ``edges`` is a frozenset of
        ``(source, target, weight)`` triples.
    """
    vertices = frozenset(graph.vertices())
    edges = frozenset(
        (u, v, weight)
        for u in vertices
        for v, weight in graph.targets(u).items()
    )
    return vertices, edges


def graphs_equal(a: "Graph", b: "Graph") -> bool:
    """
    Return True if two graphs have the same vertices and weighted edges.

    The representations backing ``a`` and ``b`` may differ.
    """
    return graph_snapshot(a) == graph_snapshot(b)


def degree_table(graph: "Graph") -> Dict[Hashable, Tuple[int, int]]:
    """Map each vertex to its ``(in_degree, out_degree)`` pair."""
    return {
        u: (len(graph.sources(u)), len(graph.targets(u)))
        for u in graph.vertices()
    }
