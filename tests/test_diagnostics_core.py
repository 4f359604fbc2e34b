"""Tests for interface-level diagnostic functions."""

from types import MappingProxyType

import pytest

from labelgraph.diagnostics import (
    check_graph,
    degree_table,
    graph_snapshot,
    graphs_equal,
    is_consistent,
)
from labelgraph.graphs import EdgesGraph, VerticesGraph


class _LopsidedGraph(VerticesGraph):
    """Reports outgoing edges that its incoming side does not mirror."""

    def sources(self, target):
        return MappingProxyType({})


def test_check_graph_passes_on_valid_graph(empty_instance) -> None:
    """Test that a graph built through the interface is consistent."""
    G = empty_instance()
    G.set("a", "b", 1)
    G.set("b", "a", 2)
    G.set("c", "c", 3)

    check_graph(G)
    assert is_consistent(G)


def test_check_graph_detects_unmirrored_edge() -> None:
    """Test that check_graph flags sources/targets disagreement."""
    G = _LopsidedGraph()
    G.set("a", "b", 1)

    with pytest.raises(AssertionError, match="sources"):
        check_graph(G)
    assert not is_consistent(G)


def test_graph_snapshot_is_frozen(empty_instance) -> None:
    """Test snapshot contents and immutability."""
    G = empty_instance()
    G.set("a", "b", 1)
    G.add("c")

    vertices, edges = graph_snapshot(G)
    assert vertices == frozenset({"a", "b", "c"})
    assert edges == frozenset({("a", "b", 1)})

    G.set("a", "b", 5)
    assert edges == frozenset({("a", "b", 1)})


def test_graphs_equal_across_representations() -> None:
    """Test equality ignores the backing representation."""
    eg = EdgesGraph()
    vg = VerticesGraph()
    for g in (eg, vg):
        g.set("a", "b", 1)
        g.add("c")
    assert graphs_equal(eg, vg)

    vg.set("a", "b", 2)
    assert not graphs_equal(eg, vg)

    vg.set("a", "b", 1)
    vg.add("d")
    assert not graphs_equal(eg, vg)


def test_degree_table(empty_instance) -> None:
    """Test in/out degree counts."""
    G = empty_instance()
    G.set("a", "b", 1)
    G.set("a", "c", 1)
    G.set("c", "c", 1)
    G.add("d")

    assert degree_table(G) == {
        "a": (0, 2),
        "b": (1, 0),
        "c": (2, 1),
        "d": (0, 0),
    }
