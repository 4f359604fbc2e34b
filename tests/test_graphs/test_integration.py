"""Integration tests for the graphs package within labelgraph."""

import pytest


def test_graphs_import_from_main():
    """Test that graph types can be imported from the main package."""
    from labelgraph import EdgesGraph, Graph, VerticesGraph

    assert issubclass(EdgesGraph, Graph)
    assert issubclass(VerticesGraph, Graph)


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import labelgraph

    graph_exports = {
        "Graph", "Edge", "EdgesGraph", "VerticesGraph",
        "node_index_map", "iter_edges", "weight_matrix", "copy_graph",
    }
    assert graph_exports.issubset(set(labelgraph.__all__)), "Graph exports missing from __all__"


def test_graph_interface_is_abstract():
    """Test that the interface itself cannot be instantiated."""
    from labelgraph import Graph

    with pytest.raises(TypeError):
        Graph()


def test_callers_only_see_interface():
    """Test a caller written against Graph works with every representation."""
    from labelgraph import EdgesGraph, Graph, VerticesGraph, graphs_equal

    def build(graph: Graph) -> Graph:
        graph.set("start", "A", 1)
        graph.set("A", "B", 2)
        graph.set("B", "goal", 3)
        graph.set("start", "goal", 10)
        graph.set("start", "goal", 0)
        return graph

    results = [build(factory()) for factory in (EdgesGraph, VerticesGraph, Graph.empty)]
    for g in results:
        assert g.targets("start") == {"A": 1}
        assert g.sources("goal") == {"B": 3}
    assert graphs_equal(results[0], results[1])
    assert graphs_equal(results[1], results[2])


def test_debug_logging_of_mutations():
    """Test that mutations are logged at DEBUG level."""
    import logging
    from io import StringIO

    from labelgraph import VerticesGraph
    from labelgraph.logging import configure_logging, get_logger

    get_logger("labelgraph.graphs.vertices")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        G = VerticesGraph()
        G.set("A", "B", 4)
        G.remove("A")
    finally:
        configure_logging(level=logging.WARNING)

    output = stream.getvalue()
    assert "added vertex 'A'" in output
    assert "set edge 'A' -> 'B': 4 (was 0)" in output
    assert "removed vertex 'A'" in output


def test_vertex_record_is_internal():
    """Test that the adjacency record is not part of the public surface."""
    import labelgraph
    import labelgraph.graphs

    assert "Vertex" not in labelgraph.__all__
    assert "Vertex" not in labelgraph.graphs.__all__
    assert not hasattr(labelgraph, "Vertex")
