"""labelgraph - a mutable directed weighted graph with interchangeable representations."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    check_graph,
    debug_context,
    degree_table,
    graph_snapshot,
    graphs_equal,
    is_consistent,
    is_debug_enabled,
    rep_checks,
    set_debug_enabled,
    should_check_rep,
)

# Graphs
from .graphs import (
    Edge,
    EdgesGraph,
    Graph,
    VerticesGraph,
    copy_graph,
    iter_edges,
    node_index_map,
    weight_matrix,
)

__all__ = [
    "__version__",
    # Graphs
    "Graph",
    "Edge",
    "EdgesGraph",
    "VerticesGraph",
    "node_index_map",
    "iter_edges",
    "weight_matrix",
    "copy_graph",
    # Diagnostics
    "check_graph",
    "is_consistent",
    "graph_snapshot",
    "graphs_equal",
    "degree_table",
    "is_debug_enabled",
    "set_debug_enabled",
    "should_check_rep",
    "rep_checks",
    "debug_context",
]
