"""
Graph data types for labelgraph.

This package provides one mutable, directed, weighted graph interface with
two interchangeable representations:
- Graph: the abstract interface (add, set, remove, vertices, sources, targets)
- EdgesGraph: vertex set plus a flat edge list
- VerticesGraph: per-vertex records with incoming and outgoing weight maps

Callers should depend only on Graph; both representations behave
identically through it.
"""

from .core import Edge, Graph, validate_label, validate_weight
from .edges import EdgesGraph
from .utils import copy_graph, iter_edges, node_index_map, weight_matrix
from .vertices import VerticesGraph

__all__ = [
    "Graph",
    "Edge",
    "EdgesGraph",
    "VerticesGraph",
    "validate_label",
    "validate_weight",
    "node_index_map",
    "iter_edges",
    "weight_matrix",
    "copy_graph",
]

# Example usage:
# from labelgraph.graphs import Graph
#
# G = Graph.empty()
# G.set('A', 'B', 1)
# G.set('B', 'C', 2)
# G.targets('A')  # {'B': 1}
# G.remove('B')   # True; drops both edges
