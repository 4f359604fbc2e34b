"""
Utility functions for graphs.

Provides deterministic node indexing, edge iteration, a dense weight
matrix view, and copying between representations. Everything here goes
through the public Graph interface.
"""

from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .core import Graph


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def iter_edges(graph: Graph) -> Iterator[Tuple[Hashable, Hashable, int]]:
    """
    Yield (source, target, weight) edges in deterministic order.

    Edges are sorted by (str(source), str(target)).

    Args:
        graph: Any Graph implementation.
    """
    for u in sorted(graph.vertices(), key=lambda x: str(x)):
        targets = graph.targets(u)
        for v in sorted(targets, key=lambda x: str(x)):
            yield u, v, targets[v]


def weight_matrix(graph: Graph, nodes: Optional[List[Hashable]] = None) -> np.ndarray:
    """
    Build the dense weight matrix of a graph.

    W[i, j] is the weight of edge i -> j, or 0 if there is no such edge.

    Args:
        graph: Any Graph implementation.
        nodes: Optional list of nodes to include (defaults to all vertices).
            Edges to or from nodes outside the list are ignored; nodes
            that are not vertices get an all-zero row and column.

    Returns:
        (n, n) int64 numpy array in node_index_map order.

    Example:
        >>> G = VerticesGraph()
        >>> G.set('A', 'B', 3)
        0
        >>> weight_matrix(G)
        array([[0, 3],
               [0, 0]])
    """
    if nodes is None:
        nodes = list(graph.vertices())

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)

    W = np.zeros((n, n), dtype=np.int64)
    for u in idx_to_node:
        i = node_to_idx[u]
        for v, weight in graph.targets(u).items():
            j = node_to_idx.get(v)
            if j is not None:
                W[i, j] = weight

    return W


def copy_graph(graph: Graph, factory: Optional[Callable[[], Graph]] = None) -> Graph:
    """
    Copy a graph, optionally into another representation.

    Args:
        graph: Graph to copy.
        factory: Zero-argument callable returning an empty Graph. Defaults
            to the class of ``graph``.

    Returns:
        A new graph with the same vertices and edges, sharing no storage
        with ``graph``.
    """
    if factory is None:
        factory = type(graph)

    result = factory()
    for vertex in graph.vertices():
        result.add(vertex)
    for u, v, weight in iter_edges(graph):
        result.set(u, v, weight)
    return result
