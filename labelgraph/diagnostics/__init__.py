"""Diagnostics and debugging utilities for labelgraph."""

from .core import (
    check_graph,
    degree_table,
    graph_snapshot,
    graphs_equal,
    is_consistent,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    rep_checks,
    set_debug_enabled,
    should_check_rep,
)

__all__ = [
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
