"""Representation-check control for labelgraph.

Graphs re-check their representation invariants after every mutation when
checking is on for them. Checking is decided per graph: an explicit
per-instance setting wins, otherwise the global debug flag applies. The
global flag starts from the LABELGRAPH_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from ..graphs.core import Graph

_DEBUG_ENV_VAR = "LABELGRAPH_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """Return whether the global debug flag is set."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Set the global debug flag.

    Graphs with their own rep-check setting are not affected.

    Parameters
    ----------
    enabled:
        Whether graphs without their own setting check their
        representation after each mutation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily set the global debug flag, restoring it on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     g = VerticesGraph()
    ...     g.set("A", "B", 1)  # rep checked after the call
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def should_check_rep(graph: "Graph") -> bool:
    """
    Return whether a graph should check its representation after mutating.

    Parameters
    ----------
    graph:
        Graph about to finish a mutation.

    Returns
    -------
    bool
        The graph's own setting if it has one, otherwise the global flag.
    """
    override: Optional[bool] = getattr(graph, "_rep_checks", None)
    if override is None:
        return _debug_enabled
    return override


@contextmanager
def rep_checks(graph: "Graph", enabled: Optional[bool] = True) -> Iterator["Graph"]:
    """
    Temporarily override rep checking for one graph.

    Parameters
    ----------
    graph:
        Graph whose setting is overridden inside the block.
    enabled:
        True or False to force checking on or off, None to follow the
        global flag.

    Example
    -------
    >>> g = EdgesGraph(check_rep=False)
    >>> with rep_checks(g):
    ...     g.set("A", "B", 1)  # checked despite the instance setting
    """
    prev = getattr(graph, "_rep_checks", None)
    graph._rep_checks = enabled
    try:
        yield graph
    finally:
        graph._rep_checks = prev
