"""Pytest configuration and shared fixtures for labelgraph tests.

This module provides:
- Deterministic numpy RNG fixtures for randomized operation sequences
- Debug mode switched on for every test, so every mutation re-checks
  the representation invariants
- The `empty_instance` factory that runs the graph conformance suite
  against every representation
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from labelgraph.diagnostics import debug_context
from labelgraph.graphs import EdgesGraph, Graph, VerticesGraph

REPRESENTATIONS = [EdgesGraph, VerticesGraph]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def rep_checks() -> Iterator[None]:
    """Auto-use fixture that enables representation checks for every test."""
    with debug_context(True):
        yield


@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def empty_instance(request) -> Callable[[], Graph]:
    """Factory for new empty graphs of the representation under test.

    Conformance tests must obtain graphs only through this fixture and must
    not refer to a concrete representation.
    """
    return request.param
