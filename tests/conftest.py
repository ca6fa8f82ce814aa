"""Shared fixtures for graphkit tests."""

import pytest

from graphkit import pygraph


@pytest.fixture
def triangle():
    """Weighted undirected triangle: (1,2,1), (2,3,2), (1,3,3)."""
    graph = pygraph('E', 3, directed=False, weighted=True)
    graph.add_edge(1, 2, 1)
    graph.add_edge(2, 3, 2)
    graph.add_edge(1, 3, 3)
    return graph


@pytest.fixture
def square():
    """Unweighted undirected 4-cycle 1-2-3-4-1."""
    graph = pygraph('L', 4)
    for a, b in [(1, 2), (2, 3), (3, 4), (4, 1)]:
        graph.add_edge(a, b)
    return graph


@pytest.fixture
def weighted_graph():
    """Connected weighted undirected graph with repeated weights."""
    graph = pygraph('C', 6, directed=False, weighted=True)
    edges = [
        (1, 2, 4), (1, 3, 4), (2, 3, 2), (3, 4, 3), (3, 6, 4),
        (3, 5, 2), (4, 6, 3), (5, 6, 3), (2, 4, 5), (1, 6, 7),
    ]
    for a, b, w in edges:
        graph.add_edge(a, b, w)
    return graph
