"""
Graph algorithms: spanning trees, Eulerian tours and bipartite matching.

Each engine takes a pygraph and transforms it into the representation
the algorithm needs before running.
"""

from .bipartite import BipartiteCheck, BipartiteMatcher
from .euler import EulerCheck, EulerianTourFinder, is_bridge
from .spanning_tree import SpanningTreeBuilder, edge_order, total_weight

__all__ = [
    'BipartiteCheck',
    'BipartiteMatcher',
    'EulerCheck',
    'EulerianTourFinder',
    'SpanningTreeBuilder',
    'edge_order',
    'is_bridge',
    'total_weight',
]
