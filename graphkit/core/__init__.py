"""
Graph representations.

This module contains the representation contract and its three
interchangeable implementations. The pygraph facade lives in
graphkit.core.pygraph.
"""

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .edge_list import EdgeListGraph
from .representation import GraphRepresentation

__all__ = [
    'AdjacencyListGraph',
    'AdjacencyMatrixGraph',
    'EdgeListGraph',
    'GraphRepresentation',
]
