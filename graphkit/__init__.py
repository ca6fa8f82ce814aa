"""
graphkit - Graph Representation and Algorithms Library

A Python library that stores a graph as an adjacency matrix, an adjacency
list or an edge list, converts freely between them, and runs classical
algorithms on whichever representation suits them best.

Main Classes:
    pygraph: Graph facade owning one active representation
    AdjacencyMatrixGraph: n x n weight matrix representation
    AdjacencyListGraph: per-vertex neighbor map representation
    EdgeListGraph: flat edge list representation
    DisjointSet: union-find with path compression and union by rank

Example:
    >>> from graphkit import pygraph
    >>> graph = pygraph('E', 3, directed=False, weighted=True)
    >>> graph.add_edge(1, 2, 1)
    >>> graph.add_edge(2, 3, 2)
    >>> graph.add_edge(1, 3, 3)
    >>> sorted(graph.get_spanning_tree_kruskal().edge_set())
    [Edge(from_id=1, to_id=2, weight=1), Edge(from_id=2, to_id=3, weight=2)]
"""

__version__ = "0.1.0"

from graphkit.classes import (
    DisjointSet,
    Edge,
    EdgeNotFoundError,
    GraphError,
    GraphFormatError,
    GraphProperties,
    RepresentationKind,
    VertexIndexError,
)
from graphkit.core.pygraph import pygraph
from graphkit.core import AdjacencyListGraph, AdjacencyMatrixGraph, EdgeListGraph, GraphRepresentation
from graphkit.analysis import BipartiteCheck, EulerCheck, total_weight
from graphkit.formats import format_graph, parse_graph, read_graph, write_graph

__all__ = [
    'pygraph',
    'AdjacencyListGraph',
    'AdjacencyMatrixGraph',
    'EdgeListGraph',
    'GraphRepresentation',
    'DisjointSet',
    'Edge',
    'GraphProperties',
    'RepresentationKind',
    'EulerCheck',
    'BipartiteCheck',
    'total_weight',
    'GraphError',
    'VertexIndexError',
    'EdgeNotFoundError',
    'GraphFormatError',
    'format_graph',
    'parse_graph',
    'read_graph',
    'write_graph',
]
