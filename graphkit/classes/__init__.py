"""
Core data classes for graph representation.

This module contains the value types, the disjoint-set forest and the
exceptions used throughout the graphkit library.
"""

from .disjoint_set import DisjointSet
from .edge import DEFAULT_KIND, Edge, GraphProperties, RepresentationKind
from .exceptions import EdgeNotFoundError, GraphError, GraphFormatError, VertexIndexError

__all__ = [
    'DEFAULT_KIND',
    'DisjointSet',
    'Edge',
    'EdgeNotFoundError',
    'GraphError',
    'GraphFormatError',
    'GraphProperties',
    'RepresentationKind',
    'VertexIndexError',
]
