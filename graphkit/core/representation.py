"""
Representation contract shared by the adjacency matrix, adjacency list
and edge list graphs.

Every representation stores the same logical edge set and can build an
equivalent instance of any other kind. Transforming to the kind a
representation already has returns the very same instance.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..classes.edge import Edge, GraphProperties, RepresentationKind
from ..classes.exceptions import EdgeNotFoundError, VertexIndexError

logger = logging.getLogger(__name__)


class GraphRepresentation(ABC):
    """
    Abstract base for the three storage layouts.

    Subclasses set ``kind`` and implement the edge primitives and the
    native edge enumeration; transforms are shared and built on top of
    ``edges()`` and ``add_edge()``.
    """

    kind: RepresentationKind

    def __init__(self, vertex_count: int = 0, directed: bool = False, weighted: bool = False):
        """
        Initialize an empty representation.

        Args:
            vertex_count: Number of vertices, ids run from 1 to vertex_count
            directed: Whether edges are directed
            weighted: Whether edges carry weights; unweighted edges weigh 1
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._vertex_count = vertex_count
        self._directed = bool(directed)
        self._weighted = bool(weighted)

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    def get_properties(self) -> GraphProperties:
        """Get (vertex_count, directed, weighted)."""
        return GraphProperties(self._vertex_count, self._directed, self._weighted)

    def get_size(self) -> int:
        """Get the number of vertices."""
        return self._vertex_count

    # ========================================================================
    # EDGE PRIMITIVES
    # ========================================================================

    @abstractmethod
    def add_edge(self, from_id: int, to_id: int, weight: int = 1) -> None:
        """Insert an edge, overwriting the weight if it already exists."""

    @abstractmethod
    def remove_edge(self, from_id: int, to_id: int) -> None:
        """Delete an edge; raises EdgeNotFoundError if it does not exist."""

    @abstractmethod
    def get_edge(self, from_id: int, to_id: int) -> Optional[int]:
        """Get the weight of an edge, or None if it does not exist."""

    @abstractmethod
    def edges(self) -> Iterator[Edge]:
        """Enumerate every logical edge exactly once."""

    @abstractmethod
    def degree(self, vertex_id: int) -> int:
        """Number of edges incident to (leaving, if directed) a vertex."""

    def change_edge(self, from_id: int, to_id: int, weight: int) -> int:
        """
        Replace the weight of an existing edge.

        Args:
            from_id: Source vertex id
            to_id: Target vertex id
            weight: New weight

        Returns:
            The previous weight

        Raises:
            EdgeNotFoundError: If the edge does not exist
        """
        old_weight = self.get_edge(from_id, to_id)
        if old_weight is None:
            raise EdgeNotFoundError(from_id, to_id)
        self.add_edge(from_id, to_id, weight)
        return old_weight

    def has_edge(self, from_id: int, to_id: int) -> bool:
        return self.get_edge(from_id, to_id) is not None

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    # ========================================================================
    # TRANSFORMS
    # ========================================================================

    def transform_to(self, kind: RepresentationKind) -> "GraphRepresentation":
        """
        Get a representation of the requested kind holding the same edges.

        Args:
            kind: Target representation kind

        Returns:
            self if the kind already matches, otherwise a new instance
        """
        if kind is self.kind:
            return self

        # Imported here: the concrete classes import this module
        from .adjacency_list import AdjacencyListGraph
        from .adjacency_matrix import AdjacencyMatrixGraph
        from .edge_list import EdgeListGraph

        target_classes = {
            RepresentationKind.MATRIX: AdjacencyMatrixGraph,
            RepresentationKind.LIST: AdjacencyListGraph,
            RepresentationKind.EDGE_LIST: EdgeListGraph,
        }
        target = target_classes[kind](self._vertex_count, self._directed, self._weighted)
        for edge in self.edges():
            target.add_edge(*edge)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Transformed {self.kind.name} -> {kind.name} "
                         f"({self._vertex_count} vertices, {target.edge_count()} edges)")
        return target

    def transform_to_matrix(self) -> "GraphRepresentation":
        return self.transform_to(RepresentationKind.MATRIX)

    def transform_to_list(self) -> "GraphRepresentation":
        return self.transform_to(RepresentationKind.LIST)

    def transform_to_edge_list(self) -> "GraphRepresentation":
        return self.transform_to(RepresentationKind.EDGE_LIST)

    def copy(self) -> "GraphRepresentation":
        """Get an independent deep copy of this representation."""
        return copy.deepcopy(self)

    # ========================================================================
    # HELPERS
    # ========================================================================

    def _check_vertex(self, vertex_id: int) -> None:
        if not 1 <= vertex_id <= self._vertex_count:
            raise VertexIndexError(vertex_id, self._vertex_count)

    def _check_endpoints(self, from_id: int, to_id: int) -> None:
        self._check_vertex(from_id)
        self._check_vertex(to_id)

    def _normalize_weight(self, weight: int) -> int:
        return int(weight) if self._weighted else 1

    def __repr__(self):
        return (f"{type(self).__name__}(vertex_count={self._vertex_count}, "
                f"directed={self._directed}, weighted={self._weighted}, "
                f"edges={self.edge_count()})")
