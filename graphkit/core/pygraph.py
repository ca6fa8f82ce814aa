"""
Main facade class for graph processing.

This module provides the pygraph class, which owns exactly one active
representation and delegates algorithms to specialized modules.
"""

import logging
import os
from typing import FrozenSet, Iterator, List, Optional, Tuple, Union

from ..analysis.bipartite import BipartiteCheck, BipartiteMatcher
from ..analysis.euler import EulerCheck, EulerianTourFinder
from ..analysis.spanning_tree import SpanningTreeBuilder
from ..classes.edge import DEFAULT_KIND, Edge, GraphProperties, RepresentationKind
from ..formats.text_format import format_graph, read_graph, write_graph
from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .edge_list import EdgeListGraph
from .representation import GraphRepresentation

logger = logging.getLogger(__name__)

_REPRESENTATION_CLASSES = {
    RepresentationKind.MATRIX: AdjacencyMatrixGraph,
    RepresentationKind.LIST: AdjacencyListGraph,
    RepresentationKind.EDGE_LIST: EdgeListGraph,
}


def _as_kind(kind: Union[str, RepresentationKind]) -> RepresentationKind:
    if isinstance(kind, RepresentationKind):
        return kind
    return RepresentationKind.from_marker(kind)


class pygraph:
    """
    Graph facade owning one representation at a time.

    Edits and queries go to the active representation. Transforms replace
    it with an equivalent representation of another kind; the previous one
    is dropped. Algorithms transform the graph into whatever
    representation they need before running.
    """

    def __init__(self, kind: Union[str, RepresentationKind] = DEFAULT_KIND,
                 vertex_count: int = 0, directed: bool = False, weighted: bool = False):
        """
        Create an empty graph.

        Args:
            kind: Representation kind or its marker ('C', 'L' or 'E')
            vertex_count: Number of vertices, ids run from 1 to vertex_count
            directed: Whether edges are directed
            weighted: Whether edges carry weights
        """
        representation_class = _REPRESENTATION_CLASSES[_as_kind(kind)]
        self._representation: GraphRepresentation = representation_class(vertex_count, directed, weighted)

    @classmethod
    def from_representation(cls, representation: GraphRepresentation) -> "pygraph":
        """Wrap an existing representation; the facade takes ownership of it."""
        graph = cls.__new__(cls)
        graph._representation = representation
        return graph

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "pygraph":
        """Load a graph from a file in the text format."""
        return cls.from_representation(read_graph(path))

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    @property
    def representation(self) -> GraphRepresentation:
        """The active representation."""
        return self._representation

    @property
    def kind(self) -> RepresentationKind:
        return self._representation.kind

    def get_properties(self) -> GraphProperties:
        """Get (vertex_count, directed, weighted)."""
        return self._representation.get_properties()

    def get_size(self) -> int:
        """Get the number of vertices."""
        return self._representation.get_size()

    def edge_count(self) -> int:
        return self._representation.edge_count()

    def edges(self) -> Iterator[Edge]:
        """Enumerate every logical edge exactly once."""
        return self._representation.edges()

    def edge_set(self) -> FrozenSet[Edge]:
        """Get the edge set, independent of the representation kind."""
        return frozenset(self._representation.edges())

    def add_edge(self, from_id: int, to_id: int, weight: int = 1) -> None:
        """Insert an edge, or overwrite its weight if it exists."""
        self._representation.add_edge(from_id, to_id, weight)

    def remove_edge(self, from_id: int, to_id: int) -> None:
        """Delete an edge; raises EdgeNotFoundError if it does not exist."""
        self._representation.remove_edge(from_id, to_id)

    def change_edge(self, from_id: int, to_id: int, weight: int) -> int:
        """Replace the weight of an existing edge and return the old one."""
        return self._representation.change_edge(from_id, to_id, weight)

    def get_edge(self, from_id: int, to_id: int) -> Optional[int]:
        """Get the weight of an edge, or None if it does not exist."""
        return self._representation.get_edge(from_id, to_id)

    def has_edge(self, from_id: int, to_id: int) -> bool:
        return self._representation.has_edge(from_id, to_id)

    def copy(self) -> "pygraph":
        """Get an independent copy of this graph."""
        return pygraph.from_representation(self._representation.copy())

    # ========================================================================
    # TRANSFORMS
    # ========================================================================

    def transform_to(self, kind: Union[str, RepresentationKind]) -> None:
        """Switch the active representation to the given kind."""
        self._representation = self._representation.transform_to(_as_kind(kind))

    def transform_to_matrix(self) -> None:
        self.transform_to(RepresentationKind.MATRIX)

    def transform_to_list(self) -> None:
        self.transform_to(RepresentationKind.LIST)

    def transform_to_edge_list(self) -> None:
        self.transform_to(RepresentationKind.EDGE_LIST)

    # ========================================================================
    # PERSISTENCE
    # ========================================================================

    def read_graph(self, path: Union[str, os.PathLike]) -> None:
        """Replace this graph with the one stored in a file."""
        self._representation = read_graph(path)

    def write_graph(self, path: Union[str, os.PathLike]) -> None:
        """Save this graph to a file in its current representation."""
        write_graph(self._representation, path)

    def to_text(self) -> str:
        return format_graph(self._representation)

    # ========================================================================
    # SPANNING TREES
    # ========================================================================

    def get_spanning_tree_kruskal(self) -> "pygraph":
        """Minimum spanning tree (forest) using Kruskal's algorithm."""
        return SpanningTreeBuilder(self).kruskal()

    def get_spanning_tree_prim(self) -> "pygraph":
        """Minimum spanning tree (forest) using Prim's algorithm."""
        return SpanningTreeBuilder(self).prim()

    def get_spanning_tree_boruvka(self) -> "pygraph":
        """Minimum spanning tree (forest) using Boruvka's algorithm."""
        return SpanningTreeBuilder(self).boruvka()

    # ========================================================================
    # EULERIAN TOURS
    # ========================================================================

    def check_euler(self) -> EulerCheck:
        """Check whether an Euler trail or circuit exists; returns an EulerCheck."""
        return EulerianTourFinder(self).check_euler()

    def is_bridge(self, a: int, b: int) -> bool:
        """Check whether removing edge (a, b) disconnects a from b."""
        return EulerianTourFinder(self).is_bridge(a, b)

    def get_eulerian_tour_fleury(self) -> List[int]:
        """Euler tour by Fleury's algorithm; empty if none exists."""
        return EulerianTourFinder(self).tour_fleury()

    def get_eulerian_tour_hierholzer(self) -> List[int]:
        """Euler tour by Hierholzer's algorithm; empty if none exists."""
        return EulerianTourFinder(self).tour_hierholzer()

    # ========================================================================
    # BIPARTITE MATCHING
    # ========================================================================

    def check_bipartite(self) -> BipartiteCheck:
        """Two-color the graph; returns a BipartiteCheck."""
        return BipartiteMatcher(self).check_bipartite()

    def get_maximum_matching(self) -> List[Tuple[int, int]]:
        """Maximum bipartite matching; empty if the graph is not bipartite."""
        return BipartiteMatcher(self).maximum_matching()

    def __repr__(self):
        return f"pygraph({self._representation!r})"
