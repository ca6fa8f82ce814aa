"""
Adjacency list representation.

Each vertex owns a map from neighbor id to weight; O(n + m) space.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..classes.edge import Edge, RepresentationKind
from ..classes.exceptions import EdgeNotFoundError
from .representation import GraphRepresentation

logger = logging.getLogger(__name__)


class AdjacencyListGraph(GraphRepresentation):
    """
    Graph stored as one ``{neighbor_id: weight}`` dict per vertex.

    ``adjacency[v - 1]`` holds the edges leaving vertex v. Undirected
    edges are recorded in the dicts of both endpoints.
    """

    kind = RepresentationKind.LIST

    def __init__(self, vertex_count: int = 0, directed: bool = False, weighted: bool = False):
        super().__init__(vertex_count, directed, weighted)
        self.adjacency: List[Dict[int, int]] = [{} for _ in range(vertex_count)]

    def add_edge(self, from_id: int, to_id: int, weight: int = 1) -> None:
        self._check_endpoints(from_id, to_id)
        weight = self._normalize_weight(weight)
        self.adjacency[from_id - 1][to_id] = weight
        if not self._directed:
            self.adjacency[to_id - 1][from_id] = weight

    def remove_edge(self, from_id: int, to_id: int) -> None:
        self._check_endpoints(from_id, to_id)
        if to_id not in self.adjacency[from_id - 1]:
            raise EdgeNotFoundError(from_id, to_id)
        del self.adjacency[from_id - 1][to_id]
        if not self._directed:
            self.adjacency[to_id - 1].pop(from_id, None)

    def get_edge(self, from_id: int, to_id: int) -> Optional[int]:
        self._check_endpoints(from_id, to_id)
        return self.adjacency[from_id - 1].get(to_id)

    def neighbors(self, vertex_id: int) -> List[Tuple[int, int]]:
        """
        Get the edges leaving a vertex.

        Args:
            vertex_id: Vertex to inspect

        Returns:
            List of (neighbor_id, weight) pairs in ascending neighbor order
        """
        self._check_vertex(vertex_id)
        return sorted(self.adjacency[vertex_id - 1].items())

    def edges(self) -> Iterator[Edge]:
        for from_id in range(1, self._vertex_count + 1):
            for to_id, weight in self.neighbors(from_id):
                # The mirrored half of an undirected edge was already yielded
                if not self._directed and to_id < from_id:
                    continue
                yield Edge(from_id, to_id, weight)

    def degree(self, vertex_id: int) -> int:
        self._check_vertex(vertex_id)
        return len(self.adjacency[vertex_id - 1])
