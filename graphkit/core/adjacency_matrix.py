"""
Adjacency matrix representation.

O(1) edge lookup at O(n^2) space. Enumerating edges scans the full grid.
"""

import logging
from typing import Iterator, Optional

import numpy as np

from ..classes.edge import Edge, RepresentationKind
from ..classes.exceptions import EdgeNotFoundError
from .representation import GraphRepresentation

logger = logging.getLogger(__name__)


class AdjacencyMatrixGraph(GraphRepresentation):
    """
    Graph stored as an n x n weight matrix.

    ``matrix[i, j]`` holds the weight of edge (i + 1, j + 1) and
    ``present[i, j]`` records whether that edge exists, so a stored weight
    of 0 is never confused with a missing edge. Undirected edges occupy
    both symmetric cells.
    """

    kind = RepresentationKind.MATRIX

    def __init__(self, vertex_count: int = 0, directed: bool = False, weighted: bool = False):
        super().__init__(vertex_count, directed, weighted)
        self.matrix = np.zeros((vertex_count, vertex_count), dtype=np.int64)
        self.present = np.zeros((vertex_count, vertex_count), dtype=bool)

    def add_edge(self, from_id: int, to_id: int, weight: int = 1) -> None:
        self._check_endpoints(from_id, to_id)
        weight = self._normalize_weight(weight)
        i, j = from_id - 1, to_id - 1
        self.matrix[i, j] = weight
        self.present[i, j] = True
        if not self._directed:
            self.matrix[j, i] = weight
            self.present[j, i] = True

    def remove_edge(self, from_id: int, to_id: int) -> None:
        self._check_endpoints(from_id, to_id)
        i, j = from_id - 1, to_id - 1
        if not self.present[i, j]:
            raise EdgeNotFoundError(from_id, to_id)
        self.matrix[i, j] = 0
        self.present[i, j] = False
        if not self._directed:
            self.matrix[j, i] = 0
            self.present[j, i] = False

    def get_edge(self, from_id: int, to_id: int) -> Optional[int]:
        self._check_endpoints(from_id, to_id)
        i, j = from_id - 1, to_id - 1
        if not self.present[i, j]:
            return None
        return int(self.matrix[i, j])

    def edges(self) -> Iterator[Edge]:
        mask = self.present if self._directed else np.triu(self.present)
        # argwhere yields indices in row-major order
        for i, j in np.argwhere(mask):
            yield Edge(int(i) + 1, int(j) + 1, int(self.matrix[i, j]))

    def degree(self, vertex_id: int) -> int:
        self._check_vertex(vertex_id)
        return int(np.count_nonzero(self.present[vertex_id - 1]))

    def edge_count(self) -> int:
        if self._directed:
            return int(np.count_nonzero(self.present))
        return int(np.count_nonzero(np.triu(self.present)))
