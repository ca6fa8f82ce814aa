"""
Edge list representation.

O(m) space. Lookup and insert go through a position index; removal
reindexes the tail so storage order is kept. Suited to edge-oriented
algorithms such as Kruskal and Boruvka.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..classes.edge import Edge, RepresentationKind
from ..classes.exceptions import EdgeNotFoundError
from .representation import GraphRepresentation

logger = logging.getLogger(__name__)


class EdgeListGraph(GraphRepresentation):
    """
    Graph stored as a flat list of edges.

    Undirected edges are canonicalized to ``from_id <= to_id`` so that each
    logical edge is stored, and counted, exactly once.
    """

    kind = RepresentationKind.EDGE_LIST

    def __init__(self, vertex_count: int = 0, directed: bool = False, weighted: bool = False):
        super().__init__(vertex_count, directed, weighted)
        self.edge_list: List[Edge] = []
        # (from_id, to_id) -> position in edge_list
        self._positions: Dict[Tuple[int, int], int] = {}

    def _canonical(self, from_id: int, to_id: int) -> Tuple[int, int]:
        if not self._directed and from_id > to_id:
            return to_id, from_id
        return from_id, to_id

    def _index_of(self, from_id: int, to_id: int) -> Optional[int]:
        return self._positions.get((from_id, to_id))

    def add_edge(self, from_id: int, to_id: int, weight: int = 1) -> None:
        self._check_endpoints(from_id, to_id)
        from_id, to_id = self._canonical(from_id, to_id)
        edge = Edge(from_id, to_id, self._normalize_weight(weight))
        index = self._index_of(from_id, to_id)
        if index is None:
            self._positions[(from_id, to_id)] = len(self.edge_list)
            self.edge_list.append(edge)
        else:
            self.edge_list[index] = edge

    def remove_edge(self, from_id: int, to_id: int) -> None:
        self._check_endpoints(from_id, to_id)
        from_id, to_id = self._canonical(from_id, to_id)
        index = self._index_of(from_id, to_id)
        if index is None:
            raise EdgeNotFoundError(from_id, to_id)
        del self.edge_list[index]
        del self._positions[(from_id, to_id)]
        for position in range(index, len(self.edge_list)):
            edge = self.edge_list[position]
            self._positions[(edge.from_id, edge.to_id)] = position

    def get_edge(self, from_id: int, to_id: int) -> Optional[int]:
        self._check_endpoints(from_id, to_id)
        index = self._index_of(*self._canonical(from_id, to_id))
        if index is None:
            return None
        return self.edge_list[index].weight

    def edges(self) -> Iterator[Edge]:
        return iter(list(self.edge_list))

    def edge_count(self) -> int:
        return len(self.edge_list)

    def degree(self, vertex_id: int) -> int:
        self._check_vertex(vertex_id)
        count = 0
        for edge in self.edge_list:
            if edge.from_id == vertex_id:
                count += 1
            elif not self._directed and edge.to_id == vertex_id:
                count += 1
        return count
