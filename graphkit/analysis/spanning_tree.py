"""
Minimum spanning tree construction.

Each algorithm first moves the graph into the representation it works on
best (edge list for Kruskal and Boruvka, adjacency list for Prim) and
returns a new undirected edge-list graph holding the tree edges. A
disconnected input yields a spanning forest.
"""

import heapq
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..classes.disjoint_set import DisjointSet
from ..classes.edge import Edge, RepresentationKind

if TYPE_CHECKING:
    from ..core.pygraph import pygraph

logger = logging.getLogger(__name__)


def edge_order(edge: Edge) -> Tuple[int, int, int]:
    """Total order on edges: weight, then from_id, then to_id."""
    return edge.weight, edge.from_id, edge.to_id


def total_weight(graph: "pygraph") -> int:
    """Sum of all edge weights in a graph."""
    return sum(edge.weight for edge in graph.edges())


class SpanningTreeBuilder:
    """
    Minimum spanning tree algorithms.

    This class provides:
    - Kruskal (sorted edges + union-find)
    - Prim (priority queue over adjacency lists)
    - Boruvka (cheapest outgoing edge per component, in phases)
    """

    def __init__(self, graph: "pygraph"):
        """
        Initialize the spanning tree builder.

        Args:
            graph: pygraph instance to analyze; its representation is
                transformed in place as each algorithm requires
        """
        self.graph = graph

    def _new_tree(self) -> "pygraph":
        from ..core.pygraph import pygraph

        vertex_count, _, weighted = self.graph.get_properties()
        return pygraph(RepresentationKind.EDGE_LIST, vertex_count, False, weighted)

    def kruskal(self) -> "pygraph":
        """
        Build a minimum spanning tree with Kruskal's algorithm.

        Returns:
            New edge-list pygraph with the tree edges
        """
        self.graph.transform_to_edge_list()
        vertex_count = self.graph.get_size()
        edges = sorted(self.graph.representation.edge_list, key=edge_order)

        dsu = DisjointSet(vertex_count)
        result = self._new_tree()
        for edge in edges:
            if dsu.union(edge.from_id, edge.to_id):
                result.add_edge(*edge)

        logger.debug(f"Kruskal selected {result.edge_count()} of {len(edges)} edges")
        return result

    def prim(self) -> "pygraph":
        """
        Build a minimum spanning tree with Prim's algorithm.

        Every vertex is seeded into the queue up front. A vertex whose key
        is still undefined sorts after every defined key, so it is only
        extracted once its own component is exhausted and then starts a
        new tree.

        Returns:
            New edge-list pygraph with the tree (or forest) edges
        """
        self.graph.transform_to_list()
        representation = self.graph.representation
        vertex_count = self.graph.get_size()
        result = self._new_tree()
        if vertex_count == 0:
            return result

        key: Dict[int, Optional[int]] = {v: None for v in range(1, vertex_count + 1)}
        parent: Dict[int, Optional[int]] = {v: None for v in range(1, vertex_count + 1)}
        finalized = set()

        key[1] = 0
        # Entries are (key undefined, key, vertex)
        queue: List[Tuple[bool, int, int]] = [(key[v] is None, key[v] or 0, v) for v in key]
        heapq.heapify(queue)

        while queue:
            _, _, vertex_id = heapq.heappop(queue)
            if vertex_id in finalized:
                continue
            finalized.add(vertex_id)

            if parent[vertex_id] is not None:
                result.add_edge(parent[vertex_id], vertex_id, key[vertex_id])

            for neighbor_id, weight in representation.neighbors(vertex_id):
                if neighbor_id in finalized:
                    continue
                if key[neighbor_id] is None or weight < key[neighbor_id]:
                    key[neighbor_id] = weight
                    parent[neighbor_id] = vertex_id
                    heapq.heappush(queue, (False, weight, neighbor_id))

        logger.debug(f"Prim selected {result.edge_count()} edges")
        return result

    def boruvka(self) -> "pygraph":
        """
        Build a minimum spanning tree with Boruvka's algorithm.

        Each phase scans all edges once and records, per component, the
        cheapest edge leaving it. All recorded edges are then added,
        skipping any whose endpoints were already joined earlier in the
        same phase. Phases stop when one component remains or when no
        edge crosses between components.

        Returns:
            New edge-list pygraph with the tree (or forest) edges
        """
        self.graph.transform_to_edge_list()
        vertex_count = self.graph.get_size()
        edges = list(self.graph.representation.edge_list)

        dsu = DisjointSet(vertex_count)
        result = self._new_tree()
        components = vertex_count
        phases = 0

        while components > 1:
            cheapest: Dict[int, Edge] = {}
            for edge in edges:
                root_from = dsu.find(edge.from_id)
                root_to = dsu.find(edge.to_id)
                if root_from == root_to:
                    continue
                for root in (root_from, root_to):
                    if root not in cheapest or edge_order(edge) < edge_order(cheapest[root]):
                        cheapest[root] = edge

            if not cheapest:
                logger.debug(f"Boruvka found no crossing edge, input is a forest of {components} trees")
                break

            phases += 1
            for root in sorted(cheapest):
                edge = cheapest[root]
                if dsu.union(edge.from_id, edge.to_id):
                    result.add_edge(*edge)
                    components -= 1

        logger.debug(f"Boruvka selected {result.edge_count()} edges in {phases} phases")
        return result
