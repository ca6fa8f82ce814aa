"""
Eulerian trail and circuit construction for undirected graphs.

Provides a feasibility check and two tour builders: a bridge-avoiding
greedy walk (Fleury) and a stack-based edge-consuming walk (Hierholzer).
Both builders work on a private copy of the adjacency lists, never on the
caller's graph.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, List, NamedTuple, Optional

from ..classes.disjoint_set import DisjointSet
from ..classes.exceptions import GraphError
from ..core.adjacency_list import AdjacencyListGraph

if TYPE_CHECKING:
    from ..core.pygraph import pygraph

logger = logging.getLogger(__name__)


class EulerCheck(NamedTuple):
    """
    Outcome of the Euler feasibility check.

    start is None when no Euler trail exists. circuit is True when the
    trail can be closed, i.e. every vertex has even degree.
    """
    start: Optional[int]
    circuit: bool

    @property
    def feasible(self) -> bool:
        return self.start is not None


def is_bridge(adjacency: AdjacencyListGraph, a: int, b: int) -> bool:
    """
    Check whether edge (a, b) is currently the only route between a and b.

    Runs a breadth-first search from a that ignores the edge itself.

    Args:
        adjacency: Adjacency lists to probe
        a: One endpoint
        b: The other endpoint

    Returns:
        True if b is unreachable from a without the edge
    """
    visited = {a}
    queue = deque([a])
    while queue:
        current_id = queue.popleft()
        for neighbor_id in adjacency.adjacency[current_id - 1]:
            if current_id == a and neighbor_id == b:
                continue
            if neighbor_id == b:
                return False
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append(neighbor_id)
    return True


class EulerianTourFinder:
    """
    Eulerian trail and circuit algorithms.

    This class provides methods for:
    - Checking whether an Euler trail or circuit exists
    - Probing whether an edge is a bridge
    - Building a tour with Fleury's algorithm
    - Building a tour with Hierholzer's algorithm
    """

    def __init__(self, graph: "pygraph"):
        """
        Initialize the tour finder.

        Args:
            graph: pygraph instance to analyze
        """
        self.graph = graph

    def _require_undirected(self) -> None:
        if self.graph.get_properties().directed:
            raise GraphError("Eulerian tours are only supported for undirected graphs")

    def check_euler(self) -> EulerCheck:
        """
        Check whether the graph has an Euler trail or circuit.

        At most two vertices may have odd degree and all vertices that
        have edges must lie in one connected component.

        Returns:
            EulerCheck with the vertex the tour must start from
        """
        self._require_undirected()
        self.graph.transform_to_list()
        representation = self.graph.representation
        vertex_count = self.graph.get_size()

        odd_vertices = [v for v in range(1, vertex_count + 1) if representation.degree(v) % 2 != 0]
        if len(odd_vertices) > 2:
            logger.debug(f"No Euler trail: {len(odd_vertices)} vertices have odd degree")
            return EulerCheck(None, False)

        dsu = DisjointSet(vertex_count)
        for edge in representation.edges():
            dsu.union(edge.from_id, edge.to_id)

        roots = {dsu.find(v) for v in range(1, vertex_count + 1) if representation.degree(v) > 0}
        if len(roots) > 1:
            logger.debug(f"No Euler trail: edges span {len(roots)} components")
            return EulerCheck(None, False)

        if odd_vertices:
            return EulerCheck(min(odd_vertices), False)

        with_edges = [v for v in range(1, vertex_count + 1) if representation.degree(v) > 0]
        if with_edges:
            return EulerCheck(with_edges[0], True)
        if vertex_count > 0:
            return EulerCheck(1, True)
        return EulerCheck(None, False)

    def is_bridge(self, a: int, b: int) -> bool:
        """Check whether edge (a, b) is a bridge of the graph."""
        self.graph.transform_to_list()
        return is_bridge(self.graph.representation, a, b)

    def _checked_start(self) -> EulerCheck:
        check = self.check_euler()
        if not check.feasible:
            logger.warning("Requested an Euler tour but the graph has no Euler trail")
        return check

    def tour_fleury(self) -> List[int]:
        """
        Build an Euler tour by never crossing a bridge unless forced.

        Returns:
            Vertex sequence of the tour, or an empty list if none exists
        """
        check = self._checked_start()
        if not check.feasible:
            return []

        adjacency = self.graph.representation.copy()
        current_id = check.start
        tour = [current_id]

        while adjacency.degree(current_id) > 0:
            candidates = [neighbor_id for neighbor_id, _ in adjacency.neighbors(current_id)]
            next_id = candidates[0]
            if len(candidates) > 1:
                for neighbor_id in candidates:
                    if not is_bridge(adjacency, current_id, neighbor_id):
                        next_id = neighbor_id
                        break

            adjacency.remove_edge(current_id, next_id)
            current_id = next_id
            tour.append(current_id)

        logger.debug(f"Fleury tour visits {len(tour) - 1} edges")
        return tour

    def tour_hierholzer(self) -> List[int]:
        """
        Build an Euler tour by consuming edges with an explicit stack.

        Returns:
            Vertex sequence of the tour starting at the check's start
            vertex, or an empty list if none exists
        """
        check = self._checked_start()
        if not check.feasible:
            return []

        adjacency = self.graph.representation.copy()
        stack = [check.start]
        tour = []

        while stack:
            current_id = stack[-1]
            remaining = adjacency.adjacency[current_id - 1]
            if remaining:
                next_id = min(remaining)
                adjacency.remove_edge(current_id, next_id)
                stack.append(next_id)
            else:
                tour.append(stack.pop())

        tour.reverse()
        logger.debug(f"Hierholzer tour visits {len(tour) - 1} edges")
        return tour
