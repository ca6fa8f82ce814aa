"""
Bipartite two-coloring and maximum matching.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, List, NamedTuple, Set, Tuple

if TYPE_CHECKING:
    from ..core.pygraph import pygraph

logger = logging.getLogger(__name__)

LEFT = "A"
RIGHT = "B"


class BipartiteCheck(NamedTuple):
    """
    Outcome of the two-coloring check.

    colors maps each vertex to LEFT or RIGHT. It is only a complete,
    valid coloring when is_bipartite is True.
    """
    is_bipartite: bool
    colors: Dict[int, str]


class BipartiteMatcher:
    """
    Bipartite graph algorithms.

    This class provides methods for:
    - Two-coloring the graph by breadth-first search
    - Finding a maximum matching with Kuhn's augmenting paths

    Edge direction is ignored; a directed edge links its endpoints the
    same way an undirected one does.
    """

    def __init__(self, graph: "pygraph"):
        """
        Initialize the matcher.

        Args:
            graph: pygraph instance to analyze
        """
        self.graph = graph

    def _undirected_neighbors(self) -> Dict[int, List[int]]:
        self.graph.transform_to_list()
        representation = self.graph.representation
        vertex_count = self.graph.get_size()

        neighbors: Dict[int, Set[int]] = {v: set() for v in range(1, vertex_count + 1)}
        for edge in representation.edges():
            neighbors[edge.from_id].add(edge.to_id)
            neighbors[edge.to_id].add(edge.from_id)
        return {v: sorted(adjacent) for v, adjacent in neighbors.items()}

    def check_bipartite(self) -> BipartiteCheck:
        """
        Try to two-color the graph.

        Returns:
            BipartiteCheck; is_bipartite is False as soon as an edge joins
            two vertices of the same color
        """
        neighbors = self._undirected_neighbors()
        colors: Dict[int, str] = {}

        for start_id in neighbors:
            if start_id in colors:
                continue
            colors[start_id] = LEFT
            queue = deque([start_id])

            while queue:
                current_id = queue.popleft()
                for neighbor_id in neighbors[current_id]:
                    if neighbor_id not in colors:
                        colors[neighbor_id] = RIGHT if colors[current_id] == LEFT else LEFT
                        queue.append(neighbor_id)
                    elif colors[neighbor_id] == colors[current_id]:
                        logger.debug(f"Edge ({current_id}, {neighbor_id}) joins two {colors[current_id]} vertices")
                        return BipartiteCheck(False, colors)

        return BipartiteCheck(True, colors)

    def maximum_matching(self) -> List[Tuple[int, int]]:
        """
        Find a maximum matching of a bipartite graph.

        A greedy pass seeds the matching, then every still unmatched LEFT
        vertex searches for an augmenting path. Each search starts with a
        fresh visited set.

        Returns:
            List of (left_id, right_id) pairs, sorted by left_id; empty if
            the graph is not bipartite
        """
        check = self.check_bipartite()
        if not check.is_bipartite:
            logger.warning("Requested a bipartite matching but the graph is not bipartite")
            return []

        neighbors = self._undirected_neighbors()
        colors = check.colors
        left_vertices = [v for v in neighbors if colors[v] == LEFT]

        # match_right[right_id] = left_id
        match_right: Dict[int, int] = {}
        matched_left: Set[int] = set()

        for left_id in left_vertices:
            for right_id in neighbors[left_id]:
                if right_id not in match_right:
                    match_right[right_id] = left_id
                    matched_left.add(left_id)
                    break

        def try_augment(left_id: int, visited: Set[int]) -> bool:
            for right_id in neighbors[left_id]:
                if right_id in visited:
                    continue
                visited.add(right_id)
                if right_id not in match_right or try_augment(match_right[right_id], visited):
                    match_right[right_id] = left_id
                    return True
            return False

        for left_id in left_vertices:
            if left_id in matched_left:
                continue
            if try_augment(left_id, set()):
                matched_left.add(left_id)

        matching = sorted((left_id, right_id) for right_id, left_id in match_right.items())
        logger.debug(f"Maximum matching has {len(matching)} pairs")
        return matching
