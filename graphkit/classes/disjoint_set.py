"""
Disjoint-set forest (union-find) over 1-based vertex ids.

Used by the Kruskal and Boruvka spanning tree builders and by the
connectivity check of the Euler tour engine.
"""

import logging
from typing import List

from .exceptions import VertexIndexError

logger = logging.getLogger(__name__)


class DisjointSet:
    """
    Union-find with full path compression and union by rank.

    Slot 0 is allocated but unused so that vertex ids can index the
    arrays directly.

    Attributes:
        parent: parent[v] is the parent of v; roots point to themselves
        rank: upper bound on the height of the tree rooted at v
    """

    def __init__(self, n: int):
        """
        Initialize n + 1 singleton sets.

        Args:
            n: Largest vertex id that will be used
        """
        self.n = n
        self.parent: List[int] = list(range(n + 1))
        self.rank: List[int] = [0] * (n + 1)

    def make(self, v: int) -> None:
        """Reset v to a singleton set."""
        self._check(v)
        self.parent[v] = v
        self.rank[v] = 0

    def find(self, v: int) -> int:
        """
        Find the representative of the set containing v.

        Every node on the path from v to the root is re-attached directly
        under the root.

        Args:
            v: Element to look up

        Returns:
            Root of the set containing v
        """
        self._check(v)
        root = v
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[v] != root:
            self.parent[v], v = root, self.parent[v]

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing a and b.

        The root with the smaller rank is attached under the other; the
        surviving rank grows only when both ranks were equal.

        Args:
            a: Element from the first set
            b: Element from the second set

        Returns:
            True if two distinct sets were merged, False if a and b were
            already in the same set
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Check whether a and b are in the same set."""
        return self.find(a) == self.find(b)

    def component_count(self) -> int:
        """Number of distinct sets among elements 1..n."""
        return len({self.find(v) for v in range(1, self.n + 1)})

    def _check(self, v: int) -> None:
        if not 0 <= v <= self.n:
            raise VertexIndexError(v, self.n, lowest=0)
