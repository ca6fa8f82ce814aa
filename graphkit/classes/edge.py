"""
Value types shared by every graph representation.
"""

from enum import Enum
from typing import NamedTuple

from .exceptions import GraphFormatError


class RepresentationKind(Enum):
    """Storage layouts, tagged by the marker used in the text format."""
    MATRIX = "C"
    LIST = "L"
    EDGE_LIST = "E"

    @property
    def marker(self) -> str:
        return self.value

    @classmethod
    def from_marker(cls, marker: str) -> "RepresentationKind":
        """
        Parse a single-character format marker.

        Args:
            marker: One of 'C', 'L' or 'E'

        Returns:
            The matching RepresentationKind

        Raises:
            GraphFormatError: If the marker is unknown
        """
        for kind in cls:
            if kind.value == marker:
                return kind
        raise GraphFormatError(f"Unknown representation marker: {marker!r}")


DEFAULT_KIND = RepresentationKind.EDGE_LIST


class Edge(NamedTuple):
    """A single edge; undirected edges are stored with from_id <= to_id."""
    from_id: int
    to_id: int
    weight: int = 1


class GraphProperties(NamedTuple):
    """Immutable properties copied verbatim between representations."""
    vertex_count: int
    directed: bool
    weighted: bool
