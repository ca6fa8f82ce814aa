"""
Exception types raised by graphkit.

Algorithms that can be infeasible (Euler tours, bipartite matching) never
raise for infeasibility; they return explicit result values instead.
"""


class GraphError(Exception):
    """Base class for all graphkit errors."""


class VertexIndexError(GraphError, IndexError):
    """A vertex id lies outside the valid range, [1, n] unless stated otherwise."""

    def __init__(self, vertex_id: int, vertex_count: int, lowest: int = 1):
        self.vertex_id = vertex_id
        self.vertex_count = vertex_count
        self.lowest = lowest
        super().__init__(f"Vertex {vertex_id} is out of range [{lowest}, {vertex_count}]")


class EdgeNotFoundError(GraphError, KeyError):
    """An edge operation referenced an edge that does not exist."""

    def __init__(self, from_id: int, to_id: int):
        self.from_id = from_id
        self.to_id = to_id
        super().__init__(f"No such edge: ({from_id}, {to_id})")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class GraphFormatError(GraphError, ValueError):
    """The serialized graph text could not be parsed."""
