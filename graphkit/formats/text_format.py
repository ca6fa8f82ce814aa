"""
Plain-text graph format reader and writer.

Layout::

    <Type> <vertexCount> [<edgeCount>]      Type is C, L or E; edgeCount only for E
    <isDirected:0|1> <isWeighted:0|1>
    ...body...

Body by type:
    C: vertexCount rows of vertexCount weights (0 = no edge)
    L: vertexCount lines of neighbor ids, each followed by its weight if weighted
    E: edgeCount lines of ``from to [weight]``

Writing a parsed canonical input reproduces it byte for byte.
"""

import logging
import os
from typing import List, Union

from ..classes.edge import RepresentationKind
from ..classes.exceptions import GraphError, GraphFormatError
from ..core.adjacency_list import AdjacencyListGraph
from ..core.adjacency_matrix import AdjacencyMatrixGraph
from ..core.edge_list import EdgeListGraph
from ..core.representation import GraphRepresentation

logger = logging.getLogger(__name__)


def _to_ints(tokens: List[str], context: str) -> List[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise GraphFormatError(f"Non-integer token in {context}: {e}") from e


def _parse_flag(token: str, name: str) -> bool:
    if token not in ("0", "1"):
        raise GraphFormatError(f"{name} flag must be 0 or 1, got {token!r}")
    return token == "1"


def parse_graph(text: str) -> GraphRepresentation:
    """
    Parse the text format into a representation of the declared kind.

    Args:
        text: Complete serialized graph

    Returns:
        AdjacencyMatrixGraph, AdjacencyListGraph or EdgeListGraph

    Raises:
        GraphFormatError: If the header or body is malformed
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise GraphFormatError("Graph text needs a header line and a properties line")

    header = lines[0].split()
    if not header:
        raise GraphFormatError("Empty header line")
    kind = RepresentationKind.from_marker(header[0])

    expected_header = 3 if kind is RepresentationKind.EDGE_LIST else 2
    if len(header) != expected_header:
        raise GraphFormatError(f"Header for type {kind.marker} needs {expected_header} fields, "
                               f"got {len(header)}")
    counts = _to_ints(header[1:], "header")
    vertex_count = counts[0]
    if vertex_count < 0:
        raise GraphFormatError(f"Negative vertex count: {vertex_count}")
    if kind is RepresentationKind.EDGE_LIST and counts[1] < 0:
        raise GraphFormatError(f"Negative edge count: {counts[1]}")

    flags = lines[1].split()
    if len(flags) != 2:
        raise GraphFormatError("Properties line must hold exactly two flags")
    directed = _parse_flag(flags[0], "isDirected")
    weighted = _parse_flag(flags[1], "isWeighted")

    body = lines[2:]
    try:
        if kind is RepresentationKind.MATRIX:
            graph = _parse_matrix(body, vertex_count, directed, weighted)
        elif kind is RepresentationKind.LIST:
            graph = _parse_list(body, vertex_count, directed, weighted)
        else:
            graph = _parse_edge_list(body, vertex_count, counts[1], directed, weighted)
    except GraphFormatError:
        raise
    except GraphError as e:
        # Out-of-range vertex ids in the body
        raise GraphFormatError(str(e)) from e

    logger.debug(f"Parsed {kind.name} graph with {vertex_count} vertices and {graph.edge_count()} edges")
    return graph


def _parse_matrix(body: List[str], vertex_count: int, directed: bool, weighted: bool) -> AdjacencyMatrixGraph:
    graph = AdjacencyMatrixGraph(vertex_count, directed, weighted)
    values = _to_ints(" ".join(body).split(), "matrix body")
    if len(values) < vertex_count * vertex_count:
        raise GraphFormatError(f"Matrix body holds {len(values)} values, "
                               f"expected {vertex_count * vertex_count}")

    for i in range(vertex_count):
        for j in range(vertex_count):
            weight = values[i * vertex_count + j]
            if weight != 0:
                graph.add_edge(i + 1, j + 1, weight)
    return graph


def _parse_list(body: List[str], vertex_count: int, directed: bool, weighted: bool) -> AdjacencyListGraph:
    graph = AdjacencyListGraph(vertex_count, directed, weighted)
    for i in range(vertex_count):
        line = body[i] if i < len(body) else ""
        values = _to_ints(line.split(), f"adjacency line {i + 1}")
        step = 2 if weighted else 1
        if len(values) % step != 0:
            raise GraphFormatError(f"Adjacency line {i + 1} has a neighbor without a weight")
        for k in range(0, len(values), step):
            weight = values[k + 1] if weighted else 1
            graph.add_edge(i + 1, values[k], weight)
    return graph


def _parse_edge_list(body: List[str], vertex_count: int, edge_count: int,
                     directed: bool, weighted: bool) -> EdgeListGraph:
    graph = EdgeListGraph(vertex_count, directed, weighted)
    values = _to_ints(" ".join(body).split(), "edge list body")
    step = 3 if weighted else 2
    if len(values) < edge_count * step:
        raise GraphFormatError(f"Edge list body holds {len(values) // step} edges, expected {edge_count}")

    for k in range(edge_count):
        record = values[k * step:(k + 1) * step]
        weight = record[2] if weighted else 1
        graph.add_edge(record[0], record[1], weight)
    return graph


def format_graph(graph: GraphRepresentation) -> str:
    """
    Serialize a representation in its own layout.

    Args:
        graph: Representation to serialize

    Returns:
        Text in the format accepted by parse_graph
    """
    vertex_count, directed, weighted = graph.get_properties()
    flags = f"{int(directed)} {int(weighted)}\n"

    if graph.kind is RepresentationKind.MATRIX:
        lines = [f"C {vertex_count}\n", flags]
        for i in range(vertex_count):
            row = [str(int(graph.matrix[i, j])) if graph.present[i, j] else "0"
                   for j in range(vertex_count)]
            lines.append(" ".join(row) + "\n")

    elif graph.kind is RepresentationKind.LIST:
        lines = [f"L {vertex_count}\n", flags]
        for vertex_id in range(1, vertex_count + 1):
            tokens = []
            for neighbor_id, weight in graph.neighbors(vertex_id):
                tokens.append(str(neighbor_id))
                if weighted:
                    tokens.append(str(weight))
            lines.append(" ".join(tokens) + "\n")

    else:
        lines = [f"E {vertex_count} {graph.edge_count()}\n", flags]
        for edge in graph.edge_list:
            if weighted:
                lines.append(f"{edge.from_id} {edge.to_id} {edge.weight}\n")
            else:
                lines.append(f"{edge.from_id} {edge.to_id}\n")

    return "".join(lines)


def read_graph(path: Union[str, os.PathLike]) -> GraphRepresentation:
    """Load a representation from a file."""
    with open(path, "r") as f:
        graph = parse_graph(f.read())
    logger.info(f"Loaded {graph.kind.name} graph from {path}")
    return graph


def write_graph(graph: GraphRepresentation, path: Union[str, os.PathLike]) -> None:
    """Save a representation to a file in its own layout."""
    with open(path, "w") as f:
        f.write(format_graph(graph))
    logger.info(f"Saved {graph.kind.name} graph to {path}")
