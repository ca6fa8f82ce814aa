"""Tests for the text graph format."""

import pytest

from graphkit import Edge, GraphFormatError, RepresentationKind, format_graph, parse_graph

MATRIX_TEXT = (
    "C 3\n"
    "0 1\n"
    "0 4 0\n"
    "4 0 2\n"
    "0 2 0\n"
)

LIST_TEXT = (
    "L 4\n"
    "1 1\n"
    "2 5 3 1\n"
    "\n"
    "4 7\n"
    "1 2\n"
)

EDGE_LIST_TEXT = (
    "E 4 3\n"
    "0 0\n"
    "1 2\n"
    "2 3\n"
    "3 4\n"
)


class TestParse:
    """Test parsing each layout."""

    def test_parse_matrix(self):
        graph = parse_graph(MATRIX_TEXT)
        assert graph.kind is RepresentationKind.MATRIX
        assert graph.get_properties() == (3, False, True)
        assert set(graph.edges()) == {Edge(1, 2, 4), Edge(2, 3, 2)}

    def test_parse_directed_weighted_list(self):
        graph = parse_graph(LIST_TEXT)
        assert graph.kind is RepresentationKind.LIST
        assert graph.get_edge(1, 2) == 5
        assert graph.get_edge(2, 1) is None
        assert set(graph.edges()) == {Edge(1, 2, 5), Edge(1, 3, 1), Edge(3, 4, 7), Edge(4, 1, 2)}

    def test_parse_unweighted_edge_list(self):
        graph = parse_graph(EDGE_LIST_TEXT)
        assert graph.edge_count() == 3
        assert all(edge.weight == 1 for edge in graph.edges())

    def test_parse_canonicalizes_undirected_edge_list(self):
        graph = parse_graph("E 3 1\n0 1\n3 1 6\n")
        assert graph.edge_list == [Edge(1, 3, 6)]

    @pytest.mark.parametrize("text", [
        "",
        "X 3\n0 0\n",
        "C 2\n0 0\n1 0\n",
        "E 3\n0 0\n",
        "E 3 2\n0 0\n1 2\n",
        "L 2\n0 1\n2\n\n",
        "C 2\n0 2\n0 0\n0 0\n",
        "E 2 1\n0 0\n1 3\n",
        "E 2 1\n0 0\n1 a\n",
        "E 3 -1\n0 0\n",
    ])
    def test_malformed(self, text):
        with pytest.raises(GraphFormatError):
            parse_graph(text)


class TestFormat:
    """Test that writing mirrors reading."""

    @pytest.mark.parametrize("text", [MATRIX_TEXT, LIST_TEXT, EDGE_LIST_TEXT])
    def test_byte_for_byte(self, text):
        assert format_graph(parse_graph(text)) == text

    def test_transformed_output(self):
        graph = parse_graph(MATRIX_TEXT).transform_to_list()
        assert format_graph(graph) == "L 3\n0 1\n2 4\n1 4 3 2\n2 2\n"

    def test_edge_list_output(self):
        graph = parse_graph(MATRIX_TEXT).transform_to_edge_list()
        assert format_graph(graph) == "E 3 2\n0 1\n1 2 4\n2 3 2\n"


class TestLargeEdgeList:
    """Test parsing an edge list with many edges."""

    def test_parse_keeps_order_and_count(self):
        edges = [(v, v % 400 + 1, v % 9) for v in range(1, 401)]
        edges += [(v, (v + 6) % 400 + 1, v % 5) for v in range(1, 401)]
        body = "".join(f"{a} {b} {w}\n" for a, b, w in edges)
        text = f"E 400 {len(edges)}\n1 1\n{body}"

        graph = parse_graph(text)
        assert graph.edge_count() == len(edges)
        assert graph.edge_list == [Edge(a, b, w) for a, b, w in edges]
        assert format_graph(graph) == text
