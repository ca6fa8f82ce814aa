"""Tests for the minimum spanning tree algorithms."""

import pytest

from graphkit import DisjointSet, Edge, RepresentationKind, pygraph, total_weight

ALGORITHMS = ["get_spanning_tree_kruskal", "get_spanning_tree_prim", "get_spanning_tree_boruvka"]


def spanning_tree(graph, algorithm):
    return getattr(graph, algorithm)()


def is_spanning_forest(tree, graph):
    """Every tree edge exists in graph and the tree has no cycle."""
    dsu = DisjointSet(graph.get_size())
    for edge in tree.edges():
        if graph.get_edge(edge.from_id, edge.to_id) != edge.weight:
            return False
        if not dsu.union(edge.from_id, edge.to_id):
            return False
    return True


@pytest.mark.parametrize("algorithm", ALGORITHMS)
class TestSpanningTree:
    """Test properties shared by all three algorithms."""

    def test_triangle(self, triangle, algorithm):
        """The heaviest triangle edge is dropped."""
        tree = spanning_tree(triangle, algorithm)
        assert tree.edge_set() == {Edge(1, 2, 1), Edge(2, 3, 2)}
        assert total_weight(tree) == 3

    def test_result_shape(self, weighted_graph, algorithm):
        """The result is an undirected weighted edge list with n - 1 edges."""
        tree = spanning_tree(weighted_graph, algorithm)
        assert tree.kind is RepresentationKind.EDGE_LIST
        assert tree.get_properties() == (6, False, True)
        assert tree.edge_count() == 5
        assert is_spanning_forest(tree, weighted_graph)

    def test_minimum_weight(self, weighted_graph, algorithm):
        """Total weight matches the known optimum."""
        tree = spanning_tree(weighted_graph, algorithm)
        assert total_weight(tree) == 14

    def test_forces_representation(self, weighted_graph, algorithm):
        """The source graph keeps its edges after being transformed."""
        before = weighted_graph.edge_set()
        spanning_tree(weighted_graph, algorithm)
        assert weighted_graph.kind is not RepresentationKind.MATRIX
        assert weighted_graph.edge_set() == before

    def test_disconnected_gives_forest(self, algorithm):
        """A graph with two components yields a spanning forest."""
        graph = pygraph('E', 5, weighted=True)
        graph.add_edge(1, 2, 3)
        graph.add_edge(2, 3, 1)
        graph.add_edge(1, 3, 2)
        graph.add_edge(4, 5, 6)
        tree = spanning_tree(graph, algorithm)
        assert tree.edge_count() == 3
        assert total_weight(tree) == 9
        assert is_spanning_forest(tree, graph)

    def test_empty_graph(self, algorithm):
        graph = pygraph('L', 0)
        assert spanning_tree(graph, algorithm).edge_count() == 0

    def test_unweighted(self, square, algorithm):
        tree = spanning_tree(square, algorithm)
        assert tree.edge_count() == 3
        assert tree.get_properties().weighted is False


class TestCrossCheck:
    """Test that the algorithms agree with each other."""

    def test_equal_weights_on_grid(self):
        """All three algorithms agree on a grid with many ties."""
        graph = pygraph('C', 9, weighted=True)
        for row in range(3):
            for col in range(3):
                v = row * 3 + col + 1
                if col < 2:
                    graph.add_edge(v, v + 1, (v * 7) % 4 + 1)
                if row < 2:
                    graph.add_edge(v, v + 3, (v * 5) % 3 + 1)

        weights = {total_weight(spanning_tree(graph.copy(), algorithm)) for algorithm in ALGORITHMS}
        assert len(weights) == 1
        assert all(spanning_tree(graph.copy(), algorithm).edge_count() == 8 for algorithm in ALGORITHMS)

    def test_kruskal_tie_break_is_deterministic(self):
        """Equal weights are resolved by (from_id, to_id)."""
        graph = pygraph('E', 3, weighted=True)
        graph.add_edge(2, 3, 1)
        graph.add_edge(1, 3, 1)
        graph.add_edge(1, 2, 1)
        tree = graph.get_spanning_tree_kruskal()
        assert tree.edge_set() == {Edge(1, 2, 1), Edge(1, 3, 1)}
