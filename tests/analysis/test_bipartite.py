"""Tests for bipartite coloring and maximum matching."""

from itertools import combinations

import pytest

from graphkit import pygraph


def brute_force_maximum(edges):
    """Size of the largest set of pairwise disjoint edges."""
    for size in range(len(edges), 0, -1):
        for subset in combinations(edges, size):
            endpoints = [v for edge in subset for v in edge]
            if len(endpoints) == len(set(endpoints)):
                return size
    return 0


def make_graph(vertex_count, edges, directed=False):
    graph = pygraph('E', vertex_count, directed=directed)
    for a, b in edges:
        graph.add_edge(a, b)
    return graph


def assert_valid_matching(matching, graph):
    endpoints = [v for pair in matching for v in pair]
    assert len(endpoints) == len(set(endpoints))
    for a, b in matching:
        assert graph.has_edge(a, b) or graph.has_edge(b, a)


class TestCheckBipartite:
    """Test the two-coloring check."""

    def test_even_cycle(self, square):
        check = square.check_bipartite()
        assert check.is_bipartite
        assert set(check.colors) == {1, 2, 3, 4}
        for edge in square.edges():
            assert check.colors[edge.from_id] != check.colors[edge.to_id]

    def test_odd_cycle(self, triangle):
        assert not triangle.check_bipartite().is_bipartite

    def test_disconnected_components(self):
        graph = make_graph(5, [(1, 2), (4, 5)])
        check = graph.check_bipartite()
        assert check.is_bipartite
        assert check.colors[3] in ('A', 'B')

    def test_directed_edges_treated_as_undirected(self):
        graph = make_graph(3, [(1, 2), (2, 3), (3, 1)], directed=True)
        assert not graph.check_bipartite().is_bipartite


class TestMaximumMatching:
    """Test Kuhn's augmenting-path matching."""

    def test_path_of_four(self):
        graph = make_graph(4, [(1, 2), (2, 3), (3, 4)])
        matching = graph.get_maximum_matching()
        assert len(matching) == 2
        assert_valid_matching(matching, graph)

    def test_augmenting_path_needed(self):
        # The greedy pass matches 1-4 first; 2 only reaches 4, so 1 must move to 5
        graph = make_graph(6, [(1, 4), (1, 5), (2, 4), (3, 5), (3, 6)])
        matching = graph.get_maximum_matching()
        assert len(matching) == 3
        assert_valid_matching(matching, graph)

    @pytest.mark.parametrize("vertex_count,edges", [
        (6, [(1, 4), (2, 4), (2, 5), (3, 5), (3, 6)]),
        (7, [(1, 5), (2, 5), (3, 5), (3, 6), (4, 6), (4, 7), (2, 7)]),
        (8, [(1, 2), (2, 3), (3, 4), (4, 1), (5, 6), (6, 7), (7, 8), (3, 6)]),
        (6, [(1, 4), (2, 4), (3, 4), (3, 5), (1, 6)]),
    ])
    def test_matches_brute_force(self, vertex_count, edges):
        graph = make_graph(vertex_count, edges)
        matching = graph.get_maximum_matching()
        assert_valid_matching(matching, graph)
        assert len(matching) == brute_force_maximum(edges)

    def test_bounded_by_half_vertices(self, square):
        matching = square.get_maximum_matching()
        assert len(matching) == 2
        assert len(matching) <= square.get_size() // 2

    def test_left_side_first(self, square):
        colors = square.check_bipartite().colors
        for left_id, right_id in square.get_maximum_matching():
            assert colors[left_id] == 'A'
            assert colors[right_id] == 'B'

    def test_not_bipartite(self, triangle):
        assert triangle.get_maximum_matching() == []

    def test_no_edges(self):
        assert make_graph(3, []).get_maximum_matching() == []
