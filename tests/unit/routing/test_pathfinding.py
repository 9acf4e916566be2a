"""Tests for the pool multigraph and path search."""

import pytest

from liqrouter.errors import ConfigError
from liqrouter.routing.pathfinding import PathFinder, PoolEdge, PoolGraph
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, make_pool


def token_path(path) -> list[str]:
    return [path[0].token_in] + [edge.token_out for edge in path]


class TestPoolGraph:
    """Tests for PoolGraph construction."""

    def test_empty(self):
        graph = PoolGraph.from_pools([])
        assert graph.token_count == 0
        assert graph.edge_count == 0

    def test_each_pool_adds_two_edges(self):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)])
        assert graph.token_count == 2
        assert graph.edge_count == 2
        assert graph.edges_from(TOKEN_A) == [PoolEdge(0, TOKEN_A, TOKEN_B, True)]
        assert graph.edges_from(TOKEN_B) == [PoolEdge(0, TOKEN_B, TOKEN_A, False)]

    def test_parallel_pools_are_parallel_edges(self):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B), make_pool(TOKEN_A, TOKEN_B)])
        assert [e.pool_index for e in graph.edges_from(TOKEN_A)] == [0, 1]

    def test_unknown_token(self):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)])
        assert not graph.has_token(TOKEN_C)
        assert graph.edges_from(TOKEN_C) == []


class TestFindPaths:
    """Tests for simple-path enumeration."""

    def test_direct_path(self):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)])
        paths = graph.find_paths(TOKEN_A, TOKEN_B, 1)
        assert paths == [(PoolEdge(0, TOKEN_A, TOKEN_B, True),)]

    def test_shorter_paths_first(self):
        pools = [
            make_pool(TOKEN_A, TOKEN_B),
            make_pool(TOKEN_B, TOKEN_C),
            make_pool(TOKEN_A, TOKEN_C),
        ]
        paths = PoolGraph.from_pools(pools).find_paths(TOKEN_A, TOKEN_C, 2)
        assert [token_path(p) for p in paths] == [[TOKEN_A, TOKEN_C], [TOKEN_A, TOKEN_B, TOKEN_C]]

    def test_hop_bound_limits_length(self):
        pools = [
            make_pool(TOKEN_A, TOKEN_B),
            make_pool(TOKEN_B, TOKEN_C),
            make_pool(TOKEN_C, TOKEN_D),
        ]
        graph = PoolGraph.from_pools(pools)
        assert graph.find_paths(TOKEN_A, TOKEN_D, 2) == []
        assert len(graph.find_paths(TOKEN_A, TOKEN_D, 3)) == 1

    def test_parallel_pools_give_distinct_paths(self):
        pools = [
            make_pool(TOKEN_A, TOKEN_B),
            make_pool(TOKEN_A, TOKEN_B),
            make_pool(TOKEN_B, TOKEN_C),
        ]
        paths = PoolGraph.from_pools(pools).find_paths(TOKEN_A, TOKEN_C, 2)
        assert [[e.pool_index for e in p] for p in paths] == [[0, 2], [1, 2]]

    def test_reverse_edges_used(self):
        pools = [make_pool(TOKEN_B, TOKEN_A), make_pool(TOKEN_C, TOKEN_B)]
        paths = PoolGraph.from_pools(pools).find_paths(TOKEN_A, TOKEN_C, 2)
        assert len(paths) == 1
        assert [e.a_to_b for e in paths[0]] == [False, False]

    def test_no_cycle_back_to_source(self):
        paths = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)]).find_paths(TOKEN_A, TOKEN_A, 2)
        assert paths == []

    def test_paths_are_simple(self):
        # Triangle plus a tail: no path may revisit a token
        pools = [
            make_pool(TOKEN_A, TOKEN_B),
            make_pool(TOKEN_B, TOKEN_C),
            make_pool(TOKEN_C, TOKEN_A),
            make_pool(TOKEN_C, TOKEN_D),
        ]
        paths = PoolGraph.from_pools(pools).find_paths(TOKEN_A, TOKEN_D, 3)
        assert paths
        for path in paths:
            tokens = token_path(path)
            assert len(tokens) == len(set(tokens))
            assert len(path) <= 3

    def test_unknown_tokens(self):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)])
        assert graph.find_paths(TOKEN_C, TOKEN_D, 3) == []

    @pytest.mark.parametrize("max_hops", [0, 4, -1])
    def test_invalid_hop_bound_raises(self, max_hops):
        graph = PoolGraph.from_pools([make_pool(TOKEN_A, TOKEN_B)])
        with pytest.raises(ConfigError):
            graph.find_paths(TOKEN_A, TOKEN_B, max_hops)


class TestPathFinder:
    """Tests for the caching facade."""

    def test_graph_built_lazily_once(self):
        finder = PathFinder([make_pool(TOKEN_A, TOKEN_B)])
        assert finder.graph is finder.graph

    def test_queries_cached(self):
        finder = PathFinder([make_pool(TOKEN_A, TOKEN_B)])
        first = finder.find_paths(TOKEN_A, TOKEN_B, 2)
        second = finder.find_paths(TOKEN_A, TOKEN_B, 2)
        assert first is second
        assert finder.cache_size == 1
        finder.find_paths(TOKEN_A, TOKEN_B, 3)
        assert finder.cache_size == 2

    def test_serves_only_its_snapshot(self):
        pools = [make_pool(TOKEN_A, TOKEN_B)]
        finder = PathFinder(pools)
        assert finder.serves(pools)
        assert finder.serves(tuple(pools))
        assert not finder.serves(pools + [make_pool(TOKEN_B, TOKEN_C)])
