"""Pool multigraph and simple-path search for multi-hop routing.

Each pool contributes two directed edges, one per trading direction, so
parallel pools between the same pair show up as parallel edges. Paths
are sequences of edges rather than of tokens: two paths through the same
tokens but different pools are different candidates.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from liqrouter.constants import MAX_HOPS, MIN_HOPS
from liqrouter.errors import ConfigError
from liqrouter.pools.types import PoolInfo


@dataclass(frozen=True)
class PoolEdge:
    """Directed edge: swap token_in for token_out through pools[pool_index]."""

    pool_index: int
    token_in: str
    token_out: str
    a_to_b: bool


Path = tuple[PoolEdge, ...]


def validate_max_hops(max_hops: int) -> None:
    """Raise ConfigError unless MIN_HOPS <= max_hops <= MAX_HOPS."""
    if not MIN_HOPS <= max_hops <= MAX_HOPS:
        raise ConfigError(f"max_hops must be between {MIN_HOPS} and {MAX_HOPS}, got {max_hops}")


class PoolGraph:
    """Directed multigraph of tokens connected by pools.

    This is a pure data structure with no caching; PathFinder owns
    PoolGraph instances and caches queries against them.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, list[PoolEdge]] = {}

    @classmethod
    def from_pools(cls, pools: Sequence[PoolInfo]) -> PoolGraph:
        """Build the multigraph for a pool snapshot, edges in snapshot order."""
        graph = cls()
        for index, pool in enumerate(pools):
            graph._add_edge(PoolEdge(index, pool.token_a, pool.token_b, True))
            graph._add_edge(PoolEdge(index, pool.token_b, pool.token_a, False))
        return graph

    def _add_edge(self, edge: PoolEdge) -> None:
        self._adjacency.setdefault(edge.token_in, []).append(edge)
        self._adjacency.setdefault(edge.token_out, [])

    def edges_from(self, token: str) -> list[PoolEdge]:
        """Outgoing edges of a token (empty if the token is unknown)."""
        return self._adjacency.get(token, [])

    def has_token(self, token: str) -> bool:
        return token in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def find_paths(self, token_in: str, token_out: str, max_hops: int) -> list[Path]:
        """Enumerate simple paths from token_in to token_out by breadth-first search.

        No token repeats within a path; the visited set is tracked per
        branch, not globally, so different branches may share tokens. A
        branch is recorded once it reaches token_out with at least one edge
        and is not expanded past max_hops edges. Shorter paths come first.

        Raises:
            ConfigError: If max_hops is outside 1..3
        """
        validate_max_hops(max_hops)

        paths: list[Path] = []
        queue: deque[tuple[str, Path, frozenset[str]]] = deque()
        queue.append((token_in, (), frozenset()))

        while queue:
            current, path, visited = queue.popleft()

            if current == token_out and path:
                paths.append(path)
                continue

            if len(path) >= max_hops:
                continue

            visited = visited | {current}
            for edge in self.edges_from(current):
                if edge.token_out in visited:
                    continue
                queue.append((edge.token_out, path + (edge,), visited))

        return paths


class PathFinder:
    """Caching facade over the multigraph of one immutable pool snapshot.

    The graph is built lazily on first use and path queries are memoised.
    A PathFinder is bound to its snapshot; build a new one when the pools
    change.

    Usage:
        finder = PathFinder(pools)
        paths = finder.find_paths(token_in, token_out, max_hops=2)
    """

    def __init__(self, pools: Sequence[PoolInfo]) -> None:
        self._pools: tuple[PoolInfo, ...] = tuple(pools)
        self._graph: PoolGraph | None = None
        # Cache for path queries: (token_in, token_out, max_hops) -> paths
        self._path_cache: dict[tuple[str, str, int], list[Path]] = {}

    @property
    def pools(self) -> tuple[PoolInfo, ...]:
        return self._pools

    @property
    def graph(self) -> PoolGraph:
        """Get or build the pool graph (lazy initialization)."""
        if self._graph is None:
            self._graph = PoolGraph.from_pools(self._pools)
        return self._graph

    def serves(self, pools: Sequence[PoolInfo]) -> bool:
        """Whether this finder was built for exactly these pools."""
        return pools is self._pools or tuple(pools) == self._pools

    def find_paths(self, token_in: str, token_out: str, max_hops: int) -> list[Path]:
        """Cached PoolGraph.find_paths.

        Raises:
            ConfigError: If max_hops is outside 1..3
        """
        cache_key = (token_in, token_out, max_hops)
        if cache_key not in self._path_cache:
            self._path_cache[cache_key] = self.graph.find_paths(token_in, token_out, max_hops)
        return self._path_cache[cache_key]

    @property
    def cache_size(self) -> int:
        return len(self._path_cache)


__all__ = ["Path", "PathFinder", "PoolEdge", "PoolGraph", "validate_max_hops"]
