"""Strategy facade over the three routers.

Callers pick a strategy by name; "all" runs every router against the
same snapshot and keeps the quote with the most output.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import structlog

from liqrouter.errors import ConfigError, NoRouteFound
from liqrouter.pools.types import PoolInfo
from liqrouter.routing.multihop import MultiHopRouter
from liqrouter.routing.pathfinding import PathFinder, validate_max_hops
from liqrouter.routing.single import SinglePoolRouter
from liqrouter.routing.split import SplitRouter
from liqrouter.routing.types import SwapQuote, best_quote

logger = structlog.get_logger()


class Strategy(str, Enum):
    """Routing strategy selectable by callers."""

    SINGLE = "single"
    SPLIT = "split"
    MULTIHOP = "multihop"
    ALL = "all"

    @classmethod
    def parse(cls, value: str | Strategy) -> Strategy:
        """Parse a strategy name.

        Raises:
            ConfigError: If the name is not a known strategy
        """
        try:
            return cls(value)
        except ValueError as err:
            valid = ", ".join(s.value for s in cls)
            raise ConfigError(f"Unknown strategy '{value}' (expected one of: {valid})") from err


class LiquidityRouter:
    """Runs one or all routing strategies against a pool snapshot.

    Holds a PathFinder for the most recent snapshot so that repeated
    multi-hop queries against the same pools reuse the graph.
    """

    def __init__(
        self,
        max_hops: int = 2,
        single_router: SinglePoolRouter | None = None,
        split_router: SplitRouter | None = None,
        multihop_router: MultiHopRouter | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            max_hops: Hop bound for multi-hop routing (1 to 3)
            single_router: SinglePoolRouter override (for testing)
            split_router: SplitRouter override (for testing)
            multihop_router: MultiHopRouter override (for testing)

        Raises:
            ConfigError: If max_hops is outside 1..3
        """
        validate_max_hops(max_hops)
        self.max_hops = max_hops
        self.single_router = single_router or SinglePoolRouter()
        self.split_router = split_router or SplitRouter(self.single_router)
        self.multihop_router = multihop_router or MultiHopRouter()
        self._finder: PathFinder | None = None

    def _finder_for(self, pools: Sequence[PoolInfo]) -> PathFinder:
        if self._finder is None or not self._finder.serves(pools):
            self._finder = PathFinder(pools)
        return self._finder

    def quote(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
        strategy: str | Strategy = Strategy.ALL,
        max_hops: int | None = None,
    ) -> SwapQuote:
        """Quote a swap with the selected strategy.

        Args:
            pools: Pool snapshot
            token_in: Asset being sold
            token_out: Asset being bought
            amount_in: Exact input amount
            strategy: Strategy name
            max_hops: Hop bound for this call (default: the router's)

        Raises:
            ConfigError: If the strategy name or hop bound is invalid
            NoRouteFound: If the strategy (or, for "all", every strategy)
                finds no route
        """
        selected = Strategy.parse(strategy)
        hops = self.max_hops if max_hops is None else max_hops
        validate_max_hops(hops)
        logger.debug(
            "routing_request",
            strategy=selected.value,
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            max_hops=hops,
            pool_count=len(pools),
        )

        if selected == Strategy.ALL:
            return self._quote_all(pools, token_in, token_out, amount_in, hops)
        return self._run(selected, pools, token_in, token_out, amount_in, hops)

    def _run(
        self,
        strategy: Strategy,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
        max_hops: int,
    ) -> SwapQuote:
        if strategy == Strategy.SINGLE:
            return self.single_router.find_best_route(pools, token_in, token_out, amount_in)
        if strategy == Strategy.SPLIT:
            return self.split_router.find_best_route(pools, token_in, token_out, amount_in)
        return self.multihop_router.find_best_route(
            pools,
            token_in,
            token_out,
            amount_in,
            max_hops,
            finder=self._finder_for(pools),
        )

    def _quote_all(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
        max_hops: int,
    ) -> SwapQuote:
        quotes = []
        for strategy in (Strategy.SINGLE, Strategy.SPLIT, Strategy.MULTIHOP):
            try:
                quotes.append(
                    self._run(strategy, pools, token_in, token_out, amount_in, max_hops)
                )
            except NoRouteFound as err:
                logger.debug("strategy_no_route", strategy=strategy.value, error=str(err))

        best = best_quote(quotes)
        if best is None:
            raise NoRouteFound(f"No strategy found a route for {token_in} -> {token_out}")

        logger.info(
            "best_route_selected",
            strategy=best.strategy,
            candidates=[(q.strategy, q.amount_out) for q in quotes],
            amount_out=best.amount_out,
            price_impact_bps=best.price_impact_bps,
        )
        return best

    def compare(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> dict[Strategy, SwapQuote | None]:
        """Run every strategy and report each result (None where no route)."""
        results: dict[Strategy, SwapQuote | None] = {}
        for strategy in (Strategy.SINGLE, Strategy.SPLIT, Strategy.MULTIHOP):
            try:
                results[strategy] = self._run(
                    strategy, pools, token_in, token_out, amount_in, self.max_hops
                )
            except NoRouteFound:
                results[strategy] = None
        return results


__all__ = ["LiquidityRouter", "Strategy"]
