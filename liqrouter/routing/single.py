"""Best single-pool routing."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from liqrouter.constants import SINGLE_POOL_STRATEGY
from liqrouter.errors import NoRouteFound, RouterError
from liqrouter.pools.types import PoolInfo
from liqrouter.routing.matching import evaluate_step, matching_pools
from liqrouter.routing.types import Route, SwapQuote, best_quote

logger = structlog.get_logger()


class SinglePoolRouter:
    """Exhaustive best-of-N search over pools that trade the pair directly."""

    def find_best_route(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> SwapQuote:
        """Find the single pool giving the most output.

        Args:
            pools: Pool snapshot
            token_in: Asset being sold
            token_out: Asset being bought
            amount_in: Exact input amount

        Returns:
            Quote through the best pool; ties keep the earlier pool

        Raises:
            NoRouteFound: If no pool matches or every match fails
        """
        quote = best_quote(self.find_all_routes(pools, token_in, token_out, amount_in))
        if quote is None:
            raise NoRouteFound(f"No direct pool for {token_in} -> {token_out}")

        logger.info(
            "route_found",
            strategy=quote.strategy,
            pool=quote.route.steps[0].pool_address,
            amount_in=amount_in,
            amount_out=quote.amount_out,
        )
        return quote

    def find_all_routes(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> list[SwapQuote]:
        """Every viable single-pool quote, sorted by descending output."""
        quotes = []
        for match in matching_pools(pools, token_in, token_out):
            pool = match.pool
            if not pool.has_sufficient_liquidity(amount_in, match.a_to_b):
                logger.debug(
                    "pool_insufficient_liquidity",
                    pool=pool.address,
                    amount_in=amount_in,
                )
                continue
            try:
                step = evaluate_step(pool, amount_in, match.a_to_b)
            except RouterError as err:
                logger.debug("pool_quote_failed", pool=pool.address, error=str(err))
                continue
            quotes.append(SwapQuote.from_route(Route.single_step(step), SINGLE_POOL_STRATEGY))

        # Stable sort: equal outputs keep snapshot order
        quotes.sort(key=lambda q: q.amount_out, reverse=True)
        return quotes


__all__ = ["SinglePoolRouter"]
