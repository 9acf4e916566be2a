"""Multi-hop routing through intermediate assets."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from liqrouter.constants import MULTI_HOP_STRATEGY_PREFIX
from liqrouter.errors import NoRouteFound, RouterError
from liqrouter.pools.types import PoolInfo
from liqrouter.routing.matching import evaluate_step
from liqrouter.routing.pathfinding import Path, PathFinder, validate_max_hops
from liqrouter.routing.types import Route, SwapQuote

logger = structlog.get_logger()


def multi_hop_strategy(hop_count: int) -> str:
    """Strategy label for a chain of hop_count swaps, e.g. "multi_hop_2"."""
    return f"{MULTI_HOP_STRATEGY_PREFIX}_{hop_count}"


class MultiHopRouter:
    """Searches the pool multigraph for chains of swaps.

    Every simple path within the hop bound is evaluated by feeding each
    step's output into the next step. A path with any failing step is
    discarded; the best surviving path wins.
    """

    def find_best_route(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
        max_hops: int,
        finder: PathFinder | None = None,
    ) -> SwapQuote:
        """Find the best chained route within max_hops swaps.

        Args:
            pools: Pool snapshot
            token_in: Asset being sold
            token_out: Asset being bought
            amount_in: Exact input amount
            max_hops: Hop bound, 1 to 3
            finder: Optional PathFinder caching the graph of this snapshot;
                ignored if it was built for different pools

        Returns:
            Quote for the best path; ties keep the path found first

        Raises:
            ConfigError: If max_hops is outside 1..3
            NoRouteFound: If no path exists or every path fails
        """
        validate_max_hops(max_hops)

        if finder is None or not finder.serves(pools):
            finder = PathFinder(pools)
        paths = finder.find_paths(token_in, token_out, max_hops)

        if not paths:
            raise NoRouteFound(
                f"No path from {token_in} to {token_out} within {max_hops} hops"
            )

        best: SwapQuote | None = None
        for path in paths:
            try:
                quote = self.evaluate_path(path, finder.pools, amount_in)
            except RouterError as err:
                logger.debug(
                    "path_discarded",
                    pools=[finder.pools[edge.pool_index].address for edge in path],
                    error=str(err),
                )
                continue
            if best is None or quote.better_than(best):
                best = quote

        if best is None:
            raise NoRouteFound(f"All {len(paths)} paths from {token_in} to {token_out} failed")

        logger.info(
            "route_found",
            strategy=best.strategy,
            candidates=len(paths),
            path=[step.token_in for step in best.route.steps] + [best.token_out],
            amount_in=amount_in,
            amount_out=best.amount_out,
        )
        return best

    def evaluate_path(
        self, path: Path, pools: Sequence[PoolInfo], amount_in: int
    ) -> SwapQuote:
        """Run amount_in through every edge of a path in order.

        Raises:
            RouterError: If any step cannot be priced
        """
        steps = []
        current_amount = amount_in
        for edge in path:
            step = evaluate_step(pools[edge.pool_index], current_amount, edge.a_to_b)
            steps.append(step)
            current_amount = step.amount_out

        if not steps:
            raise NoRouteFound("Empty path")

        return SwapQuote.from_route(Route.sequential(steps), multi_hop_strategy(len(path)))


__all__ = ["MultiHopRouter", "multi_hop_strategy"]
