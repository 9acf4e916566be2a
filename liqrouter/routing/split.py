"""Parallel split routing across pools that trade the same pair.

Constant-product slippage grows faster than linearly with volume, so
sending part of the input to each of several pools can beat the best
single pool. The search is deliberately simple:

- two pools: an 11-point grid over 0%, 10%, ..., 100% to the first pool
- three or more pools: an equal split, with the last pool taking the
  integer-division remainder

Pools with an empty side never take part in a split.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

import structlog

from liqrouter.constants import SPLIT_STEP_PERCENT, SPLIT_STRATEGY
from liqrouter.errors import NoRouteFound, RouterError
from liqrouter.pools.types import PoolInfo
from liqrouter.routing.matching import PoolMatch, evaluate_step, matching_pools
from liqrouter.routing.single import SinglePoolRouter
from liqrouter.routing.types import Route, RouteStep, SplitAllocation, SwapQuote

logger = structlog.get_logger()


@dataclass(frozen=True)
class _Leg:
    """Outcome of sending one share of the input to one pool."""

    match: PoolMatch
    percentage: int
    amount_in: int
    step: RouteStep | None
    failed: bool = False

    @property
    def amount_out(self) -> int:
        return self.step.amount_out if self.step is not None else 0


class SplitRouter:
    """Splits the input across directly-matching pools."""

    def __init__(self, single_router: SinglePoolRouter | None = None) -> None:
        self._single = single_router or SinglePoolRouter()

    def find_best_route(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> SwapQuote:
        """Find the best split of amount_in across matching pools.

        Raises:
            NoRouteFound: If no pool matches or no split produces output
        """
        quote, _ = self.find_best_split(pools, token_in, token_out, amount_in)
        return quote

    def find_best_split(
        self,
        pools: Sequence[PoolInfo],
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> tuple[SwapQuote, list[SplitAllocation]]:
        """Find the best split and report how the input was allocated.

        Returns:
            Tuple of (quote, allocations); allocations index into the
            snapshot and include routable pools that received nothing

        Raises:
            NoRouteFound: If no pool matches or no split produces output
        """
        matches = [
            match
            for match in matching_pools(pools, token_in, token_out)
            if match.pool.is_routable()
        ]

        if not matches:
            raise NoRouteFound(f"No routable direct pool for {token_in} -> {token_out}")

        if len(matches) == 1:
            # Nothing to split; keep the label uniform for callers
            quote = self._single.find_best_route(pools, token_in, token_out, amount_in)
            quote = replace(quote, strategy=SPLIT_STRATEGY)
            allocation = SplitAllocation(
                pool_index=matches[0].index,
                percentage=100,
                amount_in=amount_in,
                amount_out=quote.amount_out,
            )
            return quote, [allocation]

        if len(matches) == 2:
            legs = self._grid_search(matches[0], matches[1], amount_in)
        else:
            legs = self._equal_split(matches, amount_in)

        steps = [leg.step for leg in legs if leg.step is not None and leg.amount_in > 0]
        if not steps:
            raise NoRouteFound(f"Nothing to split for {token_in} -> {token_out}")
        route = Route.parallel(steps, amount_in)
        quote = SwapQuote.from_route(route, SPLIT_STRATEGY)
        allocations = [
            SplitAllocation(
                pool_index=leg.match.index,
                percentage=leg.percentage,
                amount_in=leg.amount_in,
                amount_out=leg.amount_out,
            )
            for leg in legs
        ]

        logger.info(
            "route_found",
            strategy=SPLIT_STRATEGY,
            pool_count=len(steps),
            allocations=[(a.pool_index, a.percentage) for a in allocations],
            amount_in=amount_in,
            amount_out=quote.amount_out,
        )
        return quote, allocations

    def _grid_search(self, first: PoolMatch, second: PoolMatch, amount_in: int) -> list[_Leg]:
        """Try every 10% split between two pools and keep the best total.

        A leg that errors or gets zero input contributes zero output to its
        trial. Ties keep the smallest share to the first pool.
        """
        best: list[_Leg] | None = None
        best_total = 0

        for percentage in range(0, 101, SPLIT_STEP_PERCENT):
            amount_first = amount_in * percentage // 100
            trial = [
                self._run_leg(first, percentage, amount_first),
                self._run_leg(second, 100 - percentage, amount_in - amount_first),
            ]
            total = sum(leg.amount_out for leg in trial)
            logger.debug("split_trial", percentage=percentage, amount_out=total)
            if total > best_total:
                best, best_total = trial, total

        if best is None:
            raise NoRouteFound("No split produced any output")
        if any(leg.failed for leg in best):
            # Every input unit must be accounted for by a priced step
            raise NoRouteFound("Best split depends on a pool that failed to price its share")
        return best

    def _equal_split(self, matches: list[PoolMatch], amount_in: int) -> list[_Leg]:
        """Divide the input evenly; the last pool absorbs the remainder.

        A pool that cannot price its share is dropped and the input is
        divided again among the remaining pools. Dropped pools are reported
        with no allocation.
        """
        active = list(matches)
        dropped: list[_Leg] = []

        while active:
            legs = self._divide(active, amount_in)
            failed = [leg for leg in legs if leg.failed]
            if not failed:
                return sorted(legs + dropped, key=lambda leg: leg.match.index)

            for leg in failed:
                logger.warning(
                    "split_leg_failed",
                    pool=leg.match.pool.address,
                    amount_in=leg.amount_in,
                )
                dropped.append(_Leg(match=leg.match, percentage=0, amount_in=0, step=None))
            active = [leg.match for leg in legs if not leg.failed]

        raise NoRouteFound("No pool could take an equal share of the input")

    def _divide(self, matches: list[PoolMatch], amount_in: int) -> list[_Leg]:
        count = len(matches)
        share = amount_in // count
        percentage = 100 // count

        legs = []
        for match in matches[:-1]:
            legs.append(self._run_leg(match, percentage, share))
        legs.append(
            self._run_leg(
                matches[-1],
                100 - percentage * (count - 1),
                amount_in - share * (count - 1),
            )
        )
        return legs

    def _run_leg(self, match: PoolMatch, percentage: int, amount_in: int) -> _Leg:
        if amount_in == 0:
            return _Leg(match=match, percentage=percentage, amount_in=0, step=None)
        try:
            step = evaluate_step(match.pool, amount_in, match.a_to_b)
        except RouterError as err:
            logger.debug(
                "split_leg_failed",
                pool=match.pool.address,
                amount_in=amount_in,
                error=str(err),
            )
            return _Leg(
                match=match, percentage=percentage, amount_in=amount_in, step=None, failed=True
            )
        return _Leg(match=match, percentage=percentage, amount_in=amount_in, step=step)


__all__ = ["SplitRouter"]
