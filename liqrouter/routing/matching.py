"""Helpers shared by the routers: pool matching and step evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from liqrouter.pools.types import PoolInfo
from liqrouter.routing.types import RouteStep


@dataclass(frozen=True)
class PoolMatch:
    """A pool that prices the requested pair, with its position and direction."""

    index: int
    pool: PoolInfo
    a_to_b: bool


def matching_pools(pools: Sequence[PoolInfo], token_in: str, token_out: str) -> list[PoolMatch]:
    """Pools whose asset pair is exactly {token_in, token_out}, in snapshot order."""
    matches = []
    for index, pool in enumerate(pools):
        a_to_b = pool.direction_for(token_in, token_out)
        if a_to_b is not None:
            matches.append(PoolMatch(index=index, pool=pool, a_to_b=a_to_b))
    return matches


def evaluate_step(pool: PoolInfo, amount_in: int, a_to_b: bool) -> RouteStep:
    """Simulate one swap and record it as a RouteStep.

    Raises:
        RouterError: If the pool cannot price the swap
    """
    amount_out, impact = pool.calculate_output(amount_in, a_to_b)
    token_in, token_out = pool.get_tokens(a_to_b)
    return RouteStep(
        pool_address=pool.address,
        source=pool.source,
        token_in=token_in,
        token_out=token_out,
        amount_in=amount_in,
        amount_out=amount_out,
        price_impact_bps=impact,
        fee_bps=pool.fee_bps,
    )


__all__ = ["PoolMatch", "evaluate_step", "matching_pools"]
