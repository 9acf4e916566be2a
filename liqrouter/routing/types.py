"""Value types produced by the routers.

A Route holds one or more RouteSteps in one of two shapes:

- sequential: a chain of swaps, where each step consumes exactly the
  previous step's output and the assets link end to end
- parallel: a split, where every step trades the same asset pair and the
  step inputs sum to the route's input

A single-step route is both; it is recorded as sequential.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from liqrouter.constants import BPS_DENOMINATOR


@dataclass(frozen=True)
class RouteStep:
    """One atomic swap through one pool."""

    pool_address: str
    source: str
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    price_impact_bps: int
    fee_bps: int


class RouteShape(str, Enum):
    """How a route's steps combine."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class Route:
    """Ordered or parallel collection of swap steps with aggregate amounts.

    Use the single_step/sequential/parallel constructors; they derive the
    aggregates. Direct construction validates the structural invariant of
    the given shape.
    """

    steps: tuple[RouteStep, ...]
    total_amount_in: int
    total_amount_out: int
    total_price_impact_bps: int
    shape: RouteShape = RouteShape.SEQUENTIAL

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("Route must have at least one step")
        if self.shape == RouteShape.SEQUENTIAL:
            self._validate_sequential()
        else:
            self._validate_parallel()

    def _validate_sequential(self) -> None:
        for prev, step in zip(self.steps, self.steps[1:], strict=False):
            if prev.token_out != step.token_in:
                raise ValueError(
                    f"Broken chain: {prev.token_out} does not feed {step.token_in}"
                )
            if prev.amount_out != step.amount_in:
                raise ValueError(
                    f"Broken chain: step output {prev.amount_out} != next input {step.amount_in}"
                )
        if self.total_amount_in != self.steps[0].amount_in:
            raise ValueError("Sequential route input must equal first step input")
        if self.total_amount_out != self.steps[-1].amount_out:
            raise ValueError("Sequential route output must equal last step output")

    def _validate_parallel(self) -> None:
        pair = (self.steps[0].token_in, self.steps[0].token_out)
        for step in self.steps:
            if (step.token_in, step.token_out) != pair:
                raise ValueError(
                    f"Parallel steps must share one pair: {pair} vs "
                    f"({step.token_in}, {step.token_out})"
                )
        if sum(step.amount_in for step in self.steps) != self.total_amount_in:
            raise ValueError("Parallel step inputs must sum to the route input")
        if sum(step.amount_out for step in self.steps) != self.total_amount_out:
            raise ValueError("Parallel step outputs must sum to the route output")

    @classmethod
    def single_step(cls, step: RouteStep) -> Route:
        """Route through exactly one pool."""
        return cls(
            steps=(step,),
            total_amount_in=step.amount_in,
            total_amount_out=step.amount_out,
            total_price_impact_bps=step.price_impact_bps,
        )

    @classmethod
    def sequential(cls, steps: Sequence[RouteStep]) -> Route:
        """Chained route; impact is the capped sum of step impacts.

        Raises:
            ValueError: If steps is empty or the chain is broken
        """
        if not steps:
            raise ValueError("Route must have at least one step")
        impact = min(sum(step.price_impact_bps for step in steps), BPS_DENOMINATOR)
        return cls(
            steps=tuple(steps),
            total_amount_in=steps[0].amount_in,
            total_amount_out=steps[-1].amount_out,
            total_price_impact_bps=impact,
        )

    @classmethod
    def parallel(cls, steps: Sequence[RouteStep], total_amount_in: int) -> Route:
        """Split route; impact is the input-weighted mean of step impacts.

        Raises:
            ValueError: If steps is empty, mix asset pairs or do not sum to
                total_amount_in
        """
        if not steps:
            raise ValueError("Route must have at least one step")
        if total_amount_in > 0:
            weighted = sum(step.price_impact_bps * step.amount_in for step in steps)
            impact = weighted // total_amount_in
        else:
            impact = 0
        return cls(
            steps=tuple(steps),
            total_amount_in=total_amount_in,
            total_amount_out=sum(step.amount_out for step in steps),
            total_price_impact_bps=impact,
            shape=RouteShape.PARALLEL,
        )

    @property
    def hop_count(self) -> int:
        """Number of sequential swaps (1 for any split)."""
        if self.shape == RouteShape.PARALLEL:
            return 1
        return len(self.steps)

    @property
    def is_direct(self) -> bool:
        """True if the route trades the pair directly with no intermediate asset."""
        return self.hop_count == 1

    @property
    def token_in(self) -> str:
        return self.steps[0].token_in

    @property
    def token_out(self) -> str:
        return self.steps[-1].token_out

    @property
    def effective_price(self) -> Decimal:
        """Output units received per input unit."""
        if self.total_amount_in == 0:
            return Decimal(0)
        return Decimal(self.total_amount_out) / Decimal(self.total_amount_in)


@dataclass(frozen=True)
class SwapQuote:
    """Result of a routing computation."""

    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    price_impact_bps: int
    route: Route
    strategy: str

    @classmethod
    def from_route(cls, route: Route, strategy: str) -> SwapQuote:
        return cls(
            token_in=route.token_in,
            token_out=route.token_out,
            amount_in=route.total_amount_in,
            amount_out=route.total_amount_out,
            price_impact_bps=route.total_price_impact_bps,
            route=route,
            strategy=strategy,
        )

    def better_than(self, other: SwapQuote) -> bool:
        """Strictly more output. Equal outputs are not better, whatever the impact."""
        return self.amount_out > other.amount_out


def best_quote(quotes: Iterable[SwapQuote]) -> SwapQuote | None:
    """Pick the quote with the most output; ties keep the first seen."""
    best: SwapQuote | None = None
    for quote in quotes:
        if best is None or quote.better_than(best):
            best = quote
    return best


@dataclass(frozen=True)
class SplitAllocation:
    """One leg of a split: how much went to which matching pool."""

    pool_index: int
    percentage: int
    amount_in: int
    amount_out: int


__all__ = [
    "Route",
    "RouteShape",
    "RouteStep",
    "SplitAllocation",
    "SwapQuote",
    "best_quote",
]
