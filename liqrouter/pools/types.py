"""Pool variant definitions.

Pools form a closed set of variants tagged by PoolKind. Every variant
shares the PoolInfo fields; pricing is dispatched on the tag by
liqrouter.pools.dispatch. Pools are frozen: swaps are simulated against a
snapshot and never applied to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from liqrouter.constants import BPS_DENOMINATOR
from liqrouter.safe_int import S


class PoolKind(str, Enum):
    """Pricing model of a liquidity source."""

    CONSTANT_PRODUCT = "constant_product"
    CONCENTRATED_LIQUIDITY = "concentrated_liquidity"
    ORDER_BOOK = "order_book"


@dataclass(frozen=True)
class PoolInfo(ABC):
    """Fields common to every liquidity source.

    Abstract: each variant supplies its fee and its PoolKind tag.
    """

    address: str
    source: str
    token_a: str
    token_b: str
    reserve_a: int
    reserve_b: int

    kind: ClassVar[PoolKind]

    def __post_init__(self) -> None:
        for name in ("reserve_a", "reserve_b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not S(value).is_u64():
                raise ValueError(f"{name} must be a u64 integer, got {value!r}")

    @property
    @abstractmethod
    def fee_bps(self) -> int:
        """Fee charged on the input side, in basis points."""

    def get_reserves(self, a_to_b: bool) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if a_to_b:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a

    def get_tokens(self, a_to_b: bool) -> tuple[str, str]:
        """Get tokens ordered as (token_in, token_out)."""
        if a_to_b:
            return self.token_a, self.token_b
        return self.token_b, self.token_a

    def direction_for(self, token_in: str, token_out: str) -> bool | None:
        """Direction flag for swapping token_in into token_out.

        Returns:
            True for A->B, False for B->A, None if the pool does not
            price exactly this pair
        """
        if self.token_a == token_in and self.token_b == token_out:
            return True
        if self.token_b == token_in and self.token_a == token_out:
            return False
        return None

    def is_routable(self) -> bool:
        """A pool with an empty side cannot be routed through."""
        return self.reserve_a > 0 and self.reserve_b > 0

    def calculate_output(self, amount_in: int, a_to_b: bool) -> tuple[int, int]:
        """Simulate a swap; returns (amount_out, price_impact_bps)."""
        from liqrouter.pools.dispatch import calculate_output

        return calculate_output(self, amount_in, a_to_b)

    def price_impact_bps(self, amount_in: int, a_to_b: bool) -> int:
        """Price impact of swapping amount_in in the given direction."""
        from liqrouter.pools.dispatch import price_impact_bps

        return price_impact_bps(self, amount_in, a_to_b)

    def has_sufficient_liquidity(self, amount_in: int, a_to_b: bool) -> bool:
        """Whether the pool can absorb amount_in without pathological slippage."""
        from liqrouter.pools.dispatch import has_sufficient_liquidity

        return has_sufficient_liquidity(self, amount_in, a_to_b)


def _check_fee(fee_bps: int) -> None:
    if not isinstance(fee_bps, int) or not 0 <= fee_bps <= BPS_DENOMINATOR:
        raise ValueError(f"fee_bps must be between 0 and {BPS_DENOMINATOR}, got {fee_bps!r}")


@dataclass(frozen=True)
class ConstantProductPool(PoolInfo):
    """Classic x * y = k pool with a fixed fee."""

    # Fee in basis points (25 = 0.25%)
    fee: int = 25

    kind: ClassVar[PoolKind] = PoolKind.CONSTANT_PRODUCT

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_fee(self.fee)

    @property
    def fee_bps(self) -> int:
        return self.fee


@dataclass(frozen=True)
class ConcentratedLiquidityPool(PoolInfo):
    """Concentrated-liquidity pool approximated as constant product.

    reserve_a/reserve_b hold the virtual reserves of the active range.
    """

    fee: int = 30

    kind: ClassVar[PoolKind] = PoolKind.CONCENTRATED_LIQUIDITY

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_fee(self.fee)

    @property
    def fee_bps(self) -> int:
        return self.fee


@dataclass(frozen=True)
class OrderBookPool(PoolInfo):
    """Order book market priced at the top of book.

    reserve_a/reserve_b hold the quantity available at best bid/ask.
    Prices are micro-units of token B per unit of token A (PRICE_SCALE).
    """

    best_bid: int = 0
    best_ask: int = 0

    kind: ClassVar[PoolKind] = PoolKind.ORDER_BOOK

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("best_bid", "best_ask"):
            value = getattr(self, name)
            if not isinstance(value, int) or not S(value).is_u64():
                raise ValueError(f"{name} must be a u64 integer, got {value!r}")

    @property
    def spread_bps(self) -> int:
        """Bid/ask spread relative to the bid; a book with no bid is 100% spread."""
        if self.best_bid == 0:
            return BPS_DENOMINATOR
        spread = S(self.best_ask).saturating_sub(self.best_bid)
        return (spread * BPS_DENOMINATOR // self.best_bid).min(BPS_DENOMINATOR).value

    @property
    def fee_bps(self) -> int:
        # No fixed fee; the spread is what a taker pays
        return self.spread_bps


# Union type for all pool variants
AnyPool: TypeAlias = ConstantProductPool | ConcentratedLiquidityPool | OrderBookPool


__all__ = [
    "AnyPool",
    "ConcentratedLiquidityPool",
    "ConstantProductPool",
    "OrderBookPool",
    "PoolInfo",
    "PoolKind",
]
