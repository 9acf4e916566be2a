"""Swap calculators for each pricing model.

ConstantProductAMM prices constant-product and concentrated-liquidity
pools through the fixed-point calculator. OrderBookAMM prices an order
book at the top of book: linear in the input, capped by the quantity
resting on the opposite side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from liqrouter import calculator
from liqrouter.constants import PRICE_SCALE
from liqrouter.errors import InsufficientLiquidity, MathOverflow, RouterError
from liqrouter.safe_int import S, SafeIntError

if TYPE_CHECKING:
    from liqrouter.pools.types import OrderBookPool, PoolInfo


@runtime_checkable
class PoolCalculator(Protocol):
    """Protocol for pool swap calculators.

    Every method takes the pool and a direction flag (True = A->B), making
    the interface uniform regardless of the pricing model.
    """

    def calculate_output(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> tuple[int, int]:
        """Simulate an exact-input swap.

        Returns:
            Tuple of (amount_out, price_impact_bps)

        Raises:
            RouterError: If the swap cannot be priced
        """
        ...

    def price_impact_bps(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> int:
        """Price impact of an exact-input swap, in basis points."""
        ...

    def has_sufficient_liquidity(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> bool:
        """Whether the pool can absorb the swap."""
        ...


class ConstantProductAMM:
    """Constant product pricing (x * y = k) with the fee on the input side."""

    def calculate_output(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> tuple[int, int]:
        reserve_in, reserve_out = pool.get_reserves(a_to_b)
        amount_out = calculator.amount_out(amount_in, reserve_in, reserve_out, pool.fee_bps)
        impact = calculator.price_impact_bps(amount_in, amount_out, reserve_in, reserve_out)
        return amount_out, impact

    def price_impact_bps(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> int:
        _, impact = self.calculate_output(pool, amount_in, a_to_b)
        return impact

    def has_sufficient_liquidity(self, pool: PoolInfo, amount_in: int, a_to_b: bool) -> bool:
        """Reject swaps whose output would take half or more of the opposite reserve.

        This is a conservative guard against pathological slippage, not a
        protocol limit.
        """
        _, reserve_out = pool.get_reserves(a_to_b)
        try:
            amount_out, _ = self.calculate_output(pool, amount_in, a_to_b)
        except RouterError:
            return False
        return amount_out < reserve_out // 2


class OrderBookAMM:
    """Top-of-book pricing for order book markets.

    - Sell A (A->B): amount_out = amount_in * best_bid / PRICE_SCALE
    - Buy A (B->A):  amount_out = amount_in * PRICE_SCALE / best_ask

    The quantity resting on the opposite side is the liquidity ceiling.
    The spread is reported as both fee and price impact.
    """

    def calculate_output(
        self, pool: OrderBookPool, amount_in: int, a_to_b: bool
    ) -> tuple[int, int]:
        if a_to_b:
            available, price = pool.reserve_b, pool.best_bid
        else:
            available, price = pool.reserve_a, pool.best_ask

        if price == 0:
            raise InsufficientLiquidity(f"Order book {pool.address} has no resting orders")

        try:
            if a_to_b:
                scaled = (S(amount_in).check_width(64) * S(price)).check_width(128)
                amount_out = (scaled // PRICE_SCALE).to_u64()
            else:
                scaled = (S(amount_in).check_width(64) * PRICE_SCALE).check_width(128)
                amount_out = (scaled // price).to_u64()
        except SafeIntError as err:
            raise MathOverflow(f"Math overflow in order book pricing: {err}") from err

        if amount_out > available:
            raise InsufficientLiquidity(
                f"Order book {pool.address} has {available} available, {amount_out} requested"
            )

        return amount_out, pool.spread_bps

    def price_impact_bps(self, pool: OrderBookPool, amount_in: int, a_to_b: bool) -> int:
        _ = (amount_in, a_to_b)
        return pool.spread_bps

    def has_sufficient_liquidity(self, pool: OrderBookPool, amount_in: int, a_to_b: bool) -> bool:
        try:
            self.calculate_output(pool, amount_in, a_to_b)
        except RouterError:
            return False
        return True


# Singleton instances
constant_product_amm = ConstantProductAMM()
order_book_amm = OrderBookAMM()

__all__ = [
    "ConstantProductAMM",
    "OrderBookAMM",
    "PoolCalculator",
    "constant_product_amm",
    "order_book_amm",
]
