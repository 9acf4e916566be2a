"""Tag-based dispatch from pool variants to their calculators.

The variant set is closed: each PoolKind maps to exactly one calculator,
so routing code never branches on concrete pool classes.
"""

from __future__ import annotations

from liqrouter.pools.amm import PoolCalculator, constant_product_amm, order_book_amm
from liqrouter.pools.types import PoolInfo, PoolKind

_CALCULATORS: dict[PoolKind, PoolCalculator] = {
    PoolKind.CONSTANT_PRODUCT: constant_product_amm,
    # Concentrated liquidity is priced as constant product over virtual reserves
    PoolKind.CONCENTRATED_LIQUIDITY: constant_product_amm,
    PoolKind.ORDER_BOOK: order_book_amm,
}


def get_calculator(pool: PoolInfo) -> PoolCalculator:
    """Get the calculator for a pool by its kind tag.

    Raises:
        TypeError: If the pool's kind has no calculator
    """
    try:
        return _CALCULATORS[pool.kind]
    except (KeyError, AttributeError) as err:
        raise TypeError(f"No calculator for pool type {type(pool).__name__}") from err


def calculate_output(pool: PoolInfo, amount_in: int, a_to_b: bool) -> tuple[int, int]:
    """Simulate an exact-input swap through any pool variant.

    Returns:
        Tuple of (amount_out, price_impact_bps)

    Raises:
        RouterError: Calculator errors propagate unchanged
    """
    return get_calculator(pool).calculate_output(pool, amount_in, a_to_b)


def price_impact_bps(pool: PoolInfo, amount_in: int, a_to_b: bool) -> int:
    """Price impact of an exact-input swap through any pool variant."""
    return get_calculator(pool).price_impact_bps(pool, amount_in, a_to_b)


def has_sufficient_liquidity(pool: PoolInfo, amount_in: int, a_to_b: bool) -> bool:
    """Whether any pool variant can absorb the swap."""
    return get_calculator(pool).has_sufficient_liquidity(pool, amount_in, a_to_b)


__all__ = ["calculate_output", "get_calculator", "has_sufficient_liquidity", "price_impact_bps"]
