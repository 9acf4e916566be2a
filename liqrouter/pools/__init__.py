"""Pool package.

Provides the closed set of pool variants, their calculators, source
factories and snapshot parsing.
"""

from .dispatch import calculate_output, get_calculator, has_sufficient_liquidity, price_impact_bps
from .snapshot import PoolData, PoolSnapshot
from .sources import (
    meteora_pool,
    orca_constant_product_pool,
    orca_whirlpool,
    phoenix_market,
    raydium_pool,
)
from .types import (
    AnyPool,
    ConcentratedLiquidityPool,
    ConstantProductPool,
    OrderBookPool,
    PoolInfo,
    PoolKind,
)

__all__ = [
    "AnyPool",
    "PoolInfo",
    "PoolKind",
    "ConstantProductPool",
    "ConcentratedLiquidityPool",
    "OrderBookPool",
    "PoolData",
    "PoolSnapshot",
    "calculate_output",
    "get_calculator",
    "has_sufficient_liquidity",
    "price_impact_bps",
    "raydium_pool",
    "orca_constant_product_pool",
    "orca_whirlpool",
    "meteora_pool",
    "phoenix_market",
]
