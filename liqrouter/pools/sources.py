"""Factories for the supported liquidity sources.

Each source maps onto one pool variant with its protocol defaults.
"""

from __future__ import annotations

from liqrouter.constants import (
    METEORA,
    ORCA,
    ORCA_CONSTANT_PRODUCT_FEE_BPS,
    PHOENIX,
    RAYDIUM,
    RAYDIUM_FEE_BPS,
)
from liqrouter.pools.types import ConcentratedLiquidityPool, ConstantProductPool, OrderBookPool


def raydium_pool(
    address: str, token_a: str, token_b: str, reserve_a: int, reserve_b: int
) -> ConstantProductPool:
    """Raydium AMM v4 pool (constant product, 0.25% fee)."""
    return ConstantProductPool(
        address=address,
        source=RAYDIUM,
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=RAYDIUM_FEE_BPS,
    )


def orca_constant_product_pool(
    address: str, token_a: str, token_b: str, reserve_a: int, reserve_b: int
) -> ConstantProductPool:
    """Orca legacy constant product pool (0.3% fee)."""
    return ConstantProductPool(
        address=address,
        source=ORCA,
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=ORCA_CONSTANT_PRODUCT_FEE_BPS,
    )


def orca_whirlpool(
    address: str,
    token_a: str,
    token_b: str,
    reserve_a: int,
    reserve_b: int,
    fee_bps: int,
) -> ConcentratedLiquidityPool:
    """Orca Whirlpool (concentrated liquidity, fee tier set per pool)."""
    return ConcentratedLiquidityPool(
        address=address,
        source=ORCA,
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=fee_bps,
    )


def meteora_pool(
    address: str,
    token_a: str,
    token_b: str,
    reserve_a: int,
    reserve_b: int,
    fee_bps: int,
) -> ConcentratedLiquidityPool:
    """Meteora dynamic pool, priced as constant product over its reserves."""
    return ConcentratedLiquidityPool(
        address=address,
        source=METEORA,
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=fee_bps,
    )


def phoenix_market(
    address: str,
    token_a: str,
    token_b: str,
    liquidity_a: int,
    liquidity_b: int,
    best_bid: int,
    best_ask: int,
) -> OrderBookPool:
    """Phoenix order book market.

    Args:
        liquidity_a: Base quantity resting at the best ask
        liquidity_b: Quote quantity resting at the best bid
        best_bid: Best bid in micro-units of B per unit of A
        best_ask: Best ask in micro-units of B per unit of A
    """
    return OrderBookPool(
        address=address,
        source=PHOENIX,
        token_a=token_a,
        token_b=token_b,
        reserve_a=liquidity_a,
        reserve_b=liquidity_b,
        best_bid=best_bid,
        best_ask=best_ask,
    )


__all__ = [
    "meteora_pool",
    "orca_constant_product_pool",
    "orca_whirlpool",
    "phoenix_market",
    "raydium_pool",
]
