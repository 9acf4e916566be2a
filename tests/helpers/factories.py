"""Factory functions for creating test pools and quotes.

Usage:
    from tests.helpers import make_pool
    # or
    from tests.helpers.factories import make_pool, make_order_book

    pool = make_pool(TOKEN_A, TOKEN_B, 1_000_000_000, 50_000_000_000)
"""

from liqrouter.constants import RAYDIUM
from liqrouter.pools.types import ConcentratedLiquidityPool, ConstantProductPool, OrderBookPool
from liqrouter.routing.types import Route, RouteStep, SwapQuote
from tests.helpers.constants import TOKEN_A, TOKEN_B

# Global counter for unique pool addresses
_address_counter = 0


def _next_address(prefix: str) -> str:
    global _address_counter
    _address_counter += 1
    return f"{prefix}-{_address_counter}"


def make_pool(
    token_a: str = TOKEN_A,
    token_b: str = TOKEN_B,
    reserve_a: int = 1_000_000_000,
    reserve_b: int = 50_000_000_000,
    fee_bps: int = 25,
    address: str | None = None,
    source: str = RAYDIUM,
) -> ConstantProductPool:
    """Create a constant product pool with sensible defaults.

    Args:
        token_a: First token (default: TOKEN_A)
        token_b: Second token (default: TOKEN_B)
        reserve_a: Reserve of token_a (default: 1e9)
        reserve_b: Reserve of token_b (default: 5e10)
        fee_bps: Fee in basis points (default: 25)
        address: Pool address (default: auto-generated)
        source: Source name (default: Raydium)

    Returns:
        ConstantProductPool ready for testing
    """
    return ConstantProductPool(
        address=address or _next_address("cp"),
        source=source,
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=fee_bps,
    )


def make_cl_pool(
    token_a: str = TOKEN_A,
    token_b: str = TOKEN_B,
    reserve_a: int = 1_000_000_000,
    reserve_b: int = 50_000_000_000,
    fee_bps: int = 30,
    address: str | None = None,
) -> ConcentratedLiquidityPool:
    """Create a concentrated-liquidity pool."""
    return ConcentratedLiquidityPool(
        address=address or _next_address("cl"),
        source="Orca",
        token_a=token_a,
        token_b=token_b,
        reserve_a=reserve_a,
        reserve_b=reserve_b,
        fee=fee_bps,
    )


def make_order_book(
    token_a: str = TOKEN_A,
    token_b: str = TOKEN_B,
    liquidity_a: int = 1_000_000_000,
    liquidity_b: int = 50_000_000_000,
    best_bid: int = 49_000_000,
    best_ask: int = 51_000_000,
    address: str | None = None,
) -> OrderBookPool:
    """Create an order book market (prices in micro-units of B per A)."""
    return OrderBookPool(
        address=address or _next_address("ob"),
        source="Phoenix",
        token_a=token_a,
        token_b=token_b,
        reserve_a=liquidity_a,
        reserve_b=liquidity_b,
        best_bid=best_bid,
        best_ask=best_ask,
    )


def make_step(
    token_in: str = TOKEN_A,
    token_out: str = TOKEN_B,
    amount_in: int = 1_000_000,
    amount_out: int = 50_000_000,
    price_impact_bps: int = 25,
    fee_bps: int = 25,
    pool_address: str = "pool",
) -> RouteStep:
    """Create a RouteStep without pricing anything."""
    return RouteStep(
        pool_address=pool_address,
        source=RAYDIUM,
        token_in=token_in,
        token_out=token_out,
        amount_in=amount_in,
        amount_out=amount_out,
        price_impact_bps=price_impact_bps,
        fee_bps=fee_bps,
    )


def make_quote(amount_out: int = 50_000_000, strategy: str = "single_pool") -> SwapQuote:
    """Create a single-step quote with the given output."""
    step = make_step(amount_out=amount_out)
    return SwapQuote.from_route(Route.single_step(step), strategy)
