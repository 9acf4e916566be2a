"""Protocol constants for the liquidity router.

Centralizes numeric bounds and per-source fee defaults.
"""

# Basis-point denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Native word bound for fixed-point math; intermediates are checked at 128 bits
U64_MAX = 2**64 - 1

# Order book prices are quoted in micro-units of token B per unit of token A
PRICE_SCALE = 1_000_000

# Hop bound accepted by multi-hop routing
MIN_HOPS = 1
MAX_HOPS = 3

# Two-pool split search step (percent)
SPLIT_STEP_PERCENT = 10

# Source names
RAYDIUM = "Raydium"
ORCA = "Orca"
METEORA = "Meteora"
PHOENIX = "Phoenix"

# Default fees per source, in basis points
RAYDIUM_FEE_BPS = 25
ORCA_CONSTANT_PRODUCT_FEE_BPS = 30
DEFAULT_FEE_BPS = {
    RAYDIUM: RAYDIUM_FEE_BPS,
    ORCA: ORCA_CONSTANT_PRODUCT_FEE_BPS,
    METEORA: 20,
}

# Strategy labels reported on quotes
SINGLE_POOL_STRATEGY = "single_pool"
SPLIT_STRATEGY = "split"
MULTI_HOP_STRATEGY_PREFIX = "multi_hop"

# Default slippage tolerance for execution (1%)
DEFAULT_SLIPPAGE_BPS = 100
