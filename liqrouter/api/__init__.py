"""HTTP API for the liquidity router."""
