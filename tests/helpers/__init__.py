"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token mints and abstract graph tokens
- factories: Pool, step and quote factory functions
"""

from tests.helpers.constants import (
    RAY,
    SOL,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    USDC,
    USDT,
)
from tests.helpers.factories import (
    make_cl_pool,
    make_order_book,
    make_pool,
    make_quote,
    make_step,
)

__all__ = [
    # Constants
    "SOL",
    "USDC",
    "USDT",
    "RAY",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    # Factories
    "make_pool",
    "make_cl_pool",
    "make_order_book",
    "make_step",
    "make_quote",
]
