"""Liquidity Router - best-execution routing across AMM and order book pools."""

from liqrouter.routing.router import LiquidityRouter, Strategy
from liqrouter.routing.types import Route, RouteStep, SwapQuote

__version__ = "0.1.0"
__all__ = ["LiquidityRouter", "Route", "RouteStep", "Strategy", "SwapQuote", "__version__"]
