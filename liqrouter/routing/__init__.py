"""Routing package.

Provides the three routing strategies, the route/quote model and the
strategy facade.
"""

from liqrouter.routing.multihop import MultiHopRouter, multi_hop_strategy
from liqrouter.routing.pathfinding import PathFinder, PoolEdge, PoolGraph
from liqrouter.routing.router import LiquidityRouter, Strategy
from liqrouter.routing.single import SinglePoolRouter
from liqrouter.routing.split import SplitRouter
from liqrouter.routing.types import (
    Route,
    RouteShape,
    RouteStep,
    SplitAllocation,
    SwapQuote,
    best_quote,
)

__all__ = [
    "LiquidityRouter",
    "MultiHopRouter",
    "PathFinder",
    "PoolEdge",
    "PoolGraph",
    "Route",
    "RouteShape",
    "RouteStep",
    "SinglePoolRouter",
    "SplitAllocation",
    "SplitRouter",
    "Strategy",
    "SwapQuote",
    "best_quote",
    "multi_hop_strategy",
]
