"""API endpoints for the liquidity router."""

import asyncio
from functools import partial

import structlog
from fastapi import APIRouter, Depends, HTTPException

from liqrouter.api.models import QuoteRequest, QuoteResponse
from liqrouter.errors import ConfigError, NoRouteFound, PoolParseError
from liqrouter.pools.snapshot import PoolSnapshot
from liqrouter.routing.router import LiquidityRouter

logger = structlog.get_logger()

router = APIRouter()


def get_router() -> LiquidityRouter:
    """Dependency provider for the router instance.

    Override this in tests to inject a stub router:
        app.dependency_overrides[get_router] = lambda: stub_router

    Returns:
        A router using the default hop bound; requests supply their own.
    """
    return LiquidityRouter()


@router.post("/quote")
async def quote(
    request: QuoteRequest,
    router_instance: LiquidityRouter = Depends(get_router),
) -> QuoteResponse:
    """Quote a swap over the supplied pool snapshot.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Invalid pool, strategy or hop bound: 400
        - No route: 404
    """
    logger.info(
        "received_quote_request",
        token_in=request.token_in,
        token_out=request.token_out,
        amount_in=request.amount_in,
        strategy=request.strategy,
        max_hops=request.max_hops,
        pool_count=len(request.pools),
    )

    try:
        pools = PoolSnapshot(pools=request.pools).to_pools()
        # Routing is CPU-bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            None,
            partial(
                router_instance.quote,
                pools,
                request.token_in,
                request.token_out,
                request.amount_in,
                strategy=request.strategy,
                max_hops=request.max_hops,
            ),
        )
    except (ConfigError, PoolParseError) as err:
        logger.warning("invalid_quote_request", error=str(err))
        raise HTTPException(status_code=400, detail=str(err)) from err
    except NoRouteFound as err:
        logger.info("no_route_found", error=str(err))
        raise HTTPException(status_code=404, detail=str(err)) from err

    logger.info(
        "returning_quote",
        strategy=result.strategy,
        amount_out=result.amount_out,
        price_impact_bps=result.price_impact_bps,
    )
    return QuoteResponse.from_quote(result)
