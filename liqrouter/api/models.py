"""Request and response models for the quote API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from liqrouter.pools.snapshot import U64, PoolData
from liqrouter.routing.types import RouteStep, SwapQuote


class QuoteRequest(BaseModel):
    """A routing request together with the pool snapshot to route over."""

    model_config = {"populate_by_name": True}

    pools: list[PoolData]
    token_in: str = Field(alias="tokenIn", min_length=1)
    token_out: str = Field(alias="tokenOut", min_length=1)
    amount_in: U64 = Field(alias="amountIn")
    strategy: str = "all"
    max_hops: int = Field(default=2, alias="maxHops")


class RouteStepModel(BaseModel):
    """One swap of a quoted route."""

    model_config = {"populate_by_name": True}

    pool: str
    source: str
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    price_impact_bps: int = Field(alias="priceImpactBps")
    fee_bps: int = Field(alias="feeBps")

    @classmethod
    def from_step(cls, step: RouteStep) -> RouteStepModel:
        return cls(
            pool=step.pool_address,
            source=step.source,
            token_in=step.token_in,
            token_out=step.token_out,
            amount_in=str(step.amount_in),
            amount_out=str(step.amount_out),
            price_impact_bps=step.price_impact_bps,
            fee_bps=step.fee_bps,
        )


class QuoteResponse(BaseModel):
    """A quote as returned over HTTP; amounts are decimal strings."""

    model_config = {"populate_by_name": True}

    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    price_impact_bps: int = Field(alias="priceImpactBps")
    strategy: str
    shape: str
    hop_count: int = Field(alias="hopCount")
    steps: list[RouteStepModel]

    @classmethod
    def from_quote(cls, quote: SwapQuote) -> QuoteResponse:
        return cls(
            token_in=quote.token_in,
            token_out=quote.token_out,
            amount_in=str(quote.amount_in),
            amount_out=str(quote.amount_out),
            price_impact_bps=quote.price_impact_bps,
            strategy=quote.strategy,
            shape=quote.route.shape.value,
            hop_count=quote.route.hop_count,
            steps=[RouteStepModel.from_step(step) for step in quote.route.steps],
        )


__all__ = ["QuoteRequest", "QuoteResponse", "RouteStepModel"]
