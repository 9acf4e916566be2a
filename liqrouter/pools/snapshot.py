"""Pydantic models for JSON pool snapshots.

A snapshot is the point-in-time pool data handed to the router by the
account-fetching layer. Amounts are u64 and may be given as integers or
decimal strings:

    {
      "pools": [
        {"kind": "constant_product", "address": "pool1", "source": "Raydium",
         "tokenA": "SOL", "tokenB": "USDC", "reserveA": "1000000000",
         "reserveB": "50000000000", "feeBps": 25}
      ]
    }
"""

from __future__ import annotations

from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, Field, ValidationError

from liqrouter.constants import BPS_DENOMINATOR, DEFAULT_FEE_BPS, U64_MAX
from liqrouter.errors import PoolParseError
from liqrouter.pools.types import (
    AnyPool,
    ConcentratedLiquidityPool,
    ConstantProductPool,
    OrderBookPool,
    PoolKind,
)

logger = structlog.get_logger()

# Fee assumed when neither the snapshot nor the source table provides one
FALLBACK_FEE_BPS = 30


def validate_u64(value: Any) -> int:
    """Validate that a value is a u64 given as int or decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("U64 must be an integer, got bool")
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"U64 must be a decimal integer string: '{value}'") from err
    if not isinstance(value, int):
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")
    return value


# 64-bit unsigned integer, accepted as int or decimal string
U64 = Annotated[
    int,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer"),
]


class PoolData(BaseModel):
    """One pool entry in a snapshot."""

    model_config = {"populate_by_name": True}

    kind: PoolKind
    address: str = Field(min_length=1)
    source: str
    token_a: str = Field(alias="tokenA", min_length=1)
    token_b: str = Field(alias="tokenB", min_length=1)
    reserve_a: U64 = Field(alias="reserveA")
    reserve_b: U64 = Field(alias="reserveB")
    fee_bps: int | None = Field(default=None, alias="feeBps", ge=0, le=BPS_DENOMINATOR)
    best_bid: U64 | None = Field(default=None, alias="bestBid")
    best_ask: U64 | None = Field(default=None, alias="bestAsk")

    def to_pool(self) -> AnyPool:
        """Build the pool variant described by this entry.

        Raises:
            PoolParseError: If the entry does not describe a valid pool
        """
        try:
            if self.kind == PoolKind.ORDER_BOOK:
                if self.best_bid is None or self.best_ask is None:
                    raise PoolParseError(
                        f"Order book {self.address} requires bestBid and bestAsk"
                    )
                return OrderBookPool(
                    address=self.address,
                    source=self.source,
                    token_a=self.token_a,
                    token_b=self.token_b,
                    reserve_a=self.reserve_a,
                    reserve_b=self.reserve_b,
                    best_bid=self.best_bid,
                    best_ask=self.best_ask,
                )

            pool_cls = (
                ConstantProductPool
                if self.kind == PoolKind.CONSTANT_PRODUCT
                else ConcentratedLiquidityPool
            )
            return pool_cls(
                address=self.address,
                source=self.source,
                token_a=self.token_a,
                token_b=self.token_b,
                reserve_a=self.reserve_a,
                reserve_b=self.reserve_b,
                fee=self._resolve_fee(),
            )
        except ValueError as err:
            raise PoolParseError(f"Invalid pool {self.address}: {err}") from err

    def _resolve_fee(self) -> int:
        if self.fee_bps is not None:
            return self.fee_bps
        fee = DEFAULT_FEE_BPS.get(self.source, FALLBACK_FEE_BPS)
        logger.warning(
            "pool_fee_defaulted",
            pool=self.address,
            source=self.source,
            fee_bps=fee,
        )
        return fee


class PoolSnapshot(BaseModel):
    """Ordered collection of pool entries."""

    pools: list[PoolData] = Field(default_factory=list)

    @classmethod
    def from_json(cls, data: str | bytes) -> PoolSnapshot:
        """Parse a snapshot from JSON text.

        Raises:
            PoolParseError: If the document does not match the schema
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as err:
            raise PoolParseError(f"Invalid pool snapshot: {err}") from err

    def to_pools(self) -> tuple[AnyPool, ...]:
        """Build an immutable tuple of pools in snapshot order.

        Pools with an empty side are kept (routers skip them) but logged.

        Raises:
            PoolParseError: If any entry does not describe a valid pool
        """
        pools = tuple(entry.to_pool() for entry in self.pools)
        for pool in pools:
            if not pool.is_routable():
                logger.warning(
                    "pool_not_routable",
                    pool=pool.address,
                    reserve_a=pool.reserve_a,
                    reserve_b=pool.reserve_b,
                )
        logger.debug("snapshot_loaded", pool_count=len(pools))
        return pools


__all__ = ["PoolData", "PoolSnapshot", "U64", "validate_u64"]
