"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from liqrouter.api.main import app
from liqrouter.pools.types import ConstantProductPool
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, make_pool


@pytest.fixture
def ab_pool() -> ConstantProductPool:
    """A 1e9 / 5e10 TOKEN_A/TOKEN_B pool with a 25 bps fee."""
    return make_pool(TOKEN_A, TOKEN_B, 1_000_000_000, 50_000_000_000, address="ab")


@pytest.fixture
def chain_pools() -> tuple[ConstantProductPool, ...]:
    """A -> B -> C -> D chain, one pool per link."""
    return (
        make_pool(TOKEN_A, TOKEN_B, 1_000_000_000, 50_000_000_000, address="ab"),
        make_pool(TOKEN_B, TOKEN_C, 50_000_000_000, 2_000_000_000, address="bc"),
        make_pool(TOKEN_C, TOKEN_D, 2_000_000_000, 100_000_000_000, address="cd"),
    )


@pytest.fixture
def twin_pools() -> tuple[ConstantProductPool, ConstantProductPool]:
    """Two identical 5e8 / 5e8 pools for the same pair."""
    return (
        make_pool(TOKEN_A, TOKEN_B, 500_000_000, 500_000_000, address="twin-1"),
        make_pool(TOKEN_A, TOKEN_B, 500_000_000, 500_000_000, address="twin-2"),
    )


@pytest.fixture
def client() -> Iterator[TestClient]:
    """HTTP client for the API app; dependency overrides are reset afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def pool_json() -> list[dict[str, object]]:
    """Snapshot entries for an A/B pool pair and a B/C link, as the API accepts them."""
    return [
        {
            "kind": "constant_product",
            "address": "ab-raydium",
            "source": "Raydium",
            "tokenA": TOKEN_A,
            "tokenB": TOKEN_B,
            "reserveA": "1000000000",
            "reserveB": "50000000000",
            "feeBps": 25,
        },
        {
            "kind": "concentrated_liquidity",
            "address": "ab-whirlpool",
            "source": "Orca",
            "tokenA": TOKEN_A,
            "tokenB": TOKEN_B,
            "reserveA": 1_500_000_000,
            "reserveB": 75_000_000_000,
            "feeBps": 10,
        },
        {
            "kind": "constant_product",
            "address": "bc-orca",
            "source": "Orca",
            "tokenA": TOKEN_B,
            "tokenB": TOKEN_C,
            "reserveA": "50000000000",
            "reserveB": "2000000000",
        },
    ]
