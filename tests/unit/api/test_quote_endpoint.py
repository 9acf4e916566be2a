"""Unit tests for the quote API."""

from liqrouter import __version__
from liqrouter.api.endpoints import get_router
from liqrouter.api.main import app
from liqrouter.errors import NoRouteFound
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D


def make_request(pools, **overrides):
    request = {
        "pools": pools,
        "tokenIn": TOKEN_A,
        "tokenOut": TOKEN_B,
        "amountIn": "1000000",
    }
    request.update(overrides)
    return request


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestQuote:
    """Tests for successful quotes."""

    def test_single_pool_quote(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json, strategy="single"))
        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "single_pool"
        assert data["tokenIn"] == TOKEN_A
        assert data["tokenOut"] == TOKEN_B
        assert data["amountIn"] == "1000000"
        assert int(data["amountOut"]) > 0
        assert data["shape"] == "sequential"
        assert data["hopCount"] == 1
        # The deeper, cheaper whirlpool wins
        assert data["steps"][0]["pool"] == "ab-whirlpool"
        assert data["steps"][0]["feeBps"] == 10

    def test_all_strategies(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json))
        assert response.status_code == 200
        assert response.json()["strategy"] in {"single_pool", "split", "multi_hop_1"}

    def test_split_quote_steps_sum_to_input(self, client, pool_json):
        request = make_request(pool_json, strategy="split", amountIn=100_000_000)
        response = client.post("/quote", json=request)
        assert response.status_code == 200
        data = response.json()
        assert data["shape"] == "parallel"
        assert sum(int(step["amountIn"]) for step in data["steps"]) == 100_000_000

    def test_multi_hop_quote(self, client, pool_json):
        request = make_request(pool_json, tokenOut=TOKEN_C, strategy="multihop", maxHops=2)
        response = client.post("/quote", json=request)
        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "multi_hop_2"
        assert [step["tokenOut"] for step in data["steps"]] == [TOKEN_B, TOKEN_C]


class TestQuoteErrors:
    """Tests for error status codes."""

    def test_no_route_is_404(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json, tokenOut=TOKEN_D))
        assert response.status_code == 404

    def test_unknown_strategy_is_400(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json, strategy="bogus"))
        assert response.status_code == 400
        assert "bogus" in response.json()["detail"]

    def test_invalid_hop_bound_is_400(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json, maxHops=4))
        assert response.status_code == 400

    def test_invalid_pool_is_400(self, client, pool_json):
        pool_json.append(
            {
                "kind": "order_book",
                "address": "book",
                "source": "Phoenix",
                "tokenA": TOKEN_A,
                "tokenB": TOKEN_B,
                "reserveA": 1,
                "reserveB": 1,
            }
        )
        response = client.post("/quote", json=make_request(pool_json))
        assert response.status_code == 400

    def test_missing_field_is_422(self, client, pool_json):
        request = make_request(pool_json)
        del request["tokenIn"]
        response = client.post("/quote", json=request)
        assert response.status_code == 422

    def test_negative_amount_is_422(self, client, pool_json):
        response = client.post("/quote", json=make_request(pool_json, amountIn="-1"))
        assert response.status_code == 422

    def test_router_dependency_override(self, client, pool_json):
        class NoRouteRouter:
            def quote(self, *args, **kwargs):
                raise NoRouteFound("stub")

        app.dependency_overrides[get_router] = lambda: NoRouteRouter()
        response = client.post("/quote", json=make_request(pool_json))
        assert response.status_code == 404
        assert response.json()["detail"] == "stub"
