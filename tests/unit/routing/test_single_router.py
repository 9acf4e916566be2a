"""Tests for SinglePoolRouter."""

import pytest

from liqrouter.errors import NoRouteFound
from liqrouter.routing.single import SinglePoolRouter
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, make_order_book, make_pool


@pytest.fixture
def router() -> SinglePoolRouter:
    return SinglePoolRouter()


class TestFindBestRoute:
    """Tests for picking the best direct pool."""

    def test_single_pool(self, router, ab_pool):
        quote = router.find_best_route([ab_pool], TOKEN_A, TOKEN_B, 1_000_000)
        expected, impact = ab_pool.calculate_output(1_000_000, True)
        assert quote.amount_out == expected
        assert quote.price_impact_bps == impact
        assert quote.strategy == "single_pool"
        assert quote.route.steps[0].pool_address == "ab"
        assert quote.route.steps[0].fee_bps == 25

    def test_reverse_direction(self, router, ab_pool):
        quote = router.find_best_route([ab_pool], TOKEN_B, TOKEN_A, 50_000_000)
        step = quote.route.steps[0]
        assert step.token_in == TOKEN_B
        assert step.token_out == TOKEN_A
        assert quote.amount_out == ab_pool.calculate_output(50_000_000, False)[0]

    def test_picks_deeper_pool(self, router):
        shallow = make_pool(reserve_a=10_000_000, reserve_b=500_000_000, address="shallow")
        deep = make_pool(reserve_a=1_000_000_000, reserve_b=50_000_000_000, address="deep")
        quote = router.find_best_route([shallow, deep], TOKEN_A, TOKEN_B, 1_000_000)
        assert quote.route.steps[0].pool_address == "deep"

    def test_ties_keep_first_pool(self, router):
        first = make_pool(address="first")
        second = make_pool(address="second")
        quote = router.find_best_route([first, second], TOKEN_A, TOKEN_B, 1_000_000)
        assert quote.route.steps[0].pool_address == "first"

    def test_ignores_other_pairs(self, router, ab_pool):
        other = make_pool(TOKEN_A, TOKEN_C, 10**12, 10**12, fee_bps=0)
        quote = router.find_best_route([other, ab_pool], TOKEN_A, TOKEN_B, 1_000_000)
        assert quote.route.steps[0].pool_address == "ab"

    def test_skips_pool_without_liquidity(self, router):
        tiny = make_pool(reserve_a=1_000, reserve_b=50_000, fee_bps=0, address="tiny")
        deep = make_pool(address="deep")
        # Against tiny this would take more than half its B reserve
        quote = router.find_best_route([tiny, deep], TOKEN_A, TOKEN_B, 1_000_000)
        assert quote.route.steps[0].pool_address == "deep"

    def test_skips_empty_pool(self, router):
        empty = make_pool(reserve_a=0, address="empty")
        quote = router.find_best_route([empty, make_pool(address="ok")], TOKEN_A, TOKEN_B, 1_000)
        assert quote.route.steps[0].pool_address == "ok"

    def test_order_book_competes(self, router):
        # Bid of 60 B per A beats a 50:1 AMM
        book = make_order_book(best_bid=60_000_000, best_ask=61_000_000, address="book")
        amm = make_pool(address="amm")
        quote = router.find_best_route([amm, book], TOKEN_A, TOKEN_B, 1_000_000)
        assert quote.route.steps[0].pool_address == "book"
        assert quote.amount_out == 60_000_000

    def test_no_matching_pool_raises(self, router, ab_pool):
        with pytest.raises(NoRouteFound):
            router.find_best_route([ab_pool], TOKEN_A, TOKEN_C, 1_000_000)

    def test_empty_snapshot_raises(self, router):
        with pytest.raises(NoRouteFound):
            router.find_best_route([], TOKEN_A, TOKEN_B, 1_000_000)

    def test_all_candidates_failing_raises(self, router):
        pools = [make_pool(reserve_a=0), make_pool(reserve_b=1_000, reserve_a=1_000)]
        with pytest.raises(NoRouteFound):
            router.find_best_route(pools, TOKEN_A, TOKEN_B, 1_000_000)


class TestFindAllRoutes:
    """Tests for listing every viable direct quote."""

    def test_sorted_by_descending_output(self, router):
        pools = [
            make_pool(reserve_a=10_000_000, reserve_b=500_000_000, address="small"),
            make_pool(reserve_a=1_000_000_000, reserve_b=50_000_000_000, address="large"),
            make_pool(reserve_a=100_000_000, reserve_b=5_000_000_000, address="medium"),
        ]
        quotes = router.find_all_routes(pools, TOKEN_A, TOKEN_B, 1_000_000)
        assert [q.route.steps[0].pool_address for q in quotes] == ["large", "medium", "small"]
        outputs = [q.amount_out for q in quotes]
        assert outputs == sorted(outputs, reverse=True)

    def test_excludes_failing_pools(self, router, ab_pool):
        quotes = router.find_all_routes([make_pool(reserve_a=0), ab_pool], TOKEN_A, TOKEN_B, 1_000)
        assert len(quotes) == 1

    def test_no_match_is_empty(self, router, ab_pool):
        assert router.find_all_routes([ab_pool], TOKEN_C, TOKEN_B, 1_000) == []
