"""Command-line interface for quoting swaps.

Two modes:
- swap mode (--token-in, --token-out and --amount given): route the swap
  over the pools in --snapshot, or over example pools for the pair when
  no snapshot is given, then hand the quote to the executor
- demo mode (otherwise): compare every strategy over example pools

Usage:
    liqrouter --snapshot pools.json --token-in SOL --token-out USDC --amount 1000000
    liqrouter --strategy split --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from liqrouter.config import RouterConfig, load_config
from liqrouter.constants import BPS_DENOMINATOR
from liqrouter.errors import RouterError
from liqrouter.executor import Executor
from liqrouter.pools.snapshot import PoolSnapshot
from liqrouter.pools.sources import (
    meteora_pool,
    orca_constant_product_pool,
    orca_whirlpool,
    raydium_pool,
)
from liqrouter.pools.types import AnyPool
from liqrouter.routing.router import LiquidityRouter, Strategy
from liqrouter.routing.types import SwapQuote

logger = structlog.get_logger()

DEMO_TOKEN_IN = "TOKEN_A"
DEMO_TOKEN_OUT = "TOKEN_B"
DEMO_AMOUNT = 1_000_000_000


def example_pools(token_a: str, token_b: str) -> tuple[AnyPool, ...]:
    """Four pools for one pair, one per supported AMM flavour."""
    return (
        raydium_pool("raydium-example", token_a, token_b, 1_000_000_000, 50_000_000_000),
        orca_constant_product_pool(
            "orca-example", token_a, token_b, 2_000_000_000, 100_000_000_000
        ),
        orca_whirlpool("whirlpool-example", token_a, token_b, 1_500_000_000, 75_000_000_000, 10),
        meteora_pool("meteora-example", token_a, token_b, 1_200_000_000, 60_000_000_000, 20),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="liqrouter",
        description="Find the best swap route across liquidity pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Defaults are None so that unset options fall through to the config file
    parser.add_argument("--rpc-url", "-r", help="RPC endpoint URL")
    parser.add_argument("--network", "-n", help="devnet, testnet, mainnet-beta or a custom URL")
    parser.add_argument("--token-in", help="Asset to sell")
    parser.add_argument("--token-out", help="Asset to buy")
    parser.add_argument("--amount", type=int, help="Exact input amount in base units")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        help="Routing strategy (default: all)",
    )
    parser.add_argument("--max-hops", type=int, help="Hop bound for multi-hop routing (1-3)")
    parser.add_argument(
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Simulate instead of executing (default: on)",
    )
    parser.add_argument("--slippage-bps", type=int, help="Slippage tolerance in basis points")
    parser.add_argument("--snapshot", "-s", type=Path, help="JSON pool snapshot")
    parser.add_argument("--config", "-c", type=Path, help="TOML config file")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=None,
        help="Enable debug logging",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def format_quote(quote: SwapQuote) -> str:
    """Human-readable summary of a quote."""
    lines = [
        "Best Route Found:",
        f"  Strategy:      {quote.strategy}",
        f"  Input Amount:  {quote.amount_in}",
        f"  Output Amount: {quote.amount_out}",
        f"  Price Impact:  {_percent(quote.price_impact_bps)}",
        f"  Hops:          {quote.route.hop_count}",
    ]
    for index, step in enumerate(quote.route.steps, start=1):
        lines.extend(
            [
                f"  Step {index}:",
                f"    Source:       {step.source}",
                f"    Pool:         {step.pool_address}",
                f"    Amount In:    {step.amount_in}",
                f"    Amount Out:   {step.amount_out}",
                f"    Fee:          {_percent(step.fee_bps)}",
                f"    Price Impact: {_percent(step.price_impact_bps)}",
            ]
        )
    return "\n".join(lines)


def _percent(bps: int) -> str:
    return f"{bps * 100 // BPS_DENOMINATOR}.{bps % 100:02d}%"


def run_swap(
    config: RouterConfig,
    pools: Sequence[AnyPool],
    token_in: str,
    token_out: str,
    amount_in: int,
) -> int:
    router = LiquidityRouter(max_hops=config.max_hops)
    quote = router.quote(pools, token_in, token_out, amount_in, strategy=config.strategy)
    print(format_quote(quote))

    executor = Executor(dry_run=config.dry_run, slippage_bps=config.slippage_bps)
    result = executor.execute(quote)
    if not result.success:
        print(f"Swap failed: {result.error}", file=sys.stderr)
        return 1
    print(f"Simulated output: {result.simulated_output} (minimum {result.min_output})")
    return 0


def run_demo(config: RouterConfig) -> int:
    pools = example_pools(DEMO_TOKEN_IN, DEMO_TOKEN_OUT)
    print(f"Demo: swapping {DEMO_AMOUNT} {DEMO_TOKEN_IN} for {DEMO_TOKEN_OUT}")
    print(f"  {len(pools)} example pools")
    print("  Use --token-in, --token-out and --amount for an actual quote")
    print()

    router = LiquidityRouter(max_hops=config.max_hops)
    results = router.compare(pools, DEMO_TOKEN_IN, DEMO_TOKEN_OUT, DEMO_AMOUNT)
    for strategy, quote in results.items():
        if quote is None:
            print(f"  {strategy.value:<9} no route")
            continue
        print(
            f"  {strategy.value:<9} output={quote.amount_out} "
            f"steps={len(quote.route.steps)} hops={quote.route.hop_count}"
        )
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(bool(args.verbose))

    try:
        config = load_config(
            args.config,
            cli={
                "rpc_url": args.rpc_url,
                "network": args.network,
                "strategy": args.strategy,
                "max_hops": args.max_hops,
                "dry_run": args.dry_run,
                "slippage_bps": args.slippage_bps,
                "verbose": args.verbose,
            },
        )
        logger.info("router_starting", network=config.network, rpc_url=config.rpc_url)

        if args.token_in and args.token_out and args.amount is not None:
            if args.snapshot is not None:
                pools = PoolSnapshot.from_json(args.snapshot.read_bytes()).to_pools()
            else:
                pools = example_pools(args.token_in, args.token_out)
            return run_swap(config, pools, args.token_in, args.token_out, args.amount)

        return run_demo(config)
    except (RouterError, OSError) as err:
        logger.error("router_failed", error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
