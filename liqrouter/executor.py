"""Quote execution.

Only dry-run execution is supported: the quote and each of its steps are
logged and the quoted output is reported together with the minimum output
a transaction would enforce under the configured slippage tolerance.
Building and submitting transactions is left to an external executor.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from liqrouter.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS
from liqrouter.errors import ConfigError, TransactionError
from liqrouter.routing.types import SwapQuote

logger = structlog.get_logger()


def minimum_output(amount_out: int, slippage_bps: int) -> int:
    """Smallest acceptable output under a slippage tolerance, rounded down."""
    return amount_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of executing a quote."""

    success: bool
    signature: str | None = None
    error: str | None = None
    simulated_output: int | None = None
    min_output: int | None = None


class Executor:
    """Executes swap quotes, or simulates them in dry-run mode."""

    def __init__(self, dry_run: bool = True, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> None:
        """Initialize the executor.

        Raises:
            ConfigError: If slippage_bps is outside 0..10000
        """
        if not 0 <= slippage_bps <= BPS_DENOMINATOR:
            raise ConfigError(
                f"slippage_bps must be between 0 and {BPS_DENOMINATOR}, got {slippage_bps}"
            )
        self.dry_run = dry_run
        self.slippage_bps = slippage_bps

    def execute(self, quote: SwapQuote) -> ExecutionResult:
        """Execute a quote.

        Raises:
            TransactionError: In live mode, which is not supported
        """
        if self.dry_run:
            return self.simulate(quote)

        logger.warning("live_execution_requested", strategy=quote.strategy)
        raise TransactionError(
            "Live transaction execution is not supported; use dry-run mode"
        )

    def simulate(self, quote: SwapQuote) -> ExecutionResult:
        """Log the quote and report its output without sending anything."""
        min_out = minimum_output(quote.amount_out, self.slippage_bps)
        logger.info(
            "dry_run_swap",
            strategy=quote.strategy,
            token_in=quote.token_in,
            token_out=quote.token_out,
            amount_in=quote.amount_in,
            expected_output=quote.amount_out,
            min_output=min_out,
            price_impact_bps=quote.price_impact_bps,
            hops=quote.route.hop_count,
        )
        for index, step in enumerate(quote.route.steps, start=1):
            logger.info(
                "dry_run_step",
                step=index,
                source=step.source,
                pool=step.pool_address,
                amount_in=step.amount_in,
                amount_out=step.amount_out,
                fee_bps=step.fee_bps,
                price_impact_bps=step.price_impact_bps,
            )

        return ExecutionResult(
            success=True,
            simulated_output=quote.amount_out,
            min_output=min_out,
        )


__all__ = ["ExecutionResult", "Executor", "minimum_output"]
