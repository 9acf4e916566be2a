"""Constant product math (x * y = k) in checked fixed point.

All quantities are unsigned integers. Inputs and results are u64; every
intermediate product is held to u128 and a value that leaves either range
raises MathOverflow instead of wrapping or truncating.

Formula: amount_out = (in * (10000 - fee) * res_out) / (res_in * 10000 + in * (10000 - fee))

The fee is taken from the input side, in basis points.
"""

from __future__ import annotations

from liqrouter.constants import BPS_DENOMINATOR
from liqrouter.errors import InsufficientLiquidity, InvalidReserves, MathOverflow
from liqrouter.safe_int import S, SafeInt, SafeIntError


def amount_out(amount_in: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int:
    """Calculate output amount for an exact input.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_bps: Fee in basis points (25 = 0.25%)

    Returns:
        Output token amount, truncated toward zero

    Raises:
        InvalidReserves: If either reserve is zero
        MathOverflow: If any step leaves the u64/u128 range
    """
    if reserve_in == 0 or reserve_out == 0:
        raise InvalidReserves(f"Invalid pool reserves: {reserve_in}/{reserve_out}")

    if amount_in == 0:
        return 0

    try:
        fee_multiplier = _fee_multiplier(fee_bps)
        amount_in_after_fee = (S(amount_in).check_width(64) * fee_multiplier).check_width(128)
        numerator = (amount_in_after_fee * S(reserve_out).check_width(64)).check_width(128)
        denominator = (S(reserve_in).check_width(64) * BPS_DENOMINATOR).check_width(128)
        denominator = (denominator + amount_in_after_fee).check_width(128)
        return (numerator // denominator).to_u64()
    except SafeIntError as err:
        raise MathOverflow(f"Math overflow in amount_out: {err}") from err


def price_impact_bps(amount_in: int, amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Calculate price impact of a swap against the spot price, in basis points.

    Spot price is reserve_out / reserve_in, realized price amount_out / amount_in:
    impact = 10000 - (amount_out * reserve_in * 10000) / (amount_in * reserve_out)

    Degenerate inputs (zero reserve or zero input) have no impact. A realized
    price above spot can only come from rounding and is clamped to zero impact.

    Raises:
        MathOverflow: If any step leaves the u128 range
    """
    if reserve_in == 0 or reserve_out == 0 or amount_in == 0:
        return 0

    try:
        numerator = (S(amount_out).check_width(64) * S(reserve_in).check_width(64)).check_width(128)
        denominator = S(amount_in).check_width(64) * S(reserve_out).check_width(64)
        denominator = denominator.check_width(128)
        price_ratio = (numerator * BPS_DENOMINATOR).check_width(128) // denominator
    except SafeIntError as err:
        raise MathOverflow(f"Math overflow in price_impact_bps: {err}") from err

    if price_ratio > BPS_DENOMINATOR:
        return 0
    return (S(BPS_DENOMINATOR) - price_ratio).value


def amount_in(amount_out: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int:
    """Calculate the input required for a desired output.

    Formula: amount_in = (res_in * out * 10000) / ((res_out - out) * (10000 - fee)) + 1

    The result is rounded up so that amount_out(amount_in(y)) >= y.

    Raises:
        InvalidReserves: If either reserve is zero
        InsufficientLiquidity: If amount_out would drain the output reserve
        MathOverflow: If any step leaves the u64/u128 range
    """
    if reserve_in == 0 or reserve_out == 0:
        raise InvalidReserves(f"Invalid pool reserves: {reserve_in}/{reserve_out}")

    if amount_out == 0:
        return 0

    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            f"Cannot extract {amount_out} from a reserve of {reserve_out}"
        )

    try:
        numerator = (S(reserve_in).check_width(64) * S(amount_out).check_width(64)).check_width(128)
        numerator = (numerator * BPS_DENOMINATOR).check_width(128)
        denominator = (S(reserve_out) - S(amount_out)) * _fee_multiplier(fee_bps)
        return ((numerator // denominator.check_width(128)) + 1).to_u64()
    except SafeIntError as err:
        raise MathOverflow(f"Math overflow in amount_in: {err}") from err


def _fee_multiplier(fee_bps: int) -> SafeInt:
    """Fee multiplier (10000 - fee_bps); 25 bps gives 9975."""
    return S(BPS_DENOMINATOR) - S(fee_bps).check_width(16)


__all__ = ["amount_out", "price_impact_bps", "amount_in"]
