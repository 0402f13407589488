"""Constant product pricing.

The pool follows x * y = k with a 0.3% fee on input amounts:

    amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

Forward pricing rounds down and reverse pricing rounds up, both in the
pool's favor, so get_amount_out(get_required_input(y, ...), ...) >= y.
All functions are pure and work on smallest-unit integers.
"""

from liquidity_pool.constants import BPS_DENOMINATOR, FEE_DENOMINATOR, FEE_NUMERATOR
from liquidity_pool.errors import InvalidAmount, InvalidReserves, OutputExceedsReserve
from liquidity_pool.safe_int import S


def _require_reserves(reserve_in: int, reserve_out: int) -> None:
    if reserve_in <= 0 or reserve_out <= 0:
        raise InvalidReserves(f"Reserves must be positive: ({reserve_in}, {reserve_out})")


def quote(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Fee-free cross rate: amount_a * reserve_b / reserve_a, rounded down.

    Used for deposit ratios and previews, never for settlement.

    Raises:
        DivisionByZero: If reserve_a is zero
    """
    return ((S(amount_a) * S(reserve_b)) // S(reserve_a)).value


def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """Calculate swap output using the constant product formula.

    The denominator grows with amount_in, so the result is always strictly
    below reserve_out.

    Args:
        amount_in: Input amount, fee included
        reserve_in: Reserve of the input asset
        reserve_out: Reserve of the output asset

    Returns:
        Output amount, rounded down

    Raises:
        InvalidReserves: If either reserve is zero
    """
    _require_reserves(reserve_in, reserve_out)

    amount_in_with_fee = S(amount_in) * FEE_NUMERATOR
    numerator = amount_in_with_fee * S(reserve_out)
    denominator = S(reserve_in) * FEE_DENOMINATOR + amount_in_with_fee

    return (numerator // denominator).value


def get_required_input(amount_out: int, reserve_out: int, reserve_in: int) -> int:
    """Calculate the input needed to receive amount_out.

    Formula: amount_in = ceil(reserve_in * amount_out * 1000 / ((reserve_out - amount_out) * 997))

    Note the argument order: the output reserve comes first.

    Args:
        amount_out: Desired output amount
        reserve_out: Reserve of the output asset
        reserve_in: Reserve of the input asset

    Returns:
        Minimum input amount, rounded up

    Raises:
        InvalidReserves: If either reserve is zero
        OutputExceedsReserve: If amount_out >= reserve_out
    """
    _require_reserves(reserve_in, reserve_out)
    if amount_out >= reserve_out:
        raise OutputExceedsReserve(
            f"Cannot take {amount_out} out of a reserve of {reserve_out}"
        )

    numerator = S(reserve_in) * S(amount_out) * FEE_DENOMINATOR
    denominator = (S(reserve_out) - S(amount_out)) * FEE_NUMERATOR

    return numerator.ceiling_div(denominator).value


def price_impact_bps(amount_in: int, amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Deviation of the realized price from the pre-trade spot price, in bps.

    Compares amount_out / amount_in against reserve_out / reserve_in by
    cross-multiplication and rounds up. The fee is part of the realized
    price, so a swap of any size reports at least ~30 bps.

    Raises:
        InvalidReserves: If either reserve is zero
    """
    _require_reserves(reserve_in, reserve_out)
    if amount_in == 0:
        return 0

    spot_value = S(amount_in) * S(reserve_out)
    realized_value = S(amount_out) * S(reserve_in)
    deviation = spot_value.max(realized_value) - spot_value.min(realized_value)

    return (deviation * BPS_DENOMINATOR).ceiling_div(spot_value).value


def swap_fee(amount_in: int) -> int:
    """Part of amount_in retained by the pool as the swap fee (rounded down)."""
    return ((S(amount_in) * (FEE_DENOMINATOR - FEE_NUMERATOR)) // FEE_DENOMINATOR).value


def min_amount_out(amount_out: int, slippage_bps: int) -> int:
    """Lowest acceptable output for a slippage tolerance.

    Args:
        amount_out: Quoted output amount
        slippage_bps: Tolerance in basis points (50 = 0.5%)

    Raises:
        InvalidAmount: If slippage_bps is outside [0, 10000]
    """
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise InvalidAmount(f"Slippage must be within 0-{BPS_DENOMINATOR} bps, got {slippage_bps}")
    return ((S(amount_out) * (BPS_DENOMINATOR - slippage_bps)) // BPS_DENOMINATOR).value
