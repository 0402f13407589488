"""Conversion between smallest-unit integers and human-readable amounts.

Only the presentation boundary uses these. Decimal arithmetic runs in a
78-digit context, enough for any uint256 value. Parsing scales the integer
coefficient directly, so it never rounds.
"""

from __future__ import annotations

import decimal
from decimal import Decimal, InvalidOperation

from liquidity_pool.constants import BPS_DENOMINATOR, UINT256_MAX
from liquidity_pool.errors import InvalidAmount
from liquidity_pool.models.state import PoolState

# 78 digits of precision, enough for uint256 values (up to ~10^77)
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)


def format_units(amount: int, decimals: int) -> Decimal:
    """Convert a smallest-unit amount to a Decimal (10**18 wei -> Decimal("1"))."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(amount).scaleb(-decimals)


def parse_units(text: str, decimals: int) -> int:
    """Convert a human amount like "1.5" to smallest units.

    Scaling is done on the integer coefficient, so the result is exact at
    any magnitude.

    Raises:
        InvalidAmount: If text is not a non-negative number, has more
            fractional digits than decimals, or exceeds uint256
    """
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as err:
        raise InvalidAmount(f"Not a decimal amount: {text!r}") from err
    if not value.is_finite() or value < 0:
        raise InvalidAmount(f"Amount must be a non-negative number: {text!r}")

    _, digits, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digits)))
    if coefficient == 0:
        return 0

    shift = exponent + decimals
    if shift >= 0:
        if value > UINT256_MAX:
            raise InvalidAmount(f"{text!r} exceeds uint256")
        amount = coefficient * 10**shift
    else:
        # A coefficient shorter than the shift always leaves a remainder
        if -shift > len(digits):
            raise InvalidAmount(f"{text!r} has more than {decimals} decimal places")
        amount, remainder = divmod(coefficient, 10**-shift)
        if remainder:
            raise InvalidAmount(f"{text!r} has more than {decimals} decimal places")

    if amount > UINT256_MAX:
        raise InvalidAmount(f"{text!r} exceeds uint256")
    return amount


def spot_price(state: PoolState, decimals_a: int, decimals_b: int) -> Decimal:
    """Price of one whole unit of asset A in asset B (0 for an empty pool)."""
    if state.is_empty:
        return Decimal(0)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return format_units(state.reserve_b, decimals_b) / format_units(state.reserve_a, decimals_a)


def inverse_spot_price(state: PoolState, decimals_a: int, decimals_b: int) -> Decimal:
    """Price of one whole unit of asset B in asset A (0 for an empty pool)."""
    if state.is_empty:
        return Decimal(0)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return format_units(state.reserve_a, decimals_a) / format_units(state.reserve_b, decimals_b)


def pool_value_in_b(state: PoolState, decimals_b: int) -> Decimal:
    """Total pool value in asset B: both sides are worth the same at spot."""
    return format_units(2 * state.reserve_b, decimals_b)


def format_bps(bps: int) -> str:
    """Render basis points as a percentage string (30 -> "0.30%")."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        percent = Decimal(bps) * 100 / BPS_DENOMINATOR
    return f"{percent:.2f}%"


def format_decimal(value: Decimal) -> str:
    """Plain positional string without trailing zeros or exponent (Decimal("3E+3") -> "3000")."""
    return f"{value.normalize():f}"
