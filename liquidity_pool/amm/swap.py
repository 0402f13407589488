"""Swap previews and settlement against a PoolState.

Settlement always uses the forward formula: an exact-output request is
previewed with get_required_input and then committed as an exact-input
swap of that amount, as the on-chain pool only exposes exact-input swaps.
"""

from liquidity_pool.amm.pricing import get_amount_out, get_required_input, price_impact_bps, swap_fee
from liquidity_pool.errors import InvalidAmount, InvalidReserves, SlippageExceeded
from liquidity_pool.models.quotes import SwapExecution, SwapQuote
from liquidity_pool.models.state import PoolState, SwapDirection


def _build_quote(direction: SwapDirection, amount_in: int, amount_out: int, state: PoolState) -> SwapQuote:
    reserve_in, reserve_out = state.get_reserves(direction)
    return SwapQuote(
        direction=direction,
        amount_in=amount_in,
        amount_out=amount_out,
        fee_amount=swap_fee(amount_in),
        price_impact_bps=price_impact_bps(amount_in, amount_out, reserve_in, reserve_out),
    )


def preview_swap(state: PoolState, direction: SwapDirection, amount_in: int) -> SwapQuote:
    """Price an exact-input swap.

    Raises:
        InvalidReserves: If the pool is empty
    """
    reserve_in, reserve_out = state.get_reserves(direction)
    amount_out = get_amount_out(amount_in, reserve_in, reserve_out)
    return _build_quote(direction, amount_in, amount_out, state)


def preview_swap_exact_output(state: PoolState, direction: SwapDirection, amount_out: int) -> SwapQuote:
    """Price a swap that must deliver at least amount_out.

    The returned quote holds the required input and the output that input
    actually yields under the forward formula, which may exceed amount_out
    by rounding.

    Raises:
        InvalidReserves: If the pool is empty
        OutputExceedsReserve: If amount_out >= the output reserve
    """
    reserve_in, reserve_out = state.get_reserves(direction)
    amount_in = get_required_input(amount_out, reserve_out, reserve_in)
    actual_output = get_amount_out(amount_in, reserve_in, reserve_out)
    return _build_quote(direction, amount_in, actual_output, state)


def commit_swap(
    state: PoolState,
    direction: SwapDirection,
    amount_in: int,
    min_amount_out: int = 0,
) -> SwapExecution:
    """Settle an exact-input swap.

    Args:
        state: Current pool state
        direction: Which asset is sold into the pool
        amount_in: Input amount, fee included
        min_amount_out: Reject the swap if it pays less than this

    Returns:
        SwapExecution with the settled quote and the replacement state

    Raises:
        InvalidAmount: If amount_in is zero or the output rounds to zero
        InvalidReserves: If the pool is empty
        SlippageExceeded: If the output is below min_amount_out
    """
    if amount_in <= 0:
        raise InvalidAmount(f"Swap input must be positive, got {amount_in}")
    if state.is_empty:
        raise InvalidReserves("Cannot swap against an empty pool")

    swap_quote = preview_swap(state, direction, amount_in)
    if swap_quote.amount_out == 0:
        raise InvalidAmount(f"Swap of {amount_in} is too small to produce any output")
    if swap_quote.amount_out < min_amount_out:
        raise SlippageExceeded(
            f"Output {swap_quote.amount_out} is below the minimum {min_amount_out}"
        )

    return SwapExecution(
        quote=swap_quote,
        state=state.with_swap(direction, amount_in, swap_quote.amount_out),
    )
