"""Constant product AMM: pricing, swap settlement and liquidity accounting."""

from liquidity_pool.amm.liquidity import (
    commit_deposit,
    commit_withdraw,
    position_value,
    position_value_in_b,
    preview_deposit,
    preview_initial_deposit,
    preview_withdraw,
    quote_deposit,
    quote_withdraw,
)
from liquidity_pool.amm.pricing import (
    get_amount_out,
    get_required_input,
    min_amount_out,
    price_impact_bps,
    quote,
    swap_fee,
)
from liquidity_pool.amm.swap import commit_swap, preview_swap, preview_swap_exact_output

__all__ = [
    # Pricing
    "quote",
    "get_amount_out",
    "get_required_input",
    "price_impact_bps",
    "swap_fee",
    "min_amount_out",
    # Swaps
    "preview_swap",
    "preview_swap_exact_output",
    "commit_swap",
    # Liquidity
    "preview_initial_deposit",
    "preview_deposit",
    "quote_deposit",
    "commit_deposit",
    "preview_withdraw",
    "quote_withdraw",
    "commit_withdraw",
    "position_value",
    "position_value_in_b",
]
