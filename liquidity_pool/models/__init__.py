"""Pool state, quote and API models."""

from liquidity_pool.models.quotes import (
    DepositResult,
    LiquidityQuote,
    SwapExecution,
    SwapQuote,
    WithdrawQuote,
    WithdrawResult,
)
from liquidity_pool.models.state import PoolState, SharesBalance, SwapDirection
from liquidity_pool.models.types import Address, Uint256

__all__ = [
    # Types
    "Address",
    "Uint256",
    # State
    "PoolState",
    "SharesBalance",
    "SwapDirection",
    # Quotes and results
    "SwapQuote",
    "LiquidityQuote",
    "WithdrawQuote",
    "SwapExecution",
    "DepositResult",
    "WithdrawResult",
]
