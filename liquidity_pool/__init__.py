"""Constant product liquidity pool engine."""

from liquidity_pool.ledger import PoolLedger
from liquidity_pool.models.state import PoolState, SharesBalance, SwapDirection

__version__ = "0.1.0"
__all__ = ["PoolLedger", "PoolState", "SharesBalance", "SwapDirection", "__version__"]
