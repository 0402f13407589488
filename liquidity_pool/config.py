"""Pool configuration.

Asset metadata and display defaults. The fee and the minimum liquidity are
not configurable; see liquidity_pool.constants.
"""

import os
from dataclasses import dataclass

from liquidity_pool.constants import (
    NATIVE_DECIMALS,
    NATIVE_SYMBOL,
    SHARE_DECIMALS,
    SHARE_NAME,
    SHARE_SYMBOL,
    TOKEN_DECIMALS,
    TOKEN_SYMBOL,
)


@dataclass(frozen=True)
class PoolConfig:
    """Centralized configuration for one pool.

    Decimals only affect how amounts are displayed and parsed; the engine
    itself works on smallest-unit integers.

    Attributes:
        asset_a_symbol: Symbol of the native asset (default: ETH)
        asset_a_decimals: Decimals of the native asset (default: 18)
        asset_b_symbol: Symbol of the token (default: USDT)
        asset_b_decimals: Decimals of the token (default: 6)
        share_name: LP share token name
        share_symbol: LP share token symbol
        share_decimals: LP share decimals (default: 18)
        default_slippage_bps: Slippage tolerance applied when a swap quote
            request does not give one (default: 50 = 0.5%)
    """

    asset_a_symbol: str = NATIVE_SYMBOL
    asset_a_decimals: int = NATIVE_DECIMALS
    asset_b_symbol: str = TOKEN_SYMBOL
    asset_b_decimals: int = TOKEN_DECIMALS
    share_name: str = SHARE_NAME
    share_symbol: str = SHARE_SYMBOL
    share_decimals: int = SHARE_DECIMALS
    default_slippage_bps: int = 50

    def __post_init__(self) -> None:
        for name in ("asset_a_decimals", "asset_b_decimals", "share_decimals"):
            decimals = getattr(self, name)
            if not 0 <= decimals <= 77:
                raise ValueError(f"{name} must be within 0-77, got {decimals}")
        if not 0 <= self.default_slippage_bps <= 10_000:
            raise ValueError(f"default_slippage_bps must be within 0-10000, got {self.default_slippage_bps}")

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """Build a config from POOL_* environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            asset_a_symbol=os.environ.get("POOL_ASSET_A_SYMBOL", defaults.asset_a_symbol),
            asset_a_decimals=int(os.environ.get("POOL_ASSET_A_DECIMALS", defaults.asset_a_decimals)),
            asset_b_symbol=os.environ.get("POOL_ASSET_B_SYMBOL", defaults.asset_b_symbol),
            asset_b_decimals=int(os.environ.get("POOL_ASSET_B_DECIMALS", defaults.asset_b_decimals)),
            share_name=os.environ.get("POOL_SHARE_NAME", defaults.share_name),
            share_symbol=os.environ.get("POOL_SHARE_SYMBOL", defaults.share_symbol),
            default_slippage_bps=int(
                os.environ.get("POOL_DEFAULT_SLIPPAGE_BPS", defaults.default_slippage_bps)
            ),
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
