"""Protocol constants for the liquidity pool.

The fee and minimum liquidity are engine-level constants, not runtime
settings: forward and reverse pricing must use the same values for the
exact-output round trip to hold.
"""

# Largest amount the on-chain ledger can represent
UINT256_MAX = 2**256 - 1

# 0.3% swap fee taken from the input: amount_in * 997 / 1000 enters the curve
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# Shares permanently locked on the first deposit
MINIMUM_LIQUIDITY = 1000

# Holder credited with the locked minimum liquidity
LOCKED_LIQUIDITY_HOLDER = "0x0000000000000000000000000000000000000000"

# Basis points per whole (100%)
BPS_DENOMINATOR = 10_000

# Reference deployment: native ETH against a 6-decimal USDT
NATIVE_SYMBOL = "ETH"
NATIVE_DECIMALS = 18
TOKEN_SYMBOL = "USDT"
TOKEN_DECIMALS = 6

# LP share token metadata
SHARE_NAME = "ETH-USDT LP"
SHARE_SYMBOL = "ETH-USDT-LP"
SHARE_DECIMALS = 18
