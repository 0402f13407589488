"""Pool engine error classes.

Every engine operation either returns a complete result or raises exactly
one of these. They all derive from PoolError so callers can catch the
whole family at a boundary (the ledger, the API).
"""


class PoolError(ArithmeticError):
    """Base error for pool engine operations."""

    kind = "pool_error"


class DivisionByZero(PoolError):
    """An empty reserve or supply was used as a divisor."""

    kind = "division_by_zero"


class Overflow(PoolError):
    """Intermediate result left the uint256 range."""

    kind = "overflow"


class Underflow(Overflow):
    """Subtraction produced a negative result."""

    kind = "underflow"


class InvalidReserves(PoolError):
    """Zero reserve supplied to a pricing call, or an inconsistent pool state."""

    kind = "invalid_reserves"


class OutputExceedsReserve(PoolError):
    """Requested output is at or above the output reserve."""

    kind = "output_exceeds_reserve"


class InsufficientInitialLiquidity(PoolError):
    """First deposit mints nothing after the minimum liquidity is locked."""

    kind = "insufficient_initial_liquidity"


class InsufficientLiquidityMinted(PoolError):
    """Deposit into a funded pool would mint zero shares."""

    kind = "insufficient_liquidity_minted"


class InsufficientShares(PoolError):
    """Withdrawal exceeds the holder's share balance."""

    kind = "insufficient_shares"


class InvalidAmount(PoolError):
    """Amount is negative, zero where a positive value is required, or unparsable."""

    kind = "invalid_amount"


class SlippageExceeded(PoolError):
    """Swap output fell below the caller's minimum."""

    kind = "slippage_exceeded"


class StaleState(PoolError):
    """Commit was computed against a pool state that is no longer current."""

    kind = "stale_state"
