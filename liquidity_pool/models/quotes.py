"""Quote and commit result types.

Quotes are recomputed from the current PoolState on every request and never
persisted. Commit results carry the replacement state for the ledger to
store.
"""

from dataclasses import dataclass

from liquidity_pool.models.state import PoolState, SharesBalance, SwapDirection


@dataclass(frozen=True)
class SwapQuote:
    """Priced swap through the pool.

    Attributes:
        direction: Which asset is sold into the pool
        amount_in: Input amount, fee included
        amount_out: Output amount the pool pays
        fee_amount: Part of amount_in kept as the 0.3% fee
        price_impact_bps: Deviation of the average price from the spot price
    """

    direction: SwapDirection
    amount_in: int
    amount_out: int
    fee_amount: int
    price_impact_bps: int


@dataclass(frozen=True)
class LiquidityQuote:
    """Preview of a deposit before it is committed.

    Attributes:
        deposit_a: Native asset to deposit
        deposit_b: Token to deposit
        shares_issued: Shares credited to the depositor
        share_percent_bps: Depositor's share of the supply after the deposit
    """

    deposit_a: int
    deposit_b: int
    shares_issued: int
    share_percent_bps: int


@dataclass(frozen=True)
class WithdrawQuote:
    """Preview of a share redemption."""

    shares_burned: int
    amount_a: int
    amount_b: int


@dataclass(frozen=True)
class SwapExecution:
    """Committed swap: the settled quote and the state that replaces the old one."""

    quote: SwapQuote
    state: PoolState


@dataclass(frozen=True)
class DepositResult:
    """Committed deposit."""

    state: PoolState
    balances: SharesBalance
    provider: str
    amount_a: int
    amount_b: int
    shares_issued: int


@dataclass(frozen=True)
class WithdrawResult:
    """Committed withdrawal."""

    state: PoolState
    balances: SharesBalance
    holder: str
    shares_burned: int
    amount_a: int
    amount_b: int
