"""Liquidity share accounting.

Deposits mint LP shares proportional to the smaller of the two deposit
ratios; withdrawals burn shares for a proportional slice of both reserves.
The first deposit mints isqrt(amount_a * amount_b) shares, of which
MINIMUM_LIQUIDITY are locked forever under LOCKED_LIQUIDITY_HOLDER.

All amounts round down, toward the pool.
"""

from liquidity_pool.amm.pricing import quote
from liquidity_pool.constants import BPS_DENOMINATOR, LOCKED_LIQUIDITY_HOLDER, MINIMUM_LIQUIDITY
from liquidity_pool.errors import (
    DivisionByZero,
    InsufficientInitialLiquidity,
    InsufficientLiquidityMinted,
    InsufficientShares,
    InvalidAmount,
)
from liquidity_pool.math import isqrt
from liquidity_pool.models.quotes import DepositResult, LiquidityQuote, WithdrawQuote, WithdrawResult
from liquidity_pool.models.state import PoolState, SharesBalance
from liquidity_pool.safe_int import S


def preview_initial_deposit(amount_a: int, amount_b: int) -> int:
    """Shares minted to the first depositor of an empty pool.

    Returns:
        isqrt(amount_a * amount_b) - MINIMUM_LIQUIDITY

    Raises:
        InsufficientInitialLiquidity: If the result would not be positive
        Overflow: If amount_a * amount_b exceeds uint256
    """
    root = isqrt((S(amount_a) * S(amount_b)).value)
    if root <= MINIMUM_LIQUIDITY:
        raise InsufficientInitialLiquidity(
            f"Initial deposit mints {root} shares, must exceed the {MINIMUM_LIQUIDITY} locked"
        )
    return root - MINIMUM_LIQUIDITY


def preview_deposit(
    amount_a: int,
    amount_b: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
) -> int:
    """Shares minted for a deposit into a funded pool.

    Each side is converted to shares independently and the smaller count
    wins: an off-ratio deposit is credited only for its binding side and the
    surplus of the other asset stays in the pool.

    Raises:
        DivisionByZero: If the pool has no shares or a reserve is zero
    """
    if total_shares == 0:
        raise DivisionByZero("Proportional deposit into a pool with no shares")

    shares_from_a = (S(amount_a) * S(total_shares)) // S(reserve_a)
    shares_from_b = (S(amount_b) * S(total_shares)) // S(reserve_b)
    return shares_from_a.min(shares_from_b).value


def quote_deposit(state: PoolState, amount_a: int, amount_b: int) -> LiquidityQuote:
    """Preview a deposit of (amount_a, amount_b) into the pool."""
    if state.is_empty:
        shares = preview_initial_deposit(amount_a, amount_b)
        supply_after = S(shares) + MINIMUM_LIQUIDITY
    else:
        shares = preview_deposit(amount_a, amount_b, state.reserve_a, state.reserve_b, state.total_shares)
        supply_after = S(state.total_shares) + shares

    return LiquidityQuote(
        deposit_a=amount_a,
        deposit_b=amount_b,
        shares_issued=shares,
        share_percent_bps=((S(shares) * BPS_DENOMINATOR) // supply_after).value,
    )


def commit_deposit(
    state: PoolState,
    balances: SharesBalance,
    provider: str,
    amount_a: int,
    amount_b: int,
) -> DepositResult:
    """Apply a deposit: grow both reserves and mint shares to provider.

    On the first deposit MINIMUM_LIQUIDITY extra shares are minted to
    LOCKED_LIQUIDITY_HOLDER so balances keep summing to total_shares.

    Raises:
        InvalidAmount: If either amount is zero, or provider is the locked holder
        InsufficientInitialLiquidity: If a first deposit is too small
        InsufficientLiquidityMinted: If a later deposit would mint zero shares
    """
    if amount_a <= 0 or amount_b <= 0:
        raise InvalidAmount(f"Deposit needs both assets, got ({amount_a}, {amount_b})")
    if provider == LOCKED_LIQUIDITY_HOLDER:
        raise InvalidAmount("Locked liquidity holder cannot receive deposits")

    if state.is_empty:
        shares = preview_initial_deposit(amount_a, amount_b)
        minted = S(shares) + MINIMUM_LIQUIDITY
        new_balances = balances.credit(LOCKED_LIQUIDITY_HOLDER, MINIMUM_LIQUIDITY).credit(provider, shares)
    else:
        shares = preview_deposit(amount_a, amount_b, state.reserve_a, state.reserve_b, state.total_shares)
        if shares == 0:
            raise InsufficientLiquidityMinted(
                f"Deposit of ({amount_a}, {amount_b}) is too small to mint a share"
            )
        minted = S(shares)
        new_balances = balances.credit(provider, shares)

    new_state = PoolState(
        reserve_a=(S(state.reserve_a) + S(amount_a)).value,
        reserve_b=(S(state.reserve_b) + S(amount_b)).value,
        total_shares=(minted + state.total_shares).value,
    )
    return DepositResult(
        state=new_state,
        balances=new_balances,
        provider=provider,
        amount_a=amount_a,
        amount_b=amount_b,
        shares_issued=shares,
    )


def preview_withdraw(
    shares: int,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    balance: int | None = None,
) -> tuple[int, int]:
    """Amounts paid out for burning shares.

    Args:
        shares: Shares to burn
        reserve_a: Native asset reserve
        reserve_b: Token reserve
        total_shares: Current share supply
        balance: Caller's share balance, checked when given

    Returns:
        (amount_a, amount_b), each rounded down

    Raises:
        DivisionByZero: If total_shares is zero
        InsufficientShares: If shares exceed balance or the supply
    """
    if total_shares == 0:
        raise DivisionByZero("Cannot redeem shares of a pool with no supply")
    if balance is not None and shares > balance:
        raise InsufficientShares(f"Balance of {balance} shares cannot cover {shares}")
    if shares > total_shares:
        raise InsufficientShares(f"Supply of {total_shares} shares cannot cover {shares}")

    amount_a = (S(shares) * S(reserve_a)) // S(total_shares)
    amount_b = (S(shares) * S(reserve_b)) // S(total_shares)
    return amount_a.value, amount_b.value


def quote_withdraw(
    state: PoolState,
    shares: int,
    balance: int | None = None,
    holder: str | None = None,
) -> WithdrawQuote:
    """Preview a withdrawal as a WithdrawQuote.

    Raises:
        InsufficientShares: If shares exceed balance or the supply, or holder is the locked holder
        DivisionByZero: If the pool is empty
    """
    if holder == LOCKED_LIQUIDITY_HOLDER:
        raise InsufficientShares("Minimum liquidity is locked and cannot be redeemed")
    amount_a, amount_b = preview_withdraw(
        shares, state.reserve_a, state.reserve_b, state.total_shares, balance=balance
    )
    return WithdrawQuote(shares_burned=shares, amount_a=amount_a, amount_b=amount_b)


def commit_withdraw(
    state: PoolState,
    balances: SharesBalance,
    holder: str,
    shares: int,
) -> WithdrawResult:
    """Burn holder's shares and pay out the proportional reserves.

    Raises:
        InvalidAmount: If shares is zero
        InsufficientShares: If holder owns fewer than shares, or is the locked holder
        DivisionByZero: If the pool is empty
    """
    if shares <= 0:
        raise InvalidAmount(f"Shares to burn must be positive, got {shares}")
    if holder == LOCKED_LIQUIDITY_HOLDER:
        raise InsufficientShares("Minimum liquidity is locked and cannot be redeemed")

    amount_a, amount_b = preview_withdraw(
        shares,
        state.reserve_a,
        state.reserve_b,
        state.total_shares,
        balance=balances.balance_of(holder),
    )
    new_state = PoolState(
        reserve_a=(S(state.reserve_a) - amount_a).value,
        reserve_b=(S(state.reserve_b) - amount_b).value,
        total_shares=(S(state.total_shares) - shares).value,
    )
    return WithdrawResult(
        state=new_state,
        balances=balances.debit(holder, shares),
        holder=holder,
        shares_burned=shares,
        amount_a=amount_a,
        amount_b=amount_b,
    )


def position_value(shares: int, state: PoolState) -> tuple[int, int]:
    """Redeemable (amount_a, amount_b) of an LP position; (0, 0) for an empty pool."""
    if state.is_empty or shares == 0:
        return 0, 0
    return preview_withdraw(shares, state.reserve_a, state.reserve_b, state.total_shares)


def position_value_in_b(shares: int, state: PoolState) -> int:
    """Value of an LP position in token units at the pool's spot rate.

    The native side is converted with the fee-free cross rate, so the
    result is roughly twice the token side.
    """
    amount_a, amount_b = position_value(shares, state)
    if amount_a == 0:
        return amount_b
    return (S(quote(amount_a, state.reserve_a, state.reserve_b)) + amount_b).value
