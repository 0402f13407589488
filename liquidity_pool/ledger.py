"""In-memory owner of a pool's state and share balances.

PoolLedger is the single writer for one pool: every commit runs the engine
against the current snapshot and swaps in the result while holding a lock,
so no two commits are ever computed against the same reserves. Reads and
previews use an atomic snapshot and never block on the lock.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog

from liquidity_pool.amm import (
    commit_deposit,
    commit_swap,
    commit_withdraw,
    preview_swap,
    preview_swap_exact_output,
    quote_deposit,
    quote_withdraw,
)
from liquidity_pool.config import DEFAULT_POOL_CONFIG, PoolConfig
from liquidity_pool.errors import InvalidReserves, PoolError, StaleState
from liquidity_pool.models.quotes import (
    DepositResult,
    LiquidityQuote,
    SwapExecution,
    SwapQuote,
    WithdrawQuote,
    WithdrawResult,
)
from liquidity_pool.models.state import PoolState, SharesBalance, SwapDirection

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerSnapshot:
    """State and balances read together."""

    state: PoolState
    balances: SharesBalance


class PoolLedger:
    """Serializes commits against one pool.

    Args:
        config: Pool configuration. Uses DEFAULT_POOL_CONFIG if not provided.
        state: Initial state. Defaults to an empty pool.
        balances: Initial share balances, must sum to state.total_shares.
    """

    def __init__(
        self,
        config: PoolConfig | None = None,
        state: PoolState | None = None,
        balances: SharesBalance | None = None,
    ) -> None:
        state = state if state is not None else PoolState.empty()
        balances = balances if balances is not None else SharesBalance()
        if balances.total != state.total_shares:
            raise InvalidReserves(
                f"Balances sum to {balances.total}, supply is {state.total_shares}"
            )

        self.config = config or DEFAULT_POOL_CONFIG
        self._snapshot = LedgerSnapshot(state=state, balances=balances)
        self._lock = threading.Lock()

    # --- Reads ---

    def snapshot(self) -> LedgerSnapshot:
        """Current state and balances (a single attribute read, so always consistent)."""
        return self._snapshot

    @property
    def state(self) -> PoolState:
        return self._snapshot.state

    @property
    def balances(self) -> SharesBalance:
        return self._snapshot.balances

    def balance_of(self, holder: str) -> int:
        """LP shares held by holder."""
        return self._snapshot.balances.balance_of(holder)

    # --- Previews ---

    def preview_swap(self, direction: SwapDirection, amount_in: int) -> SwapQuote:
        return preview_swap(self.state, direction, amount_in)

    def preview_swap_exact_output(self, direction: SwapDirection, amount_out: int) -> SwapQuote:
        return preview_swap_exact_output(self.state, direction, amount_out)

    def preview_deposit(self, amount_a: int, amount_b: int) -> LiquidityQuote:
        return quote_deposit(self.state, amount_a, amount_b)

    def preview_withdraw(self, holder: str, shares: int) -> WithdrawQuote:
        snapshot = self._snapshot
        return quote_withdraw(snapshot.state, shares, balance=snapshot.balances.balance_of(holder), holder=holder)

    # --- Commits ---

    def swap(
        self,
        direction: SwapDirection,
        amount_in: int,
        min_amount_out: int = 0,
        trader: str | None = None,
        expected_state: PoolState | None = None,
    ) -> SwapExecution:
        """Commit an exact-input swap.

        Raises:
            SlippageExceeded: If the output is below min_amount_out
            StaleState: If expected_state is given and no longer current
        """

        def apply(snapshot: LedgerSnapshot) -> tuple[LedgerSnapshot, SwapExecution]:
            execution = commit_swap(snapshot.state, direction, amount_in, min_amount_out)
            return LedgerSnapshot(execution.state, snapshot.balances), execution

        execution = self._commit("swap", apply, expected_state)
        logger.info(
            "swap",
            trader=trader,
            direction=direction.value,
            amount_in=execution.quote.amount_in,
            amount_out=execution.quote.amount_out,
            fee_amount=execution.quote.fee_amount,
            price_impact_bps=execution.quote.price_impact_bps,
            reserve_a=execution.state.reserve_a,
            reserve_b=execution.state.reserve_b,
        )
        return execution

    def add_liquidity(
        self,
        provider: str,
        amount_a: int,
        amount_b: int,
        expected_state: PoolState | None = None,
    ) -> DepositResult:
        """Commit a deposit and credit the minted shares to provider."""

        def apply(snapshot: LedgerSnapshot) -> tuple[LedgerSnapshot, DepositResult]:
            result = commit_deposit(snapshot.state, snapshot.balances, provider, amount_a, amount_b)
            return LedgerSnapshot(result.state, result.balances), result

        result = self._commit("add_liquidity", apply, expected_state)
        logger.info(
            "add_liquidity",
            provider=provider,
            amount_a=result.amount_a,
            amount_b=result.amount_b,
            shares_issued=result.shares_issued,
            total_shares=result.state.total_shares,
        )
        return result

    def remove_liquidity(
        self,
        holder: str,
        shares: int,
        expected_state: PoolState | None = None,
    ) -> WithdrawResult:
        """Commit a withdrawal of shares owned by holder."""

        def apply(snapshot: LedgerSnapshot) -> tuple[LedgerSnapshot, WithdrawResult]:
            result = commit_withdraw(snapshot.state, snapshot.balances, holder, shares)
            return LedgerSnapshot(result.state, result.balances), result

        result = self._commit("remove_liquidity", apply, expected_state)
        logger.info(
            "remove_liquidity",
            holder=holder,
            shares_burned=result.shares_burned,
            amount_a=result.amount_a,
            amount_b=result.amount_b,
            total_shares=result.state.total_shares,
        )
        return result

    def _commit(
        self,
        operation: str,
        apply: Callable[[LedgerSnapshot], tuple[LedgerSnapshot, T]],
        expected_state: PoolState | None,
    ) -> T:
        """Run apply against the current snapshot and install its result atomically."""
        with self._lock:
            current = self._snapshot
            try:
                if expected_state is not None and expected_state != current.state:
                    raise StaleState(f"{operation} was priced against {expected_state}, pool is at {current.state}")
                new_snapshot, result = apply(current)
            except PoolError as err:
                logger.warning(
                    "commit_rejected",
                    operation=operation,
                    error=err.kind,
                    detail=str(err),
                )
                raise
            self._snapshot = new_snapshot
        return result
