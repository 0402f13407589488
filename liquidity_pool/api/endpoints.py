"""API endpoints for the liquidity pool."""

from functools import lru_cache

from fastapi import APIRouter, Depends, Query

from liquidity_pool.amm import min_amount_out, position_value, position_value_in_b, quote
from liquidity_pool.config import PoolConfig
from liquidity_pool.constants import BPS_DENOMINATOR, UINT256_MAX
from liquidity_pool.ledger import PoolLedger
from liquidity_pool.models.requests import (
    DepositQuoteRequest,
    DepositRequest,
    SwapExactOutputRequest,
    SwapQuoteRequest,
    SwapRequest,
    WithdrawRequest,
)
from liquidity_pool.models.responses import (
    BalanceResponse,
    CrossRateResponse,
    DepositResponse,
    LiquidityQuoteResponse,
    PoolInfoResponse,
    SwapQuoteResponse,
    SwapResponse,
    WithdrawQuoteResponse,
    WithdrawResponse,
)
from liquidity_pool.models.state import SwapDirection
from liquidity_pool.models.types import normalize_address

router = APIRouter()


@lru_cache(maxsize=1)
def get_default_ledger() -> PoolLedger:
    """Process-wide ledger, configured from the environment on first use."""
    return PoolLedger(config=PoolConfig.from_env())


def get_ledger() -> PoolLedger:
    """Dependency provider for the pool ledger.

    Override this in tests to inject a prepared ledger:
        app.dependency_overrides[get_ledger] = lambda: ledger
    """
    return get_default_ledger()


@router.get("/pool")
async def pool_info(ledger: PoolLedger = Depends(get_ledger)) -> PoolInfoResponse:
    """Current reserves, share supply and spot prices."""
    return PoolInfoResponse.from_state(ledger.state, ledger.config)


@router.get("/pool/balances/{holder}")
async def balance(holder: str, ledger: PoolLedger = Depends(get_ledger)) -> BalanceResponse:
    """LP balance of holder and what it redeems for."""
    holder = normalize_address(holder)
    snapshot = ledger.snapshot()
    shares = snapshot.balances.balance_of(holder)
    amount_a, amount_b = position_value(shares, snapshot.state)
    total = snapshot.state.total_shares
    return BalanceResponse(
        holder=holder,
        shares=shares,
        share_percent_bps=shares * BPS_DENOMINATOR // total if total else 0,
        amount_a=amount_a,
        amount_b=amount_b,
        value_in_b=position_value_in_b(shares, snapshot.state),
    )


@router.get("/quote")
async def cross_rate(
    amount_in: int = Query(alias="amountIn", ge=0, le=UINT256_MAX),
    direction: SwapDirection = SwapDirection.A_TO_B,
    ledger: PoolLedger = Depends(get_ledger),
) -> CrossRateResponse:
    """Fee-free counterpart amount at the current pool ratio (deposit helper)."""
    reserve_in, reserve_out = ledger.state.get_reserves(direction)
    return CrossRateResponse(
        direction=direction,
        amount_in=amount_in,
        amount_out=quote(amount_in, reserve_in, reserve_out),
    )


@router.post("/swap/quote", response_model_exclude_none=True)
async def swap_quote(request: SwapQuoteRequest, ledger: PoolLedger = Depends(get_ledger)) -> SwapQuoteResponse:
    """Preview an exact-input swap, with the minimum output for the slippage tolerance."""
    swap = ledger.preview_swap(request.direction, request.amount_in)
    slippage_bps = request.slippage_bps
    if slippage_bps is None:
        slippage_bps = ledger.config.default_slippage_bps
    return SwapQuoteResponse.from_quote(swap, min_amount_out(swap.amount_out, slippage_bps))


@router.post("/swap/quote-exact-output", response_model_exclude_none=True)
async def swap_quote_exact_output(
    request: SwapExactOutputRequest,
    ledger: PoolLedger = Depends(get_ledger),
) -> SwapQuoteResponse:
    """Preview the input needed to receive at least amountOut."""
    swap = ledger.preview_swap_exact_output(request.direction, request.amount_out)
    return SwapQuoteResponse.from_quote(swap)


@router.post("/swap", response_model_exclude_none=True)
async def swap(request: SwapRequest, ledger: PoolLedger = Depends(get_ledger)) -> SwapResponse:
    """Commit an exact-input swap."""
    execution = ledger.swap(
        request.direction,
        request.amount_in,
        min_amount_out=request.min_amount_out,
        trader=normalize_address(request.trader) if request.trader else None,
    )
    return SwapResponse(
        swap=SwapQuoteResponse.from_quote(execution.quote),
        pool=PoolInfoResponse.from_state(execution.state, ledger.config),
    )


@router.post("/liquidity/quote")
async def liquidity_quote(
    request: DepositQuoteRequest,
    ledger: PoolLedger = Depends(get_ledger),
) -> LiquidityQuoteResponse:
    """Preview the shares a deposit would mint."""
    return LiquidityQuoteResponse.from_quote(ledger.preview_deposit(request.amount_a, request.amount_b))


@router.post("/liquidity/add")
async def add_liquidity(request: DepositRequest, ledger: PoolLedger = Depends(get_ledger)) -> DepositResponse:
    """Commit a deposit."""
    provider = normalize_address(request.provider)
    result = ledger.add_liquidity(provider, request.amount_a, request.amount_b)
    return DepositResponse(
        provider=provider,
        shares_issued=result.shares_issued,
        balance=result.balances.balance_of(provider),
        pool=PoolInfoResponse.from_state(result.state, ledger.config),
    )


@router.post("/liquidity/remove/quote")
async def remove_liquidity_quote(
    request: WithdrawRequest,
    ledger: PoolLedger = Depends(get_ledger),
) -> WithdrawQuoteResponse:
    """Preview what burning shares pays out."""
    withdrawal = ledger.preview_withdraw(normalize_address(request.holder), request.shares)
    return WithdrawQuoteResponse.from_quote(withdrawal)


@router.post("/liquidity/remove")
async def remove_liquidity(request: WithdrawRequest, ledger: PoolLedger = Depends(get_ledger)) -> WithdrawResponse:
    """Commit a withdrawal."""
    holder = normalize_address(request.holder)
    result = ledger.remove_liquidity(holder, request.shares)
    return WithdrawResponse(
        holder=holder,
        withdrawal=WithdrawQuoteResponse(
            shares_burned=result.shares_burned,
            amount_a=result.amount_a,
            amount_b=result.amount_b,
        ),
        balance=result.balances.balance_of(holder),
        pool=PoolInfoResponse.from_state(result.state, ledger.config),
    )
