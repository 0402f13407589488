"""Pydantic request bodies for the pool API."""

from pydantic import BaseModel, Field

from liquidity_pool.models.state import SwapDirection
from liquidity_pool.models.types import Address, Uint256


class SwapQuoteRequest(BaseModel):
    """Exact-input swap preview."""

    direction: SwapDirection
    amount_in: Uint256 = Field(alias="amountIn")
    slippage_bps: int | None = Field(
        default=None,
        alias="slippageBps",
        ge=0,
        le=10_000,
        description="Tolerance for the returned minAmountOut. Uses the pool default if omitted.",
    )

    model_config = {"populate_by_name": True}


class SwapExactOutputRequest(BaseModel):
    """Exact-output swap preview."""

    direction: SwapDirection
    amount_out: Uint256 = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class SwapRequest(BaseModel):
    """Commit an exact-input swap."""

    direction: SwapDirection
    amount_in: Uint256 = Field(alias="amountIn")
    min_amount_out: Uint256 = Field(default=0, alias="minAmountOut")
    trader: Address | None = None

    model_config = {"populate_by_name": True}


class DepositQuoteRequest(BaseModel):
    """Deposit preview."""

    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")

    model_config = {"populate_by_name": True}


class DepositRequest(BaseModel):
    """Commit a deposit."""

    provider: Address
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")

    model_config = {"populate_by_name": True}


class WithdrawRequest(BaseModel):
    """Withdrawal preview or commit."""

    holder: Address
    shares: Uint256

    model_config = {"populate_by_name": True}
