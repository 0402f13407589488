"""Pydantic response bodies for the pool API.

Amounts are serialized as decimal strings; human-readable figures derived
from them are strings too, so no value ever passes through a float.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from liquidity_pool.config import PoolConfig
from liquidity_pool.constants import FEE_DENOMINATOR, FEE_NUMERATOR, MINIMUM_LIQUIDITY
from liquidity_pool.display import format_bps, format_decimal, inverse_spot_price, pool_value_in_b, spot_price
from liquidity_pool.models.quotes import LiquidityQuote, SwapQuote, WithdrawQuote
from liquidity_pool.models.state import PoolState, SwapDirection
from liquidity_pool.models.types import Uint256

_CAMEL = {"populate_by_name": True}


class AssetInfo(BaseModel):
    symbol: str
    decimals: int


class ShareInfo(AssetInfo):
    """LP share token metadata."""

    name: str


class PoolInfoResponse(BaseModel):
    """Reserves, supply and derived prices."""

    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    total_shares: Uint256 = Field(alias="totalShares")
    asset_a: AssetInfo = Field(alias="assetA")
    asset_b: AssetInfo = Field(alias="assetB")
    share: ShareInfo
    price_a_in_b: str = Field(alias="priceAInB", description="One whole A in B units")
    price_b_in_a: str = Field(alias="priceBInA", description="One whole B in A units")
    pool_value_in_b: str = Field(alias="poolValueInB")
    fee_numerator: int = Field(default=FEE_NUMERATOR, alias="feeNumerator")
    fee_denominator: int = Field(default=FEE_DENOMINATOR, alias="feeDenominator")
    minimum_liquidity: int = Field(default=MINIMUM_LIQUIDITY, alias="minimumLiquidity")

    model_config = _CAMEL

    @classmethod
    def from_state(cls, state: PoolState, config: PoolConfig) -> PoolInfoResponse:
        return cls(
            reserve_a=state.reserve_a,
            reserve_b=state.reserve_b,
            total_shares=state.total_shares,
            asset_a=AssetInfo(symbol=config.asset_a_symbol, decimals=config.asset_a_decimals),
            asset_b=AssetInfo(symbol=config.asset_b_symbol, decimals=config.asset_b_decimals),
            share=ShareInfo(name=config.share_name, symbol=config.share_symbol, decimals=config.share_decimals),
            price_a_in_b=format_decimal(spot_price(state, config.asset_a_decimals, config.asset_b_decimals)),
            price_b_in_a=format_decimal(inverse_spot_price(state, config.asset_a_decimals, config.asset_b_decimals)),
            pool_value_in_b=format_decimal(pool_value_in_b(state, config.asset_b_decimals)),
        )


class BalanceResponse(BaseModel):
    """LP position of one holder."""

    holder: str
    shares: Uint256
    share_percent_bps: int = Field(alias="sharePercentBps")
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")
    value_in_b: Uint256 = Field(alias="valueInB")

    model_config = _CAMEL


class CrossRateResponse(BaseModel):
    direction: SwapDirection
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")

    model_config = _CAMEL


class SwapQuoteResponse(BaseModel):
    direction: SwapDirection
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    fee_amount: Uint256 = Field(alias="feeAmount")
    price_impact_bps: int = Field(alias="priceImpactBps")
    price_impact: str = Field(alias="priceImpact", description="Price impact as a percentage")
    min_amount_out: Uint256 | None = Field(default=None, alias="minAmountOut")

    model_config = _CAMEL

    @classmethod
    def from_quote(cls, quote: SwapQuote, min_amount_out: int | None = None) -> SwapQuoteResponse:
        return cls(
            direction=quote.direction,
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            fee_amount=quote.fee_amount,
            price_impact_bps=quote.price_impact_bps,
            price_impact=format_bps(quote.price_impact_bps),
            min_amount_out=min_amount_out,
        )


class SwapResponse(BaseModel):
    """Settled swap and the resulting pool."""

    swap: SwapQuoteResponse
    pool: PoolInfoResponse


class LiquidityQuoteResponse(BaseModel):
    deposit_a: Uint256 = Field(alias="depositA")
    deposit_b: Uint256 = Field(alias="depositB")
    shares_issued: Uint256 = Field(alias="sharesIssued")
    share_percent_bps: int = Field(alias="sharePercentBps")

    model_config = _CAMEL

    @classmethod
    def from_quote(cls, quote: LiquidityQuote) -> LiquidityQuoteResponse:
        return cls(
            deposit_a=quote.deposit_a,
            deposit_b=quote.deposit_b,
            shares_issued=quote.shares_issued,
            share_percent_bps=quote.share_percent_bps,
        )


class DepositResponse(BaseModel):
    provider: str
    shares_issued: Uint256 = Field(alias="sharesIssued")
    balance: Uint256
    pool: PoolInfoResponse

    model_config = _CAMEL


class WithdrawQuoteResponse(BaseModel):
    shares_burned: Uint256 = Field(alias="sharesBurned")
    amount_a: Uint256 = Field(alias="amountA")
    amount_b: Uint256 = Field(alias="amountB")

    model_config = _CAMEL

    @classmethod
    def from_quote(cls, quote: WithdrawQuote) -> WithdrawQuoteResponse:
        return cls(shares_burned=quote.shares_burned, amount_a=quote.amount_a, amount_b=quote.amount_b)


class WithdrawResponse(BaseModel):
    holder: str
    withdrawal: WithdrawQuoteResponse
    balance: Uint256
    pool: PoolInfoResponse


class ErrorResponse(BaseModel):
    """Body returned for rejected operations."""

    error: str = Field(description="Error kind, e.g. insufficient_shares")
    detail: str
