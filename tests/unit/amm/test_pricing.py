"""Tests for constant product pricing."""

import pytest

from liquidity_pool.amm.pricing import (
    get_amount_out,
    get_required_input,
    min_amount_out,
    price_impact_bps,
    quote,
    swap_fee,
)
from liquidity_pool.constants import UINT256_MAX
from liquidity_pool.errors import (
    DivisionByZero,
    InvalidAmount,
    InvalidReserves,
    Overflow,
    OutputExceedsReserve,
)
from tests.helpers import ETH, USDT

RESERVE_ETH = 10 * ETH
RESERVE_USDT = 30_000 * USDT


class TestQuote:
    """Tests for the fee-free cross rate."""

    def test_quote_at_pool_ratio(self):
        """1 ETH is worth 3000 USDT in a 10 ETH / 30,000 USDT pool."""
        assert quote(ETH, RESERVE_ETH, RESERVE_USDT) == 3000 * USDT

    def test_quote_rounds_down(self):
        assert quote(1, 3, 10) == 3

    def test_quote_zero_amount(self):
        assert quote(0, 100, 100) == 0

    def test_quote_zero_reserve_raises(self):
        with pytest.raises(DivisionByZero):
            quote(100, 0, 100)


class TestGetAmountOut:
    """Tests for the forward swap formula."""

    def test_small_pool_example(self):
        """(1 * 997 * 30000) / (10 * 1000 + 1 * 997) = 2719.83, rounded down."""
        assert get_amount_out(1, 10, 30_000) == 2719

    def test_one_eth_into_funded_pool(self):
        """1 ETH against 10 ETH / 30,000 USDT pays ~2719.83 USDT."""
        assert get_amount_out(ETH, RESERVE_ETH, RESERVE_USDT) == 2_719_832_681

    def test_zero_input_returns_zero(self):
        assert get_amount_out(0, 100, 100) == 0

    @pytest.mark.parametrize("reserve_in,reserve_out", [(0, 100), (100, 0), (0, 0)])
    def test_zero_reserves_raise(self, reserve_in, reserve_out):
        with pytest.raises(InvalidReserves):
            get_amount_out(100, reserve_in, reserve_out)

    @pytest.mark.parametrize("amount_in", [1, 10**6, ETH, 1000 * ETH, 10**40])
    def test_output_strictly_below_reserve(self, amount_in):
        """No input, however large, drains the output reserve."""
        assert get_amount_out(amount_in, RESERVE_ETH, RESERVE_USDT) < RESERVE_USDT

    def test_monotonic_in_amount_in(self):
        outputs = [get_amount_out(n * ETH, RESERVE_ETH, RESERVE_USDT) for n in range(1, 6)]
        assert outputs == sorted(outputs)
        assert len(set(outputs)) == len(outputs)

    def test_fee_reduces_output_below_fee_free(self):
        """Output is below what the same trade pays with no fee."""
        amount_in = ETH
        fee_free = amount_in * RESERVE_USDT // (RESERVE_ETH + amount_in)
        assert get_amount_out(amount_in, RESERVE_ETH, RESERVE_USDT) < fee_free

    def test_product_does_not_decrease(self):
        """Settling at the quoted output never shrinks x * y."""
        amount_in = 3 * ETH
        amount_out = get_amount_out(amount_in, RESERVE_ETH, RESERVE_USDT)
        assert (RESERVE_ETH + amount_in) * (RESERVE_USDT - amount_out) >= RESERVE_ETH * RESERVE_USDT

    def test_overflowing_product_raises(self):
        """amount_in * 997 * reserve_out beyond uint256 is reported, not wrapped."""
        with pytest.raises(Overflow):
            get_amount_out(UINT256_MAX, RESERVE_ETH, RESERVE_USDT)


class TestGetRequiredInput:
    """Tests for the reverse swap formula."""

    def test_small_pool_example(self):
        """Buying 2719 of 30,000 from a reserve of 10 needs a single unit."""
        assert get_required_input(2719, 30_000, 10) == 1

    def test_rounds_up(self):
        """1 * 1 * 1000 / (1 * 997) is just above 1, so 2 is required."""
        assert get_required_input(1, 2, 1) == 2
        # Rounding down would have under-charged: 1 unit buys nothing
        assert get_amount_out(1, 1, 2) == 0
        assert get_amount_out(2, 1, 2) == 1

    @pytest.mark.parametrize(
        "amount_out",
        [1, 999, 10**6, 2_719_832_681, 15_000 * USDT, RESERVE_USDT - 1],
    )
    def test_round_trip_delivers_at_least_requested(self, amount_out):
        """get_amount_out(get_required_input(y)) >= y."""
        required = get_required_input(amount_out, RESERVE_USDT, RESERVE_ETH)
        assert get_amount_out(required, RESERVE_ETH, RESERVE_USDT) >= amount_out

    @pytest.mark.parametrize("amount_out", [1, 10**6, 2_719_832_681, 15_000 * USDT])
    def test_required_input_is_minimal(self, amount_out):
        """One unit less than the required input falls short."""
        required = get_required_input(amount_out, RESERVE_USDT, RESERVE_ETH)
        assert get_amount_out(required - 1, RESERVE_ETH, RESERVE_USDT) < amount_out

    def test_zero_output_needs_zero_input(self):
        assert get_required_input(0, RESERVE_USDT, RESERVE_ETH) == 0

    @pytest.mark.parametrize("amount_out", [RESERVE_USDT, RESERVE_USDT + 1])
    def test_output_at_or_above_reserve_raises(self, amount_out):
        with pytest.raises(OutputExceedsReserve):
            get_required_input(amount_out, RESERVE_USDT, RESERVE_ETH)

    def test_zero_reserves_raise(self):
        with pytest.raises(InvalidReserves):
            get_required_input(1, 100, 0)


class TestPriceImpact:
    """Tests for price impact in basis points."""

    def test_small_pool_example(self):
        """Realized 2719 per unit against a spot of 3000 is a 9.37% impact."""
        assert price_impact_bps(1, 2719, 10, 30_000) == 937

    def test_one_eth_into_funded_pool(self):
        amount_out = get_amount_out(ETH, RESERVE_ETH, RESERVE_USDT)
        assert price_impact_bps(ETH, amount_out, RESERVE_ETH, RESERVE_USDT) == 934

    def test_zero_input_has_no_impact(self):
        assert price_impact_bps(0, 0, RESERVE_ETH, RESERVE_USDT) == 0

    def test_tiny_trade_reports_fee(self):
        """A trade too small to move the price still pays the 0.3% fee."""
        amount_in = 10**6
        amount_out = get_amount_out(amount_in, RESERVE_ETH, RESERVE_USDT * 10**12)
        # 30 bps of fee, plus a fraction of a bp rounded up
        assert price_impact_bps(amount_in, amount_out, RESERVE_ETH, RESERVE_USDT * 10**12) == 31

    def test_impact_grows_with_size(self):
        impacts = [
            price_impact_bps(n * ETH, get_amount_out(n * ETH, RESERVE_ETH, RESERVE_USDT), RESERVE_ETH, RESERVE_USDT)
            for n in (1, 2, 5)
        ]
        assert impacts == sorted(impacts)

    def test_zero_reserves_raise(self):
        with pytest.raises(InvalidReserves):
            price_impact_bps(1, 1, 0, 1)


class TestSwapFee:
    """Tests for the retained fee amount."""

    @pytest.mark.parametrize(
        "amount_in,expected",
        [(0, 0), (333, 0), (334, 1), (999, 2), (1000, 3), (ETH, 3 * 10**15)],
    )
    def test_fee(self, amount_in, expected):
        assert swap_fee(amount_in) == expected


class TestMinAmountOut:
    """Tests for slippage tolerance."""

    def test_half_percent(self):
        assert min_amount_out(2719, 50) == 2705

    def test_zero_tolerance_keeps_quote(self):
        assert min_amount_out(2719, 0) == 2719

    def test_full_tolerance_accepts_anything(self):
        assert min_amount_out(2719, 10_000) == 0

    @pytest.mark.parametrize("slippage_bps", [-1, 10_001])
    def test_out_of_range_raises(self, slippage_bps):
        with pytest.raises(InvalidAmount):
            min_amount_out(2719, slippage_bps)
