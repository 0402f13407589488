"""Tests for display conversions."""

from decimal import Decimal

import pytest

from liquidity_pool.constants import UINT256_MAX
from liquidity_pool.display import (
    format_bps,
    format_decimal,
    format_units,
    inverse_spot_price,
    parse_units,
    pool_value_in_b,
    spot_price,
)
from liquidity_pool.errors import InvalidAmount
from liquidity_pool.models.state import PoolState
from tests.helpers import ETH, USDT


class TestUnits:
    """Tests for format_units and parse_units."""

    def test_format_whole_units(self):
        assert format_units(ETH, 18) == Decimal("1")
        assert format_units(2_500_000, 6) == Decimal("2.5")

    def test_format_uint256_max_is_exact(self):
        value = format_units(UINT256_MAX, 18)
        sign, digits, exponent = value.as_tuple()
        assert int("".join(map(str, digits))) == UINT256_MAX
        assert exponent == -18

    @pytest.mark.parametrize(
        "text,decimals,expected",
        [("1", 18, ETH), ("1.5", 6, 1_500_000), ("0.000001", 6, 1), ("0", 18, 0), (" 3000 ", 6, 3000 * USDT)],
    )
    def test_parse(self, text, decimals, expected):
        assert parse_units(text, decimals) == expected

    @pytest.mark.parametrize("text", ["abc", "", "-1", "1.0000001", "NaN", "Infinity"])
    def test_parse_rejects(self, text):
        with pytest.raises(InvalidAmount):
            parse_units(text, 6)

    def test_parse_keeps_precision_past_context(self):
        """Digits beyond the Decimal context precision are not rounded away."""
        with pytest.raises(InvalidAmount):
            parse_units("1" + "0" * 70 + ".000000000000000001", 18)
        with pytest.raises(InvalidAmount):
            parse_units("1" * 60 + "." + "1" * 19, 18)
        assert parse_units("1" * 60 + "." + "1" * 18, 18) == int("1" * 78)
        assert parse_units("1.0000000000000000010000", 18) == ETH + 1
        assert parse_units("1" + "0" * 40 + ".000000000000000001", 18) == 10**58 + 1

    def test_parse_uint256_bound(self):
        assert parse_units(str(UINT256_MAX), 0) == UINT256_MAX
        with pytest.raises(InvalidAmount):
            parse_units(str(UINT256_MAX + 1), 0)
        with pytest.raises(InvalidAmount):
            parse_units("1E+100", 18)

    @pytest.mark.parametrize("text", ["0E+1000000000", "0.000", "-0"])
    def test_parse_zero_forms(self, text):
        assert parse_units(text, 18) == 0

    def test_parse_tiny_exponent_rejected(self):
        with pytest.raises(InvalidAmount):
            parse_units("1E-1000000000", 18)

    def test_parse_non_string_rejected(self):
        with pytest.raises(InvalidAmount):
            parse_units(None, 6)  # type: ignore[arg-type]


class TestPrices:
    """Tests for spot prices and pool value."""

    def test_spot_price(self, funded_state):
        assert spot_price(funded_state, 18, 6) == Decimal(3000)

    def test_inverse_spot_price(self, funded_state):
        price = inverse_spot_price(funded_state, 18, 6)
        assert Decimal("0.000333333") < price < Decimal("0.000333334")

    def test_empty_pool_prices_are_zero(self, empty_state):
        assert spot_price(empty_state, 18, 6) == 0
        assert inverse_spot_price(empty_state, 18, 6) == 0

    def test_pool_value_counts_both_sides(self, funded_state):
        assert pool_value_in_b(funded_state, 6) == Decimal(60_000)

    def test_pool_value_uneven_decimals(self):
        state = PoolState(reserve_a=5, reserve_b=1_234_567, total_shares=10)
        assert pool_value_in_b(state, 6) == Decimal("2.469134")


class TestFormatting:
    @pytest.mark.parametrize("bps,expected", [(0, "0.00%"), (30, "0.30%"), (934, "9.34%"), (10_000, "100.00%")])
    def test_format_bps(self, bps, expected):
        assert format_bps(bps) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(Decimal("3E+3"), "3000"), (Decimal("60000.000000"), "60000"), (Decimal("0.50"), "0.5"), (Decimal("0E-6"), "0")],
    )
    def test_format_decimal(self, value, expected):
        assert format_decimal(value) == expected


class TestRoundTrip:
    @pytest.mark.parametrize(
        "amount,decimals",
        [(0, 6), (1, 6), (1, 18), (2_719_832_681, 6), (10 * ETH, 18), (UINT256_MAX, 18), (12345, 0)],
    )
    def test_parse_of_format_is_identity(self, amount, decimals):
        assert parse_units(str(format_units(amount, decimals)), decimals) == amount
