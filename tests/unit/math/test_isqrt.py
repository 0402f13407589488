"""Tests for the integer square root."""

import math

import pytest

from liquidity_pool.constants import UINT256_MAX
from liquidity_pool.errors import InvalidAmount
from liquidity_pool.math import isqrt


class TestIsqrt:
    """isqrt returns floor(sqrt(n)) exactly."""

    @pytest.mark.parametrize("root", [0, 1, 2, 3, 10, 999, 1000, 1001, 10**9, 10**20 + 7])
    def test_perfect_squares(self, root):
        assert isqrt(root * root) == root

    @pytest.mark.parametrize("root", [1, 2, 3, 10, 1000, 10**9, 10**20 + 7])
    def test_neighbours_of_perfect_squares(self, root):
        """One below a square floors to root - 1; one above stays at root."""
        square = root * root
        assert isqrt(square - 1) == root - 1
        assert isqrt(square + 1) == root

    def test_small_range_bounds(self):
        """r * r <= n < (r + 1) ** 2 for every n up to 10,000."""
        for n in range(10_001):
            r = isqrt(n)
            assert r * r <= n < (r + 1) * (r + 1)

    def test_matches_math_isqrt_on_reserve_products(self):
        """Agrees with the standard library for products of realistic reserves."""
        products = [
            10**18 * 3000 * 10**6,
            10 * 10**18 * 30_000 * 10**6,
            123_456_789_012_345_678_901 * 987_654_321,
            UINT256_MAX,
        ]
        for n in products:
            assert isqrt(n) == math.isqrt(n)

    def test_first_deposit_example(self):
        """1 ETH against 3000 USDT."""
        n = 10**18 * 3000 * 10**6
        r = isqrt(n)
        assert r * r <= n < (r + 1) ** 2
        assert r == 54772255750516

    def test_negative_raises(self):
        with pytest.raises(InvalidAmount):
            isqrt(-1)

    def test_non_int_raises(self):
        with pytest.raises(TypeError):
            isqrt(4.0)  # type: ignore[arg-type]
