"""Exact integer helpers for pool accounting."""

from liquidity_pool.errors import InvalidAmount


def isqrt(n: int) -> int:
    """Integer square root, floor(sqrt(n)), by Newton's method.

    Starts from x0 = (n + 1) // 2, which is >= sqrt(n) for every n >= 0,
    and iterates x = (x + n // x) // 2. From an overestimate the sequence
    strictly decreases until it reaches floor(sqrt(n)); the first step that
    does not decrease ends the loop.

    Args:
        n: Non-negative integer (arbitrary size)

    Returns:
        Largest r with r * r <= n

    Raises:
        InvalidAmount: If n is negative
        TypeError: If n is not an int
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"isqrt requires int, got {type(n).__name__}")
    if n < 0:
        raise InvalidAmount(f"isqrt of negative value: {n}")
    if n < 2:
        return n

    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x
