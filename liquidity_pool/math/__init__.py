"""Mathematical utilities for the pool engine.

This package provides exact integer primitives:
- isqrt: floor square root used to bootstrap the first share issuance
"""

from liquidity_pool.math.integer import isqrt

__all__ = ["isqrt"]
