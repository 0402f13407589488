"""Checked integer wrapper for arithmetic on token amounts and shares.

SafeInt makes every pool formula fail loudly instead of producing a value
the on-chain ledger could never hold:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Addition or multiplication above 2**256 - 1 raises Overflow

Usage pattern:
    from liquidity_pool.safe_int import S

    def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
        # Wrap at entry
        amount_in_with_fee = S(amount_in) * FEE_NUMERATOR

        # Natural arithmetic - automatically checked
        numerator = amount_in_with_fee * reserve_out
        denominator = S(reserve_in) * FEE_DENOMINATOR + amount_in_with_fee

        # Unwrap at exit
        return (numerator // denominator).value
"""

from __future__ import annotations

from liquidity_pool.constants import UINT256_MAX
from liquidity_pool.errors import DivisionByZero, Overflow, Underflow


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Values are bounded to the uint256 range at construction and after every
    operation, so an overflowing product is reported at the multiplication
    that produced it.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt (bool and float included)
            Underflow: If value is negative
            Overflow: If value exceeds 2**256 - 1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        self._value = _check_range(value)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            Overflow: If the sum exceeds uint256
        """
        return SafeInt(_check_range(self._value + _extract_value(other), "+", other))

    def __radd__(self, other: int) -> SafeInt:
        return self.__add__(other)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        """Subtract self from other (other - self).

        Raises:
            Underflow: If result would be negative
        """
        return SafeInt(_extract_value(other)) - self

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds uint256
        """
        return SafeInt(_check_range(self._value * _extract_value(other), "*", other))

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, rounding down.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division (rounds up).

        Computed as q + (r > 0) so the intermediate never exceeds self.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        quotient, remainder = divmod(self._value, other_val)
        return SafeInt(quotient + (1 if remainder else 0))

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def max(self, other: SafeInt | int) -> SafeInt:
        """Return maximum of self and other."""
        return SafeInt(max(self._value, _extract_value(other)))


def _check_range(value: int, op: str | None = None, other: SafeInt | int | None = None) -> int:
    """Validate that value fits the uint256 range."""
    if value < 0:
        raise Underflow(f"Negative value cannot be uint256: {value}")
    if value > UINT256_MAX:
        if op is None:
            raise Overflow(f"Value exceeds uint256 max: {value}")
        raise Overflow(f"Overflow: result of '{op} {_extract_value(other)}' exceeds uint256 max")
    return value


def _extract_value(x: SafeInt | int | None) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"SafeInt operand must be int, got {type(x).__name__}")
    return x


# Convenience alias for concise code
S = SafeInt
