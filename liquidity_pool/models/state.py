"""Pool state and share balances.

Both types are immutable. Every engine operation takes the current value
and returns a replacement, so a reader never observes a half-applied
deposit, withdrawal or swap.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from liquidity_pool.errors import InsufficientShares, InvalidAmount, InvalidReserves
from liquidity_pool.safe_int import S


class SwapDirection(str, Enum):
    """Which asset the trader sells into the pool."""

    A_TO_B = "a_to_b"  # Native asset in, token out
    B_TO_A = "b_to_a"  # Token in, native asset out


@dataclass(frozen=True)
class PoolState:
    """Reserves and share supply of one pool.

    Either all three fields are zero (empty pool) or both reserves and the
    supply are strictly positive (funded pool).

    Attributes:
        reserve_a: Native asset reserve in smallest units
        reserve_b: Token reserve in smallest units
        total_shares: Total LP share supply, locked minimum included
    """

    reserve_a: int = 0
    reserve_b: int = 0
    total_shares: int = 0

    def __post_init__(self) -> None:
        for name in ("reserve_a", "reserve_b", "total_shares"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
            if value < 0:
                raise InvalidReserves(f"{name} cannot be negative: {value}")

        if self.total_shares == 0:
            if self.reserve_a or self.reserve_b:
                raise InvalidReserves(
                    f"Pool without shares must be empty: reserves=({self.reserve_a}, {self.reserve_b})"
                )
        elif self.reserve_a == 0 or self.reserve_b == 0:
            raise InvalidReserves(
                f"Funded pool needs both reserves positive: reserves=({self.reserve_a}, {self.reserve_b})"
            )

    @classmethod
    def empty(cls) -> PoolState:
        """Create the state of a freshly deployed pool."""
        return cls()

    @property
    def is_empty(self) -> bool:
        """True if no liquidity has been deposited yet."""
        return self.total_shares == 0

    @property
    def k(self) -> int:
        """Constant product reserve_a * reserve_b.

        Raises:
            Overflow: If the product exceeds uint256
        """
        return (S(self.reserve_a) * self.reserve_b).value

    def get_reserves(self, direction: SwapDirection) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if direction is SwapDirection.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a

    def with_swap(self, direction: SwapDirection, amount_in: int, amount_out: int) -> PoolState:
        """Return the state after amount_in enters and amount_out leaves.

        Raises:
            Overflow: If the input reserve would exceed uint256
            Underflow: If amount_out exceeds the output reserve
        """
        reserve_in, reserve_out = self.get_reserves(direction)
        new_in = (S(reserve_in) + S(amount_in)).value
        new_out = (S(reserve_out) - S(amount_out)).value
        if direction is SwapDirection.A_TO_B:
            return PoolState(new_in, new_out, self.total_shares)
        return PoolState(new_out, new_in, self.total_shares)


@dataclass(frozen=True)
class SharesBalance:
    """Per-holder LP share balances.

    A sub-ledger of PoolState.total_shares: the balances always sum to the
    supply of the state they accompany. Holders with a zero balance are not
    stored.
    """

    _balances: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {}
        for holder, amount in self._balances.items():
            if isinstance(amount, bool) or not isinstance(amount, int):
                raise TypeError(f"Balance of {holder} must be int, got {type(amount).__name__}")
            if amount < 0:
                raise InvalidAmount(f"Balance of {holder} cannot be negative: {amount}")
            if amount:
                cleaned[holder] = amount
        object.__setattr__(self, "_balances", MappingProxyType(cleaned))

    def __iter__(self) -> Iterator[str]:
        return iter(self._balances)

    def __len__(self) -> int:
        return len(self._balances)

    def __contains__(self, holder: object) -> bool:
        return holder in self._balances

    def balance_of(self, holder: str) -> int:
        """Shares held by holder (0 if unknown)."""
        return self._balances.get(holder, 0)

    @property
    def total(self) -> int:
        """Sum of all balances."""
        return sum(self._balances.values())

    def credit(self, holder: str, amount: int) -> SharesBalance:
        """Return balances with amount added to holder."""
        balances = dict(self._balances)
        balances[holder] = balances.get(holder, 0) + amount
        return SharesBalance(balances)

    def debit(self, holder: str, amount: int) -> SharesBalance:
        """Return balances with amount removed from holder.

        Raises:
            InsufficientShares: If holder has fewer than amount shares
        """
        current = self._balances.get(holder, 0)
        if amount > current:
            raise InsufficientShares(f"{holder} holds {current} shares, cannot burn {amount}")
        balances = dict(self._balances)
        balances[holder] = current - amount
        return SharesBalance(balances)
