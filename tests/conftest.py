"""Pytest configuration and fixtures."""

import pytest

from liquidity_pool.amm import commit_deposit
from liquidity_pool.ledger import PoolLedger
from liquidity_pool.models.state import PoolState, SharesBalance
from tests.helpers import ETH, OWNER, USDT


@pytest.fixture
def empty_state() -> PoolState:
    """A freshly deployed pool."""
    return PoolState.empty()


@pytest.fixture
def funded() -> tuple[PoolState, SharesBalance]:
    """Pool seeded by OWNER with 10 ETH and 30,000 USDT (1 ETH = 3000 USDT)."""
    result = commit_deposit(PoolState.empty(), SharesBalance(), OWNER, 10 * ETH, 30_000 * USDT)
    return result.state, result.balances


@pytest.fixture
def funded_state(funded: tuple[PoolState, SharesBalance]) -> PoolState:
    return funded[0]


@pytest.fixture
def funded_balances(funded: tuple[PoolState, SharesBalance]) -> SharesBalance:
    return funded[1]


@pytest.fixture
def ledger() -> PoolLedger:
    """Ledger over an empty pool."""
    return PoolLedger()


@pytest.fixture
def funded_ledger(funded: tuple[PoolState, SharesBalance]) -> PoolLedger:
    """Ledger over the funded pool."""
    state, balances = funded
    return PoolLedger(state=state, balances=balances)
