"""Test helpers module for shared test utilities."""

from tests.helpers.constants import ALICE, BOB, ETH, OWNER, USDT

__all__ = ["ETH", "USDT", "OWNER", "ALICE", "BOB"]
