"""Exceptions raised by the AMM helpers."""

from __future__ import annotations

from typing import Any


class AMMError(Exception):
    """Base exception for AMM helper errors"""
    pass


class InvalidPathError(AMMError, ValueError):
    """Swap / quote path has the wrong number of hops."""
    pass


class PoolNotFoundError(AMMError, LookupError):
    """The factory returned the zero address for a token pair."""

    def __init__(self, token_a: str, token_b: str):
        super().__init__(f"Pool not found for pair {token_a} / {token_b}")
        self.token_a = token_a
        self.token_b = token_b


class ContractRevertError(AMMError):
    """A contract call reverted; ``reason`` is the revert string as returned by the node."""

    def __init__(self, fn_name: str, reason: str, data: Any = None):
        super().__init__(f"{fn_name} reverted: {reason}")
        self.fn_name = fn_name
        self.reason = reason
        self.data = data


class TransactionFailedError(AMMError):
    """Transaction was mined with ``status == 0``."""

    def __init__(self, fn_name: str, tx_hash: str, receipt: Any = None):
        super().__init__(f"{fn_name} transaction {tx_hash} failed on-chain")
        self.fn_name = fn_name
        self.tx_hash = tx_hash
        self.receipt = receipt


class EventNotFoundError(AMMError):
    """Expected event missing from a transaction receipt."""
    pass
