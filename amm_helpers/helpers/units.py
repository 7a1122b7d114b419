"""
Unit helpers: token amount scaling, default deadlines and address checks.

Amounts crossing the contract boundary are integers in the token's base
units. Human amounts are ``Decimal`` (never ``float``).
"""
from __future__ import annotations

import time
from decimal import Decimal, InvalidOperation

from web3 import Web3

__all__ = [
    "DEFAULT_DEADLINE_SECONDS",
    "default_deadline",
    "to_base_units",
    "from_base_units",
    "checksum",
    "same_address",
]

DEFAULT_DEADLINE_SECONDS = 600


def default_deadline(seconds: int = DEFAULT_DEADLINE_SECONDS) -> int:
    """Return a unix timestamp ``seconds`` in the future."""

    return int(time.time()) + seconds


def to_base_units(amount: Decimal | str | int, decimals: int) -> int:
    """Scale a human amount to integer base units.

    ``to_base_units("1.5", 6) == 1_500_000``. Raises ``ValueError`` for
    negative amounts and for amounts with more fractional digits than the
    token supports, instead of silently truncating them. The scaling is
    integer arithmetic on the decimal digits, so uint256-sized amounts
    stay exact.
    """
    if isinstance(amount, float):
        raise TypeError("float amounts are ambiguous; pass a Decimal or str")
    try:
        value = Decimal(amount)
    except InvalidOperation as err:
        raise ValueError(f"Not a number: {amount!r}") from err

    if not value.is_finite():
        raise ValueError(f"Not a finite amount: {amount!r}")
    if value < 0:
        raise ValueError(f"Negative amount: {amount}")

    _, digits, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digits)) or "0")
    shift = exponent + decimals
    if shift >= 0:
        return coefficient * 10 ** shift

    divisor = 10 ** -shift
    if coefficient % divisor:
        raise ValueError(f"{amount} has more than {decimals} decimal places")
    return coefficient // divisor


def from_base_units(raw: int, decimals: int) -> Decimal:
    """Inverse of :func:`to_base_units`; exact ``Decimal`` at any magnitude."""
    sign, digits, exponent = Decimal(int(raw)).as_tuple()
    return Decimal((sign, digits, exponent - decimals))


def checksum(address: str) -> str:
    """EIP-55 checksum *address*; raises ``ValueError`` if it is not an address."""
    if not Web3.is_address(address):
        raise ValueError(f"Invalid address: {address!r}")
    return Web3.to_checksum_address(address)


def same_address(a: str, b: str | None) -> bool:
    """Case-insensitive address equality; ``False`` when *b* is ``None``."""
    return b is not None and a.lower() == b.lower()
