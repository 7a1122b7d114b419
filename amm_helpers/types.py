"""
Parameter and result types shared by the factory, pool and router helpers.

All token amounts are integers in base units. ``deadline`` is a unix
timestamp; ``None`` means "now + 600 seconds" evaluated when the call is
sent.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from decimal import Decimal
from typing import Optional, Sequence

Address = str

MAX_BPS = 10_000


@dataclass(frozen=True)
class SwapParams:
    amount_in: int
    amount_out_min: int
    path: Sequence[Address]
    to: Address
    value: Optional[int] = None  # native value for ETH paths
    deadline: Optional[int] = None
    input: Optional[Address] = None


@dataclass(frozen=True)
class QuoteParams:
    """Quote request.

    ``input`` names the token ``amount_in`` is denominated in. Pool quotes
    treat ``input == path[0]`` (the default) as exact-in and anything else
    as exact-out.
    """

    amount_in: int
    path: Sequence[Address]
    input: Optional[Address] = None


@dataclass(frozen=True)
class AddLiquidityParams:
    pair: Address
    token_a: Address
    token_b: Address
    amount_a_desired: int
    amount_b_desired: int
    amount_a_min: int
    amount_b_min: int
    to: Address
    deadline: Optional[int] = None


@dataclass(frozen=True)
class AddLiquidityETHParams:
    pair: Address
    token: Address
    amount_token_desired: int
    amount_token_min: int
    amount_eth_min: int
    to: Address
    deadline: Optional[int] = None
    value: Optional[int] = None  # defaults to amount_eth_min


@dataclass(frozen=True)
class RemoveLiquidityParams:
    pair: Address
    token_a: Address
    token_b: Address
    liquidity: int
    amount_a_min: int
    amount_b_min: int
    to: Address
    deadline: Optional[int] = None


@dataclass(frozen=True)
class RemoveLiquidityETHParams:
    pair: Address
    token: Address
    liquidity: int
    amount_token_min: int
    amount_eth_min: int
    to: Address
    deadline: Optional[int] = None


@dataclass(frozen=True)
class BreakerParams:
    """Fee curve and circuit-breaker levels, all in basis points.

    Used for the factory defaults applied to new pools and for per-pool
    ``updateParams``. Field order matches the on-chain struct.
    """

    base_fee_bps: int
    fee_alpha_bps: int
    lvl1_bps: int
    lvl2_bps: int
    lvl3_bps: int
    max_tx_bps: int

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or not 0 <= value <= MAX_BPS:
                raise ValueError(f"{f.name} must be an int in [0, {MAX_BPS}], got {value!r}")

    def as_tuple(self) -> tuple[int, ...]:
        return astuple(self)


@dataclass(frozen=True)
class PoolQuote:
    amount: int
    fee_bps: Decimal
    fee: int


@dataclass(frozen=True)
class RouterQuote:
    amount: int
    fee: int


@dataclass(frozen=True)
class Reserves:
    r0: int
    r1: int
