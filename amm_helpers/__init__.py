"""
Client helpers for the circuit-breaker AMM (factory, pool, router).

All economic logic runs on-chain; these classes format calls, wait for
receipts and decode the results.
"""

from amm_helpers.exceptions import (
    AMMError,
    ContractRevertError,
    EventNotFoundError,
    InvalidPathError,
    PoolNotFoundError,
    TransactionFailedError,
)
from amm_helpers.factory import AMM, pair_key
from amm_helpers.pool import Pool
from amm_helpers.router import Router
from amm_helpers.helpers.token import Token
from amm_helpers.helpers.units import (
    DEFAULT_DEADLINE_SECONDS,
    default_deadline,
    from_base_units,
    to_base_units,
)
from amm_helpers.types import (
    AddLiquidityETHParams,
    AddLiquidityParams,
    BreakerParams,
    PoolQuote,
    QuoteParams,
    RemoveLiquidityETHParams,
    RemoveLiquidityParams,
    Reserves,
    RouterQuote,
    SwapParams,
)

__version__ = "0.1.0"

__all__ = [
    "AMM",
    "Pool",
    "Router",
    "Token",
    "pair_key",
    # Params / results
    "SwapParams",
    "QuoteParams",
    "AddLiquidityParams",
    "AddLiquidityETHParams",
    "RemoveLiquidityParams",
    "RemoveLiquidityETHParams",
    "BreakerParams",
    "PoolQuote",
    "RouterQuote",
    "Reserves",
    # Units
    "DEFAULT_DEADLINE_SECONDS",
    "default_deadline",
    "to_base_units",
    "from_base_units",
    # Errors
    "AMMError",
    "InvalidPathError",
    "PoolNotFoundError",
    "ContractRevertError",
    "TransactionFailedError",
    "EventNotFoundError",
]
