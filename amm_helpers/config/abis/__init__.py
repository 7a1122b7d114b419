"""
Contract ABI package.

Contains the ABIs of the AMM factory, circuit-breaker pool, router and
the ERC20 subset used for unit conversion and approvals.
"""

from .erc20 import ERC20_ABI
from .factory import AMM_FACTORY_ABI
from .pool import CIRCUIT_BREAKER_AMM_ABI
from .router import AMM_ROUTER_ABI

__all__ = [
    # ERC20
    'ERC20_ABI',

    # AMM
    'AMM_FACTORY_ABI',
    'CIRCUIT_BREAKER_AMM_ABI',
    'AMM_ROUTER_ABI',
]
