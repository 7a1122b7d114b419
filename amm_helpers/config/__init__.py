"""
Configuration package for the AMM helpers.

Network table, known deployments, ABIs and logging setup.
"""

from amm_helpers.config.network import (
    CHAINS,
    CHAIN_ID_TO_NAME,
    DEFAULT_CHAIN_ID,
    GAS_LIMIT_BUFFER,
    RECEIPT_TIMEOUT,
    get_chain_config,
    get_chain_id,
    get_rpc_url,
    get_explorer_url,
    tx_url,
)

from amm_helpers.config.contracts import (
    DEFAULT_FACTORY,
    DEFAULT_ROUTER,
    ZERO_ADDRESS,
    get_factory_address,
    get_router_address,
)

from amm_helpers.config.abis import (
    ERC20_ABI,
    AMM_FACTORY_ABI,
    CIRCUIT_BREAKER_AMM_ABI,
    AMM_ROUTER_ABI,
)

__all__ = [
    # Network
    'CHAINS',
    'CHAIN_ID_TO_NAME',
    'DEFAULT_CHAIN_ID',
    'GAS_LIMIT_BUFFER',
    'RECEIPT_TIMEOUT',
    'get_chain_config',
    'get_chain_id',
    'get_rpc_url',
    'get_explorer_url',
    'tx_url',

    # Contracts
    'DEFAULT_FACTORY',
    'DEFAULT_ROUTER',
    'ZERO_ADDRESS',
    'get_factory_address',
    'get_router_address',

    # ABIs
    'ERC20_ABI',
    'AMM_FACTORY_ABI',
    'CIRCUIT_BREAKER_AMM_ABI',
    'AMM_ROUTER_ABI',
]
