"""
Network configuration for the AMM helpers.

Contains chain ids, default RPC URLs and block explorers for the networks
the AMM is deployed on. ``RPC_URL`` and ``CHAIN`` environment variables
override the defaults.
"""

import os
from typing import Any


# =============================================================================
# CHAIN CONFIGURATIONS
# =============================================================================

CHAINS: dict[str, dict[str, Any]] = {
    "ethereum": {
        "chain_id": 1,
        "name": "Ethereum Mainnet",
        "rpc_urls": [
            "https://ethereum-rpc.publicnode.com",
            "https://rpc.ankr.com/eth",
        ],
        "explorer": {
            "name": "Etherscan",
            "url": "https://etherscan.io",
        },
    },
    "sepolia": {
        "chain_id": 11155111,
        "name": "Sepolia",
        "rpc_urls": [
            "https://ethereum-sepolia-rpc.publicnode.com",
            "https://rpc.sepolia.org",
        ],
        "explorer": {
            "name": "Etherscan Sepolia",
            "url": "https://sepolia.etherscan.io",
        },
    },
    "anvil": {
        "chain_id": 31337,
        "name": "Anvil (local)",
        "rpc_urls": [
            "http://127.0.0.1:8545",
        ],
        "explorer": None,  # No explorer for a local node
    },
}

# Chain ID to name mapping
CHAIN_ID_TO_NAME: dict[int, str] = {
    config["chain_id"]: name for name, config in CHAINS.items()
}

DEFAULT_CHAIN_ID: int = CHAINS["ethereum"]["chain_id"]

# Network timeouts
RPC_TIMEOUT: int = 30  # seconds
RECEIPT_TIMEOUT: int = 120  # seconds
GAS_LIMIT_BUFFER: float = 1.1  # 10% buffer for gas limit estimates


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_chain_config(chain: str | int | None = None) -> dict[str, Any]:
    """Get configuration for a specific chain.

    Args:
        chain: Chain name (e.g., 'ethereum', 'sepolia') or chain ID.
               If None, uses the CHAIN environment variable or defaults to 'ethereum'.

    Returns:
        Chain configuration dictionary.

    Raises:
        ValueError: If chain is not supported.
    """
    if chain is None:
        chain = os.getenv("CHAIN", "ethereum")

    if isinstance(chain, int):
        name = CHAIN_ID_TO_NAME.get(chain)
        if name is None:
            raise ValueError(f"Unsupported chain ID: {chain}")
        chain = name

    chain = chain.lower()
    if chain not in CHAINS:
        raise ValueError(f"Unsupported chain: {chain}. Supported: {list(CHAINS.keys())}")

    return CHAINS[chain]


def get_chain_id(chain: str | None = None) -> int:
    """Resolve the chain ID.

    ``CHAIN_ID`` in the environment wins over the chain table when no chain
    is passed explicitly.
    """
    if chain is None and os.getenv("CHAIN_ID"):
        return int(os.environ["CHAIN_ID"])
    config = get_chain_config(chain)
    return config["chain_id"]


def get_rpc_url(chain: str | int | None = None) -> str:
    """Get the primary RPC URL for a chain.

    Uses RPC_URL environment variable if set, otherwise returns first default.
    """
    env_rpc = os.getenv("RPC_URL")
    if env_rpc:
        return env_rpc

    config = get_chain_config(chain)
    return config["rpc_urls"][0]


def get_explorer_url(chain: str | int | None = None) -> str | None:
    """Get the block explorer URL for a chain, ``None`` for local nodes."""
    config = get_chain_config(chain)
    explorer = config["explorer"]
    return explorer["url"] if explorer else None


def tx_url(tx_hash: str, chain: str | int | None = None) -> str:
    """Return an explorer link for *tx_hash*, or the bare hash when there is no explorer."""
    if not tx_hash.startswith("0x"):
        tx_hash = "0x" + tx_hash
    base = get_explorer_url(chain)
    if base is None:
        return tx_hash
    return f"{base}/tx/{tx_hash}"
