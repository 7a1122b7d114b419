"""
Web3 setup helper - provides common web3 instance utilities.

Public API
----------
get_web3_instance(rpc_url=None)
    Return a Web3 instance connected to the specified RPC URL, cached per URL.
    Falls back to RPC_URL or the configured chain's default endpoint.
"""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from amm_helpers.config.network import RPC_TIMEOUT, get_rpc_url

__all__ = ["get_web3_instance", "reset_web3_cache"]

logger = logging.getLogger(__name__)

# Cached web3 instances, keyed by (rpc_url, poa)
_w3_instances: Dict[Tuple[str, bool], Web3] = {}


def get_web3_instance(rpc_url: str | None = None, *, poa: bool = True) -> Web3:
    """
    Get a Web3 instance connected to the specified RPC URL.

    Args:
        rpc_url: Optional RPC URL. If not provided, uses RPC_URL env var or
            the default endpoint of the configured chain.
        poa: Inject the extra-data middleware needed on PoA chains.

    Returns:
        Web3 instance
    """
    if rpc_url is None:
        rpc_url = get_rpc_url()

    cached = _w3_instances.get((rpc_url, poa))
    if cached is not None:
        return cached

    logger.debug("Connecting to %s", rpc_url)
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": RPC_TIMEOUT}))
    if poa:
        w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    _w3_instances[(rpc_url, poa)] = w3
    return w3


def reset_web3_cache() -> None:
    """Drop every cached instance (tests, RPC switches)."""
    _w3_instances.clear()
