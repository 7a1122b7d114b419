"""
Known AMM deployments.

Factory and router addresses keyed by chain id. ``AMM_FACTORY_ADDRESS`` and
``AMM_ROUTER_ADDRESS`` in the environment take precedence, so a deployment
on any chain can be used without editing this table.
"""

import os

from .network import get_chain_id

# Deterministic addresses of the first two contracts deployed by the default
# anvil account (factory first, then router) in the local deploy script.
DEFAULT_FACTORY: dict[int, str] = {
    31337: "0x5FbDB2315678afecb367f032d93F642f64180aa3",
}

DEFAULT_ROUTER: dict[int, str] = {
    31337: "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512",
}

ZERO_ADDRESS: str = "0x0000000000000000000000000000000000000000"


def _resolve(kind: str, table: dict[int, str], env_var: str, chain_id: int | None) -> str:
    env_addr = os.getenv(env_var)
    if env_addr:
        return env_addr

    chain_id = get_chain_id() if chain_id is None else int(chain_id)
    address = table.get(chain_id)
    if address is None:
        raise ValueError(
            f"No {kind} deployment known for chain {chain_id}. "
            f"Pass the address explicitly or set {env_var}."
        )
    return address


def get_factory_address(chain_id: int | None = None) -> str:
    """Return the factory address for *chain_id* (env override first)."""
    return _resolve("factory", DEFAULT_FACTORY, "AMM_FACTORY_ADDRESS", chain_id)


def get_router_address(chain_id: int | None = None) -> str:
    """Return the router address for *chain_id* (env override first)."""
    return _resolve("router", DEFAULT_ROUTER, "AMM_ROUTER_ADDRESS", chain_id)
