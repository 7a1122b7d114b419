"""
AMM (factory helper) - create, look up and attach pools.

Resolved pool addresses are cached per instance under an order-independent
pair key, so ``get_pool(a, b)`` and ``get_pool(b, a)`` share one entry.
The zero address is never cached.
"""
from __future__ import annotations

import logging

from eth_abi import encode
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.logs import DISCARD
from web3.types import TxReceipt

from amm_helpers.config.abis import AMM_FACTORY_ABI
from amm_helpers.config.contracts import ZERO_ADDRESS, get_factory_address
from amm_helpers.exceptions import EventNotFoundError, PoolNotFoundError
from amm_helpers.helpers.tx_sender import send_transaction
from amm_helpers.helpers.units import checksum
from amm_helpers.pool import Pool
from amm_helpers.types import BreakerParams

__all__ = ["AMM", "pair_key"]

logger = logging.getLogger(__name__)


def pair_key(token_a: str, token_b: str) -> str:
    """Return ``keccak256(abi.encode(lo, hi))`` for the numerically sorted pair."""
    a, b = checksum(token_a), checksum(token_b)
    lo, hi = (a, b) if int(a, 16) < int(b, 16) else (b, a)
    return Web3.keccak(encode(["address", "address"], [lo, hi])).to_0x_hex()


class AMM:
    """Factory helper bound to one factory deployment."""

    def __init__(
        self,
        w3: Web3,
        chain_id: int | None = None,
        factory_address: str | None = None,
        account: LocalAccount | None = None,
    ):
        """
        Args:
            w3: Connected Web3 instance.
            chain_id: Chain used to look up the default factory deployment.
                Ignored when *factory_address* is given.
            factory_address: Explicit factory address.
            account: Local signer for state-changing calls.
        """
        self.w3 = w3
        self.account = account
        self.address = checksum(factory_address or get_factory_address(chain_id))
        self.factory = w3.eth.contract(address=self.address, abi=AMM_FACTORY_ABI)
        self._cache: dict[str, str] = {}

    pair_key = staticmethod(pair_key)

    # ------------------------------------------------------------------ #
    # Pool management                                                    #
    # ------------------------------------------------------------------ #

    def create_pool(self, token_a: str, token_b: str) -> str:
        """Deploy a pool for the pair and return its address from ``PoolCreated``."""
        token_a, token_b = checksum(token_a), checksum(token_b)
        receipt = self._send(self.factory.functions.createPool(token_a, token_b))

        events = self.factory.events.PoolCreated().process_receipt(receipt, errors=DISCARD)
        if not events:
            raise EventNotFoundError(f"No PoolCreated event in receipt for {token_a} / {token_b}")

        pool = checksum(events[0]["args"]["pool"])
        self._cache[pair_key(token_a, token_b)] = pool
        logger.info("Created pool %s for %s / %s", pool, token_a, token_b)
        return pool

    def get_pool(self, token_a: str, token_b: str) -> str:
        """Return the pool address, or the zero address when none exists."""
        key = pair_key(token_a, token_b)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        addr = self.factory.functions.getPool(checksum(token_a), checksum(token_b)).call()
        if int(addr, 16) != 0:
            addr = checksum(addr)
            self._cache[key] = addr
        else:
            addr = ZERO_ADDRESS
            logger.debug("No pool for %s / %s", token_a, token_b)
        return addr

    def pool(self, token_a: str, token_b: str) -> Pool:
        """Attach a :class:`Pool` for the pair; raises ``PoolNotFoundError`` if absent."""
        addr = self.get_pool(token_a, token_b)
        if addr == ZERO_ADDRESS:
            raise PoolNotFoundError(token_a, token_b)
        return Pool.attach(addr, self.w3, self.account)

    def cached_pool(self, token_a: str, token_b: str) -> str | None:
        return self._cache.get(pair_key(token_a, token_b))

    def clear_cache(self) -> None:
        self._cache.clear()

    # ------------------------------------------------------------------ #
    # Admin                                                              #
    # ------------------------------------------------------------------ #

    def implementation(self) -> str:
        return self.factory.functions.implementation().call()

    def upgrade_implementation(self, new_impl: str) -> TxReceipt:
        """Point future clones at *new_impl*; existing pools are unaffected."""
        logger.info("Upgrading pool implementation to %s", new_impl)
        return self._send(self.factory.functions.upgradeImplementation(checksum(new_impl)))

    def set_defaults(self, defaults: BreakerParams) -> TxReceipt:
        """Set the fee / breaker defaults used by pools created after this call."""
        logger.info("Setting factory defaults: %s", defaults)
        return self._send(self.factory.functions.setDefaults(defaults.as_tuple()))

    def _send(self, fn) -> TxReceipt:
        return send_transaction(self.w3, fn, account=self.account)
