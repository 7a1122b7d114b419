"""
ERC20 helper - decimals, balances and allowances for one token.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.types import TxReceipt

from amm_helpers.config.abis import ERC20_ABI
from amm_helpers.helpers.tx_sender import send_transaction
from amm_helpers.helpers.units import checksum, from_base_units, to_base_units

__all__ = ["Token"]

logger = logging.getLogger(__name__)


class Token:
    """Thin wrapper over an ERC20 contract."""

    def __init__(self, address: str, w3: Web3, account: LocalAccount | None = None):
        self.address = checksum(address)
        self.w3 = w3
        self.account = account
        self.contract = w3.eth.contract(address=self.address, abi=ERC20_ABI)
        self._decimals: int | None = None

    def decimals(self) -> int:
        if self._decimals is None:
            self._decimals = int(self.contract.functions.decimals().call())
        return self._decimals

    def symbol(self) -> str:
        return self.contract.functions.symbol().call()

    def balance_of(self, owner: str) -> int:
        return int(self.contract.functions.balanceOf(checksum(owner)).call())

    def allowance(self, owner: str, spender: str) -> int:
        return int(self.contract.functions.allowance(checksum(owner), checksum(spender)).call())

    def to_units(self, amount: Decimal | str | int) -> int:
        """Human amount -> base units using this token's decimals."""
        return to_base_units(amount, self.decimals())

    def from_units(self, raw: int) -> Decimal:
        return from_base_units(raw, self.decimals())

    def approve(self, spender: str, amount: int) -> TxReceipt:
        logger.info("Approving %s for %s on %s", spender, amount, self.address)
        return send_transaction(
            self.w3,
            self.contract.functions.approve(checksum(spender), int(amount)),
            account=self.account,
        )

    def ensure_allowance(self, spender: str, amount: int, owner: str | None = None) -> TxReceipt | None:
        """Approve *amount* for *spender* only if the current allowance is short.

        Returns the approval receipt, or ``None`` when nothing was sent.
        """
        owner = owner or (self.account.address if self.account else self.w3.eth.default_account)
        if not owner:
            raise ValueError("No owner address: pass owner or configure an account")

        current = self.allowance(owner, spender)
        if current >= amount:
            logger.debug("Allowance %s >= %s for %s, skipping approve", current, amount, spender)
            return None
        return self.approve(spender, amount)
