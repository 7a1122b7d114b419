"""
Router helper - multi-hop swaps, liquidity and quotes through the AMM router.

State-changing calls default their deadline to now + 600 seconds, computed
when the call is made, and return the mined receipt.
"""
from __future__ import annotations

import logging
from typing import Sequence

from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.types import TxReceipt

from amm_helpers.config.abis import AMM_ROUTER_ABI
from amm_helpers.config.contracts import get_router_address
from amm_helpers.exceptions import InvalidPathError
from amm_helpers.helpers.tx_sender import send_transaction
from amm_helpers.helpers.units import checksum, default_deadline
from amm_helpers.types import (
    AddLiquidityETHParams,
    AddLiquidityParams,
    QuoteParams,
    RemoveLiquidityETHParams,
    RemoveLiquidityParams,
    RouterQuote,
    SwapParams,
)

__all__ = ["Router"]

logger = logging.getLogger(__name__)


def _route(path: Sequence[str]) -> list[str]:
    if len(path) < 2:
        raise InvalidPathError(f"path too short: {len(path)} address(es), need at least 2")
    return [checksum(p) for p in path]


def _deadline(deadline: int | None) -> int:
    return default_deadline() if deadline is None else int(deadline)


class Router:
    """Wrapper over the AMM router contract."""

    def __init__(
        self,
        w3: Web3,
        chain_id: int | None = None,
        router_address: str | None = None,
        account: LocalAccount | None = None,
    ):
        self.w3 = w3
        self.account = account
        self.address = checksum(router_address or get_router_address(chain_id))
        self.contract = w3.eth.contract(address=self.address, abi=AMM_ROUTER_ABI)

    # ------------------------------------------------------------------ #
    # Swaps                                                              #
    # ------------------------------------------------------------------ #

    def swap_exact_tokens(self, p: SwapParams) -> TxReceipt:
        """``swapExactTokensForTokens`` along ``p.path`` (multi-hop)."""
        path = _route(p.path)
        fn = self.contract.functions.swapExactTokensForTokens(
            int(p.amount_in), int(p.amount_out_min), path, checksum(p.to), _deadline(p.deadline)
        )
        return self._send(fn)

    def swap_exact_eth_for_tokens(self, p: SwapParams) -> TxReceipt:
        """Payable swap; ``value`` defaults to ``amount_in``."""
        path = _route(p.path)
        fn = self.contract.functions.swapExactETHForTokens(
            int(p.amount_out_min), path, checksum(p.to), _deadline(p.deadline)
        )
        value = p.amount_in if p.value is None else p.value
        return self._send(fn, value=int(value))

    def swap_exact_tokens_for_eth(self, p: SwapParams) -> TxReceipt:
        path = _route(p.path)
        fn = self.contract.functions.swapExactTokensForETH(
            int(p.amount_in), int(p.amount_out_min), path, checksum(p.to), _deadline(p.deadline)
        )
        return self._send(fn)

    # ------------------------------------------------------------------ #
    # Liquidity                                                          #
    # ------------------------------------------------------------------ #

    def add_liquidity(self, p: AddLiquidityParams) -> TxReceipt:
        fn = self.contract.functions.addLiquidity(
            checksum(p.pair), checksum(p.token_a), checksum(p.token_b),
            int(p.amount_a_desired), int(p.amount_b_desired),
            int(p.amount_a_min), int(p.amount_b_min),
            checksum(p.to),
            _deadline(p.deadline),
        )
        return self._send(fn)

    def add_liquidity_eth(self, p: AddLiquidityETHParams) -> TxReceipt:
        """Payable; ``value`` defaults to ``amount_eth_min``."""
        fn = self.contract.functions.addLiquidityETH(
            checksum(p.pair), checksum(p.token),
            int(p.amount_token_desired), int(p.amount_token_min), int(p.amount_eth_min),
            checksum(p.to),
            _deadline(p.deadline),
        )
        value = p.amount_eth_min if p.value is None else p.value
        return self._send(fn, value=int(value))

    def remove_liquidity(self, p: RemoveLiquidityParams) -> TxReceipt:
        fn = self.contract.functions.removeLiquidity(
            checksum(p.pair), checksum(p.token_a), checksum(p.token_b),
            int(p.liquidity),
            int(p.amount_a_min), int(p.amount_b_min),
            checksum(p.to),
            _deadline(p.deadline),
        )
        return self._send(fn)

    def remove_liquidity_eth(self, p: RemoveLiquidityETHParams) -> TxReceipt:
        fn = self.contract.functions.removeLiquidityETH(
            checksum(p.pair), checksum(p.token),
            int(p.liquidity),
            int(p.amount_token_min), int(p.amount_eth_min),
            checksum(p.to),
            _deadline(p.deadline),
        )
        return self._send(fn)

    # ------------------------------------------------------------------ #
    # Views                                                              #
    # ------------------------------------------------------------------ #

    def quote_exact_tokens_for_tokens(self, p: QuoteParams) -> RouterQuote:
        path = _route(p.path)
        amount_out, total_fee = self.contract.functions.quoteExactTokensForTokens(int(p.amount_in), path).call()
        return RouterQuote(amount=int(amount_out), fee=int(total_fee))

    def weth(self) -> str:
        return self.contract.functions.WETH().call()

    def _send(self, fn, value: int = 0) -> TxReceipt:
        return send_transaction(self.w3, fn, account=self.account, value=value)
