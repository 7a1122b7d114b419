"""
Pool helper - one CircuitBreakerAMM pool.

Swaps and quotes pick the token0->token1 or token1->token0 entry point
from the order of the 2-token path; everything else is a direct
pass-through to the pool contract.
"""
from __future__ import annotations

import logging
from decimal import Decimal

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.logs import DISCARD
from web3.types import TxReceipt

from amm_helpers.config.abis import CIRCUIT_BREAKER_AMM_ABI
from amm_helpers.exceptions import EventNotFoundError, InvalidPathError
from amm_helpers.helpers.tx_sender import send_transaction
from amm_helpers.helpers.units import checksum, same_address
from amm_helpers.types import BreakerParams, PoolQuote, QuoteParams, Reserves, SwapParams

__all__ = ["Pool", "FEE_BPS_SCALE"]

logger = logging.getLogger(__name__)

# quoteIn/quoteOut report the fee rate in thousandths of a basis point.
FEE_BPS_SCALE = 1000

TRANSFER_TOPIC = Web3.keccak(text="Transfer(address,address,uint256)")


def _require_pair_path(path) -> None:
    if len(path) != 2:
        raise InvalidPathError(f"Pool swap/quote expects a 2-token path, got {len(path)}")


class Pool:
    """Wrapper over a deployed CircuitBreakerAMM pool."""

    def __init__(self, address: str, w3: Web3, account: LocalAccount | None = None):
        self.address = checksum(address)
        self.w3 = w3
        self.account = account
        self.contract = w3.eth.contract(address=self.address, abi=CIRCUIT_BREAKER_AMM_ABI)
        self._token0: str | None = None
        self._token1: str | None = None

    @classmethod
    def attach(cls, address: str, w3: Web3, account: LocalAccount | None = None) -> "Pool":
        return cls(address, w3, account)

    def __repr__(self) -> str:
        return f"Pool({self.address})"

    # ------------------------------------------------------------------ #
    # Token order                                                        #
    # ------------------------------------------------------------------ #

    def token0(self) -> str:
        if self._token0 is None:
            self._token0 = self.contract.functions.token0().call()
        return self._token0

    def token1(self) -> str:
        if self._token1 is None:
            self._token1 = self.contract.functions.token1().call()
        return self._token1

    def zero_for_one(self, token_in: str) -> bool:
        """True when *token_in* is token0, i.e. the swap goes token0 -> token1."""
        return same_address(token_in, self.token0())

    def _direction(self, path) -> bool:
        """Validate a 2-token path against the pool's pair and return ``zero_for_one``."""
        _require_pair_path(path)
        pair = {self.token0().lower(), self.token1().lower()}
        if {path[0].lower(), path[1].lower()} != pair:
            raise InvalidPathError(
                f"Path {path[0]} -> {path[1]} does not match pool pair "
                f"{self.token0()} / {self.token1()}"
            )
        return self.zero_for_one(path[0])

    # ------------------------------------------------------------------ #
    # Swap / quote                                                       #
    # ------------------------------------------------------------------ #

    def swap_exact_tokens(self, params: SwapParams) -> int:
        """Single-hop exact-in swap; returns ``amountOut`` from the ``Swap`` event.

        The transaction is sent from the configured account, or from
        ``params.to`` when the node manages the key.
        """
        zero_for_one = self._direction(params.path)
        if zero_for_one:
            fn = self.contract.functions.swapExactToken0ForToken1
        else:
            fn = self.contract.functions.swapExactToken1ForToken0

        logger.debug(
            "Pool %s swap %s -> %s amountIn=%s minOut=%s",
            self.address, params.path[0], params.path[1], params.amount_in, params.amount_out_min,
        )
        receipt = send_transaction(
            self.w3,
            fn(int(params.amount_in), int(params.amount_out_min)),
            account=self.account,
            sender=checksum(params.to),
        )
        return self._amount_out(receipt, params.path[1])

    def _amount_out(self, receipt: TxReceipt, token_out: str) -> int:
        """``amountOut`` of the pool's ``Swap`` event.

        Falls back to the total of ``token_out`` Transfer logs sent by the
        pool when no ``Swap`` event decodes against the ABI.
        """
        events = self.contract.events.Swap().process_receipt(receipt, errors=DISCARD)
        for event in events:
            if same_address(self.address, event.get("address", self.address)):
                amount_out = int(event["args"]["amountOut"])
                logger.debug("Swap amountOut=%s", amount_out)
                return amount_out

        transfers = [
            int.from_bytes(HexBytes(log["data"]), "big")
            for log in receipt.get("logs", [])
            if same_address(token_out, log.get("address"))
            and len(log.get("topics", [])) == 3
            and HexBytes(log["topics"][0]) == TRANSFER_TOPIC
            and same_address(self.address, "0x" + HexBytes(log["topics"][1]).hex()[-40:])
        ]
        tx_hash = HexBytes(receipt["transactionHash"]).to_0x_hex()
        if transfers:
            logger.warning("No Swap event in %s; using %s Transfer log(s) of %s", tx_hash, len(transfers), token_out)
            return sum(transfers)
        raise EventNotFoundError(f"No Swap event from pool {self.address} in receipt {tx_hash}")

    def quote_exact_tokens(self, params: QuoteParams) -> PoolQuote:
        """Quote through ``quoteOut`` (amount is the input) or ``quoteIn`` (amount is the output).

        ``params.input`` names the token the amount is denominated in and
        defaults to ``path[0]``; it must be one of the path tokens.
        """
        zero_for_one = self._direction(params.path)
        denominated_in = params.input if params.input is not None else params.path[0]
        if not any(same_address(denominated_in, token) for token in params.path):
            raise InvalidPathError(f"Quote input {denominated_in} is not on the path")

        if same_address(params.path[0], denominated_in):
            fn = self.contract.functions.quoteOut
        else:
            fn = self.contract.functions.quoteIn

        amount, fee_bps, fee = fn(int(params.amount_in), zero_for_one).call()
        return PoolQuote(
            amount=int(amount),
            fee_bps=Decimal(int(fee_bps)) / FEE_BPS_SCALE,
            fee=int(fee),
        )

    # ------------------------------------------------------------------ #
    # Views                                                              #
    # ------------------------------------------------------------------ #

    def current_rv(self) -> int:
        return int(self.contract.functions.currentRV().call())

    def reserves(self) -> Reserves:
        r0, r1 = self.contract.functions.getReserves().call()[:2]
        return Reserves(r0=int(r0), r1=int(r1))

    def paused(self) -> bool:
        return bool(self.contract.functions.paused().call())

    # ------------------------------------------------------------------ #
    # Role-gated admin                                                   #
    # ------------------------------------------------------------------ #

    def flush_fees(self, to: str) -> TxReceipt:
        return self._send(self.contract.functions.flushFees(checksum(to)))

    def flush_native(self, to: str) -> TxReceipt:
        return self._send(self.contract.functions.flushNative(checksum(to)))

    def pause(self) -> TxReceipt:
        return self._send(self.contract.functions.pause())

    def unpause(self) -> TxReceipt:
        return self._send(self.contract.functions.unpause())

    def update_params(self, params: BreakerParams) -> TxReceipt:
        logger.info("Updating params of %s: %s", self.address, params)
        return self._send(self.contract.functions.updateParams(params.as_tuple()))

    def _send(self, fn) -> TxReceipt:
        return send_transaction(self.w3, fn, account=self.account)
