"""
Transaction sender - sign, broadcast and confirm contract calls.

Every state-changing wrapper funnels through :func:`send_transaction`, which
either signs locally with an ``eth_account`` account or hands the call to a
node-managed account via ``transact``. Reverts surface as
:class:`~amm_helpers.exceptions.ContractRevertError` with the node's reason
string untouched; there are no retries.
"""
from __future__ import annotations

import logging
from typing import Any

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.contract.contract import ContractFunction
from web3.exceptions import ContractLogicError
from web3.types import TxReceipt

from amm_helpers.config.network import GAS_LIMIT_BUFFER, RECEIPT_TIMEOUT
from amm_helpers.exceptions import ContractRevertError, TransactionFailedError

__all__ = ["send_transaction", "eip1559_fees", "revert_reason"]

logger = logging.getLogger(__name__)

PRIORITY_FEE_GWEI = 2


def revert_reason(err: ContractLogicError) -> str:
    """Return the revert string carried by *err* as the node reported it."""
    return getattr(err, "message", None) or str(err)


def eip1559_fees(w3: Web3) -> dict[str, int]:
    """Return ``maxPriorityFeePerGas`` / ``maxFeePerGas`` from the latest block."""
    latest_block = w3.eth.get_block("latest")
    base_fee = latest_block.get("baseFeePerGas", w3.eth.gas_price)
    priority_fee = Web3.to_wei(PRIORITY_FEE_GWEI, "gwei")
    return {
        "maxPriorityFeePerGas": priority_fee,
        "maxFeePerGas": base_fee + priority_fee * 2,  # generous cap
    }


def _fn_name(fn: ContractFunction) -> str:
    return getattr(fn, "fn_name", None) or getattr(fn, "abi_element_identifier", "call")


def _build_signed(w3: Web3, fn: ContractFunction, account: LocalAccount, value: int) -> HexBytes:
    tx: dict[str, Any] = {
        "from": account.address,
        "value": value,
        "nonce": w3.eth.get_transaction_count(account.address, "pending"),
        "chainId": w3.eth.chain_id,
        **eip1559_fees(w3),
    }
    gas = fn.estimate_gas({"from": account.address, "value": value})
    tx["gas"] = int(gas * GAS_LIMIT_BUFFER)

    built = fn.build_transaction(tx)
    signed = account.sign_transaction(built)
    return w3.eth.send_raw_transaction(signed.raw_transaction)


def send_transaction(
    w3: Web3,
    fn: ContractFunction,
    *,
    account: LocalAccount | None = None,
    value: int = 0,
    sender: str | None = None,
    timeout: int = RECEIPT_TIMEOUT,
) -> TxReceipt:
    """
    Send a contract call and wait for it to be mined.

    Parameters
    ----------
    w3 : Web3
        Connected instance.
    fn : ContractFunction
        Bound call, e.g. ``contract.functions.createPool(a, b)``.
    account : LocalAccount, optional
        Local signer. When omitted the call is sent with ``transact`` from
        *sender* (or ``w3.eth.default_account``), which needs a node-managed
        account or a signing middleware.
    value : int, optional
        Native value to forward (wei).
    sender : str, optional
        ``from`` address used only when no *account* is given.
    timeout : int, optional
        Seconds to wait for the receipt.

    Returns
    -------
    TxReceipt
        The receipt of the mined transaction.

    Raises
    ------
    ContractRevertError
        Gas estimation or submission reverted.
    TransactionFailedError
        The transaction was mined but reverted (``status == 0``).
    """
    name = _fn_name(fn)
    try:
        if account is not None:
            tx_hash = _build_signed(w3, fn, account, value)
        else:
            tx_params: dict[str, Any] = {"value": value}
            from_addr = sender or w3.eth.default_account
            if from_addr:
                tx_params["from"] = from_addr
            tx_hash = fn.transact(tx_params)
    except ContractLogicError as err:
        reason = revert_reason(err)
        logger.warning("%s reverted before broadcast: %s", name, reason)
        raise ContractRevertError(name, reason, getattr(err, "data", None)) from err

    tx_hex = HexBytes(tx_hash).to_0x_hex()
    logger.info("%s sent: %s", name, tx_hex)

    receipt = w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
    if receipt["status"] != 1:
        logger.error("%s failed on-chain: %s", name, tx_hex)
        raise TransactionFailedError(name, tx_hex, receipt)

    logger.debug("%s mined in block %s (gas used %s)", name, receipt.get("blockNumber"), receipt.get("gasUsed"))
    return receipt
