"""Shared fixtures: a mocked Web3 whose contracts are per-address MagicMocks."""

from unittest.mock import MagicMock

import pytest
from hexbytes import HexBytes

TOKEN_A = "0x1111111111111111111111111111111111111111"
TOKEN_B = "0x2222222222222222222222222222222222222222"
TOKEN_C = "0x3333333333333333333333333333333333333333"
POOL = "0x4444444444444444444444444444444444444444"
FACTORY = "0x5555555555555555555555555555555555555555"
ROUTER = "0x6666666666666666666666666666666666666666"
USER = "0x7777777777777777777777777777777777777777"
ZERO = "0x0000000000000000000000000000000000000000"

TX_HASH = HexBytes("0x" + "ab" * 32)


def make_receipt(status: int = 1) -> dict:
    return {
        "status": status,
        "transactionHash": TX_HASH,
        "blockNumber": 1,
        "gasUsed": 21_000,
        "logs": [],
    }


@pytest.fixture
def w3():
    """Web3 double; ``w3.contracts[address]`` is the mock behind ``w3.eth.contract``."""
    w3 = MagicMock(name="w3")
    w3.contracts = {}

    def contract(address=None, abi=None):
        if address not in w3.contracts:
            w3.contracts[address] = MagicMock(name=f"contract_{address}")
        return w3.contracts[address]

    w3.eth.contract.side_effect = contract
    w3.eth.default_account = None
    w3.eth.wait_for_transaction_receipt.return_value = make_receipt()
    return w3


@pytest.fixture
def sent(monkeypatch):
    """Replace ``send_transaction`` in the wrappers; records ``(fn, kwargs)``."""
    calls = []

    def fake_send(w3, fn, **kwargs):
        calls.append((fn, kwargs))
        return make_receipt()

    for module in ("amm_helpers.factory", "amm_helpers.pool", "amm_helpers.router", "amm_helpers.helpers.token"):
        monkeypatch.setattr(f"{module}.send_transaction", fake_send)
    return calls


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("AMM_FACTORY_ADDRESS", "AMM_ROUTER_ADDRESS", "CHAIN", "CHAIN_ID", "RPC_URL", "PRIVATE_KEY"):
        monkeypatch.delenv(var, raising=False)
