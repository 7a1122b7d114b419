from decimal import Decimal

import pytest
from hexbytes import HexBytes
from web3 import Web3

from amm_helpers import BreakerParams, Pool, QuoteParams, Reserves, SwapParams
from amm_helpers.exceptions import EventNotFoundError, InvalidPathError
from amm_helpers.pool import TRANSFER_TOPIC

from conftest import POOL, TOKEN_A, TOKEN_B, TOKEN_C, TX_HASH, USER, make_receipt


@pytest.fixture
def pool(w3):
    pool = Pool.attach(POOL, w3)
    pool.contract.functions.token0.return_value.call.return_value = TOKEN_A
    pool.contract.functions.token1.return_value.call.return_value = TOKEN_B
    return pool


def swap_event(pool, amount_out, address=POOL):
    pool.contract.events.Swap.return_value.process_receipt.return_value = [
        {"address": address, "args": {"amountOut": amount_out}}
    ]


def transfer_log(token, sender, recipient, amount):
    return {
        "address": token,
        "topics": [
            TRANSFER_TOPIC,
            HexBytes(bytes(12) + HexBytes(sender)),
            HexBytes(bytes(12) + HexBytes(recipient)),
        ],
        "data": HexBytes(amount.to_bytes(32, "big")),
    }


class TestSwap:

    def test_token0_in_routes_to_zero_for_one(self, pool, sent):
        swap_event(pool, 95)
        out = pool.swap_exact_tokens(SwapParams(100, 90, [TOKEN_A, TOKEN_B], USER))

        assert out == 95
        pool.contract.functions.swapExactToken0ForToken1.assert_called_once_with(100, 90)
        pool.contract.functions.swapExactToken1ForToken0.assert_not_called()
        assert sent[0][1]["sender"] == USER

    def test_token1_in_routes_to_one_for_zero(self, pool, sent):
        swap_event(pool, 42)
        out = pool.swap_exact_tokens(SwapParams(50, 40, [TOKEN_B, TOKEN_A], USER))

        assert out == 42
        pool.contract.functions.swapExactToken1ForToken0.assert_called_once_with(50, 40)

    def test_token_order_is_case_insensitive(self, pool, sent):
        pool.contract.functions.token0.return_value.call.return_value = "0xABCDEF0123456789ABCDEF0123456789ABCDEF01"
        swap_event(pool, 1)
        pool.swap_exact_tokens(SwapParams(1, 0, ["0xabcdef0123456789abcdef0123456789abcdef01", TOKEN_B], USER))
        pool.contract.functions.swapExactToken0ForToken1.assert_called_once()

    @pytest.mark.parametrize("path", [[TOKEN_A], [TOKEN_A, TOKEN_B, TOKEN_C]])
    def test_path_must_have_two_tokens(self, pool, sent, path):
        with pytest.raises(InvalidPathError):
            pool.swap_exact_tokens(SwapParams(1, 0, path, USER))
        assert sent == []

    @pytest.mark.parametrize("path", [[TOKEN_C, TOKEN_A], [TOKEN_A, TOKEN_C], [TOKEN_A, TOKEN_A]])
    def test_path_must_match_pool_pair(self, pool, sent, path):
        with pytest.raises(InvalidPathError):
            pool.swap_exact_tokens(SwapParams(100, 0, path, USER))
        assert sent == []
        pool.contract.functions.swapExactToken1ForToken0.assert_not_called()

    def test_swap_event_from_other_contract_is_ignored(self, pool, sent):
        swap_event(pool, 7, address=TOKEN_C)
        with pytest.raises(EventNotFoundError, match=TX_HASH.to_0x_hex()):
            pool.swap_exact_tokens(SwapParams(1, 0, [TOKEN_A, TOKEN_B], USER))

    def test_transfer_logs_used_without_swap_event(self, pool, monkeypatch):
        pool.contract.events.Swap.return_value.process_receipt.return_value = []
        receipt = make_receipt()
        receipt["logs"] = [
            transfer_log(TOKEN_A, USER, POOL, 100),
            transfer_log(TOKEN_B, POOL, USER, 93),
            transfer_log(TOKEN_B, TOKEN_C, USER, 5),
        ]
        monkeypatch.setattr("amm_helpers.pool.send_transaction", lambda w3, fn, **kwargs: receipt)

        assert pool.swap_exact_tokens(SwapParams(100, 0, [TOKEN_A, TOKEN_B], USER)) == 93

    def test_token0_read_once(self, pool, sent):
        swap_event(pool, 1)
        for _ in range(3):
            pool.swap_exact_tokens(SwapParams(1, 0, [TOKEN_A, TOKEN_B], USER))
        assert pool.contract.functions.token0.return_value.call.call_count == 1


class TestQuote:

    def test_exact_in_quote_uses_quote_out(self, pool):
        pool.contract.functions.quoteOut.return_value.call.return_value = (990, 3000, 3)
        q = pool.quote_exact_tokens(QuoteParams(1000, [TOKEN_A, TOKEN_B]))

        pool.contract.functions.quoteOut.assert_called_once_with(1000, True)
        assert q.amount == 990
        assert q.fee_bps == Decimal("3")
        assert q.fee == 3

    def test_input_equal_to_path_start_is_exact_in(self, pool):
        pool.contract.functions.quoteOut.return_value.call.return_value = (1, 0, 0)
        pool.quote_exact_tokens(QuoteParams(1000, [TOKEN_B, TOKEN_A], input=TOKEN_B))
        pool.contract.functions.quoteOut.assert_called_once_with(1000, False)

    def test_input_equal_to_path_end_is_exact_out(self, pool):
        pool.contract.functions.quoteIn.return_value.call.return_value = (1012, 2500, 2)
        q = pool.quote_exact_tokens(QuoteParams(1000, [TOKEN_A, TOKEN_B], input=TOKEN_B))

        pool.contract.functions.quoteIn.assert_called_once_with(1000, True)
        pool.contract.functions.quoteOut.assert_not_called()
        assert q.amount == 1012
        assert q.fee_bps == Decimal("2.5")

    def test_exact_out_one_for_zero(self, pool):
        pool.contract.functions.quoteIn.return_value.call.return_value = (1, 0, 0)
        pool.quote_exact_tokens(QuoteParams(5, [TOKEN_B, TOKEN_A], input=TOKEN_A))
        pool.contract.functions.quoteIn.assert_called_once_with(5, False)

    def test_quote_path_validation(self, pool):
        with pytest.raises(InvalidPathError):
            pool.quote_exact_tokens(QuoteParams(5, [TOKEN_A, TOKEN_B, TOKEN_C]))

    def test_quote_path_must_match_pool_pair(self, pool):
        with pytest.raises(InvalidPathError):
            pool.quote_exact_tokens(QuoteParams(5, [TOKEN_C, TOKEN_B]))
        pool.contract.functions.quoteOut.assert_not_called()

    def test_quote_input_must_be_on_path(self, pool):
        with pytest.raises(InvalidPathError):
            pool.quote_exact_tokens(QuoteParams(5, [TOKEN_A, TOKEN_B], input=TOKEN_C))
        pool.contract.functions.quoteIn.assert_not_called()


class TestViewsAndAdmin:

    def test_reserves(self, pool):
        pool.contract.functions.getReserves.return_value.call.return_value = [10, 20]
        assert pool.reserves() == Reserves(r0=10, r1=20)

    def test_current_rv(self, pool):
        pool.contract.functions.currentRV.return_value.call.return_value = 1234
        assert pool.current_rv() == 1234

    def test_address_is_checksummed(self, w3):
        mixed = "0xabcdef0123456789abcdef0123456789abcdef01"
        assert Pool.attach(mixed, w3).address == Web3.to_checksum_address(mixed)

    def test_admin_calls(self, pool, sent):
        pool.pause()
        pool.unpause()
        pool.flush_fees(USER)
        pool.flush_native(USER)
        pool.update_params(BreakerParams(30, 50, 100, 200, 400, 1000))

        fns = pool.contract.functions
        fns.pause.assert_called_once_with()
        fns.unpause.assert_called_once_with()
        fns.flushFees.assert_called_once_with(USER)
        fns.flushNative.assert_called_once_with(USER)
        fns.updateParams.assert_called_once_with((30, 50, 100, 200, 400, 1000))
        assert len(sent) == 5
