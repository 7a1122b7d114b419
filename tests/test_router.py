import pytest

from amm_helpers import (
    AddLiquidityETHParams,
    AddLiquidityParams,
    QuoteParams,
    RemoveLiquidityETHParams,
    RemoveLiquidityParams,
    Router,
    RouterQuote,
    SwapParams,
)
from amm_helpers.config.contracts import DEFAULT_ROUTER
from amm_helpers.exceptions import InvalidPathError
from amm_helpers.helpers import units

from conftest import POOL, ROUTER, TOKEN_A, TOKEN_B, TOKEN_C, USER

NOW = 1_700_000_000


@pytest.fixture
def router(w3):
    return Router(w3, router_address=ROUTER)


@pytest.fixture
def frozen_time(monkeypatch):
    monkeypatch.setattr(units.time, "time", lambda: NOW + 0.75)
    return NOW


def fns(router):
    return router.contract.functions


class TestDeadline:

    def test_default_deadline_is_now_plus_600(self, router, sent, frozen_time):
        router.swap_exact_tokens(SwapParams(100, 90, [TOKEN_A, TOKEN_B, TOKEN_C], USER))
        fns(router).swapExactTokensForTokens.assert_called_once_with(
            100, 90, [TOKEN_A, TOKEN_B, TOKEN_C], USER, NOW + 600
        )

    def test_explicit_deadline_is_kept(self, router, sent, frozen_time):
        router.swap_exact_tokens(SwapParams(100, 90, [TOKEN_A, TOKEN_B], USER, deadline=123))
        args = fns(router).swapExactTokensForTokens.call_args.args
        assert args[-1] == 123

    def test_deadline_evaluated_per_call(self, router, sent, monkeypatch):
        clock = [NOW]
        monkeypatch.setattr(units.time, "time", lambda: clock[0])
        router.swap_exact_tokens(SwapParams(1, 0, [TOKEN_A, TOKEN_B], USER))
        clock[0] += 50
        router.swap_exact_tokens(SwapParams(1, 0, [TOKEN_A, TOKEN_B], USER))
        deadlines = [c.args[-1] for c in fns(router).swapExactTokensForTokens.call_args_list]
        assert deadlines == [NOW + 600, NOW + 650]


class TestSwaps:

    @pytest.mark.parametrize("path", [[], [TOKEN_A]])
    def test_short_path_rejected(self, router, sent, path):
        with pytest.raises(InvalidPathError):
            router.swap_exact_tokens(SwapParams(1, 0, path, USER))
        with pytest.raises(InvalidPathError):
            router.swap_exact_eth_for_tokens(SwapParams(1, 0, path, USER))
        with pytest.raises(InvalidPathError):
            router.swap_exact_tokens_for_eth(SwapParams(1, 0, path, USER))
        assert sent == []

    def test_eth_for_tokens_value_defaults_to_amount_in(self, router, sent, frozen_time):
        router.swap_exact_eth_for_tokens(SwapParams(10**18, 5, [TOKEN_A, TOKEN_B], USER))
        fns(router).swapExactETHForTokens.assert_called_once_with(5, [TOKEN_A, TOKEN_B], USER, NOW + 600)
        assert sent[0][1]["value"] == 10**18

    def test_eth_for_tokens_explicit_value(self, router, sent):
        router.swap_exact_eth_for_tokens(SwapParams(10**18, 5, [TOKEN_A, TOKEN_B], USER, value=7))
        assert sent[0][1]["value"] == 7

    def test_tokens_for_eth(self, router, sent, frozen_time):
        router.swap_exact_tokens_for_eth(SwapParams(3, 2, [TOKEN_A, TOKEN_B], USER))
        fns(router).swapExactTokensForETH.assert_called_once_with(3, 2, [TOKEN_A, TOKEN_B], USER, NOW + 600)
        assert sent[0][1]["value"] == 0

    def test_path_is_checksummed(self, router, sent):
        lower = "0xabcdef0123456789abcdef0123456789abcdef01"
        router.swap_exact_tokens(SwapParams(1, 0, [lower, TOKEN_B], USER, deadline=1))
        path = fns(router).swapExactTokensForTokens.call_args.args[2]
        assert path[0] != lower and path[0].lower() == lower


class TestLiquidity:

    def test_add_liquidity(self, router, sent, frozen_time):
        router.add_liquidity(AddLiquidityParams(POOL, TOKEN_A, TOKEN_B, 100, 200, 90, 180, USER))
        fns(router).addLiquidity.assert_called_once_with(
            POOL, TOKEN_A, TOKEN_B, 100, 200, 90, 180, USER, NOW + 600
        )

    def test_add_liquidity_eth_value_defaults_to_eth_min(self, router, sent, frozen_time):
        router.add_liquidity_eth(AddLiquidityETHParams(POOL, TOKEN_A, 100, 90, 10**17, USER))
        fns(router).addLiquidityETH.assert_called_once_with(POOL, TOKEN_A, 100, 90, 10**17, USER, NOW + 600)
        assert sent[0][1]["value"] == 10**17

    def test_remove_liquidity(self, router, sent, frozen_time):
        router.remove_liquidity(RemoveLiquidityParams(POOL, TOKEN_A, TOKEN_B, 55, 1, 2, USER))
        fns(router).removeLiquidity.assert_called_once_with(POOL, TOKEN_A, TOKEN_B, 55, 1, 2, USER, NOW + 600)

    def test_remove_liquidity_eth(self, router, sent):
        router.remove_liquidity_eth(RemoveLiquidityETHParams(POOL, TOKEN_A, 55, 1, 2, USER, deadline=99))
        fns(router).removeLiquidityETH.assert_called_once_with(POOL, TOKEN_A, 55, 1, 2, USER, 99)


class TestQuote:

    def test_quote_exact_tokens_for_tokens(self, router):
        fns(router).quoteExactTokensForTokens.return_value.call.return_value = (970, 30)
        q = router.quote_exact_tokens_for_tokens(QuoteParams(1000, [TOKEN_A, TOKEN_B, TOKEN_C]))
        assert q == RouterQuote(amount=970, fee=30)
        fns(router).quoteExactTokensForTokens.assert_called_once_with(1000, [TOKEN_A, TOKEN_B, TOKEN_C])

    def test_quote_short_path(self, router):
        with pytest.raises(InvalidPathError):
            router.quote_exact_tokens_for_tokens(QuoteParams(1000, [TOKEN_A]))


def test_router_address_from_chain(w3):
    assert Router(w3, chain_id=31337).address == DEFAULT_ROUTER[31337]


def test_router_address_from_env(w3, monkeypatch):
    monkeypatch.setenv("AMM_ROUTER_ADDRESS", ROUTER)
    assert Router(w3).address == ROUTER
