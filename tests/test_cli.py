import json
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from amm_helpers import cli

from conftest import POOL, TOKEN_A, TOKEN_B, TX_HASH, USER, ZERO, make_receipt


def test_parser_router_swap():
    args = cli.build_parser().parse_args(
        ["--chain-id", "31337", "router-swap", "1.5", TOKEN_A, TOKEN_B, "--min-out", "1.4", "--approve"]
    )
    assert args.command == "router-swap"
    assert args.chain_id == 31337
    assert args.path == [TOKEN_A, TOKEN_B]
    assert str(args.amount) == "1.5"
    assert args.approve and args.deadline is None
    assert args.func is cli.router_swap


def test_parser_breaker_args_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["set-defaults", "--base-fee-bps", "30"])


def test_main_without_command_prints_help(capsys, monkeypatch):
    monkeypatch.setattr(cli, "load_dotenv", lambda: None)
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "get-pool" in capsys.readouterr().out


@pytest.mark.parametrize("addr, exists", [(POOL, True), (ZERO, False)])
def test_get_pool_command(capsys, addr, exists):
    amm = MagicMock()
    amm.get_pool.return_value = addr
    ctx = SimpleNamespace(amm=amm)

    cli.get_pool(ctx, SimpleNamespace(token_a=TOKEN_A, token_b=TOKEN_B))

    assert json.loads(capsys.readouterr().out) == {"pool": addr, "exists": exists}
    amm.get_pool.assert_called_once_with(TOKEN_A, TOKEN_B)


def test_quote_command_scales_units(capsys):
    pool = MagicMock(address=POOL)
    pool.quote_exact_tokens.return_value = SimpleNamespace(amount=2_000_000, fee=3_000, fee_bps="3")
    tokens = {
        TOKEN_A: MagicMock(to_units=lambda x: int(x * 10**18)),
        TOKEN_B: MagicMock(from_units=lambda raw: raw / 10**6),
    }
    ctx = SimpleNamespace(amm=MagicMock(pool=MagicMock(return_value=pool)), token=tokens.__getitem__)

    cli.quote(ctx, SimpleNamespace(token_in=TOKEN_A, token_out=TOKEN_B, amount=Decimal("1"), exact_out=False))

    params = pool.quote_exact_tokens.call_args.args[0]
    assert params.amount_in == 10**18
    assert params.input == TOKEN_A
    out = json.loads(capsys.readouterr().out)
    assert out["amount"] == "2.0"
    assert out["fee_bps"] == "3"


def test_link_keeps_0x_prefix():
    ctx = SimpleNamespace(chain_id=1)
    assert cli.Context.link(ctx, make_receipt()) == f"https://etherscan.io/tx/{TX_HASH.to_0x_hex()}"
    assert cli.Context.link(SimpleNamespace(chain_id=31337), make_receipt()) == TX_HASH.to_0x_hex()


def test_router_swap_logs_0x_hash(capsys, monkeypatch):
    logged = []
    monkeypatch.setattr(cli, "setup_trade_logger", lambda name: None)
    monkeypatch.setattr(cli, "log_swap", lambda *args, **kwargs: logged.append(kwargs))
    token = MagicMock(to_units=lambda x: int(x * 10**6))
    router = MagicMock(address=POOL)
    router.swap_exact_tokens.return_value = make_receipt()
    ctx = SimpleNamespace(
        token=lambda address: token, router=router, address=USER, chain_id=31337,
        link=lambda receipt: cli.Context.link(SimpleNamespace(chain_id=31337), receipt),
    )

    cli.router_swap(ctx, SimpleNamespace(
        amount=Decimal("1"), min_out=Decimal("0"), path=[TOKEN_A, TOKEN_B], to=None, deadline=None, approve=False,
    ))

    assert logged[0]["tx_hash"] == TX_HASH.to_0x_hex()
    assert json.loads(capsys.readouterr().out) == {"tx": TX_HASH.to_0x_hex()}


def test_swap_to_help_mentions_private_key(capsys):
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["swap", "--help"])
    assert "PRIVATE_KEY" in capsys.readouterr().out
