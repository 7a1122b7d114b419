"""Command-line access to the AMM factory, pools and router.

Amounts on the command line are human units; they are scaled with each
token's ``decimals()`` before hitting the contracts. State-changing
commands sign with ``PRIVATE_KEY`` when it is set, otherwise they rely on
a node-managed account (``--from``).

Examples::

    amm-helpers get-pool 0xTokenA 0xTokenB
    amm-helpers quote 0xTokenA 0xTokenB 1.5
    amm-helpers swap 0xTokenA 0xTokenB 1.5 --min-out 2.9 --approve
    amm-helpers router-swap 100 0xA 0xB 0xC --min-out 95
"""

import argparse
import json
import logging
import os
import sys
from decimal import Decimal

from dotenv import load_dotenv
from eth_account import Account
from web3 import Web3

from amm_helpers.config.contracts import ZERO_ADDRESS
from amm_helpers.config.logging_config import log_swap, setup_logger, setup_trade_logger
from amm_helpers.config.network import tx_url
from amm_helpers.exceptions import AMMError
from amm_helpers.factory import AMM
from amm_helpers.helpers.token import Token
from amm_helpers.helpers.web3_setup import get_web3_instance
from amm_helpers.router import Router
from amm_helpers.types import (
    AddLiquidityParams,
    BreakerParams,
    QuoteParams,
    RemoveLiquidityParams,
    SwapParams,
)

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Context                                                                     #
# --------------------------------------------------------------------------- #

class Context:
    """Connection, signer and contract helpers shared by the commands."""

    def __init__(self, args):
        self.w3: Web3 = get_web3_instance(args.rpc)
        private_key = os.getenv("PRIVATE_KEY")
        self.account = Account.from_key(private_key) if private_key else None
        if self.account is None and args.sender:
            self.w3.eth.default_account = Web3.to_checksum_address(args.sender)
        self.chain_id = args.chain_id if args.chain_id is not None else self.w3.eth.chain_id
        self._factory_address = args.factory
        self._router_address = args.router
        self._amm: AMM | None = None
        self._router: Router | None = None

    @property
    def address(self) -> str:
        if self.account is not None:
            return self.account.address
        if self.w3.eth.default_account:
            return self.w3.eth.default_account
        raise SystemExit("No sender: set PRIVATE_KEY or pass --from")

    @property
    def amm(self) -> AMM:
        if self._amm is None:
            self._amm = AMM(self.w3, self.chain_id, self._factory_address, self.account)
        return self._amm

    @property
    def router(self) -> Router:
        if self._router is None:
            self._router = Router(self.w3, self.chain_id, self._router_address, self.account)
        return self._router

    def token(self, address: str) -> Token:
        return Token(address, self.w3, self.account)

    def link(self, receipt) -> str:
        return tx_url(receipt["transactionHash"].to_0x_hex(), self.chain_id)


def _print(data) -> None:
    print(json.dumps(data, indent=2, default=str))


# --------------------------------------------------------------------------- #
# Commands                                                                    #
# --------------------------------------------------------------------------- #

def get_pool(ctx: Context, args):
    """Print the pool address for a pair (zero address when none exists)."""
    addr = ctx.amm.get_pool(args.token_a, args.token_b)
    _print({"pool": addr, "exists": addr != ZERO_ADDRESS})


def create_pool(ctx: Context, args):
    pool = ctx.amm.create_pool(args.token_a, args.token_b)
    _print({"pool": pool})


def reserves(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    t0, t1 = ctx.token(pool.token0()), ctx.token(pool.token1())
    res = pool.reserves()
    _print({
        "pool": pool.address,
        "token0": t0.address,
        "token1": t1.address,
        "reserve0": str(t0.from_units(res.r0)),
        "reserve1": str(t1.from_units(res.r1)),
    })


def realized_vol(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    _print({"pool": pool.address, "currentRV": pool.current_rv(), "paused": pool.paused()})


def quote(ctx: Context, args):
    """Quote a single-hop swap on the pair's pool."""
    pool = ctx.amm.pool(args.token_in, args.token_out)
    denominated = args.token_out if args.exact_out else args.token_in
    result_token = ctx.token(args.token_in if args.exact_out else args.token_out)
    amount = ctx.token(denominated).to_units(args.amount)

    q = pool.quote_exact_tokens(QuoteParams(amount, [args.token_in, args.token_out], input=denominated))
    _print({
        "pool": pool.address,
        "amount": str(result_token.from_units(q.amount)),
        "fee": str(result_token.from_units(q.fee)),
        "fee_bps": str(q.fee_bps),
    })


def router_quote(ctx: Context, args):
    token_in, token_out = ctx.token(args.path[0]), ctx.token(args.path[-1])
    q = ctx.router.quote_exact_tokens_for_tokens(QuoteParams(token_in.to_units(args.amount), args.path))
    _print({"amount": str(token_out.from_units(q.amount)), "fee": q.fee})


def swap(ctx: Context, args):
    """Exact-in swap directly on the pair's pool."""
    trade_logger = setup_trade_logger("cli")
    pool = ctx.amm.pool(args.token_in, args.token_out)
    token_in, token_out = ctx.token(args.token_in), ctx.token(args.token_out)
    amount_in = token_in.to_units(args.amount)
    min_out = token_out.to_units(args.min_out)
    path = [token_in.address, token_out.address]

    if args.approve:
        token_in.ensure_allowance(pool.address, amount_in, owner=ctx.address)

    try:
        amount_out = pool.swap_exact_tokens(SwapParams(amount_in, min_out, path, args.to or ctx.address))
    except AMMError:
        log_swap(trade_logger, "POOL", path, amount_in, success=False)
        raise
    log_swap(trade_logger, "POOL", path, amount_in, amount_out)
    _print({"pool": pool.address, "amount_out": str(token_out.from_units(amount_out))})


def router_swap(ctx: Context, args):
    """Exact-in multi-hop swap through the router."""
    trade_logger = setup_trade_logger("cli")
    token_in, token_out = ctx.token(args.path[0]), ctx.token(args.path[-1])
    amount_in = token_in.to_units(args.amount)
    min_out = token_out.to_units(args.min_out)

    if args.approve:
        token_in.ensure_allowance(ctx.router.address, amount_in, owner=ctx.address)

    params = SwapParams(amount_in, min_out, args.path, args.to or ctx.address, deadline=args.deadline)
    try:
        receipt = ctx.router.swap_exact_tokens(params)
    except AMMError:
        log_swap(trade_logger, "ROUTER", args.path, amount_in, success=False)
        raise
    log_swap(trade_logger, "ROUTER", args.path, amount_in, tx_hash=receipt["transactionHash"].to_0x_hex())
    _print({"tx": ctx.link(receipt)})


def add_liquidity(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    token_a, token_b = ctx.token(args.token_a), ctx.token(args.token_b)
    amount_a, amount_b = token_a.to_units(args.amount_a), token_b.to_units(args.amount_b)

    if args.approve:
        token_a.ensure_allowance(ctx.router.address, amount_a, owner=ctx.address)
        token_b.ensure_allowance(ctx.router.address, amount_b, owner=ctx.address)

    receipt = ctx.router.add_liquidity(AddLiquidityParams(
        pair=pool.address,
        token_a=token_a.address,
        token_b=token_b.address,
        amount_a_desired=amount_a,
        amount_b_desired=amount_b,
        amount_a_min=token_a.to_units(args.min_a),
        amount_b_min=token_b.to_units(args.min_b),
        to=args.to or ctx.address,
        deadline=args.deadline,
    ))
    _print({"pool": pool.address, "tx": ctx.link(receipt)})


def remove_liquidity(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    token_a, token_b = ctx.token(args.token_a), ctx.token(args.token_b)
    receipt = ctx.router.remove_liquidity(RemoveLiquidityParams(
        pair=pool.address,
        token_a=token_a.address,
        token_b=token_b.address,
        liquidity=int(args.liquidity),
        amount_a_min=token_a.to_units(args.min_a),
        amount_b_min=token_b.to_units(args.min_b),
        to=args.to or ctx.address,
        deadline=args.deadline,
    ))
    _print({"pool": pool.address, "tx": ctx.link(receipt)})


def _breaker_params(args) -> BreakerParams:
    return BreakerParams(
        base_fee_bps=args.base_fee_bps,
        fee_alpha_bps=args.fee_alpha_bps,
        lvl1_bps=args.lvl1_bps,
        lvl2_bps=args.lvl2_bps,
        lvl3_bps=args.lvl3_bps,
        max_tx_bps=args.max_tx_bps,
    )


def set_defaults(ctx: Context, args):
    receipt = ctx.amm.set_defaults(_breaker_params(args))
    _print({"tx": ctx.link(receipt)})


def update_params(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    receipt = pool.update_params(_breaker_params(args))
    _print({"pool": pool.address, "tx": ctx.link(receipt)})


def pause(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    receipt = pool.unpause() if args.command == "unpause" else pool.pause()
    _print({"pool": pool.address, "paused": pool.paused(), "tx": ctx.link(receipt)})


def flush_fees(ctx: Context, args):
    pool = ctx.amm.pool(args.token_a, args.token_b)
    to = args.to or ctx.address
    receipt = pool.flush_native(to) if args.native else pool.flush_fees(to)
    _print({"pool": pool.address, "tx": ctx.link(receipt)})


# --------------------------------------------------------------------------- #
# Parser                                                                      #
# --------------------------------------------------------------------------- #

def _add_pair(p):
    p.add_argument('token_a', help='First token address')
    p.add_argument('token_b', help='Second token address')


def _add_breaker_args(p):
    for name in ('base-fee-bps', 'fee-alpha-bps', 'lvl1-bps', 'lvl2-bps', 'lvl3-bps', 'max-tx-bps'):
        p.add_argument(f'--{name}', type=int, required=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='amm-helpers',
        description='Interact with the circuit-breaker AMM factory, pools and router'
    )
    parser.add_argument('--rpc', help='RPC URL (default: RPC_URL or chain default)')
    parser.add_argument('--chain-id', type=int, help='Chain id used for default deployments')
    parser.add_argument('--factory', help='Factory address override')
    parser.add_argument('--router', help='Router address override')
    parser.add_argument('--from', dest='sender', help='Node-managed sender when PRIVATE_KEY is unset')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    p = subparsers.add_parser('get-pool', help='Look up the pool for a pair')
    _add_pair(p)
    p.set_defaults(func=get_pool)

    p = subparsers.add_parser('create-pool', help='Create a pool for a pair')
    _add_pair(p)
    p.set_defaults(func=create_pool)

    p = subparsers.add_parser('reserves', help='Show pool reserves')
    _add_pair(p)
    p.set_defaults(func=reserves)

    p = subparsers.add_parser('rv', help='Show realized volatility and pause state')
    _add_pair(p)
    p.set_defaults(func=realized_vol)

    p = subparsers.add_parser('quote', help='Quote a single-hop pool swap')
    p.add_argument('token_in')
    p.add_argument('token_out')
    p.add_argument('amount', type=Decimal)
    p.add_argument('--exact-out', action='store_true', help='AMOUNT is the desired output')
    p.set_defaults(func=quote)

    p = subparsers.add_parser('router-quote', help='Quote a multi-hop router swap')
    p.add_argument('amount', type=Decimal)
    p.add_argument('path', nargs='+', help='Token path (>= 2 addresses)')
    p.set_defaults(func=router_quote)

    p = subparsers.add_parser('swap', help='Exact-in swap on a pool')
    p.add_argument('token_in')
    p.add_argument('token_out')
    p.add_argument('amount', type=Decimal)
    p.add_argument('--min-out', type=Decimal, default=Decimal(0))
    p.add_argument('--to', help='Recipient (default: signer); used as sender only '
                   'when the node holds the key, ignored as sender with PRIVATE_KEY')
    p.add_argument('--approve', action='store_true', help='Approve the pool first if needed')
    p.set_defaults(func=swap)

    p = subparsers.add_parser('router-swap', help='Exact-in multi-hop swap through the router')
    p.add_argument('amount', type=Decimal)
    p.add_argument('path', nargs='+', help='Token path (>= 2 addresses)')
    p.add_argument('--min-out', type=Decimal, default=Decimal(0))
    p.add_argument('--to', help='Recipient (default: signer)')
    p.add_argument('--deadline', type=int, help='Unix deadline (default: now + 600s)')
    p.add_argument('--approve', action='store_true', help='Approve the router first if needed')
    p.set_defaults(func=router_swap)

    p = subparsers.add_parser('add-liquidity', help='Add liquidity through the router')
    _add_pair(p)
    p.add_argument('amount_a', type=Decimal)
    p.add_argument('amount_b', type=Decimal)
    p.add_argument('--min-a', type=Decimal, default=Decimal(0))
    p.add_argument('--min-b', type=Decimal, default=Decimal(0))
    p.add_argument('--to', help='LP token recipient (default: signer)')
    p.add_argument('--deadline', type=int)
    p.add_argument('--approve', action='store_true')
    p.set_defaults(func=add_liquidity)

    p = subparsers.add_parser('remove-liquidity', help='Remove liquidity through the router')
    _add_pair(p)
    p.add_argument('liquidity', type=int, help='LP amount in base units')
    p.add_argument('--min-a', type=Decimal, default=Decimal(0))
    p.add_argument('--min-b', type=Decimal, default=Decimal(0))
    p.add_argument('--to', help='Recipient (default: signer)')
    p.add_argument('--deadline', type=int)
    p.set_defaults(func=remove_liquidity)

    p = subparsers.add_parser('set-defaults', help='Set factory defaults for new pools')
    _add_breaker_args(p)
    p.set_defaults(func=set_defaults)

    p = subparsers.add_parser('update-params', help='Update fee / breaker params of a pool')
    _add_pair(p)
    _add_breaker_args(p)
    p.set_defaults(func=update_params)

    for name in ('pause', 'unpause'):
        p = subparsers.add_parser(name, help=f'{name.capitalize()} a pool')
        _add_pair(p)
        p.set_defaults(func=pause)

    p = subparsers.add_parser('flush-fees', help='Sweep accrued pool fees')
    _add_pair(p)
    p.add_argument('--to', help='Recipient (default: signer)')
    p.add_argument('--native', action='store_true', help='Flush native balance instead')
    p.set_defaults(func=flush_fees)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logger(
        "amm_helpers",
        level=logging.DEBUG if args.verbose else logging.INFO,
        detailed=args.verbose,
        to_file=False,
    )

    try:
        args.func(Context(args), args)
    except (AMMError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        sys.exit(1)


if __name__ == '__main__':
    main()
