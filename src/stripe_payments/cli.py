"""
Command-line interface for inspecting API resources.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from typing import Any, Callable, Dict, Iterable, Sequence, TextIO, Tuple

import requests

from .api import ConfigError, StripeClient, create_client, load_client_config
from .core.errors import StripeError
from .core.iterator import ListIterator
from .core.params import Filters, ListParams, UNSET
from .resources.bitcointransaction import BitcoinTransactionListParams

_FILTER_PATTERN = re.compile(r"^(?P<key>[^\[\]=]+)(?:\[(?P<op>[^\]]*)\])?=(?P<value>.*)$")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _filter(value: str) -> Tuple[str, str, str]:
    match = _FILTER_PATTERN.match(value)
    if match is None:
        raise argparse.ArgumentTypeError("Filters must look like KEY=VALUE or KEY[OP]=VALUE")
    return match.group("key").strip(), match.group("op") or "", match.group("value")


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def _list_accounts(client: StripeClient, params: ListParams, args: argparse.Namespace) -> ListIterator:
    return client.accounts.list(params)


def _list_recipients(client: StripeClient, params: ListParams, args: argparse.Namespace) -> ListIterator:
    return client.recipients.list(params)


def _list_bitcoin_receivers(client: StripeClient, params: ListParams, args: argparse.Namespace) -> ListIterator:
    return client.bitcoin_receivers.list(params)


def _list_bitcoin_transactions(
    client: StripeClient, params: ListParams, args: argparse.Namespace
) -> ListIterator:
    if not args.receiver:
        raise ValueError("--receiver is required when listing bitcoin-transactions")
    txn_params = BitcoinTransactionListParams(
        limit=params.limit,
        starting_after=params.starting_after,
        ending_before=params.ending_before,
        single=params.single,
        filters=params.filters,
        receiver=args.receiver,
    )
    return client.bitcoin_transactions.list(txn_params)


_LISTERS: Dict[str, Callable[[StripeClient, ListParams, argparse.Namespace], ListIterator]] = {
    "accounts": _list_accounts,
    "recipients": _list_recipients,
    "bitcoin-receivers": _list_bitcoin_receivers,
    "bitcoin-transactions": _list_bitcoin_transactions,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripe-payments",
        description="Inspect accounts, recipients and bitcoin receivers through the REST API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    account = commands.add_parser("account", help="Show an account as JSON")
    account.add_argument(
        "account_id",
        nargs="?",
        help="Account id (default: the account owning the API key)",
    )

    listing = commands.add_parser("list", help="Stream every item of a list endpoint as JSON lines")
    listing.add_argument("resource", choices=sorted(_LISTERS))
    listing.add_argument("--limit", type=int, help="Page size requested from the API")
    cursor = listing.add_mutually_exclusive_group()
    cursor.add_argument("--starting-after", help="Page forward from this object id")
    cursor.add_argument("--ending-before", help="Page backward from this object id")
    listing.add_argument(
        "--single",
        action="store_true",
        help="Fetch a single page instead of following has_more",
    )
    listing.add_argument(
        "--filter",
        action="append",
        type=_filter,
        metavar="KEY[OP]=VALUE",
        default=None,
        help="Extra list filter, e.g. created[gt]=1437578361",
    )
    listing.add_argument("--receiver", help="Bitcoin receiver id for bitcoin-transactions")
    return parser


def _emit(payload: Dict[str, Any], out: TextIO) -> None:
    out.write(json.dumps(payload, sort_keys=True) + "\n")


def _list_params(args: argparse.Namespace) -> ListParams:
    return ListParams(
        limit=args.limit if args.limit is not None else UNSET,
        starting_after=args.starting_after or UNSET,
        ending_before=args.ending_before or UNSET,
        single=args.single,
        filters=Filters(args.filter or ()),
    )


def _run_account(client: StripeClient, args: argparse.Namespace, out: TextIO) -> int:
    account = client.accounts.get(args.account_id)
    _emit(account.raw, out)
    return 0


def _run_list(client: StripeClient, args: argparse.Namespace, out: TextIO) -> int:
    iterator = _LISTERS[args.resource](client, _list_params(args), args)
    count = 0
    while iterator.advance():
        _emit(iterator.current.raw, out)
        count += 1

    if iterator.last_error is not None:
        logging.error("Listing %s failed after %d items: %s", args.resource, count, iterator.last_error)
        return 1

    logging.info("Listed %d %s", count, args.resource)
    return 0


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    out: TextIO | None = None,
    session: requests.Session | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_client(config=config, session=session or requests.Session()) as client:
        try:
            if args.command == "account":
                return _run_account(client, args, out)
            return _run_list(client, args, out)
        except (StripeError, ValueError) as exc:
            logging.error("Request failed: %s", exc)
            return 1


def main() -> None:
    sys.exit(run_cli())
