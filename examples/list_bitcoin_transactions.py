"""
Minimal script that uses the public API to create a bitcoin receiver and
page through the transactions it received.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Tuple

from stripe_payments import (
    BitcoinReceiverParams,
    BitcoinTransactionListParams,
    ConfigError,
    Currency,
    StripeError,
    create_client,
    load_client_config,
)


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List bitcoin transactions using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--api-key",
        help="Provide the secret key without relying on environment data",
    )
    parser.add_argument(
        "--receiver",
        help="Existing receiver id; a new test receiver is created when omitted",
    )
    parser.add_argument(
        "--amount",
        type=int,
        default=1000,
        help="Amount in cents for a newly created receiver (default: 1000)",
    )
    parser.add_argument(
        "--email",
        default="do+fill_now@stripe.com",
        help="Payer email for a newly created receiver",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Page size used while listing (default: 5)",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="Only fetch the first page of transactions",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    overrides = _build_overrides(args.set or ())

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=overrides,
            api_key=args.api_key,
        )
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    with create_client(config=config) as client:
        receiver_id = args.receiver
        if receiver_id is None:
            try:
                receiver = client.bitcoin_receivers.create(
                    BitcoinReceiverParams(
                        amount=args.amount,
                        currency=Currency.USD,
                        email=args.email,
                        description="example receiver",
                    )
                )
            except StripeError as exc:
                logging.error("Creating the receiver failed: %s", exc)
                return 1
            receiver_id = receiver.id
            logging.info("Created receiver %s (%s)", receiver.id, receiver.inbound_address)

        params = BitcoinTransactionListParams(
            receiver=receiver_id,
            limit=args.limit,
            single=args.single,
        )
        transactions = client.bitcoin_transactions.list(params)
        while transactions.advance():
            txn = transactions.current
            logging.info("Transaction %s: %s %s", txn.id, txn.amount, txn.currency)

        if transactions.last_error is not None:
            logging.error("Listing transactions failed: %s", transactions.last_error)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
