"""
Python bindings for the Stripe REST API (accounts, recipients, cards, bank
accounts, tokens and bitcoin receivers).

The module re-exports the most useful pieces for integrators so they can
``from stripe_payments import ...`` without navigating the package::

    client = create_client(api_key="sk_test_...")
    for txn in client.bitcoin_transactions.list(
        BitcoinTransactionListParams(receiver="btcrcv_123", limit=10)
    ):
        print(txn.id, txn.amount)
"""

from .api import create_client
from .core import (
    UNSET,
    ClientConfig,
    ClientEnvironment,
    ClientParameters,
    ConfigError,
    DecodeError,
    DeletedResource,
    Filters,
    ListIterator,
    ListMeta,
    ListParams,
    NotFoundError,
    Page,
    Params,
    RequestError,
    StripeClient,
    StripeError,
    TransportError,
    build_environment,
    encode_params,
    load_client_config,
    load_env_file,
)
from .resources import (
    Account,
    AccountParams,
    AccountRejectParams,
    AddressParams,
    BankAccount,
    BankAccountListParams,
    BankAccountParams,
    BitcoinReceiver,
    BitcoinReceiverListParams,
    BitcoinReceiverParams,
    BitcoinTransaction,
    BitcoinTransactionListParams,
    Card,
    CardListParams,
    CardParams,
    Currency,
    DOBParams,
    ExternalAccountParams,
    LegalEntityParams,
    LegalEntityType,
    Recipient,
    RecipientListParams,
    RecipientParams,
    RecipientType,
    TOSAcceptanceParams,
    Token,
    TokenParams,
)

__version__ = "0.1.0"

__all__ = (
    "UNSET",
    "Account",
    "AccountParams",
    "AccountRejectParams",
    "AddressParams",
    "BankAccount",
    "BankAccountListParams",
    "BankAccountParams",
    "BitcoinReceiver",
    "BitcoinReceiverListParams",
    "BitcoinReceiverParams",
    "BitcoinTransaction",
    "BitcoinTransactionListParams",
    "Card",
    "CardListParams",
    "CardParams",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "Currency",
    "DOBParams",
    "DecodeError",
    "DeletedResource",
    "ExternalAccountParams",
    "Filters",
    "LegalEntityParams",
    "LegalEntityType",
    "ListIterator",
    "ListMeta",
    "ListParams",
    "NotFoundError",
    "Page",
    "Params",
    "Recipient",
    "RecipientListParams",
    "RecipientParams",
    "RecipientType",
    "RequestError",
    "StripeClient",
    "StripeError",
    "TOSAcceptanceParams",
    "Token",
    "TokenParams",
    "TransportError",
    "build_environment",
    "create_client",
    "encode_params",
    "load_client_config",
    "load_env_file",
)
