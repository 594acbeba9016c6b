"""
Typed clients for each API resource.
"""

from .account import (
    Account,
    AccountClient,
    AccountParams,
    AccountRejectParams,
    Address,
    AddressParams,
    DOB,
    DOBParams,
    ExternalAccountParams,
    LegalEntity,
    LegalEntityParams,
    LegalEntityType,
    TOSAcceptance,
    TOSAcceptanceParams,
    Verification,
)
from .bankaccount import (
    BankAccount,
    BankAccountClient,
    BankAccountListParams,
    BankAccountParams,
    BankAccountStatus,
)
from .bitcoinreceiver import (
    BitcoinReceiver,
    BitcoinReceiverClient,
    BitcoinReceiverListParams,
    BitcoinReceiverParams,
)
from .bitcointransaction import (
    BitcoinTransaction,
    BitcoinTransactionClient,
    BitcoinTransactionListParams,
)
from .card import Card, CardBrand, CardClient, CardFunding, CardListParams, CardParams
from .currency import Currency
from .recipient import (
    Recipient,
    RecipientClient,
    RecipientListParams,
    RecipientParams,
    RecipientType,
)
from .token import Token, TokenClient, TokenParams, TokenType

__all__ = [
    "Account",
    "AccountClient",
    "AccountParams",
    "AccountRejectParams",
    "Address",
    "AddressParams",
    "BankAccount",
    "BankAccountClient",
    "BankAccountListParams",
    "BankAccountParams",
    "BankAccountStatus",
    "BitcoinReceiver",
    "BitcoinReceiverClient",
    "BitcoinReceiverListParams",
    "BitcoinReceiverParams",
    "BitcoinTransaction",
    "BitcoinTransactionClient",
    "BitcoinTransactionListParams",
    "Card",
    "CardBrand",
    "CardClient",
    "CardFunding",
    "CardListParams",
    "CardParams",
    "Currency",
    "DOB",
    "DOBParams",
    "ExternalAccountParams",
    "LegalEntity",
    "LegalEntityParams",
    "LegalEntityType",
    "Recipient",
    "RecipientClient",
    "RecipientListParams",
    "RecipientParams",
    "RecipientType",
    "TOSAcceptance",
    "TOSAcceptanceParams",
    "Token",
    "TokenClient",
    "TokenParams",
    "TokenType",
    "Verification",
]
