"""
The client object that ties a configuration to every resource client.
"""

from __future__ import annotations

from typing import Optional

import requests

from ..resources.account import AccountClient
from ..resources.bankaccount import BankAccountClient
from ..resources.bitcoinreceiver import BitcoinReceiverClient
from ..resources.bitcointransaction import BitcoinTransactionClient
from ..resources.card import CardClient
from ..resources.recipient import RecipientClient
from ..resources.token import TokenClient
from .config import ClientConfig
from .transport import Transport

__all__ = ["StripeClient"]


class StripeClient:
    """
    Entry point bundling one API key and HTTP session with every resource.

    Independent clients share nothing, so several keys (or fake sessions in
    tests) can be used side by side.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.transport = Transport(config, session=session)

        self.accounts = AccountClient(self.transport)
        self.bank_accounts = BankAccountClient(self.transport)
        self.bitcoin_receivers = BitcoinReceiverClient(self.transport)
        self.bitcoin_transactions = BitcoinTransactionClient(self.transport)
        self.cards = CardClient(self.transport)
        self.recipients = RecipientClient(self.transport)
        self.tokens = TokenClient(self.transport)

    @property
    def session(self) -> requests.Session:
        return self.transport.session

    def close(self) -> None:
        self.transport.session.close()

    def __enter__(self) -> "StripeClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"StripeClient({self.config!r})"
