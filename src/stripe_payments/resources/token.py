"""
Single-use tokens standing in for card or bank account details.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..core.models import enum_or_none, optional_object, require_id
from ..core.params import Params, Settable, encode_params, param
from ..core.resource import ResourceClient
from .bankaccount import BankAccount, BankAccountParams
from .card import Card, CardParams

__all__ = ["Token", "TokenClient", "TokenParams", "TokenType"]


class TokenType(str, Enum):
    CARD = "card"
    BANK_ACCOUNT = "bank_account"
    PII = "pii"


@dataclass
class TokenParams(Params):
    """
    Provide ``card`` or ``bank_account`` details. ``customer`` together with a
    card id in ``card`` shares a customer's card with a connected account.
    """

    card: Settable[Union[CardParams, str]] = param()
    bank_account: Settable[BankAccountParams] = param()
    customer: Settable[str] = param()


@dataclass(frozen=True)
class Token:
    id: str
    type: Optional[TokenType] = None
    used: bool = False
    livemode: bool = False
    created: Optional[int] = None
    client_ip: Optional[str] = None
    card: Optional[Card] = None
    bank_account: Optional[BankAccount] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Token":
        return cls(
            id=require_id(payload, "Token"),
            type=enum_or_none(TokenType, payload.get("type")),
            used=bool(payload.get("used", False)),
            livemode=bool(payload.get("livemode", False)),
            created=payload.get("created"),
            client_ip=payload.get("client_ip"),
            card=optional_object(payload, "card", Card.from_dict),
            bank_account=optional_object(payload, "bank_account", BankAccount.from_dict),
            raw=payload,
        )


class TokenClient(ResourceClient[Token]):
    """Tokens can only be created and retrieved."""

    name = "token"
    decoder = staticmethod(Token.from_dict)
    collection_path = "/v1/tokens"

    def create(self, params: TokenParams) -> Token:
        return self._post(self.collection_path, encode_params(params), params)

    def get(self, token_id: str, params: Optional[Params] = None) -> Token:
        return self._get(self._join(self.collection_path, token_id), params)
