"""
Transfer recipients. Recipients can be migrated into accounts, after which
``migrated_to`` points at the new account.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ..core.models import enum_or_none, expandable, optional_object, require_id
from ..core.params import ListParams, Params, Settable, param
from ..core.resource import CollectionClient
from .account import Account
from .bankaccount import BankAccount, BankAccountParams
from .card import Card, CardParams

__all__ = [
    "Recipient",
    "RecipientClient",
    "RecipientListParams",
    "RecipientParams",
    "RecipientType",
]


class RecipientType(str, Enum):
    INDIVIDUAL = "individual"
    CORPORATION = "corporation"


@dataclass
class RecipientParams(Params):
    name: Settable[str] = param()
    type: Settable[RecipientType] = param()
    tax_id: Settable[str] = param()
    email: Settable[str] = param()
    description: Settable[str] = param()
    bank_account: Settable[Union[BankAccountParams, str]] = param()
    card: Settable[Union[CardParams, str]] = param()
    default_card: Settable[str] = param()


@dataclass
class RecipientListParams(ListParams):
    verified: Settable[bool] = param()


@dataclass(frozen=True)
class Recipient:
    id: str
    name: Optional[str] = None
    type: Optional[RecipientType] = None
    email: Optional[str] = None
    description: Optional[str] = None
    created: Optional[int] = None
    livemode: bool = False
    verified: bool = False
    active_account: Optional[BankAccount] = None
    cards: Tuple[Card, ...] = ()
    default_card: Optional[str] = None
    migrated_to: Optional[Account] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    deleted: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Recipient":
        cards = (payload.get("cards") or {}).get("data") or ()
        default_card = payload.get("default_card")
        if isinstance(default_card, dict):
            default_card = default_card.get("id")
        return cls(
            id=require_id(payload, "Recipient"),
            name=payload.get("name"),
            type=enum_or_none(RecipientType, payload.get("type")),
            email=payload.get("email"),
            description=payload.get("description"),
            created=payload.get("created"),
            livemode=bool(payload.get("livemode", False)),
            verified=bool(payload.get("verified", False)),
            active_account=optional_object(payload, "active_account", BankAccount.from_dict),
            cards=tuple(Card.from_dict(card) for card in cards),
            default_card=default_card,
            migrated_to=expandable(payload.get("migrated_to"), Account.from_dict, Account.from_id),
            metadata=dict(payload.get("metadata") or {}),
            deleted=bool(payload.get("deleted", False)),
            raw=payload,
        )


class RecipientClient(CollectionClient[Recipient]):
    name = "recipient"
    decoder = staticmethod(Recipient.from_dict)
    collection_path = "/v1/recipients"
