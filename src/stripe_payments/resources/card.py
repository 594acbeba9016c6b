"""
Cards owned by a connected account, a customer or a recipient.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..core.models import enum_or_none, require_id
from ..core.params import ListParams, Params, Settable, local_param, param
from ..core.resource import OwnedClient

__all__ = [
    "Card",
    "CardBrand",
    "CardClient",
    "CardFunding",
    "CardListParams",
    "CardParams",
]


class CardBrand(str, Enum):
    AMEX = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    MASTERCARD = "MasterCard"
    UNKNOWN = "Unknown"
    VISA = "Visa"


class CardFunding(str, Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    PREPAID = "prepaid"
    UNKNOWN = "unknown"


@dataclass
class CardParams(Params):
    """
    Exactly one of ``account``, ``customer`` or ``recipient`` selects the
    owner. ``token`` attaches a card token instead of raw card details.
    """

    account: Optional[str] = local_param()
    customer: Optional[str] = local_param()
    recipient: Optional[str] = local_param()
    token: Optional[str] = local_param()
    number: Settable[str] = param()
    exp_month: Settable[int] = param()
    exp_year: Settable[int] = param()
    cvc: Settable[str] = param()
    name: Settable[str] = param()
    currency: Settable[str] = param()
    address_line1: Settable[str] = param()
    address_line2: Settable[str] = param()
    address_city: Settable[str] = param()
    address_state: Settable[str] = param()
    address_zip: Settable[str] = param()
    address_country: Settable[str] = param()
    default_for_currency: Settable[bool] = param()


@dataclass
class CardListParams(ListParams):
    account: Optional[str] = local_param()
    customer: Optional[str] = local_param()
    recipient: Optional[str] = local_param()


@dataclass(frozen=True)
class Card:
    id: str
    brand: Optional[CardBrand] = None
    funding: Optional[CardFunding] = None
    last4: Optional[str] = None
    dynamic_last4: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    name: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    fingerprint: Optional[str] = None
    cvc_check: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    address_line1_check: Optional[str] = None
    address_zip_check: Optional[str] = None
    tokenization_method: Optional[str] = None
    default_for_currency: bool = False
    account: Optional[str] = None
    customer: Optional[str] = None
    recipient: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Card":
        return cls(
            id=require_id(payload, "Card"),
            brand=enum_or_none(CardBrand, payload.get("brand")),
            funding=enum_or_none(CardFunding, payload.get("funding")),
            last4=payload.get("last4"),
            dynamic_last4=payload.get("dynamic_last4"),
            exp_month=payload.get("exp_month"),
            exp_year=payload.get("exp_year"),
            name=payload.get("name"),
            country=payload.get("country"),
            currency=payload.get("currency"),
            fingerprint=payload.get("fingerprint"),
            cvc_check=payload.get("cvc_check"),
            address_line1=payload.get("address_line1"),
            address_line2=payload.get("address_line2"),
            address_city=payload.get("address_city"),
            address_state=payload.get("address_state"),
            address_zip=payload.get("address_zip"),
            address_country=payload.get("address_country"),
            address_line1_check=payload.get("address_line1_check"),
            address_zip_check=payload.get("address_zip_check"),
            tokenization_method=payload.get("tokenization_method"),
            default_for_currency=bool(payload.get("default_for_currency", False)),
            account=payload.get("account"),
            customer=payload.get("customer"),
            recipient=payload.get("recipient"),
            metadata=dict(payload.get("metadata") or {}),
            raw=payload,
        )


class CardClient(OwnedClient[Card]):
    name = "card"
    decoder = staticmethod(Card.from_dict)
    owners = (
        ("account", "/v1/accounts/{}/external_accounts", "external_account", "card"),
        ("customer", "/v1/customers/{}/sources", "source", "card"),
        ("recipient", "/v1/recipients/{}/cards", "card", None),
    )
    top_level = ("default_for_currency", "metadata", "expand")
