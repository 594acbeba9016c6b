"""
Bank accounts attached to connected accounts (payout destinations) or to
customers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..core.models import enum_or_none, require_id
from ..core.params import ListParams, Params, Settable, local_param, param
from ..core.resource import OwnedClient

__all__ = [
    "BankAccount",
    "BankAccountClient",
    "BankAccountListParams",
    "BankAccountParams",
    "BankAccountStatus",
]


class BankAccountStatus(str, Enum):
    NEW = "new"
    VALIDATED = "validated"
    VERIFIED = "verified"
    VERIFICATION_FAILED = "verification_failed"
    ERRORED = "errored"


@dataclass
class BankAccountParams(Params):
    """
    ``account`` or ``customer`` selects the owner. ``token`` replaces the raw
    routing/account numbers with a previously created bank account token.
    """

    account: Optional[str] = local_param()
    customer: Optional[str] = local_param()
    token: Optional[str] = local_param()
    country: Settable[str] = param()
    currency: Settable[str] = param()
    routing_number: Settable[str] = param()
    account_number: Settable[str] = param()
    account_holder_name: Settable[str] = param()
    account_holder_type: Settable[str] = param()
    default_for_currency: Settable[bool] = param()


@dataclass
class BankAccountListParams(ListParams):
    account: Optional[str] = local_param()
    customer: Optional[str] = local_param()


@dataclass(frozen=True)
class BankAccount:
    id: str
    country: Optional[str] = None
    currency: Optional[str] = None
    last4: Optional[str] = None
    routing_number: Optional[str] = None
    bank_name: Optional[str] = None
    fingerprint: Optional[str] = None
    status: Optional[BankAccountStatus] = None
    default_for_currency: bool = False
    account_holder_name: Optional[str] = None
    account_holder_type: Optional[str] = None
    account: Optional[str] = None
    customer: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BankAccount":
        return cls(
            id=require_id(payload, "Bank account"),
            country=payload.get("country"),
            currency=payload.get("currency"),
            last4=payload.get("last4"),
            routing_number=payload.get("routing_number"),
            bank_name=payload.get("bank_name"),
            fingerprint=payload.get("fingerprint"),
            status=enum_or_none(BankAccountStatus, payload.get("status")),
            default_for_currency=bool(payload.get("default_for_currency", False)),
            account_holder_name=payload.get("account_holder_name"),
            account_holder_type=payload.get("account_holder_type"),
            account=payload.get("account"),
            customer=payload.get("customer"),
            metadata=dict(payload.get("metadata") or {}),
            raw=payload,
        )


class BankAccountClient(OwnedClient[BankAccount]):
    name = "bank account"
    decoder = staticmethod(BankAccount.from_dict)
    owners = (
        ("account", "/v1/accounts/{}/external_accounts", "external_account", "bank_account"),
        ("customer", "/v1/customers/{}/sources", "source", "bank_account"),
    )
    top_level = ("default_for_currency", "metadata", "expand")
