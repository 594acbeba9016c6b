"""
Connected accounts and the account owning the API key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from ..core.models import enum_or_none, optional_object, require_id
from ..core.params import Params, Settable, encode_params, is_set, param
from ..core.resource import CollectionClient
from .bankaccount import BankAccount
from .card import Card

__all__ = [
    "Account",
    "AccountClient",
    "AccountParams",
    "AccountRejectParams",
    "Address",
    "AddressParams",
    "DOB",
    "DOBParams",
    "ExternalAccountParams",
    "LegalEntity",
    "LegalEntityParams",
    "LegalEntityType",
    "TOSAcceptance",
    "TOSAcceptanceParams",
    "Verification",
]


class LegalEntityType(str, Enum):
    INDIVIDUAL = "individual"
    COMPANY = "company"


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


@dataclass
class AddressParams:
    line1: Settable[str] = param()
    line2: Settable[str] = param()
    city: Settable[str] = param()
    state: Settable[str] = param()
    postal_code: Settable[str] = param()
    country: Settable[str] = param()


@dataclass
class DOBParams:
    day: Settable[int] = param()
    month: Settable[int] = param()
    year: Settable[int] = param()


@dataclass
class LegalEntityParams:
    type: Settable[LegalEntityType] = param()
    business_name: Settable[str] = param()
    business_tax_id: Settable[str] = param()
    first_name: Settable[str] = param()
    last_name: Settable[str] = param()
    ssn_last_4: Settable[str] = param()
    personal_id_number: Settable[str] = param()
    dob: Settable[DOBParams] = param()
    address: Settable[AddressParams] = param()
    personal_address: Settable[AddressParams] = param()


@dataclass
class TOSAcceptanceParams:
    date: Settable[int] = param()
    ip: Settable[str] = param()
    user_agent: Settable[str] = param()


@dataclass
class ExternalAccountParams:
    """Bank account details sent inline with account create/update."""

    object: str = "bank_account"
    country: Settable[str] = param()
    currency: Settable[str] = param()
    routing_number: Settable[str] = param()
    account_number: Settable[str] = param()
    account_holder_name: Settable[str] = param()
    account_holder_type: Settable[str] = param()


@dataclass
class AccountParams(Params):
    """
    Parameters for creating or updating an account.

    ``external_account`` takes either inline bank details or a token id.
    ``from_recipient`` migrates an existing recipient into a new account.
    """

    managed: Settable[bool] = param()
    country: Settable[str] = param()
    email: Settable[str] = param()
    business_name: Settable[str] = param()
    business_url: Settable[str] = param()
    business_primary_color: Settable[str] = param()
    product_description: Settable[str] = param()
    support_email: Settable[str] = param()
    support_phone: Settable[str] = param()
    support_url: Settable[str] = param()
    statement_descriptor: Settable[str] = param()
    default_currency: Settable[str] = param()
    debit_negative_balances: Settable[bool] = param()
    from_recipient: Settable[str] = param()
    legal_entity: Settable[LegalEntityParams] = param()
    tos_acceptance: Settable[TOSAcceptanceParams] = param()
    external_account: Settable[Union[ExternalAccountParams, str]] = param()


@dataclass
class AccountRejectParams(Params):
    reason: Settable[str] = param()


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Address:
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Address":
        return cls(
            line1=payload.get("line1"),
            line2=payload.get("line2"),
            city=payload.get("city"),
            state=payload.get("state"),
            postal_code=payload.get("postal_code"),
            country=payload.get("country"),
        )


@dataclass(frozen=True)
class DOB:
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DOB":
        return cls(day=payload.get("day"), month=payload.get("month"), year=payload.get("year"))


@dataclass(frozen=True)
class LegalEntity:
    type: Optional[LegalEntityType] = None
    business_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    dob: Optional[DOB] = None
    address: Optional[Address] = None
    personal_address: Optional[Address] = None
    # the API never echoes these values back, only whether they were given
    business_tax_id_provided: bool = False
    ssn_last_4_provided: bool = False
    personal_id_number_provided: bool = False
    verification_status: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "LegalEntity":
        verification = payload.get("verification") or {}
        return cls(
            type=enum_or_none(LegalEntityType, payload.get("type")),
            business_name=payload.get("business_name"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            dob=optional_object(payload, "dob", DOB.from_dict),
            address=optional_object(payload, "address", Address.from_dict),
            personal_address=optional_object(payload, "personal_address", Address.from_dict),
            business_tax_id_provided=bool(payload.get("business_tax_id_provided", False)),
            ssn_last_4_provided=bool(payload.get("ssn_last_4_provided", False)),
            personal_id_number_provided=bool(payload.get("personal_id_number_provided", False)),
            verification_status=verification.get("status"),
        )


@dataclass(frozen=True)
class Verification:
    disabled_reason: Optional[str] = None
    due_by: Optional[int] = None
    fields_needed: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Verification":
        return cls(
            disabled_reason=payload.get("disabled_reason"),
            due_by=payload.get("due_by"),
            fields_needed=tuple(payload.get("fields_needed") or ()),
        )


@dataclass(frozen=True)
class TOSAcceptance:
    date: Optional[int] = None
    ip: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "TOSAcceptance":
        return cls(date=payload.get("date"), ip=payload.get("ip"), user_agent=payload.get("user_agent"))


def _decode_external_accounts(payload: Dict[str, Any]) -> Tuple[Union[BankAccount, Card], ...]:
    container = payload.get("external_accounts") or {}
    items: List[Union[BankAccount, Card]] = []
    for item in container.get("data") or ():
        if item.get("object") == "card":
            items.append(Card.from_dict(item))
        else:
            items.append(BankAccount.from_dict(item))
    return tuple(items)


@dataclass(frozen=True)
class Account:
    id: str
    email: Optional[str] = None
    country: Optional[str] = None
    default_currency: Optional[str] = None
    display_name: Optional[str] = None
    timezone: Optional[str] = None
    business_name: Optional[str] = None
    business_url: Optional[str] = None
    business_primary_color: Optional[str] = None
    product_description: Optional[str] = None
    support_email: Optional[str] = None
    support_phone: Optional[str] = None
    support_url: Optional[str] = None
    statement_descriptor: Optional[str] = None
    managed: bool = False
    charges_enabled: bool = False
    transfers_enabled: bool = False
    details_submitted: bool = False
    debit_negative_balances: bool = False
    legal_entity: Optional[LegalEntity] = None
    verification: Optional[Verification] = None
    tos_acceptance: Optional[TOSAcceptance] = None
    external_accounts: Tuple[Union[BankAccount, Card], ...] = ()
    metadata: Dict[str, str] = field(default_factory=dict)
    deleted: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_id(cls, account_id: str) -> "Account":
        return cls(id=account_id, raw={"id": account_id})

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Account":
        return cls(
            id=require_id(payload, "Account"),
            email=payload.get("email"),
            country=payload.get("country"),
            default_currency=payload.get("default_currency"),
            display_name=payload.get("display_name"),
            timezone=payload.get("timezone"),
            business_name=payload.get("business_name"),
            business_url=payload.get("business_url"),
            business_primary_color=payload.get("business_primary_color"),
            product_description=payload.get("product_description"),
            support_email=payload.get("support_email"),
            support_phone=payload.get("support_phone"),
            support_url=payload.get("support_url"),
            statement_descriptor=payload.get("statement_descriptor"),
            managed=bool(payload.get("managed", False)),
            charges_enabled=bool(payload.get("charges_enabled", False)),
            transfers_enabled=bool(payload.get("transfers_enabled", False)),
            details_submitted=bool(payload.get("details_submitted", False)),
            debit_negative_balances=bool(payload.get("debit_negative_balances", False)),
            legal_entity=optional_object(payload, "legal_entity", LegalEntity.from_dict),
            verification=optional_object(payload, "verification", Verification.from_dict),
            tos_acceptance=optional_object(payload, "tos_acceptance", TOSAcceptance.from_dict),
            external_accounts=_decode_external_accounts(payload),
            metadata=dict(payload.get("metadata") or {}),
            deleted=bool(payload.get("deleted", False)),
            raw=payload,
        )


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class AccountClient(CollectionClient[Account]):
    name = "account"
    decoder = staticmethod(Account.from_dict)
    collection_path = "/v1/accounts"

    def get(self, resource_id: Optional[str] = None, params: Optional[Params] = None) -> Account:
        """
        Retrieve an account. Without an id this returns the account the API
        key belongs to.
        """
        if resource_id is None:
            return self._get("/v1/account", params)
        return super().get(resource_id, params)

    def get_by_id(self, account_id: str, params: Optional[Params] = None) -> Account:
        return super().get(account_id, params)

    def reject(self, account_id: str, params: AccountRejectParams) -> Account:
        """Reject a managed account, e.g. with reason ``fraud`` or ``terms_of_service``."""
        if not is_set(params.reason):
            raise ValueError("A rejection reason is required")
        account = self._post(
            f"{self.instance_path(account_id)}/reject",
            encode_params(params),
            params,
        )
        logging.info("Rejected account %s", account.id)
        return account
