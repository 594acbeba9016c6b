"""
Bitcoin receivers: addresses that collect a bitcoin payment for a given
amount in the merchant's currency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..core.models import require_id
from ..core.params import ListParams, Params, Settable, param
from ..core.resource import CollectionClient
from .bitcointransaction import BitcoinTransaction

__all__ = [
    "BitcoinReceiver",
    "BitcoinReceiverClient",
    "BitcoinReceiverListParams",
    "BitcoinReceiverParams",
]


@dataclass
class BitcoinReceiverParams(Params):
    amount: Settable[int] = param()
    currency: Settable[str] = param()
    email: Settable[str] = param()
    description: Settable[str] = param()
    refund_mispayments: Settable[bool] = param()


@dataclass
class BitcoinReceiverListParams(ListParams):
    active: Settable[bool] = param()
    filled: Settable[bool] = param()
    uncaptured_funds: Settable[bool] = param()


@dataclass(frozen=True)
class BitcoinReceiver:
    id: str
    amount: int = 0
    amount_received: int = 0
    bitcoin_amount: int = 0
    bitcoin_amount_received: int = 0
    bitcoin_uri: Optional[str] = None
    currency: Optional[str] = None
    email: Optional[str] = None
    description: Optional[str] = None
    inbound_address: Optional[str] = None
    refund_address: Optional[str] = None
    active: bool = False
    filled: bool = False
    uncaptured_funds: bool = False
    used_for_payment: bool = False
    livemode: bool = False
    created: Optional[int] = None
    customer: Optional[str] = None
    transactions: Tuple[BitcoinTransaction, ...] = ()
    metadata: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BitcoinReceiver":
        transactions = (payload.get("transactions") or {}).get("data") or ()
        return cls(
            id=require_id(payload, "Bitcoin receiver"),
            amount=int(payload.get("amount") or 0),
            amount_received=int(payload.get("amount_received") or 0),
            bitcoin_amount=int(payload.get("bitcoin_amount") or 0),
            bitcoin_amount_received=int(payload.get("bitcoin_amount_received") or 0),
            bitcoin_uri=payload.get("bitcoin_uri"),
            currency=payload.get("currency"),
            email=payload.get("email"),
            description=payload.get("description"),
            inbound_address=payload.get("inbound_address"),
            refund_address=payload.get("refund_address"),
            active=bool(payload.get("active", False)),
            filled=bool(payload.get("filled", False)),
            uncaptured_funds=bool(payload.get("uncaptured_funds", False)),
            used_for_payment=bool(payload.get("used_for_payment", False)),
            livemode=bool(payload.get("livemode", False)),
            created=payload.get("created"),
            customer=payload.get("customer"),
            transactions=tuple(BitcoinTransaction.from_dict(item) for item in transactions),
            metadata=dict(payload.get("metadata") or {}),
            raw=payload,
        )


class BitcoinReceiverClient(CollectionClient[BitcoinReceiver]):
    name = "bitcoin receiver"
    decoder = staticmethod(BitcoinReceiver.from_dict)
    collection_path = "/v1/bitcoin/receivers"
