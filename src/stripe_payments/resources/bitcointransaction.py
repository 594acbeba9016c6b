"""
Bitcoin transactions received by a bitcoin receiver.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.iterator import ListIterator
from ..core.models import require_id
from ..core.params import ListParams, Settable, local_param, param
from ..core.resource import ResourceClient

__all__ = [
    "BitcoinTransaction",
    "BitcoinTransactionClient",
    "BitcoinTransactionListParams",
]


@dataclass
class BitcoinTransactionListParams(ListParams):
    receiver: Optional[str] = local_param()
    customer: Settable[str] = param()


@dataclass(frozen=True)
class BitcoinTransaction:
    id: str
    amount: int = 0
    bitcoin_amount: int = 0
    currency: Optional[str] = None
    receiver: Optional[str] = None
    customer: Optional[str] = None
    created: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "BitcoinTransaction":
        return cls(
            id=require_id(payload, "Bitcoin transaction"),
            amount=int(payload.get("amount") or 0),
            bitcoin_amount=int(payload.get("bitcoin_amount") or 0),
            currency=payload.get("currency"),
            receiver=payload.get("receiver"),
            customer=payload.get("customer"),
            created=payload.get("created"),
            raw=payload,
        )


class BitcoinTransactionClient(ResourceClient[BitcoinTransaction]):
    name = "bitcoin transaction"
    decoder = staticmethod(BitcoinTransaction.from_dict)

    def list(self, params: BitcoinTransactionListParams) -> ListIterator[BitcoinTransaction]:
        if not params.receiver:
            raise ValueError("Listing bitcoin transactions requires a receiver id")
        path = self._join("/v1/bitcoin/receivers", params.receiver) + "/transactions"
        return self._list(path, params)
