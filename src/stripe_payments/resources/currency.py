"""
ISO 4217 currency codes accepted by the API (lowercase on the wire).
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Currency"]


class Currency(str, Enum):
    AUD = "aud"
    BRL = "brl"
    CAD = "cad"
    CHF = "chf"
    DKK = "dkk"
    EUR = "eur"
    GBP = "gbp"
    HKD = "hkd"
    JPY = "jpy"
    MXN = "mxn"
    NOK = "nok"
    NZD = "nzd"
    SEK = "sek"
    SGD = "sgd"
    USD = "usd"
