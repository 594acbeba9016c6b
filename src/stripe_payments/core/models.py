"""
Decoding helpers and the models shared by every resource.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, Tuple, Type, TypeVar

from .errors import DecodeError

__all__ = [
    "DeletedResource",
    "ListMeta",
    "Page",
    "enum_or_none",
    "expandable",
    "optional_object",
    "require_id",
]

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def require_id(payload: Dict[str, Any], kind: str) -> str:
    value = payload.get("id")
    if not isinstance(value, str) or not value:
        raise DecodeError(f"{kind} payload is missing its id")
    return value


def optional_object(
    payload: Dict[str, Any],
    key: str,
    decode: Callable[[Dict[str, Any]], T],
) -> Optional[T]:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise DecodeError(f"Expected '{key}' to be an object")
    return decode(value)


def enum_or_none(enum_cls: Type[E], value: Any) -> Optional[E]:
    """
    Decode an enum value without failing on values this client does not know.

    Unrecognised values map to the enum's ``UNKNOWN`` member when it has one
    and to ``None`` otherwise; the original string stays in ``raw``.
    """
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        logging.debug("Unrecognised %s value %r", enum_cls.__name__, value)
        return getattr(enum_cls, "UNKNOWN", None)


def expandable(
    value: Any,
    decode: Callable[[Dict[str, Any]], T],
    from_id: Callable[[str], T],
) -> Optional[T]:
    """Decode a field the API returns either as an id or as an expanded object."""
    if value is None:
        return None
    if isinstance(value, str):
        return from_id(value)
    if isinstance(value, dict):
        return decode(value)
    raise DecodeError(f"Cannot decode expandable value of type {type(value).__name__}")


@dataclass(frozen=True)
class ListMeta:
    has_more: bool
    total_count: Optional[int] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fetched batch of list results."""

    data: Tuple[T, ...]
    meta: ListMeta
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_response(
        cls,
        payload: Dict[str, Any],
        decode: Callable[[Dict[str, Any]], T],
    ) -> "Page[T]":
        items = payload.get("data")
        if not isinstance(items, list):
            raise DecodeError("List response is missing its 'data' array")
        if any(not isinstance(item, dict) for item in items):
            raise DecodeError("List response contains a non-object element")

        has_more = payload.get("has_more", False)
        if not isinstance(has_more, bool):
            raise DecodeError(f"List response has a non-boolean 'has_more': {has_more!r}")

        total_count = payload.get("total_count")
        if total_count is not None and (isinstance(total_count, bool) or not isinstance(total_count, int)):
            raise DecodeError(f"List response has a non-integer 'total_count': {total_count!r}")

        meta = ListMeta(
            has_more=has_more,
            total_count=total_count,
            url=payload.get("url"),
        )
        return cls(
            data=tuple(decode(item) for item in items),
            meta=meta,
            raw=payload,
        )


@dataclass(frozen=True)
class DeletedResource:
    id: str
    deleted: bool
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DeletedResource":
        return cls(
            id=require_id(payload, "Deleted object"),
            deleted=bool(payload.get("deleted", False)),
            raw=payload,
        )
