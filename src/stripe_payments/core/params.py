"""
Request parameters and their form encoding.

Every optional parameter defaults to :data:`UNSET` and is left out of the
request until the caller assigns it. This keeps "leave unchanged" apart from
"set to an empty/false value" on update calls::

    >>> encode_params(ListParams(limit=0))
    [('limit', '0')]
    >>> encode_params(ListParams())
    []

Nested parameter objects are flattened with bracketed keys
(``legal_entity[dob][day]=1``), lists as ``key[]`` and mappings as
``key[name]``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar, Union

__all__ = [
    "UNSET",
    "Filters",
    "ListParams",
    "Params",
    "Settable",
    "encode_params",
    "is_set",
    "local_param",
    "param",
]

T = TypeVar("T")


class _Unset:
    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Any) -> "_Unset":
        return self


UNSET = _Unset()

Settable = Union[T, _Unset]


def is_set(value: Any) -> bool:
    """``None`` counts as unset, falsy values such as ``0`` or ``""`` do not."""
    return value is not UNSET and value is not None


def param(wire_name: Optional[str] = None) -> Any:
    """Declare an optional parameter, optionally sent under another key."""
    metadata = {"wire_name": wire_name} if wire_name else {}
    return field(default=UNSET, metadata=metadata)


def local_param() -> Any:
    """Declare a value the client consumes itself (URL segments, tokens), never sent as a field."""
    return field(default=None, metadata={"encode": False})


class Filters:
    """
    Ordered (key, op, value) triples appended to the encoded form.

    ``add_filter("created", "gt", "1437578361")`` is sent as
    ``created[gt]=1437578361``; an empty ``op`` sends ``key=value``.
    """

    def __init__(self, triples: Iterable[Tuple[str, str, str]] = ()) -> None:
        self._triples: List[Tuple[str, str, str]] = list(triples)

    def add_filter(self, key: str, op: str, value: Any) -> "Filters":
        self._triples.append((key, op or "", _stringify(value)))
        return self

    def copy(self) -> "Filters":
        return Filters(self._triples)

    def encode(self) -> List[Tuple[str, str]]:
        return [
            (f"{key}[{op}]" if op else key, value)
            for key, op, value in self._triples
        ]

    def __iter__(self) -> Iterator[Tuple[str, str, str]]:
        return iter(self._triples)

    def __len__(self) -> int:
        return len(self._triples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filters):
            return NotImplemented
        return self._triples == other._triples

    def __repr__(self) -> str:
        return f"Filters({self._triples!r})"


@dataclass
class Params:
    """Fields shared by every request."""

    metadata: Settable[Mapping[str, str]] = param()
    expand: Settable[List[str]] = param()
    idempotency_key: Optional[str] = local_param()
    filters: Filters = field(default_factory=Filters, metadata={"encode": False})


@dataclass
class ListParams(Params):
    """
    Pagination controls for list endpoints.

    ``starting_after`` pages forward and ``ending_before`` pages backward;
    only one of them may be set. ``single`` asks for exactly one page.
    """

    limit: Settable[int] = param()
    starting_after: Settable[str] = param()
    ending_before: Settable[str] = param()
    single: bool = field(default=False, metadata={"encode": False})

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if is_set(self.starting_after) and is_set(self.ending_before):
            raise ValueError("starting_after and ending_before are mutually exclusive")

    @property
    def backward(self) -> bool:
        return is_set(self.ending_before)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _stringify(value.value)
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise TypeError(f"Cannot encode parameter value of type {type(value).__name__}")


def _compose(prefix: Optional[str], name: str) -> str:
    return name if prefix is None else f"{prefix}[{name}]"


def _encode_value(pairs: List[Tuple[str, str]], key: str, value: Any) -> None:
    if not is_set(value):
        return
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        _encode_object(pairs, key, value)
    elif isinstance(value, Mapping):
        if not value:
            pairs.append((key, ""))
        for name, item in value.items():
            _encode_value(pairs, f"{key}[{name}]", item)
    elif isinstance(value, (list, tuple)):
        if not value:
            pairs.append((key, ""))
        for index, item in enumerate(value):
            if dataclasses.is_dataclass(item):
                _encode_object(pairs, f"{key}[{index}]", item)
            else:
                _encode_value(pairs, f"{key}[]", item)
    else:
        pairs.append((key, _stringify(value)))


def _encode_object(
    pairs: List[Tuple[str, str]],
    prefix: Optional[str],
    obj: Any,
    only: Optional[Iterable[str]] = None,
    exclude: Iterable[str] = (),
) -> None:
    selected = set(only) if only is not None else None
    skipped = set(exclude)
    for item in dataclasses.fields(obj):
        if item.metadata.get("encode", True) is False:
            continue
        if item.name in skipped or (selected is not None and item.name not in selected):
            continue
        name = item.metadata.get("wire_name") or item.name
        _encode_value(pairs, _compose(prefix, name), getattr(obj, item.name))


def encode_params(
    params: Any,
    *,
    prefix: Optional[str] = None,
    only: Optional[Iterable[str]] = None,
    exclude: Iterable[str] = (),
) -> List[Tuple[str, str]]:
    """
    Flatten ``params`` into ordered form pairs.

    ``prefix`` nests every field under that key; ``only``/``exclude`` restrict
    the fields by attribute name. Filters are appended after the structured
    fields, and only for top-level encodings.
    """
    if params is None:
        return []
    if isinstance(params, ListParams):
        params.validate()

    pairs: List[Tuple[str, str]] = []
    _encode_object(pairs, prefix, params, only=only, exclude=exclude)

    filters = getattr(params, "filters", None)
    if prefix is None and filters:
        pairs.extend(filters.encode())
    return pairs
