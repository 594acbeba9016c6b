"""
Request plumbing shared by every resource client.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, ClassVar, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar
from urllib.parse import quote

from .errors import DecodeError
from .iterator import ListIterator
from .models import DeletedResource, Page
from .params import ListParams, Params, encode_params, is_set
from .transport import Transport

__all__ = ["CollectionClient", "OwnedClient", "ResourceClient", "owner_form"]

T = TypeVar("T")

Form = List[Tuple[str, str]]


def owner_form(
    params: Params,
    source_key: str,
    object_name: Optional[str],
    *,
    token: Any,
    top_level: Sequence[str],
) -> Form:
    """
    Form for attaching a card or bank account to its owner.

    The payment details go under ``source_key`` (``external_account``,
    ``source``, ``card`` ...), or ``source_key`` carries a token id instead.
    Fields named in ``top_level`` stay outside the nested object.
    """
    if is_set(token):
        form: Form = [(source_key, str(token))]
    else:
        form = encode_params(params, prefix=source_key, exclude=top_level)
        if object_name:
            form.insert(0, (f"{source_key}[object]", object_name))
    form.extend(encode_params(params, only=top_level))
    return form


class ResourceClient(Generic[T]):
    """Decode and dispatch helpers; subclasses decide the paths."""

    decoder: ClassVar[Callable[[Dict[str, Any]], Any]]
    name: ClassVar[str] = "resource"

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _decode(self, payload: Dict[str, Any]) -> T:
        try:
            return type(self).decoder(payload)
        except DecodeError:
            raise
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DecodeError(f"Malformed {self.name} payload: {exc}") from exc

    @staticmethod
    def _join(base: str, resource_id: str) -> str:
        if not resource_id:
            raise ValueError("A resource id is required")
        return f"{base}/{quote(resource_id, safe='')}"

    def _post(self, path: str, form: Form, params: Optional[Params] = None) -> T:
        idempotency_key = params.idempotency_key if params is not None else None
        payload = self._transport.request("POST", path, form, idempotency_key=idempotency_key)
        return self._decode(payload)

    def _get(self, path: str, params: Optional[Params] = None) -> T:
        payload = self._transport.request("GET", path, encode_params(params))
        return self._decode(payload)

    def _delete(self, path: str) -> DeletedResource:
        payload = self._transport.request("DELETE", path)
        deleted = DeletedResource.from_dict(payload)
        logging.info("Deleted %s %s", self.name, deleted.id)
        return deleted

    def _fetch_page(self, path: str, params: ListParams) -> Page[T]:
        payload = self._transport.request("GET", path, encode_params(params))
        return Page.from_response(payload, self._decode)

    def _list(self, path: str, params: Optional[ListParams]) -> ListIterator[T]:
        return ListIterator(params, lambda page_params: self._fetch_page(path, page_params))


class CollectionClient(ResourceClient[T]):
    """Create/get/update/delete/list on a top-level collection path."""

    collection_path: ClassVar[str]

    def instance_path(self, resource_id: str) -> str:
        return self._join(self.collection_path, resource_id)

    def create(self, params: Optional[Params] = None) -> T:
        return self._post(self.collection_path, encode_params(params), params)

    def get(self, resource_id: str, params: Optional[Params] = None) -> T:
        return self._get(self.instance_path(resource_id), params)

    def update(self, resource_id: str, params: Optional[Params] = None) -> T:
        return self._post(self.instance_path(resource_id), encode_params(params), params)

    def delete(self, resource_id: str) -> DeletedResource:
        return self._delete(self.instance_path(resource_id))

    def list(self, params: Optional[ListParams] = None) -> ListIterator[T]:
        return self._list(self.collection_path, params)


class OwnedClient(ResourceClient[T]):
    """
    Resources that live under an owning object, such as the cards of a
    customer or the external bank accounts of a connected account.

    ``owners`` lists ``(attribute, path template, form key, object name)``;
    the first attribute set on the params picks the owner.
    """

    owners: ClassVar[Tuple[Tuple[str, str, str, Optional[str]], ...]]
    top_level: ClassVar[Tuple[str, ...]] = ("metadata", "expand")

    def _owner(self, params: Any) -> Tuple[str, str, str, Optional[str]]:
        for attribute, template, source_key, object_name in self.owners:
            owner_id = getattr(params, attribute, None) if params is not None else None
            if owner_id:
                path = template.format(quote(owner_id, safe=""))
                return attribute, path, source_key, object_name
        choices = ", ".join(owner[0] for owner in self.owners)
        raise ValueError(f"{self.name} requests need one of: {choices}")

    def create(self, params: Params) -> T:
        _, path, source_key, object_name = self._owner(params)
        form = owner_form(
            params,
            source_key,
            object_name,
            token=getattr(params, "token", None),
            top_level=self.top_level,
        )
        return self._post(path, form, params)

    def get(self, resource_id: str, params: Params) -> T:
        _, path, _, _ = self._owner(params)
        return self._get(self._join(path, resource_id), params)

    def update(self, resource_id: str, params: Params) -> T:
        _, path, _, _ = self._owner(params)
        return self._post(self._join(path, resource_id), encode_params(params), params)

    def delete(self, resource_id: str, params: Params) -> DeletedResource:
        _, path, _, _ = self._owner(params)
        return self._delete(self._join(path, resource_id))

    def list(self, params: ListParams) -> ListIterator[T]:
        attribute, path, _, object_name = self._owner(params)
        if attribute == "account" and object_name:
            # external_accounts mixes cards and bank accounts
            params = dataclasses.replace(
                params,
                filters=params.filters.copy().add_filter("object", "", object_name),
            )
        return self._list(path, params)
