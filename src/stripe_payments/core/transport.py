"""
HTTP transport for the REST API.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from .config import ClientConfig
from .errors import DecodeError, TransportError, error_from_response

__all__ = ["RawResponse", "Transport", "USER_AGENT"]

USER_AGENT = "stripe-payments-python/0.1.0"

_BODY_METHODS = ("POST",)


@dataclass(frozen=True)
class RawResponse:
    body: bytes
    status_code: int
    request_id: Optional[str] = None


def _decode_body(raw: RawResponse) -> Optional[Any]:
    if not raw.body:
        return None
    return json.loads(raw.body.decode("utf-8"))


class Transport:
    """
    Sends form-encoded requests and returns decoded JSON objects.

    A single :class:`requests.Session` is reused for every call so that
    connections are pooled.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def _headers(self, idempotency_key: Optional[str]) -> Dict[str, str]:
        headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        if self.config.api_version:
            headers["Stripe-Version"] = self.config.api_version
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    def invoke(
        self,
        method: str,
        path: str,
        credential: str,
        encoded_params: Sequence[Tuple[str, str]],
        *,
        idempotency_key: Optional[str] = None,
    ) -> RawResponse:
        """
        Perform one HTTP round-trip.

        ``encoded_params`` become the form body for POST and the query string
        otherwise. Network failures raise :class:`TransportError`; HTTP error
        statuses are returned untouched.
        """
        method = method.upper()
        pairs: List[Tuple[str, str]] = list(encoded_params)
        url = self.config.url_for(path)
        logging.info("Sending %s request to %s", method, path)

        try:
            response = self.session.request(
                method,
                url,
                params=None if method in _BODY_METHODS else pairs or None,
                data=pairs if method in _BODY_METHODS else None,
                headers=self._headers(idempotency_key),
                auth=(credential, ""),
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        return RawResponse(
            body=response.content,
            status_code=response.status_code,
            request_id=response.headers.get("Request-Id"),
        )

    def request(
        self,
        method: str,
        path: str,
        encoded_params: Sequence[Tuple[str, str]] = (),
        *,
        idempotency_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        raw = self.invoke(
            method,
            path,
            self.config.api_key,
            encoded_params,
            idempotency_key=idempotency_key,
        )

        try:
            payload = _decode_body(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            if raw.status_code >= 400:
                raise error_from_response(
                    raw.status_code, None, request_id=raw.request_id
                ) from exc
            raise DecodeError(
                f"Failed to parse JSON from {path}",
                body=raw.body.decode("utf-8", errors="replace"),
            ) from exc

        if raw.status_code >= 400:
            error = error_from_response(
                raw.status_code, payload, request_id=raw.request_id
            )
            logging.warning(
                "%s %s responded with %s (%s)",
                method.upper(),
                path,
                raw.status_code,
                error.error_type or "unknown error",
            )
            raise error

        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a JSON object from {path}, got {type(payload).__name__}")
        return payload
