"""
Exception hierarchy raised by the API client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "DecodeError",
    "NotFoundError",
    "RequestError",
    "StripeError",
    "TransportError",
    "error_from_response",
]


class StripeError(Exception):
    """Base error for every failure surfaced by the client."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class TransportError(StripeError):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""


class DecodeError(StripeError):
    """The response body did not have the expected JSON shape."""

    def __init__(self, message: str, *, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body


class RequestError(StripeError):
    """
    The API answered with a non-2xx status.

    ``error_type``, ``code`` and ``param`` are copied from the ``error``
    object of the response when present.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        request_id: Optional[str] = None,
        raw: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, code=code)
        self.error_type = error_type
        self.param = param
        self.request_id = request_id
        self.raw = raw or {}

    def __str__(self) -> str:
        prefix = f"Request {self.request_id}: " if self.request_id else ""
        return f"{prefix}{self.message} (status {self.status_code})"


class NotFoundError(RequestError):
    """The requested resource does not exist (HTTP 404)."""


def error_from_response(
    status_code: int,
    payload: Optional[Dict[str, Any]],
    *,
    request_id: Optional[str] = None,
) -> RequestError:
    """
    Build the :class:`RequestError` matching an error response.

    ``payload`` is the decoded body or ``None`` when it was not JSON.
    """
    details: Dict[str, Any] = {}
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        details = payload["error"]

    message = details.get("message") or f"API responded with status {status_code}"
    error_cls = NotFoundError if status_code == 404 else RequestError
    return error_cls(
        message,
        status_code=status_code,
        error_type=details.get("type"),
        code=details.get("code"),
        param=details.get("param"),
        request_id=request_id,
        raw=payload if isinstance(payload, dict) else None,
    )
