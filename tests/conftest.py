"""Shared test fixtures: a scripted stand-in for ``requests.Session``."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import urlparse

import pytest

from stripe_payments import ClientConfig, StripeClient

TEST_KEY = "sk_test_123456789"


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        *,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.status_code = status_code
        if body is None:
            body = json.dumps(payload).encode("utf-8") if payload is not None else b""
        self.content = body
        self.headers = headers or {}


@dataclass
class RecordedRequest:
    method: str
    url: str
    params: Optional[List[Tuple[str, str]]]
    data: Optional[List[Tuple[str, str]]]
    headers: Dict[str, str]
    auth: Tuple[str, str]
    timeout: float

    @property
    def path(self) -> str:
        return urlparse(self.url).path

    @property
    def pairs(self) -> List[Tuple[str, str]]:
        return list(self.data or self.params or [])

    @property
    def form(self) -> Dict[str, str]:
        return dict(self.pairs)


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self) -> None:
        self.requests: List[RecordedRequest] = []
        self._responses: Deque[Union[FakeResponse, Exception]] = deque()
        self.closed = False

    def queue(
        self,
        payload: Any = None,
        *,
        status_code: int = 200,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> "FakeSession":
        self._responses.append(FakeResponse(status_code, payload, body=body, headers=headers))
        return self

    def queue_exception(self, exc: Exception) -> "FakeSession":
        self._responses.append(exc)
        return self

    def request(
        self,
        method: str,
        url: str,
        params: Any = None,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Any = None,
        timeout: Any = None,
    ) -> FakeResponse:
        self.requests.append(
            RecordedRequest(
                method=method,
                url=url,
                params=list(params) if params is not None else None,
                data=list(data) if data is not None else None,
                headers=dict(headers or {}),
                auth=auth,
                timeout=timeout,
            )
        )
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


def list_payload(
    items: Sequence[Dict[str, Any]],
    *,
    has_more: bool = False,
    url: str = "/v1/things",
    total_count: Optional[int] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "object": "list",
        "data": list(items),
        "has_more": has_more,
        "url": url,
    }
    if total_count is not None:
        payload["total_count"] = total_count
    return payload


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key=TEST_KEY, api_base="https://api.example.test", timeout=5.0)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(config: ClientConfig, session: FakeSession) -> StripeClient:
    return StripeClient(config, session=session)
