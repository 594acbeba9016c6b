"""Tests for the ``stripe-payments`` command line."""

from __future__ import annotations

import argparse
import io
import json
from pathlib import Path
from typing import List

import pytest

from stripe_payments.cli import _filter, build_parser, run_cli

from .conftest import TEST_KEY, FakeSession, list_payload


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("STRIPE_SECRET_KEY", "STRIPE_API_BASE", "STRIPE_API_VERSION", "STRIPE_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


def _argv(tmp_path: Path, *command: str) -> List[str]:
    return [
        "--env-file",
        str(tmp_path / "missing.env"),
        "--set",
        f"STRIPE_SECRET_KEY={TEST_KEY}",
        "--set",
        "STRIPE_API_BASE=https://api.example.test",
        *command,
    ]


def _lines(out: io.StringIO) -> List[dict]:
    return [json.loads(line) for line in out.getvalue().splitlines()]


class TestParser:
    def test_filter_syntax(self) -> None:
        assert _filter("created[gt]=1437578361") == ("created", "gt", "1437578361")
        assert _filter("email=a@b.com") == ("email", "", "a@b.com")
        with pytest.raises(argparse.ArgumentTypeError):
            _filter("no-equals-sign")

    def test_cursors_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["list", "accounts", "--starting-after", "a", "--ending-before", "b"])


class TestRunCli:
    def test_account_without_id_shows_own_account(self, tmp_path: Path) -> None:
        session = FakeSession().queue({"id": "acct_self", "email": "owner@example.com"})
        out = io.StringIO()

        assert run_cli(_argv(tmp_path, "account"), out=out, session=session) == 0

        assert _lines(out) == [{"id": "acct_self", "email": "owner@example.com"}]
        assert session.last.url == "https://api.example.test/v1/account"
        assert session.last.auth == (TEST_KEY, "")
        assert session.closed

    def test_list_streams_every_page(self, tmp_path: Path) -> None:
        session = FakeSession()
        session.queue(list_payload([{"id": "rp_1"}, {"id": "rp_2"}], has_more=True))
        session.queue(list_payload([{"id": "rp_3"}], has_more=False))
        out = io.StringIO()

        argv = _argv(tmp_path, "list", "recipients", "--limit", "2", "--filter", "created[gt]=1437578361")
        assert run_cli(argv, out=out, session=session) == 0

        assert [line["id"] for line in _lines(out)] == ["rp_1", "rp_2", "rp_3"]
        assert session.requests[0].params == [("limit", "2"), ("created[gt]", "1437578361")]
        assert session.requests[1].params == [
            ("limit", "2"),
            ("starting_after", "rp_2"),
            ("created[gt]", "1437578361"),
        ]

    def test_single_page(self, tmp_path: Path) -> None:
        session = FakeSession().queue(list_payload([{"id": "btcrcv_1"}], has_more=True))
        out = io.StringIO()

        assert run_cli(_argv(tmp_path, "list", "bitcoin-receivers", "--single"), out=out, session=session) == 0
        assert len(session.requests) == 1

    def test_bitcoin_transactions_need_receiver(self, tmp_path: Path) -> None:
        session = FakeSession()
        assert run_cli(_argv(tmp_path, "list", "bitcoin-transactions"), out=io.StringIO(), session=session) == 1
        assert session.requests == []

    def test_bitcoin_transactions(self, tmp_path: Path) -> None:
        session = FakeSession().queue(list_payload([{"id": "btctxn_1", "amount": 1000}]))
        out = io.StringIO()

        argv = _argv(tmp_path, "list", "bitcoin-transactions", "--receiver", "btcrcv_1")
        assert run_cli(argv, out=out, session=session) == 0
        assert session.last.path == "/v1/bitcoin/receivers/btcrcv_1/transactions"
        assert _lines(out)[0]["amount"] == 1000

    def test_failed_page_returns_error_status(self, tmp_path: Path) -> None:
        session = FakeSession()
        session.queue(list_payload([{"id": "acct_1"}], has_more=True))
        session.queue({"error": {"message": "boom"}}, status_code=500)
        out = io.StringIO()

        assert run_cli(_argv(tmp_path, "list", "accounts"), out=out, session=session) == 1
        assert [line["id"] for line in _lines(out)] == ["acct_1"]

    def test_missing_key_is_a_configuration_error(self, tmp_path: Path) -> None:
        session = FakeSession()
        argv = ["--env-file", str(tmp_path / "missing.env"), "account"]
        assert run_cli(argv, out=io.StringIO(), session=session) == 1
        assert session.requests == []

    def test_not_found_returns_error_status(self, tmp_path: Path) -> None:
        session = FakeSession().queue({"error": {"message": "No such account"}}, status_code=404)
        assert run_cli(_argv(tmp_path, "account", "acct_x"), out=io.StringIO(), session=session) == 1
