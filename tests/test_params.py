"""Tests for parameter presence tracking and form encoding."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from stripe_payments import (
    UNSET,
    AccountParams,
    AddressParams,
    Currency,
    DOBParams,
    ExternalAccountParams,
    Filters,
    LegalEntityParams,
    LegalEntityType,
    ListParams,
    encode_params,
)
from stripe_payments.core.params import Params, Settable, is_set, param

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


class TestPresence:
    def test_unset_is_falsy_singleton(self) -> None:
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET

    def test_is_set(self) -> None:
        assert is_set(0)
        assert is_set("")
        assert is_set(False)
        assert not is_set(UNSET)
        assert not is_set(None)

    def test_empty_params_encode_to_nothing(self) -> None:
        assert encode_params(AccountParams()) == []
        assert encode_params(None) == []

    def test_only_the_set_field_is_encoded(self) -> None:
        assert encode_params(AccountParams(statement_descriptor="Stripe Go")) == [
            ("statement_descriptor", "Stripe Go")
        ]

    def test_explicit_false_is_encoded(self) -> None:
        params = AccountParams(debit_negative_balances=False)
        assert encode_params(params) == [("debit_negative_balances", "false")]

    def test_explicit_zero_and_empty_string_are_encoded(self) -> None:
        params = ListParams(limit=0, starting_after="")
        assert encode_params(params) == [("limit", "0"), ("starting_after", "")]

    def test_nested_update_only_carries_the_set_leaf(self) -> None:
        params = AccountParams(
            legal_entity=LegalEntityParams(address=AddressParams(line1="321, rue Notre-Dame Est"))
        )
        assert encode_params(params) == [
            ("legal_entity[address][line1]", "321, rue Notre-Dame Est"),
        ]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncoding:
    def test_nested_objects_use_bracketed_keys(self) -> None:
        params = AccountParams(
            managed=True,
            country="CA",
            legal_entity=LegalEntityParams(
                type=LegalEntityType.INDIVIDUAL,
                business_name="Stripe Go",
                dob=DOBParams(day=1, month=2, year=1990),
            ),
        )
        assert encode_params(params) == [
            ("managed", "true"),
            ("country", "CA"),
            ("legal_entity[type]", "individual"),
            ("legal_entity[business_name]", "Stripe Go"),
            ("legal_entity[dob][day]", "1"),
            ("legal_entity[dob][month]", "2"),
            ("legal_entity[dob][year]", "1990"),
        ]

    def test_external_account_as_details(self) -> None:
        params = AccountParams(
            external_account=ExternalAccountParams(
                country="US",
                currency=Currency.USD,
                routing_number="110000000",
                account_number="000123456789",
            )
        )
        assert encode_params(params) == [
            ("external_account[object]", "bank_account"),
            ("external_account[country]", "US"),
            ("external_account[currency]", "usd"),
            ("external_account[routing_number]", "110000000"),
            ("external_account[account_number]", "000123456789"),
        ]

    def test_external_account_as_token(self) -> None:
        params = AccountParams(external_account="btok_123")
        assert encode_params(params) == [("external_account", "btok_123")]

    def test_metadata_and_expand(self) -> None:
        params = AccountParams(metadata={"order": "42"}, expand=["legal_entity", "verification"])
        assert encode_params(params) == [
            ("metadata[order]", "42"),
            ("expand[]", "legal_entity"),
            ("expand[]", "verification"),
        ]

    def test_empty_mapping_clears(self) -> None:
        assert encode_params(AccountParams(metadata={})) == [("metadata", "")]

    def test_wire_name(self) -> None:
        @dataclass
        class RenamedParams(Params):
            description: Settable[str] = param(wire_name="desc")

        assert encode_params(RenamedParams(description="hello")) == [("desc", "hello")]

    def test_unsupported_value_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            encode_params(AccountParams(country=object()))

    def test_prefix_only_and_exclude(self) -> None:
        params = AccountParams(country="US", email="a@b.com", metadata={"k": "v"})
        assert encode_params(params, prefix="acct", exclude=("metadata",)) == [
            ("acct[country]", "US"),
            ("acct[email]", "a@b.com"),
        ]
        assert encode_params(params, only=("metadata",)) == [("metadata[k]", "v")]

    def test_local_fields_are_never_encoded(self) -> None:
        params = ListParams(single=True, idempotency_key="abc")
        assert encode_params(params) == []


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestFilters:
    def test_filters_follow_structured_fields_in_order(self) -> None:
        params = ListParams(limit=3)
        params.filters.add_filter("created", "gt", 1437578361)
        params.filters.add_filter("email", "", "foo@bar.com")
        params.filters.add_filter("created", "lte", "1437578999")
        assert encode_params(params) == [
            ("limit", "3"),
            ("created[gt]", "1437578361"),
            ("email", "foo@bar.com"),
            ("created[lte]", "1437578999"),
        ]

    def test_filters_skipped_for_nested_encodings(self) -> None:
        params = ListParams(limit=3, filters=Filters([("a", "", "b")]))
        assert encode_params(params, prefix="outer") == [("outer[limit]", "3")]

    def test_copy_is_independent(self) -> None:
        original = Filters([("a", "", "1")])
        duplicate = original.copy().add_filter("b", "", "2")
        assert len(original) == 1
        assert list(duplicate) == [("a", "", "1"), ("b", "", "2")]


class TestListParams:
    def test_cursors_are_mutually_exclusive(self) -> None:
        with pytest.raises(ValueError, match="mutually exclusive"):
            ListParams(starting_after="a", ending_before="b")

    def test_encoding_revalidates(self) -> None:
        params = ListParams(starting_after="a")
        params.ending_before = "b"
        with pytest.raises(ValueError):
            encode_params(params)

    def test_backward(self) -> None:
        assert ListParams(ending_before="x").backward is True
        assert ListParams(starting_after="x").backward is False
