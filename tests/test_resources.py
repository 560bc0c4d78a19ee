"""Tests for resource models."""

from __future__ import annotations

import json

import pytest
from pydantic import TypeAdapter

from conftest import LEDGER
from stellar_horizon import ResourceDecodeError
from stellar_horizon._parse import decode_resource
from stellar_horizon.resources import (
    AccountCreditedEffect,
    AnyEffect,
    AnyOperation,
    AnyPayment,
    Effect,
    Ledger,
    Offer,
    Operation,
    Page,
    PaymentOperation,
    Trade,
)

ACCOUNT = "GAAZI4TCR3TY5OJHCTJC2A4QSY6CJWJH5IAJTGKIN2ER7LBNVKOCCWN7"

OPERATION_BASE = {
    "id": "12884905985",
    "paging_token": "12884905985",
    "transaction_successful": True,
    "source_account": ACCOUNT,
    "created_at": "2023-01-01T00:00:00Z",
    "transaction_hash": "abc",
}

PAYMENT = {
    **OPERATION_BASE,
    "type": "payment",
    "type_i": 1,
    "asset_type": "credit_alphanum4",
    "asset_code": "USD",
    "asset_issuer": ACCOUNT,
    "from": ACCOUNT,
    "to": "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H",
    "amount": "10.0000000",
}

INVOKE_HOST_FUNCTION = {
    **OPERATION_BASE,
    "type": "invoke_host_function",
    "type_i": 24,
    "function": "HostFunctionTypeHostFunctionTypeInvokeContract",
}


class TestLedger:
    def test_parses_horizon_names(self):
        ledger = Ledger.model_validate(LEDGER)
        assert ledger.sequence == 888
        assert ledger.previous_hash == LEDGER["prev_hash"]
        assert ledger.max_transaction_set_size == 500
        assert ledger.links is not None
        assert ledger.links["transactions"].templated is True

    def test_to_dict_uses_horizon_names(self):
        assert Ledger.model_validate(LEDGER).to_dict() == LEDGER

    def test_to_json_parses_back(self):
        ledger = Ledger.model_validate(LEDGER)
        assert Ledger.model_validate_json(ledger.to_json()) == ledger

    def test_unknown_fields_are_kept(self):
        ledger = Ledger.model_validate({**LEDGER, "new_field": 1})
        assert ledger.to_dict()["new_field"] == 1


class TestOperations:
    """Operation records are parsed by their `type`."""

    def test_known_type(self):
        op = TypeAdapter(AnyOperation).validate_python(PAYMENT)
        assert isinstance(op, PaymentOperation)
        assert op.from_ == ACCOUNT
        assert op.asset.canonical() == f"USD:{ACCOUNT}"
        assert op.to_dict()["from"] == ACCOUNT

    def test_unknown_type_falls_back_to_operation(self):
        op = TypeAdapter(AnyOperation).validate_python(INVOKE_HOST_FUNCTION)
        assert type(op) is Operation
        assert op.type == "invoke_host_function"
        assert op.to_dict()["function"] == INVOKE_HOST_FUNCTION["function"]

    def test_payment_page(self):
        page_json = json.dumps(
            {
                "_links": {
                    "self": {"href": "https://h/payments"},
                    "next": {"href": "https://h/payments?cursor=2"},
                    "prev": {"href": "https://h/payments?cursor=1"},
                },
                "_embedded": {"records": [PAYMENT, INVOKE_HOST_FUNCTION]},
            }
        )
        page = decode_resource(TypeAdapter(Page[AnyPayment]), page_json)

        assert [type(r) for r in page.records] == [PaymentOperation, Operation]
        assert page.next_cursor == "12884905985"
        assert page.links is not None
        assert page.links.next.href.endswith("cursor=2")


class TestEffects:
    def test_credited_effect(self):
        effect = TypeAdapter(AnyEffect).validate_python(
            {
                "id": "0000000012884905985-0000000001",
                "paging_token": "12884905985-1",
                "account": ACCOUNT,
                "type": "account_credited",
                "type_i": 2,
                "created_at": "2023-01-01T00:00:00Z",
                "asset_type": "native",
                "amount": "10.0000000",
            }
        )
        assert isinstance(effect, AccountCreditedEffect)
        assert effect.amount == "10.0000000"

    def test_unknown_effect(self):
        effect = TypeAdapter(AnyEffect).validate_python(
            {
                "id": "1",
                "paging_token": "1",
                "account": ACCOUNT,
                "type": "contract_credited",
                "type_i": 96,
                "created_at": "2023-01-01T00:00:00Z",
            }
        )
        assert type(effect) is Effect


class TestStringIntegers:
    """Integers Horizon sends as strings serialize back as strings."""

    def test_offer_id(self):
        offer = Offer.model_validate(
            {
                "id": "165561423",
                "paging_token": "165561423",
                "seller": ACCOUNT,
                "selling": {"asset_type": "native"},
                "buying": {
                    "asset_type": "credit_alphanum4",
                    "asset_code": "USD",
                    "asset_issuer": ACCOUNT,
                },
                "amount": "18.6580032",
                "price_r": {"n": 2, "d": 5},
                "price": "0.4000000",
                "last_modified_ledger": 28893069,
            }
        )
        assert offer.id == 165561423
        assert offer.price_ratio.numerator == 2
        assert offer.to_dict()["id"] == "165561423"
        assert offer.selling.is_native

    def test_trade_price(self):
        trade = Trade.model_validate(
            {
                "id": "107449584845914113-0",
                "paging_token": "107449584845914113-0",
                "ledger_close_time": "2019-07-26T09:17:02Z",
                "trade_type": "orderbook",
                "base_amount": "4433.2000981",
                "base_asset_type": "native",
                "counter_amount": "10.0000000",
                "counter_asset_type": "credit_alphanum4",
                "counter_asset_code": "USD",
                "counter_asset_issuer": ACCOUNT,
                "base_is_seller": True,
                "price": {"n": "10000000", "d": "4433200098"},
            }
        )
        assert trade.price is not None
        assert trade.price.denominator == 4433200098
        assert trade.to_dict()["price"] == {"n": "10000000", "d": "4433200098"}
        assert trade.base_asset.canonical() == "native"


class TestDecodeResource:
    def test_schema_mismatch(self):
        with pytest.raises(ResourceDecodeError) as exc_info:
            decode_resource(TypeAdapter(Ledger), b'{"sequence": 1}', name="Ledger")
        assert exc_info.value.code == "RESOURCE_DECODE_ERROR"
        assert isinstance(exc_info.value.__cause__, Exception)

    def test_invalid_json(self):
        with pytest.raises(ResourceDecodeError) as exc_info:
            decode_resource(TypeAdapter(Ledger), "{not json")
        assert exc_info.value.payload == "{not json"

    def test_long_payload_is_truncated(self):
        with pytest.raises(ResourceDecodeError) as exc_info:
            decode_resource(TypeAdapter(Ledger), "x" * 500)
        assert len(exc_info.value.payload) == 103
