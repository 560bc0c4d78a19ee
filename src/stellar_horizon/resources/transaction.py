from __future__ import annotations

from datetime import datetime

from pydantic import Field

from stellar_horizon.resources.common import HorizonModel, Links, StrInt


class FeeBumpTransaction(HorizonModel):
    hash: str
    signatures: list[str]


class InnerTransaction(HorizonModel):
    hash: str
    signatures: list[str]
    max_fee: StrInt


class Transaction(HorizonModel):
    """A transaction included in a ledger."""

    links: Links | None = Field(None, alias="_links")
    id: str
    paging_token: str
    successful: bool
    hash: str
    ledger: int
    created_at: datetime
    source_account: str
    account_muxed: str | None = None
    account_muxed_id: str | None = None
    source_account_sequence: str
    fee_account: str
    fee_account_muxed: str | None = None
    fee_account_muxed_id: str | None = None
    fee_charged: StrInt
    max_fee: StrInt
    operation_count: int
    envelope_xdr: str
    result_xdr: str
    result_meta_xdr: str | None = None
    fee_meta_xdr: str | None = None
    memo_type: str
    memo_bytes: str | None = None
    memo: str | None = None
    signatures: list[str]
    valid_after: str | None = None
    valid_before: str | None = None
    fee_bump_transaction: FeeBumpTransaction | None = None
    inner_transaction: InnerTransaction | None = None
