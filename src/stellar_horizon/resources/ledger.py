from __future__ import annotations

from datetime import datetime

from pydantic import Field

from stellar_horizon.resources.common import HorizonModel, Links


class Ledger(HorizonModel):
    """A closed ledger."""

    links: Links | None = Field(None, alias="_links")
    id: str
    paging_token: str
    hash: str
    previous_hash: str | None = Field(None, alias="prev_hash")
    sequence: int
    successful_transaction_count: int
    failed_transaction_count: int | None = None
    operation_count: int
    transaction_set_operation_count: int | None = Field(
        None, alias="tx_set_operation_count"
    )
    closed_at: datetime
    total_coins: str
    fee_pool: str
    base_fee_in_stroops: int
    base_reserve_in_stroops: int
    max_transaction_set_size: int = Field(alias="max_tx_set_size")
    protocol_version: int
    header_xdr: str
