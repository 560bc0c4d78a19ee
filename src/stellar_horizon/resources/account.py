from __future__ import annotations

from datetime import datetime

from pydantic import Field

from stellar_horizon.resources.common import HorizonModel, Links


class AccountThresholds(HorizonModel):
    low_threshold: int
    medium_threshold: int = Field(alias="med_threshold")
    high_threshold: int


class AccountFlags(HorizonModel):
    auth_required: bool
    auth_revocable: bool
    auth_immutable: bool
    auth_clawback_enabled: bool = False


class Balance(HorizonModel):
    balance: str
    asset_type: str
    asset_code: str | None = None
    asset_issuer: str | None = None
    liquidity_pool_id: str | None = None
    limit: str | None = None
    buying_liabilities: str | None = None
    selling_liabilities: str | None = None
    sponsor: str | None = None
    last_modified_ledger: int | None = None
    is_authorized: bool | None = None
    is_authorized_to_maintain_liabilities: bool | None = None
    is_clawback_enabled: bool | None = None


class Signer(HorizonModel):
    weight: int
    key: str
    type: str
    sponsor: str | None = None


class Account(HorizonModel):
    """An account and its balances, signers and data entries."""

    links: Links | None = Field(None, alias="_links")
    id: str
    account_id: str
    sequence: str
    subentry_count: int
    inflation_destination: str | None = None
    home_domain: str | None = None
    last_modified_ledger: int
    last_modified_time: datetime | None = None
    thresholds: AccountThresholds
    flags: AccountFlags
    balances: list[Balance]
    signers: list[Signer]
    data: dict[str, str] = Field(default_factory=dict)
    num_sponsoring: int = 0
    num_sponsored: int = 0
    sponsor: str | None = None
    paging_token: str
